"""
PWA Generator
=============
Builds installable Progressive Web App bundles from a catalog of content
templates, a filled-in form and a colour theme.

Basic usage:
    from pwagen import GeneratorSession

    session = GeneratorSession()
    session.select_template("business-card")
    session.set_field("businessName", "Acme Corp")
    bundle = session.generate(validate=False)
    archive = session.pack_current()          # zip bytes
    name = session.download_name()            # "business-card-pwa.zip"

Lower-level usage:
    from pwagen import get_template, build_generation_config, assemble, pack

    config = build_generation_config(get_template("blog"), {"blogTitle": "Notes"})
    archive = pack(assemble(config))
"""

from .models import (
    FieldDescriptor, FieldType, FileKind, GeneratedBundle, GeneratedFile,
    GenerationConfig, ImageAsset, PendingImage, TemplateCategory,
    TemplateDescriptor, ThemeOptions, THEME_PRESETS,
)
from .errors import (
    AssemblyFailure, FormValidationError, PackagingFailure, PayloadTooLarge,
    PWAGenError, UnknownTemplateError, UnsupportedMediaType, UploadError,
)
from .catalog import TEMPLATES, find_template, get_template, list_templates
from .assets import UploadedFile, decode_upload, read_upload
from .config import Settings, build_generation_config
from .content import render_content
from .assembler import BundleAssembler, assemble
from .packager import archive_filename, pack, pack_async, unpack
from .session import GeneratorSession

__version__ = "0.1.0"

__all__ = [
    # ── Models ───────────────────────────────────────────────────────────────
    "FieldDescriptor", "FieldType", "FileKind", "GeneratedBundle", "GeneratedFile",
    "GenerationConfig", "ImageAsset", "PendingImage", "TemplateCategory",
    "TemplateDescriptor", "ThemeOptions", "THEME_PRESETS",
    # ── Errors ───────────────────────────────────────────────────────────────
    "AssemblyFailure", "FormValidationError", "PackagingFailure", "PayloadTooLarge",
    "PWAGenError", "UnknownTemplateError", "UnsupportedMediaType", "UploadError",
    # ── Pipeline ─────────────────────────────────────────────────────────────
    "TEMPLATES", "find_template", "get_template", "list_templates",
    "UploadedFile", "decode_upload", "read_upload",
    "Settings", "build_generation_config", "render_content",
    "BundleAssembler", "assemble",
    "archive_filename", "pack", "pack_async", "unpack",
    "GeneratorSession",
]
