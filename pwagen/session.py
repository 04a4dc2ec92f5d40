"""
GeneratorSession — the wizard state that drives the generator.

Pipeline:
  1. select_template()           -> TemplateDescriptor, empty form
  2. set_field() / attach_upload -> FormValues (uploads via the asset decoder)
  3. set_theme()                 -> ThemeOptions
  4. generate()                  -> GeneratedBundle (appended; last one is current)
  5. pack_current()              -> archive bytes for the current bundle

The session is an explicit object owned by whoever runs the wizard; there
is no module-level state. A failed packaging step leaves the current bundle
in place so it can be packed again without regenerating.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from .assembler import BundleAssembler
from .assets import MAX_UPLOAD_BYTES, PreviewRegistry, UploadedFile, decode_upload, read_upload
from .catalog import get_template
from .config import build_generation_config
from .errors import FormValidationError, PWAGenError
from .models import (
    FieldType,
    GeneratedBundle,
    GenerationConfig,
    ImageAsset,
    PendingImage,
    TemplateDescriptor,
    ThemeOptions,
)
from .packager import archive_filename, pack, pack_async
from .validators import validate_form

logger = logging.getLogger("pwagen.session")


class GeneratorSession:
    """
    Usage:
        session = GeneratorSession()
        session.select_template("portfolio")
        session.set_field("name", "Ada Lovelace")
        bundle = session.generate()
        archive = session.pack_current()
    """

    def __init__(
        self,
        assembler: Optional[BundleAssembler] = None,
        previews: Optional[PreviewRegistry] = None,
        max_upload_bytes: int = MAX_UPLOAD_BYTES,
    ) -> None:
        self._assembler = assembler or BundleAssembler()
        self.previews = previews or PreviewRegistry()
        self.max_upload_bytes = max_upload_bytes
        self.template: Optional[TemplateDescriptor] = None
        self.form_values: dict[str, Any] = {}
        self.theme = ThemeOptions()
        self.bundles: list[GeneratedBundle] = []
        self.error: Optional[str] = None

    # ── Wizard inputs ────────────────────────────────────────────────────────

    def select_template(self, template_id: str) -> TemplateDescriptor:
        template = get_template(template_id)
        self._clear_form()
        self.template = template
        logger.debug("Selected template %s", template.id)
        return template

    def set_field(self, field_id: str, value: Any) -> None:
        old = self.form_values.get(field_id)
        if isinstance(old, (ImageAsset, PendingImage)) and old is not value:
            self.previews.release(old.preview_handle)
        self.form_values[field_id] = value

    def set_theme(self, theme: ThemeOptions) -> None:
        self.theme = theme

    def attach_upload(self, field_id: str, upload: UploadedFile) -> ImageAsset:
        """Decode an upload into ``field_id``. Decoder errors are recorded and re-raised."""
        self._require_image_field(field_id)
        try:
            asset = decode_upload(upload, self.previews, max_bytes=self.max_upload_bytes)
        except PWAGenError as exc:
            self.error = str(exc)
            raise
        self.set_field(field_id, asset)
        self.error = None
        return asset

    async def attach_file(self, field_id: str, path: str | Path) -> ImageAsset:
        upload = await read_upload(path)
        return self.attach_upload(field_id, upload)

    # ── Generation ───────────────────────────────────────────────────────────

    def validate(self) -> dict[str, str]:
        return validate_form(self._require_template(), self.form_values)

    def build_config(self) -> GenerationConfig:
        return build_generation_config(self._require_template(), self.form_values, self.theme)

    def generate(self, validate: bool = True) -> GeneratedBundle:
        """Assemble a new bundle from the current inputs and make it current."""
        self.error = None
        try:
            if validate:
                errors = self.validate()
                if errors:
                    raise FormValidationError(errors)
            bundle = self._assembler.assemble(self.build_config())
        except PWAGenError as exc:
            self.error = str(exc)
            raise
        self.bundles.append(bundle)
        return bundle

    @property
    def current(self) -> Optional[GeneratedBundle]:
        return self.bundles[-1] if self.bundles else None

    def download_name(self) -> str:
        return archive_filename(self._require_template().name)

    def pack_current(self) -> bytes:
        """Pack the current bundle. On PackagingFailure the bundle stays current for a retry."""
        bundle = self._require_bundle()
        try:
            data = pack(bundle)
        except PWAGenError as exc:
            self.error = str(exc)
            raise
        self.error = None
        return data

    async def pack_current_async(self) -> bytes:
        bundle = self._require_bundle()
        try:
            data = await pack_async(bundle)
        except PWAGenError as exc:
            self.error = str(exc)
            raise
        self.error = None
        return data

    def reset(self) -> None:
        self._clear_form()
        self.template = None
        self.error = None

    # ── Internals ────────────────────────────────────────────────────────────

    def _clear_form(self) -> None:
        released = self.previews.release_all()
        if released:
            logger.debug("Released %d previews", released)
        self.form_values = {}

    def _require_template(self) -> TemplateDescriptor:
        if self.template is None:
            raise PWAGenError("No template selected")
        return self.template

    def _require_bundle(self) -> GeneratedBundle:
        if self.current is None:
            raise PWAGenError("No PWA generated yet. Please generate a PWA first.")
        return self.current

    def _require_image_field(self, field_id: str) -> None:
        field = self._require_template().field(field_id)
        if field is None or field.type != FieldType.IMAGE:
            raise PWAGenError(f"'{field_id}' is not an image field of this template")
