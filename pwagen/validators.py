"""
Deterministic Validators
========================
Form-field checks run before generation, and structural checks run on a
finished bundle (fixed path set, manifest schema, byte/text agreement,
decodable icons).

The form rules mirror what the wizard enforced: required fields, min/max
length, email shape and absolute URLs.
"""

from __future__ import annotations

import json
import logging
import re
from io import BytesIO
from typing import Any, Optional
from urllib.parse import urlparse

import jsonschema
from PIL import Image, UnidentifiedImageError

from .assembler import BUNDLE_PATHS
from .models import (
    FieldDescriptor,
    FieldType,
    FileKind,
    FormValues,
    GeneratedBundle,
    ImageAsset,
    TemplateDescriptor,
)
from .synthesizers import MANIFEST_PATH

logger = logging.getLogger("pwagen.validators")

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MANIFEST_SCHEMA: dict = {
    "type": "object",
    "required": [
        "name", "short_name", "description", "start_url", "display",
        "background_color", "theme_color", "icons",
    ],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "short_name": {"type": "string", "minLength": 1, "maxLength": 12},
        "description": {"type": "string"},
        "start_url": {"type": "string"},
        "display": {"enum": ["standalone"]},
        "background_color": {"type": "string"},
        "theme_color": {"type": "string"},
        "icons": {
            "type": "array",
            "minItems": 2,
            "maxItems": 2,
            "items": {
                "type": "object",
                "required": ["src", "sizes", "type"],
                "properties": {
                    "src": {"type": "string"},
                    "sizes": {"enum": ["192x192", "512x512"]},
                    "type": {"const": "image/png"},
                },
            },
        },
    },
}


class ValidationResult:
    __slots__ = ("passed", "details", "validator_name")

    def __init__(self, passed: bool, details: str = "", validator_name: str = ""):
        self.passed = passed
        self.details = details
        self.validator_name = validator_name

    def __repr__(self) -> str:
        status = "OK" if self.passed else "FAIL"
        return f"<ValidationResult {self.validator_name} {status}: {self.details}>"


# ─────────────────────────────────────────────────────────────────────────────
# Form fields
# ─────────────────────────────────────────────────────────────────────────────

def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    if isinstance(value, str):
        return value.strip() == ""
    return False


def validate_field(field: FieldDescriptor, value: Any) -> str:
    """Return an error message for ``value``, or '' when it is acceptable."""
    if field.type == FieldType.IMAGE:
        if field.required and not isinstance(value, ImageAsset):
            return f"{field.label} is required"
        return ""

    if field.required and _is_blank(value):
        return f"{field.label} is required"
    if _is_blank(value):
        return ""

    if field.validation and not isinstance(value, (list, tuple)):
        length = len(str(value))
        min_len, max_len = field.validation.min_length, field.validation.max_length
        if min_len and length < min_len:
            return f"{field.label} must be at least {min_len} characters"
        if max_len and length > max_len:
            return f"{field.label} must not exceed {max_len} characters"

    if field.type == FieldType.EMAIL and not _EMAIL_RE.match(str(value)):
        return "Please enter a valid email address"

    if field.type == FieldType.URL:
        parsed = urlparse(str(value))
        if not parsed.scheme or not parsed.netloc:
            return "Please enter a valid URL"

    if field.type == FieldType.MULTISELECT and not isinstance(value, (list, tuple)):
        return f"{field.label} must be a list of options"

    return ""


def validate_form(template: TemplateDescriptor, values: FormValues) -> dict[str, str]:
    """Validate every template field. Returns {field_id: message} for failures."""
    errors: dict[str, str] = {}
    for field in template.fields:
        message = validate_field(field, values.get(field.id))
        if message:
            errors[field.id] = message
    return errors


# ─────────────────────────────────────────────────────────────────────────────
# Generated output
# ─────────────────────────────────────────────────────────────────────────────

def validate_json_schema(output: str, schema: Optional[dict] = None) -> ValidationResult:
    """Validate that output is valid JSON, optionally against a schema."""
    try:
        parsed = json.loads(output)
        if schema:
            jsonschema.validate(instance=parsed, schema=schema)
        return ValidationResult(True, "Valid JSON", "json_schema")
    except json.JSONDecodeError as e:
        return ValidationResult(False, f"Invalid JSON: {e}", "json_schema")
    except jsonschema.ValidationError as e:
        return ValidationResult(False, f"Schema validation failed: {e.message}", "json_schema")


def validate_manifest(output: str) -> ValidationResult:
    result = validate_json_schema(output, MANIFEST_SCHEMA)
    result.validator_name = "manifest"
    return result


def validate_paths(bundle: GeneratedBundle) -> ValidationResult:
    paths = set(bundle.paths)
    if paths == BUNDLE_PATHS and len(bundle.files) == len(BUNDLE_PATHS):
        return ValidationResult(True, "All bundle files present", "paths")
    missing = sorted(BUNDLE_PATHS - paths)
    extra = sorted(paths - BUNDLE_PATHS)
    return ValidationResult(False, f"missing={missing} unexpected={extra}", "paths")


def validate_encodings(bundle: GeneratedBundle) -> ValidationResult:
    for f in bundle.files:
        if f.kind == FileKind.IMAGE:
            try:
                with Image.open(BytesIO(f.data)) as img:
                    img.verify()
            except (UnidentifiedImageError, OSError, SyntaxError) as e:
                return ValidationResult(False, f"{f.path}: undecodable image ({e})", "encodings")
            if ImageAsset.from_data_uri(f.content).data != f.data:
                return ValidationResult(False, f"{f.path}: data URI does not match bytes", "encodings")
        elif f.content.encode("utf-8") != f.data:
            return ValidationResult(False, f"{f.path}: text and bytes differ", "encodings")
    return ValidationResult(True, "Text and binary representations agree", "encodings")


def validate_bundle(bundle: GeneratedBundle) -> list[ValidationResult]:
    """Run every structural check on a bundle."""
    results = [validate_paths(bundle), validate_encodings(bundle)]
    manifest = bundle.get(MANIFEST_PATH)
    if manifest is None:
        results.append(ValidationResult(False, "manifest.json missing", "manifest"))
    else:
        results.append(validate_manifest(manifest.content))

    for r in results:
        if not r.passed:
            logger.warning("Bundle %s failed %s: %s", bundle.id, r.validator_name, r.details)
    return results
