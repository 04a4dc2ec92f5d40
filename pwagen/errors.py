"""Exception taxonomy for the generator pipeline."""
from __future__ import annotations


class PWAGenError(Exception):
    """Base class for all generator errors."""


class UploadError(PWAGenError):
    """An upload was rejected by the asset decoder."""


class UnsupportedMediaType(UploadError):
    def __init__(self, media_type: str, name: str = ""):
        self.media_type = media_type
        self.name = name
        super().__init__(f"Please upload an image file (got '{media_type or 'unknown'}')")


class PayloadTooLarge(UploadError):
    def __init__(self, size_bytes: int, limit_bytes: int, name: str = ""):
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes
        self.name = name
        super().__init__(
            f"File size must be less than {limit_bytes // (1024 * 1024)}MB "
            f"(got {size_bytes} bytes)"
        )


class AssemblyFailure(PWAGenError):
    """Bundle assembly failed; no partial bundle is exposed."""


class PackagingFailure(PWAGenError):
    """Archive serialization failed; the bundle itself is still valid."""


class UnknownTemplateError(PWAGenError, KeyError):
    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__(template_id)

    def __str__(self) -> str:
        return f"Unknown template '{self.template_id}'"


class FormValidationError(PWAGenError):
    """One or more form fields failed validation."""

    def __init__(self, errors: dict[str, str]):
        self.errors = dict(errors)
        summary = "; ".join(f"{k}: {v}" for k, v in self.errors.items())
        super().__init__(f"Form validation failed: {summary}")
