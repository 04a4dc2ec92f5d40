"""
PWA Generator — Core Models & Types
===================================
Catalog descriptors, form/theme values, generation config and the
generated bundle artifact.

Everything the generator consumes or produces is a frozen dataclass:
a GenerationConfig is built once per "Generate" action and each call
produces a brand new GeneratedBundle.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


# ─────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────

class TemplateCategory(str, Enum):
    BUSINESS = "business"
    PORTFOLIO = "portfolio"
    E_COMMERCE = "e-commerce"
    BLOG = "blog"
    UTILITY = "utility"


class FieldType(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    EMAIL = "email"
    URL = "url"
    TEL = "tel"
    IMAGE = "image"
    SELECT = "select"
    MULTISELECT = "multiselect"


class FileKind(str, Enum):
    HTML = "html"
    CSS = "css"
    JS = "js"
    MANIFEST = "manifest"
    SW = "sw"
    IMAGE = "image"


_SELECT_TYPES = {FieldType.SELECT, FieldType.MULTISELECT}

MEDIA_TYPES: dict[FileKind, str] = {
    FileKind.HTML: "text/html",
    FileKind.CSS: "text/css",
    FileKind.JS: "application/javascript",
    FileKind.MANIFEST: "application/manifest+json",
    FileKind.SW: "application/javascript",
    FileKind.IMAGE: "image/png",
}


# ─────────────────────────────────────────────
# Template catalog descriptors
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class FieldValidation:
    min_length: Optional[int] = None
    max_length: Optional[int] = None


@dataclass(frozen=True)
class FieldDescriptor:
    id: str
    label: str
    type: FieldType
    required: bool = False
    placeholder: str = ""
    validation: Optional[FieldValidation] = None
    options: Optional[tuple[str, ...]] = None

    def __post_init__(self) -> None:
        has_options = self.options is not None
        if has_options != (self.type in _SELECT_TYPES):
            raise ValueError(
                f"Field '{self.id}': options must be set iff type is select/multiselect"
            )


@dataclass(frozen=True)
class TemplateDescriptor:
    """
    A named content/field schema. Drives both the form and the content
    renderer. ``icon_field`` names the image field (if any) whose upload
    becomes the app icon.
    """
    id: str
    name: str
    description: str
    category: TemplateCategory
    fields: tuple[FieldDescriptor, ...]
    features: tuple[str, ...] = ()
    icon_field: Optional[str] = None

    def __post_init__(self) -> None:
        ids = [f.id for f in self.fields]
        dupes = {i for i in ids if ids.count(i) > 1}
        if dupes:
            raise ValueError(f"Template '{self.id}': duplicate field ids {sorted(dupes)}")
        if self.icon_field is not None:
            icon = self.field(self.icon_field)
            if icon is None or icon.type != FieldType.IMAGE:
                raise ValueError(
                    f"Template '{self.id}': icon_field '{self.icon_field}' "
                    "must name an image field"
                )

    def field(self, field_id: str) -> Optional[FieldDescriptor]:
        return next((f for f in self.fields if f.id == field_id), None)


# ─────────────────────────────────────────────
# Image values
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class PendingImage:
    """An upload that has a preview but whose bytes are not read yet."""
    preview_handle: str


@dataclass(frozen=True)
class ImageAsset:
    """A fully read upload. The only image shape the generator consumes."""
    data: bytes = field(repr=False)
    media_type: str
    name: str = ""
    size_bytes: int = 0
    preview_handle: Optional[str] = None

    @property
    def base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    @property
    def data_uri(self) -> str:
        return f"data:{self.media_type};base64,{self.base64}"

    @classmethod
    def from_data_uri(cls, uri: str, name: str = "") -> "ImageAsset":
        header, _, payload = uri.partition(",")
        if not header.startswith("data:") or ";base64" not in header:
            raise ValueError("Not a base64 data URI")
        media_type = header[len("data:"):].split(";", 1)[0]
        data = base64.b64decode(payload)
        return cls(data=data, media_type=media_type, name=name, size_bytes=len(data))


ImageValue = Union[PendingImage, ImageAsset]

# field id -> str | list[str] | ImageValue
FormValues = Mapping[str, Any]


# ─────────────────────────────────────────────
# Theme
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class ThemeOptions:
    primary_color: str = "#2563eb"
    secondary_color: str = "#3b82f6"
    background_color: str = "#ffffff"
    text_color: str = "#1f2937"
    font_family: str = "Inter, sans-serif"
    font_size: str = "16px"
    border_radius: str = "8px"


THEME_PRESETS: dict[str, ThemeOptions] = {
    "modern-blue": ThemeOptions(),
    "vibrant-green": ThemeOptions(
        primary_color="#10b981",
        secondary_color="#34d399",
        background_color="#f9fafb",
        text_color="#111827",
        border_radius="12px",
    ),
    "elegant-purple": ThemeOptions(
        primary_color="#8b5cf6",
        secondary_color="#a78bfa",
        text_color="#374151",
        font_family="Georgia, serif",
        border_radius="6px",
    ),
    "warm-orange": ThemeOptions(
        primary_color="#f59e0b",
        secondary_color="#fbbf24",
        background_color="#fffbeb",
        font_family="Roboto, sans-serif",
        font_size="15px",
        border_radius="10px",
    ),
}


# ─────────────────────────────────────────────
# Generator input / output
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class GenerationConfig:
    template_id: str
    app_name: str
    short_name: str
    description: str
    theme_color: str
    background_color: str
    icon: str = "/icon-192x192.png"
    custom_data: Mapping[str, Any] = field(default_factory=dict)
    theme: ThemeOptions = field(default_factory=ThemeOptions)
    icon_field: Optional[str] = None

    def __post_init__(self) -> None:
        if len(self.short_name) > 12:
            raise ValueError("short_name must be at most 12 characters")
        # Snapshot the form so later edits by the caller cannot leak in
        object.__setattr__(self, "custom_data", MappingProxyType(dict(self.custom_data)))


@dataclass(frozen=True)
class GeneratedFile:
    path: str
    content: str
    kind: FileKind
    data: bytes = field(repr=False)

    @property
    def media_type(self) -> str:
        return MEDIA_TYPES[self.kind]

    @classmethod
    def text(cls, path: str, content: str, kind: FileKind) -> "GeneratedFile":
        return cls(path=path, content=content, kind=kind, data=content.encode("utf-8"))

    @classmethod
    def image(cls, path: str, asset: ImageAsset) -> "GeneratedFile":
        return cls(path=path, content=asset.data_uri, kind=FileKind.IMAGE, data=asset.data)


@dataclass(frozen=True)
class GeneratedBundle:
    id: str
    config: GenerationConfig
    files: tuple[GeneratedFile, ...]
    created_at: datetime

    def __post_init__(self) -> None:
        paths = [f.path for f in self.files]
        if len(paths) != len(set(paths)):
            raise ValueError("Duplicate file paths in bundle")

    @property
    def paths(self) -> list[str]:
        return [f.path for f in self.files]

    def get(self, path: str) -> Optional[GeneratedFile]:
        return next((f for f in self.files if f.path == path), None)
