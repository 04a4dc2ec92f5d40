"""
Generation config builder and runtime settings.

build_generation_config() turns (template, form values, theme) into the
immutable GenerationConfig the assembler consumes. App name, short name and
description are derived from the first non-empty field in a fixed priority
list, so every template yields a sensible manifest even with an empty form.

Settings are read from the environment (a .env file is loaded by the CLI):
    PWAGEN_OUTPUT_DIR     default archive directory      (default: ./outputs)
    PWAGEN_MAX_UPLOAD_MB  upload size limit in MiB       (default: 10)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .assets import MAX_UPLOAD_BYTES
from .models import FormValues, GenerationConfig, TemplateDescriptor, ThemeOptions

DEFAULT_APP_NAME = "My PWA"
DEFAULT_SHORT_NAME = "PWA"
DEFAULT_DESCRIPTION = "A Progressive Web App"
SHORT_NAME_MAX = 12

# Field ids that can name the app, in priority order
NAME_FIELDS: tuple[str, ...] = (
    "businessName", "name", "restaurantName", "eventName",
    "storeName", "blogTitle", "productName", "organizationName",
)

# Field ids that can describe the app, in priority order
DESCRIPTION_FIELDS: tuple[str, ...] = (
    "tagline", "bio", "description",
    "storeDescription", "blogSubtitle", "subheadline", "mission",
)


def _first_text(values: FormValues, keys: tuple[str, ...]) -> str:
    for key in keys:
        value = values.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


def build_generation_config(
    template: TemplateDescriptor,
    form_values: FormValues,
    theme: Optional[ThemeOptions] = None,
) -> GenerationConfig:
    theme = theme or ThemeOptions()
    name = _first_text(form_values, NAME_FIELDS)
    return GenerationConfig(
        template_id=template.id,
        app_name=name or DEFAULT_APP_NAME,
        short_name=(name or DEFAULT_SHORT_NAME)[:SHORT_NAME_MAX],
        description=_first_text(form_values, DESCRIPTION_FIELDS) or DEFAULT_DESCRIPTION,
        theme_color=theme.primary_color,
        background_color=theme.background_color,
        icon="/icon-192x192.png",
        custom_data=form_values,
        theme=theme,
        icon_field=template.icon_field,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Runtime settings
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Settings:
    output_dir: Path = Path("outputs")
    max_upload_bytes: int = MAX_UPLOAD_BYTES

    @classmethod
    def from_env(cls) -> "Settings":
        output_dir = os.environ.get("PWAGEN_OUTPUT_DIR", "").strip() or "outputs"
        max_mb = os.environ.get("PWAGEN_MAX_UPLOAD_MB", "").strip()
        try:
            max_bytes = int(float(max_mb) * 1024 * 1024) if max_mb else MAX_UPLOAD_BYTES
        except ValueError:
            raise ValueError(f"PWAGEN_MAX_UPLOAD_MB must be a number, got {max_mb!r}")
        return cls(output_dir=Path(output_dir), max_upload_bytes=max_bytes)
