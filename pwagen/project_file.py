"""
Project File Loader — load generator inputs from a YAML file
=============================================================
Schema reference (only `template` is required):

    template: portfolio                   # catalog template id
    theme: warm-orange                    # preset name, or a mapping:
    # theme:
    #   primary_color: "#2563eb"
    #   background_color: "#ffffff"
    fields:
      name: Ada Lovelace
      title: Analyst
      skills: [Go, Rust, TypeScript]
    images:
      profileImage: ./ada.png             # relative to this file
    output_dir: ./dist                    # optional: where to write the archive
    unpacked: false                       # optional: also write loose files
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields as dc_fields
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

import yaml

from .catalog import get_template
from .models import FieldType, THEME_PRESETS, ThemeOptions

_THEME_KEYS = {f.name for f in dc_fields(ThemeOptions)}


# ─────────────────────────────────────────────────────────────────────────────
# Public result type
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ProjectFileResult:
    """Everything extracted from a YAML project file."""
    template_id: str
    form_values: dict[str, Any] = field(default_factory=dict)
    image_paths: dict[str, Path] = field(default_factory=dict)
    theme: ThemeOptions = field(default_factory=ThemeOptions)
    output_dir: Optional[str] = None
    unpacked: bool = False


# ─────────────────────────────────────────────────────────────────────────────
# Loader
# ─────────────────────────────────────────────────────────────────────────────

def load_project_file(path: str | Path) -> ProjectFileResult:
    """
    Parse a YAML project file and return a ProjectFileResult.

    Raises
    ------
    FileNotFoundError     file doesn't exist
    ValueError            required fields missing or values invalid
    UnknownTemplateError  template id not in the catalog
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Project file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw: dict[str, Any] = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"'{path}': top level must be a mapping")

    template_id = str(raw.get("template", "")).strip()
    if not template_id:
        raise ValueError(f"'{path}': 'template' field is required")
    template = get_template(template_id)

    # ── Fields ────────────────────────────────────────────────────────────────
    form_values: dict[str, Any] = {}
    for key, value in (raw.get("fields") or {}).items():
        descriptor = template.field(key)
        if descriptor is None:
            raise ValueError(f"'{path}': template '{template_id}' has no field '{key}'")
        if descriptor.type == FieldType.IMAGE:
            raise ValueError(f"'{path}': image field '{key}' belongs under 'images'")
        form_values[key] = _normalise_value(value, descriptor.type)

    # ── Images ────────────────────────────────────────────────────────────────
    image_paths: dict[str, Path] = {}
    for key, rel in (raw.get("images") or {}).items():
        descriptor = template.field(key)
        if descriptor is None or descriptor.type != FieldType.IMAGE:
            raise ValueError(f"'{path}': '{key}' is not an image field of '{template_id}'")
        image_path = Path(str(rel)).expanduser()
        if not image_path.is_absolute():
            image_path = path.parent / image_path
        image_paths[key] = image_path

    output_dir_raw = raw.get("output_dir", None)
    return ProjectFileResult(
        template_id=template_id,
        form_values=form_values,
        image_paths=image_paths,
        theme=_parse_theme(raw.get("theme"), path),
        output_dir=str(output_dir_raw).strip() if output_dir_raw else None,
        unpacked=bool(raw.get("unpacked", False)),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Internal helpers
# ─────────────────────────────────────────────────────────────────────────────

def _normalise_value(value: Any, field_type: FieldType) -> Any:
    """YAML gives us dates and numbers; the form only knows strings and lists."""
    if field_type == FieldType.MULTISELECT:
        if isinstance(value, str):
            return [v.strip() for v in value.split(",") if v.strip()]
        return [str(v) for v in (value or [])]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return "" if value is None else str(value)


def _parse_theme(raw: Any, source_path: Path) -> ThemeOptions:
    if raw is None:
        return ThemeOptions()
    if isinstance(raw, str):
        preset = THEME_PRESETS.get(raw)
        if preset is None:
            raise ValueError(
                f"'{source_path}': unknown theme preset '{raw}'. "
                f"Valid values: {sorted(THEME_PRESETS)}"
            )
        return preset
    if isinstance(raw, dict):
        unknown = set(raw) - _THEME_KEYS
        if unknown:
            raise ValueError(f"'{source_path}': unknown theme keys {sorted(unknown)}")
        return ThemeOptions(**{k: str(v) for k, v in raw.items()})
    raise ValueError(f"'{source_path}': 'theme' must be a preset name or a mapping")
