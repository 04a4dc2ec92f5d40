"""
Saved-Project State — JSON layout for persisted projects
========================================================
A saved project record embeds the full GenerationConfig and, optionally,
the most recent GeneratedBundle. Dates are written as ISO-8601 strings and
re-hydrated to datetime objects on load.

Serialization: JSON (not pickle) — human-readable and safe to load from
untrusted sources. Image values are stored in the same shape the form
produces: {name, size, type, base64} where base64 is a data URI.

Storage itself (where records live, who owns them) is up to the caller;
this module only defines the record layout.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from .models import (
    FileKind,
    GeneratedBundle,
    GeneratedFile,
    GenerationConfig,
    ImageAsset,
    PendingImage,
    ThemeOptions,
)

logger = logging.getLogger("pwagen.state")


# ─────────────────────────────────────────────
# Form values
# ─────────────────────────────────────────────

def _image_to_dict(img: ImageAsset) -> dict:
    return {
        "name": img.name,
        "size": img.size_bytes,
        "type": img.media_type,
        "base64": img.data_uri,
    }


def form_values_to_dict(values: Mapping[str, Any]) -> dict:
    """Plain-JSON view of form values. Pending images have no bytes and become None."""
    out: dict[str, Any] = {}
    for key, value in values.items():
        if isinstance(value, ImageAsset):
            out[key] = _image_to_dict(value)
        elif isinstance(value, PendingImage):
            out[key] = None
        elif isinstance(value, tuple):
            out[key] = list(value)
        else:
            out[key] = value
    return out


def form_values_from_dict(raw: Mapping[str, Any]) -> dict:
    out: dict[str, Any] = {}
    for key, value in raw.items():
        if isinstance(value, dict) and isinstance(value.get("base64"), str):
            img = ImageAsset.from_data_uri(value["base64"], name=value.get("name", ""))
            if value.get("type"):
                img = ImageAsset(
                    data=img.data,
                    media_type=value["type"],
                    name=img.name,
                    size_bytes=int(value.get("size", img.size_bytes)),
                )
            out[key] = img
        else:
            out[key] = value
    return out


# ─────────────────────────────────────────────
# Theme / config / bundle
# ─────────────────────────────────────────────

def _theme_to_dict(t: ThemeOptions) -> dict:
    return asdict(t)


def _theme_from_dict(d: Mapping[str, Any]) -> ThemeOptions:
    return ThemeOptions(**{k: v for k, v in d.items() if k in ThemeOptions.__dataclass_fields__})


def config_to_dict(c: GenerationConfig) -> dict:
    return {
        "template_id": c.template_id,
        "app_name": c.app_name,
        "short_name": c.short_name,
        "description": c.description,
        "theme_color": c.theme_color,
        "background_color": c.background_color,
        "icon": c.icon,
        "custom_data": form_values_to_dict(c.custom_data),
        "theme": _theme_to_dict(c.theme),
        "icon_field": c.icon_field,
    }


def config_from_dict(d: Mapping[str, Any]) -> GenerationConfig:
    return GenerationConfig(
        template_id=d["template_id"],
        app_name=d["app_name"],
        short_name=d["short_name"],
        description=d["description"],
        theme_color=d["theme_color"],
        background_color=d["background_color"],
        icon=d.get("icon", "/icon-192x192.png"),
        custom_data=form_values_from_dict(d.get("custom_data") or {}),
        theme=_theme_from_dict(d.get("theme") or {}),
        icon_field=d.get("icon_field"),
    )


def _file_to_dict(f: GeneratedFile) -> dict:
    return {"path": f.path, "type": f.kind.value, "content": f.content}


def _file_from_dict(d: Mapping[str, Any]) -> GeneratedFile:
    kind = FileKind(d["type"])
    if kind == FileKind.IMAGE:
        return GeneratedFile.image(d["path"], ImageAsset.from_data_uri(d["content"]))
    return GeneratedFile.text(d["path"], d["content"], kind)


def _dt_to_str(dt: Optional[datetime]) -> Optional[str]:
    return dt.isoformat() if dt is not None else None


def _dt_from_str(s: Optional[str]) -> Optional[datetime]:
    if not s:
        return None
    dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def bundle_to_dict(b: GeneratedBundle) -> dict:
    return {
        "id": b.id,
        "config": config_to_dict(b.config),
        "files": [_file_to_dict(f) for f in b.files],
        "created_at": _dt_to_str(b.created_at),
    }


def bundle_from_dict(d: Mapping[str, Any]) -> GeneratedBundle:
    return GeneratedBundle(
        id=str(d["id"]),
        config=config_from_dict(d["config"]),
        files=tuple(_file_from_dict(f) for f in d["files"]),
        created_at=_dt_from_str(d["created_at"]),
    )


# ─────────────────────────────────────────────
# Saved project record
# ─────────────────────────────────────────────

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SavedProject:
    id: str
    user_id: str
    name: str
    template_id: str
    form_data: dict[str, Any] = field(default_factory=dict)
    theme: ThemeOptions = field(default_factory=ThemeOptions)
    description: str = ""
    config: Optional[GenerationConfig] = None
    generated: Optional[GeneratedBundle] = None
    is_public: bool = False
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    last_generated_at: Optional[datetime] = None


def project_to_dict(p: SavedProject) -> dict:
    return {
        "id": p.id,
        "user_id": p.user_id,
        "name": p.name,
        "description": p.description,
        "template_id": p.template_id,
        "form_data": form_values_to_dict(p.form_data),
        "theme": _theme_to_dict(p.theme),
        "config": config_to_dict(p.config) if p.config else None,
        "generated": bundle_to_dict(p.generated) if p.generated else None,
        "is_public": p.is_public,
        "tags": list(p.tags),
        "created_at": _dt_to_str(p.created_at),
        "updated_at": _dt_to_str(p.updated_at),
        "last_generated_at": _dt_to_str(p.last_generated_at),
    }


def project_from_dict(d: Mapping[str, Any]) -> SavedProject:
    return SavedProject(
        id=str(d["id"]),
        user_id=str(d["user_id"]),
        name=d["name"],
        description=d.get("description", ""),
        template_id=d["template_id"],
        form_data=form_values_from_dict(d.get("form_data") or {}),
        theme=_theme_from_dict(d.get("theme") or {}),
        config=config_from_dict(d["config"]) if d.get("config") else None,
        generated=bundle_from_dict(d["generated"]) if d.get("generated") else None,
        is_public=bool(d.get("is_public", False)),
        tags=list(d.get("tags") or []),
        created_at=_dt_from_str(d["created_at"]),
        updated_at=_dt_from_str(d["updated_at"]),
        last_generated_at=_dt_from_str(d.get("last_generated_at")),
    )


def dumps_project(p: SavedProject) -> str:
    return json.dumps(project_to_dict(p), indent=2, ensure_ascii=False, default=str)


def loads_project(text: str) -> SavedProject:
    project = project_from_dict(json.loads(text))
    logger.debug("Loaded project %s (%s)", project.id, project.template_id)
    return project
