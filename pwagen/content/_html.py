"""Markup helpers shared by the per-template rendering rules.

Every user-controlled value passes through ``esc`` before it is placed in
markup, so form text can never change the structure of the fixed
scaffolding around it.
"""
from __future__ import annotations

import html
from typing import Any, Optional

from ..models import FormValues, ImageAsset

_CHIP_STYLE = (
    "display: inline-block; background: {color}; color: white; padding: 4px 8px; "
    "margin: 2px; border-radius: 4px; font-size: 0.9rem;"
)


def esc(value: Any) -> str:
    return html.escape(str(value), quote=True)


def text(data: FormValues, key: str) -> str:
    """Raw (unescaped) text value of a field, '' when missing or blank."""
    value = data.get(key)
    if value is None:
        return ""
    return str(value).strip()


def value_or(data: FormValues, key: str, placeholder: str) -> str:
    """Escaped field value, or the literal placeholder when empty."""
    raw = text(data, key)
    return esc(raw) if raw else placeholder


def multiline(raw: str) -> str:
    return "<br>".join(esc(line) for line in raw.splitlines())


def image(data: FormValues, key: str) -> Optional[ImageAsset]:
    value = data.get(key)
    if isinstance(value, ImageAsset) and value.data:
        return value
    return None


def img_block(asset: Optional[ImageAsset], alt: str, style: str,
              wrapper_style: str = "text-align: center; margin-bottom: 1rem;") -> str:
    if asset is None:
        return ""
    return (
        f'\n          <div style="{wrapper_style}">\n'
        f'            <img src="{esc(asset.data_uri)}" alt="{alt}" style="{style}">\n'
        f"          </div>\n          "
    )


def chips(values: Any, color: str) -> str:
    """Render a multiselect value as inline label chips, preserving order."""
    if not isinstance(values, (list, tuple)):
        raise TypeError(f"Expected a list of options, got {type(values).__name__}")
    style = _CHIP_STYLE.format(color=esc(color))
    return "".join(f'<span class="chip" style="{style}">{esc(v)}</span>' for v in values)


def chip_section(data: FormValues, key: str, heading: str, color: str,
                 margin: str = "margin-top: 1rem;") -> str:
    values = data.get(key)
    if not values:
        return ""
    return (
        f'\n          <div style="{margin}">\n'
        f"            <h4>{heading}</h4>\n"
        f"            <div>{chips(values, color)}</div>\n"
        f"          </div>\n          "
    )
