"""
Asset Decoder
=============
Turns user uploads into ImageAssets and renders the icon images that go
into a bundle.

- decode_upload()           validates media type and size of an upload
- read_upload()             async read of an upload from disk
- synthesize_default_icon() solid-colour 512x512 "PWA" icon
- render_icon()             re-encodes any ImageAsset as a square PNG
- is_renderable()           whether an ImageAsset can be re-encoded as an icon
- PreviewRegistry           tracks preview handles so they can be released
"""
from __future__ import annotations

import asyncio
import itertools
import logging
import mimetypes
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import Optional

from PIL import Image, ImageColor, ImageDraw, ImageFont, ImageOps, UnidentifiedImageError

from .errors import PayloadTooLarge, UnsupportedMediaType
from .models import ImageAsset

logger = logging.getLogger("pwagen.assets")

MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_ICON_SIZE = 512
DEFAULT_ICON_LABEL = "PWA"
DEFAULT_ICON_COLOR = "#2563eb"
_LABEL_FONT_SIZE = 80


@dataclass(frozen=True)
class UploadedFile:
    """A file handed over by the form: name, declared media type and bytes."""
    name: str
    media_type: str
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


# ─────────────────────────────────────────────────────────────────────────────
# Preview handles
# ─────────────────────────────────────────────────────────────────────────────

class PreviewRegistry:
    """
    Short-lived preview references for uploads being displayed.

    Every handle handed out must be released once its preview is replaced
    or discarded; released handles are dropped so repeated uploads do not
    accumulate.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._live: dict[str, str] = {}

    def allocate(self, name: str) -> str:
        handle = f"blob:pwagen/{next(self._counter)}"
        self._live[handle] = name
        logger.debug("Allocated preview %s for %s", handle, name)
        return handle

    def release(self, handle: Optional[str]) -> bool:
        if handle is None or handle not in self._live:
            return False
        del self._live[handle]
        logger.debug("Released preview %s", handle)
        return True

    def replace(self, old_handle: Optional[str], name: str) -> str:
        self.release(old_handle)
        return self.allocate(name)

    def release_all(self) -> int:
        count = len(self._live)
        self._live.clear()
        return count

    def __contains__(self, handle: object) -> bool:
        return handle in self._live

    def __len__(self) -> int:
        return len(self._live)


# ─────────────────────────────────────────────────────────────────────────────
# Upload decoding
# ─────────────────────────────────────────────────────────────────────────────

def decode_upload(
    upload: UploadedFile,
    previews: Optional[PreviewRegistry] = None,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> ImageAsset:
    """
    Validate an upload and return it as an ImageAsset.

    Raises
    ------
    UnsupportedMediaType  declared media type is not image/*
    PayloadTooLarge       upload is larger than max_bytes
    """
    media_type = (upload.media_type or "").strip().lower()
    if not media_type.startswith("image/"):
        raise UnsupportedMediaType(upload.media_type, upload.name)
    if upload.size > max_bytes:
        raise PayloadTooLarge(upload.size, max_bytes, upload.name)

    handle = previews.allocate(upload.name) if previews is not None else None
    return ImageAsset(
        data=upload.data,
        media_type=media_type,
        name=upload.name,
        size_bytes=upload.size,
        preview_handle=handle,
    )


def _guess_media_type(name: str, data: bytes) -> str:
    guessed, _ = mimetypes.guess_type(name)
    if guessed:
        return guessed
    try:
        with Image.open(BytesIO(data)) as img:
            return Image.MIME.get(img.format or "", "application/octet-stream")
    except (UnidentifiedImageError, OSError):
        return "application/octet-stream"


async def read_upload(path: str | Path) -> UploadedFile:
    """Read a file from disk without blocking the event loop."""
    path = Path(path)
    data = await asyncio.to_thread(path.read_bytes)
    return UploadedFile(name=path.name, media_type=_guess_media_type(path.name, data), data=data)


# ─────────────────────────────────────────────────────────────────────────────
# Icon rendering
# ─────────────────────────────────────────────────────────────────────────────

def _to_png(img: Image.Image) -> bytes:
    output = BytesIO()
    img.save(output, format="PNG")
    return output.getvalue()


def _parse_color(color: str) -> tuple[int, int, int]:
    try:
        return ImageColor.getrgb(color)[:3]
    except (ValueError, AttributeError):
        logger.warning("Invalid theme colour %r; using %s for the icon", color, DEFAULT_ICON_COLOR)
        return ImageColor.getrgb(DEFAULT_ICON_COLOR)[:3]


def synthesize_default_icon(theme_color: str) -> ImageAsset:
    """Render the fallback app icon: a theme-coloured square labelled "PWA"."""
    size = DEFAULT_ICON_SIZE
    img = Image.new("RGB", (size, size), _parse_color(theme_color))
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default(size=_LABEL_FONT_SIZE)

    left, top, right, bottom = draw.textbbox((0, 0), DEFAULT_ICON_LABEL, font=font)
    x = (size - (right - left)) / 2 - left
    y = (size - (bottom - top)) / 2 - top
    draw.text((x, y), DEFAULT_ICON_LABEL, fill="white", font=font)

    data = _to_png(img)
    return ImageAsset(
        data=data,
        media_type="image/png",
        name=f"icon-{size}x{size}.png",
        size_bytes=len(data),
    )


def is_renderable(asset: ImageAsset) -> bool:
    """True when Pillow can decode ``asset`` (SVG and other vector formats cannot)."""
    try:
        with Image.open(BytesIO(asset.data)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError):
        return False
    return True


def render_icon(asset: ImageAsset, size: int) -> ImageAsset:
    """
    Re-encode ``asset`` as a size x size PNG, centre-cropping non-square
    images. Raises OSError / UnidentifiedImageError on undecodable bytes.
    """
    with Image.open(BytesIO(asset.data)) as src:
        img = ImageOps.exif_transpose(src).convert("RGBA")
    if img.size != (size, size):
        img = ImageOps.fit(img, (size, size), Image.LANCZOS)
    data = _to_png(img)
    return ImageAsset(
        data=data,
        media_type="image/png",
        name=f"icon-{size}x{size}.png",
        size_bytes=len(data),
    )
