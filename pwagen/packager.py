"""
Packager — serializes a GeneratedBundle into a single zip archive.

One archive entry per file, named exactly by the file's path. Image files
are written from their decoded bytes, everything else as UTF-8 text.
Entry timestamps come from the bundle's creation time, clamped to the zip
date range, so packing the same bundle twice yields identical bytes.
"""
from __future__ import annotations

import asyncio
import logging
import re
import struct
import zipfile
from io import BytesIO

from .errors import PackagingFailure
from .models import FileKind, GeneratedBundle

logger = logging.getLogger("pwagen.packager")

ARCHIVE_EXTENSION = "zip"
# DOS date range representable in a zip entry header
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
_ZIP_LAST = (2107, 12, 31, 23, 59, 58)
_FILE_MODE = 0o644 << 16


def _entry_time(bundle: GeneratedBundle) -> tuple[int, int, int, int, int, int]:
    dt = bundle.created_at
    stamp = (dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)
    return min(max(stamp, _ZIP_EPOCH), _ZIP_LAST)


def pack(bundle: GeneratedBundle) -> bytes:
    """
    Return the zip archive bytes for ``bundle``.

    Raises PackagingFailure if serialization fails; the bundle is untouched
    and can be packed again.
    """
    buffer = BytesIO()
    date_time = _entry_time(bundle)
    try:
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for f in bundle.files:
                info = zipfile.ZipInfo(f.path, date_time=date_time)
                info.compress_type = zipfile.ZIP_DEFLATED
                info.external_attr = _FILE_MODE
                if f.kind == FileKind.IMAGE:
                    archive.writestr(info, f.data)
                else:
                    archive.writestr(info, f.content.encode("utf-8"))
    except (OSError, ValueError, struct.error, zipfile.BadZipFile) as exc:
        logger.error("Packaging bundle %s failed: %s", bundle.id, exc)
        raise PackagingFailure(f"Error creating download: {exc}") from exc

    data = buffer.getvalue()
    logger.info("Packed bundle %s: %d entries, %d bytes", bundle.id, len(bundle.files), len(data))
    return data


async def pack_async(bundle: GeneratedBundle) -> bytes:
    """pack() off the event loop."""
    return await asyncio.to_thread(pack, bundle)


def unpack(archive: bytes) -> dict[str, bytes]:
    """Read every entry of an archive produced by pack(): {path: bytes}."""
    with zipfile.ZipFile(BytesIO(archive)) as zf:
        return {name: zf.read(name) for name in zf.namelist()}


def archive_filename(template_name: str) -> str:
    """'Business Card' -> 'business-card-pwa.zip'."""
    slug = re.sub(r"[^a-z0-9]+", "-", template_name.lower()).strip("-") or "app"
    return f"{slug}-pwa.{ARCHIVE_EXTENSION}"
