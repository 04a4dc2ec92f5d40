"""
Output Directory Writer
=======================
Writes a generated bundle to disk, either as the packed archive or as
loose files for local testing.

Directory layout for an unpacked bundle:
    <output_dir>/
    ├── index.html
    ├── styles.css
    ├── app.js
    ├── manifest.json
    ├── sw.js
    ├── icon-192x192.png
    ├── icon-512x512.png
    └── bundle.json          # machine-readable summary (not part of the app)

Called from cli.py after generation.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from .models import GeneratedBundle

logger = logging.getLogger("pwagen.output_writer")

SUMMARY_FILENAME = "bundle.json"


def bundle_summary(bundle: GeneratedBundle) -> dict:
    return {
        "id": bundle.id,
        "template_id": bundle.config.template_id,
        "app_name": bundle.config.app_name,
        "created_at": bundle.created_at.isoformat(),
        "files": [
            {"path": f.path, "type": f.kind.value, "media_type": f.media_type, "bytes": len(f.data)}
            for f in bundle.files
        ],
    }


def write_bundle_dir(bundle: GeneratedBundle, output_dir: str | Path) -> Path:
    """
    Write every bundle file plus bundle.json under output_dir.
    Creates the directory (and parents) if it does not exist.
    Returns the resolved absolute Path of the output directory.
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    for f in bundle.files:
        dest = out / f.path
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(f.data)
        logger.debug("Wrote %s (%d bytes)", f.path, len(f.data))

    summary_path = out / SUMMARY_FILENAME
    summary_path.write_text(json.dumps(bundle_summary(bundle), indent=2), encoding="utf-8")
    logger.info("Wrote %d files to %s", len(bundle.files), out)
    return out.resolve()


def write_archive(archive: bytes, output_dir: str | Path, filename: str) -> Path:
    """Write packed archive bytes to output_dir/filename and return its path."""
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    dest = out / filename
    dest.write_bytes(archive)
    logger.info("Wrote archive %s (%d bytes)", dest, len(archive))
    return dest.resolve()
