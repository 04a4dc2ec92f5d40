"""
BundleAssembler — turns a GenerationConfig into an immutable GeneratedBundle.

Steps:
1. Resolve icons: the template's icon field if it holds a decodable image,
   otherwise the default icon synthesized from the theme colour
2. Run each of the five file synthesizers exactly once
3. Wrap the outputs and both icon sizes as seven GeneratedFiles at fixed paths
4. Stamp the bundle with an id and creation time from the clock

Either all seven files are produced or AssemblyFailure is raised.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from .assets import is_renderable, render_icon, synthesize_default_icon
from .errors import AssemblyFailure
from .models import (
    FileKind,
    GeneratedBundle,
    GeneratedFile,
    GenerationConfig,
    ImageAsset,
)
from .synthesizers import (
    CLIENT_SCRIPT_PATH,
    ICON_PATHS,
    ICON_SIZES,
    INDEX_PATH,
    MANIFEST_PATH,
    STYLESHEET_PATH,
    WORKER_PATH,
    synthesize_client_script,
    synthesize_document,
    synthesize_manifest,
    synthesize_service_worker,
    synthesize_stylesheet,
)

logger = logging.getLogger("pwagen.assembler")

Clock = Callable[[], datetime]

BUNDLE_PATHS: frozenset[str] = frozenset(
    {INDEX_PATH, STYLESHEET_PATH, CLIENT_SCRIPT_PATH, MANIFEST_PATH, WORKER_PATH, *ICON_PATHS}
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def resolve_icon_source(config: GenerationConfig) -> ImageAsset:
    """
    The uploaded image named by config.icon_field, else the default icon.
    Uploads Pillow cannot decode (e.g. SVG) still render in the page but
    fall back to the default icon.
    """
    if config.icon_field:
        value = config.custom_data.get(config.icon_field)
        if isinstance(value, ImageAsset) and value.data:
            if is_renderable(value):
                logger.debug("Using '%s' upload as app icon", config.icon_field)
                return value
            logger.warning(
                "Upload in '%s' (%s) cannot be used as an icon; using the default icon",
                config.icon_field, value.media_type,
            )
    return synthesize_default_icon(config.theme_color)


class BundleAssembler:
    """
    Builds GeneratedBundles. Holds no state between calls besides the clock.

    Usage:
        assembler = BundleAssembler()
        bundle = assembler.assemble(config)
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock = clock or _utcnow

    def assemble(self, config: GenerationConfig) -> GeneratedBundle:
        try:
            files = self._build_files(config)
        except Exception as exc:
            logger.error("Assembly failed for template '%s': %s", config.template_id, exc)
            raise AssemblyFailure(f"Failed to generate PWA: {exc}") from exc

        created_at = self._clock()
        bundle = GeneratedBundle(
            id=str(int(created_at.timestamp() * 1000)),
            config=config,
            files=tuple(files),
            created_at=created_at,
        )
        logger.info(
            "Assembled bundle %s for '%s' (%d files)",
            bundle.id, config.template_id, len(bundle.files),
        )
        return bundle

    def _build_files(self, config: GenerationConfig) -> list[GeneratedFile]:
        source = resolve_icon_source(config)
        icons = [render_icon(source, size) for size in ICON_SIZES]

        files = [
            GeneratedFile.text(INDEX_PATH, synthesize_document(config), FileKind.HTML),
            GeneratedFile.text(MANIFEST_PATH, synthesize_manifest(config), FileKind.MANIFEST),
            GeneratedFile.text(WORKER_PATH, synthesize_service_worker(config), FileKind.SW),
            GeneratedFile.text(STYLESHEET_PATH, synthesize_stylesheet(config), FileKind.CSS),
            GeneratedFile.text(CLIENT_SCRIPT_PATH, synthesize_client_script(config), FileKind.JS),
        ]
        files.extend(GeneratedFile.image(path, icon) for path, icon in zip(ICON_PATHS, icons))
        return files


def assemble(config: GenerationConfig, clock: Optional[Clock] = None) -> GeneratedBundle:
    return BundleAssembler(clock=clock).assemble(config)
