"""Shared fixtures for the pwagen test suite."""
from __future__ import annotations

from datetime import datetime, timezone
from io import BytesIO

import pytest
from PIL import Image

from pwagen.assets import UploadedFile
from pwagen.models import ImageAsset

FIXED_TIME = datetime(2024, 5, 17, 12, 30, 45, tzinfo=timezone.utc)


def _make_png(size: tuple[int, int] = (32, 32), color: str = "red") -> bytes:
    buf = BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    return buf.getvalue()


def _make_asset(size: tuple[int, int] = (32, 32), color: str = "red",
                name: str = "logo.png") -> ImageAsset:
    data = _make_png(size, color)
    return ImageAsset(data=data, media_type="image/png", name=name, size_bytes=len(data))


@pytest.fixture
def fixed_time() -> datetime:
    return FIXED_TIME


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture
def make_png():
    """Factory: make_png(size=(w, h), color="red") -> PNG bytes."""
    return _make_png


@pytest.fixture
def make_asset():
    """Factory: make_asset(size=(w, h), color="red", name=...) -> ImageAsset."""
    return _make_asset


@pytest.fixture
def png_bytes() -> bytes:
    return _make_png()


@pytest.fixture
def png_upload(png_bytes) -> UploadedFile:
    return UploadedFile(name="logo.png", media_type="image/png", data=png_bytes)


@pytest.fixture
def png_file(tmp_path, png_bytes):
    path = tmp_path / "logo.png"
    path.write_bytes(png_bytes)
    return path
