"""
Tests for pwagen/config.py
==========================
Deriving the GenerationConfig from a form, and environment settings.
"""
from __future__ import annotations

from pathlib import Path

import pytest

from pwagen.assets import MAX_UPLOAD_BYTES
from pwagen.catalog import get_template
from pwagen.config import Settings, build_generation_config
from pwagen.models import THEME_PRESETS


def test_empty_form_defaults():
    config = build_generation_config(get_template("business-card"), {})
    assert config.app_name == "My PWA"
    assert config.short_name == "PWA"
    assert config.description == "A Progressive Web App"
    assert config.icon == "/icon-192x192.png"


def test_name_and_description_from_fields():
    config = build_generation_config(
        get_template("e-commerce"),
        {"storeName": "  The Really Big Shop  ", "storeDescription": "Everything"},
    )
    assert config.app_name == "The Really Big Shop"
    assert config.short_name == "The Really B"
    assert len(config.short_name) == 12
    assert config.description == "Everything"


def test_theme_drives_colours():
    theme = THEME_PRESETS["warm-orange"]
    config = build_generation_config(get_template("blog"), {}, theme)
    assert config.theme_color == "#f59e0b"
    assert config.background_color == "#fffbeb"
    assert config.theme is theme


def test_icon_field_copied_from_template():
    assert build_generation_config(get_template("nonprofit"), {}).icon_field == "organizationLogo"


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PWAGEN_OUTPUT_DIR", raising=False)
        monkeypatch.delenv("PWAGEN_MAX_UPLOAD_MB", raising=False)
        settings = Settings.from_env()
        assert settings.output_dir == Path("outputs")
        assert settings.max_upload_bytes == MAX_UPLOAD_BYTES

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PWAGEN_OUTPUT_DIR", str(tmp_path))
        monkeypatch.setenv("PWAGEN_MAX_UPLOAD_MB", "2")
        settings = Settings.from_env()
        assert settings.output_dir == tmp_path
        assert settings.max_upload_bytes == 2 * 1024 * 1024

    def test_bad_limit(self, monkeypatch):
        monkeypatch.setenv("PWAGEN_MAX_UPLOAD_MB", "lots")
        with pytest.raises(ValueError, match="PWAGEN_MAX_UPLOAD_MB"):
            Settings.from_env()
