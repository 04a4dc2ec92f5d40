"""
Tests for pwagen/synthesizers.py
================================
Each synthesizer is a pure (GenerationConfig) -> str function.
"""
from __future__ import annotations

import json

import pytest

from pwagen.catalog import get_template
from pwagen.config import build_generation_config
from pwagen.models import ThemeOptions
from pwagen.synthesizers import (
    CACHE_NAME,
    ICON_PATHS,
    PRECACHE_PATHS,
    build_manifest,
    synthesize_client_script,
    synthesize_document,
    synthesize_manifest,
    synthesize_service_worker,
    synthesize_stylesheet,
)


def _config(template_id="business-card", values=None, theme=None):
    return build_generation_config(get_template(template_id), values or {}, theme)


def _embedded_data(script: str) -> dict:
    start = script.index("const customData = ") + len("const customData = ")
    end = script.index(";\n    this.renderContent", start)
    return json.loads(script[start:end])


# ─────────────────────────────────────────────────────────────────────────────
# index.html
# ─────────────────────────────────────────────────────────────────────────────

class TestDocument:
    def test_contains_head_links_and_meta(self):
        html = synthesize_document(_config(values={"businessName": "Acme"}))
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Acme</title>" in html
        assert '<meta name="theme-color" content="#2563eb">' in html
        assert 'href="./manifest.json"' in html
        assert 'href="./styles.css"' in html
        assert '<script src="./app.js"></script>' in html

    def test_worker_registration_failure_is_swallowed(self):
        html = synthesize_document(_config())
        assert "navigator.serviceWorker.register('./sw.js')" in html
        assert ".catch(" in html

    def test_embeds_rendered_content(self):
        html = synthesize_document(_config())
        assert "Business Name" in html

    def test_app_name_is_escaped(self):
        html = synthesize_document(_config(values={"businessName": "A<b>C"}))
        assert "A&lt;b&gt;C" in html
        assert "A<b>C" not in html


# ─────────────────────────────────────────────────────────────────────────────
# manifest.json
# ─────────────────────────────────────────────────────────────────────────────

class TestManifest:
    def test_manifest_fields(self):
        theme = ThemeOptions(primary_color="#10b981", background_color="#f9fafb")
        manifest = json.loads(synthesize_manifest(_config(values={"businessName": "Acme"}, theme=theme)))
        assert manifest["name"] == "Acme"
        assert manifest["short_name"] == "Acme"
        assert manifest["start_url"] == "/"
        assert manifest["display"] == "standalone"
        assert manifest["theme_color"] == "#10b981"
        assert manifest["background_color"] == "#f9fafb"

    def test_exactly_two_icons(self):
        icons = build_manifest(_config())["icons"]
        assert [i["sizes"] for i in icons] == ["192x192", "512x512"]
        assert [i["src"] for i in icons] == list(ICON_PATHS)
        assert all(i["type"] == "image/png" for i in icons)

    def test_manifest_roundtrips_through_json(self):
        config = _config(values={"businessName": "Café “Quotes”"})
        text = synthesize_manifest(config)
        assert json.loads(text) == build_manifest(config)


# ─────────────────────────────────────────────────────────────────────────────
# sw.js
# ─────────────────────────────────────────────────────────────────────────────

class TestServiceWorker:
    def test_precaches_six_paths(self):
        assert len(PRECACHE_PATHS) == 6
        sw = synthesize_service_worker(_config())
        for path in PRECACHE_PATHS:
            assert f"'{path}'" in sw

    def test_versioned_cache_name(self):
        sw = synthesize_service_worker(_config())
        assert CACHE_NAME.startswith("pwa-cache-v1-")
        assert f"const CACHE_NAME = '{CACHE_NAME}';" in sw

    def test_cache_first_with_network_fallback(self):
        sw = synthesize_service_worker(_config())
        assert "cache.addAll(urlsToCache)" in sw
        assert "caches.match(event.request)" in sw
        assert "return fetch(event.request);" in sw

    def test_independent_of_form_data(self):
        a = synthesize_service_worker(_config(values={"businessName": "A"}))
        b = synthesize_service_worker(_config("blog", {"blogTitle": "B"}))
        assert a == b


# ─────────────────────────────────────────────────────────────────────────────
# styles.css
# ─────────────────────────────────────────────────────────────────────────────

class TestStylesheet:
    def test_uses_theme_and_background_colour(self):
        theme = ThemeOptions(primary_color="#abcdef", background_color="#fedcba")
        css = synthesize_stylesheet(_config(theme=theme))
        assert "background-color: #fedcba;" in css
        assert "background: #abcdef;" in css

    def test_never_references_form_data(self):
        css = synthesize_stylesheet(_config(values={"businessName": "UNIQUE_MARKER_42"}))
        assert "UNIQUE_MARKER_42" not in css


# ─────────────────────────────────────────────────────────────────────────────
# app.js
# ─────────────────────────────────────────────────────────────────────────────

class TestClientScript:
    def test_install_prompt_is_guarded(self):
        js = synthesize_client_script(_config())
        assert "beforeinstallprompt" in js
        assert "if (!deferredPrompt)" in js
        assert "navigator.serviceWorker.register('./sw.js')" in js

    def test_embeds_full_custom_data(self):
        values = {"businessName": "Acme", "email": "a@b.co"}
        data = _embedded_data(synthesize_client_script(_config(values=values)))
        assert data == values

    def test_embeds_images_as_data_uri_objects(self, make_asset):
        asset = make_asset(name="logo.png")
        data = _embedded_data(synthesize_client_script(_config(values={"logo": asset})))
        assert data["logo"] == {
            "name": "logo.png",
            "size": asset.size_bytes,
            "type": "image/png",
            "base64": asset.data_uri,
        }

    def test_script_breakout_is_neutralised(self):
        hostile = "</script><script>alert(1)</script>"
        js = synthesize_client_script(_config(values={"businessName": hostile}))
        assert "</script>" not in js
        assert _embedded_data(js)["businessName"] == hostile

    @pytest.mark.parametrize("sep", ["\u2028", "\u2029"])
    def test_line_separators_are_escaped(self, sep):
        js = synthesize_client_script(_config(values={"tagline": f"a{sep}b"}))
        assert sep not in js
