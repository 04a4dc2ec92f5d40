"""
Tests for pwagen/content
========================
Rendering rules are pure: empty forms render placeholders, chips keep
their order, user text is escaped and unknown ids get the fallback.
"""
from __future__ import annotations

import re

import pytest

from pwagen.catalog import TEMPLATES
from pwagen.content import FALLBACK_FRAGMENT, render_content
from pwagen.content._html import chips, esc, multiline, value_or
from pwagen.models import PendingImage


ALL_IDS = [t.id for t in TEMPLATES]


# ─────────────────────────────────────────────────────────────────────────────
# Totality
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("template_id", ALL_IDS)
def test_empty_form_renders_without_unresolved_placeholders(template_id):
    fragment = render_content(template_id, {}, "#2563eb")
    assert fragment.strip()
    assert "${" not in fragment
    assert "{{" not in fragment and "}}" not in fragment
    assert "None" not in fragment
    assert fragment != FALLBACK_FRAGMENT


@pytest.mark.parametrize("template_id,placeholder", [
    ("business-card", "Business Name"),
    ("portfolio", "Your Name"),
    ("restaurant-menu", "Restaurant Name"),
    ("event-landing", "Event Name"),
    ("e-commerce", "Online Store"),
    ("blog", "My Blog"),
    ("landing-page", "Amazing Product"),
    ("nonprofit", "Non-Profit Organization"),
])
def test_empty_form_uses_literal_placeholder(template_id, placeholder):
    assert placeholder in render_content(template_id, {}, "#000000")


def test_unknown_template_gets_fallback():
    fragment = render_content("not-a-template", {"businessName": "X"}, "#000000")
    assert fragment == FALLBACK_FRAGMENT
    assert "Welcome to your PWA!" in fragment


def test_none_form_values_treated_as_empty():
    assert "Business Name" in render_content("business-card", None, "#000000")


# ─────────────────────────────────────────────────────────────────────────────
# Chips
# ─────────────────────────────────────────────────────────────────────────────

def test_portfolio_skills_render_as_ordered_chips():
    fragment = render_content(
        "portfolio", {"skills": ["Go", "Rust", "TypeScript"]}, "#123456",
    )
    found = re.findall(r'<span class="chip"[^>]*>([^<]*)</span>', fragment)
    assert found == ["Go", "Rust", "TypeScript"]
    assert "background: #123456" in fragment


def test_accent_colour_overrides_theme_where_declared():
    fragment = render_content("blog", {"blogCategories": ["Travel"]}, "#123456")
    assert "background: #10b981" in fragment
    assert "#123456" not in fragment


def test_empty_multiselect_renders_no_chip_section():
    fragment = render_content("portfolio", {"skills": []}, "#000000")
    assert "Skills:" not in fragment


def test_non_list_multiselect_raises_type_error():
    with pytest.raises(TypeError):
        render_content("portfolio", {"skills": "Go"}, "#000000")


def test_chips_accept_tuples():
    assert chips(("a", "b"), "#fff").count('class="chip"') == 2


# ─────────────────────────────────────────────────────────────────────────────
# Images
# ─────────────────────────────────────────────────────────────────────────────

def test_image_included_only_when_ready(make_asset):
    without = render_content("business-card", {}, "#000000")
    assert "<img" not in without

    asset = make_asset()
    with_logo = render_content("business-card", {"logo": asset}, "#000000")
    assert "<img" in with_logo
    assert asset.data_uri in with_logo


def test_pending_image_is_not_rendered():
    fragment = render_content("portfolio", {"profileImage": PendingImage("blob:pwagen/1")}, "#000")
    assert "<img" not in fragment


# ─────────────────────────────────────────────────────────────────────────────
# Escaping
# ─────────────────────────────────────────────────────────────────────────────

def test_user_text_cannot_inject_markup():
    hostile = '<script>alert("x")</script>'
    fragment = render_content("business-card", {"businessName": hostile, "tagline": hostile}, "#000")
    assert "<script>" not in fragment
    assert "&lt;script&gt;" in fragment
    assert "&quot;x&quot;" in fragment


def test_chip_text_is_escaped():
    fragment = render_content("portfolio", {"skills": ["<b>bold</b>"]}, "#000")
    assert "<b>" not in fragment
    assert "&lt;b&gt;bold&lt;/b&gt;" in fragment


def test_multiline_escapes_and_joins_lines():
    assert multiline("a<b\nc") == "a&lt;b<br>c"


def test_value_or_placeholder_and_escape():
    assert value_or({}, "x", "Placeholder") == "Placeholder"
    assert value_or({"x": "   "}, "x", "Placeholder") == "Placeholder"
    assert value_or({"x": "a&b"}, "x", "P") == "a&amp;b"
    assert esc("'") == "&#x27;"
