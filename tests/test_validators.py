"""
Tests for pwagen/validators.py
==============================
Form-field rules and structural checks on finished bundles.
"""
from __future__ import annotations

import json
from dataclasses import replace

import pytest

from pwagen.assembler import assemble
from pwagen.catalog import get_template
from pwagen.config import build_generation_config
from pwagen.models import (
    FieldDescriptor,
    FieldType,
    FieldValidation,
    FileKind,
    GeneratedBundle,
    GeneratedFile,
    PendingImage,
)
from pwagen.validators import (
    validate_bundle,
    validate_encodings,
    validate_field,
    validate_form,
    validate_json_schema,
    validate_manifest,
    validate_paths,
)


def _valid_business_card() -> dict:
    return {
        "businessName": "Acme Corp",
        "ownerName": "Jane Doe",
        "email": "jane@acme.io",
        "phone": "+1 555 0100",
    }


# ─────────────────────────────────────────────────────────────────────────────
# Form fields
# ─────────────────────────────────────────────────────────────────────────────

class TestValidateField:
    def test_required_blank(self):
        f = FieldDescriptor("name", "Your Name", FieldType.TEXT, required=True)
        assert validate_field(f, "   ") == "Your Name is required"
        assert validate_field(f, None) == "Your Name is required"

    def test_optional_blank_is_fine(self):
        f = FieldDescriptor("tagline", "Tagline", FieldType.TEXT, validation=FieldValidation(5, 10))
        assert validate_field(f, "") == ""

    def test_length_bounds(self):
        f = FieldDescriptor("n", "Name", FieldType.TEXT, validation=FieldValidation(2, 5))
        assert validate_field(f, "a") == "Name must be at least 2 characters"
        assert validate_field(f, "abcdef") == "Name must not exceed 5 characters"
        assert validate_field(f, "abc") == ""

    def test_email(self):
        f = FieldDescriptor("email", "Email", FieldType.EMAIL)
        assert validate_field(f, "nope") == "Please enter a valid email address"
        assert validate_field(f, "a@b.co") == ""

    def test_url(self):
        f = FieldDescriptor("website", "Website", FieldType.URL)
        assert validate_field(f, "example.com") == "Please enter a valid URL"
        assert validate_field(f, "https://example.com") == ""

    def test_required_multiselect_empty_list(self):
        f = FieldDescriptor("skills", "Skills", FieldType.MULTISELECT, True, options=("Go",))
        assert validate_field(f, []) == "Skills is required"
        assert validate_field(f, "Go") == "Skills must be a list of options"
        assert validate_field(f, ["Go"]) == ""

    def test_required_image_needs_ready_asset(self, make_asset):
        f = FieldDescriptor("logo", "Logo", FieldType.IMAGE, required=True)
        assert validate_field(f, PendingImage("blob:pwagen/1")) == "Logo is required"
        assert validate_field(f, make_asset()) == ""


def test_validate_form_collects_all_errors():
    errors = validate_form(get_template("business-card"), {})
    assert set(errors) == {"businessName", "ownerName", "email", "phone"}


def test_validate_form_passes_valid_input():
    assert validate_form(get_template("business-card"), _valid_business_card()) == {}


# ─────────────────────────────────────────────────────────────────────────────
# Bundle checks
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def bundle(fixed_clock):
    config = build_generation_config(get_template("business-card"), _valid_business_card())
    return assemble(config, clock=fixed_clock)


def test_fresh_bundle_passes_every_check(bundle):
    results = validate_bundle(bundle)
    assert [r.validator_name for r in results] == ["paths", "encodings", "manifest"]
    assert all(r.passed for r in results), results


def test_missing_path_is_reported(bundle):
    trimmed = GeneratedBundle(
        id=bundle.id, config=bundle.config,
        files=tuple(f for f in bundle.files if f.path != "sw.js"),
        created_at=bundle.created_at,
    )
    result = validate_paths(trimmed)
    assert not result.passed
    assert "sw.js" in result.details


def test_manifest_schema_rejects_long_short_name(bundle):
    manifest = json.loads(bundle.get("manifest.json").content)
    manifest["short_name"] = "X" * 20
    result = validate_manifest(json.dumps(manifest))
    assert not result.passed
    assert "Schema validation failed" in result.details


def test_invalid_json_is_reported():
    result = validate_json_schema("{not json")
    assert not result.passed
    assert result.details.startswith("Invalid JSON")


def test_text_byte_mismatch_is_reported(bundle):
    index = bundle.get("index.html")
    tampered = replace(index, data=b"something else")
    files = tuple(tampered if f.path == "index.html" else f for f in bundle.files)
    result = validate_encodings(replace(bundle, files=files))
    assert not result.passed
    assert "index.html" in result.details


def test_undecodable_icon_is_reported(bundle):
    files = tuple(
        GeneratedFile(f.path, "data:image/png;base64,AAAA", FileKind.IMAGE, b"\x00\x00\x00")
        if f.path == "icon-192x192.png" else f
        for f in bundle.files
    )
    result = validate_encodings(replace(bundle, files=files))
    assert not result.passed
    assert "undecodable" in result.details
