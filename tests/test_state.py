"""
Tests for pwagen/state.py
=========================
Saved-project records serialize to JSON and re-hydrate dates, configs and
bundles without loss.
"""
from __future__ import annotations

import json
from datetime import datetime, timezone

from pwagen.assembler import assemble
from pwagen.catalog import get_template
from pwagen.config import build_generation_config
from pwagen.models import ImageAsset, PendingImage, THEME_PRESETS
from pwagen.state import (
    SavedProject,
    bundle_from_dict,
    bundle_to_dict,
    config_from_dict,
    config_to_dict,
    dumps_project,
    form_values_from_dict,
    form_values_to_dict,
    loads_project,
)


def test_form_values_to_dict_shapes(make_asset):
    asset = make_asset(name="me.png")
    out = form_values_to_dict({
        "name": "Ada",
        "skills": ("Go", "Rust"),
        "profileImage": asset,
        "pending": PendingImage("blob:pwagen/3"),
    })
    assert out["name"] == "Ada"
    assert out["skills"] == ["Go", "Rust"]
    assert out["profileImage"]["base64"] == asset.data_uri
    assert out["profileImage"]["size"] == asset.size_bytes
    assert out["pending"] is None
    json.dumps(out)


def test_form_values_roundtrip_images(make_asset):
    asset = make_asset(name="me.png")
    back = form_values_from_dict(form_values_to_dict({"profileImage": asset}))
    img = back["profileImage"]
    assert isinstance(img, ImageAsset)
    assert img.data == asset.data
    assert img.name == "me.png"
    assert img.media_type == "image/png"


def test_config_roundtrip(make_asset):
    config = build_generation_config(
        get_template("portfolio"),
        {"name": "Ada", "skills": ["Go"], "profileImage": make_asset()},
        THEME_PRESETS["elegant-purple"],
    )
    back = config_from_dict(json.loads(json.dumps(config_to_dict(config))))
    assert back.app_name == config.app_name
    assert back.theme == config.theme
    assert back.icon_field == "profileImage"
    assert back.custom_data["profileImage"].data == config.custom_data["profileImage"].data


def test_bundle_roundtrip_preserves_bytes(fixed_clock):
    config = build_generation_config(get_template("blog"), {"blogTitle": "Notes"})
    bundle = assemble(config, clock=fixed_clock)
    back = bundle_from_dict(json.loads(json.dumps(bundle_to_dict(bundle))))
    assert back.id == bundle.id
    assert back.created_at == bundle.created_at
    assert [f.data for f in back.files] == [f.data for f in bundle.files]


def test_saved_project_roundtrip_dates(fixed_clock):
    config = build_generation_config(get_template("blog"), {"blogTitle": "Notes"})
    bundle = assemble(config, clock=fixed_clock)
    project = SavedProject(
        id="p1",
        user_id="u1",
        name="Notes",
        template_id="blog",
        form_data={"blogTitle": "Notes"},
        config=config,
        generated=bundle,
        tags=["writing"],
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 1, 2, tzinfo=timezone.utc),
        last_generated_at=bundle.created_at,
    )
    text = dumps_project(project)
    raw = json.loads(text)
    assert raw["created_at"] == "2024-01-01T00:00:00+00:00"

    back = loads_project(text)
    assert isinstance(back.created_at, datetime)
    assert back.updated_at == project.updated_at
    assert back.last_generated_at == bundle.created_at
    assert back.generated.paths == bundle.paths
    assert back.tags == ["writing"]


def test_loads_project_accepts_z_suffix_and_naive_dates():
    text = json.dumps({
        "id": "p2", "user_id": "u", "name": "n", "template_id": "blog",
        "created_at": "2024-03-01T10:00:00Z",
        "updated_at": "2024-03-01T10:00:00",
    })
    back = loads_project(text)
    assert back.created_at.tzinfo is not None
    assert back.updated_at == back.created_at
    assert back.config is None and back.generated is None
