"""
Tests for pwagen/output_writer.py
=================================
Writing bundles and archives to disk.
"""
from __future__ import annotations

import json

import pytest

from pwagen.assembler import assemble
from pwagen.catalog import get_template
from pwagen.config import build_generation_config
from pwagen.output_writer import SUMMARY_FILENAME, bundle_summary, write_archive, write_bundle_dir
from pwagen.packager import pack


@pytest.fixture
def bundle(fixed_clock):
    config = build_generation_config(get_template("nonprofit"), {"organizationName": "Hope"})
    return assemble(config, clock=fixed_clock)


def test_write_bundle_dir_writes_every_file(tmp_path, bundle):
    out = write_bundle_dir(bundle, tmp_path / "site")
    assert out.is_absolute()
    for f in bundle.files:
        assert (out / f.path).read_bytes() == f.data


def test_summary_lists_files(tmp_path, bundle):
    out = write_bundle_dir(bundle, tmp_path / "site")
    summary = json.loads((out / SUMMARY_FILENAME).read_text(encoding="utf-8"))
    assert summary == bundle_summary(bundle)
    assert summary["app_name"] == "Hope"
    assert [f["path"] for f in summary["files"]] == bundle.paths
    assert summary["created_at"].startswith("2024-05-17T12:30:45")


def test_write_archive_creates_parents(tmp_path, bundle):
    archive = pack(bundle)
    dest = write_archive(archive, tmp_path / "a" / "b", "nonprofit-pwa.zip")
    assert dest.name == "nonprofit-pwa.zip"
    assert dest.read_bytes() == archive
