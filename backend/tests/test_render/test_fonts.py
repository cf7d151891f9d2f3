"""Tests for FontCatalog loading and fallback."""

from __future__ import annotations

import pytest

from sealforge.render import FontCatalog


def test_missing_directory_gives_empty_catalog(tmp_path):
    catalog = FontCatalog.load(tmp_path / "nope")
    assert len(catalog) == 0
    assert catalog.families == []


def test_non_font_files_ignored(tmp_path):
    (tmp_path / "readme.txt").write_text("not a font")
    catalog = FontCatalog.load(tmp_path)
    assert len(catalog) == 0


def test_alias_to_missing_file_skipped(tmp_path):
    catalog = FontCatalog.load(tmp_path, aliases={"SealSong": "missing.ttf"}, default_family="SealSong")
    assert catalog.resolve("SealSong") is None
    assert catalog.default_family == "SealSong"


def test_unknown_family_falls_back_to_builtin():
    catalog = FontCatalog()
    font = catalog.font("does-not-exist", 24.4)
    left, top, right, bottom = font.getbbox("A")
    assert right > left
    assert bottom > top


def test_catalog_is_read_only(tmp_path):
    catalog = FontCatalog.load(tmp_path)
    with pytest.raises(TypeError):
        catalog.fonts["x"] = tmp_path / "x.ttf"
