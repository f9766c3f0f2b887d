"""Tests for theme_catalog.zed.theme."""

from __future__ import annotations

import json

import pytest

from theme_catalog.catalog import ThemeRecord
from theme_catalog.color import parse_color
from theme_catalog.export import OverrideValidationError, build_export_source, build_strict_export_plan
from theme_catalog.targets import ZED_FIELDS
from theme_catalog.zed import generate_zed_theme
from theme_catalog.zed.theme import SCHEMA_URL, opacity_to_hex, zed_color

THEME = ThemeRecord(id="t", bg="#2b2d30", name="Test")
PAYLOAD = {
    "colors": {
        "editor.background": "#2b2d30",
        "editor.foreground": "#eeeeee",
        "editor.lineHighlightBackground": "#ffffff10",
    },
    "tokenColors": [{"scope": "comment", "settings": {"foreground": "#6a9955"}}],
}


def _planned(overrides=None):
    source = build_export_source(THEME, PAYLOAD)
    return build_strict_export_plan("zed-theme", source, ZED_FIELDS, overrides)


class TestZedColor:
    def test_opacity_to_hex(self):
        assert opacity_to_hex(1.0) == "ff"
        assert opacity_to_hex(0.0) == "00"
        assert opacity_to_hex(2.0) == "ff"

    def test_zed_color(self):
        assert zed_color(parse_color("#2b2d30")) == "#2b2d30ff"
        assert zed_color(parse_color("#ff000080")) == "#ff000080"


class TestGenerateZedTheme:
    def test_structure(self):
        data = json.loads(generate_zed_theme(_planned(), "Test", is_dark=True))
        assert data["$schema"] == SCHEMA_URL
        assert data["name"] == "Test"
        variant = data["themes"][0]
        assert variant["name"] == "Test Dark"
        assert variant["appearance"] == "dark"

    def test_style_from_plan(self):
        style = json.loads(generate_zed_theme(_planned(), "Test", is_dark=False))["themes"][0]["style"]
        assert style["editor.background"] == "#2b2d30ff"
        assert style["editor.active_line.background"] == "#ffffff10"
        assert style["syntax"]["comment"]["color"] == "#6a9955ff"
        assert "syntax.comment" not in style
        assert "terminal.ansi.red" not in style

    def test_blocks_on_override_errors(self):
        with pytest.raises(OverrideValidationError):
            generate_zed_theme(_planned({"editor.background": "bogus"}), "Test", is_dark=True)
