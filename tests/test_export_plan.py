"""Tests for theme_catalog.export.plan and json_export."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from theme_catalog.catalog import ThemeRecord
from theme_catalog.export import (
    OverrideValidationError,
    QuickTweaks,
    build_export_source,
    build_strict_export_plan,
    ensure_buildable,
    export_plan_json,
    override_errors,
    plan_to_json,
    token_field,
    ui_field,
    unmapped_field,
)
from theme_catalog.export.fields import ALPHA_ALLOWED, alpha_allowed
from theme_catalog.targets import VIM_FIELDS, XCODE_FIELDS

THEME = ThemeRecord(id="t", bg="#2b2d30", name="Test")

PAYLOAD = {"colors": {"editor.background": "#2b2d30", "editor.foreground": "#eeeeee"}}
DETAIL = {"tokenPalette": [{"role": "comment", "hex": "#6a9955"}]}


def _source(payload=None, detail=DETAIL, quick_tweaks=None):
    return build_export_source(THEME, PAYLOAD if payload is None else payload, detail, quick_tweaks)


def _included(planned) -> dict:
    return {entry["key"]: entry for entry in planned.plan["included"]}


def _excluded(planned) -> dict:
    return {entry["key"]: entry["reason"] for entry in planned.plan["excluded"]}


class TestAlphaPolicy:
    def test_allowed(self):
        assert alpha_allowed("allowed", 0.0)

    def test_forbidden(self):
        assert alpha_allowed("forbidden", 1.0)
        assert alpha_allowed("forbidden", 0.9995)
        assert not alpha_allowed("forbidden", 0.5)


class TestVimScenario:
    def test_resolution(self):
        planned = build_strict_export_plan("vim-colorscheme", _source(), VIM_FIELDS)
        included = _included(planned)

        assert included["Normal.bg"] == {
            "key": "Normal.bg",
            "value": "#2b2d30",
            "source": "ui-color.editor.background",
            "confidence": "exact",
        }
        assert included["Comment.fg"]["value"] == "#6a9955"
        assert included["Comment.fg"]["source"] == "palette.comment"
        assert _excluded(planned)["Visual.bg"] == "no-source"
        assert "Visual.bg" not in included

    def test_every_field_accounted_for(self):
        planned = build_strict_export_plan("vim-colorscheme", _source(), VIM_FIELDS)
        assert len(planned.plan["included"]) + len(planned.plan["excluded"]) == len(VIM_FIELDS)

    def test_empty_source(self):
        planned = build_strict_export_plan("vim-colorscheme", _source(payload={}, detail=None), VIM_FIELDS)
        assert planned.plan["included"] == []
        assert set(_excluded(planned).values()) == {"no-source"}

    def test_deterministic(self):
        first = build_strict_export_plan("vim-colorscheme", _source(), VIM_FIELDS)
        second = build_strict_export_plan("vim-colorscheme", _source(), VIM_FIELDS)
        assert first.plan == second.plan

    def test_groups_in_catalog_order(self):
        planned = build_strict_export_plan("vim-colorscheme", _source(), VIM_FIELDS)
        assert list(planned.groups) == ["Editor", "Syntax"]
        assert [f.key for f in planned.groups["Editor"]] == ["Normal.bg", "Normal.fg"]


class TestExclusions:
    def test_no_mapping(self):
        fields = [unmapped_field("SELECTION_FOREGROUND", "Editor", "Selection foreground")]
        planned = build_strict_export_plan("x", _source(), fields)
        assert _excluded(planned) == {"SELECTION_FOREGROUND": "no-mapping"}

    def test_translucent_resolved_value_on_forbidden_field(self):
        source = _source(payload={"colors": {"editor.background": "#00000080"}})
        planned = build_strict_export_plan("vim-colorscheme", source, VIM_FIELDS)
        assert _excluded(planned)["Normal.bg"] == "no-source"

    def test_translucent_resolved_value_on_allowed_field(self):
        source = _source(payload={"colors": {"editor.background": "#00000080"}})
        planned = build_strict_export_plan("xcode-dvtcolortheme", source, XCODE_FIELDS)
        assert _included(planned)["DVTSourceTextBackground"]["value"] == "rgba(0, 0, 0, 0.502)"


class TestOverrides:
    def test_valid_override(self):
        planned = build_strict_export_plan(
            "vim-colorscheme", _source(), VIM_FIELDS, overrides={"Normal.bg": "#101010"}
        )
        field = planned.field("Normal.bg")
        assert field.value == "#101010"
        assert field.overridden
        assert field.override_error is None
        assert field.source == "ui-color.editor.background"
        assert override_errors(planned) == []
        ensure_buildable(planned)

    def test_invalid_override_keeps_resolved_value(self):
        planned = build_strict_export_plan(
            "vim-colorscheme", _source(), VIM_FIELDS, overrides={"Normal.bg": "not a color"}
        )
        field = planned.field("Normal.bg")
        assert field.value == "#2b2d30"
        assert field.override_error == "invalid"
        assert field.overridden
        assert _included(planned)["Normal.bg"]["value"] == "#2b2d30"

    def test_alpha_override_on_forbidden_field(self):
        planned = build_strict_export_plan(
            "vim-colorscheme", _source(), VIM_FIELDS, overrides={"Normal.bg": "#10101080"}
        )
        assert planned.field("Normal.bg").override_error == "alpha"
        assert planned.field("Normal.bg").value == "#2b2d30"

    def test_alpha_override_on_allowed_field(self):
        planned = build_strict_export_plan(
            "xcode-dvtcolortheme", _source(), XCODE_FIELDS,
            overrides={"DVTSourceTextBackground": "rgba(16, 16, 16, 0.5)"},
        )
        assert planned.field("DVTSourceTextBackground").value == "rgba(16, 16, 16, 0.5)"

    def test_errors_block_build(self):
        planned = build_strict_export_plan(
            "vim-colorscheme", _source(), VIM_FIELDS,
            overrides={"Normal.bg": "bogus", "Normal.fg": "#ffffff80"},
        )
        assert override_errors(planned) == [("Normal.bg", "invalid"), ("Normal.fg", "alpha")]
        with pytest.raises(OverrideValidationError) as excinfo:
            ensure_buildable(planned)
        assert excinfo.value.errors == [("Normal.bg", "invalid"), ("Normal.fg", "alpha")]
        assert isinstance(excinfo.value, ValueError)

    def test_override_for_excluded_field_is_ignored(self):
        planned = build_strict_export_plan(
            "vim-colorscheme", _source(), VIM_FIELDS, overrides={"Visual.bg": "#123456"}
        )
        assert _excluded(planned)["Visual.bg"] == "no-source"

    def test_blank_override_is_ignored(self):
        planned = build_strict_export_plan(
            "vim-colorscheme", _source(), VIM_FIELDS, overrides={"Normal.bg": ""}
        )
        assert not planned.field("Normal.bg").overridden


class TestQuickTweaks:
    def test_editor_background_tweak(self):
        tweaks = QuickTweaks(editor_background="#000000")
        planned = build_strict_export_plan("vim-colorscheme", _source(quick_tweaks=tweaks), VIM_FIELDS)
        assert planned.field("Normal.bg").value == "#000000"
        assert planned.field("Normal.bg").overridden
        assert planned.field("Normal.fg").value == "#eeeeee"

    def test_explicit_tweaks_argument(self):
        planned = build_strict_export_plan(
            "vim-colorscheme", _source(), VIM_FIELDS, quick_tweaks=QuickTweaks(editor_background="#000000")
        )
        assert planned.field("Normal.bg").value == "#000000"

    def test_user_override_beats_tweak(self):
        tweaks = QuickTweaks(editor_background="#000000")
        planned = build_strict_export_plan(
            "vim-colorscheme", _source(quick_tweaks=tweaks), VIM_FIELDS, overrides={"Normal.bg": "#111111"}
        )
        assert planned.field("Normal.bg").value == "#111111"

    def test_invalid_override_falls_back_to_tweak(self):
        tweaks = QuickTweaks(editor_background="#000000")
        planned = build_strict_export_plan(
            "vim-colorscheme", _source(quick_tweaks=tweaks), VIM_FIELDS, overrides={"Normal.bg": "bogus"}
        )
        field = planned.field("Normal.bg")
        assert field.value == "#000000"
        assert field.override_error == "invalid"

    def test_translucent_tweak_ignored_on_forbidden_field(self):
        tweaks = QuickTweaks(editor_background="#00000080")
        planned = build_strict_export_plan("vim-colorscheme", _source(quick_tweaks=tweaks), VIM_FIELDS)
        field = planned.field("Normal.bg")
        assert field.value == "#2b2d30"
        assert not field.overridden
        assert field.override_error is None

    def test_tweak_needs_a_resolved_field(self):
        tweaks = QuickTweaks(accent_color="#ff00ff")
        planned = build_strict_export_plan("vim-colorscheme", _source(quick_tweaks=tweaks), VIM_FIELDS)
        assert _excluded(planned)["Statement.fg"] == "no-source"

    def test_accent_tweak(self):
        payload = dict(PAYLOAD, tokenColors=[{"scope": "keyword", "settings": {"foreground": "#569cd6"}}])
        tweaks = QuickTweaks(accent_color="#ff00ff")
        planned = build_strict_export_plan(
            "vim-colorscheme", _source(payload=payload, quick_tweaks=tweaks), VIM_FIELDS
        )
        assert planned.field("Statement.fg").value == "#ff00ff"
        assert planned.field("Statement.fg").source == "token-role.keyword"


class TestCustomFields:
    def test_field_helpers(self):
        fields = [
            ui_field("bg", "Editor", "Background", ["editor.background"], alpha=ALPHA_ALLOWED),
            token_field("comment", "Syntax", "Comment", ["regex", "comment"]),
        ]
        planned = build_strict_export_plan("custom", _source(), fields)
        assert _included(planned)["comment"]["source"] == "palette.comment"
        assert [f.key for f in planned.fields] == ["bg", "comment"]


class TestJsonExport:
    def test_plan_to_json(self):
        planned = build_strict_export_plan(
            "vim-colorscheme", _source(), VIM_FIELDS, overrides={"Normal.bg": "bogus"}
        )
        data = plan_to_json(planned, theme=THEME)
        assert data["target"] == "vim-colorscheme"
        assert data["included"] == planned.plan["included"]
        assert data["_overrides"] == {"Normal.bg": {"raw": "#2b2d30", "error": "invalid"}}
        assert data["_groups"]["Syntax"] == ["Comment.fg"]
        assert data["_theme"]["id"] == "t"

    def test_export_plan_json(self, tmp_path: Path):
        planned = build_strict_export_plan("vim-colorscheme", _source(), VIM_FIELDS)
        path = tmp_path / "plan.json"
        export_plan_json(planned, path)
        assert json.loads(path.read_text()) == plan_to_json(planned)
