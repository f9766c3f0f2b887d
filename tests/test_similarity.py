"""Tests for theme_catalog.search.similarity."""

from __future__ import annotations

import pytest

from theme_catalog.catalog import SyntaxEntry, ThemeRecord
from theme_catalog.search import AppearanceCache
from theme_catalog.search.similarity import (
    MAX_DELTA_E,
    Matcher,
    candidate_colors_for_role,
    circular_hue_distance,
    hue_guard_passes,
    record_matches,
    tolerance_to_max_distance,
)


def _record(bg="#1e1e1e", **syntax) -> ThemeRecord:
    return ThemeRecord(
        id="rec",
        bg=bg,
        syntax_summary={role: SyntaxEntry(hex_value, "") for role, hex_value in syntax.items()},
    )


class TestTolerance:
    def test_endpoints(self):
        assert tolerance_to_max_distance(0) == 0
        assert tolerance_to_max_distance(100) == pytest.approx(MAX_DELTA_E)

    def test_non_decreasing(self):
        values = [tolerance_to_max_distance(t) for t in range(101)]
        assert values == sorted(values)

    def test_out_of_range_is_clamped(self):
        assert tolerance_to_max_distance(-10) == 0
        assert tolerance_to_max_distance(150) == pytest.approx(MAX_DELTA_E)


class TestCandidates:
    def test_background(self):
        assert candidate_colors_for_role(_record(bg="#101010"), "background") == ["#101010"]

    def test_any_includes_syntax_and_background(self):
        rec = _record(bg="#101010", comment="#6a9955", string="#ce9178")
        assert candidate_colors_for_role(rec, "any") == ["#6a9955", "#ce9178", "#101010"]

    def test_missing_role(self):
        assert candidate_colors_for_role(_record(), "keyword") == []

    def test_average_derived_without_profiler(self):
        assert candidate_colors_for_role(_record(), "average") == ["#1e1e1e"]

    def test_average_empty_for_malformed_background(self):
        assert candidate_colors_for_role(_record(bg="zzz"), "average") == []


class TestHueGuard:
    def test_circular_distance_wraps(self):
        assert circular_hue_distance(350, 10) == 20

    def test_vivid_target_rejects_gray(self):
        assert not hue_guard_passes("#22c55e", "#808080", 50)

    def test_vivid_target_rejects_distant_hue(self):
        assert not hue_guard_passes("#22c55e", "#ef4444", 100)

    def test_similar_hues_pass(self):
        assert hue_guard_passes("#22c55e", "#16a34a", 28)

    def test_gray_target_is_unguarded(self):
        assert hue_guard_passes("#808080", "#22c55e", 28)

    def test_unparseable_fails(self):
        assert not hue_guard_passes("#22c55e", "bogus", 28)


class TestRecordMatches:
    def test_exact_background_at_zero_tolerance(self):
        rec = _record(bg="#282a36")
        assert record_matches(rec, "#282a36", "background", 0)

    def test_near_background_fails_at_zero_tolerance(self):
        assert not record_matches(_record(bg="#272822"), "#282a36", "background", 0)

    def test_gray_comment_does_not_match_vivid_green(self):
        rec = _record(bg="#22c55e", comment="#808080")
        assert not record_matches(rec, "#22c55e", "comment", 40)
        assert record_matches(rec, "#22c55e", "background", 40)

    def test_malformed_background_never_matches(self):
        assert not record_matches(_record(bg="zzz"), "#000000", "background", 100)

    def test_any_role_scans_syntax(self):
        rec = _record(bg="#000000", keyword="#ff0000")
        assert record_matches(rec, "#ff0000", "any", 0)

    def test_average_role_with_and_without_profiler(self):
        rec = _record(bg="#ff0000")
        assert record_matches(rec, "#ff0000", "average", 0, AppearanceCache())
        assert record_matches(rec, "#ff0000", "average", 0)

    def test_average_role_fills_supplied_cache(self):
        cache = AppearanceCache()
        assert record_matches(_record(bg="#ff0000"), "#ff0000", "average", 0, cache)
        assert "rec" in cache

    def test_average_role_matches_without_profiler(self):
        rec = ThemeRecord(id="rec", bg="#ff0000")
        assert record_matches(rec, "#ff0000", "average", 100)
        assert Matcher("#ff0000", "appearance", 100).matches(rec)

    def test_unparseable_target_applies_no_filter(self):
        matcher = Matcher("not-a-color", "background", 10)
        assert not matcher.active
        assert matcher.matches(_record())
