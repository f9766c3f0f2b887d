from .appearance import AppearanceCache, derive_appearance, hue_bucket
from .filters import ThemeFilters, apply_theme_filters
from .precompute import precompute_appearance
from .similarity import (
    Matcher,
    candidate_colors_for_role,
    hue_guard_passes,
    record_matches,
    tolerance_to_max_distance,
)

__all__ = [
    "AppearanceCache",
    "Matcher",
    "ThemeFilters",
    "apply_theme_filters",
    "candidate_colors_for_role",
    "derive_appearance",
    "hue_bucket",
    "hue_guard_passes",
    "precompute_appearance",
    "record_matches",
    "tolerance_to_max_distance",
]
