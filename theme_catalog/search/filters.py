"""Catalog search: text query, background category, color match and appearance facets."""

from dataclasses import dataclass, field

from .similarity import Matcher

DEFAULT_TOLERANCE = 28
SORT_KEYS = {
    "name": lambda r: r.name.lower(),
    "publisher": lambda r: r.publisher.lower(),
    "background": lambda r: r.bg.lower(),
}


@dataclass
class ThemeFilters:
    q: str = ""
    bg: str = "all"
    token: str = "any"
    hex: str = ""
    tolerance: int = DEFAULT_TOLERANCE
    sort: str = "name"
    hue: str = "all"
    styles: frozenset = field(default_factory=frozenset)
    contrast: str = "all"
    saturation: str = "all"
    brightness: str = "all"

    @property
    def uses_appearance(self):
        return bool(
            self.styles
            or self.hue != "all"
            or self.contrast != "all"
            or self.saturation != "all"
            or self.brightness != "all"
        )


def _text_matches(record, q):
    text = f"{record.name} {record.extension_name} {record.publisher} {record.description}"
    return q in text.lower()


def _appearance_matches(appearance, filters):
    if filters.hue != "all" and appearance.hue_bucket != filters.hue:
        return False
    if filters.styles and not set(filters.styles) <= set(appearance.style_tags or ()):
        return False
    for wanted, actual in (
        (filters.contrast, appearance.contrast_band),
        (filters.saturation, appearance.saturation_band),
        (filters.brightness, appearance.brightness_band),
    ):
        if wanted != "all" and actual != wanted:
            return False
    return True


def apply_theme_filters(records, filters, cache=None):
    """Filter and sort catalog records.

    Args:
        records: Iterable of ThemeRecord
        filters: ThemeFilters
        cache: AppearanceCache; required for facet filters and the "average" role

    Returns:
        list of matching records, sorted by filters.sort (stable)
    """
    if filters.uses_appearance and cache is None:
        raise ValueError("appearance facets need an AppearanceCache")

    q = filters.q.strip().lower()
    matcher = Matcher(filters.hex, filters.token, filters.tolerance, cache)

    result = []
    for record in records:
        if q and not _text_matches(record, q):
            continue
        if filters.bg != "all" and record.bg_category != filters.bg:
            continue
        if not matcher.matches(record):
            continue
        if filters.uses_appearance and not _appearance_matches(cache.get(record), filters):
            continue
        result.append(record)

    sort_key = SORT_KEYS.get(filters.sort, SORT_KEYS["name"])
    return sorted(result, key=sort_key)
