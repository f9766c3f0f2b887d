"""Derive cacheable appearance descriptors (hue, style tags, bands) for catalog records."""

import logging
import math

import numpy as np

from ..catalog.models import Appearance
from ..color import contrast_ratio, parse_color, relative_luminance, rgb_to_hex, to_hsl

logger = logging.getLogger(__name__)

NEUTRAL_SATURATION = 0.14
# Saturation a syntax hue needs before it counts toward hue spread
SPREAD_MIN_SATURATION = 0.20

# (bucket, start, end) in degrees; red wraps across 0
HUE_BUCKETS = (
    ("red", 345, 15),
    ("orange", 15, 45),
    ("yellow", 45, 70),
    ("green", 70, 165),
    ("cyan", 165, 195),
    ("blue", 195, 255),
    ("purple", 255, 290),
    ("pink", 290, 345),
)

LOW_BAND_MAX = 34
MEDIUM_BAND_MAX = 67

EARTHY_BUCKETS = frozenset({"orange", "yellow", "green"})
MONOCHROME_MAX_SPREAD = 14
MONOCHROME_MAX_SATURATION = 10


def hue_bucket(h, s):
    """Map an HSL hue/saturation pair (s in 0..1) to one of eight hue names or neutral."""
    if s < NEUTRAL_SATURATION:
        return "neutral"
    h = h % 360
    for name, start, end in HUE_BUCKETS:
        if start > end:
            if h >= start or h < end:
                return name
        elif start <= h < end:
            return name
    return "neutral"


def band(score):
    if score < LOW_BAND_MAX:
        return "low"
    if score < MEDIUM_BAND_MAX:
        return "medium"
    return "high"


def hue_spread(hues):
    """Circular spread of hue angles in degrees: (1 - |mean unit vector|) * 180."""
    if not hues:
        return 0.0
    radians = np.radians(np.asarray(hues, dtype=float))
    resultant = math.hypot(float(np.cos(radians).mean()), float(np.sin(radians).mean()))
    return (1 - resultant) * 180


def _contrast_score(bg, syntax_colors):
    if bg is None or not syntax_colors:
        return 0.0
    bg_lum = relative_luminance(*bg.rgb)
    ratios = [contrast_ratio(bg_lum, relative_luminance(*c.rgb)) for c in syntax_colors]
    mean_ratio = sum(ratios) / len(ratios)
    return max(0.0, min(100.0, (mean_ratio - 1) / 20 * 100))


def style_tags(hue, saturation, brightness, contrast, spread):
    """Non-exclusive style tags from 0-100 scores, hue bucket and syntax hue spread."""
    tags = set()
    if saturation <= 45 and brightness >= 62:
        tags.add("pastel")
    if saturation >= 62:
        tags.add("vivid")
    if 20 <= saturation <= 55 and 18 <= contrast <= 72:
        tags.add("muted")
    if saturation >= 70 and contrast >= 68:
        tags.add("neon")
    if spread <= MONOCHROME_MAX_SPREAD or saturation <= MONOCHROME_MAX_SATURATION:
        tags.add("monochrome")
    if hue in EARTHY_BUCKETS and saturation <= 60 and brightness <= 65:
        tags.add("earthy")
    return frozenset(tags)


def derive_appearance(record):
    """Compute the appearance of a record from its background, syntax and badge colors.

    The background is weighted twice. Colors that fail to parse are skipped.
    """
    bg = parse_color(record.bg)
    syntax_colors = [c for c in (parse_color(h) for h in record.syntax_hexes()) if c is not None]
    badge = parse_color(record.badge) if record.badge else None

    weighted = ([bg, bg] if bg is not None else []) + syntax_colors
    if badge is not None:
        weighted.append(badge)

    if not weighted:
        return Appearance(
            avg_hex="",
            hue_bucket="neutral",
            style_tags=frozenset(),
            contrast_band="low",
            saturation_band="low",
            brightness_band="low",
        )

    channels = np.array([c.rgb for c in weighted], dtype=float)
    avg = np.floor(channels.mean(axis=0) + 0.5).astype(int)
    avg_hex = rgb_to_hex(*(int(v) for v in avg))
    avg_hsl = to_hsl(parse_color(avg_hex))

    hsls = [to_hsl(c) for c in weighted]
    saturation = float(np.mean([h.s for h in hsls])) * 100
    brightness = float(np.mean([h.l for h in hsls])) * 100
    contrast = _contrast_score(bg, syntax_colors)

    saturated_hues = [h.h for h in map(to_hsl, syntax_colors) if h.s >= SPREAD_MIN_SATURATION]
    spread = hue_spread(saturated_hues)
    bucket = hue_bucket(avg_hsl.h, avg_hsl.s)

    return Appearance(
        avg_hex=avg_hex,
        hue_bucket=bucket,
        style_tags=style_tags(bucket, saturation, brightness, contrast, spread),
        contrast_band=band(contrast),
        saturation_band=band(saturation),
        brightness_band=band(brightness),
    )


class AppearanceCache:
    """Per-session appearance memo keyed by record id.

    Insertion is insert-if-absent, so concurrent precomputation may
    compute a record twice but always keeps the first stored result.
    """

    def __init__(self):
        self._entries = {}

    def __len__(self):
        return len(self._entries)

    def __contains__(self, record_id):
        return record_id in self._entries

    def get(self, record):
        """Return the record's appearance, deriving it at most once per id."""
        if record.appearance is not None and record.appearance.is_complete:
            return record.appearance
        cached = self._entries.get(record.id)
        if cached is not None:
            return cached
        derived = derive_appearance(record)
        logger.debug("Derived appearance for %s: %s", record.id, derived.hue_bucket)
        return self._entries.setdefault(record.id, derived)

    def average_hex(self, record):
        return self.get(record).avg_hex

    def clear(self):
        self._entries.clear()
