"""Catalog record models."""

from collections import namedtuple
from dataclasses import dataclass, field

SyntaxEntry = namedtuple("SyntaxEntry", ["hex", "category"])

# Roles every catalog summary may carry, plus the richer ones some targets use
CORE_SYNTAX_ROLES = (
    "comment",
    "string",
    "keyword",
    "function",
    "variable",
    "number",
    "type",
    "operator",
)
EXTENDED_SYNTAX_ROLES = (
    "attribute",
    "character",
    "preprocessor",
    "url",
    "regex",
    "class",
    "constant",
    "macro",
    "mark",
    "declaration",
)
SYNTAX_ROLES = CORE_SYNTAX_ROLES + EXTENDED_SYNTAX_ROLES


@dataclass(frozen=True)
class Appearance:
    """Categorical descriptors of a theme's overall look."""

    avg_hex: str
    hue_bucket: str
    style_tags: frozenset = frozenset()
    contrast_band: str = ""
    saturation_band: str = ""
    brightness_band: str = ""

    @property
    def is_complete(self):
        """All bands and the hue are set and at least one style tag is present."""
        return bool(
            self.avg_hex
            and self.hue_bucket
            and self.style_tags
            and self.contrast_band
            and self.saturation_band
            and self.brightness_band
        )

    def to_dict(self):
        return {
            "avgHex": self.avg_hex,
            "hueBucket": self.hue_bucket,
            "styleTags": sorted(self.style_tags),
            "contrastBand": self.contrast_band,
            "saturationBand": self.saturation_band,
            "brightnessBand": self.brightness_band,
        }


@dataclass(frozen=True, eq=False)
class ThemeRecord:
    """One read-only catalog entry."""

    id: str
    bg: str
    badge: str = ""
    bg_category: str = ""
    syntax_summary: dict = field(default_factory=dict)
    name: str = ""
    publisher: str = ""
    extension_name: str = ""
    description: str = ""
    appearance: Appearance = None

    def syntax_hex(self, role):
        entry = self.syntax_summary.get(role)
        if entry is None or not entry.hex:
            return None
        return entry.hex

    def syntax_hexes(self):
        """Present syntax hexes in summary order."""
        return [entry.hex for entry in self.syntax_summary.values() if entry and entry.hex]
