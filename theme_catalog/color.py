import colorsys
import math
import re
from collections import namedtuple
from dataclasses import dataclass, field

import numpy as np

LabVector = namedtuple("LabVector", ["L", "a", "b"])
HslValue = namedtuple("HslValue", ["h", "s", "l"])

# Alpha at or above this counts as fully opaque
OPAQUE_ALPHA = 0.999

# sRGB -> XYZ (D65)
SRGB_TO_XYZ = np.array(
    [
        [0.4124, 0.3576, 0.1805],
        [0.2126, 0.7152, 0.0722],
        [0.0193, 0.1192, 0.9505],
    ]
)
D65_WHITE = np.array([0.95047, 1.0, 1.08883])

SRGB_PIVOT = 0.04045
XYZ_PIVOT = 0.008856

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_RE = re.compile(r"^rgba?\((.+)\)$", re.IGNORECASE)


@dataclass(frozen=True)
class ColorValue:
    """A parsed color: clamped bytes, alpha in [0, 1] and the literal it came from."""

    r: int
    g: int
    b: int
    a: float = 1.0
    literal: str = field(default="", compare=False)

    @property
    def rgb(self):
        return (self.r, self.g, self.b)

    @property
    def is_opaque(self):
        return self.a >= OPAQUE_ALPHA


def clamp_byte(value):
    if not math.isfinite(value):
        return 0
    return max(0, min(255, int(math.floor(value + 0.5))))


def clamp_alpha(value):
    if not math.isfinite(value):
        return 1.0
    return max(0.0, min(1.0, float(value)))


def _parse_hex(raw):
    m = _HEX_RE.match(raw)
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return r, g, b, clamp_alpha(a)


def _parse_functional(raw):
    m = _FUNC_RE.match(raw)
    if not m:
        return None
    parts = [p.strip() for p in m.group(1).split(",")]
    if len(parts) not in (3, 4):
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if not all(math.isfinite(v) for v in values):
        return None
    a = values[3] if len(values) == 4 else 1.0
    return clamp_byte(values[0]), clamp_byte(values[1]), clamp_byte(values[2]), clamp_alpha(a)


def parse_color(literal):
    """Parse a hex or rgb()/rgba() color literal.

    Args:
        literal: Any value; only strings can parse

    Returns:
        ColorValue, or None for malformed input and "transparent"
    """
    if not isinstance(literal, str):
        return None
    raw = literal.strip()
    if not raw or raw.lower() == "transparent":
        return None
    parsed = _parse_hex(raw) if raw.startswith("#") else _parse_functional(raw)
    if parsed is None:
        return None
    r, g, b, a = parsed
    return ColorValue(r, g, b, a, literal)


def to_lab(color):
    """Convert a ColorValue to CIE Lab (D65)."""
    rgb = np.array(color.rgb, dtype=float) / 255.0
    linear = np.where(rgb > SRGB_PIVOT, ((rgb + 0.055) / 1.055) ** 2.4, rgb / 12.92)
    xyz = (SRGB_TO_XYZ @ linear) / D65_WHITE
    f = np.where(xyz > XYZ_PIVOT, np.cbrt(xyz), 7.787 * xyz + 16 / 116)
    return LabVector(
        float(116 * f[1] - 16),
        float(500 * (f[0] - f[1])),
        float(200 * (f[1] - f[2])),
    )


def hex_to_lab(literal):
    color = parse_color(literal)
    return to_lab(color) if color is not None else None


def delta_e(lab1, lab2):
    """CIE76 distance: Euclidean distance between two Lab vectors."""
    return float(np.linalg.norm(np.subtract(lab1, lab2, dtype=float)))


def to_hsl(color):
    """Return HslValue with hue in degrees and s/l in 0..1."""
    h, l, s = colorsys.rgb_to_hls(color.r / 255, color.g / 255, color.b / 255)
    return HslValue((h * 360) % 360, s, l)


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def to_hex_display(color):
    return rgb_to_hex(*color.rgb)


def to_functional_display(color):
    alpha = format(round(color.a, 3), "g")
    return f"rgba({color.r}, {color.g}, {color.b}, {alpha})"


def display_value(color):
    """Hex for opaque colors, rgba(...) when the color carries transparency."""
    if color.is_opaque:
        return to_hex_display(color)
    return to_functional_display(color)


def blend_colors(color1, color2, factor):
    """Blend two colors together. factor=0 returns color1, factor=1 returns color2.

    Alpha is taken from color1.
    """
    r = clamp_byte(color1.r + (color2.r - color1.r) * factor)
    g = clamp_byte(color1.g + (color2.g - color1.g) * factor)
    b = clamp_byte(color1.b + (color2.b - color1.b) * factor)
    blended = ColorValue(r, g, b, color1.a)
    return ColorValue(r, g, b, color1.a, display_value(blended))


def lighten_color(color, amount):
    """Move a color toward white by amount (0.0-1.0)."""
    return blend_colors(color, ColorValue(255, 255, 255), amount)
