"""Perceptual color matching of catalog records against a target color."""

from ..color import delta_e, parse_color, to_hsl, to_lab
from .appearance import AppearanceCache

# Tolerance curve: strict at the low end, loosens quickly near 100
TOLERANCE_EXPONENT = 1.25
MAX_DELTA_E = 65

# Hue/saturation guard
SATURATED_TARGET_MIN = 0.28
GRAY_CANDIDATE_MAX = 0.16
SATURATED_CANDIDATE_MIN = 0.20
HUE_WINDOW_BASE = 10
HUE_WINDOW_SPAN = 58

AVERAGE_ROLES = frozenset({"average", "appearance"})


def clamp_tolerance(tolerance):
    return max(0, min(100, tolerance))


def tolerance_to_max_distance(tolerance):
    """Map a 0-100 tolerance to the largest deltaE still counted as a match."""
    t = clamp_tolerance(tolerance)
    return (t / 100) ** TOLERANCE_EXPONENT * MAX_DELTA_E


def candidate_colors_for_role(record, role, profiler=None):
    """Colors of a record that a search under role compares against.

    Args:
        record: ThemeRecord
        role: "background", "average", "any" or a syntax role name
        profiler: AppearanceCache memoizing the "average" role; a fresh
            one is used when omitted

    Returns:
        list of hex strings (unparsed)
    """
    if role == "background":
        return [record.bg]
    if role in AVERAGE_ROLES:
        if profiler is None:
            profiler = AppearanceCache()
        avg = profiler.average_hex(record)
        return [avg] if avg else []
    if role == "any":
        return record.syntax_hexes() + [record.bg]
    hex_value = record.syntax_hex(role)
    return [hex_value] if hex_value else []


def circular_hue_distance(h1, h2):
    diff = abs(h1 - h2) % 360
    return min(diff, 360 - diff)


def _guard(target_hsl, candidate_hsl, tolerance):
    if target_hsl.s >= SATURATED_TARGET_MIN and candidate_hsl.s <= GRAY_CANDIDATE_MAX:
        return False
    if target_hsl.s >= SATURATED_TARGET_MIN and candidate_hsl.s >= SATURATED_CANDIDATE_MIN:
        window = HUE_WINDOW_BASE + (clamp_tolerance(tolerance) / 100) * HUE_WINDOW_SPAN
        return circular_hue_distance(target_hsl.h, candidate_hsl.h) <= window
    return True


def hue_guard_passes(target_hex, candidate_hex, tolerance):
    """Reject matches a vivid target would only make through lightness.

    A saturated target never matches a near-gray candidate, and two
    saturated colors must sit within a tolerance-dependent hue window.
    """
    target = parse_color(target_hex)
    candidate = parse_color(candidate_hex)
    if target is None or candidate is None:
        return False
    return _guard(to_hsl(target), to_hsl(candidate), tolerance)


class Matcher:
    """A target color prepared once for scanning many records."""

    def __init__(self, target_hex, role, tolerance, profiler=None):
        self.role = role
        self.tolerance = tolerance
        self.profiler = profiler if profiler is not None else AppearanceCache()
        self.target = parse_color(target_hex)
        self.max_distance = tolerance_to_max_distance(tolerance)
        if self.target is not None:
            self._target_lab = to_lab(self.target)
            self._target_hsl = to_hsl(self.target)

    @property
    def active(self):
        return self.target is not None

    def matches(self, record):
        if self.target is None:
            return True
        for hex_value in candidate_colors_for_role(record, self.role, self.profiler):
            candidate = parse_color(hex_value)
            if candidate is None:
                continue
            if not _guard(self._target_hsl, to_hsl(candidate), self.tolerance):
                continue
            if delta_e(self._target_lab, to_lab(candidate)) <= self.max_distance:
                return True
        return False


def record_matches(record, target_hex, role, tolerance, profiler=None):
    """True if any candidate color of record under role matches target_hex.

    An unparseable target applies no filter; a record without candidates
    for role never matches.
    """
    return Matcher(target_hex, role, tolerance, profiler).matches(record)
