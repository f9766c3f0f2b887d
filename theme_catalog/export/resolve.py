"""Resolve a single export field to one color from an ExportSource."""

from collections import namedtuple

from ..color import lighten_color, parse_color, to_hex_display
from .scopes import scope_matches_role

ResolvedColor = namedtuple("ResolvedColor", ["rgba", "raw", "source"])


def resolve_ui_color_keys(source, keys):
    """First UI color key that parses, trying the target payload before curated editor colors.

    Args:
        source: ExportSource
        keys: Ordered UI color keys (e.g. ["terminal.background", "editor.background"])

    Returns:
        ResolvedColor tagged "ui-color.<key>", or None
    """
    for key in keys:
        raw = source.ui_colors.get(key)
        if raw is None:
            raw = source.editor_colors.get(key)
        parsed = parse_color(raw)
        if parsed is not None:
            return ResolvedColor(parsed, str(raw), f"ui-color.{key}")
    return None


def _majority_token_color(source, role):
    counts = {}
    for rule in source.token_rules:
        if not rule.scopes or not scope_matches_role(rule.scopes, role):
            continue
        parsed = parse_color(rule.foreground)
        if parsed is None:
            continue
        key = f"{to_hex_display(parsed)}@{parsed.a:.4f}"
        entry = counts.get(key)
        if entry is None:
            counts[key] = [1, parsed, rule.foreground]
        else:
            entry[0] += 1

    best = None
    # dicts keep insertion order, so ties go to the first color encountered
    for entry in counts.values():
        if best is None or entry[0] > best[0]:
            best = entry
    if best is None:
        return None
    return ResolvedColor(best[1], str(best[2]), f"token-role.{role}")


def resolve_token_role(source, role):
    """Most frequent token rule color for role, else the curated palette entry.

    Returns:
        ResolvedColor tagged "token-role.<role>" or "palette.<role>", or None
    """
    if source.token_rules:
        resolved = _majority_token_color(source, role)
        if resolved is not None:
            return resolved

    raw = source.palette.get(role.lower())
    parsed = parse_color(raw)
    if parsed is not None:
        return ResolvedColor(parsed, raw, f"palette.{role}")
    return None


def resolve_token_role_with_fallbacks(source, roles):
    for role in roles:
        resolved = resolve_token_role(source, role)
        if resolved is not None:
            return resolved
    return None


def lightened(resolved, amount):
    """A resolved color moved toward white, keeping its provenance."""
    color = lighten_color(resolved.rgba, amount)
    return ResolvedColor(color, color.literal, resolved.source)
