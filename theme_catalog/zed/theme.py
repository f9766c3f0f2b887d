import json

from ..export.plan import ensure_buildable

SCHEMA_URL = "https://zed.dev/schema/themes/v0.2.0.json"
SYNTAX_PREFIX = "syntax."


def opacity_to_hex(opacity):
    """Convert 0.0-1.0 opacity to hex string (00-ff)."""
    clamped = max(0.0, min(1.0, opacity))
    return f"{int(round(clamped * 255)):02x}"


def zed_color(rgba):
    """#rrggbbaa, the color format Zed style keys expect."""
    return f"#{rgba.r:02x}{rgba.g:02x}{rgba.b:02x}{opacity_to_hex(rgba.a)}"


def build_zed_style(planned):
    """Build the style dict for a Zed theme from a planned export.

    Excluded fields are left out so Zed falls back to its own defaults.
    """
    style = {}
    syntax = {}
    for field in planned.fields:
        if field.key.startswith(SYNTAX_PREFIX):
            syntax[field.key[len(SYNTAX_PREFIX):]] = {
                "color": zed_color(field.rgba),
                "font_style": None,
                "font_weight": None,
            }
        else:
            style[field.key] = zed_color(field.rgba)
    if syntax:
        style["syntax"] = syntax
    return style


def generate_zed_theme(planned, theme_name, is_dark, author="Theme Catalog"):
    """Generate a Zed theme JSON file with a single theme variant.

    Args:
        planned: PlannedCatalog for the zed-theme target
        theme_name: Base name for the theme
        is_dark: Whether this is a dark theme
        author: Author recorded in the theme family

    Returns:
        JSON string of the theme data

    Raises:
        OverrideValidationError: if any field carries a rejected override
    """
    ensure_buildable(planned)
    variant_name = "Dark" if is_dark else "Light"

    theme_data = {
        "$schema": SCHEMA_URL,
        "name": theme_name,
        "author": author,
        "themes": [
            {
                "name": f"{theme_name} {variant_name}",
                "appearance": "dark" if is_dark else "light",
                "style": build_zed_style(planned),
            },
        ],
    }
    return json.dumps(theme_data, indent=2)
