"""Export sources: everything one export session may draw colors from."""

from dataclasses import dataclass, field

from ..catalog.models import ThemeRecord
from .scopes import normalize_scopes


@dataclass(frozen=True)
class TokenRule:
    """One token coloring rule of a target payload."""

    scopes: tuple = ()
    foreground: str = None


@dataclass(frozen=True)
class QuickTweaks:
    editor_background: str = None
    accent_color: str = None

    def value_for(self, binding):
        if binding == "editorBackground":
            return self.editor_background
        if binding == "accentColor":
            return self.accent_color
        return None


@dataclass(frozen=True, eq=False)
class ExportSource:
    """A theme record plus the target payload, curated detail and live tweaks.

    Rebuilt whenever any input changes; never mutated.
    """

    theme: ThemeRecord
    ui_colors: dict = field(default_factory=dict)
    token_rules: tuple = ()
    palette: dict = field(default_factory=dict)
    editor_colors: dict = field(default_factory=dict)
    quick_tweaks: QuickTweaks = field(default_factory=QuickTweaks)


def token_rules_from_theme_json(theme_json):
    """Read a VS Code style tokenColors array into TokenRule entries.

    Entries without a usable scope are dropped.
    """
    token_colors = theme_json.get("tokenColors") if isinstance(theme_json, dict) else None
    if not isinstance(token_colors, list):
        return []
    rules = []
    for entry in token_colors:
        if not isinstance(entry, dict):
            continue
        scopes = normalize_scopes(entry.get("scope"))
        if not scopes:
            continue
        settings = entry.get("settings")
        foreground = settings.get("foreground") if isinstance(settings, dict) else None
        rules.append(TokenRule(tuple(scopes), foreground if isinstance(foreground, str) else None))
    return rules


def _string_map(value):
    if not isinstance(value, dict):
        return {}
    return {k: v for k, v in value.items() if isinstance(k, str) and isinstance(v, str)}


def _palette_from_detail(detail):
    palette = {}
    entries = detail.get("tokenPalette") if isinstance(detail, dict) else None
    if not isinstance(entries, list):
        return palette
    for item in entries:
        if not isinstance(item, dict):
            continue
        role, hex_value = item.get("role"), item.get("hex")
        if isinstance(role, str) and isinstance(hex_value, str):
            palette.setdefault(role.lower(), hex_value)
    return palette


def build_export_source(theme, payload, detail=None, quick_tweaks=None):
    """Assemble an ExportSource from raw catalog JSON.

    Args:
        theme: ThemeRecord being exported
        payload: Target theme JSON ({"colors", "tokenColors"}), or a payload
            record wrapping it under "themeJson"
        detail: Curated detail ({"tokenPalette", "editorColors"}) or None
        quick_tweaks: QuickTweaks or None
    """
    theme_json = payload.get("themeJson", payload) if isinstance(payload, dict) else {}
    if not isinstance(theme_json, dict):
        theme_json = {}
    return ExportSource(
        theme=theme,
        ui_colors=_string_map(theme_json.get("colors")),
        token_rules=tuple(token_rules_from_theme_json(theme_json)),
        palette=_palette_from_detail(detail),
        editor_colors=_string_map(detail.get("editorColors")) if isinstance(detail, dict) else {},
        quick_tweaks=quick_tweaks or QuickTweaks(),
    )
