from collections import namedtuple

from ..color import OPAQUE_ALPHA
from .resolve import resolve_token_role, resolve_token_role_with_fallbacks, resolve_ui_color_keys

ALPHA_ALLOWED = "allowed"
ALPHA_FORBIDDEN = "forbidden"

EDITOR_BACKGROUND = "editorBackground"
ACCENT_COLOR = "accentColor"

FieldDefinition = namedtuple(
    "FieldDefinition", ["key", "group", "label", "alpha_policy", "quick_tweak", "resolve"]
)


def alpha_allowed(policy, alpha):
    """A forbidden policy only accepts (nearly) opaque colors."""
    if policy == ALPHA_ALLOWED:
        return True
    return alpha >= OPAQUE_ALPHA


def ui_field(key, group, label, ui_keys, alpha=ALPHA_FORBIDDEN, quick_tweak=None):
    """Field resolved from target payload UI color keys, tried in order."""
    ui_keys = list(ui_keys)
    return FieldDefinition(
        key, group, label, alpha, quick_tweak,
        lambda source: resolve_ui_color_keys(source, ui_keys),
    )


def token_field(key, group, label, roles, alpha=ALPHA_FORBIDDEN, quick_tweak=None):
    """Field resolved from a syntax role, or the first role of a fallback list that resolves."""
    if isinstance(roles, str):
        role = roles

        def resolve(source):
            return resolve_token_role(source, role)
    else:
        roles = list(roles)

        def resolve(source):
            return resolve_token_role_with_fallbacks(source, roles)
    return FieldDefinition(key, group, label, alpha, quick_tweak, resolve)


def custom_field(key, group, label, resolve, alpha=ALPHA_FORBIDDEN, quick_tweak=None):
    return FieldDefinition(key, group, label, alpha, quick_tweak, resolve)


def unmapped_field(key, group, label, alpha=ALPHA_FORBIDDEN):
    """Field the target declares but nothing in a theme maps to."""
    return FieldDefinition(key, group, label, alpha, None, None)
