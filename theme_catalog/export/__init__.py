from .fields import FieldDefinition, alpha_allowed, token_field, ui_field, unmapped_field
from .json_export import export_plan_json, plan_to_json
from .plan import (
    OverrideValidationError,
    PlannedCatalog,
    PlannedField,
    build_strict_export_plan,
    ensure_buildable,
    override_errors,
)
from .resolve import (
    ResolvedColor,
    resolve_token_role,
    resolve_token_role_with_fallbacks,
    resolve_ui_color_keys,
)
from .scopes import ROLE_SCOPES, normalize_scopes, scope_matches_role
from .source import ExportSource, QuickTweaks, TokenRule, build_export_source, token_rules_from_theme_json

__all__ = [
    "ExportSource",
    "FieldDefinition",
    "OverrideValidationError",
    "PlannedCatalog",
    "PlannedField",
    "QuickTweaks",
    "ROLE_SCOPES",
    "ResolvedColor",
    "TokenRule",
    "alpha_allowed",
    "build_export_source",
    "build_strict_export_plan",
    "ensure_buildable",
    "export_plan_json",
    "normalize_scopes",
    "override_errors",
    "plan_to_json",
    "resolve_token_role",
    "resolve_token_role_with_fallbacks",
    "resolve_ui_color_keys",
    "scope_matches_role",
    "token_field",
    "token_rules_from_theme_json",
    "ui_field",
    "unmapped_field",
]
