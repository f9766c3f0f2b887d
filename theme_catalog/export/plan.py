"""Strict per-target export plans.

A plan walks a target's field catalog, resolves each field against an
ExportSource and records either an included value (with provenance) or an
exclusion reason. Plans are pure functions of their inputs; recomputing one on
every input change is expected.
"""

import logging
from collections import namedtuple
from dataclasses import dataclass

from ..color import display_value, parse_color
from .fields import alpha_allowed

logger = logging.getLogger(__name__)

NO_SOURCE = "no-source"
NO_MAPPING = "no-mapping"
INVALID = "invalid"
ALPHA = "alpha"

PlannedField = namedtuple(
    "PlannedField",
    ["key", "group", "label", "rgba", "raw", "source", "value", "overridden", "override_error"],
)


class OverrideValidationError(ValueError):
    """Raised by the build gate while any field carries an override error."""

    def __init__(self, errors):
        self.errors = list(errors)
        detail = ", ".join(f"{key} ({error})" for key, error in self.errors)
        super().__init__(f"Invalid overrides: {detail}")


@dataclass(frozen=True)
class PlannedCatalog:
    plan: dict
    groups: dict
    fields: tuple

    def field(self, key):
        for planned in self.fields:
            if planned.key == key:
                return planned
        return None


def _override_lookup(raw, policy):
    """Returns (color, error). A blank override is no lookup at all."""
    if not raw:
        return None, None
    parsed = parse_color(raw)
    if parsed is None:
        return None, INVALID
    if not alpha_allowed(policy, parsed.a):
        return None, ALPHA
    return parsed, None


def _tweak_lookup(raw, policy):
    if not raw:
        return None, None
    parsed = parse_color(raw)
    if parsed is None or not alpha_allowed(policy, parsed.a):
        return None, None
    return parsed, None


def _precedence_chain(definition, resolved, overrides, quick_tweaks):
    """Ordered (lookup, raw, counts_as_override) triples, highest precedence first."""
    chain = [(_override_lookup, overrides.get(definition.key), True)]
    if definition.quick_tweak and quick_tweaks is not None:
        chain.append((_tweak_lookup, quick_tweaks.value_for(definition.quick_tweak), True))
    chain.append((lambda raw, policy: (resolved.rgba, None), resolved.raw, False))
    return chain


def _plan_field(definition, resolved, overrides, quick_tweaks):
    override_error = None
    overridden = False
    for lookup, raw, is_override in _precedence_chain(definition, resolved, overrides, quick_tweaks):
        color, error = lookup(raw, definition.alpha_policy)
        if error is not None:
            override_error = error
            overridden = True
        if color is None:
            continue
        overridden = overridden or is_override
        return PlannedField(
            key=definition.key,
            group=definition.group,
            label=definition.label,
            rgba=color,
            raw=str(raw),
            source=resolved.source,
            value=display_value(color),
            overridden=overridden,
            override_error=override_error,
        )
    raise AssertionError("resolved value always terminates the chain")


def build_strict_export_plan(target, source, fields, overrides=None, quick_tweaks=None):
    """Resolve every field of a target catalog into an export plan.

    Args:
        target: Target id recorded in the plan
        source: ExportSource
        fields: Sequence of FieldDefinition, in catalog order
        overrides: Optional dict of field key -> user supplied color literal
        quick_tweaks: Optional QuickTweaks; defaults to the ones on the source

    Returns:
        PlannedCatalog
    """
    overrides = overrides or {}
    if quick_tweaks is None:
        quick_tweaks = source.quick_tweaks

    included = []
    excluded = []
    groups = {}
    planned_fields = []

    for definition in fields:
        if definition.resolve is None:
            excluded.append({"key": definition.key, "reason": NO_MAPPING})
            continue
        resolved = definition.resolve(source)
        if resolved is None or not alpha_allowed(definition.alpha_policy, resolved.rgba.a):
            excluded.append({"key": definition.key, "reason": NO_SOURCE})
            continue

        planned = _plan_field(definition, resolved, overrides, quick_tweaks)
        included.append(
            {
                "key": planned.key,
                "value": planned.value,
                "source": planned.source,
                "confidence": "exact",
            }
        )
        groups.setdefault(planned.group, []).append(planned)
        planned_fields.append(planned)

    logger.debug(
        "Planned %s for %s: %d included, %d excluded",
        target,
        source.theme.id,
        len(included),
        len(excluded),
    )
    plan = {"target": target, "included": included, "excluded": excluded}
    return PlannedCatalog(plan=plan, groups=groups, fields=tuple(planned_fields))


def override_errors(planned):
    """(key, error) for every planned field whose override was rejected."""
    return [(f.key, f.override_error) for f in planned.fields if f.override_error]


def ensure_buildable(planned):
    errors = override_errors(planned)
    if errors:
        raise OverrideValidationError(errors)
