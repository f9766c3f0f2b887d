import json


def plan_to_json(planned, theme=None):
    """JSON-ready dict of an export plan plus the per-field override state serializers check.

    Args:
        planned: PlannedCatalog
        theme: Optional ThemeRecord, recorded as metadata
    """
    data = dict(planned.plan)
    data["_overrides"] = {
        f.key: {"raw": f.raw, "error": f.override_error}
        for f in planned.fields
        if f.overridden
    }
    data["_groups"] = {group: [f.key for f in rows] for group, rows in planned.groups.items()}
    if theme is not None:
        data["_theme"] = {
            "id": theme.id,
            "name": theme.name,
            "publisher": theme.publisher,
        }
    return data


def export_plan_json(planned, filepath, theme=None):
    """Write an export plan as JSON.

    Args:
        planned: PlannedCatalog
        filepath: Output file path
        theme: Optional ThemeRecord for metadata
    """
    with open(filepath, "w") as f:
        json.dump(plan_to_json(planned, theme=theme), f, indent=2)
