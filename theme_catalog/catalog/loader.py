import json
import logging

from .models import Appearance, SyntaxEntry, ThemeRecord

logger = logging.getLogger(__name__)


class CatalogLoadError(ValueError):
    """Raised when a catalog file cannot be read or is not a list of records."""


def _as_str(value):
    return value if isinstance(value, str) else ""


def _parse_syntax_summary(data):
    summary = {}
    if not isinstance(data, dict):
        return summary
    for role, entry in data.items():
        if not isinstance(entry, dict):
            continue
        hex_value = _as_str(entry.get("hex")).strip()
        if not hex_value:
            continue
        summary[role] = SyntaxEntry(hex_value, _as_str(entry.get("category")))
    return summary


def _parse_appearance(data):
    if not isinstance(data, dict):
        return None
    tags = data.get("styleTags")
    return Appearance(
        avg_hex=_as_str(data.get("avgHex")),
        hue_bucket=_as_str(data.get("hueBucket")),
        style_tags=frozenset(t for t in tags if isinstance(t, str)) if isinstance(tags, list) else None,
        contrast_band=_as_str(data.get("contrastBand")),
        saturation_band=_as_str(data.get("saturationBand")),
        brightness_band=_as_str(data.get("brightnessBand")),
    )


def record_from_dict(data):
    """Build a ThemeRecord from a catalog JSON object.

    Colors are stored as given; a malformed hex only means the record
    offers no candidate for that slot.

    Returns:
        ThemeRecord, or None when the object has no id
    """
    if not isinstance(data, dict):
        return None
    record_id = _as_str(data.get("id")).strip()
    if not record_id:
        return None
    return ThemeRecord(
        id=record_id,
        bg=_as_str(data.get("bg")),
        badge=_as_str(data.get("badge")),
        bg_category=_as_str(data.get("bgCategory")),
        syntax_summary=_parse_syntax_summary(data.get("syntaxSummary")),
        name=_as_str(data.get("themeDisplayName") or data.get("name")),
        publisher=_as_str(data.get("publisher")),
        extension_name=_as_str(data.get("extensionName")),
        description=_as_str(data.get("description")),
        appearance=_parse_appearance(data.get("appearance")),
    )


def load_records_from_json(json_path):
    """Load theme records from a catalog JSON file.

    Args:
        json_path: Path to a JSON array of records, or an object with a "records" array

    Returns:
        list of ThemeRecord in file order
    """
    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Unable to read catalog {json_path}: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("records")
    if not isinstance(data, list):
        raise CatalogLoadError(f"{json_path}: expected a list of theme records")

    records = []
    for index, item in enumerate(data):
        record = record_from_dict(item)
        if record is None:
            logger.warning("Skipping catalog entry %d in %s: missing id", index, json_path)
            continue
        records.append(record)
    logger.debug("Loaded %d records from %s", len(records), json_path)
    return records


def load_json_object(json_path):
    """Read a JSON object (theme payload, curated detail) from disk."""
    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Unable to read {json_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise CatalogLoadError(f"{json_path}: expected a JSON object")
    return data
