from .loader import CatalogLoadError, load_json_object, load_records_from_json, record_from_dict
from .models import Appearance, SyntaxEntry, SYNTAX_ROLES, ThemeRecord

__all__ = [
    "Appearance",
    "CatalogLoadError",
    "SyntaxEntry",
    "SYNTAX_ROLES",
    "ThemeRecord",
    "load_json_object",
    "load_records_from_json",
    "record_from_dict",
]
