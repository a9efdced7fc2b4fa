"""Property type schema: loads <vault>/.obsidian/types.json."""

import json
import logging

from config import get_types_path
from services.validator import KNOWN_TYPES

log = logging.getLogger(__name__)

# Built-in list properties the host manages itself. Listed, never checked.
BUILTIN_PROPERTIES = ("aliases", "tags")


def load_property_types(vault_dir: str = None) -> dict[str, str]:
    """Return the {property: type} map from types.json.

    A missing file, a missing or non-object "types" key, or a parse failure
    all give an empty schema. Parse failures are logged.
    """
    path = get_types_path(vault_dir)
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        log.error("Failed to load property types from %s: %s", path, e)
        return {}

    types = data.get("types") if isinstance(data, dict) else None
    if not isinstance(types, dict):
        return {}
    return types


def describe_property_types(types: dict) -> list[dict]:
    """Rows for the schema listing.

    builtin marks host-managed properties; known is False for type names the
    checker has no rule for (those always pass).
    """
    return [
        {
            "property": prop,
            "type": type_name,
            "builtin": prop in BUILTIN_PROPERTIES,
            "known": isinstance(type_name, str) and type_name in KNOWN_TYPES,
        }
        for prop, type_name in types.items()
    ]
