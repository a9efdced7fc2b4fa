"""Per-type conformance rules for frontmatter values."""

from services.inference import (
    all_strings,
    has_time_component,
    is_number,
    is_sequence,
    is_valid_date,
)


def _is_list(value) -> bool:
    # Bare strings count as single-item lists.
    return isinstance(value, str) or (is_sequence(value) and all_strings(value))


def _is_date(value) -> bool:
    return is_valid_date(value) and not has_time_component(value)


def _is_datetime(value) -> bool:
    return is_valid_date(value) and has_time_component(value)


RULES = {
    "text": lambda v: isinstance(v, str),
    "list": _is_list,
    "multitext": _is_list,  # legacy name for list
    "number": is_number,
    "checkbox": lambda v: isinstance(v, bool),
    "boolean": lambda v: isinstance(v, bool),
    "date": _is_date,
    "datetime": _is_datetime,
    "tags": lambda v: is_sequence(v) and all_strings(v, "#"),
    "aliases": lambda v: is_sequence(v) and all_strings(v),
}

KNOWN_TYPES = frozenset(RULES)


def validate_property_type(value, expected_type) -> bool:
    """Return True if value conforms to expected_type.

    Unknown type names, and nested maps, are always valid.
    """
    if isinstance(value, dict):
        return True
    rule = RULES.get(expected_type) if isinstance(expected_type, str) else None
    if rule is None:
        return True
    return rule(value)
