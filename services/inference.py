"""Type-shape inference for frontmatter values.

`infer_type` names the semantic type a raw value most resembles. It is only
used to describe the actual value in error messages; conformance is decided
separately by services.validator.
"""

import math
import re
from datetime import datetime
from email.utils import parsedate_to_datetime

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")  # YYYY-MM-DD
DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2})?(\.\d{3})?Z?$")
CLOCK_RE = re.compile(r"\d{1,2}:\d{2}")

# Loosely written dates accepted by the generic fallback parser.
_DATE_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%a %b %d %Y",
)
_TIME_SUFFIXES = ("", " %H:%M", " %H:%M:%S")


def _parses_as_date(value: str) -> bool:
    """Generic, permissive date parse. True for anything that reads as a date."""
    text = value.strip()
    if not text:
        return False

    iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        datetime.fromisoformat(iso)
        return True
    except (ValueError, OverflowError):
        pass

    try:
        parsedate_to_datetime(text)
        return True
    except (TypeError, ValueError, IndexError, OverflowError):
        pass

    for fmt in _DATE_FORMATS:
        for suffix in _TIME_SUFFIXES:
            try:
                datetime.strptime(text, fmt + suffix)
                return True
            except (ValueError, OverflowError):
                continue
    return False


def is_valid_date(value) -> bool:
    """Return True if value is a date-shaped string."""
    if not isinstance(value, str):
        return False
    return bool(DATE_RE.match(value) or DATETIME_RE.match(value) or _parses_as_date(value))


def has_time_component(value) -> bool:
    """Return True if a date string carries a time: a T separator, or a space plus HH:MM."""
    if not isinstance(value, str):
        return False
    return "T" in value or (" " in value and CLOCK_RE.search(value) is not None)


def is_number(value) -> bool:
    """Finite int/float. Booleans are not numbers."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


def is_sequence(value) -> bool:
    return isinstance(value, list | tuple)


def all_strings(items, prefix: str = "") -> bool:
    return all(isinstance(v, str) and v.startswith(prefix) for v in items)


def primitive_kind(value) -> str:
    """Fallback name for values no inference rule covers."""
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def infer_type(value) -> str:
    """Return the semantic type name value most resembles. Never raises."""
    if value is None:
        return "null"
    if isinstance(value, str):
        if is_valid_date(value):
            return "datetime" if has_time_component(value) else "date"
        return "text"
    if is_number(value):
        return "number"
    if isinstance(value, bool):
        return "checkbox"
    if is_sequence(value):
        if all_strings(value, "#"):
            return "tags"
        if all_strings(value):
            return "list"
        return "array"
    return primitive_kind(value)
