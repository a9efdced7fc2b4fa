"""Unit tests for type-shape inference and the date primitives."""

import pytest

from services.inference import has_time_component, infer_type, is_valid_date

# ---------------------------------------------------------------------------
# is_valid_date
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value",
    [
        "2024-03-01",
        "2024-03-01T10:00",
        "2024-03-01T10:00:00",
        "2024-03-01T10:00:00.123Z",
        "2024-03-01 10:30",
        "March 1, 2024",
        "1 Mar 2024",
        "2024/03/01",
        "Fri, 01 Mar 2024 10:00:00 +0000",
    ],
)
def test_date_shaped_strings(value):
    assert is_valid_date(value)


def test_strict_pattern_checks_shape_only():
    # Out-of-range month/day still matches YYYY-MM-DD.
    assert is_valid_date("2024-13-45")


@pytest.mark.parametrize("value", ["", "high", "not a date", "solo", "42"])
def test_non_date_strings(value):
    assert not is_valid_date(value)


@pytest.mark.parametrize("value", [None, 20240301, True, ["2024-03-01"], {"d": "2024-03-01"}])
def test_non_strings_are_never_dates(value):
    assert not is_valid_date(value)


# ---------------------------------------------------------------------------
# has_time_component
# ---------------------------------------------------------------------------


def test_time_component_t_separator():
    assert has_time_component("2024-03-01T10:00:00Z")


def test_time_component_space_clock():
    assert has_time_component("2024-03-01 9:30")


def test_no_time_component():
    assert not has_time_component("2024-03-01")
    assert not has_time_component("March 1, 2024")


def test_space_without_clock_is_not_time():
    assert not has_time_component("1 Mar 2024")


def test_time_component_non_string():
    assert not has_time_component(None)
    assert not has_time_component(1030)


# ---------------------------------------------------------------------------
# infer_type
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        ("hello", "text"),
        ("2024-03-01", "date"),
        ("2024-03-01T10:00:00Z", "datetime"),
        ("2024-03-01 10:30", "datetime"),
        (3, "number"),
        (2.5, "number"),
        (True, "checkbox"),
        (False, "checkbox"),
        (["#work", "#urgent"], "tags"),
        (["urgent", "#work"], "list"),
        (["a", "b"], "list"),
        (["a", 1], "array"),
        ([1, 2], "array"),
        ({"nested": 1}, "object"),
    ],
)
def test_infer_type(value, expected):
    assert infer_type(value) == expected


def test_empty_list_is_tags():
    assert infer_type([]) == "tags"


def test_booleans_are_not_numbers():
    assert infer_type(1) == "number"
    assert infer_type(True) == "checkbox"


def test_non_finite_numbers_fall_back_to_kind():
    assert infer_type(float("nan")) == "number"
    assert infer_type(float("inf")) == "number"


def test_unknown_objects_fall_back_to_type_name():
    assert infer_type(object()) == "object"
    assert infer_type(b"raw") == "bytes"


@pytest.mark.parametrize(
    "value",
    ["Fri, 01 Mar 99999999999 10:00:00 +0000", "1 Jan 2024 99999999999:00"],
)
def test_out_of_range_dates_are_text(value):
    assert not is_valid_date(value)
    assert infer_type(value) == "text"
