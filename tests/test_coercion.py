# tests/test_coercion.py

import pytest

from kvcsv.core.coercion import (
    coerce_value, format_value, value_type_name,
    NULL_VALUES, TRUE_VALUES, FALSE_VALUES,
)

# --- Test coerce_value ---

@pytest.mark.parametrize("raw", sorted(TRUE_VALUES))
def test_true_literals(raw):
    assert coerce_value(raw) is True

@pytest.mark.parametrize("raw", sorted(FALSE_VALUES))
def test_false_literals(raw):
    assert coerce_value(raw) is False

@pytest.mark.parametrize("raw", sorted(NULL_VALUES))
def test_null_literals(raw):
    assert coerce_value(raw) is None

@pytest.mark.parametrize("raw, expected", [
    ("TRUE", True), ("True", True), ("tRuE", True), ("YES", True), ("Y", True),
    ("FALSE", False), ("False", False), ("NO", False), ("N", False), ("F", False),
    ("NULL", None), ("Nil", None), ("NA", None), ("N/A", None),
])
def test_literals_are_case_insensitive(raw, expected):
    assert coerce_value(raw) is expected

def test_empty_and_absent_cells_are_null():
    """Empty cells map to None, never to a boolean."""
    assert coerce_value("") is None
    assert coerce_value(None) is None
    # "0" is a false literal, not null
    assert coerce_value("0") is False

@pytest.mark.parametrize("raw", [
    "regular string", "42", "3.14", "truth", "failure", "nope", " true", "true ", "TRUE!", "none",
])
def test_other_strings_are_preserved(raw):
    """Anything outside the literal sets comes back unmodified, including whitespace."""
    result = coerce_value(raw)
    assert isinstance(result, str)
    assert result == raw

def test_original_case_is_kept_for_strings():
    assert coerce_value("MixedCase") == "MixedCase"

# --- Test format_value ---

def test_format_value_canonical_forms():
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(None) == "null"
    assert format_value("localhost") == "localhost"

@pytest.mark.parametrize("value", [True, False, None])
def test_recoercing_formatted_values_is_stable(value):
    assert coerce_value(format_value(value)) is value

def test_value_type_name():
    assert value_type_name(True) == "boolean"
    assert value_type_name(False) == "boolean"
    assert value_type_name(None) == "null"
    assert value_type_name("x") == "string"
