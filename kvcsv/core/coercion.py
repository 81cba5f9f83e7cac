# kvcsv/core/coercion.py

"""
Conversion of raw CSV cells into typed setting values.

Every cell coerces to exactly one of ``bool``, ``None`` or ``str``. Literal
matching is case-insensitive; the lowercase form is used only for comparison
and is never stored. Numeric-looking strings stay strings.
"""

from typing import Optional, Union

SettingValue = Union[bool, None, str]

# Checked in this order: null first, so an empty cell never reaches the boolean sets.
NULL_VALUES = frozenset({"nil", "null", "na", "n/a"})
TRUE_VALUES = frozenset({"t", "1", "true", "yes", "y"})
FALSE_VALUES = frozenset({"f", "0", "false", "no", "n"})

# Canonical string forms produced by format_value
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"
NULL_LITERAL = "null"


def coerce_value(raw: Optional[str]) -> SettingValue:
    """
    Coerces a raw cell into a boolean, None or the original string.

    Args:
        raw: The cell text as read from the source, or None for an absent cell.

    Returns:
        None for absent/empty cells and null literals, True/False for boolean
        literals, otherwise ``raw`` unchanged (case and whitespace preserved).
    """
    if raw is None or raw == "":
        return None
    lowered = raw.lower()
    if lowered in NULL_VALUES:
        return None
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    return raw


def format_value(value: SettingValue) -> str:
    """Returns the canonical string form of a coerced value."""
    if value is True:
        return TRUE_LITERAL
    if value is False:
        return FALSE_LITERAL
    if value is None:
        return NULL_LITERAL
    return value


def value_type_name(value: SettingValue) -> str:
    """Short type label used when displaying values ("boolean", "null", "string")."""
    if isinstance(value, bool):
        return "boolean"
    if value is None:
        return "null"
    return "string"
