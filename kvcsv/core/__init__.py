# kvcsv/core/__init__.py

"""
Core merge-and-coerce pipeline: source reading, value coercion and the
merged LayeredTable.
"""

from .coercion import coerce_value, format_value, SettingValue
from .reader import read_source
from .table import LayeredTable, ABSENT, normalize_key

__all__ = [
    "LayeredTable",
    "ABSENT",
    "SettingValue",
    "coerce_value",
    "format_value",
    "normalize_key",
    "read_source",
]
