# kvcsv/__init__.py

"""
kvcsv: layered, read-only settings loaded from key/value CSV files.

    >>> from kvcsv import LayeredTable
    >>> settings = LayeredTable("config/defaults.csv", "config/local.csv")
    >>> settings.fetch("port", "3000")
"""

from .version import __version__
from .errors import KvcsvError, ParseError, KeyNotFoundError, ConfigError
from .core import LayeredTable, ABSENT, coerce_value, format_value

__all__ = [
    "__version__",
    "LayeredTable",
    "ABSENT",
    "coerce_value",
    "format_value",
    "KvcsvError",
    "ParseError",
    "KeyNotFoundError",
    "ConfigError",
]
