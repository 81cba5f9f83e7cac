# kvcsv/errors.py

"""
Exception hierarchy for kvcsv.

Missing sources, None sources and empty cells are not errors; only malformed
source data and strict lookups of absent keys are signalled to the caller.
"""

from pathlib import Path
from typing import Optional, Union


class KvcsvError(Exception):
    """Base class for all kvcsv errors."""


class ParseError(KvcsvError):
    """A source file exists but its CSV data cannot be parsed."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


class KeyNotFoundError(KvcsvError, KeyError):
    """Strict lookup of a key that has no entry in the merged table."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"


class ConfigError(KvcsvError):
    """The tool configuration file could not be decoded."""
