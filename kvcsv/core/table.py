# kvcsv/core/table.py

"""
The merged, read-only settings table.

A LayeredTable is built once from an ordered list of CSV sources. Sources
are read in order and each row is upserted into the table, so for any key
the value from the last source defining it wins. Missing sources and None
entries in the source list are skipped silently.

Example:
    defaults.csv            local.csv
    key,value               key,value
    host,default.com        host,override.com
    debug,false             timeout,30

    >>> table = LayeredTable("defaults.csv", "local.csv", None)
    >>> table.get("host")
    'override.com'
    >>> table.get("debug")
    False
    >>> table.fetch("port", "3000")
    '3000'
"""

import logging
import sys
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, TypeVar

from ..errors import KeyNotFoundError
from .coercion import SettingValue, coerce_value, format_value
from .reader import SourcePath, read_source, source_exists

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Absent:
    """Marker returned by LayeredTable.get for keys with no entry."""

    _instance: Optional["_Absent"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()

_NO_DEFAULT = object()


def normalize_key(key: str) -> str:
    """
    Returns the interned form of a setting key.

    Raw and already-interned strings normalize to the same object, so lookups
    behave identically for both. ``str`` subclasses (such as string-valued
    enum members) normalize to their plain string value.

    Raises:
        TypeError: If ``key`` is not a string.
    """
    if not isinstance(key, str):
        raise TypeError(f"Setting keys must be strings, got {type(key).__name__}")
    return sys.intern(str.__str__(key))


class LayeredTable:
    """
    Immutable key -> value table merged from layered CSV sources.

    Values are ``bool``, ``None`` (stored null) or ``str``. A stored None is
    distinct from an absent key: ``get`` returns ``ABSENT`` for the latter.
    """

    __slots__ = ("_entries", "_sources")

    def __init__(self, *sources: Optional[SourcePath]):
        """
        Builds the table from CSV sources, lowest priority first.

        Args:
            *sources: Paths to CSV files. None entries and paths that do not
                exist are ignored.

        Raises:
            ParseError: If an existing source is malformed. The first
                malformed source in list order aborts construction.
        """
        merged: Dict[str, SettingValue] = {}
        loaded: List[SourcePath] = []

        for source in sources:
            if source is None:
                continue
            if not source_exists(source):
                logger.debug(f"Skipping missing source: {source}")
                continue
            for key, raw in read_source(source):
                merged[key] = coerce_value(raw)
            loaded.append(source)

        # Keys are interned once here; lookups intern their argument the same way.
        self._entries = MappingProxyType({normalize_key(k): v for k, v in merged.items()})
        self._sources: Tuple[SourcePath, ...] = tuple(loaded)
        logger.debug(f"Built settings table with {len(self._entries)} keys from {len(loaded)} source(s).")

    @classmethod
    def from_sources(cls, sources: Iterable[Optional[SourcePath]]) -> "LayeredTable":
        """Builds a table from any iterable of sources (see ``__init__``)."""
        return cls(*sources)

    @property
    def sources(self) -> Tuple[SourcePath, ...]:
        """The sources that existed and contributed rows, in merge order."""
        return self._sources

    # --- Accessors ---

    def get(self, key: str) -> Any:
        """Returns the value for ``key``, or ``ABSENT`` if the key has no entry."""
        return self._entries.get(normalize_key(key), ABSENT)

    def fetch(self, key: str, default: Any = _NO_DEFAULT) -> Any:
        """
        Strict lookup with an optional default.

        A stored None is returned as-is, even when a default is supplied; the
        default only applies when the key has no entry.

        Raises:
            KeyNotFoundError: If the key is absent and no default was given.
        """
        normalized = normalize_key(key)
        if normalized in self._entries:
            return self._entries[normalized]
        if default is _NO_DEFAULT:
            raise KeyNotFoundError(normalized)
        return default

    def transform(self, fn: Callable[[str, SettingValue], T]) -> List[T]:
        """Applies ``fn(key, value)`` to every entry and returns the results."""
        return [fn(key, value) for key, value in self._entries.items()]

    def filter(self, predicate: Callable[[str, SettingValue], Any]) -> Dict[str, SettingValue]:
        """Returns a new dict of the entries for which ``predicate(key, value)`` is true."""
        return {key: value for key, value in self._entries.items() if predicate(key, value)}

    # --- Read-only container protocol ---

    def __getitem__(self, key: str) -> SettingValue:
        return self.fetch(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LayeredTable):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    __hash__ = None

    def keys(self):
        return self._entries.keys()

    def items(self):
        return self._entries.items()

    def to_dict(self) -> Dict[str, SettingValue]:
        """Returns a plain, mutable copy of the entries."""
        return dict(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{key}={format_value(value)}" for key, value in self._entries.items())
        return f"LayeredTable({body})"
