# kvcsv/core/reader.py

"""
Reads raw key/value rows from two-column CSV sources.

A source is a UTF-8, comma-separated file with a header row naming the
``key`` and ``value`` columns (in any order; other columns are ignored).
Cells are read verbatim as text via Pandas: no whitespace stripping, no
numeric inference and no NA-token handling, so coercion sees exactly what
the file contains.

Quoting is strict: a quote inside an unquoted cell, text after a closing
quote, or an unterminated quoted cell is a ParseError rather than a
silently altered value.
"""

import csv
import io
import logging
import os
import warnings
from pathlib import Path
from typing import List, Optional, Tuple, Union

import pandas as pd

from ..errors import ParseError

logger = logging.getLogger(__name__)

KEY_COLUMN = "key"
VALUE_COLUMN = "value"
QUOTE = '"'

SourcePath = Union[str, "os.PathLike[str]"]
RawRow = Tuple[str, Optional[str]]


class StrictCSVDialect(csv.excel):
    """Comma-separated, double-quote escaped, rejecting text after a closing quote."""
    strict = True


def source_exists(path: SourcePath) -> bool:
    """True if ``path`` names an existing regular file."""
    return Path(path).is_file()


def _cell_text(cell) -> Optional[str]:
    """Absent cells (short rows) come back from Pandas as NaN."""
    if cell is None or (not isinstance(cell, str) and pd.isna(cell)):
        return None
    return cell


def check_quoting(text: str) -> None:
    """
    Rejects quote characters that the CSV reader would otherwise keep as
    literal text: a quote in the middle of an unquoted cell, or a quoted
    cell that is never closed.

    Raises:
        ValueError: Naming the offending line (1-based).
    """
    line_no = 1
    in_quotes = False
    at_cell_start = True
    i = 0
    while i < len(text):
        char = text[i]
        if in_quotes:
            if char == QUOTE:
                if text[i + 1:i + 2] == QUOTE:
                    i += 1  # escaped ""
                else:
                    in_quotes = False
            elif char == "\n":
                line_no += 1
        elif char == QUOTE:
            if not at_cell_start:
                raise ValueError(f"illegal quote in unquoted field on line {line_no}")
            in_quotes = True
            at_cell_start = False
        elif char in ",\r\n":
            at_cell_start = True
            if char == "\n":
                line_no += 1
        else:
            at_cell_start = False
        i += 1
    if in_quotes:
        raise ValueError(f"unclosed quoted field at end of data (line {line_no})")


def _log_parser_warnings(caught, fpath: Path) -> None:
    """Reports Pandas parser warnings through the module logger; re-issues anything else."""
    for warning in caught:
        if issubclass(warning.category, pd.errors.ParserWarning):
            logger.warning(f"{fpath}: {warning.message}")
        else:
            warnings.warn(warning.message, warning.category, stacklevel=2)


def read_source(path: SourcePath) -> List[RawRow]:
    """
    Reads all ``(key, raw_value)`` rows from a CSV source, in file order.

    Args:
        path: Path to the CSV file.

    Returns:
        The rows of the file. An empty list if the file does not exist or
        is completely empty. ``raw_value`` is None when the row has no value
        cell or the file has no ``value`` column.

    Raises:
        ParseError: If the file cannot be decoded as UTF-8 CSV, its quoting
            is malformed, or its header has no ``key`` column.
    """
    fpath = Path(path)
    if not source_exists(fpath):
        logger.debug(f"Source not found, skipping: {fpath}")
        return []

    logger.debug(f"Reading source: {fpath}")
    try:
        text = fpath.read_text(encoding="utf-8")
        check_quoting(text)
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            frame = pd.read_csv(
                io.StringIO(text),
                engine="python",
                dialect=StrictCSVDialect,
                dtype=str,
                keep_default_na=False,
                na_filter=False,
                index_col=False,
                skip_blank_lines=True,
            )
    except pd.errors.EmptyDataError:
        logger.debug(f"Source is empty: {fpath}")
        return []
    except (pd.errors.ParserError, csv.Error, UnicodeDecodeError, ValueError) as e:
        raise ParseError(f"malformed CSV data ({e})", path=fpath) from e
    _log_parser_warnings(caught, fpath)

    if KEY_COLUMN not in frame.columns:
        raise ParseError(
            f"header must contain a '{KEY_COLUMN}' column, got {list(frame.columns)}",
            path=fpath,
        )

    keys = frame[KEY_COLUMN].tolist()
    if VALUE_COLUMN in frame.columns:
        values = frame[VALUE_COLUMN].tolist()
    else:
        logger.debug(f"Source has no '{VALUE_COLUMN}' column, all values are null: {fpath}")
        values = [None] * len(keys)

    rows: List[RawRow] = []
    for row_no, (key, value) in enumerate(zip(keys, values), start=1):
        key = _cell_text(key)
        if not key:
            logger.warning(f"{fpath}: data row {row_no} has an empty key, skipping.")
            continue
        rows.append((key, _cell_text(value)))

    logger.debug(f"Read {len(rows)} rows from {fpath}")
    return rows
