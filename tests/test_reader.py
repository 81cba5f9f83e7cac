# tests/test_reader.py

import logging
import warnings

import pytest
from pathlib import Path

from kvcsv.core.reader import read_source, source_exists
from kvcsv.errors import ParseError, KvcsvError

# --- Test read_source ---

def test_reads_rows_in_file_order(write_csv):
    path = write_csv("settings.csv", "key,value\ndatabase_host,localhost\ndatabase_port,5432\n")
    assert read_source(path) == [("database_host", "localhost"), ("database_port", "5432")]

def test_accepts_string_paths(write_csv):
    path = write_csv("settings.csv", "key,value\nfoo,bar\n")
    assert read_source(str(path)) == [("foo", "bar")]

def test_missing_file_yields_no_rows(tmp_path: Path):
    assert read_source(tmp_path / "missing.csv") == []
    assert not source_exists(tmp_path / "missing.csv")

def test_directory_is_not_a_source(tmp_path: Path):
    assert not source_exists(tmp_path)
    assert read_source(tmp_path) == []

def test_cells_are_read_verbatim(write_csv):
    """No numeric inference, NA handling or whitespace stripping."""
    path = write_csv("raw.csv", "key,value\nport,0042\nmissing,NA\nnull_word,null\npadded,  spaced  \n")
    assert read_source(path) == [
        ("port", "0042"),
        ("missing", "NA"),
        ("null_word", "null"),
        ("padded", "  spaced  "),
    ]

def test_empty_value_cell(write_csv):
    path = write_csv("empty.csv", "key,value\nempty,\n")
    rows = read_source(path)
    assert len(rows) == 1
    key, value = rows[0]
    assert key == "empty"
    assert value in ("", None)

def test_column_order_and_extra_columns(write_csv):
    path = write_csv("swapped.csv", "comment,value,key\nprimary db,localhost,host\n,true,debug\n")
    assert read_source(path) == [("host", "localhost"), ("debug", "true")]

def test_missing_value_column_reads_null_values(write_csv):
    path = write_csv("keys_only.csv", "key\nalpha\nbeta\n")
    assert read_source(path) == [("alpha", None), ("beta", None)]

def test_quoted_fields(write_csv):
    path = write_csv("quoted.csv", 'key,value\ngreeting,"hello, world"\nquote,"she said ""hi"""\n')
    assert read_source(path) == [("greeting", "hello, world"), ("quote", 'she said "hi"')]

def test_duplicate_keys_are_kept_in_order(write_csv):
    path = write_csv("dupes.csv", "key,value\nmode,first\nmode,second\n")
    assert read_source(path) == [("mode", "first"), ("mode", "second")]

def test_utf8_content(write_csv):
    path = write_csv("utf8.csv", "key,value\ncity,São Paulo\n")
    assert read_source(path) == [("city", "São Paulo")]

def test_empty_file_yields_no_rows(write_csv):
    path = write_csv("blank.csv", "")
    assert read_source(path) == []

def test_header_only_yields_no_rows(write_csv):
    path = write_csv("header.csv", "key,value\n")
    assert read_source(path) == []

def test_blank_key_rows_are_skipped(write_csv, caplog):
    path = write_csv("blank_key.csv", "key,value\n,orphan\nname,test\n")
    with caplog.at_level(logging.WARNING, logger="kvcsv"):
        rows = read_source(path)
    assert rows == [("name", "test")]
    assert "empty key" in caplog.text

def test_unbalanced_quote_raises_parse_error(write_csv):
    path = write_csv("broken.csv", 'key,value\nfoo,"unterminated\n')
    with pytest.raises(ParseError) as excinfo:
        read_source(path)
    assert excinfo.value.path == path
    assert str(path) in str(excinfo.value)
    assert isinstance(excinfo.value, KvcsvError)
    assert excinfo.value.__cause__ is not None

def test_invalid_utf8_raises_parse_error(tmp_path: Path):
    path = tmp_path / "latin1.csv"
    path.write_bytes("key,value\ncity,S\xe3o Paulo\n".encode("latin-1"))
    with pytest.raises(ParseError):
        read_source(path)

def test_missing_key_column_raises_parse_error(write_csv):
    path = write_csv("no_key.csv", "name,value\nfoo,bar\n")
    with pytest.raises(ParseError, match="'key' column"):
        read_source(path)

@pytest.mark.parametrize("content", [
    'key,value\na,"b"x\n',         # text after a closing quote
    'key,value\na,b"c\n',          # quote inside an unquoted cell
    'key,value\na, "b"\n',         # quote after leading whitespace
    'key,value\na,"b\nc,d\n',      # quoted cell never closed
])
def test_malformed_quoting_raises_parse_error(write_csv, content):
    path = write_csv("bad_quotes.csv", content)
    with pytest.raises(ParseError, match="malformed CSV data"):
        read_source(path)

def test_quoted_cells_spanning_lines(write_csv):
    path = write_csv("multiline.csv", 'key,value\nmotd,"line one\nline two"\nname,test\n')
    assert read_source(path) == [("motd", "line one\nline two"), ("name", "test")]

def test_extra_cells_are_logged_not_warned(write_csv, caplog):
    path = write_csv("extra.csv", "key,value\nhost,localhost,unexpected\n")
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        with caplog.at_level(logging.WARNING, logger="kvcsv"):
            rows = read_source(path)
    assert rows == [("host", "localhost")]
    assert str(path) in caplog.text
