"""Tests for the loads / load / parse_acf entry points."""

import io
import logging
from pathlib import Path

import pytest

from acf_core import (
    ParseError,
    ParseErrorKind,
    ParseOptions,
    ReadError,
    load,
    loads,
    parse_acf,
)

DATA = Path(__file__).parent / "data"


# ---------------------------------------------------------------------------
# loads
# ---------------------------------------------------------------------------

def test_loads_rejects_bytes():
    with pytest.raises(TypeError):
        loads(b'"AppState" { }')

def test_loads_wraps_grammar_error():
    with pytest.raises(ParseError) as info:
        loads('"AppState" { "appid" }')
    err = info.value
    assert err.kind == ParseErrorKind.EXPECTED_LITERAL
    assert err.__cause__ is err.cause

def test_loads_logs_located_diagnostic(caplog):
    with caplog.at_level(logging.WARNING, logger="acf_core.loader"):
        with pytest.raises(ParseError):
            loads('"AppState"\n{\n\t"appid"\t\t"730"\n')
    assert "2:1" in caplog.text
    assert "EXPECTED_CLOSING_BRACE" in caplog.text

def test_loads_strict_options():
    with pytest.raises(ParseError) as info:
        loads('"A" { } "B" { }', ParseOptions.strict())
    assert info.value.kind == ParseErrorKind.MULTIPLE_ROOTS


# ---------------------------------------------------------------------------
# load
# ---------------------------------------------------------------------------

def test_load_stream():
    doc = load(io.StringIO('"AppState"\n{\n\t"appid"\t\t"730"\n}\n'))
    assert doc.root.get("appid") == "730"


# ---------------------------------------------------------------------------
# parse_acf
# ---------------------------------------------------------------------------

def test_parse_acf_simple():
    doc = parse_acf(DATA / "simple.acf")
    assert doc.root.name == "AppState"
    assert doc.root.expressions == {"appid": "730"}

def test_parse_acf_accepts_str_path():
    assert len(parse_acf(str(DATA / "simple.acf"))) == 1

def test_parse_acf_missing_file(tmp_path):
    path = tmp_path / "appmanifest_0.acf"
    with pytest.raises(ReadError) as info:
        parse_acf(path)
    assert info.value.path == str(path)
    assert str(info.value) == f"failed to read '{path}'"
    assert info.value.cause is None

def test_parse_acf_directory(tmp_path):
    with pytest.raises(ReadError):
        parse_acf(tmp_path)

def test_parse_acf_bad_encoding(tmp_path):
    path = tmp_path / "latin1.acf"
    path.write_bytes('"AppState" { "name" "caf\u00e9" }'.encode("latin-1"))
    with pytest.raises(ReadError):
        parse_acf(path)
    doc = parse_acf(path, ParseOptions(encoding="latin-1"))
    assert doc.root["name"] == "caf\u00e9"

def test_parse_acf_logs_read_failure(tmp_path, caplog):
    path = tmp_path / "nope.acf"
    with caplog.at_level(logging.WARNING, logger="acf_core.loader"):
        with pytest.raises(ReadError):
            parse_acf(path)
    assert "nope.acf" in caplog.text

def test_parse_acf_malformed_file(tmp_path):
    path = tmp_path / "broken.acf"
    path.write_text('"AppState"\n{\n\t"appid"\t\t"730"\n', encoding="utf-8")
    with pytest.raises(ParseError) as info:
        parse_acf(path)
    assert info.value.kind == ParseErrorKind.EXPECTED_CLOSING_BRACE


class _FailingStream:
    name = "steamapps/appmanifest_730.acf"

    def read(self):
        raise OSError("device gone")


def test_load_stream_read_failure():
    with pytest.raises(ReadError) as info:
        load(_FailingStream())
    assert info.value.path == "steamapps/appmanifest_730.acf"
    assert info.value.cause is None

def test_load_stream_decode_failure(tmp_path):
    path = tmp_path / "latin1.acf"
    path.write_bytes('"AppState" { "name" "café" }'.encode("latin-1"))
    with open(path, encoding="utf-8") as fp:
        with pytest.raises(ReadError) as info:
            load(fp)
    assert info.value.path == str(path)

def test_parse_acf_keeps_line_endings_in_literals(tmp_path):
    path = tmp_path / "crlf.acf"
    path.write_bytes(b'"AppState"\r\n{\r\n\t"note"\t\t"line1\r\nline2"\r\n}\r\n')
    doc = parse_acf(path)
    assert doc.root["note"] == "line1\r\nline2"

def test_loads_deep_nesting_is_a_parse_error():
    depth = 10_000
    with pytest.raises(ParseError) as info:
        loads('"n" { ' * depth + "} " * depth)
    assert info.value.kind == ParseErrorKind.NESTING_TOO_DEEP
