"""Tests for whitespace/indentation warnings."""

import logging

import pytest

from svdf import parse
from svdf.errors import ParseWarning
from svdf.scanner import Scanner
from svdf.whitespace import Expect, log_warning, plural, skip_whitespace


def skip(data: bytes, expect: Expect, *, pos: int = 2, depth: int = 0):
    """Run skip_whitespace after the token ending at *pos*."""
    sc = Scanner(data, "ws.vdf")
    sc.pos = pos
    sc.depth = depth
    warnings: list[ParseWarning] = []
    skip_whitespace(sc, expect, warnings.append)
    return sc, warnings


# ---------------------------------------------------------------------------
# Conforming whitespace
# ---------------------------------------------------------------------------

def test_tabs_after_name():
    sc, warnings = skip(b'"a"\t\t"b"', Expect.Tabs)
    assert warnings == []
    assert sc.pos == 5


def test_tabs_then_brace_after_name():
    sc, warnings = skip(b'"a"\t{', Expect.Tabs)
    assert warnings == []
    assert sc.pos == 4


def test_newline_and_indent():
    sc, warnings = skip(b'"a"\n\t"b"', Expect.Newline, depth=1)
    assert warnings == []
    assert sc.pos == 5


def test_crlf_and_indent():
    sc, warnings = skip(b'"a"\r\n\t"b"', Expect.Newline, depth=1)
    assert warnings == []
    assert sc.pos == 6


def test_closing_brace_one_tab_less():
    _, warnings = skip(b'"a"\n\t}', Expect.Newline, depth=2)
    assert warnings == []


def test_newline_after_name():
    _, warnings = skip(b'"a"\n\t{', Expect.Tabs, depth=1)
    assert warnings == []


def test_end_of_buffer():
    sc, warnings = skip(b'"a"', Expect.Newline)
    assert warnings == []
    assert sc.pos == 3


# ---------------------------------------------------------------------------
# Deviations
# ---------------------------------------------------------------------------

def test_tab_after_value():
    sc, warnings = skip(b'"a"\t"b"', Expect.Newline)
    assert len(warnings) == 1
    assert warnings[0].diagnostic == "expected newline after value, got '\\t'"
    assert warnings[0].offset == 3
    assert sc.pos == 4


def test_space_after_name():
    _, warnings = skip(b'"a" "b"', Expect.Tabs)
    assert [w.diagnostic for w in warnings] == [
        "expected newline after name not followed by tabs, got ' '"
    ]


def test_space_after_value():
    _, warnings = skip(b'"a" "b"', Expect.Newline)
    assert warnings[0].diagnostic == "expected newline after value, got ' '"


def test_wrong_tab_count():
    _, warnings = skip(b'"a"\n\t\t"b"', Expect.Newline, depth=1)
    assert len(warnings) == 1
    w = warnings[0]
    assert w.diagnostic == "expected one tab, found 2 tabs"
    assert w.offset == 6
    assert w.line == 2
    assert w.next_char == '"'


def test_no_tabs_where_expected():
    _, warnings = skip(b'"a"\n"b"', Expect.Newline, depth=2)
    assert warnings[0].diagnostic == "expected 2 tabs, found 0 tabs"


def test_tabs_then_stray_text_after_name():
    sc, warnings = skip(b'"a"\tx', Expect.Tabs)
    assert warnings[0].diagnostic == "expected '\"' or '{' after name and tabs, got 'x'"
    assert sc.pos == 4


def test_eof_after_tab_following_name():
    sc, warnings = skip(b'"a"\t\t', Expect.Tabs)
    assert warnings[0].diagnostic == "EOF after tab, got end of input"
    assert warnings[0].next_char is None
    assert sc.pos == 5


def test_eof_after_indentation():
    _, warnings = skip(b'"a"\n\t', Expect.Newline, depth=1)
    assert warnings[0].diagnostic.startswith("EOF after tab")


def test_extra_whitespace_after_indent_skipped():
    sc, warnings = skip(b'"a"\n\t  \r\n\t"b"', Expect.Newline, depth=1)
    assert warnings == []
    assert sc.buf[sc.pos:] == b'"b"'


def test_warning_carries_source_path():
    _, warnings = skip(b'"a" "b"', Expect.Newline)
    assert warnings[0].source_path == "ws.vdf"
    assert str(warnings[0]).startswith('Odd whitespace in "ws.vdf" at offset 3 (line 1)')


# ---------------------------------------------------------------------------
# Helpers and default sink
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "count, expected",
    [(0, "0 tabs"), (1, "one tab"), (3, "3 tabs")],
)
def test_plural(count, expected):
    assert plural(count, "tab") == expected


def test_log_warning(caplog):
    caplog.set_level(logging.WARNING, logger="svdf.whitespace")
    log_warning(ParseWarning("x.vdf", 7, 2, "expected one tab, found 0 tabs"))
    assert "Odd whitespace in 'x.vdf' at offset 7 (line 2)" in caplog.text


def test_parse_without_sink_logs(caplog):
    caplog.set_level(logging.WARNING, logger="svdf.whitespace")
    parse(b'"X" {"a" "1"}', source_path="odd.vdf")
    assert "Odd whitespace in 'odd.vdf'" in caplog.text
