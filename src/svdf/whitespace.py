"""Whitespace and indentation convention checks.

The convention is one name/value pair per line, a run of tabs between a
name and its value, and each line indented by one tab per open brace (one
fewer on a line holding a closing brace).  Deviations are reported as
:class:`~svdf.errors.ParseWarning` and never stop the parse.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable

from .errors import ParseWarning
from .scanner import Scanner, describe_char

logger = logging.getLogger(__name__)

WarningSink = Callable[[ParseWarning], None]

TAB = ord("\t")
CR = ord("\r")
LF = ord("\n")
WHITESPACE = frozenset(b" \t\r\n")
AFTER_TABS = frozenset(b'"{')
CLOSE = ord("}")


class Expect(Enum):
    """What should follow the token just scanned."""

    Tabs = auto()      # after a name: tabs, then the value
    Newline = auto()   # after a value or brace: newline, then indentation


def log_warning(warning: ParseWarning) -> None:
    """Default sink: report through the module logger."""
    logger.warning(
        "Odd whitespace in %r at offset %d (line %d): %s",
        warning.source_path,
        warning.offset,
        warning.line,
        warning.diagnostic,
    )


def plural(count: int, noun: str) -> str:
    if count == 1:
        return f"one {noun}"
    return f"{count} {noun}s"


def _warn(
    sc: Scanner, sink: WarningSink, pos: int, message: str, *, got: bool = True
) -> None:
    next_char = sc.char_at(pos)
    if got:
        message = f"{message}, got {describe_char(next_char)}"
    sink(
        ParseWarning(
            source_path=sc.source_path,
            offset=pos,
            line=sc.line_of(pos),
            diagnostic=message,
            next_char=next_char,
        )
    )


def skip_whitespace(sc: Scanner, expect: Expect, sink: WarningSink) -> None:
    """Check, then skip, the whitespace after the token ending at ``sc.pos``.

    On return ``sc.pos`` is at the next non-whitespace byte (or the end).
    """
    buf = sc.buf
    end = len(buf)
    pos = sc.pos + 1
    if pos >= end:
        sc.pos = end
        return

    what = "name not followed by tabs" if expect is Expect.Tabs else "value"
    at_bol = False
    ch = buf[pos]

    if ch == TAB:
        if expect is not Expect.Tabs:
            _warn(sc, sink, pos, "expected newline after value")
        else:
            while ch == TAB:
                pos += 1
                if pos >= end:
                    _warn(sc, sink, pos, "EOF after tab")
                    sc.pos = end
                    return
                ch = buf[pos]
            if ch not in AFTER_TABS:
                _warn(sc, sink, pos, "expected '\"' or '{' after name and tabs")
    elif ch == CR and pos + 1 < end and buf[pos + 1] == LF:
        pos += 2
        at_bol = True
    elif ch == LF:
        pos += 1
        at_bol = True
    else:
        _warn(sc, sink, pos, f"expected newline after {what}")

    if at_bol:
        n_tabs = 0
        while pos < end and buf[pos] == TAB:
            n_tabs += 1
            pos += 1
        if pos >= end:
            if n_tabs:
                _warn(sc, sink, pos, "EOF after tab")
            sc.pos = end
            return
        expected = max(sc.depth - 1 if buf[pos] == CLOSE else sc.depth, 0)
        if n_tabs != expected:
            _warn(
                sc,
                sink,
                pos,
                f"expected {plural(expected, 'tab')}, found {plural(n_tabs, 'tab')}",
                got=False,
            )

    while pos < end and buf[pos] in WHITESPACE:
        pos += 1
    sc.pos = pos
