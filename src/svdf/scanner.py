"""Scanner: cursor over a byte buffer and quoted-string decoding."""

from __future__ import annotations

from typing import TypeVar

from .errors import BadEscape, ExpectedToken, ParseError, UnterminatedString

_E = TypeVar("_E", bound=ParseError)

QUOTE = ord('"')
BACKSLASH = ord("\\")

# Escape set of the Source SDK's CUtlBuffer string reader.
ESCAPES: dict[int, int] = {
    ord("a"): 0x07,
    ord("b"): 0x08,
    ord("f"): 0x0C,
    ord("n"): 0x0A,
    ord("r"): 0x0D,
    ord("t"): 0x09,
    ord("v"): 0x0B,
    ord('"'): QUOTE,
    ord("?"): ord("?"),
    ord("\\"): BACKSLASH,
    ord("'"): ord("'"),
}


def describe_char(char: str | None) -> str:
    """Show a character the way diagnostics quote it."""
    if char is None:
        return "end of input"
    return repr(char)


class Scanner:
    """Holds the buffer being parsed and the current byte offset.

    ``pos`` always indexes the next byte to examine.  ``depth`` is the
    current brace nesting, kept here so the whitespace checker can compare
    indentation against it.
    """

    def __init__(self, data: bytes, source_path: str = "") -> None:
        self.buf = bytes(data)
        self.source_path = source_path
        self.pos = 0
        self.depth = 0

    # -- Cursor ---------------------------------------------------------

    def at_end(self, pos: int | None = None) -> bool:
        return (self.pos if pos is None else pos) >= len(self.buf)

    def peek(self, pos: int | None = None) -> int | None:
        """Byte at *pos* (default: cursor), or ``None`` past the end."""
        at = self.pos if pos is None else pos
        if at >= len(self.buf):
            return None
        return self.buf[at]

    # -- Positions ------------------------------------------------------

    def line_of(self, pos: int) -> int:
        return self.buf.count(b"\n", 0, pos) + 1

    def column_of(self, pos: int) -> int:
        bol = self.buf.rfind(b"\n", 0, pos) + 1
        return len(self.buf[bol:pos].decode("utf-8", errors="replace")) + 1

    def char_at(self, pos: int) -> str | None:
        """Decode the character starting at *pos*; ``None`` at end of input."""
        if pos >= len(self.buf):
            return None
        return self.buf[pos:pos + 4].decode("utf-8", errors="replace")[0]

    def error(self, cls: type[_E], diagnostic: str, pos: int | None = None) -> _E:
        """Build (not raise) a positioned parse error of class *cls*."""
        at = self.pos if pos is None else pos
        return cls(
            diagnostic,
            source_path=self.source_path,
            offset=at,
            line=self.line_of(at),
            column=self.column_of(at),
            next_char=self.char_at(at),
        )

    def error_got(self, cls: type[_E], expected: str, pos: int | None = None) -> _E:
        """Like :meth:`error`, with ``got <char>`` appended to the diagnostic."""
        at = self.pos if pos is None else pos
        return self.error(cls, f"{expected}, got {describe_char(self.char_at(at))}", at)

    # -- Strings --------------------------------------------------------

    def read_string(self) -> str:
        """Decode the double-quoted string at the cursor.

        Leaves the cursor on the closing quote; the caller decides how the
        following whitespace is checked and skipped.
        """
        if self.peek() != QUOTE:
            raise self.error_got(ExpectedToken, "expected '\"'")

        buf = self.buf
        end = len(buf)
        out = bytearray()
        pos = self.pos + 1
        while pos < end and buf[pos] != QUOTE:
            ch = buf[pos]
            if ch == BACKSLASH:
                pos += 1
                if pos >= end:
                    raise self.error(UnterminatedString, "backslash just before end of input", end)
                decoded = ESCAPES.get(buf[pos])
                if decoded is None:
                    seq = "\\" + (self.char_at(pos) or "")
                    raise self.error(BadEscape, f"bad escape sequence {seq!r}", pos - 1)
                ch = decoded
            out.append(ch)
            pos += 1

        if pos >= end:
            raise self.error(UnterminatedString, "unterminated string", end)

        self.pos = pos
        return out.decode("utf-8", errors="replace")
