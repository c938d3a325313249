"""Exceptions and diagnostics raised by the simple VDF core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


class SVDFError(Exception):
    """Base class for every error raised by this package."""


# ---------------------------------------------------------------------------
# Parse errors (fatal to a parse call)
# ---------------------------------------------------------------------------

class ParseError(SVDFError):
    """Malformed input, reported with the position it was detected at.

    ``offset`` is zero-origin; ``line`` and ``column`` are one-origin, with
    ``column`` counted in characters rather than bytes.  ``next_char`` is the
    character found at ``offset``, or ``None`` at end of input.
    """

    def __init__(
        self,
        diagnostic: str,
        *,
        source_path: str = "",
        offset: int = 0,
        line: int = 1,
        column: int = 1,
        next_char: str | None = None,
    ) -> None:
        super().__init__(diagnostic)
        self.diagnostic = diagnostic
        self.source_path = source_path
        self.offset = offset
        self.line = line
        self.column = column
        self.next_char = next_char

    def __str__(self) -> str:
        return f"{self.source_path}:{self.line}:{self.column}: {self.diagnostic}"


class UnterminatedString(ParseError):
    pass


class BadEscape(ParseError):
    pass


class ExpectedToken(ParseError):
    pass


class UnexpectedToken(ParseError):
    pass


class UnexpectedEOF(ParseError):
    pass


class NestingTooDeep(ParseError):
    pass


class WrongRootName(ParseError):
    """The document parsed, but its root name is not one the caller accepts."""

    def __init__(
        self, actual: str, expected: Sequence[str], *, source_path: str = ""
    ) -> None:
        self.actual = actual
        self.expected = tuple(expected)
        wanted = " or ".join(f'"{name}"' for name in self.expected)
        super().__init__(
            f'root name is "{actual}" instead of {wanted}',
            source_path=source_path,
            next_char='"',
        )


# ---------------------------------------------------------------------------
# Lookup errors (path accessor, after a successful parse)
# ---------------------------------------------------------------------------

def arrow_path(path: Sequence[str]) -> str:
    """Render a key path as ``"a"→"b"→"c"``."""
    return "→".join(f'"{key}"' for key in path)


class PathLookupError(SVDFError, LookupError):
    """A path could not be resolved in a document."""

    def __init__(self, path: Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__(self.describe())

    def describe(self, max_preview: int = 64) -> str:
        return f"cannot resolve {arrow_path(self.path) or 'top value'}"

    def __str__(self) -> str:
        return self.describe()


class UnknownKey(PathLookupError):
    """``path[-1]`` is not a name in the node at ``path[:-1]``."""

    @property
    def key(self) -> str:
        return self.path[-1]

    @property
    def parent(self) -> tuple[str, ...]:
        return self.path[:-1]

    def describe(self, max_preview: int = 64) -> str:
        where = arrow_path(self.parent) if self.parent else "top level"
        return f'unknown name "{self.key}" at {where}'


class NotANode(PathLookupError):
    """A leaf was found at ``path`` where a node was needed."""

    def __init__(self, path: Sequence[str], leaf_value: str) -> None:
        self.leaf_value = leaf_value
        super().__init__(path)

    def describe(self, max_preview: int = 64) -> str:
        where = f"key {arrow_path(self.path)}" if self.path else "top value"
        return f'{where} has value "{_clip(self.leaf_value, max_preview)}", not a node'


class NotALeaf(PathLookupError):
    """A node was found at ``path`` where a string was needed."""

    def __init__(self, path: Sequence[str], node_keys: Sequence[str]) -> None:
        self.node_keys = list(node_keys)
        super().__init__(path)

    def describe(self, max_preview: int = 64) -> str:
        where = f"key {arrow_path(self.path)}" if self.path else "top value"
        names = " ".join(f'"{key}"' for key in self.node_keys)
        return f"{where} has node {{{_clip(names, max_preview)}}}, not a string"


def _clip(text: str, limit: int) -> str:
    if limit <= 0 or len(text) <= limit:
        return text
    return text[: max(limit - 3, 0)] + "..."


# ---------------------------------------------------------------------------
# Other errors
# ---------------------------------------------------------------------------

class InternalError(SVDFError):
    """A value that is neither Leaf nor Node was reached: a bug in this package."""

    def __init__(self, path: Sequence[str], value: object) -> None:
        self.path = tuple(path)
        self.value = value
        super().__init__(f"unexpected value {value!r} at {arrow_path(self.path) or 'top value'}")


class CannotError(SVDFError):
    """An I/O step on a file failed; the ``OSError`` is chained as the cause."""

    def __init__(self, verb: str, noun: str, reason: str) -> None:
        self.verb = verb
        self.noun = noun
        self.reason = reason
        super().__init__(f'cannot {verb} "{noun}": {reason}')


# ---------------------------------------------------------------------------
# Warnings (non-fatal)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseWarning:
    """A formatting convention deviation; never stops a parse."""

    source_path: str
    offset: int
    line: int
    diagnostic: str
    next_char: str | None = None

    def __str__(self) -> str:
        return (
            f'Odd whitespace in "{self.source_path}" at offset {self.offset} '
            f"(line {self.line}): {self.diagnostic}"
        )
