"""Reader layer: recursive-descent parser from bytes to a Document.

Grammar::

    document := string value
    value    := string | '{' member* '}'
    member   := string value

Every token is checked for the whitespace that follows it (see
:mod:`svdf.whitespace`); structural problems raise a
:class:`~svdf.errors.ParseError` subclass.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from .document import Document
from .errors import NestingTooDeep, UnexpectedEOF, UnexpectedToken, WrongRootName
from .model import Leaf, Node, Value
from .scanner import QUOTE, Scanner
from .whitespace import Expect, WarningSink, log_warning, skip_whitespace

logger = logging.getLogger(__name__)

OPEN = ord("{")
CLOSE = ord("}")

DEFAULT_MAX_DEPTH = 200


class Reader:
    """One parse: a scanner plus the warning sink and depth cap it reports to."""

    def __init__(
        self, sc: Scanner, sink: WarningSink, max_depth: int | None = DEFAULT_MAX_DEPTH
    ) -> None:
        self.sc = sc
        self.sink = sink
        self.max_depth = max_depth

    def read_name(self) -> str:
        name = self.sc.read_string()
        skip_whitespace(self.sc, Expect.Tabs, self.sink)
        return name

    def read_value(self) -> Value:
        sc = self.sc
        ch = sc.peek()
        if ch is None:
            raise sc.error(UnexpectedEOF, "unexpected end of input, expected a value")
        if ch == QUOTE:
            text = sc.read_string()
            skip_whitespace(sc, Expect.Newline, self.sink)
            return Leaf(text)
        if ch == OPEN:
            return self.read_node()
        raise sc.error_got(UnexpectedToken, "expected '\"' or '{'")

    def read_node(self) -> Node:
        """Read ``{ member* }`` with the cursor on the opening brace."""
        sc = self.sc
        if self.max_depth is not None and sc.depth >= self.max_depth:
            raise sc.error(NestingTooDeep, f"nesting deeper than {self.max_depth} levels")

        sc.depth += 1
        skip_whitespace(sc, Expect.Newline, self.sink)

        entries: dict[str, Value] = {}
        while not sc.at_end():
            ch = sc.peek()
            if ch == QUOTE:
                name = self.read_name()
                # A repeated name replaces the earlier value.
                entries[name] = self.read_value()
            elif ch == CLOSE:
                sc.depth -= 1
                skip_whitespace(sc, Expect.Newline, self.sink)
                return Node(entries)
            else:
                raise sc.error_got(UnexpectedToken, "expected '\"' or '}'")

        raise sc.error(UnexpectedEOF, f"unexpected end of input, {sc.depth} unclosed '{{'")


def parse(
    data: bytes | bytearray | memoryview | str,
    *,
    source_path: str = "",
    modified_at: datetime | None = None,
    byte_size: int | None = None,
    expected_root_names: Sequence[str] = (),
    on_warning: WarningSink | None = None,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> Document:
    """Parse a complete simple VDF buffer into a :class:`Document`.

    *source_path*, *modified_at* and *byte_size* are carried through to the
    document unchanged (*byte_size* defaults to the buffer length).  If
    *expected_root_names* is non-empty, a root name outside it raises
    :class:`~svdf.errors.WrongRootName`.  Whitespace warnings go to
    *on_warning*, or to the ``svdf.whitespace`` logger when it is omitted.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    sc = Scanner(data, source_path)
    reader = Reader(sc, on_warning or log_warning, max_depth)

    logger.debug("parsing %r (%d bytes)", source_path, len(sc.buf))
    if sc.at_end():
        raise sc.error(UnexpectedEOF, "empty input")

    root_name = reader.read_name()
    root_value = reader.read_value()
    if not sc.at_end():
        raise sc.error_got(UnexpectedToken, "expected end of input after the top value")

    if expected_root_names and root_name not in expected_root_names:
        raise WrongRootName(root_name, expected_root_names, source_path=source_path)

    logger.debug("parsed %r: root name %r", source_path, root_name)
    return Document(
        source_path=source_path,
        modified_at=modified_at,
        byte_size=len(sc.buf) if byte_size is None else byte_size,
        root_name=root_name,
        root_value=root_value,
    )
