"""sVDF — parser and path accessor for simple, string-only Valve Data Format text."""

from .document import Document
from .errors import (
    BadEscape,
    CannotError,
    ExpectedToken,
    InternalError,
    NestingTooDeep,
    NotALeaf,
    NotANode,
    ParseError,
    ParseWarning,
    PathLookupError,
    SVDFError,
    UnexpectedEOF,
    UnexpectedToken,
    UnknownKey,
    UnterminatedString,
    WrongRootName,
)
from .getter import keys_of
from .loader import load
from .model import Leaf, Node, Value
from .reader import DEFAULT_MAX_DEPTH, parse
from .render import RenderOptions, format_error, format_warning
from .repl import SVDFRepl

__all__ = [
    "parse",
    "load",
    "keys_of",
    "Document",
    "Leaf",
    "Node",
    "Value",
    "DEFAULT_MAX_DEPTH",
    "RenderOptions",
    "format_error",
    "format_warning",
    "SVDFError",
    "ParseError",
    "UnterminatedString",
    "BadEscape",
    "ExpectedToken",
    "UnexpectedToken",
    "UnexpectedEOF",
    "NestingTooDeep",
    "WrongRootName",
    "PathLookupError",
    "UnknownKey",
    "NotANode",
    "NotALeaf",
    "InternalError",
    "CannotError",
    "ParseWarning",
    "SVDFRepl",
]
