"""Human-readable rendering of errors and warnings.

Error objects always carry full structured data; how much of it reaches
the text is decided here by an explicit :class:`RenderOptions`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence

from .errors import (
    CannotError,
    ParseError,
    ParseWarning,
    PathLookupError,
    WrongRootName,
    arrow_path,
)
from .scanner import describe_char


@dataclass(frozen=True, slots=True)
class RenderOptions:
    full_paths: bool = True   # False: show only the file's base name
    verbose: bool = False     # add offsets and the character found
    max_preview: int = 64     # clip quoted values and key lists


DEFAULT_OPTIONS = RenderOptions()


def display_path(path: str, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    if options.full_paths or not path:
        return path
    return os.path.basename(path)


def format_path(
    source_path: str, keys: Sequence[str], options: RenderOptions = DEFAULT_OPTIONS
) -> str:
    """``file "<path>" →"a"→"b"`` for pointing at a value inside a file."""
    text = f'file "{display_path(source_path, options)}"'
    if keys:
        text += " →" + arrow_path(keys)
    return text


def format_error(
    error: BaseException,
    options: RenderOptions = DEFAULT_OPTIONS,
    *,
    source_path: str | None = None,
) -> str:
    """Render *error* as one line of text.

    *source_path* names the file a lookup error came from; parse errors
    already carry their own path, which *source_path* overrides if given.
    """
    if isinstance(error, WrongRootName):
        where = display_path(source_path or error.source_path, options)
        expected = " or ".join(f'"{name}"' for name in error.expected)
        return f'line 1 of "{where}" contains "{error.actual}" instead of {expected}'

    if isinstance(error, ParseError):
        where = display_path(source_path or error.source_path, options)
        text = f"{where}:{error.line}:{error.column}: {error.diagnostic}"
        if options.verbose:
            text += f" (offset {error.offset}, next {describe_char(error.next_char)})"
        return text

    if isinstance(error, PathLookupError):
        text = error.describe(options.max_preview)
        if source_path:
            text = f'file "{display_path(source_path, options)}": {text}'
        return text

    if isinstance(error, CannotError):
        noun = display_path(error.noun, options)
        return f'cannot {error.verb} "{noun}": {error.reason}'

    return str(error)


def format_warning(warning: ParseWarning, options: RenderOptions = DEFAULT_OPTIONS) -> str:
    return (
        f'Odd whitespace in "{display_path(warning.source_path, options)}" '
        f"at offset {warning.offset} (line {warning.line}): {warning.diagnostic}"
    )
