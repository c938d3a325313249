"""SVDFRepl — interactive inspector for simple VDF files.

Also provides the ``svdf-repl`` entry point via ``main()``.
"""

from __future__ import annotations

import dataclasses
import io
import shlex
import sys
from typing import IO, Iterator

from .document import Document
from .errors import ParseWarning, PathLookupError, SVDFError
from .loader import load
from .model import Leaf, Node, Value
from .render import RenderOptions, format_error, format_path, format_warning


# ---------------------------------------------------------------------------
# SVDFRepl class (programmatic use)
# ---------------------------------------------------------------------------

class SVDFRepl:
    """Holds the currently loaded document and rendering options.

    Usage::

        repl = SVDFRepl()
        repl.load("libraryfolders.vdf", "libraryfolders")
        repl.lookup("0", "path")     # → "/home/me/.steam/steam"
        repl.doc.keys_of("0")        # sorted names under "0"
        repl.reset()                 # forget the document
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()
        self.doc: Document | None = None
        self.warnings: list[ParseWarning] = []

    def load(self, path: str, *expected_root_names: str) -> Document:
        """Load *path*, replacing the current document only on success."""
        warnings: list[ParseWarning] = []
        doc = load(path, *expected_root_names, on_warning=warnings.append)
        self.doc = doc
        self.warnings = warnings
        return doc

    def eval(self, line: str) -> str | None:
        """Run one inspector command and return its output.

        Returns ``None`` when the command prints nothing (``:reset``, blank
        input).  Errors propagate to the caller.
        """
        out = io.StringIO()
        _dispatch(self, line, out)
        return out.getvalue() or None

    def lookup(self, *keys: str) -> Value:
        """Value at *keys* (a Leaf or a Node); an empty path gives the top value."""
        doc = self._require_doc()
        if doc.has_string(*keys):
            return Leaf(doc.lookup_string(*keys))
        return doc.lookup_node(*keys)

    def toggle_verbose(self) -> bool:
        self.options = dataclasses.replace(self.options, verbose=not self.options.verbose)
        return self.options.verbose

    def reset(self) -> None:
        self.doc = None
        self.warnings = []

    def _require_doc(self) -> Document:
        if self.doc is None:
            raise RuntimeError("no document loaded (use :load <file>)")
        return self.doc


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, Leaf):
        return f'"{value.value}"'
    if isinstance(value, Node):
        if not len(value):
            return "{}"
        return "{" + " ".join(f'"{k}"' for k in value.names()) + "}"
    return repr(value)


def _fmt_inspect(value: Value, depth: int = 0) -> str:
    """Pretty-print a value as an indented tree, names sorted."""
    if not isinstance(value, Node):
        return _fmt_inline(value)

    pad = "  " * depth
    if not len(value):
        return "{}"
    lines = ["{"]
    for name in value.names():
        child = value.entries[name]
        lines.append(f'{pad}  "{name}" {_fmt_inspect(child, depth + 1)}')
    lines.append(pad + "}")
    return "\n".join(lines)


def _show_info(repl: SVDFRepl, dest: IO[str]) -> None:
    doc = repl._require_doc()
    print(f"  path     : {doc.source_path}", file=dest)
    print(f"  modified : {doc.modified_at.isoformat() if doc.modified_at else '-'}", file=dest)
    print(f"  size     : {doc.byte_size}", file=dest)
    print(f'  root     : "{doc.root_name}"', file=dest)
    print(f"  warnings : {len(repl.warnings)}", file=dest)


def _show_warnings(repl: SVDFRepl, dest: IO[str]) -> None:
    if not repl.warnings:
        print("  (no warnings)", file=dest)
        return
    for warning in repl.warnings:
        print(f"  {format_warning(warning, repl.options)}", file=dest)


def _show_keys(repl: SVDFRepl, keys: list[str], dest: IO[str]) -> None:
    doc = repl._require_doc()
    names = doc.keys_of(*keys)
    if not names:
        print("  (empty node)", file=dest)
        return
    for name in names:
        print(f'  "{name}"', file=dest)


def _report(repl: SVDFRepl, exc: Exception) -> None:
    source = None
    if isinstance(exc, PathLookupError) and repl.doc is not None:
        source = repl.doc.source_path
    if isinstance(exc, SVDFError):
        print(format_error(exc, repl.options, source_path=source), file=sys.stderr)
    else:
        print(f"Error: {exc}", file=sys.stderr)


def _dispatch(repl: SVDFRepl, line: str, dest: IO[str]) -> None:
    words = shlex.split(line)
    if not words:
        return
    command, args = words[0], words[1:]

    if command == ":load":
        if not args:
            raise ValueError("usage: :load <file> [root name ...]")
        doc = repl.load(*args)
        print(
            f'  loaded {format_path(doc.source_path, [], repl.options)}: '
            f'root "{doc.root_name}", {len(repl.warnings)} warning(s)',
            file=dest,
        )
    elif command == ":info":
        _show_info(repl, dest)
    elif command == ":warnings":
        _show_warnings(repl, dest)
    elif command == ":keys":
        _show_keys(repl, args, dest)
    elif command == ":verbose":
        state = "on" if repl.toggle_verbose() else "off"
        print(f"  verbose {state}", file=dest)
    elif command == ":reset":
        repl.reset()
    elif command == "?":
        print(repl._require_doc().lookup_string(*args), file=dest)
    elif command == ":node":
        print(_fmt_inspect(repl._require_doc().lookup_node(*args)), file=dest)
    elif command in ("inspect", "i"):
        print(_fmt_inspect(repl.lookup(*args)), file=dest)
    else:
        raise ValueError(f"Unknown command {command!r}")


def _process_line(repl: SVDFRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        filepath = line[4:].strip()
        try:
            with open(filepath, encoding="utf-8") as fh:
                for file_line in fh:
                    if not _process_line(repl, file_line.rstrip("\n"), dest):
                        return False
        except OSError as exc:
            print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        return True

    # ── Everything else ───────────────────────────────────────────────────
    try:
        _dispatch(repl, line, dest)
    except (SVDFError, RuntimeError, ValueError) as exc:
        _report(repl, exc)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

class _Output:
    """Destination for command output: stdout, or the file named by ``?>>``."""

    def __init__(self) -> None:
        self.stream: IO[str] = sys.stdout
        self._file: IO[str] | None = None

    def redirect(self, filepath: str) -> None:
        """Send output to *filepath*, or back to stdout when it is empty."""
        self.close()
        if not filepath:
            return
        try:
            self._file = open(filepath, "w", encoding="utf-8")
        except OSError as exc:
            print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
            return
        self.stream = self._file

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self.stream = sys.stdout


def _input_lines(prompt: str) -> Iterator[str]:
    """Lines typed at *prompt* until end of input; Ctrl-C abandons a line."""
    while True:
        try:
            yield input(prompt)
        except EOFError:
            print()
            return
        except KeyboardInterrupt:
            print()


def main() -> None:
    """Interactive shell (``svdf-repl`` / ``python -m svdf.repl``)."""
    repl = SVDFRepl()
    output = _Output()
    print(
        "sVDF REPL  (:q to quit  |  :load <file>  :info  :keys  :node  :warnings"
        "  :verbose  |  ? <keys>  i <keys>  |  ?<< batch  ?>> redirect)"
    )
    try:
        for line in _input_lines("sVDF> "):
            line = line.strip()
            if line.startswith("?>>"):
                output.redirect(line[3:].strip())
            elif not _process_line(repl, line, output.stream):
                break
    finally:
        output.close()


if __name__ == "__main__":
    main()
