"""Read a simple VDF file from disk and parse it."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone

from .document import Document
from .errors import CannotError
from .reader import DEFAULT_MAX_DEPTH, parse
from .whitespace import WarningSink

logger = logging.getLogger(__name__)


def _cannot(verb: str, filespec: str, exc: OSError) -> CannotError:
    return CannotError(verb, filespec, exc.strerror or str(exc))


def load(
    path: str | os.PathLike[str],
    *expected_root_names: str,
    on_warning: WarningSink | None = None,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> Document:
    """Open, read and parse the file at *path*.

    The file's modification time (UTC) and size are captured from the open
    handle before reading.  If any *expected_root_names* are given, the
    document's root name must be one of them.
    """
    filespec = os.fspath(path)
    try:
        fh = open(filespec, "rb")
    except OSError as exc:
        raise _cannot("open", filespec, exc) from exc

    with fh:
        try:
            st = os.fstat(fh.fileno())
        except OSError as exc:
            raise _cannot("examine", filespec, exc) from exc
        try:
            data = fh.read()
        except OSError as exc:
            raise _cannot("read", filespec, exc) from exc

    logger.debug("read %d bytes from %r", len(data), filespec)
    return parse(
        data,
        source_path=filespec,
        modified_at=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        byte_size=st.st_size,
        expected_root_names=expected_root_names,
        on_warning=on_warning,
        max_depth=max_depth,
    )
