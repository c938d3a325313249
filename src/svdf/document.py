"""Document — the result of parsing one simple VDF buffer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from . import getter
from .model import Node, Value


@dataclass(frozen=True, slots=True)
class Document:
    """A parsed file: caller-supplied metadata plus the single top-level pair.

    Query it through the lookup methods; every method takes the path as
    separate arguments, e.g. ``doc.lookup_string("libraryfolders", "0", "path")``.
    An empty path refers to :attr:`root_value`.
    """

    source_path: str
    modified_at: datetime | None
    byte_size: int | None
    root_name: str
    root_value: Value

    # -- Path accessors -------------------------------------------------

    def lookup_string(self, *path: str) -> str:
        return getter.lookup_string(self.root_value, path)

    def lookup_node(self, *path: str) -> Node:
        return getter.lookup_node(self.root_value, path)

    def has_string(self, *path: str) -> bool:
        return getter.has_string(self.root_value, path)

    def has_node(self, *path: str) -> bool:
        return getter.has_node(self.root_value, path)

    def keys_of(self, *path: str) -> list[str]:
        """Sorted names of the node at *path*."""
        return getter.keys_of(self.lookup_node(*path))
