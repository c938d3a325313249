"""Data model for simple VDF values."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Union


# ---------------------------------------------------------------------------
# Leaf
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Leaf:
    """A plain string value."""

    value: str

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Node:
    """A read-only mapping of names to further values.

    The entries are copied on construction and exposed through a
    ``MappingProxyType`` so a parsed tree cannot be changed afterwards.
    """

    entries: Mapping[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def names(self) -> list[str]:
        """Names in code point order (case-sensitive, no locale)."""
        return sorted(self.entries)

    def get(self, name: str) -> Value | None:
        return self.entries.get(name)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))


Value = Union[Leaf, Node]
