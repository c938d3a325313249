"""Path resolution over a parsed value tree."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import InternalError, NotALeaf, NotANode, UnknownKey
from .model import Leaf, Node, Value


def walk(root: Value, path: Sequence[str]) -> Value:
    """Follow *path* from *root* through nested nodes.

    An empty path yields *root* itself.  Raises :class:`NotANode` when a leaf
    sits where a node is needed to continue, and :class:`UnknownKey` when a
    name is missing.
    """
    value = root
    for i, key in enumerate(path):
        if isinstance(value, Leaf):
            raise NotANode(path[:i], value.value)
        if not isinstance(value, Node):
            raise InternalError(path[:i], value)
        found = value.get(key)
        if found is None:
            raise UnknownKey(path[: i + 1])
        value = found
    return value


def lookup_string(root: Value, path: Sequence[str]) -> str:
    value = walk(root, path)
    if isinstance(value, Leaf):
        return value.value
    if isinstance(value, Node):
        raise NotALeaf(path, value.names())
    raise InternalError(path, value)


def lookup_node(root: Value, path: Sequence[str]) -> Node:
    value = walk(root, path)
    if isinstance(value, Node):
        return value
    if isinstance(value, Leaf):
        raise NotANode(path, value.value)
    raise InternalError(path, value)


def _probe(root: Value, path: Sequence[str]) -> Value | None:
    value = root
    for key in path:
        if not isinstance(value, Node):
            return None
        value = value.get(key)
        if value is None:
            return None
    return value


def has_string(root: Value, path: Sequence[str]) -> bool:
    """True if :func:`lookup_string` would succeed."""
    return isinstance(_probe(root, path), Leaf)


def has_node(root: Value, path: Sequence[str]) -> bool:
    """True if :func:`lookup_node` would succeed."""
    return isinstance(_probe(root, path), Node)


def keys_of(node: Node) -> list[str]:
    return node.names()
