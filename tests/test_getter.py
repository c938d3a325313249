"""Tests for path lookups."""

import pytest

from svdf import (
    InternalError,
    Leaf,
    Node,
    NotALeaf,
    NotANode,
    PathLookupError,
    UnknownKey,
    keys_of,
    parse,
)
from svdf import getter


APP = (
    b'"AppState"\n'
    b"{\n"
    b'\t"appid"\t\t"228980"\n'
    b'\t"name"\t\t"Steamworks Common Redistributables"\n'
    b'\t"UserConfig"\n'
    b"\t{\n"
    b'\t\t"language"\t\t"english"\n'
    b"\t}\n"
    b'\t"InstalledDepots"\n'
    b"\t{\n"
    b"\t}\n"
    b"}\n"
)


@pytest.fixture
def doc():
    return parse(APP, source_path="appmanifest_228980.acf")


@pytest.fixture
def small():
    warnings = []
    return parse(b'"X" { "a" "1" }', on_warning=warnings.append)


# ---------------------------------------------------------------------------
# lookup_string
# ---------------------------------------------------------------------------

def test_lookup_string(doc):
    assert doc.lookup_string("appid") == "228980"
    assert doc.lookup_string("UserConfig", "language") == "english"


def test_lookup_string_unknown_key(doc):
    with pytest.raises(UnknownKey) as ei:
        doc.lookup_string("UserConfig", "betakey")
    err = ei.value
    assert err.path == ("UserConfig", "betakey")
    assert err.key == "betakey"
    assert err.parent == ("UserConfig",)


def test_lookup_string_unknown_top_key(small):
    with pytest.raises(UnknownKey) as ei:
        small.lookup_string("b")
    assert ei.value.path == ("b",)
    assert str(ei.value) == 'unknown name "b" at top level'


def test_lookup_string_through_leaf(small):
    with pytest.raises(NotANode) as ei:
        small.lookup_string("a", "b")
    err = ei.value
    assert err.path == ("a",)
    assert err.leaf_value == "1"


def test_lookup_string_on_node(doc):
    with pytest.raises(NotALeaf) as ei:
        doc.lookup_string("UserConfig")
    err = ei.value
    assert err.path == ("UserConfig",)
    assert err.node_keys == ["language"]


def test_empty_path_on_node_root(small):
    with pytest.raises(NotALeaf) as ei:
        small.lookup_string()
    assert ei.value.path == ()
    assert ei.value.node_keys == ["a"]


def test_empty_path_on_leaf_root():
    doc = parse(b'"X"\t\t"v"\n')
    assert doc.lookup_string() == "v"
    with pytest.raises(NotANode) as ei:
        doc.lookup_node()
    assert ei.value.path == ()


# ---------------------------------------------------------------------------
# lookup_node
# ---------------------------------------------------------------------------

def test_lookup_node(doc):
    node = doc.lookup_node("UserConfig")
    assert isinstance(node, Node)
    assert node.get("language") == Leaf("english")


def test_lookup_empty_node(doc):
    assert len(doc.lookup_node("InstalledDepots")) == 0


def test_lookup_node_on_leaf(small):
    with pytest.raises(NotANode) as ei:
        small.lookup_node("a")
    assert ei.value.path == ("a",)
    assert ei.value.leaf_value == "1"


def test_lookup_node_unknown(doc):
    with pytest.raises(UnknownKey):
        doc.lookup_node("MountedDepots")


def test_lookup_errors_are_lookup_errors(small):
    with pytest.raises(LookupError):
        small.lookup_string("zzz")
    with pytest.raises(PathLookupError):
        small.lookup_node("a")


def test_base_lookup_error_message():
    err = PathLookupError(("UserConfig", "betakey"))
    assert str(err) == 'cannot resolve "UserConfig"→"betakey"'
    assert PathLookupError(()).describe() == "cannot resolve top value"


# ---------------------------------------------------------------------------
# has_string / has_node
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "path, string, node",
    [
        (("appid",), True, False),
        (("UserConfig",), False, True),
        (("UserConfig", "language"), True, False),
        (("UserConfig", "missing"), False, False),
        (("appid", "deeper"), False, False),
        (("nothing",), False, False),
        ((), False, True),
    ],
)
def test_has_string_and_has_node(doc, path, string, node):
    assert doc.has_string(*path) is string
    assert doc.has_node(*path) is node


# ---------------------------------------------------------------------------
# keys_of
# ---------------------------------------------------------------------------

def test_keys_of_sorted(doc):
    assert doc.keys_of() == ["InstalledDepots", "UserConfig", "appid", "name"]


def test_keys_of_nested(doc):
    assert doc.keys_of("UserConfig") == ["language"]


def test_keys_of_function(doc):
    assert keys_of(doc.lookup_node("InstalledDepots")) == []


def test_keys_of_leaf(doc):
    with pytest.raises(NotANode):
        doc.keys_of("appid")


# ---------------------------------------------------------------------------
# Internal errors
# ---------------------------------------------------------------------------

def test_foreign_value_is_internal_error():
    root = Node({"a": 42})
    with pytest.raises(InternalError) as ei:
        getter.lookup_string(root, ["a"])
    assert ei.value.path == ("a",)
    with pytest.raises(InternalError):
        getter.lookup_node(root, ["a", "b"])


def test_foreign_value_has_string_is_false():
    root = Node({"a": 42})
    assert getter.has_string(root, ["a"]) is False
    assert getter.has_node(root, ["a"]) is False


def test_internal_error_is_not_lookup_error():
    assert not issubclass(InternalError, LookupError)
