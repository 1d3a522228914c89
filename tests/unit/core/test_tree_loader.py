from __future__ import annotations

"""
Unit tests for the JSON Declaration Tree Loader.

Verifies field mapping, namespace qualification defaults and the
validation errors raised for malformed documents.
"""

import json
from pathlib import Path

import pytest

from declcompare.core.serializer import serialize_declaration
from declcompare.core.tree_loader import load_tree, node_from_dict
from declcompare.domain.tree_models import NodeKind

SAMPLE_DOCUMENT = {
    "kind": "namespace",
    "name": "test",
    "signature": "package test",
    "members": [
        {"kind": "function", "name": "bar", "signature": "public fun bar(): kotlin.Unit"},
        {
            "kind": "class",
            "name": "A",
            "signature": "public final class A",
            "constructors": [
                {"kind": "constructor", "name": "<init>", "signature": "public constructor A()", "primary": True}
            ],
            "members": [
                {"kind": "function", "name": "foo", "signature": "public final fun foo(): kotlin.Unit"},
                {"kind": "property", "name": "x", "signature": "public final val x: kotlin.Int"},
            ],
        },
        {"kind": "namespace", "name": "sub", "signature": "package test.sub"},
    ],
}


def test_node_from_dict_maps_fields() -> None:
    root = node_from_dict(SAMPLE_DOCUMENT)

    assert root.kind is NodeKind.NAMESPACE
    assert root.fq_name == "test"
    assert [m.name for m in root.members] == ["bar", "A", "sub"]

    a = root.members[1]
    assert a.kind is NodeKind.CLASS
    assert a.constructors[0].is_primary is True
    assert a.members[1].kind is NodeKind.PROPERTY


def test_nested_namespace_is_qualified_from_parent() -> None:
    root = node_from_dict(SAMPLE_DOCUMENT)

    assert root.members[2].fq_name == "test.sub"


def test_explicit_fq_name_wins() -> None:
    node = node_from_dict({"kind": "namespace", "name": "sub", "fq_name": "other.sub"}, "test")

    assert node.fq_name == "other.sub"


def test_signature_defaults_to_name() -> None:
    node = node_from_dict({"kind": "Other", "name": "alias"})

    assert node.kind is NodeKind.OTHER
    assert node.signature == "alias"


def test_class_object_is_loaded() -> None:
    node = node_from_dict({
        "kind": "class",
        "name": "A",
        "class_object": {"kind": "class", "name": "<class-object-for-A>"},
    })

    assert node.class_object is not None
    assert node.class_object.name == "<class-object-for-A>"


def test_loaded_tree_serializes(sample_tree_text: str) -> None:
    """The sample document mirrors the shared sample tree plus an empty sub-namespace."""
    text = serialize_declaration(node_from_dict(SAMPLE_DOCUMENT))

    assert text == sample_tree_text + "\npackage test.sub {\n}\n"


def test_load_tree_from_file(tmp_path: Path) -> None:
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(SAMPLE_DOCUMENT), encoding="utf-8")

    assert load_tree(str(path)) == node_from_dict(SAMPLE_DOCUMENT)


def test_load_tree_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON"):
        load_tree(str(path))


@pytest.mark.parametrize(
    "document, error, match",
    [
        ([], TypeError, "must be an object"),
        ({"kind": "module", "name": "x"}, ValueError, "Unknown declaration kind"),
        ({"kind": 3, "name": "x"}, TypeError, "'kind' must be a string"),
        ({"kind": "class"}, TypeError, "'name' must be a string"),
        ({"kind": "class", "name": "A", "members": {}}, TypeError, "'members' must be a list"),
        ({"kind": "constructor", "name": "<init>", "primary": "yes"}, TypeError, "'primary'"),
        ({"kind": "class", "name": "A", "signature": 1}, TypeError, "'signature' must be a string"),
    ],
)
def test_invalid_documents(document, error, match) -> None:
    with pytest.raises(error, match=match):
        node_from_dict(document)
