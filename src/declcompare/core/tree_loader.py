from __future__ import annotations

"""
Declaration Tree Loader.

Builds DeclarationNode trees from JSON documents so that trees produced by
an external resolver or loader can be dumped to disk and compared from the
command line.

Document shape (every key except 'kind' and 'name' is optional):

    {
      "kind": "namespace",
      "name": "test",
      "signature": "package test",
      "fq_name": "test",
      "members": [...],
      "objects": [...],
      "constructors": [...],
      "class_object": {...},
      "primary": false
    }
"""

import json
import logging
from typing import Any, Dict, List, Tuple

from declcompare.domain.tree_models import DeclarationNode, NodeKind

logger = logging.getLogger(__name__)

_CHILD_LIST_KEYS = ("constructors", "members", "objects")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_tree(path: str) -> DeclarationNode:
    """
    Read a declaration tree from a JSON file.

    Args:
        path: JSON document location.

    Returns:
        DeclarationNode: Root of the tree.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not valid JSON or holds an unknown kind.
        TypeError: If a field has the wrong type.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in '{path}': {e}") from e

    root = node_from_dict(data)
    logger.debug(f"Loaded declaration tree '{root.name}' from {path}")
    return root


def node_from_dict(data: Dict[str, Any], parent_fq_name: str = "") -> DeclarationNode:
    """
    Convert a JSON object into a DeclarationNode, recursively.

    Namespaces without an explicit 'fq_name' are qualified with the name of
    the enclosing namespace.

    Args:
        data: Mapping describing one declaration.
        parent_fq_name: Qualified name of the enclosing namespace.

    Returns:
        DeclarationNode: The converted node.
    """
    if not isinstance(data, dict):
        raise TypeError(f"Declaration must be an object, got {type(data).__name__}.")

    kind = _parse_kind(data.get("kind"))
    name = _require_str(data, "name")
    signature = _optional_str(data, "signature", default=name)

    fq_name = _optional_str(data, "fq_name", default="")
    if not fq_name and kind is NodeKind.NAMESPACE:
        fq_name = f"{parent_fq_name}.{name}" if parent_fq_name and name else name

    scope_fq_name = fq_name if kind is NodeKind.NAMESPACE else parent_fq_name
    children = {
        key: _parse_children(data, key, scope_fq_name) for key in _CHILD_LIST_KEYS
    }

    class_object = None
    raw_class_object = data.get("class_object")
    if raw_class_object is not None:
        class_object = node_from_dict(raw_class_object, scope_fq_name)

    primary = data.get("primary", False)
    if not isinstance(primary, bool):
        raise TypeError(f"'primary' of '{name}' must be a boolean.")

    return DeclarationNode(
        kind=kind,
        name=name,
        signature=signature,
        fq_name=fq_name,
        is_primary=primary,
        constructors=children["constructors"],
        members=children["members"],
        objects=children["objects"],
        class_object=class_object,
    )

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_kind(raw: Any) -> NodeKind:
    if not isinstance(raw, str):
        raise TypeError("'kind' must be a string.")
    try:
        return NodeKind(raw.strip().lower())
    except ValueError:
        valid = ", ".join(k.value for k in NodeKind)
        raise ValueError(f"Unknown declaration kind '{raw}'. Expected one of: {valid}.") from None


def _require_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string.")
    return value


def _optional_str(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string.")
    return value


def _parse_children(
        data: Dict[str, Any],
        key: str,
        scope_fq_name: str,
) -> Tuple[DeclarationNode, ...]:
    raw = data.get(key)
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise TypeError(f"'{key}' must be a list.")
    nodes: List[DeclarationNode] = [node_from_dict(item, scope_fq_name) for item in raw]
    return tuple(nodes)
