from __future__ import annotations

"""
declcompare: canonical text comparison of declaration trees.

Renders symbol models (namespaces, classes, members) into a deterministic
indented text form and compares two of them, optionally against a golden
snapshot file.
"""

from declcompare.core.comparator import assert_declarations_equal, compare_declarations
from declcompare.core.ordering import make_member_sort_key, member_sort_key, render_signature
from declcompare.core.serializer import serialize_declaration
from declcompare.core.tree_loader import load_tree, node_from_dict
from declcompare.domain.comparison_models import ComparisonResult
from declcompare.domain.policy import (
    DEFAULT_POLICY,
    DONT_INCLUDE_METHODS_OF_OBJECT,
    RECURSIVE,
    ComparisonPolicy,
    recurse_all,
    recurse_into,
    skip_namespaces,
)
from declcompare.domain.tree_models import DeclarationNode, NodeKind, collect_children
from declcompare.infra.fs import SnapshotIOError

__version__ = "0.1.0"

__all__ = [
    "ComparisonPolicy",
    "ComparisonResult",
    "DEFAULT_POLICY",
    "DONT_INCLUDE_METHODS_OF_OBJECT",
    "DeclarationNode",
    "NodeKind",
    "RECURSIVE",
    "SnapshotIOError",
    "assert_declarations_equal",
    "collect_children",
    "compare_declarations",
    "load_tree",
    "make_member_sort_key",
    "member_sort_key",
    "node_from_dict",
    "recurse_all",
    "recurse_into",
    "render_signature",
    "serialize_declaration",
    "skip_namespaces",
]
