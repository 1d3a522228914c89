from __future__ import annotations

"""
Comparison Policy.

Immutable configuration controlling which declarations the serializer
visits and how constructors are annotated. Derivation helpers always
return new values; presets are module-level constants.
"""

from dataclasses import dataclass, replace
from typing import Callable

from declcompare.domain.constants import OBJECT_METHOD_NAMES
from declcompare.domain.tree_models import DeclarationNode, NodeKind

RecursionFilter = Callable[[str], bool]

# -----------------------------------------------------------------------------
# RECURSION FILTERS
# -----------------------------------------------------------------------------

def recurse_all(fq_name: str) -> bool:
    """Expand every nested namespace."""
    return True


def _matches_prefix(fq_name: str, prefix: str) -> bool:
    return fq_name == prefix or fq_name.startswith(prefix + ".")


def recurse_into(*prefixes: str) -> RecursionFilter:
    """
    Build a filter expanding only namespaces inside the given prefixes.

    Ancestors of a prefix are expanded too, otherwise the prefix itself
    would never be reached.
    """
    def _predicate(fq_name: str) -> bool:
        return any(
            _matches_prefix(fq_name, p) or _matches_prefix(p, fq_name)
            for p in prefixes
        )
    return _predicate


def skip_namespaces(*prefixes: str) -> RecursionFilter:
    """Build a filter rejecting the given namespaces and everything below them."""
    def _predicate(fq_name: str) -> bool:
        return not any(_matches_prefix(fq_name, p) for p in prefixes)
    return _predicate

# -----------------------------------------------------------------------------
# POLICY MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ComparisonPolicy:
    """
    Filtering and annotation rules applied while serializing a tree.

    Attributes:
        check_primary_constructors: Prefix primary constructors with a marker.
        include_object_methods: Keep universal object methods (equals, ...).
        recursion_filter: Decides, by qualified name, whether a nested
            namespace is expanded. Rejected namespaces are omitted entirely.
    """
    check_primary_constructors: bool = False
    include_object_methods: bool = False
    recursion_filter: RecursionFilter = recurse_all

    def with_recursion_filter(self, recursion_filter: RecursionFilter) -> "ComparisonPolicy":
        return replace(self, recursion_filter=recursion_filter)

    def with_check_primary_constructors(self, check: bool) -> "ComparisonPolicy":
        return replace(self, check_primary_constructors=check)

    def with_object_methods(self, include: bool) -> "ComparisonPolicy":
        return replace(self, include_object_methods=include)

    def visits(self, node: DeclarationNode) -> bool:
        """
        Decide whether a child declaration is serialized.

        Args:
            node: Child declaration about to be visited.

        Returns:
            bool: False for excluded object methods and filtered namespaces.
        """
        if (
                not self.include_object_methods
                and node.kind is NodeKind.FUNCTION
                and node.name in OBJECT_METHOD_NAMES
        ):
            return False

        if node.kind is NodeKind.NAMESPACE and not self.recursion_filter(node.fq_name):
            return False

        return True


# -----------------------------------------------------------------------------
# PRESETS
# -----------------------------------------------------------------------------

DONT_INCLUDE_METHODS_OF_OBJECT = ComparisonPolicy(
    check_primary_constructors=False,
    include_object_methods=False,
    recursion_filter=recurse_all,
)

RECURSIVE = ComparisonPolicy(
    check_primary_constructors=False,
    include_object_methods=True,
    recursion_filter=recurse_all,
)

DEFAULT_POLICY = DONT_INCLUDE_METHODS_OF_OBJECT
