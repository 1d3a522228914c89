from __future__ import annotations

"""
Member Ordering.

Default deterministic total order for sibling declarations. Siblings are
grouped by kind priority (constructors first, namespaces last), then
ordered by name, and ties between overloads are broken by the rendered
signature so that both compared trees agree regardless of supply order.
"""

from typing import Any, Callable, Tuple

from declcompare.domain.constants import KIND_PRIORITY
from declcompare.domain.tree_models import DeclarationNode

Renderer = Callable[[DeclarationNode], str]
SortKey = Callable[[DeclarationNode], Any]


def render_signature(node: DeclarationNode) -> str:
    """Default renderer: the pre-rendered signature carried by the node."""
    return node.signature


def member_sort_key(
        node: DeclarationNode,
        renderer: Renderer = render_signature,
) -> Tuple[int, str, str]:
    """
    Compute the ordering key of a declaration.

    Args:
        node: Declaration to order.
        renderer: Signature renderer used for the tie-break.

    Returns:
        Tuple[int, str, str]: (negated kind priority, name, rendered signature).
    """
    priority = KIND_PRIORITY.get(node.kind.value, 0)
    return -priority, node.name, renderer(node)


def make_member_sort_key(renderer: Renderer = render_signature) -> SortKey:
    """Bind a renderer to member_sort_key for use with sorted()."""
    def _key(node: DeclarationNode) -> Tuple[int, str, str]:
        return member_sort_key(node, renderer)
    return _key
