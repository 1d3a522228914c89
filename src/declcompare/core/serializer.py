from __future__ import annotations

"""
Declaration Tree Serializer.

Converts a DeclarationNode tree into its canonical indented text form.
The walk is depth-first and pre-order; siblings are sorted before they are
visited so that two trees enumerating the same members in different
orders produce identical text.

Layout rules:
- The root is the document: its signature is followed by a blank line and
  its children are printed at the same indentation, without braces.
- Nested classes and namespaces are preceded by a blank line and wrap
  their children in ' {' ... '}' one indentation unit deeper.
- Consecutive blank lines collapse to at most MAX_BLANK_LINES.
"""

import logging
from typing import List, Optional

from declcompare.core.ordering import Renderer, SortKey, make_member_sort_key, render_signature
from declcompare.domain.constants import (
    INDENTATION_UNIT,
    LINE_SEPARATOR,
    MAX_BLANK_LINES,
    PRIMARY_CONSTRUCTOR_MARKER,
)
from declcompare.domain.policy import DEFAULT_POLICY, ComparisonPolicy
from declcompare.domain.tree_models import DeclarationNode, NodeKind, collect_children

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def serialize_declaration(
        root: DeclarationNode,
        policy: ComparisonPolicy = DEFAULT_POLICY,
        *,
        renderer: Renderer = render_signature,
        sort_key: Optional[SortKey] = None,
) -> str:
    """
    Render a declaration tree into canonical text.

    Args:
        root: Top-level declaration, printed as the document header.
        policy: Filtering and annotation rules.
        renderer: Produces the opaque signature text of a node.
        sort_key: Total order for siblings. Defaults to the member ordering
            bound to the given renderer.

    Returns:
        str: Canonical serialization.

    Raises:
        RuntimeError: If a container node carries an unrecognized kind.
    """
    key = sort_key or make_member_sort_key(renderer)
    chunks: List[str] = []
    _append_declaration(root, chunks, 0, True, policy, renderer, key)
    return "".join(chunks)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _append_declaration(
        node: DeclarationNode,
        chunks: List[str],
        depth: int,
        top_level: bool,
        policy: ComparisonPolicy,
        renderer: Renderer,
        sort_key: SortKey,
) -> None:
    """Recursively append one declaration and its visible children."""
    if node.is_container and not top_level:
        _end_line(chunks)

    marker = ""
    if node.kind is NodeKind.CONSTRUCTOR and node.is_primary and policy.check_primary_constructors:
        marker = PRIMARY_CONSTRUCTOR_MARKER

    chunks.append(INDENTATION_UNIT * depth + marker + renderer(node))

    if not node.is_container:
        _end_line(chunks)
        return

    if top_level:
        _end_line(chunks)
        _end_line(chunks)
        child_depth = depth
    else:
        chunks.append(" {")
        _end_line(chunks)
        child_depth = depth + 1

    children = sorted(collect_children(node), key=sort_key)
    for child in children:
        if not policy.visits(child):
            logger.debug(f"Skipping {child.kind.value} '{child.fq_name or child.name}'")
            continue
        _append_declaration(child, chunks, child_depth, False, policy, renderer, sort_key)

    if not top_level:
        chunks.append(INDENTATION_UNIT * depth + "}")
        _end_line(chunks)


def _end_line(chunks: List[str]) -> None:
    """Append a line separator unless it would exceed the blank line limit."""
    if _trailing_separators(chunks) <= MAX_BLANK_LINES:
        chunks.append(LINE_SEPARATOR)


def _trailing_separators(chunks: List[str]) -> int:
    count = 0
    for chunk in reversed(chunks):
        if chunk != LINE_SEPARATOR:
            break
        count += 1
    return count
