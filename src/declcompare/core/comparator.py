from __future__ import annotations

"""
Declaration Tree Comparator.

Serializes an expected and an actual declaration tree with the same policy,
checks that both texts are equal and, when a snapshot file is given,
reconciles the actual text with the stored baseline. A missing snapshot is
generated from the actual text and still reported as a failure so that a
human reviews it before it becomes the checked-in baseline.
"""

import difflib
import logging
import os
from typing import Optional, Union

from declcompare.core.ordering import Renderer, SortKey, render_signature
from declcompare.core.serializer import serialize_declaration
from declcompare.domain.comparison_models import (
    ComparisonResult,
    create_failure_result,
    create_success_result,
)
from declcompare.domain.policy import DEFAULT_POLICY, ComparisonPolicy
from declcompare.domain.tree_models import DeclarationNode
from declcompare.infra.fs import read_snapshot, snapshot_exists, write_snapshot

logger = logging.getLogger(__name__)

# Characters shown on each side of a line terminator difference
_TAIL_CONTEXT = 20

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def compare_declarations(
        expected: DeclarationNode,
        actual: DeclarationNode,
        policy: ComparisonPolicy = DEFAULT_POLICY,
        snapshot_path: Optional[Union[str, "os.PathLike[str]"]] = None,
        *,
        renderer: Renderer = render_signature,
        sort_key: Optional[SortKey] = None,
) -> ComparisonResult:
    """
    Compare two declaration trees and optionally a stored snapshot.

    Args:
        expected: Reference tree.
        actual: Tree under test.
        policy: Filtering and annotation rules shared by both serializations.
        snapshot_path: Optional golden file holding the canonical text.
        renderer: Signature renderer forwarded to the serializer.
        sort_key: Sibling ordering forwarded to the serializer.

    Returns:
        ComparisonResult: Success, or the first failed check.

    Raises:
        SnapshotIOError: If the snapshot file cannot be read or written.
        RuntimeError: If a tree holds a container of an unrecognized kind.
    """
    expected_text = serialize_declaration(expected, policy, renderer=renderer, sort_key=sort_key)
    actual_text = serialize_declaration(actual, policy, renderer=renderer, sort_key=sort_key)
    logger.debug(
        f"Serialized '{expected.name}': expected={len(expected_text)} chars, "
        f"actual={len(actual_text)} chars"
    )

    # 1. Tree against tree
    if expected_text != actual_text:
        logger.info(f"Declaration trees differ for '{expected.name}'")
        return create_failure_result(
            error=_mismatch_message(
                "Expected and actual declarations differ",
                expected_text,
                actual_text,
                "expected",
                "actual",
            ),
            expected_text=expected_text,
            actual_text=actual_text,
            diff=_unified_diff(expected_text, actual_text, "expected", "actual"),
        )

    if snapshot_path is None:
        return create_success_result(expected_text, actual_text)

    snapshot_path = os.fspath(snapshot_path)

    # 2. Record mode: generate the missing baseline and fail
    if not snapshot_exists(snapshot_path):
        write_snapshot(snapshot_path, actual_text)
        logger.info(f"Generated missing snapshot: {snapshot_path}")
        return create_failure_result(
            error=f"Expected data file did not exist. Generating: {snapshot_path}",
            expected_text="",
            actual_text=actual_text,
            snapshot_path=snapshot_path,
            snapshot_created=True,
        )

    # 3. Tree against stored baseline
    stored_text = read_snapshot(snapshot_path)
    if stored_text != actual_text:
        snapshot_name = os.path.basename(snapshot_path)
        logger.info(f"Actual declarations differ from snapshot {snapshot_path}")
        return create_failure_result(
            error=_mismatch_message(
                f"Expected and actual declarations differ from {snapshot_name}",
                stored_text,
                actual_text,
                snapshot_name,
                "actual",
            ),
            expected_text=stored_text,
            actual_text=actual_text,
            diff=_unified_diff(stored_text, actual_text, snapshot_name, "actual"),
            snapshot_path=snapshot_path,
        )

    return create_success_result(expected_text, actual_text, snapshot_path)


def assert_declarations_equal(
        expected: DeclarationNode,
        actual: DeclarationNode,
        policy: ComparisonPolicy = DEFAULT_POLICY,
        snapshot_path: Optional[Union[str, "os.PathLike[str]"]] = None,
        *,
        renderer: Renderer = render_signature,
        sort_key: Optional[SortKey] = None,
) -> ComparisonResult:
    """
    Test-framework entry point: compare and raise on the first failure.

    Raises:
        AssertionError: If any comparison step fails, including record mode.
    """
    result = compare_declarations(
        expected,
        actual,
        policy,
        snapshot_path,
        renderer=renderer,
        sort_key=sort_key,
    )
    if not result.ok:
        raise AssertionError(result.error)
    return result

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _unified_diff(expected_text: str, actual_text: str, from_name: str, to_name: str) -> str:
    diff = list(difflib.unified_diff(
        expected_text.splitlines(),
        actual_text.splitlines(),
        fromfile=from_name,
        tofile=to_name,
        lineterm="",
    ))
    if not diff and expected_text != actual_text:
        return _line_terminator_note(expected_text, actual_text, from_name, to_name)
    return "\n".join(diff)


def _line_terminator_note(expected_text: str, actual_text: str, from_name: str, to_name: str) -> str:
    """Describe a difference that splitlines() cannot see, e.g. a missing final newline."""
    common = len(os.path.commonprefix([expected_text, actual_text]))
    start = max(0, common - _TAIL_CONTEXT)
    end = common + _TAIL_CONTEXT
    return "\n".join([
        f"Texts differ only in line terminators or trailing newline (at offset {common}):",
        f"  {from_name}: ...{expected_text[start:end]!r}",
        f"  {to_name}: ...{actual_text[start:end]!r}",
    ])


def _mismatch_message(
        headline: str,
        expected_text: str,
        actual_text: str,
        from_name: str,
        to_name: str,
) -> str:
    """Compose a failure message carrying the diff and both full texts."""
    parts = [
        headline,
        _unified_diff(expected_text, actual_text, from_name, to_name),
        f"--- {from_name} (full) ---",
        expected_text,
        f"--- {to_name} (full) ---",
        actual_text,
    ]
    return "\n".join(parts)
