from __future__ import annotations

"""
Comparison Domain Data Models.

Defines the result object returned by the comparator and the factory
functions used to build its success and failure variants.
"""

from dataclasses import dataclass
from typing import Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ComparisonResult:
    """
    Outcome of a declaration tree comparison.

    Attributes:
        ok: Flag indicating that every check passed.
        error: Human-readable failure message, empty on success.
        expected_text: Canonical serialization of the expected tree, or of
            the stored snapshot when the snapshot check failed.
        actual_text: Canonical serialization of the actual tree.
        diff: Unified diff between expected_text and actual_text.
        snapshot_path: Snapshot file involved in the comparison, if any.
        snapshot_created: True when a missing snapshot was generated.
    """
    ok: bool
    error: str

    expected_text: str
    actual_text: str
    diff: str = ""

    snapshot_path: Optional[str] = None
    snapshot_created: bool = False

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        expected_text: str,
        actual_text: str,
        snapshot_path: Optional[str] = None,
) -> ComparisonResult:
    """Build a passing result."""
    return ComparisonResult(
        ok=True,
        error="",
        expected_text=expected_text,
        actual_text=actual_text,
        snapshot_path=snapshot_path,
    )


def create_failure_result(
        error: str,
        expected_text: str,
        actual_text: str,
        diff: str = "",
        snapshot_path: Optional[str] = None,
        snapshot_created: bool = False,
) -> ComparisonResult:
    """
    Build a failing result.

    Args:
        error: Descriptive failure message.
        expected_text: Reference text of the failed check.
        actual_text: Text under test.
        diff: Unified diff of the two texts.
        snapshot_path: Snapshot file involved, if any.
        snapshot_created: Whether the failure is a record-mode generation.

    Returns:
        ComparisonResult: Result with ok set to False.
    """
    return ComparisonResult(
        ok=False,
        error=error,
        expected_text=expected_text,
        actual_text=actual_text,
        diff=diff,
        snapshot_path=snapshot_path,
        snapshot_created=snapshot_created,
    )
