from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Snapshot persistence for the comparator. Snapshots are plain UTF-8 text;
line endings are normalized to '\\n' on both read and write so that a
baseline checked in on one platform compares equal on another.
"""

import os


class SnapshotIOError(RuntimeError):
    """Reading or writing a snapshot file failed."""

# -----------------------------------------------------------------------------
# SNAPSHOT API
# -----------------------------------------------------------------------------

def snapshot_exists(path: str) -> bool:
    return os.path.isfile(path)


def read_snapshot(path: str) -> str:
    """
    Load the stored text of a snapshot file.

    Args:
        path: Snapshot file location.

    Returns:
        str: File content with normalized line separators.

    Raises:
        SnapshotIOError: If the file cannot be read or decoded.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SnapshotIOError(f"Could not read snapshot '{path}': {e}") from e


def write_snapshot(path: str, content: str) -> None:
    """
    Persist text verbatim into a snapshot file, creating parent directories.

    Raises:
        SnapshotIOError: If the directory or file cannot be written.
    """
    try:
        _ensure_parent_dir(path)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        raise SnapshotIOError(f"Could not write snapshot '{path}': {e}") from e

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
