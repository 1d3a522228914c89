from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Loads two declaration trees from JSON, runs the comparator and maps the
outcome to a process exit code:

    0  trees (and snapshot, if given) match
    1  mismatch, generated snapshot, or unexpected failure
    2  unreadable or invalid input documents
"""

import sys
from typing import List, Optional

from declcompare.core.comparator import compare_declarations
from declcompare.core.serializer import serialize_declaration
from declcompare.core.tree_loader import load_tree
from declcompare.domain.comparison_models import ComparisonResult
from declcompare.infra.logging import configure_logging, get_logger
from declcompare.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the comparison workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing and logging bootstrap
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    configure_logging(cli_args.args_to_logging_config(args))
    policy = cli_args.args_to_policy(args)

    # 2. Input loading
    try:
        expected = load_tree(args.expected)
        actual = load_tree(args.actual)
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Cannot load declaration tree: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    if args.print_actual:
        sys.stdout.write(serialize_declaration(actual, policy))

    # 3. Comparison
    try:
        result = compare_declarations(expected, actual, policy, args.snapshot_path)
    except Exception as e:
        logger.critical(f"Comparison aborted: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    _print_human_summary(result)
    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_human_summary(result: ComparisonResult) -> None:
    if result.ok:
        target = f" and {result.snapshot_path}" if result.snapshot_path else ""
        print(f"OK: declarations match{target}.")
        return

    if result.snapshot_created:
        print(f"FAIL: {result.error}", file=sys.stderr)
        print("Review the generated file and commit it as the new baseline.", file=sys.stderr)
        return

    source = f" from {result.snapshot_path}" if result.snapshot_path else ""
    print(f"FAIL: declarations differ{source}.", file=sys.stderr)
    print(result.diff or result.error, file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
