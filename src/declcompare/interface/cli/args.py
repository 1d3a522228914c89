from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into a
ComparisonPolicy and a LoggingConfig.
"""

import argparse

from declcompare.domain.policy import DEFAULT_POLICY, ComparisonPolicy, skip_namespaces
from declcompare.infra.logging import LoggingConfig

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the declcompare CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="declcompare",
        description=(
            "Compare two declaration trees (JSON dumps) through their canonical "
            "text form, optionally against a golden snapshot file."
        ),
    )

    # --- Inputs ---
    p.add_argument("expected", help="JSON dump of the expected declaration tree.")
    p.add_argument("actual", help="JSON dump of the actual declaration tree.")
    p.add_argument(
        "-s", "--snapshot",
        dest="snapshot_path",
        default=None,
        help="Golden text file. Generated from the actual tree when missing.",
    )

    # --- Comparison policy ---
    p.add_argument(
        "--check-primary-constructors",
        action="store_true",
        help="Mark primary constructors with /*primary*/.",
    )
    p.add_argument(
        "--include-object-methods",
        action="store_true",
        help="Keep equals, hashCode, toString and the other universal object methods.",
    )
    p.add_argument(
        "--skip-namespace",
        dest="skip_namespaces",
        action="append",
        default=[],
        metavar="FQ_NAME",
        help="Do not expand this namespace or its sub-namespaces. Repeatable.",
    )

    # --- Output and diagnostics ---
    p.add_argument(
        "--print",
        dest="print_actual",
        action="store_true",
        help="Print the canonical serialization of the actual tree.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Write a rotating diagnostic log to this path.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_policy(args: argparse.Namespace) -> ComparisonPolicy:
    """
    Translate policy flags into a ComparisonPolicy derived from the default.

    Args:
        args: Parsed command-line arguments.

    Returns:
        ComparisonPolicy: Policy for the comparison run.
    """
    policy = DEFAULT_POLICY
    policy = policy.with_check_primary_constructors(bool(args.check_primary_constructors))
    policy = policy.with_object_methods(bool(args.include_object_methods))

    prefixes = [p.strip() for p in args.skip_namespaces if p and p.strip()]
    if prefixes:
        policy = policy.with_recursion_filter(skip_namespaces(*prefixes))

    return policy


def args_to_logging_config(args: argparse.Namespace) -> LoggingConfig:
    level = "DEBUG" if args.debug else "WARNING"
    return LoggingConfig(level=level, console=True, log_file=args.log_file)
