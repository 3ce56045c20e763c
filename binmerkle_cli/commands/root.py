"""
CLI Root Command

Build a tree from elements and print its root hash.

Usage:
    binmerkle root some test elements [--json] [--check]
    binmerkle root --from-file elements.txt
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from binmerkle.merkle import build_merkle_tree, check_tree_integrity
from binmerkle.schemas.proof import TreeSummary
from binmerkle_cli.inputs import load_elements


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def root_cmd(args: Namespace) -> int:
    """
    Execute the root command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    try:
        elements = load_elements(args)
    except OSError as e:
        print(f"Error reading elements: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    tree = build_merkle_tree(elements, trace=args.cli_config.trace_construction)
    summary = TreeSummary.from_tree(tree)
    logger.info(f"Built tree over {len(elements)} elements, root={summary.root}")

    integrity_ok = None
    if args.check:
        integrity_ok = check_tree_integrity(tree)

    if args.json or args.cli_config.default_output_format == "json":
        data = summary.model_dump()
        if integrity_ok is not None:
            data["integrity_ok"] = integrity_ok
        print(json.dumps(data, indent=2))
    else:
        print(summary.root)
        if integrity_ok is not None:
            print(f"integrity_ok: {str(integrity_ok).lower()}")

    if integrity_ok is False:
        return EXIT_VERIFICATION_FAILED
    return EXIT_SUCCESS
