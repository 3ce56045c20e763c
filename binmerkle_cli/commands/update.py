"""
CLI Update Command

Build a tree, replace one element, and print the old and new roots.

Usage:
    binmerkle update --index 0 --value updated some test elements [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from binmerkle.merkle import build_merkle_tree, update_element
from binmerkle.schemas.errors import IndexOutOfBoundsError
from binmerkle_cli.inputs import load_elements


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def update_cmd(args: Namespace) -> int:
    """
    Execute the update command.

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

    try:
        updated = update_element(tree, args.index, args.value)
    except IndexOutOfBoundsError as e:
        logger.error(f"Cannot update index {args.index}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.json or args.cli_config.default_output_format == "json":
        print(json.dumps({
            "index": args.index,
            "value": args.value,
            "old_root": tree.root_hash,
            "new_root": updated.root_hash,
        }, indent=2))
    else:
        print(updated.root_hash)

    return EXIT_SUCCESS
