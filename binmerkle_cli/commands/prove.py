"""
CLI Prove Command

Build a tree from elements and print the inclusion proof for one index
as a JSON proof document.

Usage:
    binmerkle prove --index 2 some test elements > proof.json
"""

from __future__ import annotations

import logging
import sys
from argparse import Namespace

from binmerkle.merkle import build_merkle_proof, build_merkle_tree
from binmerkle.schemas.errors import IndexOutOfBoundsError
from binmerkle.schemas.proof import ProofDocument
from binmerkle_cli.inputs import load_elements


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def prove_cmd(args: Namespace) -> int:
    """
    Execute the prove command.

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
        proof = build_merkle_proof(tree, args.index)
    except IndexOutOfBoundsError as e:
        logger.error(f"Cannot prove index {args.index}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    document = ProofDocument.from_proof(proof, root=tree.root_hash)
    print(document.model_dump_json(indent=2))
    return EXIT_SUCCESS
