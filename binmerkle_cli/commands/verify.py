"""
CLI Verify Command

Verify a JSON proof document against a root hash, offline.

The root comes from --root, or else from the document's own "root"
field. Nothing but the proof and the root is needed.

Usage:
    binmerkle verify proof.json [--root HASH] [--json]
    binmerkle prove --index 0 a b c | binmerkle verify -
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import dataclass, field

from binmerkle.merkle import verify_merkle_proof
from binmerkle.schemas.errors import ErrorCodes, MerkleError, ProofSchemaError
from binmerkle_cli.inputs import load_proof_document


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class VerifySummary:
    """Summary of proof verification for CLI output."""
    proof_path: str = ""
    element: str = ""
    root: str = ""
    height: int = 0
    ok: bool = False
    errors: list[MerkleError] = field(default_factory=list)

    def to_dict(self) -> dict:
        d = {
            "proof_path": self.proof_path,
            "element": self.element,
            "root": self.root,
            "height": self.height,
            "ok": self.ok,
        }
        if self.errors:
            d["errors"] = [err.model_dump() for err in self.errors]
        return d


def print_summary_human(summary: VerifySummary) -> None:
    """Print summary in human-readable format."""
    print(f"proof: {summary.proof_path}")
    print(f"element: {summary.element}")
    print(f"root: {summary.root}")
    print(f"height: {summary.height}")
    print(f"ok: {str(summary.ok).lower()}")
    for err in summary.errors:
        print(f"  ✗ [{err.code}] {err.message}")


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 valid, 2 invalid, 1 unreadable input)
    """
    try:
        document = load_proof_document(args.proof)
    except (OSError, ProofSchemaError) as e:
        print(f"Error loading proof: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    root = args.root if args.root is not None else document.root
    if root is None:
        print("Error: no root given and the proof document carries none", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    proof = document.to_proof()
    summary = VerifySummary(
        proof_path=args.proof,
        element=proof.element,
        root=root,
        height=proof.height,
        ok=verify_merkle_proof(root, proof),
    )
    if not summary.ok:
        summary.errors.append(MerkleError(
            code=ErrorCodes.MERKLE_PROOF_INVALID,
            message="recomputed root does not match",
            details={"root": root, "height": proof.height},
        ))
        logger.info(f"Proof for {proof.element!r} rejected against root {root}")

    if args.json or args.cli_config.default_output_format == "json":
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print_summary_human(summary)

    return EXIT_SUCCESS if summary.ok else EXIT_VERIFICATION_FAILED
