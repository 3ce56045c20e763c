"""
CLI Inputs

Reading element lists and proof documents for the CLI commands.
"""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from binmerkle.schemas.proof import ProofDocument, parse_proof_document


def load_elements(args: Namespace) -> list[str]:
    """
    Collect elements from positional arguments or --from-file.

    A file holds one element per line; a trailing newline does not add
    an element, but blank lines inside the file are kept as "".
    """
    from_file = getattr(args, "from_file", None)
    if from_file:
        text = sys.stdin.read() if from_file == "-" else Path(from_file).read_text(encoding="utf-8")
        return text.splitlines()
    return list(args.elements or [])


def load_proof_document(source: str) -> ProofDocument:
    """
    Read a proof document from a path, or stdin for "-".

    Raises:
        FileNotFoundError: If the path does not exist
        ProofSchemaError: If the document is invalid
    """
    if source == "-":
        return parse_proof_document(sys.stdin.read())
    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Proof file not found: {path}")
    return parse_proof_document(path.read_bytes())
