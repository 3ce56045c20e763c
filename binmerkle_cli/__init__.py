"""
binmerkle CLI

Command-line interface for the binmerkle tree engine.

Usage:
    python -m binmerkle_cli root some test elements
    python -m binmerkle_cli prove --index 2 some test elements > proof.json
    python -m binmerkle_cli verify proof.json
    python -m binmerkle_cli update --index 0 --value updated some test elements
"""

from binmerkle import __version__

__all__ = ["__version__"]
