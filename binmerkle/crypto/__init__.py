"""
Core cryptographic utilities.

Provides the fixed SHA-256 leaf and node hash primitives used by the tree.
"""
from .hashing import (
    HEX_DIGEST_LENGTH,
    EMPTY_ROOT,
    sha256_hex,
    hash_leaf,
    hash_node,
    is_hex_digest,
)

__all__ = [
    "HEX_DIGEST_LENGTH",
    "EMPTY_ROOT",
    "sha256_hex",
    "hash_leaf",
    "hash_node",
    "is_hex_digest",
]
