"""
Hashing Utilities
Leaf and node hash primitives for the binary Merkle tree.

This module provides:
- SHA-256 hashing of raw bytes to a lowercase hex digest
- hash_leaf: digest of a raw element string
- hash_node: digest of two child digests, left then right
- Hex digest validation for exchanged hashes

Determinism Notes:
- Hashes are exchanged as 64-character lowercase hex strings
- hash_node consumes the hex form of its inputs, not the raw digest bytes
- Strings are always encoded as UTF-8 before hashing; lone surrogates
  (e.g. undecodable argv bytes) pass through so every str is hashable
- All operations are pure; identical inputs yield identical outputs
"""
from __future__ import annotations

import hashlib
import re


# Length of a SHA-256 digest in hex characters
HEX_DIGEST_LENGTH: int = 64

# Root hash of a tree with no elements
EMPTY_ROOT: str = ""

_HEX_DIGEST_RE = re.compile(r"[0-9a-f]{64}")

# Encoding error handler; keeps hashing total over every Python str
_ENCODING_ERRORS = "surrogatepass"


def sha256_hex(data: bytes) -> str:
    """
    Compute SHA-256 hash of raw bytes as a lowercase hex string.

    Args:
        data: Raw bytes to hash

    Returns:
        64-character hex digest

    Example:
        >>> sha256_hex(b"hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).hexdigest()


def hash_leaf(data: str) -> str:
    """
    Hash a raw element into a leaf digest.

    Rule: leaf = sha256(data.encode("utf-8", "surrogatepass")).hexdigest()

    The empty string is a valid element; its digest is the hash of
    padding leaves and is never used as a "no node" marker.

    Args:
        data: Element string (opaque to the tree)

    Returns:
        64-character hex digest
    """
    return sha256_hex(data.encode("utf-8", _ENCODING_ERRORS))


def hash_node(left: str, right: str) -> str:
    """
    Hash two child digests into their parent digest.

    Rule: parent = sha256((left + right).encode("utf-8", "surrogatepass")).hexdigest()

    The hex strings are concatenated with no separator. Order matters:
    hash_node(a, b) != hash_node(b, a) in general.

    Args:
        left: Left child hex digest
        right: Right child hex digest

    Returns:
        64-character hex digest
    """
    return sha256_hex((left + right).encode("utf-8", _ENCODING_ERRORS))


def is_hex_digest(value: str) -> bool:
    """
    Check whether a value looks like a digest produced by this module.

    Args:
        value: Candidate hash string

    Returns:
        True for exactly 64 lowercase hex characters
    """
    return isinstance(value, str) and _HEX_DIGEST_RE.fullmatch(value) is not None


__all__ = [
    "HEX_DIGEST_LENGTH",
    "EMPTY_ROOT",
    "sha256_hex",
    "hash_leaf",
    "hash_node",
    "is_hex_digest",
]
