"""
binmerkle - binary Merkle tree engine.

Build a tree from string elements, derive its root hash, generate and
verify inclusion proofs, and update single elements.
"""

__version__ = "0.1.0"

from binmerkle.crypto.hashing import hash_leaf, hash_node
from binmerkle.merkle import (
    MerkleProof,
    MerkleTree,
    build_merkle_proof,
    build_merkle_tree,
    collect_elements,
    get_root,
    update_element,
    verify_merkle_proof,
)
from binmerkle.schemas.errors import (
    IndexOutOfBoundsError,
    InvalidSiblingNodeError,
    MerkleException,
)

__all__ = [
    "hash_leaf",
    "hash_node",
    "MerkleProof",
    "MerkleTree",
    "build_merkle_tree",
    "get_root",
    "collect_elements",
    "build_merkle_proof",
    "verify_merkle_proof",
    "update_element",
    "IndexOutOfBoundsError",
    "InvalidSiblingNodeError",
    "MerkleException",
]
