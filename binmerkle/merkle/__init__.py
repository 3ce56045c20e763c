"""
Binary Merkle Tree
Balanced tree construction + proof generation/verification + single-element update.

This module provides:
- MerkleTree / MerkleProof: The tree and inclusion proof value types
- build_merkle_tree: Build a tree from a list of string elements
- get_root / collect_elements: Read-only tree queries
- build_merkle_proof / verify_merkle_proof: Inclusion proofs
- update_element: Replace one element, recomputing a single path

Commitment Rules:
1. Leaf hashing: sha256(element).hexdigest()
2. Parent hashing: sha256(left_hex + right_hex).hexdigest()
3. Padding: "" elements up to the next power of two
4. Empty tree: root hash ""

Usage:
    from binmerkle.merkle import build_merkle_tree, build_merkle_proof, verify_merkle_proof

    tree = build_merkle_tree(["some", "test", "elements"])
    proof = build_merkle_proof(tree, 2)
    assert verify_merkle_proof(tree.root_hash, proof)
"""
from .nodes import (
    EMPTY_NODE,
    BranchNode,
    EmptyNode,
    LeafNode,
    Node,
    node_hash,
)

from .merkle_tree import (
    MerkleProof,
    MerkleTree,
    assert_tree_integrity,
    build_merkle_proof,
    build_merkle_tree,
    check_tree_integrity,
    collect_elements,
    compute_tree_height,
    fold_proof,
    get_root,
    next_power_of_two,
    pad_elements,
    verify_merkle_proof,
)

from .merkle_update import update_element

from .merkle_proofs import (
    MerkleProver,
    MerkleVerifier,
)


__all__ = [
    # Node variants
    "EMPTY_NODE",
    "BranchNode",
    "EmptyNode",
    "LeafNode",
    "Node",
    "node_hash",
    # Core types
    "MerkleTree",
    "MerkleProof",
    # Core functions
    "build_merkle_tree",
    "get_root",
    "collect_elements",
    "build_merkle_proof",
    "verify_merkle_proof",
    "fold_proof",
    "update_element",
    "pad_elements",
    "next_power_of_two",
    "compute_tree_height",
    "assert_tree_integrity",
    "check_tree_integrity",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
]
