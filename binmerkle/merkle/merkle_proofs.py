"""
Merkle Proofs Convenience Wrappers
Thin wrappers around the tree functions for a class-based API.

This module provides:
- MerkleProver: Build trees and proofs straight from element lists
- MerkleVerifier: Verify proofs, either whole or from raw components

These are convenience wrappers around the functions in merkle_tree.py.
"""
from __future__ import annotations

from typing import Sequence

from binmerkle.merkle.merkle_tree import (
    MerkleProof,
    build_merkle_proof,
    build_merkle_tree,
    verify_merkle_proof,
)


class MerkleProver:
    """
    Convenience class for generating Merkle proofs from elements.

    Example:
        >>> proof = MerkleProver.prove(["some", "test", "elements"], index=2)
        >>> proof.element
        'elements'
    """

    @staticmethod
    def prove(elements: Sequence[str], index: int) -> MerkleProof:
        """
        Build a tree over elements and prove the element at index.

        Raises:
            IndexOutOfBoundsError: If index is out of range
        """
        return build_merkle_proof(build_merkle_tree(elements), index)

    @staticmethod
    def prove_all(elements: Sequence[str]) -> list[MerkleProof]:
        """Build the tree once and prove every element, in order."""
        tree = build_merkle_tree(elements)
        return [build_merkle_proof(tree, i) for i in range(len(elements))]

    @staticmethod
    def compute_root(elements: Sequence[str]) -> str:
        """Root hash for a sequence of elements ("" if empty)."""
        return build_merkle_tree(elements).root_hash


class MerkleVerifier:
    """
    Convenience class for verifying Merkle proofs.

    Example:
        >>> root = MerkleProver.compute_root(elements)
        >>> MerkleVerifier.verify(root, MerkleProver.prove(elements, 1))
        True
    """

    @staticmethod
    def verify(root: str, proof: MerkleProof) -> bool:
        return verify_merkle_proof(root, proof)

    @staticmethod
    def verify_element_in_root(
        element: str,
        siblings: Sequence[str],
        directions: Sequence[bool],
        root: str,
    ) -> bool:
        """
        Verify an element is included in a root using raw components.

        Mismatched sibling/direction lengths verify False rather than raise.

        Args:
            element: The claimed element
            siblings: Sibling hashes, leaf to root
            directions: True where the sibling is on the right
            root: The known Merkle root

        Returns:
            True if the proof is valid, False otherwise
        """
        if len(siblings) != len(directions):
            return False
        proof = MerkleProof(
            element=element,
            siblings=tuple(siblings),
            directions=tuple(directions),
        )
        return verify_merkle_proof(root, proof)


__all__ = [
    "MerkleProver",
    "MerkleVerifier",
]
