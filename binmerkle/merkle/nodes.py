"""
Merkle Tree Nodes
Tagged node variants of the binary Merkle tree.

A node is exactly one of:
- EmptyNode: the tree of zero elements (no hash, no children)
- LeafNode: one element and hash_leaf(element)
- BranchNode: two children and hash_node(left.hash, right.hash)

Nodes are frozen; a changed tree is a new set of nodes along the
modified path, with untouched subtrees shared.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from binmerkle.crypto.hashing import EMPTY_ROOT, hash_leaf, hash_node


@dataclass(frozen=True)
class EmptyNode:
    """Root of a tree built from no elements."""


@dataclass(frozen=True)
class LeafNode:
    """
    A leaf holding one original (or padding) element.

    Attributes:
        hash: hash_leaf(data)
        data: The element string
    """
    hash: str
    data: str

    @classmethod
    def from_element(cls, element: str) -> LeafNode:
        return cls(hash=hash_leaf(element), data=element)


@dataclass(frozen=True)
class BranchNode:
    """
    An inner node combining two children.

    Attributes:
        hash: hash_node(left.hash, right.hash)
        left: Left child (Leaf or Branch)
        right: Right child (Leaf or Branch)
    """
    hash: str
    left: Node
    right: Node

    @classmethod
    def from_children(cls, left: Node, right: Node) -> BranchNode:
        return cls(
            hash=hash_node(node_hash(left), node_hash(right)),
            left=left,
            right=right,
        )


Node = Union[EmptyNode, LeafNode, BranchNode]

EMPTY_NODE = EmptyNode()


def node_hash(node: Node) -> str:
    """Return the stored hash of a node; the empty string for EmptyNode."""
    if isinstance(node, EmptyNode):
        return EMPTY_ROOT
    return node.hash


__all__ = [
    "EmptyNode",
    "LeafNode",
    "BranchNode",
    "Node",
    "EMPTY_NODE",
    "node_hash",
]
