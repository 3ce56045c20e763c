"""
Merkle Tree Update
Single-element replacement with hash recomputation along one path.

The update reuses the proof walk to find the path from the root to the
target leaf, then rebuilds that path bottom-up:
- a new leaf is hashed from the new element
- at each level the running node is paired with the untouched sibling
  subtree, on the side given by the sibling's direction
- every off-path subtree is shared by reference with the input tree

The input tree is never modified, so a failed update leaves it intact.
"""
from __future__ import annotations

import logging

from binmerkle.config.runtime import get_default_config
from binmerkle.merkle.merkle_tree import (
    MerkleTree,
    check_index,
    assert_tree_integrity,
    walk_path,
)
from binmerkle.merkle.nodes import BranchNode, LeafNode, Node


logger = logging.getLogger(__name__)


def update_element(tree: MerkleTree, index: int, element: str) -> MerkleTree:
    """
    Replace the element at index and recompute hashes up to a new root.

    The resulting root hash equals that of a full rebuild from the
    element list with index replaced.

    Args:
        tree: Tree to update (left unchanged)
        index: 0-based index into the original (unpadded) elements
        element: New element value

    Returns:
        New MerkleTree with the same size

    Raises:
        IndexOutOfBoundsError: If index is not in [0, tree.size)
        InvalidSiblingNodeError: If the tree is structurally broken
        IntegrityViolationError: If integrity checking on update is
            enabled and the rebuilt tree fails it
    """
    check_index(tree, index)

    old_leaf, path = walk_path(tree, index)

    current: Node = LeafNode.from_element(element)
    for sibling, direction in reversed(path):
        if direction:
            current = BranchNode.from_children(current, sibling)
        else:
            current = BranchNode.from_children(sibling, current)

    updated = MerkleTree(root=current, size=tree.size)
    logger.debug(
        f"Updated index {index} ({old_leaf.data!r} -> {element!r}): "
        f"root {tree.root_hash} -> {updated.root_hash}"
    )

    if get_default_config().tree.check_integrity_on_update:
        assert_tree_integrity(updated)

    return updated


__all__ = [
    "update_element",
]
