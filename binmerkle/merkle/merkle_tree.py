"""
Merkle Tree Implementation
Balanced binary Merkle tree construction, proof generation, and verification.

This module provides:
- Tree construction from a flat list of string elements
- Root hash and in-order leaf access
- Inclusion proof generation for any element index
- Inclusion proof verification against a known root
- Structural integrity checking

Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = hash_leaf(element) = sha256(element).hexdigest()
2. Parent hashing: parent = hash_node(left, right) = sha256(left_hex + right_hex)
3. Padding rule: append "" elements up to the smallest power of two >= n
4. Empty tree: root hash is "" (a valid "empty dataset" marker)
5. Single element: root = hash_leaf(element), proofs have no siblings

Proof Layout:
- siblings and directions are ordered leaf-to-root
- direction True means the sibling sits to the right of the running hash

Example, proof for index 2 of an 8-leaf tree (E is the element,
* the recorded siblings):

    d0:                    [ R ]
    d1:         [*]                     [*]
    d2:    [*]       [*]           [ ]       [ ]
    d3: [ ]  [ ]  [E]  [*]      [ ]  [ ]  [ ]  [ ]

    siblings   = [d3-3, d2-0, d1-1]
    directions = [True, False, True]
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from binmerkle.config.runtime import get_default_config
from binmerkle.crypto.hashing import hash_leaf, hash_node
from binmerkle.merkle.nodes import (
    EMPTY_NODE,
    BranchNode,
    EmptyNode,
    LeafNode,
    Node,
    node_hash,
)
from binmerkle.schemas.errors import (
    IndexOutOfBoundsError,
    IntegrityViolationError,
    InvalidSiblingNodeError,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MerkleTree:
    """
    A balanced binary Merkle tree.

    Attributes:
        root: Root node (EmptyNode for a tree of zero elements)
        size: Number of original elements, before padding
    """
    root: Node
    size: int

    def __len__(self) -> int:
        return self.size

    @property
    def root_hash(self) -> str:
        return get_root(self)

    @property
    def leaves(self) -> list[str]:
        """All leaf elements in order, padding included."""
        return collect_elements(self)

    @property
    def leaf_count(self) -> int:
        """Number of leaves after padding."""
        return next_power_of_two(self.size) if self.size else 0

    @property
    def height(self) -> int:
        """Number of levels from the leaves to the root."""
        return compute_tree_height(self.leaf_count)

    def prove(self, index: int) -> MerkleProof:
        return build_merkle_proof(self, index)

    def update(self, index: int, element: str) -> MerkleTree:
        from binmerkle.merkle.merkle_update import update_element
        return update_element(self, index, element)

    def check_integrity(self) -> bool:
        return check_tree_integrity(self)


@dataclass(frozen=True)
class MerkleProof:
    """
    An inclusion proof for a single element.

    The proof lets a verifier recompute the root from the claimed
    element alone. It holds no reference back into the tree.

    Attributes:
        element: The element whose inclusion is claimed
        siblings: Sibling hashes ordered from the leaf up to the root
        directions: One flag per sibling, True if the sibling is on the right
    """
    element: str
    siblings: tuple[str, ...]
    directions: tuple[bool, ...]

    def __post_init__(self) -> None:
        """Normalize to tuples and validate proof structure."""
        object.__setattr__(self, "siblings", tuple(self.siblings))
        object.__setattr__(self, "directions", tuple(bool(d) for d in self.directions))
        if len(self.siblings) != len(self.directions):
            raise ValueError(
                f"Proof has {len(self.siblings)} siblings but "
                f"{len(self.directions)} directions"
            )

    @property
    def height(self) -> int:
        return len(self.siblings)


# =============================================================================
# Tree Builder
# =============================================================================

def next_power_of_two(n: int) -> int:
    """
    Smallest power of two >= n.

    Args:
        n: Positive element count

    Returns:
        1 for n == 1, n itself when n is already a power of two
    """
    if n < 1:
        raise ValueError(f"Element count must be positive, got {n}")
    return 1 << (n - 1).bit_length()


def compute_tree_height(num_leaves: int) -> int:
    """
    Height of a tree with the given (padded) number of leaves.

    A single leaf has height 0, two leaves height 1, four leaves height 2.
    The empty tree also has height 0.
    """
    if num_leaves <= 1:
        return 0
    return (num_leaves - 1).bit_length()


def pad_elements(elements: Sequence[str]) -> list[str]:
    """
    Pad an element list with empty strings to a power-of-two length.

    Example: ["a", "b", "c"] -> ["a", "b", "c", ""]
    """
    padded = list(elements)
    if not padded:
        return padded
    padded.extend([""] * (next_power_of_two(len(padded)) - len(padded)))
    return padded


def _create_node(elements: Sequence[str], lo: int, hi: int, trace: bool) -> Node:
    """Build the subtree over elements[lo:hi]; hi - lo is a power of two."""
    if hi - lo == 1:
        leaf = LeafNode.from_element(elements[lo])
        if trace:
            logger.debug(f"creating leaf {elements[lo]!r} with hash: {leaf.hash}")
        return leaf

    mid = lo + (hi - lo) // 2
    left = _create_node(elements, lo, mid, trace)
    right = _create_node(elements, mid, hi, trace)

    branch = BranchNode.from_children(left, right)
    if trace:
        logger.debug(f"creating branch with hash: {branch.hash}")
    return branch


def build_merkle_tree(
    elements: Sequence[str],
    trace: Optional[bool] = None,
) -> MerkleTree:
    """
    Build a Merkle tree from an ordered sequence of elements.

    Algorithm:
    1. If empty: return a tree whose root is EmptyNode
    2. Pad with "" to the smallest power of two >= len(elements)
    3. Recursively split at the midpoint, hashing leaves and
       combining children into branches bottom-up

    Padding leaves hash exactly like a real "" element.

    Args:
        elements: Element strings; order matters and is preserved
        trace: Log every created node at DEBUG (defaults to
               RuntimeConfig.tree.trace_construction)

    Returns:
        MerkleTree with size == len(elements)
    """
    if trace is None:
        trace = get_default_config().tree.trace_construction

    if len(elements) == 0:
        logger.debug("Building empty Merkle tree")
        return MerkleTree(root=EMPTY_NODE, size=0)

    padded = pad_elements(elements)
    root = _create_node(padded, 0, len(padded), trace)

    logger.debug(
        f"Built Merkle tree: {len(elements)} elements, "
        f"{len(padded)} leaves, root={node_hash(root)}"
    )
    return MerkleTree(root=root, size=len(elements))


# =============================================================================
# Tree Accessor
# =============================================================================

def get_root(tree: MerkleTree) -> str:
    """Root hash of the tree; the empty string for an empty tree."""
    return node_hash(tree.root)


def _iter_leaves(node: Node) -> Iterator[LeafNode]:
    if isinstance(node, LeafNode):
        yield node
    elif isinstance(node, BranchNode):
        yield from _iter_leaves(node.left)
        yield from _iter_leaves(node.right)


def collect_elements(tree: MerkleTree) -> list[str]:
    """
    In-order list of every leaf element, padding leaves included.

    Returns:
        Elements left to right; [] for an empty tree
    """
    return [leaf.data for leaf in _iter_leaves(tree.root)]


# =============================================================================
# Proof Generator
# =============================================================================

def check_index(tree: MerkleTree, index: int) -> None:
    """Raise IndexOutOfBoundsError unless 0 <= index < tree.size."""
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < tree.size:
        raise IndexOutOfBoundsError(index=index, size=tree.size)


def walk_path(
    tree: MerkleTree,
    index: int,
) -> tuple[LeafNode, list[tuple[Node, bool]]]:
    """
    Descend from the root to the leaf at index.

    The bits of index, most significant first, choose the child at each
    level: bit 0 descends left and records the right child as a sibling
    on the right (True); bit 1 descends right and records the left child
    as a sibling on the left (False).

    Args:
        tree: Tree to walk
        index: Element index, already bounds-checked

    Returns:
        (leaf, path) where path holds (sibling_node, direction)
        pairs ordered root-to-leaf

    Raises:
        InvalidSiblingNodeError: If the tree is structurally broken
    """
    height = tree.height
    current: Node = tree.root
    path: list[tuple[Node, bool]] = []

    for depth in range(height):
        if not isinstance(current, BranchNode):
            raise InvalidSiblingNodeError(
                f"Expected branch node at depth {depth}",
                depth=depth,
            )

        bit = (index >> (height - 1 - depth)) & 1
        if bit == 0:
            sibling, current, direction = current.right, current.left, True
        else:
            sibling, current, direction = current.left, current.right, False

        if isinstance(sibling, EmptyNode):
            raise InvalidSiblingNodeError(depth=depth + 1)
        path.append((sibling, direction))

    if not isinstance(current, LeafNode):
        raise InvalidSiblingNodeError(
            f"Expected leaf node at depth {height}",
            depth=height,
        )
    return current, path


def build_merkle_proof(tree: MerkleTree, index: int) -> MerkleProof:
    """
    Generate an inclusion proof for the element at the given index.

    Siblings are collected root-to-leaf during the walk, then reversed
    so verification can fold upward from the leaf.

    Args:
        tree: Tree to prove against
        index: 0-based index into the original (unpadded) elements

    Returns:
        MerkleProof with len(siblings) == tree.height

    Raises:
        IndexOutOfBoundsError: If index is not in [0, tree.size)
        InvalidSiblingNodeError: If the tree is structurally broken
    """
    check_index(tree, index)

    leaf, path = walk_path(tree, index)

    siblings = [node_hash(sibling) for sibling, _ in reversed(path)]
    directions = [direction for _, direction in reversed(path)]

    logger.debug(f"Built proof for index {index}: {len(siblings)} siblings")
    return MerkleProof(
        element=leaf.data,
        siblings=tuple(siblings),
        directions=tuple(directions),
    )


# =============================================================================
# Proof Verifier
# =============================================================================

def fold_proof(element: str, siblings: Sequence[str], directions: Sequence[bool]) -> str:
    """Recompute the root implied by an element and its leaf-to-root path."""
    current_hash = hash_leaf(element)
    for sibling_hash, direction in zip(siblings, directions):
        if direction:
            current_hash = hash_node(current_hash, sibling_hash)
        else:
            current_hash = hash_node(sibling_hash, current_hash)
    return current_hash


def verify_merkle_proof(root: str, proof: MerkleProof) -> bool:
    """
    Verify an inclusion proof against a known root.

    Algorithm:
    1. Start with hash_leaf(proof.element)
    2. For each (sibling, direction), leaf to root:
       - direction True: hash = hash_node(hash, sibling)
       - direction False: hash = hash_node(sibling, hash)
    3. Compare with root

    A tampered or malformed proof verifies False; this never raises.

    Args:
        root: Known root hash
        proof: Proof to check

    Returns:
        True if the recomputed root equals root
    """
    computed = fold_proof(proof.element, proof.siblings, proof.directions)
    ok = computed == root
    if not ok:
        logger.debug(f"Proof rejected: computed root {computed} != {root}")
    return ok


# =============================================================================
# Structural Integrity
# =============================================================================

def _find_violation(node: Node, depth: int, leaf_depth: int) -> Optional[str]:
    if isinstance(node, EmptyNode):
        return f"empty node at depth {depth}"
    if isinstance(node, LeafNode):
        if depth != leaf_depth:
            return f"leaf at depth {depth}, expected {leaf_depth}"
        if node.hash != hash_leaf(node.data):
            return f"leaf hash mismatch at depth {depth}"
        return None

    for child in (node.left, node.right):
        violation = _find_violation(child, depth + 1, leaf_depth)
        if violation:
            return violation
    if node.hash != hash_node(node_hash(node.left), node_hash(node.right)):
        return f"branch hash mismatch at depth {depth}"
    return None


def assert_tree_integrity(tree: MerkleTree) -> None:
    """
    Recompute every hash and check the tree is perfectly balanced.

    Raises:
        IntegrityViolationError: On the first violation found
    """
    if isinstance(tree.root, EmptyNode):
        if tree.size != 0:
            raise IntegrityViolationError(
                f"Empty root for tree of {tree.size} elements",
            )
        return

    violation = _find_violation(tree.root, 0, tree.height)
    if violation:
        raise IntegrityViolationError(
            f"Tree integrity violated: {violation}",
            details={"root": get_root(tree), "size": tree.size},
        )


def check_tree_integrity(tree: MerkleTree) -> bool:
    """True if every stored hash matches its recomputation."""
    try:
        assert_tree_integrity(tree)
    except IntegrityViolationError as e:
        logger.warning(str(e))
        return False
    return True


__all__ = [
    "MerkleTree",
    "MerkleProof",
    "next_power_of_two",
    "compute_tree_height",
    "pad_elements",
    "build_merkle_tree",
    "get_root",
    "collect_elements",
    "check_index",
    "walk_path",
    "build_merkle_proof",
    "fold_proof",
    "verify_merkle_proof",
    "assert_tree_integrity",
    "check_tree_integrity",
]
