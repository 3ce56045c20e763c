"""
Schemas - Proof Exchange
File: proof.py

Purpose: JSON documents for handing proofs and tree summaries across a
boundary (CLI output, test fixtures). Hashes travel as 64-character
lowercase hex strings.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from binmerkle.crypto.hashing import EMPTY_ROOT, is_hex_digest
from binmerkle.merkle.merkle_tree import MerkleProof, MerkleTree

from .errors import ProofSchemaError


class ProofDocument(BaseModel):
    """
    Serializable form of a MerkleProof.

    The optional root lets a document carry the commitment it was
    generated against; verification may still be done against any root.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    element: str = Field(
        ...,
        description="Element whose inclusion is claimed",
    )
    siblings: list[str] = Field(
        default_factory=list,
        description="Sibling hashes ordered from the leaf up to the root",
    )
    directions: list[bool] = Field(
        default_factory=list,
        description="True where the sibling at the same position is on the right",
    )
    root: Optional[str] = Field(
        default=None,
        description="Root hash the proof was generated against",
    )

    @field_validator("siblings", mode="after")
    @classmethod
    def validate_sibling_hashes(cls, v: list[str]) -> list[str]:
        """Each sibling must be a hex digest."""
        for i, sibling in enumerate(v):
            if not is_hex_digest(sibling):
                raise ValueError(f"siblings[{i}] is not a 64-character hex digest")
        return v

    @field_validator("root", mode="after")
    @classmethod
    def validate_root_hash(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == EMPTY_ROOT or is_hex_digest(v):
            return v
        raise ValueError("root must be a 64-character hex digest or empty")

    @model_validator(mode="after")
    def validate_lengths(self) -> "ProofDocument":
        """Siblings and directions must pair up."""
        if len(self.siblings) != len(self.directions):
            raise ValueError(
                f"siblings ({len(self.siblings)}) and directions "
                f"({len(self.directions)}) must have the same length"
            )
        return self

    @classmethod
    def from_proof(cls, proof: MerkleProof, root: Optional[str] = None) -> "ProofDocument":
        return cls(
            element=proof.element,
            siblings=list(proof.siblings),
            directions=list(proof.directions),
            root=root,
        )

    def to_proof(self) -> MerkleProof:
        return MerkleProof(
            element=self.element,
            siblings=tuple(self.siblings),
            directions=tuple(self.directions),
        )


class TreeSummary(BaseModel):
    """Shape and commitment of a built tree."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: str = Field(..., description="Root hash, empty for an empty tree")
    size: int = Field(..., ge=0, description="Number of original elements")
    leaf_count: int = Field(..., ge=0, description="Number of leaves after padding")
    height: int = Field(..., ge=0, description="Levels from the leaves to the root")

    @classmethod
    def from_tree(cls, tree: MerkleTree) -> "TreeSummary":
        return cls(
            root=tree.root_hash,
            size=tree.size,
            leaf_count=tree.leaf_count,
            height=tree.height,
        )


def parse_proof_document(data: str | bytes) -> ProofDocument:
    """
    Parse and validate a JSON proof document.

    Raises:
        ProofSchemaError: If the JSON is malformed or fails validation
    """
    try:
        return ProofDocument.model_validate_json(data)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        field_path = ".".join(str(p) for p in first.get("loc", ()))
        raise ProofSchemaError(
            f"Invalid proof document: {first.get('msg', str(e))}",
            field_path=field_path or None,
            details={"error_count": e.error_count()},
        ) from e


__all__ = [
    "ProofDocument",
    "TreeSummary",
    "parse_proof_document",
]
