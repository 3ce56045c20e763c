"""
Schemas
File: __init__.py

Purpose: Export the error taxonomy. Proof exchange documents live in
binmerkle.schemas.proof, which depends on the tree types.
"""

from .errors import (
    ConfigException,
    ErrorCodes,
    IndexOutOfBoundsError,
    IntegrityViolationError,
    InvalidSiblingNodeError,
    MerkleError,
    MerkleException,
    ProofSchemaError,
)

__all__ = [
    "ConfigException",
    "ErrorCodes",
    "IndexOutOfBoundsError",
    "IntegrityViolationError",
    "InvalidSiblingNodeError",
    "MerkleError",
    "MerkleException",
    "ProofSchemaError",
]
