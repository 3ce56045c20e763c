"""
Schemas - Errors
File: errors.py

Purpose: Error taxonomy for the Merkle tree engine.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Tree access errors
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"

    # Structural integrity errors
    INVALID_SIBLING_NODE = "INVALID_SIBLING_NODE"
    INTEGRITY_VIOLATION = "INTEGRITY_VIOLATION"

    # Proof exchange errors
    MERKLE_PROOF_INVALID = "MERKLE_PROOF_INVALID"
    SCHEMA_VALIDATION_ERROR = "SCHEMA_VALIDATION_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Structured error model, used where an error is reported
    rather than raised (e.g. JSON output of the CLI).
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INDEX_OUT_OF_BOUNDS],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "MerkleException":
        """Convert this error model to a raised exception."""
        return MerkleException(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleException(Exception):
    """
    Base exception for all Merkle tree errors.

    Carries structured error information and can be converted
    to a MerkleError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class IndexOutOfBoundsError(MerkleException, IndexError):
    """Raised when an element index is outside the committed element list."""

    def __init__(
        self,
        index: int,
        size: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["index"] = index
        full_details["size"] = size
        super().__init__(
            message=f"Index {index} out of bounds for tree of {size} elements",
            code=ErrorCodes.INDEX_OUT_OF_BOUNDS,
            details=full_details,
        )
        self.index = index
        self.size = size


class InvalidSiblingNodeError(MerkleException):
    """
    Raised when an Empty node is found where only a Leaf or Branch
    can exist. This is a broken tree, not bad caller input.
    """

    def __init__(
        self,
        message: str = "Invalid sibling node type",
        depth: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if depth is not None:
            full_details["depth"] = depth
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_SIBLING_NODE,
            details=full_details,
        )


class IntegrityViolationError(MerkleException):
    """Raised when a node's stored hash disagrees with its recomputation."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INTEGRITY_VIOLATION,
            details=details,
        )


class ProofSchemaError(MerkleException):
    """Raised when a serialized proof document cannot be parsed."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.SCHEMA_VALIDATION_ERROR,
            details=full_details,
        )


class ConfigException(MerkleException):
    """Raised when configuration cannot be loaded."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=details,
        )
