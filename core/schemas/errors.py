"""
Module 01 - Schemas & Canonicalization
File: errors.py

Purpose: Error taxonomy for claimproof.
Pydantic models carry structured errors across the service boundary;
Python exceptions drive control flow inside the process.

Only one failure is surfaced by the verification core itself: a Merkle
proof requested for an index outside the committed batch. Everything
else (bad proofs, unreachable URLs, empty evidence) resolves into a
completed result.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Schema & Validation Errors
    SCHEMA_VALIDATION_ERROR = "SCHEMA_VALIDATION_ERROR"
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"

    # Merkle & Commitment Errors
    MERKLE_INDEX_OUT_OF_RANGE = "MERKLE_INDEX_OUT_OF_RANGE"

    # Evidence Errors
    EVIDENCE_RETRIEVAL_FAILED = "EVIDENCE_RETRIEVAL_FAILED"
    EVIDENCE_CACHE_ERROR = "EVIDENCE_CACHE_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class ClaimproofError(BaseModel):
    """
    Structured error passed between layers without raising.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.SCHEMA_VALIDATION_ERROR],
    )
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(default=False, description="Whether the operation can be retried")

    def to_exception(self) -> "ClaimproofException":
        """Convert this error model to a raised exception."""
        return ClaimproofException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class ClaimproofException(Exception):
    """
    Base exception for all claimproof errors.

    Carries structured error information and converts to ClaimproofError.
    """

    def __init__(
        self,
        message: str,
        code: str = "CLAIMPROOF_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> ClaimproofError:
        """Convert this exception to a ClaimproofError model."""
        return ClaimproofError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class CanonicalizationException(ClaimproofException):
    """Raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
            retryable=False,
        )


class MerkleIndexError(ClaimproofException, IndexError):
    """
    Raised when a proof is requested for an index outside [0, leaf_count).

    This is a precondition violation: it is raised before any hashing
    happens and the index is never clamped.
    """

    def __init__(self, index: int, leaf_count: int) -> None:
        super().__init__(
            message=f"Leaf index {index} out of range for {leaf_count} leaves",
            code=ErrorCodes.MERKLE_INDEX_OUT_OF_RANGE,
            details={"index": index, "leaf_count": leaf_count},
            retryable=False,
        )
        self.index = index
        self.leaf_count = leaf_count


class EvidenceRetrievalException(ClaimproofException):
    """
    Raised inside evidence sources when a search backend fails.

    Sources catch it at their public boundary and return an empty
    bundle instead, so callers never see it.
    """

    def __init__(
        self,
        message: str,
        query: str | None = None,
        details: dict[str, Any] | None = None,
        retryable: bool = True,
    ) -> None:
        full_details = details or {}
        if query is not None:
            full_details["query"] = query
        super().__init__(
            message=message,
            code=ErrorCodes.EVIDENCE_RETRIEVAL_FAILED,
            details=full_details,
            retryable=retryable,
        )
