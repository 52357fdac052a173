"""
Module 09D - API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, Field

from core.schemas.claims import Claim, Commitment
from core.schemas.verification import VerificationResult


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    ok: bool = True
    service: str = "claimproof-api"
    version: str = "v1"
    search_enabled: bool = Field(default=False, description="Whether evidence search is configured")


class DetectResponse(BaseModel):
    """Response for POST /detect endpoint."""

    ok: bool = True
    claims: list[Claim] = Field(default_factory=list)


class CommitResponse(BaseModel):
    """Response for POST /commit endpoint."""

    ok: bool = True
    commitment: Commitment | None = Field(
        default=None,
        description="Batch commitment; null for an empty batch",
    )
    claims: list[Claim] = Field(default_factory=list, description="Claims carrying index and proof")


class VerifyResponse(BaseModel):
    """Response for POST /verify endpoint."""

    ok: bool = True
    result: VerificationResult


class MembershipResponse(BaseModel):
    """Response for POST /membership endpoint."""

    ok: bool = True
    valid: bool = Field(..., description="Whether the proof replays to the root")
    leaf_hash: str = Field(..., description="0x-prefixed hash of the claim text")


class CacheClearResponse(BaseModel):
    """Response for POST /cache/clear endpoint."""

    ok: bool = True
    cleared: bool = Field(..., description="False when no cache is configured")
    message: str = ""


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response."""

    ok: bool = False
    error: ErrorDetail
