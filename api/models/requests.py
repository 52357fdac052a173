"""
Module 09D - API Request Models

Pydantic models for API request validation.
"""

from typing import Any

from pydantic import BaseModel, Field

from core.schemas.claims import Claim
from core.schemas.evidence import EvidenceItem


class DetectRequest(BaseModel):
    """Request body for POST /detect endpoint."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=20000,
        description="Free text to extract factual claims from",
    )


class CommitRequest(BaseModel):
    """Request body for POST /commit endpoint."""

    claims: list[str] = Field(
        ...,
        description="Claim texts in commitment order (may be empty)",
    )


class VerifyRequest(BaseModel):
    """Request body for POST /verify endpoint."""

    claim: Claim = Field(..., description="Challenged claim, with its Merkle proof if committed")
    merkle_root: str | None = Field(
        default=None,
        description="Committed root to check membership against",
    )
    evidence: list[EvidenceItem] | None = Field(
        default=None,
        description="Evidence to verify against; retrieved via search when omitted",
    )
    user_prompt: str | None = Field(
        default=None,
        description="Original question, used to shape the search query",
    )
    subject: str | None = Field(
        default=None,
        description="Topic prefix for the search query",
    )


class MembershipRequest(BaseModel):
    """
    Request body for POST /membership endpoint.

    Proof steps and root are taken as loose JSON so malformed input gets
    a `valid: false` answer instead of a validation error.
    """

    claim_text: str = Field(..., description="Claim text, hashed verbatim")
    proof: list[Any] = Field(default_factory=list, description="Proof steps, leaf to root")
    root: Any = Field(..., description="0x-prefixed committed root")
