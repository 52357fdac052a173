"""
Module 09D - Verify Route

Challenge a claim: run the deterministic check battery (and the
membership check when a root is given) and return the verdict.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_pipeline
from api.errors import InvalidRequestError
from api.models.requests import VerifyRequest
from api.models.responses import VerifyResponse
from orchestrator.pipeline import ClaimPipeline


logger = logging.getLogger(__name__)

router = APIRouter(tags=["verification"])


@router.post("/verify", response_model=VerifyResponse)
def verify_claim(
    request: VerifyRequest,
    pipeline: ClaimPipeline = Depends(get_pipeline),
) -> VerifyResponse:
    """
    Verify a challenged claim.

    Evidence is searched for when the request carries none. The result
    always completes; unreachable sources and invalid proofs show up as
    check outcomes, not errors.
    """
    if not request.claim.text.strip():
        raise InvalidRequestError("Claim text is required")

    logger.info(f"Verify request: {request.claim.text[:50]!r}")
    result = pipeline.challenge(
        request.claim,
        merkle_root=request.merkle_root,
        evidence=request.evidence,
        user_prompt=request.user_prompt,
        subject=request.subject,
    )
    return VerifyResponse(ok=True, result=result)
