"""
Module 09D - Claim Detection Route
"""

from fastapi import APIRouter, Depends

from api.deps import get_pipeline
from api.models.requests import DetectRequest
from api.models.responses import DetectResponse
from orchestrator.pipeline import ClaimPipeline


router = APIRouter(tags=["claims"])


@router.post("/detect", response_model=DetectResponse)
def detect_claims(
    request: DetectRequest,
    pipeline: ClaimPipeline = Depends(get_pipeline),
) -> DetectResponse:
    """Extract factual claims from free text (uncommitted)."""
    return DetectResponse(ok=True, claims=pipeline.detect(request.text))
