"""
Module 09D - Health Check Route

Simple health check endpoint for liveness probes.
"""

from fastapi import APIRouter, Depends

from api.deps import get_pipeline
from api.models.responses import HealthResponse
from orchestrator.pipeline import ClaimPipeline


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(pipeline: ClaimPipeline = Depends(get_pipeline)) -> HealthResponse:
    """
    Health check endpoint.

    Returns service status and whether evidence search is wired.
    """
    return HealthResponse(
        ok=True,
        service="claimproof-api",
        version="v1",
        search_enabled=pipeline.evidence_source is not None,
    )
