"""
Module 09D - Cache Route
"""

from fastapi import APIRouter, Depends

from api.deps import get_pipeline
from api.models.responses import CacheClearResponse
from orchestrator.pipeline import ClaimPipeline


router = APIRouter(tags=["cache"])


@router.post("/cache/clear", response_model=CacheClearResponse)
def clear_cache(pipeline: ClaimPipeline = Depends(get_pipeline)) -> CacheClearResponse:
    """Drop all cached evidence bundles."""
    cleared = pipeline.clear_cache()
    return CacheClearResponse(
        ok=True,
        cleared=cleared,
        message="Cache cleared" if cleared else "No evidence cache configured",
    )
