"""
Module 09D - Commit Route

Merkle-commit an ordered batch of claims.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_pipeline
from api.models.requests import CommitRequest
from api.models.responses import CommitResponse
from orchestrator.pipeline import ClaimPipeline


logger = logging.getLogger(__name__)

router = APIRouter(tags=["claims"])


@router.post("/commit", response_model=CommitResponse)
def commit_claims(
    request: CommitRequest,
    pipeline: ClaimPipeline = Depends(get_pipeline),
) -> CommitResponse:
    """
    Commit claim texts in the given order.

    An empty list yields `commitment: null` and no claims.
    """
    batch = pipeline.commit_claims(request.claims)
    return CommitResponse(ok=True, commitment=batch.commitment, claims=batch.claims)
