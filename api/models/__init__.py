"""API request and response models."""

from api.models.requests import CommitRequest, DetectRequest, MembershipRequest, VerifyRequest
from api.models.responses import (
    CacheClearResponse,
    CommitResponse,
    DetectResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    MembershipResponse,
    VerifyResponse,
)

__all__ = [
    "CommitRequest",
    "DetectRequest",
    "MembershipRequest",
    "VerifyRequest",
    "CacheClearResponse",
    "CommitResponse",
    "DetectResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "MembershipResponse",
    "VerifyResponse",
]
