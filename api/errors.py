"""
Module 09D - API Error Handling

Standardized error handling for the API. Every error response uses the
envelope {ok: false, error: {code, message, details}}.
"""

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.schemas.errors import ClaimproofException, ErrorCodes

from api.models.responses import ErrorDetail, ErrorResponse


logger = logging.getLogger(__name__)


class APIError(Exception):
    """Base API error with structured response."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code=self.code,
                message=self.message,
                details=self.details,
            ),
        )


class InvalidRequestError(APIError):
    """Invalid request parameters."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            code="INVALID_REQUEST",
            message=message,
            status_code=400,
            details=details,
        )


# Domain error codes that are the caller's fault
_CLIENT_ERROR_CODES = frozenset({
    ErrorCodes.MERKLE_INDEX_OUT_OF_RANGE,
    ErrorCodes.SCHEMA_VALIDATION_ERROR,
    ErrorCodes.CANONICALIZATION_ERROR,
})


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
    )


async def claimproof_error_handler(request: Request, exc: ClaimproofException) -> JSONResponse:
    """Handle domain exceptions raised below the route layer."""
    error = exc.to_error_model()
    status_code = 400 if error.code in _CLIENT_ERROR_CODES else 500
    if status_code == 500:
        logger.error(f"{request.url.path} failed: [{error.code}] {error.message}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            ok=False,
            error=ErrorDetail(code=error.code, message=error.message, details=error.details),
        ).model_dump(),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request body validation failures in the standard envelope."""
    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code="INVALID_REQUEST",
                message="Request validation failed",
                details={"errors": [
                    {"loc": list(e.get("loc", ())), "msg": e.get("msg", "")}
                    for e in exc.errors()
                ]},
            ),
        ).model_dump(),
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(f"Unhandled error on {request.url.path}: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code="INTERNAL_ERROR",
                message="An unexpected error occurred",
                details={"type": type(exc).__name__},
            ),
        ).model_dump(),
    )
