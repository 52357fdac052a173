"""
Module 09D - FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

import logging
import os

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from core.schemas.errors import ClaimproofException

from api.errors import (
    APIError,
    api_error_handler,
    claimproof_error_handler,
    generic_error_handler,
    validation_error_handler,
)
from api.routes import cache, commit, detect, health, membership, verify


def _resolve_log_level() -> int:
    """Resolve log level from CLAIMPROOF_LOG_LEVEL, defaulting to INFO."""
    raw = os.getenv("CLAIMPROOF_LOG_LEVEL")
    return getattr(logging, (raw or "INFO").upper(), logging.INFO)


logging.basicConfig(
    level=_resolve_log_level(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Claimproof API",
        description="""
HTTP API for committing claims and challenging them with deterministic fraud proofs.

## Endpoints

- **POST /detect** - Extract factual claims from text
- **POST /commit** - Merkle-commit an ordered batch of claims
- **POST /verify** - Challenge a claim; returns verdict and fraud proof
- **POST /membership** - Check a claim against a committed root
- **POST /cache/clear** - Drop cached search results
- **GET /health** - Health check
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(ClaimproofException, claimproof_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    app.include_router(health.router)
    app.include_router(detect.router)
    app.include_router(commit.router)
    app.include_router(verify.router)
    app.include_router(membership.router)
    app.include_router(cache.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
