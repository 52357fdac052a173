"""
Module 09D - Minimal API (FastAPI)

HTTP API for claimproof:
- POST /detect - Extract claims from text
- POST /commit - Commit a batch of claims
- POST /verify - Challenge a claim
- POST /membership - Merkle membership check
- POST /cache/clear - Clear the evidence cache
- GET /health - Health check

Usage:
    uvicorn api.app:app --reload
"""

__version__ = "0.1.0"
