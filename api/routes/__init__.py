"""API route handlers."""

from api.routes import cache, commit, detect, health, membership, verify

__all__ = ["cache", "commit", "detect", "health", "membership", "verify"]
