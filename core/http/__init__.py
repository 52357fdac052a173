"""
HTTP Client Module

Shared HTTP client for URL probes and evidence search.
"""

from .client import HttpClient, HttpError, HttpResponse

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
]
