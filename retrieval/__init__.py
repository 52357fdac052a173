"""
Evidence retrieval: search backends, caching and query shaping.
"""

from .base_source import BaseEvidenceSource, EvidenceSource, StaticEvidenceSource
from .brave_source import BraveSearchSource
from .cache import CachedEvidenceSource, InMemoryStore, JsonFileStore, KeyValueStore
from .query import MAX_QUERY_LENGTH, build_search_query

__all__ = [
    "BaseEvidenceSource",
    "EvidenceSource",
    "StaticEvidenceSource",
    "BraveSearchSource",
    "CachedEvidenceSource",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "MAX_QUERY_LENGTH",
    "build_search_query",
]
