"""
Claim sources.
"""

from .detector import (
    FACTUAL_PATTERNS,
    OPINION_MARKERS,
    ClaimSource,
    PatternClaimDetector,
    is_factual,
    is_opinion,
    split_sentences,
)

__all__ = [
    "FACTUAL_PATTERNS",
    "OPINION_MARKERS",
    "ClaimSource",
    "PatternClaimDetector",
    "is_factual",
    "is_opinion",
    "split_sentences",
]
