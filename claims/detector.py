"""
Module 02 - Claim Detection

Pattern-based detection of factual claims in free text. A sentence is a
claim when it carries no opinion marker and matches at least one
factual pattern. Detected claims are uncommitted; the pipeline attaches
Merkle proofs later.
"""

import logging
import re
from typing import Protocol, runtime_checkable

from core.schemas.claims import Claim


logger = logging.getLogger(__name__)


SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")

OPINION_MARKERS: tuple[str, ...] = (
    "I think",
    "I believe",
    "In my opinion",
    "It seems",
    "Perhaps",
    "Maybe",
    "Possibly",
    "Could be",
)

FACTUAL_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Dates and numbers
    re.compile(r"\b(published|written|released|born|died|launched)\s+(on\s+)?(\w+\s+)?\d{1,2},?\s+\d{4}\b", re.IGNORECASE),
    re.compile(r"\b\d{4}\b.*\b(book|novel|work|publication|mission)\b", re.IGNORECASE),
    # Definitive statements
    re.compile(r"\b(is|was|are|were)\s+(a|an|the)\s+\w+", re.IGNORECASE),
    # Names and roles
    re.compile(r"\b[A-Z][a-z]+\s+[A-Z][a-z]+\s+(was|is|served as)\b", re.IGNORECASE),
    # Attributions
    re.compile(r"\bby\s+[A-Z][a-z]+\s+[A-Z][a-z]+"),
    re.compile(r"\b(written|authored|created)\s+by\b", re.IGNORECASE),
    # Quoted titles
    re.compile(r"[\"'][^\"']+[\"']"),
    # Locations
    re.compile(r"\b(set|takes place|located|landed)\s+in\s+[A-Z]", re.IGNORECASE),
)


@runtime_checkable
class ClaimSource(Protocol):
    """Anything that turns text into claims."""

    def detect(self, text: str) -> list[Claim]:
        ...


def split_sentences(text: str) -> list[str]:
    """Split on terminal punctuation; trailing text without one is dropped."""
    return SENTENCE_PATTERN.findall(text)


def is_opinion(sentence: str) -> bool:
    lowered = sentence.lower()
    return any(marker.lower() in lowered for marker in OPINION_MARKERS)


def is_factual(sentence: str) -> bool:
    return any(pattern.search(sentence) for pattern in FACTUAL_PATTERNS)


class PatternClaimDetector:
    """
    Regex claim detector.

    Claim ids are `claim_<sentence index>`, counting every sentence, so
    ids stay stable when neighbouring sentences are rejected.
    """

    def detect(self, text: str) -> list[Claim]:
        claims: list[Claim] = []
        for index, sentence in enumerate(split_sentences(text)):
            trimmed = sentence.strip()
            if not trimmed or is_opinion(trimmed) or not is_factual(trimmed):
                continue
            claims.append(Claim(id=f"claim_{index}", text=trimmed))

        logger.info(f"Detected {len(claims)} factual claims")
        return claims
