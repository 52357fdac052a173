"""
Module 04 - Pattern Extraction

Regex-only extraction of quotes, entity-like phrases, and dates from a
claim, plus URL host parsing. The shapes are fixed: a smarter extractor
would make verdicts irreproducible across implementations.
"""
from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import urlparse


QUOTE_PATTERN = re.compile(r'"([^"]+)"')

# Runs of capitalized words ("Ursula Le Guin" -> "Ursula Le Guin")
ENTITY_PATTERN = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b", re.ASCII)

ENTITY_STOPWORDS: frozenset[str] = frozenset(
    {"The", "A", "An", "In", "On", "At", "To", "For", "Of", "With"}
)

# Applied in this order; results keep first-seen order. ASCII digits only
DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b\d{4}\b", re.ASCII),
    re.compile(r"\b\d{1,2}/\d{1,2}/\d{2,4}\b", re.ASCII),
    re.compile(
        r"\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\s+\d{1,2},?\s+\d{4}\b",
        re.IGNORECASE | re.ASCII,
    ),
)


def _unique(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


def extract_quotes(text: str) -> list[str]:
    """Text enclosed in straight double quotes, in order of appearance."""
    return QUOTE_PATTERN.findall(text)


def extract_entities(text: str) -> list[str]:
    """Capitalized word runs, minus the stopword list, deduplicated."""
    matches = ENTITY_PATTERN.findall(text)
    return _unique(m for m in matches if m not in ENTITY_STOPWORDS)


def extract_dates(text: str) -> list[str]:
    """Years, M/D/Y dates and "Mon D, YYYY" dates, deduplicated."""
    found: list[str] = []
    for pattern in DATE_PATTERNS:
        found.extend(pattern.findall(text))
    return _unique(found)


def extract_domain(url: str) -> str:
    """Hostname of a URL; the input itself when it has none."""
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return url
    return hostname or url


__all__ = [
    "ENTITY_STOPWORDS",
    "extract_quotes",
    "extract_entities",
    "extract_dates",
    "extract_domain",
]
