"""
Module 04 - Source Credibility Table

Static per-domain credibility scores (0-100). The table is fixed, not
learned, so the same evidence always scores the same.
"""
from __future__ import annotations


HIGH_CREDIBILITY_SCORE = 90
MEDIUM_CREDIBILITY_SCORE = 70
LOW_CREDIBILITY_SCORE = 40
UNKNOWN_CREDIBILITY_SCORE = 60

HIGH_CREDIBILITY_DOMAINS: tuple[str, ...] = (
    "wikipedia.org", "edu", "gov", "nature.com", "science.org",
    "nytimes.com", "bbc.com", "reuters.com", "arxiv.org",
    "britannica.com", "nih.gov", "cdc.gov",
)

MEDIUM_CREDIBILITY_DOMAINS: tuple[str, ...] = (
    "medium.com", "forbes.com", "bloomberg.com", "wsj.com",
    "theguardian.com", "washingtonpost.com", "cnn.com",
)

LOW_CREDIBILITY_DOMAINS: tuple[str, ...] = (
    "blogspot.com", "wordpress.com", "tumblr.com",
)

# Tiers are checked top-down; first match wins
CREDIBILITY_TIERS: tuple[tuple[tuple[str, ...], int], ...] = (
    (HIGH_CREDIBILITY_DOMAINS, HIGH_CREDIBILITY_SCORE),
    (MEDIUM_CREDIBILITY_DOMAINS, MEDIUM_CREDIBILITY_SCORE),
    (LOW_CREDIBILITY_DOMAINS, LOW_CREDIBILITY_SCORE),
)


def domain_matches(host: str, entry: str) -> bool:
    """
    True when entry occurs anywhere in the lower-cased host.

    Plain substring containment, so "education.com" matches "edu" and
    "nytimes.com.example.net" matches "nytimes.com".
    """
    return entry in host.lower()


def domain_credibility_score(host: str) -> int:
    """Credibility score for a host; unknown hosts get the mid-range default."""
    for domains, score in CREDIBILITY_TIERS:
        if any(domain_matches(host, entry) for entry in domains):
            return score
    return UNKNOWN_CREDIBILITY_SCORE
