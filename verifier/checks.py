"""
Module 04 - Deterministic Check Battery

Five independent checks, each mapping (claim, evidence) to a CheckResult.
Only URL Validity touches the network; the other four are pure functions
of the claim text and the evidence items.

Check order is fixed (CHECK_ORDER) because the aggregator picks the
fraud-proof source by position.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

from core.config.runtime import VerifierConfig
from core.schemas.claims import Claim
from core.schemas.evidence import EvidenceItem
from core.schemas.verification import CheckResult

from verifier.credibility import domain_credibility_score
from verifier.extraction import (
    extract_dates,
    extract_domain,
    extract_entities,
    extract_quotes,
)
from verifier.url_probe import UrlProber


logger = logging.getLogger(__name__)


URL_VALIDITY = "URL Validity"
QUOTE_EXACT_MATCH = "Quote Exact Match"
ENTITY_CONSISTENCY = "Entity Consistency"
SOURCE_CREDIBILITY = "Source Credibility"
TEMPORAL_CONSISTENCY = "Temporal Consistency"

CHECK_ORDER: tuple[str, ...] = (
    URL_VALIDITY,
    QUOTE_EXACT_MATCH,
    ENTITY_CONSISTENCY,
    SOURCE_CREDIBILITY,
    TEMPORAL_CONSISTENCY,
)

CRITICAL_CHECKS: frozenset[str] = frozenset({URL_VALIDITY, QUOTE_EXACT_MATCH})

# Entities must show up in at least this many distinct evidence items
MIN_ENTITY_SOURCES = 2


def _half_of(count: int) -> int:
    """Smallest integer >= 50% of count."""
    return math.ceil(count * 0.5)


def check_url_validity(
    claim: Claim,
    evidence: Sequence[EvidenceItem],
    prober: UrlProber,
    *,
    max_probes: int = 3,
) -> CheckResult:
    """At least half of the first `max_probes` evidence URLs are reachable."""
    if not evidence:
        return CheckResult.failing(
            URL_VALIDITY,
            "No evidence sources provided",
            critical=True,
        )

    urls = [item.url for item in evidence[:max_probes]]
    reachable = prober.probe_all(urls)
    url_checks = [{"url": url, "exists": bool(ok)} for url, ok in zip(urls, reachable)]

    valid = sum(1 for c in url_checks if c["exists"])
    passed = valid >= _half_of(len(url_checks))

    if passed:
        reason = f"{valid}/{len(url_checks)} URLs are valid and accessible"
    else:
        reason = f"Only {valid}/{len(url_checks)} URLs are valid"

    return CheckResult(
        name=URL_VALIDITY,
        passed=passed,
        critical=True,
        reason=reason,
        evidence_ref=url_checks,
    )


def check_quote_exact_match(claim: Claim, evidence: Sequence[EvidenceItem]) -> CheckResult:
    """Every quoted substring appears (case-insensitively) in some snippet."""
    quotes = extract_quotes(claim.text)

    if not quotes:
        return CheckResult.passing(
            QUOTE_EXACT_MATCH,
            "No quoted text in claim",
            critical=True,
        )

    snippets = [item.snippet.lower() for item in evidence]
    matches = [
        {"quote": quote, "found": any(quote.lower() in snippet for snippet in snippets)}
        for quote in quotes
    ]
    missing = sum(1 for m in matches if not m["found"])
    passed = missing == 0

    return CheckResult(
        name=QUOTE_EXACT_MATCH,
        passed=passed,
        critical=True,
        reason="All quoted text found in evidence" if passed else f"{missing} quotes not found in evidence",
        evidence_ref=matches,
    )


def check_entity_consistency(claim: Claim, evidence: Sequence[EvidenceItem]) -> CheckResult:
    """At least half of the claim's entities appear in 2+ evidence items."""
    entities = extract_entities(claim.text)

    if not entities:
        return CheckResult.passing(ENTITY_CONSISTENCY, "No named entities detected")

    haystacks = [(item.title.lower(), item.snippet.lower()) for item in evidence]
    entity_checks = []
    for entity in entities:
        needle = entity.lower()
        mentioning = sum(1 for title, snippet in haystacks if needle in snippet or needle in title)
        entity_checks.append({
            "entity": entity,
            "sources_mentioning": mentioning,
            "total_sources": len(evidence),
        })

    consistent = sum(1 for e in entity_checks if e["sources_mentioning"] >= MIN_ENTITY_SOURCES)
    passed = consistent >= _half_of(len(entities))

    if passed:
        reason = f"{consistent}/{len(entities)} entities found in multiple sources"
    else:
        reason = f"Only {consistent}/{len(entities)} entities found in multiple sources"

    return CheckResult(
        name=ENTITY_CONSISTENCY,
        passed=passed,
        critical=False,
        reason=reason,
        evidence_ref=entity_checks,
    )


def check_source_credibility(
    claim: Claim,
    evidence: Sequence[EvidenceItem],
    *,
    threshold: float = 60.0,
) -> CheckResult:
    """Average domain credibility across all evidence is >= threshold."""
    if not evidence:
        return CheckResult.passing(SOURCE_CREDIBILITY, "No sources to score")

    scores = []
    for item in evidence:
        domain = extract_domain(item.url)
        scores.append({
            "domain": domain,
            "score": domain_credibility_score(domain),
            "url": item.url,
        })

    total = sum(s["score"] for s in scores)
    average = total / len(scores)
    passed = total >= threshold * len(scores)

    if passed:
        reason = f"Average credibility score: {average:.0f}/100"
    else:
        reason = f"Low credibility score: {average:.0f}/100"

    return CheckResult(
        name=SOURCE_CREDIBILITY,
        passed=passed,
        critical=False,
        reason=reason,
        evidence_ref=scores,
    )


def check_temporal_consistency(claim: Claim, evidence: Sequence[EvidenceItem]) -> CheckResult:
    """At least half of the claim's dates appear verbatim in some title or snippet."""
    dates = extract_dates(claim.text)

    if not dates:
        return CheckResult.passing(TEMPORAL_CONSISTENCY, "No temporal claims detected")

    date_checks = []
    for date in dates:
        confirming = sum(1 for item in evidence if date in item.snippet or date in item.title)
        date_checks.append({
            "date": date,
            "sources_confirming": confirming,
            "total_sources": len(evidence),
        })

    confirmed = sum(1 for d in date_checks if d["sources_confirming"] > 0)
    passed = confirmed >= _half_of(len(dates))

    if passed:
        reason = f"{confirmed}/{len(dates)} dates confirmed in sources"
    else:
        reason = f"Only {confirmed}/{len(dates)} dates confirmed in sources"

    return CheckResult(
        name=TEMPORAL_CONSISTENCY,
        passed=passed,
        critical=False,
        reason=reason,
        evidence_ref=date_checks,
    )


def run_check_battery(
    claim: Claim,
    evidence: Sequence[EvidenceItem],
    prober: UrlProber,
    config: VerifierConfig | None = None,
) -> list[CheckResult]:
    """
    Run all five checks and return their results in CHECK_ORDER.
    """
    config = config or VerifierConfig()

    results = [
        check_url_validity(claim, evidence, prober, max_probes=config.max_probes),
        check_quote_exact_match(claim, evidence),
        check_entity_consistency(claim, evidence),
        check_source_credibility(claim, evidence, threshold=config.credibility_threshold),
        check_temporal_consistency(claim, evidence),
    ]

    for result in results:
        logger.debug(f"{result.name}: {'pass' if result.passed else 'FAIL'} - {result.reason}")

    return results


__all__ = [
    "URL_VALIDITY",
    "QUOTE_EXACT_MATCH",
    "ENTITY_CONSISTENCY",
    "SOURCE_CREDIBILITY",
    "TEMPORAL_CONSISTENCY",
    "CHECK_ORDER",
    "CRITICAL_CHECKS",
    "check_url_validity",
    "check_quote_exact_match",
    "check_entity_consistency",
    "check_source_credibility",
    "check_temporal_consistency",
    "run_check_battery",
]
