"""
Deterministic verification of committed claims.

The check battery, the verdict aggregator, the fraud-proof encoder and
the engine that ties them together.
"""

from .aggregator import (
    FRAUD_CONFIDENCE,
    Aggregation,
    AggregationPolicy,
    aggregate_checks,
)
from .checks import (
    CHECK_ORDER,
    CRITICAL_CHECKS,
    ENTITY_CONSISTENCY,
    QUOTE_EXACT_MATCH,
    SOURCE_CREDIBILITY,
    TEMPORAL_CONSISTENCY,
    URL_VALIDITY,
    check_entity_consistency,
    check_quote_exact_match,
    check_source_credibility,
    check_temporal_consistency,
    check_url_validity,
    run_check_battery,
)
from .credibility import domain_credibility_score
from .engine import DeterministicVerifier, normalize_evidence, run_checks
from .extraction import extract_dates, extract_domain, extract_entities, extract_quotes
from .fraud_proof import (
    MEMBERSHIP_CHECK_NAME,
    build_fraud_proof,
    build_membership_fraud_proof,
    compute_proof_hash,
    verify_fraud_proof,
)
from .url_probe import HttpUrlProber, UrlProber

__all__ = [
    "FRAUD_CONFIDENCE",
    "Aggregation",
    "AggregationPolicy",
    "aggregate_checks",
    "CHECK_ORDER",
    "CRITICAL_CHECKS",
    "URL_VALIDITY",
    "QUOTE_EXACT_MATCH",
    "ENTITY_CONSISTENCY",
    "SOURCE_CREDIBILITY",
    "TEMPORAL_CONSISTENCY",
    "check_url_validity",
    "check_quote_exact_match",
    "check_entity_consistency",
    "check_source_credibility",
    "check_temporal_consistency",
    "run_check_battery",
    "domain_credibility_score",
    "DeterministicVerifier",
    "normalize_evidence",
    "run_checks",
    "extract_quotes",
    "extract_entities",
    "extract_dates",
    "extract_domain",
    "MEMBERSHIP_CHECK_NAME",
    "build_fraud_proof",
    "build_membership_fraud_proof",
    "compute_proof_hash",
    "verify_fraud_proof",
    "HttpUrlProber",
    "UrlProber",
]
