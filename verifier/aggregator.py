"""
Module 04 - Verdict Aggregator

Combines the ordered check results into a verdict, a confidence score
and a reasoning sentence. The policy:

1. Any critical failure -> FRAUD_PROVEN (confidence 10), proof source is
   the first critical failure in check order.
2. pass ratio >= verified_threshold -> VERIFIED.
3. pass ratio >= uncertain_threshold -> UNCERTAIN.
4. Otherwise FRAUD_PROVEN (confidence 10), proof source is checks[0]
   whether or not it failed.

Ratios are compared as exact fractions so 3/5 meets 0.6.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Sequence

from core.config.runtime import VerifierConfig
from core.schemas.verification import CheckResult, Verdict


logger = logging.getLogger(__name__)

FRAUD_CONFIDENCE = 10


@dataclass(frozen=True)
class AggregationPolicy:
    """Threshold policy for the aggregator."""
    verified_threshold: float = 0.6
    uncertain_threshold: float = 0.3

    @classmethod
    def from_config(cls, config: VerifierConfig) -> "AggregationPolicy":
        return cls(
            verified_threshold=config.verified_threshold,
            uncertain_threshold=config.uncertain_threshold,
        )


@dataclass(frozen=True)
class Aggregation:
    """Aggregator output. fraud_source is set only for FRAUD_PROVEN."""
    verdict: Verdict
    confidence: int
    reasoning: str
    fraud_source: Optional[CheckResult] = None


def _threshold(value: float) -> Fraction:
    # Fraction(str) keeps 0.6 as 3/5 instead of its binary approximation
    return Fraction(str(value))


def _round_half_up(value: Fraction) -> int:
    return int((value * 100 + Fraction(1, 2)) // 1)


def _failed_suffix(checks: Sequence[CheckResult]) -> str:
    failed = [c.name for c in checks if not c.passed]
    if not failed:
        return ""
    return f" Failed: {', '.join(failed)}."


def aggregate_checks(
    checks: Sequence[CheckResult],
    policy: Optional[AggregationPolicy] = None,
) -> Aggregation:
    """
    Reduce ordered check results to a verdict.

    Args:
        checks: Results in fixed check order
        policy: Threshold policy (defaults to 0.6 / 0.3)

    Returns:
        Aggregation with verdict, confidence, reasoning and fraud source

    Raises:
        ValueError: If checks is empty
    """
    if not checks:
        raise ValueError("Cannot aggregate an empty check list")

    policy = policy or AggregationPolicy()
    total = len(checks)
    passed = sum(1 for c in checks if c.passed)
    suffix = _failed_suffix(checks)

    critical_failure = next((c for c in checks if c.is_critical_failure), None)
    if critical_failure is not None:
        logger.info(f"Critical check failed: {critical_failure.name}")
        return Aggregation(
            verdict="FRAUD_PROVEN",
            confidence=FRAUD_CONFIDENCE,
            reasoning=f"Critical check failed: {critical_failure.name}. {critical_failure.reason}{suffix}",
            fraud_source=critical_failure,
        )

    ratio = Fraction(passed, total)

    if ratio >= _threshold(policy.verified_threshold):
        names = ", ".join(c.name for c in checks if c.passed)
        return Aggregation(
            verdict="VERIFIED",
            confidence=_round_half_up(ratio),
            reasoning=f"{passed}/{total} deterministic checks passed. {names} all confirmed.{suffix}",
        )

    if ratio >= _threshold(policy.uncertain_threshold):
        return Aggregation(
            verdict="UNCERTAIN",
            confidence=_round_half_up(ratio),
            reasoning=(
                f"Only {passed}/{total} checks passed. "
                f"Insufficient evidence to verify or disprove this claim.{suffix}"
            ),
        )

    # Proof source is positional, not the worst failing check
    return Aggregation(
        verdict="FRAUD_PROVEN",
        confidence=FRAUD_CONFIDENCE,
        reasoning=(
            f"Most checks failed ({total - passed}/{total}). "
            f"Evidence does not support this claim.{suffix}"
        ),
        fraud_source=checks[0],
    )


__all__ = [
    "FRAUD_CONFIDENCE",
    "AggregationPolicy",
    "Aggregation",
    "aggregate_checks",
]
