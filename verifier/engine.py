"""
Module 04 - Deterministic Verifier

Runs the check battery for one (claim, evidence) pair, aggregates the
outcomes into a verdict and attaches a fraud proof when the claim is
disproven. When a committed root is supplied together with the claim's
Merkle proof, membership is checked first and a failed membership
overrides the battery verdict.

The verifier holds no per-call state; one instance can serve any number
of concurrent verifications.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Union

from pydantic import ValidationError

from core.config.runtime import VerifierConfig
from core.merkle.commitment import verify_membership
from core.schemas.claims import Claim
from core.schemas.evidence import EvidenceBundle, EvidenceItem
from core.schemas.verification import VerificationResult

from verifier.aggregator import FRAUD_CONFIDENCE, AggregationPolicy, aggregate_checks
from verifier.checks import run_check_battery
from verifier.fraud_proof import (
    MEMBERSHIP_FAILURE_REASON,
    build_fraud_proof,
    build_membership_fraud_proof,
    compute_claim_hash,
)
from verifier.url_probe import HttpUrlProber, UrlProber


logger = logging.getLogger(__name__)

EvidenceInput = Union[EvidenceBundle, Iterable[Union[EvidenceItem, dict[str, Any]]], None]


def normalize_evidence(evidence: EvidenceInput) -> list[EvidenceItem]:
    """
    Coerce a bundle, a list of items, or a list of raw dicts into
    EvidenceItems.

    Items that fail validation are dropped with a warning; a missing
    evidence set is an empty one.
    """
    if evidence is None:
        return []
    if isinstance(evidence, EvidenceBundle):
        return list(evidence.results)

    items: list[EvidenceItem] = []
    for raw in evidence:
        if isinstance(raw, EvidenceItem):
            items.append(raw)
            continue
        try:
            items.append(EvidenceItem.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"Dropping malformed evidence item: {e.error_count()} validation error(s)")
    return items


class DeterministicVerifier:
    """
    Deterministic claim verifier.

    Usage:
        verifier = DeterministicVerifier()
        result = verifier.verify(claim, evidence)
    """

    def __init__(
        self,
        prober: Optional[UrlProber] = None,
        policy: Optional[AggregationPolicy] = None,
        config: Optional[VerifierConfig] = None,
    ) -> None:
        self.config = config or VerifierConfig()
        self.prober = prober or HttpUrlProber(
            timeout_s=self.config.probe_timeout_s,
            max_workers=self.config.max_probes,
        )
        self.policy = policy or AggregationPolicy.from_config(self.config)

    def verify(
        self,
        claim: Claim,
        evidence: EvidenceInput,
        merkle_root: Optional[Union[str, bytes]] = None,
    ) -> VerificationResult:
        """
        Verify a claim against its evidence.

        Args:
            claim: The challenged claim (may carry a Merkle proof)
            evidence: Evidence bundle, items, or raw dicts
            merkle_root: Committed root; membership is checked only when
                this is given and the claim carries a proof

        Returns:
            Completed VerificationResult; this never raises for bad
            evidence, unreachable URLs or invalid proofs
        """
        items = normalize_evidence(evidence)
        logger.info(f"Verifying claim {claim.id} against {len(items)} evidence items")

        membership_valid: Optional[bool] = None
        if merkle_root is not None and claim.merkle_proof is not None:
            membership_valid = verify_membership(claim.text, claim.merkle_proof, merkle_root)

        checks = run_check_battery(claim, items, self.prober, self.config)
        claim_hash = compute_claim_hash(claim.text)

        if membership_valid is False:
            root_ref = merkle_root if isinstance(merkle_root, str) else "0x" + bytes(merkle_root).hex()
            logger.info(f"Claim {claim.id} is not a member of the committed batch")
            return VerificationResult(
                claim_hash=claim_hash,
                checks=checks,
                verdict="FRAUD_PROVEN",
                confidence=FRAUD_CONFIDENCE,
                reasoning=MEMBERSHIP_FAILURE_REASON,
                fraud_proof=build_membership_fraud_proof(claim.text, root_ref),
                merkle_proof_valid=False,
                evidence=items,
            )

        aggregation = aggregate_checks(checks, self.policy)
        fraud_proof = None
        if aggregation.fraud_source is not None:
            fraud_proof = build_fraud_proof(claim.text, aggregation.fraud_source)

        logger.info(
            f"Claim {claim.id}: {aggregation.verdict} "
            f"(confidence {aggregation.confidence}, "
            f"{sum(1 for c in checks if c.passed)}/{len(checks)} checks passed)"
        )

        return VerificationResult(
            claim_hash=claim_hash,
            checks=checks,
            verdict=aggregation.verdict,
            confidence=aggregation.confidence,
            reasoning=aggregation.reasoning,
            fraud_proof=fraud_proof,
            merkle_proof_valid=membership_valid,
            evidence=items,
        )


def run_checks(
    claim: Claim,
    evidence: EvidenceInput,
    prober: Optional[UrlProber] = None,
) -> VerificationResult:
    """Convenience wrapper: verify with a default-configured verifier."""
    return DeterministicVerifier(prober=prober).verify(claim, evidence)


__all__ = [
    "EvidenceInput",
    "normalize_evidence",
    "DeterministicVerifier",
    "run_checks",
]
