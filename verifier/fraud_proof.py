"""
Module 04 - Fraud Proof Encoder

Turns a failed check into a self-certifying FraudProof. The proof hash
is taken over the canonical JSON of {"claim", "check", "evidence"}, so
any holder of the claim text can recompute it with verify_fraud_proof.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence

from core.crypto.hashing import hash_canonical, hash_text, to_hex
from core.schemas.errors import CanonicalizationException
from core.schemas.verification import CheckResult, FraudProof


logger = logging.getLogger(__name__)

MEMBERSHIP_CHECK_NAME = "Merkle Membership"
MEMBERSHIP_FAILURE_REASON = "Merkle proof invalid - claim was not part of the original commitment."


def compute_claim_hash(claim_text: str) -> str:
    """0x-hex sha256 of the claim text."""
    return to_hex(hash_text(claim_text))


def compute_proof_hash(
    claim_text: str,
    check_name: str,
    evidence: Sequence[dict[str, Any]],
) -> str:
    """0x-hex hash of the canonical {claim, check, evidence} payload."""
    payload = {
        "claim": claim_text,
        "check": check_name,
        "evidence": list(evidence),
    }
    return to_hex(hash_canonical(payload))


def build_fraud_proof(claim_text: str, check: CheckResult) -> FraudProof:
    """Encode `check` as the fraud proof for `claim_text`."""
    snapshot = [dict(ref) for ref in check.evidence_ref]
    return FraudProof(
        claim_hash=compute_claim_hash(claim_text),
        failed_check=check.name,
        reason=check.reason,
        evidence_snapshot=snapshot,
        proof_hash=compute_proof_hash(claim_text, check.name, snapshot),
    )


def build_membership_fraud_proof(claim_text: str, expected_root: str) -> FraudProof:
    """Fraud proof for a claim whose Merkle proof does not reach `expected_root`."""
    claim_hash = compute_claim_hash(claim_text)
    snapshot = [{"expected_root": expected_root, "leaf_hash": claim_hash}]
    return FraudProof(
        claim_hash=claim_hash,
        failed_check=MEMBERSHIP_CHECK_NAME,
        reason=MEMBERSHIP_FAILURE_REASON,
        evidence_snapshot=snapshot,
        proof_hash=compute_proof_hash(claim_text, MEMBERSHIP_CHECK_NAME, snapshot),
    )


def verify_fraud_proof(proof: FraudProof, claim_text: str) -> bool:
    """
    Recompute claim_hash and proof_hash from the claim text and the
    proof's own snapshot.

    Returns False on any mismatch, including a snapshot that cannot be
    canonicalized.
    """
    if proof.claim_hash != compute_claim_hash(claim_text):
        logger.debug("Fraud proof claim hash mismatch")
        return False

    try:
        expected = compute_proof_hash(claim_text, proof.failed_check, proof.evidence_snapshot)
    except CanonicalizationException as e:
        logger.debug(f"Fraud proof snapshot not canonicalizable: {e}")
        return False

    return expected == proof.proof_hash


__all__ = [
    "MEMBERSHIP_CHECK_NAME",
    "MEMBERSHIP_FAILURE_REASON",
    "compute_claim_hash",
    "compute_proof_hash",
    "build_fraud_proof",
    "build_membership_fraud_proof",
    "verify_fraud_proof",
]
