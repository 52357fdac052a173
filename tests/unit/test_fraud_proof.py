"""
Module 04 - Fraud Proof Encoder Tests
Tests for verifier/fraud_proof.py
"""
import hashlib
import json

from core.crypto.hashing import hash_text, to_hex
from verifier.fraud_proof import (
    MEMBERSHIP_CHECK_NAME,
    MEMBERSHIP_FAILURE_REASON,
    build_fraud_proof,
    build_membership_fraud_proof,
    compute_proof_hash,
    verify_fraud_proof,
)

from fixtures import make_check


CLAIM = 'Le Guin wrote "The Dispossessed" in 1974.'


def failing_quote_check():
    return make_check(
        "Quote Exact Match",
        passed=False,
        critical=True,
        reason="1 quotes not found in evidence",
        evidence_ref=[{"quote": "The Dispossessed", "found": False}],
    )


class TestBuildFraudProof:
    """Tests for build_fraud_proof()."""

    def test_fields(self):
        check = failing_quote_check()
        proof = build_fraud_proof(CLAIM, check)

        assert proof.claim_hash == to_hex(hash_text(CLAIM))
        assert proof.failed_check == "Quote Exact Match"
        assert proof.reason == check.reason
        assert proof.evidence_snapshot == check.evidence_ref

    def test_proof_hash_is_canonical_json_sha256(self):
        check = failing_quote_check()
        payload = {"claim": CLAIM, "check": check.name, "evidence": check.evidence_ref}
        canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
        expected = "0x" + hashlib.sha256(canonical.encode("utf-8")).hexdigest()

        assert build_fraud_proof(CLAIM, check).proof_hash == expected

    def test_independent_recomputation_matches(self):
        check = failing_quote_check()
        proof = build_fraud_proof(CLAIM, check)

        assert compute_proof_hash(CLAIM, check.name, list(check.evidence_ref)) == proof.proof_hash

    def test_snapshot_key_order_does_not_matter(self):
        a = compute_proof_hash(CLAIM, "X", [{"quote": "q", "found": False}])
        b = compute_proof_hash(CLAIM, "X", [{"found": False, "quote": "q"}])
        assert a == b

    def test_different_check_different_hash(self):
        a = compute_proof_hash(CLAIM, "URL Validity", [])
        b = compute_proof_hash(CLAIM, "Quote Exact Match", [])
        assert a != b


class TestMembershipFraudProof:
    """Tests for build_membership_fraud_proof()."""

    def test_fields(self):
        root = "0x" + "11" * 32
        proof = build_membership_fraud_proof(CLAIM, root)

        assert proof.failed_check == MEMBERSHIP_CHECK_NAME
        assert proof.reason == MEMBERSHIP_FAILURE_REASON
        assert proof.evidence_snapshot == [{"expected_root": root, "leaf_hash": proof.claim_hash}]
        assert verify_fraud_proof(proof, CLAIM)


class TestVerifyFraudProof:
    """Tests for verify_fraud_proof()."""

    def test_valid_proof(self):
        assert verify_fraud_proof(build_fraud_proof(CLAIM, failing_quote_check()), CLAIM)

    def test_wrong_claim_text(self):
        proof = build_fraud_proof(CLAIM, failing_quote_check())
        assert not verify_fraud_proof(proof, CLAIM + " ")

    def test_tampered_snapshot(self):
        proof = build_fraud_proof(CLAIM, failing_quote_check())
        tampered = proof.model_copy(update={"evidence_snapshot": [{"quote": "The Dispossessed", "found": True}]})
        assert not verify_fraud_proof(tampered, CLAIM)

    def test_tampered_check_name(self):
        proof = build_fraud_proof(CLAIM, failing_quote_check())
        tampered = proof.model_copy(update={"failed_check": "URL Validity"})
        assert not verify_fraud_proof(tampered, CLAIM)

    def test_uncanonicalizable_snapshot(self):
        proof = build_fraud_proof(CLAIM, failing_quote_check())
        tampered = proof.model_copy(update={"evidence_snapshot": [{"score": float("nan")}]})
        assert verify_fraud_proof(tampered, CLAIM) is False
