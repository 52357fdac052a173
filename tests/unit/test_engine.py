"""
Module 04 - Deterministic Verifier Tests
Tests for verifier/engine.py

End-to-end over the battery, aggregator and fraud-proof encoder, with
the membership override.
"""
import pytest

from core.merkle.commitment import commit
from core.schemas.evidence import EvidenceBundle
from verifier.checks import CHECK_ORDER, QUOTE_EXACT_MATCH, URL_VALIDITY
from verifier.engine import DeterministicVerifier, normalize_evidence, run_checks
from verifier.fraud_proof import MEMBERSHIP_CHECK_NAME, verify_fraud_proof

from fixtures import StubProber, make_claim, make_evidence


TEXTS = [
    "The Left Hand of Darkness was published in 1969.",
    "It was written by Ursula Le Guin.",
    "The novel is set on the planet Gethen.",
]


@pytest.fixture
def verifier():
    return DeterministicVerifier(prober=StubProber())


class TestVerdicts:
    """Verdicts for representative inputs."""

    def test_supported_claim_is_verified(self, verifier):
        result = verifier.verify(make_claim(), make_evidence(3))

        assert result.verdict == "VERIFIED"
        assert result.confidence == 100
        assert result.fraud_proof is None
        assert result.merkle_proof_valid is None
        assert [c.name for c in result.checks] == list(CHECK_ORDER)
        assert len(result.evidence) == 3

    def test_empty_evidence_is_fraud_from_url_validity(self, verifier):
        claim = make_claim("nothing to extract here.")

        result = verifier.verify(claim, [])

        assert result.verdict == "FRAUD_PROVEN"
        assert result.confidence == 10
        assert result.fraud_proof.failed_check == URL_VALIDITY
        assert [c.passed for c in result.checks] == [False, True, True, True, True]

    def test_missing_quote_is_fraud_despite_other_passes(self, verifier):
        claim = make_claim('The Left Hand of Darkness opens with "a completely made up line" in 1969.')

        result = verifier.verify(claim, make_evidence(3))

        assert result.verdict == "FRAUD_PROVEN"
        assert result.fraud_proof.failed_check == QUOTE_EXACT_MATCH
        assert result.passed_count == 4
        assert verify_fraud_proof(result.fraud_proof, claim.text)

    def test_unreachable_sources_are_fraud(self):
        verifier = DeterministicVerifier(prober=StubProber(default=False))
        result = verifier.verify(make_claim(), make_evidence(3))

        assert result.verdict == "FRAUD_PROVEN"
        assert result.fraud_proof.failed_check == URL_VALIDITY

    def test_verdict_is_reproducible(self, verifier):
        claim, evidence = make_claim(), make_evidence(3)
        first = verifier.verify(claim, evidence)
        second = verifier.verify(claim, evidence)

        assert first.model_dump() == second.model_dump()


class TestEvidenceInput:
    """Evidence accepted as bundle, items or raw dicts."""

    def test_bundle(self, verifier):
        bundle = EvidenceBundle(query="q", results=make_evidence(3))
        assert verifier.verify(make_claim(), bundle).verdict == "VERIFIED"

    def test_raw_dicts(self, verifier):
        raw = [item.model_dump() for item in make_evidence(3)]
        assert verifier.verify(make_claim(), raw).verdict == "VERIFIED"

    def test_malformed_items_dropped(self):
        items = normalize_evidence([{"title": "no url"}, make_evidence(1)[0].model_dump()])
        assert len(items) == 1

    def test_none_is_empty(self):
        assert normalize_evidence(None) == []


class TestMembershipOverride:
    """Membership is checked when a root and a proof are both present."""

    def setup_method(self):
        self.commitment, self.proofs = commit(TEXTS)

    def committed_claim(self, index: int, text: str | None = None):
        return make_claim(
            text or TEXTS[index],
            claim_id=f"claim_{index}",
            merkle_index=index,
            merkle_proof=self.proofs[index],
        )

    def test_valid_membership_runs_battery(self, verifier):
        claim = self.committed_claim(0)

        result = verifier.verify(claim, make_evidence(3), merkle_root=self.commitment.root)

        assert result.merkle_proof_valid is True
        assert result.verdict == "VERIFIED"

    def test_invalid_membership_overrides_verdict(self, verifier):
        claim = self.committed_claim(0, text="The Left Hand of Darkness was published in 1970.")

        result = verifier.verify(claim, make_evidence(3), merkle_root=self.commitment.root)

        assert result.merkle_proof_valid is False
        assert result.verdict == "FRAUD_PROVEN"
        assert result.confidence == 10
        assert result.reasoning == "Merkle proof invalid - claim was not part of the original commitment."
        assert result.fraud_proof.failed_check == MEMBERSHIP_CHECK_NAME
        assert result.fraud_proof.evidence_snapshot == [{
            "expected_root": self.commitment.root,
            "leaf_hash": result.claim_hash,
        }]
        assert len(result.checks) == 5

    def test_empty_proof_counts_as_a_proof(self, verifier):
        claim = make_claim(TEXTS[0], merkle_index=0, merkle_proof=[])

        result = verifier.verify(claim, make_evidence(3), merkle_root=self.commitment.root)

        assert result.merkle_proof_valid is False

    def test_no_proof_skips_membership(self, verifier):
        result = verifier.verify(make_claim(TEXTS[0]), make_evidence(3), merkle_root=self.commitment.root)
        assert result.merkle_proof_valid is None

    def test_no_root_skips_membership(self, verifier):
        result = verifier.verify(self.committed_claim(0, text="tampered"), make_evidence(3))
        assert result.merkle_proof_valid is None

    def test_malformed_root_is_invalid_membership(self, verifier):
        result = verifier.verify(self.committed_claim(0), make_evidence(3), merkle_root="0xnothex")
        assert result.merkle_proof_valid is False


def test_run_checks_wrapper():
    result = run_checks(make_claim(), make_evidence(3), prober=StubProber())
    assert result.verdict == "VERIFIED"
