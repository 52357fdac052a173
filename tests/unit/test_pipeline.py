"""
Module 09A - Pipeline Integration Tests
Tests for orchestrator/pipeline.py

Commit-then-challenge over a static evidence source and a stub prober;
no network access.
"""
from datetime import datetime, timezone

import pytest

from core.config.runtime import RuntimeConfig
from core.merkle.commitment import verify_membership
from retrieval import BraveSearchSource, CachedEvidenceSource, JsonFileStore, StaticEvidenceSource
from verifier.engine import DeterministicVerifier

from orchestrator import ClaimPipeline, CommittedBatch, create_pipeline
from fixtures import StubProber, make_claim, make_evidence


TEXTS = [
    "The Left Hand of Darkness was published in 1969.",
    "Ursula Le Guin was an American author.",
    "The novel is set on the planet Gethen.",
]


@pytest.fixture
def source():
    return StaticEvidenceSource(default=make_evidence(3))


@pytest.fixture
def pipeline(source):
    return ClaimPipeline(
        verifier=DeterministicVerifier(prober=StubProber()),
        evidence_source=source,
    )


class TestCommitClaims:
    """Tests for ClaimPipeline.commit_claims()."""

    def test_attaches_index_and_proof(self, pipeline):
        batch = pipeline.commit_claims(TEXTS)

        assert batch.commitment.claim_count == 3
        assert [c.merkle_index for c in batch.claims] == [0, 1, 2]
        assert [c.id for c in batch.claims] == ["claim_0", "claim_1", "claim_2"]
        for claim in batch.claims:
            assert verify_membership(claim.text, claim.merkle_proof, batch.root)

    def test_keeps_claim_ids(self, pipeline):
        claims = [make_claim(text, claim_id=f"c{i}") for i, text in enumerate(TEXTS)]

        batch = pipeline.commit_claims(claims)

        assert [c.id for c in batch.claims] == ["c0", "c1", "c2"]
        assert not claims[0].is_committed

    def test_empty_batch(self, pipeline):
        batch = pipeline.commit_claims([])

        assert batch.commitment is None
        assert batch.root is None
        assert batch.claims == []

    def test_to_dict(self, pipeline):
        ts = datetime(2024, 1, 1, tzinfo=timezone.utc)
        data = pipeline.commit_claims(TEXTS[:1], timestamp=ts).to_dict()

        assert data["commitment"]["claim_count"] == 1
        assert data["claims"][0]["merkle_proof"] == []

    def test_empty_to_dict(self):
        assert CommittedBatch().to_dict() == {"commitment": None, "claims": []}


class TestChallenge:
    """Tests for ClaimPipeline.challenge()."""

    def test_committed_claim_verified(self, pipeline):
        batch = pipeline.commit_claims(TEXTS)

        result = pipeline.challenge(batch.claims[0], merkle_root=batch.root)

        assert result.verdict == "VERIFIED"
        assert result.merkle_proof_valid is True

    def test_tampered_claim_is_fraud(self, pipeline):
        batch = pipeline.commit_claims(TEXTS)
        tampered = batch.claims[0].model_copy(update={"text": TEXTS[0].replace("1969", "1970")})

        result = pipeline.challenge(tampered, merkle_root=batch.root)

        assert result.verdict == "FRAUD_PROVEN"
        assert result.merkle_proof_valid is False

    def test_retrieval_uses_shaped_query(self, pipeline, source):
        pipeline.challenge(make_claim("The novel was published in 1969."), subject="Le Guin")
        assert source.queries == ["Le Guin The novel was published in 1969."]

    def test_supplied_evidence_skips_retrieval(self, pipeline, source):
        result = pipeline.challenge(make_claim(), evidence=make_evidence(2))

        assert source.queries == []
        assert len(result.evidence) == 2

    def test_no_source_means_empty_evidence(self):
        pipeline = ClaimPipeline(verifier=DeterministicVerifier(prober=StubProber()))

        result = pipeline.challenge(make_claim())

        assert result.verdict == "FRAUD_PROVEN"
        assert result.fraud_proof.failed_check == "URL Validity"


class TestDetect:
    def test_detect_then_commit(self, pipeline):
        claims = pipeline.detect("Ursula Le Guin was an American author. I think so.")
        batch = pipeline.commit_claims(claims)

        assert [c.text for c in batch.claims] == ["Ursula Le Guin was an American author."]


class TestClearCache:
    def test_uncached_source(self, pipeline):
        assert pipeline.clear_cache() is False

    def test_cached_source(self, source):
        cached = CachedEvidenceSource(source)
        pipeline = ClaimPipeline(verifier=DeterministicVerifier(prober=StubProber()), evidence_source=cached)

        pipeline.challenge(make_claim())
        assert pipeline.clear_cache() is True
        pipeline.challenge(make_claim())

        assert len(source.queries) == 2


class TestCacheWriteFailure:
    """A broken cache store must not fail a challenge."""

    def test_challenge_completes_when_cache_file_unwritable(self, source, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")
        cached = CachedEvidenceSource(source, JsonFileStore(blocker / "cache.json"))
        pipeline = ClaimPipeline(verifier=DeterministicVerifier(prober=StubProber()), evidence_source=cached)

        result = pipeline.challenge(make_claim())

        assert result.verdict == "VERIFIED"
        assert len(result.evidence) == 3


class TestCreatePipeline:
    """Tests for create_pipeline()."""

    def test_search_disabled_without_key(self):
        pipeline = create_pipeline(RuntimeConfig())
        assert pipeline.evidence_source is None

    def test_brave_wrapped_in_cache(self):
        config = RuntimeConfig.from_dict({"search": {"api_key": "k"}})

        pipeline = create_pipeline(config)

        assert isinstance(pipeline.evidence_source, CachedEvidenceSource)
        assert isinstance(pipeline.evidence_source.source, BraveSearchSource)

    def test_cache_disabled(self):
        config = RuntimeConfig.from_dict({"search": {"api_key": "k"}, "cache": {"enabled": False}})
        assert isinstance(create_pipeline(config).evidence_source, BraveSearchSource)

    def test_file_cache(self, tmp_path):
        config = RuntimeConfig.from_dict({
            "search": {"api_key": "k"},
            "cache": {"path": str(tmp_path / "cache.json")},
        })
        assert isinstance(create_pipeline(config).evidence_source.store, JsonFileStore)

    def test_verifier_uses_config(self):
        config = RuntimeConfig.from_dict({"verifier": {"max_probes": 5, "verified_threshold": 0.8}})

        verifier = create_pipeline(config).verifier

        assert verifier.config.max_probes == 5
        assert verifier.prober.max_workers == 5
