"""
Module 09A - Pipeline Integration

In-process runner composing claim commitment, evidence retrieval and
deterministic verification.

Two entry points:
- commit_claims: Merkle-commit a batch and hand back claims carrying
  their index and proof
- challenge: verify one claim, retrieving evidence when none is given
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Sequence, Union

from core.config.runtime import RuntimeConfig, get_default_config
from core.http.client import HttpClient
from core.merkle.commitment import CommitmentBuilder
from core.schemas.claims import Claim, Commitment
from core.schemas.verification import VerificationResult

from claims.detector import ClaimSource, PatternClaimDetector
from retrieval.base_source import EvidenceSource
from retrieval.brave_source import BraveSearchSource
from retrieval.cache import CachedEvidenceSource, InMemoryStore, JsonFileStore
from retrieval.query import build_search_query
from verifier.engine import DeterministicVerifier, EvidenceInput
from verifier.url_probe import HttpUrlProber


logger = logging.getLogger(__name__)


# =============================================================================
# Results
# =============================================================================

@dataclass
class CommittedBatch:
    """Output of commit_claims. commitment is None for an empty batch."""
    commitment: Optional[Commitment] = None
    claims: list[Claim] = field(default_factory=list)

    @property
    def root(self) -> Optional[str]:
        return self.commitment.root if self.commitment else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "commitment": self.commitment.model_dump(mode="json") if self.commitment else None,
            "claims": [c.model_dump(mode="json") for c in self.claims],
        }


# =============================================================================
# Pipeline Class
# =============================================================================

class ClaimPipeline:
    """
    Commit-then-challenge flow over pluggable collaborators.

    Usage:
        pipeline = ClaimPipeline(evidence_source=StaticEvidenceSource(...))
        batch = pipeline.commit_claims(["Claim one.", "Claim two."])
        result = pipeline.challenge(batch.claims[0], merkle_root=batch.root)
    """

    def __init__(
        self,
        *,
        verifier: Optional[DeterministicVerifier] = None,
        evidence_source: Optional[EvidenceSource] = None,
        claim_source: Optional[ClaimSource] = None,
    ):
        """
        Initialize pipeline.

        Args:
            verifier: Deterministic verifier (default-configured if omitted)
            evidence_source: Used by challenge when no evidence is supplied
            claim_source: Used by detect
        """
        self.verifier = verifier or DeterministicVerifier()
        self.evidence_source = evidence_source
        self.claim_source = claim_source or PatternClaimDetector()

    def detect(self, text: str) -> list[Claim]:
        """Extract uncommitted claims from free text."""
        return self.claim_source.detect(text)

    def commit_claims(
        self,
        claims: Sequence[Union[Claim, str]],
        *,
        timestamp: Optional[datetime] = None,
    ) -> CommittedBatch:
        """
        Commit an ordered batch.

        Plain strings are wrapped as claims with ids `claim_<i>`. Order is
        the commitment order and is preserved in the output.
        """
        normalized = [
            c if isinstance(c, Claim) else Claim(id=f"claim_{i}", text=c)
            for i, c in enumerate(claims)
        ]

        builder = CommitmentBuilder([c.text for c in normalized])
        commitment = builder.commitment(timestamp)
        if commitment is None:
            logger.info("No claims to commit")
            return CommittedBatch()

        committed = [
            claim.model_copy(update={"merkle_index": i, "merkle_proof": builder.proof(i)})
            for i, claim in enumerate(normalized)
        ]
        logger.info(f"Committed {len(committed)} claims under root {commitment.root[:18]}...")
        return CommittedBatch(commitment=commitment, claims=committed)

    def retrieve_evidence(
        self,
        claim_text: str,
        *,
        user_prompt: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> EvidenceInput:
        """Search for evidence; no configured source means no evidence."""
        if self.evidence_source is None:
            logger.warning("No evidence source configured; verifying against empty evidence")
            return []

        query = build_search_query(claim_text, user_prompt=user_prompt, subject=subject)
        bundle = self.evidence_source.search(query)
        if bundle.failed:
            logger.warning(f"Evidence retrieval failed for {query!r}: {bundle.error}")
        return bundle

    def challenge(
        self,
        claim: Claim,
        merkle_root: Optional[Union[str, bytes]] = None,
        evidence: EvidenceInput = None,
        user_prompt: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> VerificationResult:
        """
        Verify a challenged claim.

        Args:
            claim: Claim under challenge (with its Merkle proof, if committed)
            merkle_root: Committed root to check membership against
            evidence: Evidence to use; retrieved when None
            user_prompt: Original question, used to shape the search query
            subject: Topic prefix for the search query

        Returns:
            VerificationResult with the evidence used attached
        """
        logger.info(f"Challenge started for {claim.id}")
        if evidence is None:
            evidence = self.retrieve_evidence(claim.text, user_prompt=user_prompt, subject=subject)
        return self.verifier.verify(claim, evidence, merkle_root=merkle_root)

    def clear_cache(self) -> bool:
        """Clear the evidence cache; False when the source is not cached."""
        if isinstance(self.evidence_source, CachedEvidenceSource):
            self.evidence_source.clear()
            return True
        return False


# =============================================================================
# Factory Functions
# =============================================================================

def create_pipeline(config: Optional[RuntimeConfig] = None) -> ClaimPipeline:
    """
    Build a pipeline from runtime configuration.

    Search is wired only when an API key is configured; the cache wraps
    it unless disabled, backed by a JSON file when `cache.path` is set.
    """
    config = config or get_default_config()

    client = HttpClient(
        timeout=config.http.timeout,
        default_headers={"User-Agent": config.http.user_agent},
        proxy=config.proxy,
    )
    prober = HttpUrlProber(
        client,
        timeout_s=config.verifier.probe_timeout_s,
        max_workers=config.verifier.max_probes,
    )
    verifier = DeterministicVerifier(prober=prober, config=config.verifier)

    source: Optional[EvidenceSource] = None
    if config.search.enabled:
        source = BraveSearchSource(config.search, client=client)
        if config.cache.enabled:
            store = JsonFileStore(config.cache.path) if config.cache.path else InMemoryStore()
            source = CachedEvidenceSource(source, store)
    else:
        logger.info("Evidence search disabled (no API key configured)")

    return ClaimPipeline(verifier=verifier, evidence_source=source)


__all__ = [
    "CommittedBatch",
    "ClaimPipeline",
    "create_pipeline",
]
