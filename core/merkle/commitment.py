"""
Module 02 - Claim Commitments
Builds the Merkle commitment for a batch of claim texts and checks
membership of a single claim against a committed root.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- CommitmentBuilder: leaves, root and per-index proofs for one batch
- commit: one-shot (Commitment | None, proofs) for an ordered batch
- verify_membership: text-level wrapper over verify_merkle_proof

An empty batch produces no commitment (None) and no proofs; that is a
normal state for callers to handle, not an error.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Sequence

from core.crypto.hashing import hash_text, to_hex
from core.merkle.merkle_tree import (
    build_levels,
    proof_from_levels,
    verify_merkle_proof,
)
from core.schemas.claims import Commitment, MerkleProofStep
from core.schemas.errors import MerkleIndexError


logger = logging.getLogger(__name__)


class CommitmentBuilder:
    """
    Merkle tree over an ordered batch of claim texts.

    The tree is built once in the constructor; proofs are read from the
    stored levels.

    Example:
        >>> builder = CommitmentBuilder(["a", "b", "c"])
        >>> proof = builder.proof(2)
        >>> verify_membership("c", proof, builder.root)
        True
    """

    def __init__(self, claim_texts: Sequence[str]) -> None:
        self._leaves: list[bytes] = [hash_text(text) for text in claim_texts]
        self._levels: list[list[bytes]] = build_levels(self._leaves) if self._leaves else []

    @property
    def leaf_count(self) -> int:
        return len(self._leaves)

    @property
    def is_empty(self) -> bool:
        return not self._leaves

    @property
    def root(self) -> bytes | None:
        """Merkle root, or None for an empty batch."""
        if not self._levels:
            return None
        return self._levels[-1][0]

    def leaf_hash(self, index: int) -> bytes:
        """
        Raises:
            MerkleIndexError: If index is out of range
        """
        if index < 0 or index >= self.leaf_count:
            raise MerkleIndexError(index, self.leaf_count)
        return self._leaves[index]

    def proof(self, index: int) -> list[MerkleProofStep]:
        """
        Inclusion proof for the claim at `index`.

        Raises:
            MerkleIndexError: If index is out of range
        """
        if index < 0 or index >= self.leaf_count:
            raise MerkleIndexError(index, self.leaf_count)
        return proof_from_levels(self._levels, index)

    def proofs(self) -> list[list[MerkleProofStep]]:
        """Proofs for every claim, in input order."""
        return [proof_from_levels(self._levels, i) for i in range(self.leaf_count)]

    def commitment(self, timestamp: datetime | None = None) -> Commitment | None:
        """Build the Commitment record, or None for an empty batch."""
        root = self.root
        if root is None:
            return None
        return Commitment(
            root=to_hex(root),
            timestamp=timestamp or datetime.now(timezone.utc),
            claim_count=self.leaf_count,
        )


def commit(
    claim_texts: Sequence[str],
    *,
    timestamp: datetime | None = None,
) -> tuple[Commitment | None, list[list[MerkleProofStep]]]:
    """
    Commit to an ordered batch of claim texts.

    Args:
        claim_texts: Claim texts in their semantic order
        timestamp: Commitment time (defaults to now, UTC)

    Returns:
        (Commitment, proofs) where proofs[i] proves claim_texts[i];
        (None, []) for an empty batch
    """
    builder = CommitmentBuilder(claim_texts)
    commitment = builder.commitment(timestamp)
    if commitment is None:
        logger.info("No claims to commit")
        return None, []

    logger.info(f"Committed {commitment.claim_count} claims under root {commitment.root[:18]}...")
    return commitment, builder.proofs()


def verify_membership(
    leaf_text: str,
    proof: Sequence[MerkleProofStep | dict[str, Any]],
    root: bytes | str,
) -> bool:
    """
    Check that `leaf_text` is part of the batch committed under `root`.

    Never raises; malformed proofs or roots yield False.
    """
    if not isinstance(leaf_text, str):
        return False
    return verify_merkle_proof(hash_text(leaf_text), proof, root)


__all__ = [
    "CommitmentBuilder",
    "commit",
    "verify_membership",
]
