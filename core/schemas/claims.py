"""
Module 01 - Schemas & Canonicalization
File: claims.py

Purpose: Claim and commitment schemas.
A Claim is produced by an upstream claim source and never mutated; the
Merkle fields are attached exactly once, after the batch is committed,
by building a new Claim (model_copy) rather than assigning in place.
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Side on which the sibling hash is concatenated while replaying a proof
ProofPosition = Literal["LEFT", "RIGHT"]


class MerkleProofStep(BaseModel):
    """
    One level of a Merkle inclusion proof, ordered leaf -> root.

    position == "LEFT":  parent = sha256(sibling || current)
    position == "RIGHT": parent = sha256(current || sibling)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    sibling_hash: str = Field(
        ...,
        description="0x-prefixed hex of the sibling node hash",
    )
    position: ProofPosition = Field(
        ...,
        description="Side of the sibling relative to the current node",
    )


class Claim(BaseModel):
    """
    A single natural-language claim.

    The verification core reads `text` only; `merkle_index` and
    `merkle_proof` are written once by the commitment step.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., description="Claim identifier", min_length=1)
    text: str = Field(..., description="Claim text, hashed verbatim")
    type: str | None = Field(
        default=None,
        description="Optional claim category (date, name, number, event, ...)",
    )
    merkle_index: int | None = Field(
        default=None,
        description="Leaf index in the committed batch",
        ge=0,
    )
    merkle_proof: list[MerkleProofStep] | None = Field(
        default=None,
        description="Inclusion proof against the batch root (empty for a one-claim batch)",
    )

    @property
    def is_committed(self) -> bool:
        """Check if Merkle fields have been attached."""
        return self.merkle_index is not None and self.merkle_proof is not None

    def with_proof(self, index: int, proof: list[MerkleProofStep]) -> "Claim":
        """Return a copy carrying its commitment index and proof."""
        if self.is_committed:
            raise ValueError(f"Claim '{self.id}' is already committed at index {self.merkle_index}")
        return self.model_copy(update={"merkle_index": index, "merkle_proof": list(proof)})


class Commitment(BaseModel):
    """
    Commitment to an ordered batch of claims.

    Created exactly once per batch; claim_count equals the number of
    leaves used to build root.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: str = Field(..., description="0x-prefixed hex Merkle root")
    timestamp: datetime = Field(..., description="When the commitment was built")
    claim_count: int = Field(..., description="Number of committed leaves", ge=1)

    @field_validator("root")
    @classmethod
    def validate_root_hex(cls, v: str) -> str:
        """Root must be a 0x-prefixed 32-byte hex digest."""
        if not v.startswith("0x") or len(v) != 66:
            raise ValueError("root must be a 0x-prefixed 32-byte hex digest")
        int(v[2:], 16)
        return v
