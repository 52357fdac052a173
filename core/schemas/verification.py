"""
Module 01 - Schemas & Canonicalization
File: verification.py

Purpose: Result formats of the deterministic verification pipeline.
CheckResult is produced by each check in the battery, VerificationResult
by the engine, FraudProof by the encoder whenever the verdict is
FRAUD_PROVEN.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .evidence import EvidenceItem


# Possible verdicts, produced solely from check outcomes
Verdict = Literal["VERIFIED", "UNCERTAIN", "FRAUD_PROVEN"]


class CheckResult(BaseModel):
    """
    Outcome of one deterministic check.

    `evidence_ref` is the JSON-ready record of exactly what the check
    looked at; it becomes the evidence snapshot of a fraud proof.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Check name", min_length=1)
    passed: bool = Field(..., description="Whether the check passed")
    critical: bool = Field(..., description="Whether failure alone proves fraud")
    reason: str = Field(..., description="Human-readable rationale")
    evidence_ref: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Per-item details the check evaluated",
    )

    @property
    def is_critical_failure(self) -> bool:
        """Check if this is a failed critical check."""
        return self.critical and not self.passed

    @classmethod
    def passing(
        cls,
        name: str,
        reason: str,
        *,
        critical: bool = False,
        evidence_ref: list[dict[str, Any]] | None = None,
    ) -> "CheckResult":
        """Create a passed check result."""
        return cls(
            name=name,
            passed=True,
            critical=critical,
            reason=reason,
            evidence_ref=evidence_ref or [],
        )

    @classmethod
    def failing(
        cls,
        name: str,
        reason: str,
        *,
        critical: bool = False,
        evidence_ref: list[dict[str, Any]] | None = None,
    ) -> "CheckResult":
        """Create a failed check result."""
        return cls(
            name=name,
            passed=False,
            critical=critical,
            reason=reason,
            evidence_ref=evidence_ref or [],
        )


class FraudProof(BaseModel):
    """
    Self-certifying dispute record.

    proof_hash = sha256(canonical({"claim": text, "check": failed_check,
    "evidence": evidence_snapshot})), so anyone holding the claim text and
    the snapshot can recompute it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    claim_hash: str = Field(..., description="0x-prefixed sha256 of the claim text")
    failed_check: str = Field(..., description="Name of the check the proof is built from")
    reason: str = Field(..., description="Rationale of the failed check")
    evidence_snapshot: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Evidence the failed check evaluated",
    )
    proof_hash: str = Field(..., description="0x-prefixed hash over claim, check and evidence")


class VerificationResult(BaseModel):
    """
    Completed verification of one challenged claim.

    Callers always receive one of these; transport and parsing errors
    are folded into check outcomes.
    """

    model_config = ConfigDict(extra="forbid")

    claim_hash: str = Field(..., description="0x-prefixed sha256 of the claim text")
    checks: list[CheckResult] = Field(default_factory=list)
    verdict: Verdict = Field(..., description="Aggregated verdict")
    confidence: int = Field(..., description="Confidence score", ge=0, le=100)
    reasoning: str = Field(..., description="Sentence derived from the check outcomes")
    fraud_proof: FraudProof | None = Field(default=None)
    merkle_proof_valid: bool | None = Field(
        default=None,
        description="Membership result when a committed root was supplied",
    )
    evidence: list[EvidenceItem] = Field(
        default_factory=list,
        description="Evidence the checks were run against",
    )

    @property
    def passed_count(self) -> int:
        """Count of passed checks."""
        return sum(1 for check in self.checks if check.passed)

    @property
    def is_fraud(self) -> bool:
        """Check if the claim was disproven."""
        return self.verdict == "FRAUD_PROVEN"

    def get_failed_checks(self) -> list[CheckResult]:
        """Get all failed checks."""
        return [check for check in self.checks if not check.passed]
