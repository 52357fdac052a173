"""
Module 01 - Schemas & Canonicalization
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Canonical serialization API
from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    canonical_equals,
    canonicalize_value,
    dumps_canonical,
    ensure_utc,
    format_datetime_canonical,
)

# Error models and exceptions
from .errors import (
    CanonicalizationException,
    ClaimproofError,
    ClaimproofException,
    ErrorCodes,
    EvidenceRetrievalException,
    MerkleIndexError,
)

# Claim schemas
from .claims import (
    Claim,
    Commitment,
    MerkleProofStep,
    ProofPosition,
)

# Evidence schemas
from .evidence import (
    EvidenceBundle,
    EvidenceItem,
)

# Verification schemas
from .verification import (
    CheckResult,
    FraudProof,
    Verdict,
    VerificationResult,
)


__all__ = [
    # Canonical serialization
    "dumps_canonical",
    "canonicalize_value",
    "canonical_equals",
    "ensure_utc",
    "format_datetime_canonical",
    "CANONICAL_JSON_SEPARATORS",
    # Errors
    "ClaimproofError",
    "ClaimproofException",
    "CanonicalizationException",
    "MerkleIndexError",
    "EvidenceRetrievalException",
    "ErrorCodes",
    # Claims
    "Claim",
    "Commitment",
    "MerkleProofStep",
    "ProofPosition",
    # Evidence
    "EvidenceItem",
    "EvidenceBundle",
    # Verification
    "CheckResult",
    "FraudProof",
    "Verdict",
    "VerificationResult",
]
