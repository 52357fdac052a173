"""
Test fixtures for claimproof.

Usage:
    from fixtures import make_claim, make_evidence, StubProber
"""

from fixtures.common import (
    StubProber,
    make_check,
    make_claim,
    make_evidence,
    make_evidence_item,
)

__all__ = [
    "StubProber",
    "make_check",
    "make_claim",
    "make_evidence",
    "make_evidence_item",
]
