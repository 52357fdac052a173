"""
Module 02 - Merkle Tree and Commitments
Deterministic Merkle tree construction + proof generation/verification
for batches of claim texts.

Owner: Protocol/Crypto Engineer
Module ID: M02

Canonical Commitment Rules:
1. Leaf hashing: sha256(text.encode("utf-8"))
2. Parent hashing: sha256(left + right)
3. Odd levels: last node paired with itself, and its proof step says so
4. Single leaf: root = leaf, empty proof
5. Empty batch: no commitment

Usage:
    from core.merkle import commit, verify_membership

    commitment, proofs = commit(["claim one", "claim two", "claim three"])
    assert verify_membership("claim three", proofs[2], commitment.root)
"""
from .merkle_tree import (
    merkle_parent,
    build_levels,
    build_merkle_root,
    build_merkle_proof,
    proof_from_levels,
    verify_merkle_proof,
    compute_tree_depth,
)

from .commitment import (
    CommitmentBuilder,
    commit,
    verify_membership,
)


__all__ = [
    # Core functions
    "merkle_parent",
    "build_levels",
    "build_merkle_root",
    "build_merkle_proof",
    "proof_from_levels",
    "verify_merkle_proof",
    "compute_tree_depth",
    # Commitments
    "CommitmentBuilder",
    "commit",
    "verify_membership",
]
