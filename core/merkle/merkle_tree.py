"""
Module 02 - Merkle Tree Implementation
Deterministic Merkle tree construction, proof generation, and verification.

Owner: Protocol/Crypto Engineer
Module ID: M02

Canonical Commitment Rules (Hard Contracts):
1. Leaf hashing: leaf = sha256(text.encode("utf-8"))
   - Implemented via core.crypto.hashing.hash_text()
2. Parent hashing: parent = sha256(left + right), never swapped
3. Odd levels: the last node is paired with itself (virtual sibling = self)
4. Single leaf: root = leaf, proof = []
5. Empty leaves: no tree; callers treat "no claims" as its own state

Proof Rules:
- One MerkleProofStep per level above the leaves, ordered leaf -> root
- A self-paired node still emits a step whose sibling is its own hash
  (position RIGHT), so the verifier needs no special case
- The verifier replays step tags only; it never sees a leaf index

Determinism Notes:
- Leaf order is defined by the caller and never sorted here
- Reordering leaves changes the root
"""
from __future__ import annotations

from typing import Any, Sequence

from core.crypto.hashing import DIGEST_SIZE, from_hex, hash_concat, to_hex
from core.schemas.claims import MerkleProofStep
from core.schemas.errors import MerkleIndexError


def merkle_parent(left: bytes, right: bytes) -> bytes:
    """
    Compute the parent hash of two child nodes: sha256(left + right).
    """
    return hash_concat(left, right)


def build_levels(leaves: Sequence[bytes]) -> list[list[bytes]]:
    """
    Build every level of the tree, leaves first, root level last.

    Stored levels are unpadded; the self-pairing of an odd last node
    happens while computing the next level.

    Raises:
        ValueError: If leaves is empty
    """
    if len(leaves) == 0:
        raise ValueError("Cannot build a Merkle tree from an empty leaf list")

    levels: list[list[bytes]] = [list(leaves)]
    current = levels[0]

    while len(current) > 1:
        next_level: list[bytes] = []
        for i in range(0, len(current), 2):
            left = current[i]
            right = current[i + 1] if i + 1 < len(current) else left
            next_level.append(merkle_parent(left, right))
        levels.append(next_level)
        current = next_level

    return levels


def build_merkle_root(leaves: Sequence[bytes]) -> bytes:
    """
    Build a Merkle root from a sequence of leaf hashes.

    Example: [a, b, c] -> [parent(a,b), parent(c,c)] -> root

    Raises:
        ValueError: If leaves is empty
    """
    return build_levels(leaves)[-1][0]


def proof_from_levels(levels: Sequence[Sequence[bytes]], index: int) -> list[MerkleProofStep]:
    """
    Walk pre-built levels from leaf `index` up to the root.

    Raises:
        MerkleIndexError: If index is outside the leaf level
    """
    leaf_count = len(levels[0]) if levels else 0
    if index < 0 or index >= leaf_count:
        raise MerkleIndexError(index, leaf_count)

    steps: list[MerkleProofStep] = []
    current_index = index

    for level in levels[:-1]:
        is_right_node = current_index % 2 == 1
        sibling_index = current_index - 1 if is_right_node else current_index + 1
        if sibling_index < len(level):
            sibling = level[sibling_index]
        else:
            # orphan: paired with itself
            sibling = level[current_index]
        steps.append(
            MerkleProofStep(
                sibling_hash=to_hex(sibling),
                position="LEFT" if is_right_node else "RIGHT",
            )
        )
        current_index //= 2

    return steps


def build_merkle_proof(leaves: Sequence[bytes], index: int) -> list[MerkleProofStep]:
    """
    Generate the inclusion proof for the leaf at `index`.

    The bounds check runs before any hashing.

    Raises:
        MerkleIndexError: If index is out of range (including empty leaves)
    """
    if index < 0 or index >= len(leaves):
        raise MerkleIndexError(index, len(leaves))
    return proof_from_levels(build_levels(leaves), index)


def _coerce_hash(value: Any) -> bytes:
    """Accept raw digest bytes or 0x-prefixed hex; reject anything else."""
    if isinstance(value, (bytes, bytearray)):
        digest = bytes(value)
    else:
        digest = from_hex(value)
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f"Expected a {DIGEST_SIZE}-byte digest, got {len(digest)} bytes")
    return digest


def _coerce_step(step: Any) -> MerkleProofStep:
    if isinstance(step, MerkleProofStep):
        return step
    return MerkleProofStep.model_validate(step)


def verify_merkle_proof(
    leaf_hash: bytes | str,
    proof: Sequence[MerkleProofStep | dict[str, Any]],
    root: bytes | str,
) -> bool:
    """
    Replay a proof over a leaf hash and compare against a claimed root.

    For each step:
    - LEFT:  current = sha256(sibling + current)
    - RIGHT: current = sha256(current + sibling)

    Pure and total: malformed input (bad hex, wrong digest length,
    unknown position, non-list proof) yields False, never an exception.

    Args:
        leaf_hash: Leaf digest (bytes or 0x hex)
        proof: Ordered steps, leaf -> root (models or plain dicts)
        root: Claimed root (bytes or 0x hex)

    Returns:
        True if the replayed hash equals the root exactly
    """
    try:
        current = _coerce_hash(leaf_hash)
        expected_root = _coerce_hash(root)
        if isinstance(proof, (str, bytes)) or proof is None:
            return False

        for raw_step in proof:
            step = _coerce_step(raw_step)
            sibling = _coerce_hash(step.sibling_hash)
            if step.position == "LEFT":
                current = merkle_parent(sibling, current)
            else:
                current = merkle_parent(current, sibling)
    except (ValueError, TypeError, AttributeError):
        return False

    return current == expected_root


def compute_tree_depth(num_leaves: int) -> int:
    """
    Number of levels from leaves to root, inclusive.

    0 for an empty tree, 1 for a single leaf; proof length is depth - 1.
    """
    if num_leaves <= 0:
        return 0

    depth = 1
    n = num_leaves
    while n > 1:
        n = (n + 1) // 2
        depth += 1

    return depth


__all__ = [
    "merkle_parent",
    "build_levels",
    "build_merkle_root",
    "build_merkle_proof",
    "proof_from_levels",
    "verify_merkle_proof",
    "compute_tree_depth",
]
