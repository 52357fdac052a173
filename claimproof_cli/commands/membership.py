"""
Module 09C - CLI Membership Command

Check that a claim belongs to a committed batch. Runs fully offline.

Usage:
    claimproof membership --batch batch.json --index 2 [--root 0x...]
    claimproof membership --claim "<text>" --proof proof.json --root 0x...
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from core.crypto.hashing import hash_text, to_hex
from core.merkle.commitment import verify_membership

from claimproof_cli.commands.commit import BatchFileError, load_batch


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def _resolve_inputs(args: Namespace) -> tuple[str, list[Any], str]:
    if args.batch:
        batch = load_batch(Path(args.batch))
        if not 0 <= args.index < len(batch.claims):
            raise BatchFileError(f"Index {args.index} out of range for batch of {len(batch.claims)} claims")
        claim = batch.claims[args.index]
        root = args.root or batch.root
        if root is None:
            raise BatchFileError("Batch has no commitment root")
        return claim.text, list(claim.merkle_proof or []), root

    if not args.root:
        raise BatchFileError("--root is required with --claim")
    proof: list[Any] = []
    if args.proof:
        proof = json.loads(Path(args.proof).read_text(encoding="utf-8"))
    return args.claim, proof, args.root


def membership_cmd(args: Namespace) -> int:
    """Execute the membership command."""
    try:
        text, proof, root = _resolve_inputs(args)
    except (BatchFileError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    valid = verify_membership(text, proof, root)
    report = {
        "valid": valid,
        "leaf_hash": to_hex(hash_text(text)),
        "root": root,
        "proof_length": len(proof) if isinstance(proof, list) else None,
    }

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print(f"valid: {str(valid).lower()}")
        print(f"leaf_hash: {report['leaf_hash']}")
        print(f"root: {root}")

    return EXIT_SUCCESS if valid else EXIT_VERIFICATION_FAILED
