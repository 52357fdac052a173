"""
Module 09C - CLI Commit Command

Commit an ordered batch of claims and optionally save it as JSON.

Usage:
    claimproof commit "Claim one." "Claim two." [--file claims.txt] [--out batch.json] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from core.schemas.claims import Claim, Commitment
from orchestrator.pipeline import ClaimPipeline, CommittedBatch


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


class BatchFileError(Exception):
    """Batch file missing or malformed."""
    pass


def read_claim_texts(path: Path) -> list[str]:
    """
    Read claim texts from a file.

    A JSON list of strings is used as-is; anything else is read as one
    claim per non-blank line.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except ValueError:
        data = None
    if isinstance(data, list) and all(isinstance(item, str) for item in data):
        return data
    return [line.strip() for line in raw.splitlines() if line.strip()]


def save_batch(batch: CommittedBatch, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(batch.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")


def load_batch(path: Path) -> CommittedBatch:
    """Load a batch written by `claimproof commit --out`."""
    if not path.exists():
        raise BatchFileError(f"Batch file not found: {path}")
    try:
        data: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
        commitment = data.get("commitment")
        return CommittedBatch(
            commitment=Commitment.model_validate(commitment) if commitment else None,
            claims=[Claim.model_validate(c) for c in data.get("claims", [])],
        )
    except (ValueError, AttributeError, ValidationError) as e:
        raise BatchFileError(f"Invalid batch file {path}: {e}") from e


def print_batch_human(batch: CommittedBatch) -> None:
    if batch.commitment is None:
        print("root: (none - empty batch)")
        return
    print(f"root: {batch.commitment.root}")
    print(f"claims: {batch.commitment.claim_count}")
    print(f"timestamp: {batch.commitment.timestamp.isoformat()}")
    for claim in batch.claims:
        steps = len(claim.merkle_proof or [])
        print(f"  [{claim.merkle_index}] {claim.id} ({steps} proof steps): {claim.text[:60]}")


def commit_cmd(args: Namespace) -> int:
    """
    Execute the commit command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    texts: list[str] = list(args.claims or [])
    if args.file:
        file_path = Path(args.file)
        if not file_path.exists():
            print(f"Error: Claims file not found: {file_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR
        texts.extend(read_claim_texts(file_path))

    pipeline: ClaimPipeline = args.pipeline_factory()
    batch = pipeline.commit_claims(texts)

    if args.out:
        save_batch(batch, Path(args.out))
        logger.info(f"Batch saved to {args.out}")

    if args.json:
        print(json.dumps(batch.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_batch_human(batch)

    return EXIT_SUCCESS
