"""
Module 09C - CLI Verify Command

Challenge a claim and print the verdict.

Usage:
    claimproof verify --claim "<text>" [--evidence evidence.json] [--json]
    claimproof verify --batch batch.json --index 2 [--evidence evidence.json] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from core.schemas.claims import Claim
from core.schemas.evidence import EvidenceItem
from core.schemas.verification import VerificationResult
from orchestrator.pipeline import ClaimPipeline

from claimproof_cli.commands.commit import BatchFileError, load_batch


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def load_evidence(path: Path) -> list[EvidenceItem]:
    """Read a JSON list of {title, snippet, url} objects (or a bundle with `results`)."""
    data: Any = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("results", [])
    return [EvidenceItem.model_validate(item) for item in data]


def resolve_claim(args: Namespace) -> tuple[Claim, Optional[str]]:
    """Pick the claim (and committed root) from --claim or --batch/--index."""
    if args.batch:
        batch = load_batch(Path(args.batch))
        if not 0 <= args.index < len(batch.claims):
            raise BatchFileError(f"Index {args.index} out of range for batch of {len(batch.claims)} claims")
        return batch.claims[args.index], args.root or batch.root
    return Claim(id="claim_0", text=args.claim), args.root


def print_result_human(result: VerificationResult) -> None:
    print(f"verdict: {result.verdict}")
    print(f"confidence: {result.confidence}")
    print(f"claim_hash: {result.claim_hash}")
    if result.merkle_proof_valid is not None:
        print(f"merkle_proof_valid: {str(result.merkle_proof_valid).lower()}")
    print(f"reasoning: {result.reasoning}")

    failed = result.get_failed_checks()
    print(f"\nchecks: {result.passed_count} passed, {len(failed)} failed")
    for check in result.checks:
        status = "✓" if check.passed else "✗"
        marker = " [critical]" if check.critical else ""
        print(f"  {status} {check.name}{marker}: {check.reason}")

    if result.fraud_proof:
        print("\nfraud_proof:")
        print(f"  failed_check: {result.fraud_proof.failed_check}")
        print(f"  proof_hash: {result.fraud_proof.proof_hash}")


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Returns:
        EXIT_VERIFICATION_FAILED when the claim is FRAUD_PROVEN
    """
    try:
        claim, root = resolve_claim(args)
    except BatchFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    evidence: Optional[list[EvidenceItem]] = None
    if args.evidence:
        evidence_path = Path(args.evidence)
        try:
            evidence = load_evidence(evidence_path)
        except (OSError, ValueError, ValidationError) as e:
            print(f"Error loading evidence: {e}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

    pipeline: ClaimPipeline = args.pipeline_factory()
    result = pipeline.challenge(
        claim,
        merkle_root=root,
        evidence=evidence,
        user_prompt=args.prompt,
        subject=args.subject,
    )

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
    else:
        print_result_human(result)

    if result.is_fraud:
        logger.warning(f"Claim {claim.id} disproven: {result.reasoning}")
        return EXIT_VERIFICATION_FAILED
    return EXIT_SUCCESS
