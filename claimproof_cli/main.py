"""
Module 09C - CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    claimproof commit "<claim>" ... [--file PATH] [--out PATH] [--json]
    claimproof verify --claim "<claim>" [--evidence PATH] [--json]
    claimproof verify --batch PATH --index N [--evidence PATH] [--json]
    claimproof membership --batch PATH --index N [--json]
    claimproof membership --claim "<claim>" --proof PATH --root 0x... [--json]

Environment Variables:
    BRAVE_API_KEY               Brave Search token (enables evidence search)
    CLAIMPROOF_PROBE_TIMEOUT    Per-URL probe timeout in seconds (default: 5)
    CLAIMPROOF_CACHE_PATH       JSON file backing the evidence cache
    CLAIMPROOF_LOG_LEVEL        Log level (default: INFO)
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from core.config.runtime import RuntimeConfig
from orchestrator.pipeline import create_pipeline

from claimproof_cli.commands import commit, membership, verify


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def load_config(path: Path | None) -> RuntimeConfig:
    """YAML file (if given) with environment overrides applied on top."""
    config = RuntimeConfig.from_yaml(path) if path else RuntimeConfig()
    return config.with_env_overrides()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="claimproof",
        description="Claimproof CLI - Commit claims, challenge them, and check Merkle membership.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s 0.1.0"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- commit command ---
    commit_parser = subparsers.add_parser(
        "commit",
        help="Merkle-commit an ordered batch of claims",
        description="Build the Merkle root and per-claim inclusion proofs.",
    )
    commit_parser.add_argument(
        "claims",
        nargs="*",
        help="Claim texts, in commitment order",
    )
    commit_parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help="Read claims from a file (JSON list, or one per line); appended after positional claims",
    )
    commit_parser.add_argument(
        "--out", "-o",
        type=str,
        default=None,
        help="Save the committed batch as JSON",
    )
    commit_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    commit_parser.set_defaults(func=commit.commit_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Challenge a claim with the deterministic check battery",
        description="Run the five deterministic checks and print the verdict and fraud proof.",
    )
    source = verify_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--claim", type=str, help="Claim text (uncommitted)")
    source.add_argument("--batch", type=str, help="Batch file written by `commit --out`")
    verify_parser.add_argument(
        "--index",
        type=int,
        default=0,
        help="Claim index within --batch (default: 0)",
    )
    verify_parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Committed root to check membership against (default: the batch root)",
    )
    verify_parser.add_argument(
        "--evidence", "-e",
        type=str,
        default=None,
        help="JSON evidence file; evidence is searched for when omitted",
    )
    verify_parser.add_argument("--prompt", type=str, default=None, help="Original question, for the search query")
    verify_parser.add_argument("--subject", type=str, default=None, help="Topic prefix for the search query")
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    verify_parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on errors",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- membership command ---
    membership_parser = subparsers.add_parser(
        "membership",
        help="Check a claim against a committed Merkle root",
        description="Replay an inclusion proof offline.",
    )
    member_source = membership_parser.add_mutually_exclusive_group(required=True)
    member_source.add_argument("--claim", type=str, help="Claim text")
    member_source.add_argument("--batch", type=str, help="Batch file written by `commit --out`")
    membership_parser.add_argument("--index", type=int, default=0, help="Claim index within --batch")
    membership_parser.add_argument("--proof", type=str, default=None, help="JSON file with the proof steps")
    membership_parser.add_argument("--root", type=str, default=None, help="0x-prefixed committed root")
    membership_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    membership_parser.set_defaults(func=membership.membership_cmd)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    setup_logging(level=args.log_level or config.log_level, log_file=args.log_file)

    # Commands build the pipeline lazily; membership never needs one
    args.runtime_config = config
    args.pipeline_factory = lambda: create_pipeline(config)

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
