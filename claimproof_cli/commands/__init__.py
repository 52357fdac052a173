"""CLI subcommands."""

from claimproof_cli.commands import commit, membership, verify

__all__ = ["commit", "membership", "verify"]
