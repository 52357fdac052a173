"""
Module 09C - CLI

Command-line interface for claimproof:
- commit: Merkle-commit a batch of claims
- verify: challenge a claim and print the verdict
- membership: check a claim against a committed root
"""

__version__ = "0.1.0"
