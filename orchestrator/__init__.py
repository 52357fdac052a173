"""
Module 09A - Pipeline Integration (In-Process Runtime Wiring)

Public API:
- ClaimPipeline: commit claims, challenge one claim
- CommittedBatch: commitment plus claims carrying their proofs
- create_pipeline: build a pipeline from RuntimeConfig
"""

from orchestrator.pipeline import (
    ClaimPipeline,
    CommittedBatch,
    create_pipeline,
)


__all__ = [
    "ClaimPipeline",
    "CommittedBatch",
    "create_pipeline",
]
