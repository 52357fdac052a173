"""
Module 01 - Schemas & Canonicalization
File: evidence.py

Purpose: Evidence schemas at the retrieval boundary.
Search backends return loosely shaped JSON; it is validated into these
models before anything in the verification core reads it.
"""

from pydantic import BaseModel, ConfigDict, Field


class EvidenceItem(BaseModel):
    """A single search result used as evidence for a claim."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str = Field(default="", description="Result title")
    snippet: str = Field(default="", description="Result snippet / description")
    url: str = Field(..., description="Result URL")


class EvidenceBundle(BaseModel):
    """
    The evidence set returned for one query.

    An empty `results` list is a valid state (nothing found, or the
    backend failed and `error` says why).
    """

    model_config = ConfigDict(extra="forbid")

    query: str = Field(..., description="Query that produced these results")
    results: list[EvidenceItem] = Field(default_factory=list)
    error: str | None = Field(default=None, description="Retrieval failure, if any")

    @property
    def is_empty(self) -> bool:
        """Check if no evidence was found."""
        return len(self.results) == 0

    @property
    def failed(self) -> bool:
        """Check if the backend reported an error."""
        return self.error is not None
