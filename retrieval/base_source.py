"""
Module 05 - Evidence Source Interface

Defines the protocol every evidence backend satisfies, the common base
class, and a static in-memory source for offline runs.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional, Protocol, runtime_checkable

from core.schemas.evidence import EvidenceBundle, EvidenceItem


@runtime_checkable
class EvidenceSource(Protocol):
    """Protocol defining the evidence source interface."""

    source_id: str

    def search(self, query: str) -> EvidenceBundle:
        """
        Search for evidence.

        Args:
            query: Free-text search query

        Returns:
            EvidenceBundle; failures are reported via `error`, not raised
        """
        ...


class BaseEvidenceSource(ABC):
    """
    Abstract base class for evidence sources.

    Subclasses implement `search`; failures are folded into an empty
    bundle with `error` set so the verifier sees an empty evidence set.
    """

    source_id: str = "base"

    def __init__(self, config: Optional[dict[str, Any]] = None):
        self.config = config or {}

    @abstractmethod
    def search(self, query: str) -> EvidenceBundle:
        pass

    def _create_error_bundle(self, query: str, error: str) -> EvidenceBundle:
        """Empty bundle carrying an error message."""
        return EvidenceBundle(query=query, results=[], error=error)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(source_id={self.source_id})"


class StaticEvidenceSource(BaseEvidenceSource):
    """
    Evidence source backed by a fixed query -> results mapping.

    Lookups are case-insensitive on the query. Unknown queries return an
    empty bundle (no error), or `default` when one is given.
    """

    source_id: str = "static"

    def __init__(
        self,
        results: Optional[Mapping[str, Iterable[EvidenceItem | dict[str, Any]]]] = None,
        default: Optional[Iterable[EvidenceItem | dict[str, Any]]] = None,
    ):
        super().__init__()
        self._results: dict[str, list[EvidenceItem]] = {
            query.lower(): [EvidenceItem.model_validate(item) for item in items]
            for query, items in (results or {}).items()
        }
        self._default = (
            [EvidenceItem.model_validate(item) for item in default] if default is not None else []
        )
        self.queries: list[str] = []

    def search(self, query: str) -> EvidenceBundle:
        self.queries.append(query)
        items = self._results.get(query.lower(), self._default)
        return EvidenceBundle(query=query, results=list(items))
