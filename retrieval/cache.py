"""
Module 05 - Evidence Cache

Key-value stores and a caching wrapper for evidence sources. The
verification core stays stateless; caching lives entirely out here.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Any, Optional, Protocol, runtime_checkable

from core.schemas.errors import ClaimproofException, ErrorCodes
from core.schemas.evidence import EvidenceBundle

from retrieval.base_source import EvidenceSource


logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal store interface used by CachedEvidenceSource."""

    def get(self, key: str) -> Optional[dict[str, Any]]:
        ...

    def set(self, key: str, value: dict[str, Any]) -> None:
        ...

    def clear(self) -> None:
        ...


class InMemoryStore:
    """Thread-safe dict-backed store."""

    def __init__(self) -> None:
        self._data: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[dict[str, Any]]:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: dict[str, Any]) -> None:
        with self._lock:
            self._data[key] = value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


class JsonFileStore(InMemoryStore):
    """
    In-memory store persisted to a JSON file after every write.

    An unreadable file is logged and treated as empty; a failed write
    raises ClaimproofException(EVIDENCE_CACHE_ERROR).
    """

    def __init__(self, path: str | Path) -> None:
        super().__init__()
        self.path = Path(path)
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load cache from {self.path}: {e}")
            return
        if isinstance(data, dict):
            self._data.update({k: v for k, v in data.items() if isinstance(v, dict)})
            logger.info(f"Loaded {len(self._data)} cached entries from {self.path}")

    def _save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(self._data, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise ClaimproofException(
                f"Could not save cache to {self.path}: {e}",
                code=ErrorCodes.EVIDENCE_CACHE_ERROR,
                details={"path": str(self.path)},
            ) from e

    def set(self, key: str, value: dict[str, Any]) -> None:
        with self._lock:
            self._data[key] = value
            self._save()

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self._save()


class CachedEvidenceSource:
    """
    Wraps an EvidenceSource with a cache keyed by the lower-cased query.

    Only error-free bundles are stored, so a transient search failure is
    retried on the next call. A failed cache write is logged and the
    fresh bundle is still returned.
    """

    def __init__(self, source: EvidenceSource, store: Optional[KeyValueStore] = None):
        self.source = source
        self.store = store if store is not None else InMemoryStore()
        self.source_id = f"cached:{source.source_id}"

    @staticmethod
    def cache_key(query: str) -> str:
        return query.lower()

    def search(self, query: str) -> EvidenceBundle:
        key = self.cache_key(query)
        cached = self.store.get(key)
        if cached is not None:
            logger.debug(f"Using cached results for {query!r}")
            return EvidenceBundle.model_validate(cached)

        bundle = self.source.search(query)
        if not bundle.failed:
            try:
                self.store.set(key, bundle.model_dump(mode="json"))
            except ClaimproofException as e:
                logger.warning(f"Could not cache results for {query!r}: {e.message}")
        return bundle

    def clear(self) -> None:
        """Drop all cached bundles."""
        self.store.clear()
        logger.info("Evidence cache cleared")
