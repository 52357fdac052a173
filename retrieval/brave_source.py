"""
Module 05 - Brave Search Source

Evidence retrieval through the Brave Web Search API. Only the top
results are kept and each is mapped to an EvidenceItem
(description -> snippet).
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from core.config.runtime import SearchConfig
from core.http.client import HttpClient, HttpError
from core.schemas.errors import EvidenceRetrievalException
from core.schemas.evidence import EvidenceBundle, EvidenceItem

from retrieval.base_source import BaseEvidenceSource


logger = logging.getLogger(__name__)


class BraveSearchSource(BaseEvidenceSource):
    """
    Brave Web Search adapter.

    Any transport, status or parse failure yields an empty bundle with
    `error` set; nothing is raised to the caller.
    """

    source_id: str = "brave"

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        client: Optional[HttpClient] = None,
    ):
        """
        Initialize Brave source.

        Args:
            config: Search configuration (API key, endpoint, result count)
            client: HTTP client; one is created when omitted
        """
        super().__init__()
        self.search_config = config or SearchConfig()
        self.client = client or HttpClient()

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "X-Subscription-Token": self.search_config.api_key or "",
        }

    def _params(self, query: str) -> dict[str, Any]:
        return {
            "q": query,
            "count": self.search_config.result_count,
            "text_decorations": "false",
            "search_lang": self.search_config.search_lang,
        }

    def search(self, query: str) -> EvidenceBundle:
        if not self.search_config.api_key:
            logger.warning("Brave search called without an API key")
            return self._create_error_bundle(query, "Search API key not configured")

        try:
            payload = self._fetch(query)
        except EvidenceRetrievalException as e:
            logger.warning(f"Brave search failed for {query!r}: {e.message}")
            return self._create_error_bundle(query, "Search failed")

        items = self._parse_results(payload)
        logger.info(f"Found {len(items)} search results for {query!r}")
        return EvidenceBundle(query=query, results=items)

    def _fetch(self, query: str) -> Any:
        """
        Call the search endpoint and decode its JSON body.

        Raises:
            EvidenceRetrievalException: On transport, status or decode failure
        """
        try:
            response = self.client.get(
                self.search_config.base_url,
                headers=self._headers(),
                params=self._params(query),
            )
            response.raise_for_status()
        except HttpError as e:
            raise EvidenceRetrievalException(
                f"Search request failed: {e}",
                query=query,
                details={"status_code": e.status_code},
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise EvidenceRetrievalException(
                f"Search returned invalid JSON: {e}",
                query=query,
                retryable=False,
            ) from e

    def _parse_results(self, payload: Any) -> list[EvidenceItem]:
        """Map `web.results` to EvidenceItems, skipping malformed entries."""
        if not isinstance(payload, dict):
            return []
        web = payload.get("web")
        raw_results = web.get("results") if isinstance(web, dict) else None
        if not isinstance(raw_results, list):
            return []

        items: list[EvidenceItem] = []
        for raw in raw_results[: self.search_config.result_count]:
            if not isinstance(raw, dict):
                continue
            try:
                items.append(EvidenceItem(
                    title=raw.get("title") or "",
                    snippet=raw.get("description") or "",
                    url=raw["url"],
                ))
            except (KeyError, ValidationError):
                logger.debug(f"Skipping malformed search result: {raw!r}")
        return items
