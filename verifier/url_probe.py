"""
Module 04 - URL Reachability Probes

Concurrent HEAD probes for the URL Validity check. Each probe has its own
timeout and the whole fan-out shares one wall-clock deadline; a probe that
errors or does not finish in time counts as unreachable. Nothing is
raised to the caller. Probes still queued at the deadline are cancelled
and running ones are joined before returning, bounded by the per-probe
timeout, so no worker thread outlives the call.
"""
from __future__ import annotations

import concurrent.futures
import logging
from typing import Optional, Protocol, Sequence, runtime_checkable

from core.http.client import HttpClient, HttpError


logger = logging.getLogger(__name__)

DEFAULT_PROBE_TIMEOUT_S = 5.0

# Slack on top of the per-probe timeout before a pending probe is abandoned
DEFAULT_DEADLINE_GRACE_S = 1.0


@runtime_checkable
class UrlProber(Protocol):
    """Maps a list of URLs to reachability booleans, same order."""

    def probe_all(self, urls: Sequence[str]) -> list[bool]:
        ...


class HttpUrlProber:
    """
    UrlProber backed by HEAD requests through HttpClient.

    A URL is reachable when it answers with a status in [200, 400).
    """

    def __init__(
        self,
        client: Optional[HttpClient] = None,
        *,
        timeout_s: float = DEFAULT_PROBE_TIMEOUT_S,
        max_workers: int = 3,
        deadline_grace_s: float = DEFAULT_DEADLINE_GRACE_S,
    ) -> None:
        self.client = client or HttpClient(timeout=timeout_s)
        self.timeout_s = timeout_s
        self.max_workers = max(1, max_workers)
        self.deadline_grace_s = max(0.0, deadline_grace_s)

    def probe(self, url: str) -> bool:
        """Probe one URL; transport errors and timeouts mean unreachable."""
        try:
            response = self.client.head(url, timeout=self.timeout_s)
        except HttpError as e:
            logger.debug(f"Probe failed for {url}: {e}")
            return False
        return response.reachable

    def probe_all(self, urls: Sequence[str]) -> list[bool]:
        """
        Probe URLs concurrently and collect results in input order.

        Results are fixed at the deadline; a probe that completes while
        the pool drains still counts as unreachable.
        """
        if not urls:
            return []

        results = [False] * len(urls)
        pool = concurrent.futures.ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(urls)),
            thread_name_prefix="url-probe",
        )
        try:
            futures = {pool.submit(self.probe, url): i for i, url in enumerate(urls)}
            done, pending = concurrent.futures.wait(
                futures, timeout=self.timeout_s + self.deadline_grace_s
            )
            for future in done:
                index = futures[future]
                error = future.exception()
                if error is not None:
                    logger.warning(f"Probe for {urls[index]} raised {type(error).__name__}: {error}")
                    continue
                results[index] = future.result()
            for future in pending:
                logger.debug(f"Probe for {urls[futures[future]]} missed the deadline")
                future.cancel()
        finally:
            pool.shutdown(wait=True, cancel_futures=True)

        return results


__all__ = [
    "DEFAULT_DEADLINE_GRACE_S",
    "DEFAULT_PROBE_TIMEOUT_S",
    "UrlProber",
    "HttpUrlProber",
]
