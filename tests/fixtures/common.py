"""
Common test fixtures shared by all modules.

Provides factory functions for core claimproof data structures:
- Claim
- EvidenceItem / evidence lists
- CheckResult

plus StubProber, a UrlProber that answers from a fixed table instead of
the network.
"""

from typing import Any, Iterable, Optional, Sequence

from core.schemas.claims import Claim
from core.schemas.evidence import EvidenceItem
from core.schemas.verification import CheckResult


# =============================================================================
# Claim Factory
# =============================================================================

def make_claim(
    text: str = "The Left Hand of Darkness was published in 1969.",
    claim_id: str = "claim_0",
    **kwargs: Any,
) -> Claim:
    """Create an uncommitted Claim for testing."""
    return Claim(id=claim_id, text=text, **kwargs)


# =============================================================================
# Evidence Factories
# =============================================================================

def make_evidence_item(
    url: str = "https://en.wikipedia.org/wiki/The_Left_Hand_of_Darkness",
    title: str = "The Left Hand of Darkness - Wikipedia",
    snippet: str = "The Left Hand of Darkness is a 1969 novel by Ursula Le Guin.",
) -> EvidenceItem:
    """Create a single EvidenceItem for testing."""
    return EvidenceItem(title=title, snippet=snippet, url=url)


def make_evidence(
    count: int = 3,
    snippet: str = "The Left Hand of Darkness is a 1969 novel by Ursula Le Guin.",
    domains: Optional[Sequence[str]] = None,
) -> list[EvidenceItem]:
    """
    Create `count` evidence items sharing one snippet.

    Domains default to high-credibility hosts so Source Credibility passes.
    """
    domains = list(domains or ["en.wikipedia.org", "www.britannica.com", "www.nytimes.com"])
    return [
        make_evidence_item(
            url=f"https://{domains[i % len(domains)]}/article/{i}",
            title=f"Result {i}",
            snippet=snippet,
        )
        for i in range(count)
    ]


# =============================================================================
# CheckResult Factory
# =============================================================================

def make_check(
    name: str,
    passed: bool,
    critical: bool = False,
    reason: Optional[str] = None,
    evidence_ref: Optional[list[dict[str, Any]]] = None,
) -> CheckResult:
    """Create a CheckResult for aggregator tests."""
    return CheckResult(
        name=name,
        passed=passed,
        critical=critical,
        reason=reason or f"{name} {'passed' if passed else 'failed'}",
        evidence_ref=evidence_ref or [],
    )


# =============================================================================
# Probers
# =============================================================================

class StubProber:
    """UrlProber answering from a table; unknown URLs use `default`."""

    def __init__(self, reachable: Optional[dict[str, bool]] = None, default: bool = True):
        self.reachable = reachable or {}
        self.default = default
        self.calls: list[list[str]] = []

    def probe_all(self, urls: Iterable[str]) -> list[bool]:
        urls = list(urls)
        self.calls.append(urls)
        return [self.reachable.get(url, self.default) for url in urls]
