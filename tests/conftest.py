"""
Pytest configuration and shared fixtures for claimproof tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_claim = _common.make_claim
make_evidence = _common.make_evidence
make_evidence_item = _common.make_evidence_item
make_check = _common.make_check
StubProber = _common.StubProber


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def claim():
    """Provide a default uncommitted Claim."""
    return make_claim()


@pytest.fixture
def evidence():
    """Provide three high-credibility evidence items."""
    return make_evidence()


@pytest.fixture
def reachable_prober():
    """Prober reporting every URL reachable."""
    return StubProber(default=True)


@pytest.fixture
def unreachable_prober():
    """Prober reporting every URL unreachable."""
    return StubProber(default=False)
