"""
Runtime Configuration Module

Provides configuration loading and management for claimproof.
"""

from .runtime import (
    CacheConfig,
    HttpConfig,
    RuntimeConfig,
    SearchConfig,
    VerifierConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "RuntimeConfig",
    "HttpConfig",
    "VerifierConfig",
    "SearchConfig",
    "CacheConfig",
    "get_default_config",
    "set_default_config",
]
