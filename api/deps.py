"""
Module 09D - API Dependencies

Dependency injection for the API. Provides the runtime configuration
and a process-wide pipeline, both overridable through
`app.dependency_overrides` in tests.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml

from core.config.runtime import RuntimeConfig
from orchestrator.pipeline import ClaimPipeline, create_pipeline

logger = logging.getLogger(__name__)


def _config_search_paths() -> list[Path]:
    return [
        Path.cwd() / "claimproof.yaml",
        Path.cwd() / ".claimproof.yaml",
        Path.home() / ".config" / "claimproof" / "config.yaml",
    ]


def _load_runtime_config() -> RuntimeConfig:
    """Load RuntimeConfig from a config file, then overlay environment variables.

    Search order for config file:
      1. ./claimproof.yaml
      2. ./.claimproof.yaml
      3. ~/.config/claimproof/config.yaml

    Environment variables ALWAYS override config file values.
    The .env file is loaded automatically by core.config.runtime on import.
    """
    config: RuntimeConfig | None = None

    for path in _config_search_paths():
        if path.exists():
            try:
                config = RuntimeConfig.from_yaml(path)
                logger.info(f"Loaded config from {path}")
                break
            except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
                logger.warning(f"Failed to parse {path}: {e}")

    if config is None:
        config = RuntimeConfig()

    return config.with_env_overrides()


@lru_cache(maxsize=1)
def get_runtime_config() -> RuntimeConfig:
    """Runtime configuration, loaded once per process."""
    return _load_runtime_config()


@lru_cache(maxsize=1)
def get_pipeline() -> ClaimPipeline:
    """
    Process-wide pipeline.

    Shared so the evidence cache survives across requests.
    """
    return create_pipeline(get_runtime_config())
