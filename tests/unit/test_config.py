"""
Runtime Configuration Tests
Tests for core/config/runtime.py
"""
import pytest

from core.config.runtime import RuntimeConfig, SearchConfig


ENV_VARS = [
    "CLAIMPROOF_PROBE_TIMEOUT",
    "CLAIMPROOF_MAX_PROBES",
    "CLAIMPROOF_SEARCH_PROVIDER",
    "BRAVE_API_KEY",
    "CLAIMPROOF_CACHE_ENABLED",
    "CLAIMPROOF_CACHE_PATH",
    "CLAIMPROOF_HTTP_PROXY",
    "CLAIMPROOF_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_verifier_defaults(self):
        config = RuntimeConfig()

        assert config.verifier.max_probes == 3
        assert config.verifier.probe_timeout_s == 5.0
        assert config.verifier.verified_threshold == 0.6
        assert config.verifier.uncertain_threshold == 0.3
        assert config.verifier.credibility_threshold == 60.0

    def test_search_enabled_needs_key(self):
        assert not SearchConfig().enabled
        assert SearchConfig(api_key="k").enabled
        assert not SearchConfig(api_key="k", provider="none").enabled


class TestFromDict:
    def test_partial_sections(self):
        config = RuntimeConfig.from_dict({"verifier": {"max_probes": 5}, "proxy": "http://p:1"})

        assert config.verifier.max_probes == 5
        assert config.verifier.verified_threshold == 0.6
        assert config.proxy == "http://p:1"

    def test_unknown_key_rejected(self):
        with pytest.raises(TypeError):
            RuntimeConfig.from_dict({"verifier": {"bogus": 1}})


class TestFromYaml:
    def test_loads_file(self, tmp_path):
        path = tmp_path / "claimproof.yaml"
        path.write_text(
            "search:\n"
            "  result_count: 3\n"
            "cache:\n"
            "  enabled: false\n"
            "log_level: DEBUG\n",
            encoding="utf-8",
        )

        config = RuntimeConfig.from_yaml(path)

        assert config.search.result_count == 3
        assert config.cache.enabled is False
        assert config.log_level == "DEBUG"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert RuntimeConfig.from_yaml(path).verifier.max_probes == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "nope.yaml")


class TestEnvOverrides:
    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CLAIMPROOF_MAX_PROBES", "4")
        monkeypatch.setenv("CLAIMPROOF_PROBE_TIMEOUT", "2.5")
        monkeypatch.setenv("BRAVE_API_KEY", "secret")
        monkeypatch.setenv("CLAIMPROOF_CACHE_ENABLED", "no")

        config = RuntimeConfig.from_env()

        assert config.verifier.max_probes == 4
        assert config.verifier.probe_timeout_s == 2.5
        assert config.search.api_key == "secret"
        assert config.cache.enabled is False

    def test_overlay_on_file_config(self, monkeypatch):
        base = RuntimeConfig.from_dict({"search": {"result_count": 3}, "log_level": "WARNING"})
        monkeypatch.setenv("CLAIMPROOF_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CLAIMPROOF_CACHE_PATH", "/tmp/cache.json")

        config = base.with_env_overrides()

        assert config.log_level == "DEBUG"
        assert config.cache.path == "/tmp/cache.json"
        assert config.search.result_count == 3
        assert base.log_level == "WARNING"

    def test_no_overrides_returns_same(self):
        base = RuntimeConfig()
        assert base.with_env_overrides() is base


def test_to_dict_omits_api_key():
    data = RuntimeConfig.from_dict({"search": {"api_key": "secret"}}).to_dict()

    assert "api_key" not in data["search"]
    assert "secret" not in str(data)
    assert data["verifier"]["max_probes"] == 3


def test_default_config_used_by_create_pipeline():
    from core.config.runtime import get_default_config, set_default_config
    from orchestrator.pipeline import create_pipeline

    previous = get_default_config()
    set_default_config(RuntimeConfig.from_dict({"verifier": {"max_probes": 7}}))
    try:
        assert create_pipeline().verifier.config.max_probes == 7
    finally:
        set_default_config(previous)
