"""Tests for client configuration."""
from __future__ import annotations

import pytest

from grok_client.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from grok_client.errors import ConfigurationError


class TestFromEnv:
    def test_xai_key(self) -> None:
        config = ClientConfig.from_env({"XAI_API_KEY": "k1"})
        assert config == ClientConfig(api_key="k1", base_url=DEFAULT_BASE_URL, timeout=DEFAULT_TIMEOUT)

    def test_grok_key_fallback(self) -> None:
        assert ClientConfig.from_env({"GROK_API_KEY": "k2"}).api_key == "k2"

    def test_xai_key_preferred(self) -> None:
        assert ClientConfig.from_env({"XAI_API_KEY": "a", "GROK_API_KEY": "b"}).api_key == "a"

    def test_empty_key_is_missing(self) -> None:
        with pytest.raises(ConfigurationError):
            ClientConfig.from_env({"XAI_API_KEY": ""})

    def test_missing_key(self) -> None:
        with pytest.raises(ConfigurationError):
            ClientConfig.from_env({})

    def test_overrides(self) -> None:
        config = ClientConfig.from_env({
            "XAI_API_KEY": "k",
            "XAI_BASE_URL": "http://localhost:8080/v1",
            "XAI_TIMEOUT": "30",
        })
        assert config.base_url == "http://localhost:8080/v1"
        assert config.timeout == 30.0

    def test_bad_timeout(self) -> None:
        with pytest.raises(ConfigurationError):
            ClientConfig.from_env({"XAI_API_KEY": "k", "XAI_TIMEOUT": "soon"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("XAI_API_KEY", raising=False)
        monkeypatch.setenv("GROK_API_KEY", "from-env")
        assert ClientConfig.from_env().api_key == "from-env"


def test_defaults() -> None:
    assert DEFAULT_BASE_URL == "https://api.x.ai/v1"
    assert DEFAULT_TIMEOUT == 3600.0
