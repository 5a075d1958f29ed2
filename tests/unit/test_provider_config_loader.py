"""Unit tests for environment-based provider discovery."""

import os

import pytest

from provider_core.core.exceptions import UnsupportedProviderError
from provider_core.core.provider import ProviderConfigLoader, ProviderRegistry, get_api_key_hash


@pytest.fixture
def clean_provider_env(monkeypatch):
    for key in list(os.environ):
        if key.endswith(("_API_KEY", "_API_HOST", "_API_TYPE")):
            monkeypatch.delenv(key, raising=False)


@pytest.mark.unit
@pytest.mark.usefixtures("clean_provider_env")
class TestProviderConfigLoader:
    def test_scan_providers(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-1")
        monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-2")

        assert ProviderConfigLoader().scan_providers() == ["deepseek", "openai"]

    def test_system_provider_uses_default_host(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-1,sk-2")

        config = ProviderConfigLoader().load_provider("openai")

        assert config.api_host == "https://api.openai.com"
        assert config.type == "openai"
        assert config.is_system is True
        assert config.get_api_keys() == ["sk-1", "sk-2"]

    def test_anthropic_default_type(self, monkeypatch):
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")
        assert ProviderConfigLoader().load_provider("anthropic").type == "anthropic"

    def test_empty_key_still_declares_provider(self, monkeypatch):
        monkeypatch.setenv("OLLAMA_API_KEY", "")
        config = ProviderConfigLoader().load_provider("ollama")
        assert config.api_host == "http://localhost:11434"
        assert config.get_api_keys() == [""]

    def test_custom_provider_requires_host(self, monkeypatch):
        monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-2")
        loader = ProviderConfigLoader()

        assert loader.load_provider("deepseek") is None
        result = loader.get_load_results()[0]
        assert result.status == "partial"
        assert result.message == "Missing DEEPSEEK_API_HOST"

    def test_custom_provider(self, monkeypatch):
        monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-2")
        monkeypatch.setenv("DEEPSEEK_API_HOST", "https://api.deepseek.com/")
        monkeypatch.setenv("DEEPSEEK_NAME", "DeepSeek")

        config = ProviderConfigLoader().load_provider("deepseek")

        assert config.name == "DeepSeek"
        assert config.api_host == "https://api.deepseek.com/"
        assert config.is_system is False

    def test_unknown_type_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-1")
        monkeypatch.setenv("OPENAI_API_TYPE", "soap")

        assert ProviderConfigLoader().load_provider("openai").type == "openai"
        assert "Unknown OPENAI_API_TYPE" in caplog.text

    def test_missing_key_returns_none(self):
        assert ProviderConfigLoader().load_provider("openai") is None

    def test_load_into_registry(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-1")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")
        monkeypatch.setenv("ORPHAN_API_KEY", "x")

        loader = ProviderConfigLoader()
        registry = loader.load_into(ProviderRegistry())

        assert sorted(registry.list_all()) == ["anthropic", "openai"]
        assert {r.name: r.status for r in loader.get_load_results()} == {
            "anthropic": "success",
            "openai": "success",
            "orphan": "partial",
        }

    def test_load_result_hashes_key(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-1")
        loader = ProviderConfigLoader()
        loader.load_provider("openai")
        assert loader.get_load_results()[0].api_key_hash == get_api_key_hash("sk-1")


@pytest.mark.unit
class TestProviderRegistry:
    def test_require(self, make_provider_config):
        registry = ProviderRegistry()
        config = make_provider_config()
        registry.register(config)

        assert registry.require("openai") is config
        with pytest.raises(UnsupportedProviderError, match="'missing' is not configured"):
            registry.require("missing")

    def test_exists_and_clear(self, make_provider_config):
        registry = ProviderRegistry()
        registry.register(make_provider_config())
        assert registry.exists("openai")

        registry.clear()
        assert not registry.exists("openai")
        assert registry.get("openai") is None


@pytest.mark.unit
def test_api_key_hash_is_short_and_stable():
    assert get_api_key_hash("sk-1") == get_api_key_hash("sk-1")
    assert len(get_api_key_hash("sk-1")) == 8
