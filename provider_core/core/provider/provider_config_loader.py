"""Provider configuration loading from environment variables."""

import hashlib
import logging
import os
from dataclasses import dataclass

from provider_core.core.provider.provider_registry import ProviderRegistry
from provider_core.core.provider_config import ProviderConfig

DEFAULT_API_HOSTS = {
    "openai": "https://api.openai.com",
    "anthropic": "https://api.anthropic.com",
    "ollama": "http://localhost:11434",
    "lmstudio": "http://localhost:1234",
}

DEFAULT_API_TYPES = {
    "anthropic": "anthropic",
}

SYSTEM_PROVIDERS = frozenset(DEFAULT_API_HOSTS)


@dataclass
class ProviderLoadResult:
    """Result of loading a provider configuration."""

    name: str
    status: str  # "success", "partial"
    message: str | None = None
    api_key_hash: str | None = None
    api_host: str | None = None


def get_api_key_hash(api_key: str) -> str:
    """Return first 8 chars of sha256 hash"""
    return hashlib.sha256(api_key.encode()).hexdigest()[:8]


class ProviderConfigLoader:
    """Loads provider configurations from environment variables.

    Every ``<ID>_API_KEY`` variable declares a provider. Optional companions:
    ``<ID>_API_HOST``, ``<ID>_API_TYPE`` and ``<ID>_NAME``.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._load_results: list[ProviderLoadResult] = []

    def scan_providers(self) -> list[str]:
        """Return the ids (lowercase) of every provider with an API key variable."""
        return sorted(
            env_key[: -len("_API_KEY")].lower()
            for env_key in os.environ
            if env_key.endswith("_API_KEY") and len(env_key) > len("_API_KEY")
        )

    def load_provider(self, provider_id: str) -> ProviderConfig | None:
        """Load a single provider configuration.

        Returns:
            ProviderConfig if loaded, None when the key or the host is missing.
        """
        prefix = provider_id.upper()
        api_key = os.environ.get(f"{prefix}_API_KEY")
        if api_key is None:
            return None

        api_host = os.environ.get(f"{prefix}_API_HOST") or DEFAULT_API_HOSTS.get(provider_id)
        if not api_host:
            self._load_results.append(
                ProviderLoadResult(
                    name=provider_id,
                    status="partial",
                    message=f"Missing {prefix}_API_HOST",
                    api_key_hash=get_api_key_hash(api_key),
                )
            )
            return None

        api_type = os.environ.get(f"{prefix}_API_TYPE") or DEFAULT_API_TYPES.get(
            provider_id, "openai"
        )
        if api_type not in ("openai", "anthropic"):
            self._logger.warning(
                "Unknown %s_API_TYPE '%s'; using 'openai'", prefix, api_type
            )
            api_type = "openai"

        config = ProviderConfig(
            id=provider_id,
            name=os.environ.get(f"{prefix}_NAME", provider_id),
            api_host=api_host,
            api_key=api_key,
            type=api_type,
            is_system=provider_id in SYSTEM_PROVIDERS,
        )
        self._load_results.append(
            ProviderLoadResult(
                name=provider_id,
                status="success",
                api_key_hash=get_api_key_hash(api_key),
                api_host=api_host,
            )
        )
        return config

    def load_into(self, registry: ProviderRegistry) -> ProviderRegistry:
        """Load every discovered provider into registry."""
        self._load_results = []
        for provider_id in self.scan_providers():
            config = self.load_provider(provider_id)
            if config is not None:
                registry.register(config)
        return registry

    def get_load_results(self) -> list[ProviderLoadResult]:
        return self._load_results.copy()
