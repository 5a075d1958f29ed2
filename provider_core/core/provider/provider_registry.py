"""Provider registry for storing and querying provider configurations."""

from provider_core.core.exceptions import UnsupportedProviderError
from provider_core.core.provider_config import ProviderConfig


class ProviderRegistry:
    """Central in-memory registry of provider configurations."""

    def __init__(self) -> None:
        self._configs: dict[str, ProviderConfig] = {}

    def register(self, config: ProviderConfig) -> None:
        self._configs[config.id] = config

    def get(self, provider_id: str) -> ProviderConfig | None:
        return self._configs.get(provider_id)

    def require(self, provider_id: str) -> ProviderConfig:
        """Return a provider configuration or raise UnsupportedProviderError."""
        config = self._configs.get(provider_id)
        if config is None:
            raise UnsupportedProviderError(f"Provider '{provider_id}' is not configured")
        return config

    def list_all(self) -> dict[str, ProviderConfig]:
        """Return a copy of all registered providers."""
        return self._configs.copy()

    def exists(self, provider_id: str) -> bool:
        return provider_id in self._configs

    def clear(self) -> None:
        """Clear all registered providers.

        This is primarily useful for testing.
        """
        self._configs.clear()
