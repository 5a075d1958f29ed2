"""Provider discovery.

- ProviderRegistry: Stores and retrieves provider configurations
- ProviderConfigLoader: Loads provider configs from environment variables
"""

from provider_core.core.provider.provider_config_loader import (
    ProviderConfigLoader,
    ProviderLoadResult,
    get_api_key_hash,
)
from provider_core.core.provider.provider_registry import ProviderRegistry

__all__ = [
    "ProviderRegistry",
    "ProviderConfigLoader",
    "ProviderLoadResult",
    "get_api_key_hash",
]
