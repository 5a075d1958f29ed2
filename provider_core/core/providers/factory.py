"""Maps provider configurations to adapter classes."""

import logging

from provider_core.core.knowledge.augmenter import ContextAugmenter
from provider_core.core.provider_config import ProviderConfig
from provider_core.core.providers.anthropic_provider import AnthropicProvider
from provider_core.core.providers.base import BaseProvider
from provider_core.core.providers.openai_provider import OpenAICompatibleProvider
from provider_core.core.providers.types import Model
from provider_core.core.rotation.credential_rotator import CredentialRotator

logger = logging.getLogger(__name__)


class ProviderFactory:
    """Creates adapters by ``ProviderConfig.type``.

    Unknown types use the OpenAI-compatible adapter, which is what most
    third-party backends speak.
    """

    ADAPTERS: dict[str, type[BaseProvider]] = {
        "openai": OpenAICompatibleProvider,
        "anthropic": AnthropicProvider,
    }

    @classmethod
    def adapter_class(cls, provider_type: str) -> type[BaseProvider]:
        adapter = cls.ADAPTERS.get(provider_type)
        if adapter is None:
            logger.debug("No adapter for type '%s'; using OpenAI-compatible", provider_type)
            return OpenAICompatibleProvider
        return adapter

    @classmethod
    def create(
        cls,
        config: ProviderConfig,
        *,
        rotator: CredentialRotator,
        augmenter: ContextAugmenter | None = None,
        default_model: Model | None = None,
    ) -> BaseProvider:
        adapter = cls.adapter_class(config.type)
        return adapter(config, rotator, augmenter=augmenter, default_model=default_model)
