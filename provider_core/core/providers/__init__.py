"""Provider contract and backend adapters.

- BaseProvider: abstract operation set plus shared helpers
- OpenAICompatibleProvider / AnthropicProvider: concrete adapters
- ProviderFactory: picks the adapter for a ProviderConfig
"""

from provider_core.core.providers.anthropic_provider import AnthropicProvider
from provider_core.core.providers.base import BaseProvider
from provider_core.core.providers.factory import ProviderFactory
from provider_core.core.providers.openai_provider import OpenAICompatibleProvider
from provider_core.core.providers.types import (
    Assistant,
    AssistantSettings,
    CheckResult,
    Chunk,
    ChunkUsage,
    CompletionsParams,
    CustomParameter,
    GenerateImageParams,
    Model,
    ModelInfo,
    Suggestion,
)

__all__ = [
    "BaseProvider",
    "OpenAICompatibleProvider",
    "AnthropicProvider",
    "ProviderFactory",
    "Assistant",
    "AssistantSettings",
    "CheckResult",
    "Chunk",
    "ChunkUsage",
    "CompletionsParams",
    "CustomParameter",
    "GenerateImageParams",
    "Model",
    "ModelInfo",
    "Suggestion",
]
