"""The provider contract shared by every backend adapter.

An adapter is bound to one ProviderConfig. At construction it normalizes
the configured host into a base URL and resolves one credential through
the CredentialRotator; both stay fixed for the adapter's lifetime.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from provider_core.core.config import accessors
from provider_core.core.exceptions import ConfigurationError
from provider_core.core.knowledge.augmenter import ContextAugmenter
from provider_core.core.knowledge.models import Message
from provider_core.core.provider_config import ProviderConfig
from provider_core.core.providers.types import (
    Assistant,
    CheckResult,
    Chunk,
    ChunkUsage,
    CompletionsParams,
    GenerateImageParams,
    Model,
    ModelInfo,
    Suggestion,
)
from provider_core.core.rotation.credential_rotator import CredentialRotator

logger = logging.getLogger(__name__)

API_VERSION_PATH = "/v1/"
API_KEY_HEADER = "X-Api-Key"
FAKE_COMPLETION_CHUNKS = 100


class BaseProvider(ABC):
    """Abstract base for backend adapters.

    Each concrete adapter implements the full capability set itself;
    this class only carries the helpers every backend shares.
    """

    def __init__(
        self,
        provider: ProviderConfig,
        rotator: CredentialRotator,
        augmenter: ContextAugmenter | None = None,
        default_model: Model | None = None,
    ) -> None:
        self.provider = provider
        self.rotator = rotator
        self.augmenter = augmenter
        self.default_model = default_model
        self.host = self.get_base_url()
        self.api_key = self.get_api_key()

    @abstractmethod
    async def completions(self, params: CompletionsParams) -> None:
        """Stream an assistant reply through ``params.on_chunk``."""

    @abstractmethod
    async def translate(self, message: Message, assistant: Assistant, on_response=None) -> str:
        """Translate a message with the assistant's prompt.

        When ``on_response`` is given it receives the accumulated text after
        every streamed piece.
        """

    @abstractmethod
    async def summaries(self, messages: list[Message], assistant: Assistant) -> str:
        """Return a short title summarizing a conversation."""

    @abstractmethod
    async def suggestions(self, messages: list[Message], assistant: Assistant) -> list[Suggestion]:
        """Return follow-up questions for a conversation."""

    @abstractmethod
    async def generate_text(self, prompt: str, content: str) -> str:
        """Run a one-shot completion with a system prompt."""

    @abstractmethod
    async def check(self, model: Model) -> CheckResult:
        """Check that the credential and model work; never raises for backend errors."""

    @abstractmethod
    async def models(self) -> list[ModelInfo]:
        """List the models the backend exposes."""

    @abstractmethod
    async def generate_image(self, params: GenerateImageParams) -> list[str]:
        """Generate images and return their URLs (or data URIs)."""

    @abstractmethod
    async def get_embedding_dimensions(self, model: Model) -> int:
        """Return the vector size produced by an embedding model."""

    async def close(self) -> None:
        """Release network resources held by the adapter."""

    async def __aenter__(self) -> "BaseProvider":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def get_base_url(self) -> str:
        host = self.provider.api_host
        return host if host.endswith("/") else f"{host}{API_VERSION_PATH}"

    def get_api_key(self) -> str:
        return self.rotator.select_credential(self.provider)

    def default_headers(self) -> dict[str, str]:
        return {API_KEY_HEADER: self.api_key}

    def resolve_model(self, assistant: Assistant | None = None) -> str:
        """Return the assistant's model id, falling back to the adapter default."""
        if assistant is not None and assistant.model is not None:
            return assistant.model.id
        if self.default_model is not None:
            return self.default_model.id
        raise ConfigurationError(f"No model configured for provider '{self.provider.id}'")

    @property
    def keep_alive_time(self) -> str | None:
        """Idle time a local inference server keeps the model loaded.

        Only the ``ollama`` and ``lmstudio`` providers have a setting;
        every other provider returns None.
        """
        if self.provider.id == "ollama":
            return f"{accessors.ollama_keep_alive_time()}m"
        if self.provider.id == "lmstudio":
            return f"{accessors.lmstudio_keep_alive_time()}m"
        return None

    async def fake_completions(self, params: CompletionsParams, delay: float = 0.01) -> None:
        """Emit synthetic chunks without calling a backend."""
        for i in range(FAKE_COMPLETION_CHUNKS):
            await asyncio.sleep(delay)
            params.on_chunk(Chunk(text=f"{i}\n", usage=ChunkUsage()))

    async def get_message_content(self, message: Message) -> str:
        if self.augmenter is None:
            return message.content
        return await self.augmenter.build_effective_content(message)

    def get_custom_parameters(self, assistant: Assistant | None) -> dict[str, Any]:
        """Fold an assistant's custom parameters into request fields.

        Blank names are skipped and later entries win. For "json" parameters
        the literal "undefined" becomes None, valid JSON is decoded and
        anything else is kept as the raw string.
        """
        return {
            name: None if value is _UNDEFINED else value
            for name, value in _fold_custom_parameters(assistant)
        }

    def apply_custom_parameters(
        self, body: dict[str, Any], assistant: Assistant | None
    ) -> dict[str, Any]:
        """Merge an assistant's custom parameters into a request body in place.

        A "json" parameter set to "undefined" removes the field from the body,
        including a sampling field the adapter filled in itself.
        """
        for name, value in _fold_custom_parameters(assistant):
            if value is _UNDEFINED:
                body.pop(name, None)
            else:
                body[name] = value
        return body


_UNDEFINED = object()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _coerce_json_value(value: Any) -> Any:
    if value == "undefined":
        return _UNDEFINED
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except ValueError:
        return value


def _fold_custom_parameters(assistant: Assistant | None) -> Iterator[tuple[str, Any]]:
    if assistant is None or assistant.settings is None:
        return
    for param in assistant.settings.custom_parameters:
        if not param.name or not param.name.strip():
            continue
        if param.type == "json":
            yield param.name, _coerce_json_value(param.value)
        else:
            yield param.name, param.value
