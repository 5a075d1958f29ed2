"""Adapter for the Anthropic Messages API."""

import logging
from typing import Any

import httpx

from provider_core.core.config import accessors
from provider_core.core.exceptions import ProviderHTTPError
from provider_core.core.knowledge.augmenter import ContextAugmenter
from provider_core.core.knowledge.models import Message
from provider_core.core.provider_config import ProviderConfig
from provider_core.core.providers.base import BaseProvider
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
from provider_core.core.providers.utils import (
    SUMMARIZE_PROMPT,
    filter_context_messages,
    iter_sse_data,
    raise_for_status,
)
from provider_core.core.rotation.credential_rotator import CredentialRotator

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"
DEFAULT_MAX_TOKENS = 4096


def _content_text(data: dict[str, Any]) -> str:
    return "".join(
        block.get("text", "") for block in data.get("content") or [] if block.get("type") == "text"
    )


class AnthropicProvider(BaseProvider):
    """Client for Anthropic-compatible APIs.

    The Messages API has no image generation, embeddings or suggestion
    endpoint; those operations return empty results.
    """

    def __init__(
        self,
        provider: ProviderConfig,
        rotator: CredentialRotator,
        augmenter: ContextAugmenter | None = None,
        default_model: Model | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(provider, rotator, augmenter, default_model)
        self.client = client or httpx.AsyncClient(
            timeout=accessors.request_timeout(),
            headers=self.request_headers(),
        )

    def request_headers(self) -> dict[str, str]:
        headers = {
            "content-type": "application/json",
            "anthropic-version": ANTHROPIC_VERSION,
        }
        headers.update(self.default_headers())
        return headers

    async def close(self) -> None:
        await self.client.aclose()

    async def _create_message(self, body: dict[str, Any]) -> dict[str, Any]:
        response = await self.client.post(f"{self.host}messages", json=body)
        await raise_for_status(response)
        return response.json()

    async def _build_messages(self, messages: list[Message]) -> list[dict[str, str]]:
        # System messages travel in the top-level "system" field
        return [
            {"role": message.role, "content": await self.get_message_content(message)}
            for message in messages
            if message.role in ("user", "assistant")
        ]

    def _max_tokens(self, assistant: Assistant | None) -> int:
        if assistant is not None and assistant.settings and assistant.settings.max_tokens:
            return assistant.settings.max_tokens
        return DEFAULT_MAX_TOKENS

    async def completions(self, params: CompletionsParams) -> None:
        assistant = params.assistant
        filtered = filter_context_messages(params.messages, assistant)
        if params.on_filter_messages is not None:
            params.on_filter_messages(filtered)

        body: dict[str, Any] = {
            "model": self.resolve_model(assistant),
            "messages": await self._build_messages(filtered),
            "max_tokens": self._max_tokens(assistant),
        }
        if assistant.prompt:
            body["system"] = assistant.prompt
        settings = assistant.settings
        if settings is not None:
            if settings.temperature is not None:
                body["temperature"] = settings.temperature
            if settings.top_p is not None:
                body["top_p"] = settings.top_p
        self.apply_custom_parameters(body, assistant)

        if settings is not None and not settings.stream_output:
            data = await self._create_message(body)
            usage = data.get("usage") or {}
            input_tokens = usage.get("input_tokens", 0)
            output_tokens = usage.get("output_tokens", 0)
            params.on_chunk(
                Chunk(
                    text=_content_text(data),
                    usage=ChunkUsage(
                        completion_tokens=output_tokens,
                        prompt_tokens=input_tokens,
                        total_tokens=input_tokens + output_tokens,
                    ),
                )
            )
            return

        body["stream"] = True
        input_tokens = 0
        output_tokens = 0
        async with self.client.stream("POST", f"{self.host}messages", json=body) as response:
            await raise_for_status(response)
            async for event in iter_sse_data(response):
                event_type = event.get("type")
                if event_type == "message_start":
                    usage = (event.get("message") or {}).get("usage") or {}
                    input_tokens = usage.get("input_tokens", 0)
                elif event_type == "content_block_delta":
                    delta = event.get("delta") or {}
                    if delta.get("type") == "text_delta" and delta.get("text"):
                        params.on_chunk(Chunk(text=delta["text"]))
                elif event_type == "message_delta":
                    output_tokens = (event.get("usage") or {}).get("output_tokens", output_tokens)
                elif event_type == "error":
                    error = event.get("error") or {}
                    raise ProviderHTTPError(status_code=500, detail=error)

        params.on_chunk(
            Chunk(
                text="",
                usage=ChunkUsage(
                    completion_tokens=output_tokens,
                    prompt_tokens=input_tokens,
                    total_tokens=input_tokens + output_tokens,
                ),
            )
        )

    async def translate(self, message: Message, assistant: Assistant, on_response=None) -> str:
        body: dict[str, Any] = {
            "model": self.resolve_model(assistant),
            "messages": [{"role": "user", "content": message.content}],
            "max_tokens": self._max_tokens(assistant),
        }
        if assistant.prompt:
            body["system"] = assistant.prompt

        if on_response is None:
            return _content_text(await self._create_message(body))

        body["stream"] = True
        text = ""
        async with self.client.stream("POST", f"{self.host}messages", json=body) as response:
            await raise_for_status(response)
            async for event in iter_sse_data(response):
                delta = event.get("delta") or {}
                if event.get("type") == "content_block_delta" and delta.get("text"):
                    text += delta["text"]
                    on_response(text)
        return text

    async def summaries(self, messages: list[Message], assistant: Assistant) -> str:
        conversation = "\n".join(
            f"{message.role}: {message.content}"
            for message in filter_context_messages(messages, assistant)
        )
        data = await self._create_message(
            {
                "model": self.resolve_model(assistant),
                "system": SUMMARIZE_PROMPT,
                "messages": [{"role": "user", "content": conversation}],
                "max_tokens": DEFAULT_MAX_TOKENS,
            }
        )
        return _content_text(data).strip()

    async def suggestions(self, messages: list[Message], assistant: Assistant) -> list[Suggestion]:
        return []

    async def generate_text(self, prompt: str, content: str) -> str:
        data = await self._create_message(
            {
                "model": self.resolve_model(),
                "system": prompt,
                "messages": [{"role": "user", "content": content}],
                "max_tokens": DEFAULT_MAX_TOKENS,
            }
        )
        return _content_text(data)

    async def check(self, model: Model) -> CheckResult:
        body = {
            "model": model.id,
            "messages": [{"role": "user", "content": "hi"}],
            "max_tokens": 100,
        }
        try:
            data = await self._create_message(body)
        except (ProviderHTTPError, httpx.HTTPError) as e:
            logger.warning("Check failed for %s/%s: %s", self.provider.id, model.id, e)
            return CheckResult(valid=False, error=e)
        return CheckResult(valid=bool(data.get("content")))

    async def models(self) -> list[ModelInfo]:
        response = await self.client.get(f"{self.host}models")
        await raise_for_status(response)
        return [
            ModelInfo(id=item["id"], owned_by="anthropic")
            for item in response.json().get("data") or []
            if item.get("id")
        ]

    async def generate_image(self, params: GenerateImageParams) -> list[str]:
        return []

    async def get_embedding_dimensions(self, model: Model) -> int:
        return 0
