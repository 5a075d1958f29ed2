"""Adapter for OpenAI-compatible chat backends.

Covers OpenAI itself and the many servers that mimic its API (Ollama,
LM Studio, OpenRouter, DeepSeek, ...).
"""

import logging
import time
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


def _usage_from(data: dict[str, Any] | None) -> ChunkUsage:
    data = data or {}
    return ChunkUsage(
        completion_tokens=data.get("completion_tokens", 0) or 0,
        prompt_tokens=data.get("prompt_tokens", 0) or 0,
        total_tokens=data.get("total_tokens", 0) or 0,
    )


def _message_text(data: dict[str, Any]) -> str:
    choices = data.get("choices") or []
    if not choices:
        return ""
    return (choices[0].get("message") or {}).get("content") or ""


class OpenAICompatibleProvider(BaseProvider):
    """Client for OpenAI-compatible APIs."""

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
        headers = {"content-type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        headers.update(self.default_headers())
        return headers

    async def close(self) -> None:
        await self.client.aclose()

    async def _post_json(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        start_time = time.time()
        response = await self.client.post(f"{self.host}{path}", json=body)
        await raise_for_status(response)
        logger.debug(
            "📥 %s %s | Duration: %.0fms",
            self.provider.id,
            path,
            (time.time() - start_time) * 1000,
        )
        return response.json()

    async def _build_messages(
        self, system_prompt: str, messages: list[Message]
    ) -> list[dict[str, str]]:
        api_messages = []
        if system_prompt:
            api_messages.append({"role": "system", "content": system_prompt})
        for message in messages:
            api_messages.append(
                {"role": message.role, "content": await self.get_message_content(message)}
            )
        return api_messages

    def _sampling_fields(self, assistant: Assistant) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        settings = assistant.settings
        if settings is not None:
            if settings.temperature is not None:
                fields["temperature"] = settings.temperature
            if settings.top_p is not None:
                fields["top_p"] = settings.top_p
            if settings.max_tokens is not None:
                fields["max_tokens"] = settings.max_tokens
        if self.keep_alive_time is not None:
            fields["keep_alive"] = self.keep_alive_time
        return fields

    async def completions(self, params: CompletionsParams) -> None:
        assistant = params.assistant
        filtered = filter_context_messages(params.messages, assistant)
        if params.on_filter_messages is not None:
            params.on_filter_messages(filtered)

        stream = assistant.settings.stream_output if assistant.settings else True
        body: dict[str, Any] = {
            "model": self.resolve_model(assistant),
            "messages": await self._build_messages(assistant.prompt, filtered),
            "stream": stream,
            **self._sampling_fields(assistant),
        }
        self.apply_custom_parameters(body, assistant)

        if not stream:
            data = await self._post_json("chat/completions", body)
            params.on_chunk(Chunk(text=_message_text(data), usage=_usage_from(data.get("usage"))))
            return

        body["stream_options"] = {"include_usage": True}
        async with self.client.stream(
            "POST", f"{self.host}chat/completions", json=body
        ) as response:
            await raise_for_status(response)
            async for data in iter_sse_data(response):
                for choice in data.get("choices") or []:
                    text = (choice.get("delta") or {}).get("content")
                    if text:
                        params.on_chunk(Chunk(text=text))
                if data.get("usage"):
                    params.on_chunk(Chunk(text="", usage=_usage_from(data["usage"])))

    async def translate(self, message: Message, assistant: Assistant, on_response=None) -> str:
        body: dict[str, Any] = {
            "model": self.resolve_model(assistant),
            "messages": [
                {"role": "system", "content": assistant.prompt},
                {"role": "user", "content": message.content},
            ],
            "stream": on_response is not None,
        }

        if on_response is None:
            return _message_text(await self._post_json("chat/completions", body))

        text = ""
        async with self.client.stream(
            "POST", f"{self.host}chat/completions", json=body
        ) as response:
            await raise_for_status(response)
            async for data in iter_sse_data(response):
                for choice in data.get("choices") or []:
                    delta = (choice.get("delta") or {}).get("content")
                    if delta:
                        text += delta
                        on_response(text)
        return text

    async def summaries(self, messages: list[Message], assistant: Assistant) -> str:
        conversation = "\n".join(
            f"{message.role}: {message.content}"
            for message in filter_context_messages(messages, assistant)
        )
        body = {
            "model": self.resolve_model(assistant),
            "messages": [
                {"role": "system", "content": SUMMARIZE_PROMPT},
                {"role": "user", "content": conversation},
            ],
            "stream": False,
        }
        data = await self._post_json("chat/completions", body)
        return _message_text(data).strip()

    async def suggestions(self, messages: list[Message], assistant: Assistant) -> list[Suggestion]:
        body = {
            "model": self.resolve_model(assistant),
            "messages": [
                {"role": message.role, "content": message.content}
                for message in filter_context_messages(messages, assistant)
            ],
            "config": {
                "assistant_id": assistant.id,
                "assistant_name": assistant.name,
                "assistant_prompt": assistant.prompt,
            },
        }
        data = await self._post_json("advice_questions", body)
        return [Suggestion(content=q) for q in data.get("questions") or [] if q]

    async def generate_text(self, prompt: str, content: str) -> str:
        body = {
            "model": self.resolve_model(),
            "messages": [
                {"role": "system", "content": prompt},
                {"role": "user", "content": content},
            ],
            "stream": False,
        }
        return _message_text(await self._post_json("chat/completions", body))

    async def check(self, model: Model) -> CheckResult:
        body = {
            "model": model.id,
            "messages": [{"role": "user", "content": "hi"}],
            "stream": False,
        }
        try:
            data = await self._post_json("chat/completions", body)
        except (ProviderHTTPError, httpx.HTTPError) as e:
            logger.warning("Check failed for %s/%s: %s", self.provider.id, model.id, e)
            return CheckResult(valid=False, error=e)
        return CheckResult(valid=bool(data.get("choices")))

    async def models(self) -> list[ModelInfo]:
        response = await self.client.get(f"{self.host}models")
        await raise_for_status(response)
        return [
            ModelInfo(
                id=item["id"],
                owned_by=item.get("owned_by", ""),
                created=item.get("created"),
            )
            for item in response.json().get("data") or []
            if item.get("id")
        ]

    async def generate_image(self, params: GenerateImageParams) -> list[str]:
        body = {
            "model": params.model,
            "prompt": params.prompt,
            "negative_prompt": params.negative_prompt or None,
            "size": params.image_size,
            "n": params.batch_size,
            "seed": params.seed,
            "num_inference_steps": params.num_inference_steps,
            "guidance_scale": params.guidance_scale,
            "prompt_enhancement": params.prompt_enhancement or None,
        }
        data = await self._post_json(
            "images/generations", {k: v for k, v in body.items() if v is not None}
        )

        images = []
        for item in data.get("data") or []:
            if item.get("url"):
                images.append(item["url"])
            elif item.get("b64_json"):
                images.append(f"data:image/png;base64,{item['b64_json']}")
        return images

    async def get_embedding_dimensions(self, model: Model) -> int:
        data = await self._post_json("embeddings", {"model": model.id, "input": "hi"})
        return len(data["data"][0]["embedding"])
