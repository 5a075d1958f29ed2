"""Helpers shared by the HTTP adapters."""

import json
import logging
from collections.abc import AsyncGenerator
from typing import Any

import httpx

from provider_core.core.config import accessors
from provider_core.core.exceptions import ProviderHTTPError
from provider_core.core.knowledge.models import Message
from provider_core.core.providers.types import Assistant

logger = logging.getLogger(__name__)

SUMMARIZE_PROMPT = (
    "You are an assistant skilled in conversation. Summarize the user's conversation "
    "into a title of no more than 10 words, in the language the user writes in. "
    "Do not use punctuation or special symbols, and reply with the title only."
)


def filter_context_messages(messages: list[Message], assistant: Assistant | None) -> list[Message]:
    """Keep the trailing messages that fit the assistant's context count."""
    context_count = None
    if assistant is not None and assistant.settings is not None:
        context_count = assistant.settings.context_count
    if not context_count:
        context_count = accessors.default_context_count()
    return messages[-context_count:]


async def raise_for_status(response: httpx.Response) -> None:
    """Convert HTTP error responses to ProviderHTTPError.

    Works for streamed responses too: the body is read before parsing.
    """
    if not response.is_error:
        return

    await response.aread()
    try:
        detail: Any = response.json() if response.text else response.reason_phrase
    except json.JSONDecodeError:
        detail = response.text
    logger.debug("Backend error %s: %s", response.status_code, detail)
    raise ProviderHTTPError(status_code=response.status_code, detail=detail)


async def iter_sse_data(response: httpx.Response) -> AsyncGenerator[dict[str, Any], None]:
    """Yield the decoded JSON payload of every ``data:`` line of an SSE stream."""
    async for line in response.aiter_lines():
        if not line.startswith("data:"):
            continue
        data = line[len("data:") :].strip()
        if not data:
            continue
        if data == "[DONE]":
            break
        try:
            yield json.loads(data)
        except json.JSONDecodeError:
            logger.warning("Skipping malformed SSE payload: %s", data[:200])
