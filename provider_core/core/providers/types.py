"""Value types exchanged across the provider contract."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from provider_core.core.knowledge.models import Message


@dataclass
class ChunkUsage:
    completion_tokens: int = 0
    prompt_tokens: int = 0
    total_tokens: int = 0


@dataclass
class Chunk:
    """One incremental piece of a streamed completion."""

    text: str
    usage: ChunkUsage = field(default_factory=ChunkUsage)


OnChunk = Callable[[Chunk], None]
OnFilterMessages = Callable[[list[Message]], None]


@dataclass
class CustomParameter:
    """A named request parameter attached to an assistant.

    ``type`` is a tag such as "string", "number", "boolean" or "json";
    only "json" changes how ``value`` is interpreted.
    """

    name: str
    type: str
    value: Any


@dataclass
class AssistantSettings:
    temperature: float | None = None
    top_p: float | None = None
    max_tokens: int | None = None
    context_count: int | None = None
    stream_output: bool = True
    custom_parameters: list[CustomParameter] = field(default_factory=list)


@dataclass
class Model:
    id: str
    provider: str = ""
    name: str = ""
    group: str = ""


@dataclass
class Assistant:
    id: str
    name: str = ""
    prompt: str = ""
    model: Model | None = None
    settings: AssistantSettings | None = None


@dataclass
class CompletionsParams:
    messages: list[Message]
    assistant: Assistant
    on_chunk: OnChunk
    on_filter_messages: OnFilterMessages | None = None


@dataclass
class Suggestion:
    content: str


@dataclass
class GenerateImageParams:
    model: str
    prompt: str
    negative_prompt: str = ""
    image_size: str = "1024x1024"
    batch_size: int = 1
    seed: str | None = None
    num_inference_steps: int | None = None
    guidance_scale: float | None = None
    prompt_enhancement: bool = False


@dataclass
class ModelInfo:
    """A model as listed by a backend."""

    id: str
    owned_by: str = ""
    created: int | None = None


@dataclass
class CheckResult:
    valid: bool
    error: Exception | None = None
