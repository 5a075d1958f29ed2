"""Unit tests for the helpers shared by every adapter."""

import pytest

from provider_core.core.exceptions import ConfigurationError
from provider_core.core.knowledge import AugmentationResult, KnowledgeBase, Message
from provider_core.core.providers import BaseProvider
from provider_core.core.providers.types import (
    Assistant,
    AssistantSettings,
    CompletionsParams,
    CustomParameter,
    Model,
)


class StubProvider(BaseProvider):
    """Concrete adapter with no backend, for exercising shared helpers."""

    async def completions(self, params):
        await self.fake_completions(params, delay=0)

    async def translate(self, message, assistant, on_response=None):
        return message.content

    async def summaries(self, messages, assistant):
        return ""

    async def suggestions(self, messages, assistant):
        return []

    async def generate_text(self, prompt, content):
        return content

    async def check(self, model):
        raise NotImplementedError

    async def models(self):
        return []

    async def generate_image(self, params):
        return []

    async def get_embedding_dimensions(self, model):
        return 0


def _assistant(*custom_parameters, **settings):
    return Assistant(
        id="a1",
        model=Model(id="gpt-4o"),
        settings=AssistantSettings(custom_parameters=list(custom_parameters), **settings),
    )


@pytest.mark.unit
class TestBaseUrl:
    @pytest.mark.parametrize(
        ("api_host", "expected"),
        [
            ("http://x", "http://x/v1/"),
            ("http://x/", "http://x/"),
            ("https://api.example.com/v2/", "https://api.example.com/v2/"),
            ("http://localhost:11434", "http://localhost:11434/v1/"),
        ],
    )
    def test_normalization(self, make_provider_config, rotator, api_host, expected):
        provider = StubProvider(make_provider_config(api_host=api_host), rotator)
        assert provider.host == expected

    def test_normalization_is_idempotent(self, make_provider_config, rotator):
        once = StubProvider(make_provider_config(api_host="http://x"), rotator).host
        twice = StubProvider(make_provider_config(api_host=once), rotator).host
        assert once == twice == "http://x/v1/"


@pytest.mark.unit
class TestCredentials:
    def test_default_headers(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(api_key="sk-1"), rotator)
        assert provider.default_headers() == {"X-Api-Key": "sk-1"}

    def test_each_adapter_takes_next_key(self, make_provider_config, rotator):
        config = make_provider_config(api_key="k1,k2,k3")
        keys = [StubProvider(config, rotator).api_key for _ in range(4)]
        assert keys == ["k1", "k2", "k3", "k1"]

    def test_key_fixed_for_adapter_lifetime(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(api_key="k1,k2"), rotator)
        assert provider.api_key == "k1"
        assert provider.default_headers()["X-Api-Key"] == "k1"
        assert provider.default_headers()["X-Api-Key"] == "k1"


@pytest.mark.unit
class TestKeepAlive:
    def test_ollama_default(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(id="ollama", api_key=""), rotator)
        assert provider.keep_alive_time == "5m"

    def test_lmstudio_from_environment(self, make_provider_config, rotator, monkeypatch):
        monkeypatch.setenv("LMSTUDIO_KEEP_ALIVE_TIME", "12")
        provider = StubProvider(make_provider_config(id="lmstudio", api_key=""), rotator)
        assert provider.keep_alive_time == "12m"

    def test_read_at_call_time(self, make_provider_config, rotator, monkeypatch):
        provider = StubProvider(make_provider_config(id="ollama", api_key=""), rotator)
        monkeypatch.setenv("OLLAMA_KEEP_ALIVE_TIME", "30")
        assert provider.keep_alive_time == "30m"

    @pytest.mark.parametrize("provider_id", ["openai", "deepseek", "Ollama"])
    def test_other_providers_have_none(self, make_provider_config, rotator, provider_id):
        provider = StubProvider(make_provider_config(id=provider_id), rotator)
        assert provider.keep_alive_time is None


@pytest.mark.unit
class TestCustomParameters:
    def test_no_assistant_or_settings(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        assert provider.get_custom_parameters(None) == {}
        assert provider.get_custom_parameters(Assistant(id="a")) == {}

    def test_undefined_json_then_text_override(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        assistant = _assistant(
            CustomParameter(name="a", type="json", value="undefined"),
            CustomParameter(name="a", type="text", value="5"),
        )
        assert provider.get_custom_parameters(assistant) == {"a": "5"}

    def test_undefined_json_becomes_none(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        assistant = _assistant(CustomParameter(name="stop", type="json", value="undefined"))
        assert provider.get_custom_parameters(assistant) == {"stop": None}

    def test_json_decoded(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        assistant = _assistant(
            CustomParameter(name="stop", type="json", value='["\\n", "END"]'),
            CustomParameter(name="opts", type="json", value='{"a": 1}'),
        )
        assert provider.get_custom_parameters(assistant) == {"stop": ["\n", "END"], "opts": {"a": 1}}

    def test_invalid_json_kept_raw(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        assistant = _assistant(CustomParameter(name="x", type="json", value="{broken"))
        assert provider.get_custom_parameters(assistant) == {"x": "{broken"}

    def test_non_string_json_value_passes_through(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        assistant = _assistant(CustomParameter(name="x", type="json", value={"already": "parsed"}))
        assert provider.get_custom_parameters(assistant) == {"x": {"already": "parsed"}}

    def test_non_json_types_verbatim(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        assistant = _assistant(
            CustomParameter(name="n", type="number", value=3),
            CustomParameter(name="b", type="boolean", value=False),
            CustomParameter(name="s", type="string", value="[1]"),
        )
        assert provider.get_custom_parameters(assistant) == {"n": 3, "b": False, "s": "[1]"}

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_json_constants_kept_raw(self, make_provider_config, rotator, constant):
        provider = StubProvider(make_provider_config(), rotator)
        assistant = _assistant(CustomParameter(name="x", type="json", value=constant))
        assert provider.get_custom_parameters(assistant) == {"x": constant}

    def test_apply_removes_undefined_fields(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        assistant = _assistant(
            CustomParameter(name="temperature", type="json", value="undefined"),
            CustomParameter(name="stop", type="json", value="null"),
            CustomParameter(name="seed", type="number", value=1),
        )
        body = {"model": "m", "temperature": 0.7}

        provider.apply_custom_parameters(body, assistant)

        assert body == {"model": "m", "stop": None, "seed": 1}

    def test_apply_later_entry_restores_field(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        assistant = _assistant(
            CustomParameter(name="top_p", type="json", value="undefined"),
            CustomParameter(name="top_p", type="json", value="0.5"),
        )
        assert provider.apply_custom_parameters({"top_p": 1}, assistant) == {"top_p": 0.5}

    def test_blank_names_skipped(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        assistant = _assistant(
            CustomParameter(name="", type="string", value="x"),
            CustomParameter(name="   ", type="string", value="y"),
        )
        assert provider.get_custom_parameters(assistant) == {}


@pytest.mark.unit
class TestContract:
    def test_abstract_base_cannot_be_instantiated(self, make_provider_config, rotator):
        with pytest.raises(TypeError):
            BaseProvider(make_provider_config(), rotator)


@pytest.mark.unit
class TestResolveModel:
    def test_assistant_model_wins(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator, default_model=Model(id="fallback"))
        assert provider.resolve_model(Assistant(id="a", model=Model(id="gpt-4o"))) == "gpt-4o"

    def test_default_model(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator, default_model=Model(id="fallback"))
        assert provider.resolve_model() == "fallback"

    def test_no_model_raises(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        with pytest.raises(ConfigurationError, match="No model configured"):
            provider.resolve_model()


@pytest.mark.unit
@pytest.mark.asyncio
class TestAsyncHelpers:
    async def test_fake_completions(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        chunks = []

        await provider.completions(
            CompletionsParams(messages=[], assistant=Assistant(id="a"), on_chunk=chunks.append)
        )

        assert [chunk.text for chunk in chunks] == [f"{i}\n" for i in range(100)]
        assert all(chunk.usage.total_tokens == 0 for chunk in chunks)

    async def test_message_content_without_augmenter(self, make_provider_config, rotator):
        provider = StubProvider(make_provider_config(), rotator)
        message = Message(content="hi", knowledge_base_ids=["kb1"])
        assert await provider.get_message_content(message) == "hi"

    async def test_message_content_with_augmenter(
        self, make_provider_config, rotator, augmenter, knowledge_store, fake_retriever
    ):
        knowledge_store.add(KnowledgeBase(id="kb1", prompt="Q:{question} R:{references}"))
        fake_retriever.result = AugmentationResult(references_content="doc1", references_count=1)
        provider = StubProvider(make_provider_config(), rotator, augmenter=augmenter)

        content = await provider.get_message_content(Message(content="hi", knowledge_base_ids=["kb1"]))
        assert content == "Q:hi R:doc1"

    async def test_async_context_manager(self, make_provider_config, rotator):
        async with StubProvider(make_provider_config(), rotator) as provider:
            assert provider.host == "https://api.openai.com/v1/"
