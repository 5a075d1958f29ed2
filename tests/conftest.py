"""Shared pytest configuration and fixtures for provider-core tests."""

import pytest

from provider_core.core.config.accessors import clear_config_context
from provider_core.core.config.schema import ConfigSchema
from provider_core.core.knowledge import ContextAugmenter, InMemoryKnowledgeBaseStore
from provider_core.core.provider_config import ProviderConfig
from provider_core.core.rotation import CredentialRotator, InMemoryRotationStore
from tests.fixtures.fakes import FakeRetriever

# Import HTTP mocking fixtures from fixtures module
pytest_plugins = ["tests.fixtures.mock_http"]


def pytest_collection_modifyitems(config, items):
    """Add markers to tests based on their location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Run every test against schema defaults, whatever the developer's shell holds."""
    for spec in ConfigSchema.all_specs().values():
        monkeypatch.delenv(spec.name, raising=False)
    clear_config_context()
    yield
    clear_config_context()


@pytest.fixture
def rotation_store():
    return InMemoryRotationStore()


@pytest.fixture
def rotator(rotation_store):
    return CredentialRotator(rotation_store)


@pytest.fixture
def make_provider_config():
    """Build a ProviderConfig with test defaults."""

    def _make(**overrides) -> ProviderConfig:
        values = {
            "id": "openai",
            "name": "OpenAI",
            "api_host": "https://api.openai.com",
            "api_key": "test-key",
            "type": "openai",
        }
        values.update(overrides)
        return ProviderConfig(**values)

    return _make


@pytest.fixture
def knowledge_store():
    return InMemoryKnowledgeBaseStore()


@pytest.fixture
def fake_retriever():
    return FakeRetriever()


@pytest.fixture
def augmenter(knowledge_store, fake_retriever):
    return ContextAugmenter(knowledge_store, fake_retriever)
