"""Runtime config value accessors.

These functions provide config values at runtime without requiring
direct config imports, so adapters never capture settings at import time.

Config is propagated via ContextVar. When no config has been set for the
current context (plain scripts, the CLI) a fresh Config is loaded from the
environment.

Usage:
    from provider_core.core.config.accessors import ollama_keep_alive_time
    minutes = ollama_keep_alive_time()
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

_config_context: ContextVar[Config | None] = ContextVar("config_context", default=None)


def get_config() -> Config:
    """Return the context-scoped config, or load one from the environment."""
    cfg = _config_context.get(None)
    if cfg is None:
        from .config import Config

        cfg = Config()
    return cfg


def request_timeout() -> int:
    return get_config().request_timeout


def default_context_count() -> int:
    return get_config().default_context_count


def ollama_keep_alive_time() -> int:
    """Get the keep-alive minutes configured for Ollama."""
    return get_config().ollama_keep_alive_time


def lmstudio_keep_alive_time() -> int:
    """Get the keep-alive minutes configured for LM Studio."""
    return get_config().lmstudio_keep_alive_time


def set_config_context(config: Config) -> None:
    """Manually set config context (useful for testing)."""
    _config_context.set(config)


def clear_config_context() -> None:
    """Reset the config context so accessors reload from the environment."""
    _config_context.set(None)


@contextmanager
def config_context(config: Config) -> Iterator[None]:
    """Scope a config to a block of code.

    Example:
        with config_context(cfg):
            provider = ProviderFactory.create(provider_config)
    """
    token = _config_context.set(config)
    try:
        yield
    finally:
        _config_context.reset(token)
