"""Settings groups loaded from the environment.

Each group is a frozen dataclass built by a ``load()`` staticmethod using the
schema-based loader, so defaults and validation live in ConfigSchema only.
"""

from dataclasses import dataclass

from provider_core.core.config.schema import ConfigSchema
from provider_core.core.config.validation import load_env_var


@dataclass(frozen=True)
class LoggingConfig:
    log_level: str


@dataclass(frozen=True)
class AdapterConfig:
    """Settings shared by every backend adapter.

    Attributes:
        request_timeout: HTTP timeout in seconds
        default_context_count: Trailing messages kept when an assistant sets none
        ollama_keep_alive_time: Keep-alive minutes for the ``ollama`` provider
        lmstudio_keep_alive_time: Keep-alive minutes for the ``lmstudio`` provider
    """

    request_timeout: int
    default_context_count: int
    ollama_keep_alive_time: int
    lmstudio_keep_alive_time: int


@dataclass(frozen=True)
class RotationConfig:
    rotation_store_path: str


class LoggingSettings:
    @staticmethod
    def load() -> LoggingConfig:
        # Keep just the first word to tolerate inline comments in .env files
        raw = load_env_var(ConfigSchema.LOG_LEVEL)
        return LoggingConfig(log_level=raw.split()[0].upper())


class AdapterSettings:
    @staticmethod
    def load() -> AdapterConfig:
        """Load adapter configuration using schema-based validation.

        Raises:
            ConfigError: If any environment variable fails validation
        """
        return AdapterConfig(
            request_timeout=load_env_var(ConfigSchema.REQUEST_TIMEOUT),
            default_context_count=load_env_var(ConfigSchema.DEFAULT_CONTEXT_COUNT),
            ollama_keep_alive_time=load_env_var(ConfigSchema.OLLAMA_KEEP_ALIVE_TIME),
            lmstudio_keep_alive_time=load_env_var(ConfigSchema.LMSTUDIO_KEEP_ALIVE_TIME),
        )


class RotationSettings:
    @staticmethod
    def load() -> RotationConfig:
        return RotationConfig(
            rotation_store_path=load_env_var(ConfigSchema.ROTATION_STORE_PATH),
        )
