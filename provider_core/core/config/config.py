"""Configuration facade for provider-core.

Configuration is organized into focused groups:
- logging: root log level
- adapters: timeouts, context window, local-inference keep-alive
- rotation: durable rotation store location
"""

from pathlib import Path

from provider_core.core.config.settings import (
    AdapterSettings,
    LoggingSettings,
    RotationSettings,
)


class Config:
    """Configuration object with direct access to all settings.

    All values are loaded at initialization time from environment variables
    using schema-based validation.
    """

    def __init__(self) -> None:
        self._logging = LoggingSettings.load()
        self._adapters = AdapterSettings.load()
        self._rotation = RotationSettings.load()

    @property
    def log_level(self) -> str:
        return self._logging.log_level

    @property
    def request_timeout(self) -> int:
        return self._adapters.request_timeout

    @property
    def default_context_count(self) -> int:
        return self._adapters.default_context_count

    @property
    def ollama_keep_alive_time(self) -> int:
        return self._adapters.ollama_keep_alive_time

    @property
    def lmstudio_keep_alive_time(self) -> int:
        return self._adapters.lmstudio_keep_alive_time

    @property
    def rotation_store_path(self) -> Path:
        return Path(self._rotation.rotation_store_path).expanduser()

    def as_dict(self) -> dict[str, object]:
        return {
            "log_level": self.log_level,
            "request_timeout": self.request_timeout,
            "default_context_count": self.default_context_count,
            "ollama_keep_alive_time": self.ollama_keep_alive_time,
            "lmstudio_keep_alive_time": self.lmstudio_keep_alive_time,
            "rotation_store_path": str(self.rotation_store_path),
        }
