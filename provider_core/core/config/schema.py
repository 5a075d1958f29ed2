"""Declarative schema for environment variable configuration.

This module provides a single source of truth for all environment variables,
including automatic type coercion, validation, and documentation generation.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EnvVarSpec:
    """Specification for a single environment variable.

    Attributes:
        name: Environment variable name (e.g., "LOG_LEVEL")
        default: Default value if env var not set
        type_hint: Type for validation (int, str, float, bool)
        description: Human-readable description for docs
        validator: Optional custom validation function
        coerce: Optional function to convert string to target type
    """

    name: str
    default: Any
    type_hint: type
    description: str
    validator: Callable[[Any], bool] | None = None
    coerce: Callable[[str], Any] | None = None


class ConfigSchema:
    """Registry of all configuration environment variables."""

    # === Logging ===

    LOG_LEVEL = EnvVarSpec(
        name="LOG_LEVEL",
        default="INFO",
        type_hint=str,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        validator=lambda x: x.split()[0].upper()
        in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )

    # === Adapter Settings ===

    REQUEST_TIMEOUT = EnvVarSpec(
        name="REQUEST_TIMEOUT",
        default=90,
        type_hint=int,
        description="HTTP timeout in seconds for backend requests",
        validator=lambda x: x > 0,
    )

    DEFAULT_CONTEXT_COUNT = EnvVarSpec(
        name="DEFAULT_CONTEXT_COUNT",
        default=5,
        type_hint=int,
        description="Number of trailing messages sent when the assistant sets no context count",
        validator=lambda x: x > 0,
    )

    # === Local Inference Keep-Alive ===

    OLLAMA_KEEP_ALIVE_TIME = EnvVarSpec(
        name="OLLAMA_KEEP_ALIVE_TIME",
        default=5,
        type_hint=int,
        description="Minutes Ollama keeps a model loaded after a request",
        validator=lambda x: x >= 0,
    )

    LMSTUDIO_KEEP_ALIVE_TIME = EnvVarSpec(
        name="LMSTUDIO_KEEP_ALIVE_TIME",
        default=5,
        type_hint=int,
        description="Minutes LM Studio keeps a model loaded after a request",
        validator=lambda x: x >= 0,
    )

    # === Credential Rotation ===

    ROTATION_STORE_PATH = EnvVarSpec(
        name="ROTATION_STORE_PATH",
        default="~/.cache/provider-core/rotation.json",
        type_hint=str,
        description="JSON file holding the last used credential per provider",
    )

    @classmethod
    def all_specs(cls) -> dict[str, EnvVarSpec]:
        """Get all environment variable specifications.

        Returns:
            Dictionary mapping spec names to EnvVarSpec objects
        """
        return {
            name: getattr(cls, name)
            for name in dir(cls)
            if isinstance(getattr(cls, name), EnvVarSpec)
        }

    @classmethod
    def get_spec(cls, name: str) -> EnvVarSpec | None:
        """Get specification for a specific env var by name."""
        for spec in cls.all_specs().values():
            if spec.name == name:
                return spec
        return None

    @classmethod
    def generate_markdown_docs(cls) -> str:
        """Generate Markdown documentation for all environment variables."""
        lines = ["# Configuration Options\n\n"]
        lines.extend(
            [
                "This document is auto-generated from `ConfigSchema`.\n\n",
                "## Environment Variables\n\n",
            ]
        )

        specs = cls.all_specs()
        for _name, spec in sorted(specs.items()):
            default_repr = f"`{spec.default}`" if spec.default is not None else "None"
            lines.extend(
                [
                    f"### `{spec.name}`\n\n",
                    f"- **Type**: `{spec.type_hint.__name__}`\n",
                    f"- **Default**: {default_repr}\n",
                    f"- **Description**: {spec.description}\n\n",
                ]
            )

        return "\n".join(lines)
