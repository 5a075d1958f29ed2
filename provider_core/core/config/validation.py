"""Coercion and validation of environment variables declared in ConfigSchema."""

import os
from collections.abc import Callable
from typing import Any

from provider_core.core.config.schema import ConfigSchema, EnvVarSpec
from provider_core.core.exceptions import ConfigurationError


class ConfigError(ConfigurationError):
    """An environment variable holds a value its EnvVarSpec rejects.

    Attributes:
        env_var: The environment variable name
        value: The raw value that failed validation
        message: Human-readable error message
    """

    def __init__(self, env_var: str, value: str, message: str) -> None:
        self.env_var = env_var
        self.value = value
        self.message = message
        super().__init__(f"{env_var}={value}: {message}")


def _parse_bool(value: str) -> bool:
    """Return True for "true", "1", "yes" or "on" (case-insensitive)."""
    return value.lower() in ("true", "1", "yes", "on")


_COERCERS: dict[type, Callable[[str], Any]] = {
    bool: _parse_bool,
    int: int,
    float: float,
}


def _coerce(spec: EnvVarSpec, raw_value: str) -> Any:
    coerce = spec.coerce or _COERCERS.get(spec.type_hint)
    if coerce is None:
        return raw_value
    try:
        return coerce(raw_value.strip())
    except (ValueError, TypeError) as e:
        raise ConfigError(
            spec.name, raw_value, f"Cannot convert to {spec.type_hint.__name__}: {e}"
        ) from e


def load_env_var(spec: EnvVarSpec) -> Any:
    """Load and validate a single environment variable.

    A variable that is unset, or set to an empty string for a non-string
    type (``REQUEST_TIMEOUT=`` in a .env file), yields the EnvVarSpec default.

    Raises:
        ConfigError: If coercion or the EnvVarSpec validator fails
    """
    raw_value = os.environ.get(spec.name)
    if raw_value is None or (spec.type_hint is not str and not raw_value.strip()):
        return spec.default

    value = _coerce(spec, raw_value)
    if spec.validator is None:
        return value

    try:
        valid = spec.validator(value)
    except (TypeError, IndexError) as e:
        raise ConfigError(spec.name, raw_value, f"Validation error: {e}") from e
    if not valid:
        raise ConfigError(
            spec.name, raw_value, f"Validation failed for type {spec.type_hint.__name__}"
        )
    return value


def load_all_specs() -> dict[str, Any]:
    """Load every variable in ConfigSchema, keeping failures as ConfigError values."""
    result: dict[str, Any] = {}
    for name, spec in ConfigSchema.all_specs().items():
        try:
            result[name] = load_env_var(spec)
        except ConfigError as e:
            result[name] = e
    return result


def validate_all() -> list[ConfigError]:
    """Return every configuration problem at once; used by ``pcore config validate``."""
    return [value for value in load_all_specs().values() if isinstance(value, ConfigError)]
