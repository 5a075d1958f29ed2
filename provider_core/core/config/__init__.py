from provider_core.core.config.config import Config
from provider_core.core.config.schema import ConfigSchema, EnvVarSpec
from provider_core.core.config.validation import ConfigError, load_env_var, validate_all

__all__ = [
    "Config",
    "ConfigSchema",
    "EnvVarSpec",
    "ConfigError",
    "load_env_var",
    "validate_all",
]
