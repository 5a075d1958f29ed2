from dataclasses import dataclass

from provider_core.core.exceptions import ConfigurationError

ROTATION_KEY_TEMPLATE = "provider:{provider_id}:last_used_key"


@dataclass
class ProviderConfig:
    """Configuration for a specific provider.

    ``api_key`` may hold several credentials separated by commas; they are
    used in round-robin order by the CredentialRotator.
    """

    id: str
    name: str
    api_host: str
    api_key: str = ""
    type: str = "openai"  # "openai" or "anthropic"
    is_system: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization"""
        if not self.id:
            raise ConfigurationError("Provider id is required")
        if not self.api_host:
            raise ConfigurationError(f"API host is required for provider '{self.id}'")

    def get_api_keys(self) -> list[str]:
        """Split the credential string into its ordered, trimmed parts.

        Always returns at least one element; an empty credential string
        yields ``[""]`` so keyless local backends still resolve a key.
        """
        return [key.strip() for key in self.api_key.split(",")]

    @property
    def rotation_key(self) -> str:
        return ROTATION_KEY_TEMPLATE.format(provider_id=self.id)

    @property
    def display_name(self) -> str:
        return self.name or self.id
