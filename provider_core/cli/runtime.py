"""Objects shared by CLI commands."""

import typer
from rich.console import Console

from provider_core.core.config.config import Config
from provider_core.core.exceptions import UnsupportedProviderError
from provider_core.core.provider import ProviderConfigLoader, ProviderRegistry
from provider_core.core.provider_config import ProviderConfig
from provider_core.core.rotation import CredentialRotator, FileSystemRotationStore


def load_registry() -> ProviderRegistry:
    return ProviderConfigLoader().load_into(ProviderRegistry())


def durable_rotator(config: Config | None = None) -> CredentialRotator:
    """Rotator backed by the on-disk store so rotation survives between runs."""
    config = config or Config()
    return CredentialRotator(FileSystemRotationStore(config.rotation_store_path))


def require_provider(provider_id: str, console: Console) -> ProviderConfig:
    try:
        return load_registry().require(provider_id.lower())
    except UnsupportedProviderError as e:
        console.print(f"[red]❌ {e} (set {provider_id.upper()}_API_KEY)[/red]")
        raise typer.Exit(1) from e
