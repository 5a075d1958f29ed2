"""Credential rotation commands for the pcore CLI."""

import typer
from rich.console import Console

from provider_core.cli.runtime import durable_rotator, require_provider
from provider_core.core.exceptions import StorageError
from provider_core.core.provider import get_api_key_hash

app = typer.Typer(help="Credential rotation")


@app.command("next")
def next_key(
    provider_id: str = typer.Argument(..., help="Provider id (e.g., 'openai')"),
) -> None:
    """Advance the rotation and show which credential is now in use."""
    console = Console()
    provider = require_provider(provider_id, console)
    keys = provider.get_api_keys()

    try:
        key = durable_rotator().select_credential(provider)
    except StorageError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1) from None

    position = keys.index(key) + 1
    console.print(
        f"✅ {provider.display_name}: key [cyan]{get_api_key_hash(key)}[/cyan] "
        f"({position}/{len(keys)})"
    )


@app.command()
def reset(
    provider_id: str = typer.Argument(..., help="Provider id (e.g., 'openai')"),
) -> None:
    """Restart the rotation at the first credential."""
    console = Console()
    provider = require_provider(provider_id, console)

    try:
        durable_rotator().reset_rotation(provider)
    except StorageError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1) from None

    console.print(f"✅ Rotation reset for {provider.display_name}")
