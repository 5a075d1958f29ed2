"""Provider commands for the pcore CLI."""

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from provider_core.cli.runtime import durable_rotator, load_registry, require_provider
from provider_core.core.exceptions import ProviderCoreError
from provider_core.core.provider import get_api_key_hash
from provider_core.core.providers import Model, ProviderFactory

app = typer.Typer(help="Provider inspection")


@app.command("list")
def list_providers() -> None:
    """List providers discovered from the environment."""
    console = Console()
    providers = load_registry().list_all()

    if not providers:
        console.print("[yellow]No providers configured. Set <PROVIDER>_API_KEY.[/yellow]")
        return

    table = Table(title="Configured Providers")
    table.add_column("Id", style="cyan")
    table.add_column("Type", style="yellow")
    table.add_column("Keys")
    table.add_column("SHA256")
    table.add_column("Host", style="green")

    for provider in providers.values():
        keys = provider.get_api_keys()
        table.add_row(
            provider.id,
            provider.type,
            str(len(keys)),
            ", ".join(get_api_key_hash(key) for key in keys),
            provider.api_host,
        )

    console.print(table)


async def _list_models(provider_id: str, console: Console) -> list:
    provider = require_provider(provider_id, console)
    async with ProviderFactory.create(provider, rotator=durable_rotator()) as adapter:
        return await adapter.models()


@app.command()
def models(
    provider_id: str = typer.Argument(..., help="Provider id (e.g., 'openai')"),
) -> None:
    """List the models a provider exposes."""
    console = Console()

    try:
        found = asyncio.run(_list_models(provider_id, console))
    except (ProviderCoreError, httpx.HTTPError) as e:
        console.print(f"[red]❌ Failed to list models: {e}[/red]")
        raise typer.Exit(1) from None

    table = Table(title=f"Models for {provider_id}")
    table.add_column("Model", style="cyan")
    table.add_column("Owned By", style="green")
    for model in found:
        table.add_row(model.id, model.owned_by)
    console.print(table)


async def _check(provider_id: str, model_id: str, console: Console):
    provider = require_provider(provider_id, console)
    async with ProviderFactory.create(provider, rotator=durable_rotator()) as adapter:
        return await adapter.check(Model(id=model_id, provider=provider.id))


@app.command()
def check(
    provider_id: str = typer.Argument(..., help="Provider id (e.g., 'openai')"),
    model_id: str = typer.Argument(..., help="Model to probe"),
) -> None:
    """Send a one-word request to verify credentials and model."""
    console = Console()

    try:
        result = asyncio.run(_check(provider_id, model_id, console))
    except (ProviderCoreError, httpx.HTTPError) as e:
        console.print(f"[red]❌ Failed to check {provider_id}/{model_id}: {e}[/red]")
        raise typer.Exit(1) from None

    if result.valid:
        console.print(f"[green]✅ {provider_id}/{model_id} is reachable[/green]")
    else:
        console.print(f"[red]❌ {provider_id}/{model_id} check failed: {result.error}[/red]")
        raise typer.Exit(1)
