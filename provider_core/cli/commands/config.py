"""Configuration commands for the pcore CLI."""

import typer
from rich.console import Console
from rich.table import Table

from provider_core.core.config import Config, ConfigSchema, validate_all

app = typer.Typer(help="Configuration management")


@app.command()
def show() -> None:
    """Show the effective configuration."""
    console = Console()
    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for key, value in Config().as_dict().items():
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def validate() -> None:
    """Validate every environment variable against the schema."""
    console = Console()
    errors = validate_all()
    if errors:
        for error in errors:
            console.print(f"[red]❌ {error}[/red]")
        raise typer.Exit(1)
    console.print("[green]✅ Configuration is valid[/green]")


@app.command()
def docs() -> None:
    """Print Markdown documentation for all environment variables."""
    typer.echo(ConfigSchema.generate_markdown_docs())
