"""Main CLI entry point for provider-core."""

import typer
from rich.console import Console

from provider_core.cli.commands import config, keys, providers

app = typer.Typer(
    name="pcore",
    help="Provider Core CLI - inspect providers, credentials and configuration",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(providers.app, name="providers", help="Provider inspection")
app.add_typer(keys.app, name="keys", help="Credential rotation")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    from provider_core import __version__

    console = Console()
    console.print(f"[bold cyan]pcore[/bold cyan] version [green]{__version__}[/green]")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Provider Core CLI."""
    from provider_core.core.config import Config, ConfigError
    from provider_core.core.logging import configure_root_logging

    try:
        log_level = Config().log_level
    except ConfigError:
        # Reported by `pcore config validate`
        log_level = "INFO"
    configure_root_logging("DEBUG" if verbose else log_level)


if __name__ == "__main__":
    app()
