"""CLI entry point for terminal-bible.

Provides the `terminal-bible` command for launching the Textual interface.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel

from terminal_bible import __version__
from terminal_bible.config import AppConfig, ensure_app_config_exists, get_app_config_path
from terminal_bible.logging_config import LOG_FILENAME, setup_logging

app = typer.Typer(
    name="terminal-bible",
    help="Terminal Bible - look up and bookmark Bible verses",
    no_args_is_help=False,
)
console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
    ),
) -> None:
    """Terminal Bible - look up and bookmark Bible verses."""
    if version:
        console.print(f"terminal-bible version {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        run(config_path=None)


def _load_config(config_path: Optional[Path]) -> AppConfig:
    """Load the given config file, or the default one (created on first run)."""
    if config_path:
        return AppConfig.load(config_path)

    if not get_app_config_path().exists():
        console.print(
            Panel.fit(
                "[bold green]Welcome to Terminal Bible![/bold green]\n\n"
                "Configuration will be created at: "
                f"[cyan]{get_app_config_path()}[/cyan]",
                title="terminal-bible",
                border_style="green",
            )
        )
    return ensure_app_config_exists()


@app.command()
def run(
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Launch the TUI application."""
    try:
        config = _load_config(config_path)
    except FileNotFoundError as e:
        console.print(f"[red]Config file not found: {e}[/red]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        raise typer.Exit(1)

    logger = setup_logging(config.log_dir)
    logger.info(f"Favorites file: {config.favorites_path}")
    logger.info(f"Verse service: {config.api_base_url}")

    # Imported late so `--help` and `config` stay fast
    from terminal_bible.app import BibleApp

    try:
        BibleApp(config).run()
        logger.info("Application exited normally")
    except KeyboardInterrupt:
        logger.info("Application interrupted by user (Ctrl+C)")
        raise typer.Exit(0)
    except Exception as e:
        logger.exception(f"Application error: {e}")
        console.print(f"[red]Error running app: {e}[/red]")
        console.print(f"[dim]Details in {config.log_dir / LOG_FILENAME}[/dim]")
        raise typer.Exit(1)


@app.command()
def config(
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show the resolved configuration."""
    path = config_path or get_app_config_path()

    if path.exists():
        try:
            cfg = AppConfig.load(path)
        except Exception as e:
            console.print(f"[red]Error loading config: {e}[/red]")
            raise typer.Exit(1)
        console.print(f"[bold]Config file:[/bold] {path}")
    else:
        cfg = AppConfig()
        console.print(f"[yellow]No config file at {path} (showing defaults)[/yellow]")

    console.print(f"[bold]Verse service:[/bold] {cfg.api_base_url}")
    console.print(f"[bold]Request timeout:[/bold] {cfg.request_timeout or 'client default'}")
    console.print(f"[bold]Wrap width:[/bold] {cfg.wrap_width}")
    console.print(f"[bold]Favorites file:[/bold] {cfg.favorites_path}")
    console.print(f"[bold]Log dir:[/bold] {cfg.log_dir}")


def cli_entry() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli_entry()
