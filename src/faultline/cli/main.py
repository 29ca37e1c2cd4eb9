"""
faultline Command Line Interface

Inspect how handler packages are bound to failure categories and which
handler a given exception class would be dispatched to.

Usage:
    faultline --help
    faultline [options] command [arguments]

Examples:
    faultline scan myapp.errors
    faultline resolve builtins.KeyError myapp.errors
    faultline --config faultline.yaml resolve myapp.domain.NotFound

Environment Variables:
    FAULTLINE_CONFIG_PATH: Path to a YAML configuration file
    FAULTLINE_BASE_PACKAGES: Comma separated handler packages
    FAULTLINE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

import logging
import sys
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from faultline import __version__
from faultline.config import ConfigurationError, FaultlineSettings, load_settings
from faultline.cli.commands.resolve import resolve_command
from faultline.cli.commands.scan import scan_command
from faultline.cli.state import state
from faultline.utils.logging import PACKAGE_LOGGER, configure_logger

console = Console()
logger = logging.getLogger(__name__)

app = typer.Typer(
    name="faultline",
    help="Inspect exception handler registrations and dispatch decisions",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _configure_logging(level: int) -> None:
    """Send faultline log records to stderr through a Rich handler."""
    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    configure_logger(PACKAGE_LOGGER, level, handler)


@app.callback()
def main_callback(
    config_path: Annotated[
        Optional[str], typer.Option("--config", "-c", help="Path to configuration file.")
    ] = None,
    log_level: Annotated[
        Optional[str], typer.Option("--log-level", "-l", help="Logging level override.")
    ] = None,
):
    """
    faultline CLI.
    """
    try:
        settings = load_settings(config_path)
        if log_level:
            settings = FaultlineSettings.model_validate(
                {**settings.model_dump(), "log_level": log_level}
            )
    except (ConfigurationError, ValueError) as e:
        console.print(f"[bold red]Configuration error:[/] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    _configure_logging(settings.log_level_value)
    state["settings"] = settings
    logger.debug("Settings loaded: %s", settings.model_dump())


app.command("scan")(scan_command)
app.command("resolve")(resolve_command)


@app.command()
def version():
    """Display the current version of faultline."""
    console.print(f"faultline v[bold cyan]{__version__}[/bold cyan]")


def main():
    """Main entry point for the CLI."""
    try:
        app()
    except Exception as e:
        logger.error("Unhandled exception: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
