"""Scan CLI command listing discovered handlers.

Purpose:
    Show which handlers the given packages contribute and which failure
    category each one is bound to, flagging handlers ignored as duplicates
    and the fallback root handler.
Fallback Semantics:
    Discovery and binding failures are reported to the operator and the
    command exits with a non-zero code.
"""

import logging
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from faultline.cli.state import error_handler_for
from faultline.core.handlers.error_handler_error import FaultlineError
from faultline.core.handlers.handler_binding import describe_handler
from faultline.core.handlers.handler_registry import HandlerRegistry

logger = logging.getLogger(__name__)
console = Console()


def _render_registry_table(registry: HandlerRegistry) -> Table:
    """Build a table with one row per registered or discarded handler."""
    hierarchy = registry.hierarchy
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Category")
    table.add_column("Handler", overflow="fold")
    table.add_column("Status")

    for entry in registry.entries():
        status = "[dim]default[/]" if entry.default else "[green]active[/]"
        table.add_row(hierarchy.describe(entry.category), escape(describe_handler(entry.handler)), status)

    for entry in registry.discarded:
        table.add_row(
            hierarchy.describe(entry.category),
            escape(describe_handler(entry.handler)),
            "[yellow]duplicate (ignored)[/]",
        )

    return table


def scan_command(
    packages: Annotated[
        Optional[List[str]],
        typer.Argument(help="Packages to scan. Defaults to the configured base packages."),
    ] = None,
) -> None:
    """List the handlers found in PACKAGES and their bound categories."""
    try:
        error_handler = error_handler_for(packages)
    except FaultlineError as exc:
        logger.debug("Scan failed", exc_info=True)
        console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    registry = error_handler.registry
    console.print(_render_registry_table(registry))

    if registry.discarded:
        console.print(
            f"\n[bold yellow]{len(registry.discarded)} handler(s) ignored because "
            "another handler claims the same category.[/]"
        )
    if registry.default_used:
        console.print("[italic]No handler is bound to the root category; the default is used.[/]")


__all__ = ["scan_command"]
