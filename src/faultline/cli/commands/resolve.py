"""Resolve CLI command explaining a dispatch decision."""

import importlib
import logging
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from faultline.cli.state import error_handler_for
from faultline.core.handlers.error_handler_error import FaultlineError
from faultline.core.handlers.handler_binding import describe_handler
from faultline.core.handlers.handler_resolver import AncestorStep

logger = logging.getLogger(__name__)
console = Console()


def load_exception_class(path: str) -> type:
    """Import the exception class named by a dotted ``module.Class`` path.

    Names without a module part are looked up in ``builtins``.

    Raises:
        typer.BadParameter: If the path does not name an exception class.
    """
    module_name, _, attribute = path.rpartition(".")
    module_name = module_name or "builtins"
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"Cannot import module {module_name}: {exc}") from exc

    candidate = getattr(module, attribute, None)
    if not (isinstance(candidate, type) and issubclass(candidate, BaseException)):
        raise typer.BadParameter(f"{path} is not an exception class")
    return candidate


def _render_chain_table(steps: tuple[AncestorStep, ...], winner: AncestorStep, describe) -> Table:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Distance", justify="right")
    table.add_column("Category")
    table.add_column("Handler", overflow="fold")

    for step in steps:
        if step.entry is None:
            handler = "[dim]-[/]"
        elif step is winner:
            handler = f"[bold green]{escape(describe_handler(step.entry.handler))} (selected)[/]"
        else:
            handler = escape(describe_handler(step.entry.handler))
        table.add_row(str(step.distance), describe(step.category), handler)
    return table


def resolve_command(
    exception: Annotated[str, typer.Argument(help="Dotted path of the exception class.")],
    packages: Annotated[
        Optional[List[str]],
        typer.Argument(help="Packages to scan. Defaults to the configured base packages."),
    ] = None,
) -> None:
    """Show the ancestor chain of EXCEPTION and the handler selected for it."""
    exception_class = load_exception_class(exception)

    try:
        error_handler = error_handler_for(packages)
        steps = error_handler.resolver.explain(exception_class)
        entry = error_handler.resolver.resolve_category(exception_class)
    except FaultlineError as exc:
        logger.debug("Resolution failed", exc_info=True)
        console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    describe = error_handler.registry.hierarchy.describe
    winner = next(step for step in steps if step.entry is entry)
    console.print(_render_chain_table(steps, winner, describe))
    console.print(
        f"\n{describe(exception_class)} is handled by "
        f"[bold]{escape(describe_handler(entry.handler))}[/] "
        f"bound to {describe(entry.category)} at distance {winner.distance}"
    )


__all__ = ["load_exception_class", "resolve_command"]
