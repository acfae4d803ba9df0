"""CLI entry point for quotely-parser.

Invoked as::

    quotely [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m quotely.cli.main

Commands
--------
parse       Parse one command line and dump the resulting command
commands    List every command keyword with its usage
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from quotely.state.models import QuoteList, QuotelyState

console = Console()
err_console = Console(stderr=True)

EXIT_PARSE_ERROR = 1
EXIT_STATE_ERROR = 2


def _configure_logging(verbose: int) -> None:
    """Route library logging to stderr at a level chosen by ``-v`` count.

    Without ``-v`` the parser's warnings stay silent: errors are already
    reported through the CLI's own messages.
    """
    if verbose <= 0:
        return
    logging.basicConfig(
        level=logging.INFO if verbose == 1 else logging.DEBUG,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_state_or_exit(path: str | None) -> tuple["QuotelyState", "QuoteList"]:
    """Load a state fixture, or start at the main menu with no quotes."""
    from quotely.state import QuoteList, QuotelyState, StateLoadError, load_state

    if path is None:
        return QuotelyState(), QuoteList()
    try:
        return load_state(Path(path))
    except StateLoadError as exc:
        err_console.print(f"[red]State error[/red] in {escape(path)}: {escape(str(exc))}")
        sys.exit(EXIT_STATE_ERROR)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="quotely-parser")
@click.option("-v", "--verbose", count=True, help="Log parser activity (-v info, -vv debug)")
def cli(verbose: int) -> None:
    """Quotely command parser: turn quote-tool command lines into validated commands."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from quotely import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]quotely-parser[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# commands command
# ---------------------------------------------------------------------------


@cli.command(name="commands")
def commands_command() -> None:
    """List every command keyword with its usage template."""
    from quotely.grammar import KEYWORD_ORDER, USAGE

    table = Table(title="Quotely commands")
    table.add_column("Keyword", style="bold cyan")
    table.add_column("Usage")
    for keyword in KEYWORD_ORDER:
        table.add_row(keyword.value, escape(USAGE[keyword]))
    console.print(table)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("line")
@click.option(
    "--state",
    "state_file",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="YAML/JSON fixture with the quote list and the active quote",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Command output format",
)
def parse_command(line: str, state_file: str | None, output_format: str) -> None:
    """Parse LINE and dump the resulting command.

    LINE is a single Quotely command, quoted as one shell argument.

    Examples:

    \b
        quotely parse "quote n/Acme c/John Tan"
        quotely parse "add i/Widget p/10.50 q/5" --state quotes.yaml
        quotely parse "nav main" --format yaml
    """
    from quotely.commands import CommandSerializer
    from quotely.parser import QuotelyError, parse

    state, quote_list = _load_state_or_exit(state_file)

    try:
        command = parse(line, state, quote_list)
    except QuotelyError as exc:
        err_console.print(f"[red]Error[/red] ({exc.kind.name}): {escape(exc.message)}")
        if exc.usage:
            err_console.print(f"[yellow]usage:[/yellow] {escape(exc.usage)}")
        elif exc.detail:
            err_console.print(f"[dim]{escape(exc.detail)}[/dim]")
        sys.exit(EXIT_PARSE_ERROR)

    serializer = CommandSerializer()
    if output_format.lower() == "json":
        text = serializer.to_json(command)
    else:
        text = serializer.to_yaml(command)
    console.print(Syntax(text, output_format.lower()))


if __name__ == "__main__":
    cli()
