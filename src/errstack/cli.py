"""CLI for inspecting serialized errors."""

import json
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import get_config
from .errors import StackError

app = typer.Typer(
    name="errstack",
    help="""
    [bold]errstack CLI[/bold]

    Inspect serialized StackError records and their cause chains.

    [cyan]Examples:[/cyan]
      errstack inspect error.json
      cat error.json | errstack inspect -
      errstack inspect error.json --json
    """,
    no_args_is_help=True,
)

console = Console()
logger = logging.getLogger(__name__)


@app.command()
def inspect(
    input_file: str = typer.Argument(
        ...,
        help="Serialized error JSON file, or - to read stdin",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the normalized JSON record instead of a table",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed processing information",
    ),
):
    """Rebuild a serialized error and show its cause chain."""
    try:
        config = get_config()
    except ValueError as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=logging.DEBUG if verbose else config.get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if input_file == "-":
            raw = sys.stdin.read()
        else:
            raw = Path(input_file).read_text()
        error = StackError.from_json(raw)
    except (OSError, ValueError) as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    if as_json:
        print(json.dumps(error.to_json(), indent=config.json_indent or None, default=str))
        return

    _render_chain(error)


def _render_chain(error: StackError) -> None:
    """Print the error chain as a table, outermost error first."""
    table = Table(title=escape(str(error)))
    table.add_column("#", justify="right", style="dim")
    table.add_column("Code", style="bold cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Message")
    table.add_column("Metadata", style="dim")

    for position, item in enumerate(error.to_error_stack()):
        table.add_row(
            str(position),
            escape(item.code),
            escape(item.name),
            escape(item.message),
            escape(json.dumps(item.metadata, default=str)) if item.metadata else "",
        )

    console.print(table)
    console.print(f"[dim]{len(error.error_stack)} wrapped error(s)[/dim]")


@app.command()
def version():
    """Show version information."""
    console.print(f"errstack version {__version__}")


if __name__ == "__main__":
    app()
