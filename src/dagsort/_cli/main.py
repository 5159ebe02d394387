import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from dagsort._edge import Edge
from dagsort._errors import CycleError, DagsortError
from dagsort._graph import build_graph, kahn_sort, reverse_order
from dagsort._io import FileFormat, dump_order, load_edges, parse_edges

from .config import ConfigError, DagsortConfig, get_config
from .render import render_cycle_error, render_graph_summary, render_order_table

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)


class Direction(StrEnum):
    """Direction of the printed order."""

    FORWARD = "forward"
    REVERSE = "reverse"


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Dagsort CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def _load_config() -> DagsortConfig:
    try:
        return get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e


def _read_edges(path: str | None, config: DagsortConfig, input_format: FileFormat | None) -> list[Edge[str]]:
    """Load edges from PATH, stdin ("-") or the configured input file."""
    if path == "-":
        err_console.print("[cyan]Reading edges from stdin[/cyan]")
        return parse_edges(sys.stdin.read(), input_format or FileFormat.TEXT)

    if path is not None:
        input_path = Path(path)
    elif config.input is not None:
        input_path = config.input
        logger.debug(f"Using input from [tool.dagsort]: {input_path}")
    else:
        err_console.print("[red]Error: No input given and no input configured in pyproject.toml[/red]")
        raise typer.Exit(code=1)

    if not input_path.exists():
        err_console.print(f"[red]Error: Input file not found: {input_path}[/red]")
        raise typer.Exit(code=1)

    err_console.print(f"[cyan]Loading edges from:[/cyan] {input_path}")
    return load_edges(input_path, input_format)


@app.command()
def sort(
    path: Annotated[
        str | None,
        typer.Argument(help="Edge file (text, JSON or TOML); '-' reads text from stdin"),
    ] = None,
    *,
    direction: Annotated[
        Direction | None,
        typer.Option("--order", help="Order direction; reverse reads edges as 'dependent dependency'"),
    ] = None,
    reverse: Annotated[
        bool,
        typer.Option("-r", "--reverse", help="Shorthand for --order reverse"),
    ] = False,
    output_format: Annotated[
        FileFormat | None,
        typer.Option("-f", "--format", help="Output format"),
    ] = None,
    input_format: Annotated[
        FileFormat | None,
        typer.Option("--input-format", help="Input format (guessed from the file suffix by default)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Write the order to this file instead of stdout"),
    ] = None,
    table: Annotated[
        bool,
        typer.Option("--table", help="Also show the order as a table on stderr"),
    ] = False,
) -> None:
    """Print the vertices of an edge list in topological order."""
    config = _load_config()
    if not reverse:
        reverse = config.reverse if direction is None else direction is Direction.REVERSE
    if output_format is None:
        output_format = config.format

    try:
        edges = _read_edges(path, config, input_format)
        order = kahn_sort(build_graph(edges))
    except CycleError as e:
        render_cycle_error(e, err_console)
        raise typer.Exit(code=1) from e
    except DagsortError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if reverse:
        order = reverse_order(order)
    logger.debug(f"Sorted {len(order)} vertices (reverse={reverse})")

    if table:
        render_order_table(order, err_console)

    text = dump_order(order, output, output_format)
    if output is None:
        typer.echo(text, nl=False)
    else:
        err_console.print(f"[green]✓ Wrote {len(order)} vertices to {output}[/green]")


@app.command()
def check(
    path: Annotated[
        str | None,
        typer.Argument(help="Edge file (text, JSON or TOML); '-' reads text from stdin"),
    ] = None,
    *,
    input_format: Annotated[
        FileFormat | None,
        typer.Option("--input-format", help="Input format (guessed from the file suffix by default)"),
    ] = None,
) -> None:
    """Check that an edge list forms a valid acyclic graph."""
    config = _load_config()

    try:
        edges = _read_edges(path, config, input_format)
        graph = build_graph(edges)
    except DagsortError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    err_console.print()
    render_graph_summary(graph, err_console)
    err_console.print()

    try:
        kahn_sort(graph)
    except CycleError as e:
        render_cycle_error(e, err_console)
        err_console.print()
        raise typer.Exit(code=1) from e

    err_console.print("[green]✓ Graph is acyclic[/green]")
    err_console.print()


def main() -> None:
    app()
