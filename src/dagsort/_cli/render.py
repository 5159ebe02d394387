"""Rich rendering utilities for the CLI commands."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dagsort._errors import CycleError
from dagsort._graph import Graph

if TYPE_CHECKING:
    from rich.console import Console


def _join(vertices: Sequence[Hashable], limit: int = 10) -> str:
    """Join vertex names for display, truncating long lists."""
    names = [escape(str(v)) for v in vertices[:limit]]
    if len(vertices) > limit:
        names.append(f"[dim]... ({len(vertices) - limit} more)[/dim]")
    return ", ".join(names) if names else "[dim]none[/dim]"


def render_graph_summary(graph: Graph[Hashable], console: Console) -> None:
    """Render vertex and edge counts of a graph as a Rich table.

    Args:
        graph: Graph to summarize.
        console: Rich Console to output to.

    """
    table = Table(show_header=False, box=None)
    table.add_column("Property", style="bold cyan")
    table.add_column("Value")

    roots = graph.roots()
    leaves = graph.leaves()
    table.add_row("Vertices", str(len(graph)))
    table.add_row("Edges", str(graph.edge_count))
    table.add_row(f"Roots ({len(roots)})", _join(roots))
    table.add_row(f"Leaves ({len(leaves)})", _join(leaves))

    console.print(Panel(table, title="[bold]Graph[/bold]", border_style="cyan"))


def render_order_table(order: Sequence[Hashable], console: Console) -> None:
    """Render a computed order as a numbered Rich table."""
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Vertex")

    for position, vertex in enumerate(order, start=1):
        table.add_row(str(position), escape(str(vertex)))

    console.print(table)


def render_cycle_error(error: CycleError, console: Console) -> None:
    """Render the vertices blocked by a cycle.

    The list contains the vertices on a cycle and every vertex downstream of one.
    """
    body = _join(error.vertices, limit=50)
    console.print(
        Panel(
            body,
            title="[bold red]Cycle detected[/bold red]",
            subtitle=f"[dim]{len(error.vertices)} vertices could not be ordered[/dim]",
            border_style="red",
        ),
    )
