"""Public sorting entry points."""

from collections.abc import Hashable, Iterable
from typing import TypeVar

from ._graph import EdgeLike, build_graph, kahn_sort, reverse_order

T = TypeVar("T", bound=Hashable)


def toposort(edges: Iterable[EdgeLike[T]]) -> list[T]:
    """Topologically sort the vertices named by ``edges``.

    Each edge ``(a, b)`` means "a must come before b". To include a vertex
    that takes part in no edge, pass ``(vertex, NO_VERTEX)``.

    Args:
        edges: Edges or ``(source, destination)`` pairs.

    Returns:
        Every vertex exactly once, each before all of its destinations.

    Raises:
        SelfLoopError: If an edge connects a vertex to itself.
        CycleError: If the edges form a cycle.

    Example:
        >>> toposort([("b", "c"), ("a", "b")])
        ['a', 'b', 'c']

    """
    return kahn_sort(build_graph(edges))


def toposort_reversed(edges: Iterable[EdgeLike[T]]) -> list[T]:
    """Like ``toposort`` but with the order reversed.

    Same as sorting with the direction of every edge flipped, so it suits
    edges written as ``(dependent, dependency)``.

    Example:
        >>> toposort_reversed([("jacket", "tie"), ("tie", "shirt")])
        ['shirt', 'tie', 'jacket']

    """
    return reverse_order(toposort(edges))
