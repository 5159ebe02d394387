"""Graph algorithms for ordering vertices by their edges."""

from collections.abc import Hashable, Sequence
from typing import TypeVar

from dagsort._errors import CycleError

from ._graph import Graph

T = TypeVar("T", bound=Hashable)
U = TypeVar("U")


def kahn_sort(graph: Graph[T]) -> list[T]:
    """Sort a graph topologically using Kahn's algorithm.

    Return the vertices in an order where, for every edge (a -> b), a appears
    before b. Ready vertices are kept on a stack: they are seeded in the
    graph's vertex order and the most recently readied vertex is placed next,
    so the same graph always yields the same order.

    Args:
        graph: The graph to sort.

    Returns:
        List with one entry per vertex, in topological order.

    Raises:
        CycleError: If the graph contains a cycle. The error lists every
            vertex left with unresolved incoming edges.

    Example:
        >>> kahn_sort(Graph.from_edges([("a", "b"), ("b", "c")]))
        ['a', 'b', 'c']

    """
    indegree = graph.in_degrees()

    # Start with vertices that have no incoming edges
    ready = [vertex for vertex, deg in indegree.items() if deg == 0]
    order: list[T] = []

    while ready:
        vertex = ready.pop()
        order.append(vertex)
        # Parallel edges are decremented once per occurrence
        for dst in graph.destinations(vertex):
            indegree[dst] -= 1
            if indegree[dst] == 0:
                ready.append(dst)

    if len(order) < len(graph):
        raise CycleError(vertex for vertex, deg in indegree.items() if deg != 0)

    return order


def reverse_order(order: Sequence[U]) -> list[U]:
    """Return a new list with the vertices of ``order`` in reverse.

    Reversing a topological order of a graph gives a topological order of the
    graph with every edge reversed.
    """
    return list(reversed(order))
