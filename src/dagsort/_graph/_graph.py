"""Adjacency-list graph built from an edge list."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeAlias, TypeVar

from dagsort._edge import NO_VERTEX, Edge, NoVertex

T = TypeVar("T", bound=Hashable)

EdgeLike: TypeAlias = Edge[T] | tuple[T | NoVertex, T | NoVertex]


@dataclass(frozen=True, slots=True)
class Graph(Generic[T]):
    """An immutable directed graph in adjacency-list form.

    Maps every vertex to the ordered tuple of its destinations. Parallel edges
    are kept: an edge that occurs k times in the input appears k times in the
    source's destination tuple. Vertices keep the order in which they first
    appear in the edge list.

    Attributes:
        _adjacency: Mapping from vertex to its direct destinations.

    """

    _adjacency: dict[T, tuple[T, ...]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeLike[T]]) -> Graph[T]:
        """Build a graph from a sequence of edges.

        An edge ``(a, b)`` means "a must come before b". An edge with
        ``NO_VERTEX`` in one slot adds the other vertex without any edge.

        Args:
            edges: Edges or ``(source, destination)`` pairs.

        Returns:
            A new Graph instance.

        Raises:
            SelfLoopError: If an edge connects a vertex to itself.
            EmptyEdgeError: If an edge has ``NO_VERTEX`` in both slots.
            EdgeTypeError: If an item is not an edge.

        Example:
            >>> graph = Graph.from_edges([("a", "b"), ("w", NO_VERTEX)])
            >>> graph.destinations("a")
            ('b',)
            >>> graph.vertices
            ('a', 'b', 'w')

        """
        adjacency: dict[T, list[T]] = {}

        for item in edges:
            edge = Edge.coerce(item)
            edge.validate()
            src, dst = edge.source, edge.destination
            if src is NO_VERTEX:
                adjacency.setdefault(dst, [])
            elif dst is NO_VERTEX:
                adjacency.setdefault(src, [])
            else:
                adjacency.setdefault(src, []).append(dst)
                adjacency.setdefault(dst, [])

        return cls(_adjacency={k: tuple(v) for k, v in adjacency.items()})

    @property
    def vertices(self) -> tuple[T, ...]:
        """All vertices in first-appearance order."""
        return tuple(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Number of edges, counting parallel edges separately."""
        return sum(len(dsts) for dsts in self._adjacency.values())

    def destinations(self, vertex: T) -> tuple[T, ...]:
        """Get the direct destinations of a vertex, one entry per edge.

        Args:
            vertex: The vertex to query.

        Returns:
            Destinations in edge order; empty for unknown vertices.

        """
        return self._adjacency.get(vertex, ())

    def in_degrees(self) -> dict[T, int]:
        """Count incoming edges per vertex, with multiplicity.

        Returns:
            A new dict mapping every vertex to its in-degree. The caller owns it.

        """
        indegree = dict.fromkeys(self._adjacency, 0)
        for dsts in self._adjacency.values():
            for dst in dsts:
                indegree[dst] += 1
        return indegree

    def roots(self) -> tuple[T, ...]:
        """Get vertices with no incoming edges."""
        return tuple(v for v, deg in self.in_degrees().items() if deg == 0)

    def leaves(self) -> tuple[T, ...]:
        """Get vertices with no outgoing edges."""
        return tuple(v for v, dsts in self._adjacency.items() if not dsts)

    def transpose(self) -> Graph[T]:
        """Return the graph with every edge reversed.

        Parallel edges stay parallel and every vertex is kept.

        """
        adjacency: dict[T, list[T]] = {v: [] for v in self._adjacency}
        for src, dsts in self._adjacency.items():
            for dst in dsts:
                adjacency[dst].append(src)
        return Graph(_adjacency={k: tuple(v) for k, v in adjacency.items()})

    def __getitem__(self, vertex: T) -> tuple[T, ...]:
        return self._adjacency[vertex]

    def __iter__(self) -> Iterator[T]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex is in the graph."""
        return vertex in self._adjacency


def build_graph(edges: Iterable[EdgeLike[T]]) -> Graph[T]:
    """Build a Graph from an edge list. See ``Graph.from_edges``."""
    return Graph.from_edges(edges)
