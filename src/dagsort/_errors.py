"""Exceptions raised while building and sorting a dependency graph."""

from collections.abc import Hashable, Iterable


class DagsortError(Exception):
    """Base class for all dagsort errors."""


class SelfLoopError(DagsortError, ValueError):
    """Raised when an edge connects a vertex to itself."""

    def __init__(self, vertex: Hashable) -> None:
        self.vertex = vertex
        super().__init__(f"edge cannot connect vertex {vertex!r} to itself")


class EmptyEdgeError(DagsortError, ValueError):
    """Raised when both slots of an edge hold the no-vertex sentinel."""

    def __init__(self) -> None:
        super().__init__("edge must name at least one vertex")


class EdgeTypeError(DagsortError, TypeError):
    """Raised when an edge item is not an Edge or a (source, destination) pair."""

    def __init__(self, item: object) -> None:
        self.item = item
        super().__init__(f"expected an edge or a (source, destination) pair, got {item!r}")


class CycleError(DagsortError, ValueError):
    """Raised when the graph contains a cycle.

    ``vertices`` holds every vertex that could not be placed: the vertices on a
    cycle plus anything downstream of one.
    """

    def __init__(self, vertices: Iterable[Hashable]) -> None:
        self.vertices = tuple(vertices)
        names = ", ".join(str(v) for v in self.vertices)
        super().__init__(f"graph contains cycle in nodes [{names}]")
