"""Edge representation and the no-vertex sentinel."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Self, TypeVar

from ._errors import EdgeTypeError, EmptyEdgeError, SelfLoopError


class NoVertex(Enum):
    """Marker for the empty slot of a single-vertex edge."""

    NO_VERTEX = "NO_VERTEX"

    def __repr__(self) -> str:
        return "NO_VERTEX"


NO_VERTEX = NoVertex.NO_VERTEX

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True, slots=True)
class Edge(Generic[T]):
    """An ordered pair of vertices: ``source`` must come before ``destination``.

    Either slot (but not both) may hold ``NO_VERTEX``. Such an edge only
    declares the other vertex as present in the graph, which is how isolated
    vertices are added.

    Example:
        >>> Edge("a", "b")
        Edge(source='a', destination='b')
        >>> Edge.vertex("w").is_declaration
        True

    """

    source: T | NoVertex
    destination: T | NoVertex

    @classmethod
    def vertex(cls, vertex: T) -> Self:
        """Create an edge that only declares ``vertex``."""
        return cls(vertex, NO_VERTEX)

    @classmethod
    def coerce(cls, item: Edge[T] | tuple[T | NoVertex, T | NoVertex]) -> Edge[T]:
        """Convert a ``(source, destination)`` pair to an Edge.

        Raises:
            EdgeTypeError: If ``item`` is neither an Edge nor a 2-sequence.

        """
        if isinstance(item, Edge):
            return item
        if isinstance(item, (str, bytes)):
            raise EdgeTypeError(item)
        try:
            source, destination = item
        except (TypeError, ValueError) as e:
            raise EdgeTypeError(item) from e
        return cls(source, destination)

    @property
    def is_declaration(self) -> bool:
        """True if exactly one slot holds ``NO_VERTEX``."""
        return (self.source is NO_VERTEX) != (self.destination is NO_VERTEX)

    def validate(self) -> None:
        """Check the edge invariants.

        Raises:
            EmptyEdgeError: If both slots are ``NO_VERTEX``.
            SelfLoopError: If both slots hold the same vertex.

        """
        if self.source is NO_VERTEX and self.destination is NO_VERTEX:
            raise EmptyEdgeError
        if self.source == self.destination:
            raise SelfLoopError(self.source)

    def reversed(self) -> Edge[T]:
        """Return the edge with source and destination swapped."""
        return Edge(self.destination, self.source)

    def __iter__(self) -> Iterator[T | NoVertex]:
        yield self.source
        yield self.destination
