"""Graph module providing the sort engine.

This module contains:
- Graph[T]: A generic, immutable adjacency-list graph
- build_graph: Compile an edge list into a Graph
- kahn_sort: Order the vertices of a Graph by their edges
- reverse_order: Reverse a computed order
"""

from ._algorithms import kahn_sort, reverse_order
from ._graph import EdgeLike, Graph, build_graph

__all__ = ["EdgeLike", "Graph", "build_graph", "kahn_sort", "reverse_order"]
