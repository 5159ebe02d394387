"""Topological sorting of directed graphs with cycle detection."""

__all__ = [
    "NO_VERTEX",
    "CycleError",
    "DagsortError",
    "Edge",
    "EdgeFileError",
    "EdgeLike",
    "EdgeTypeError",
    "EmptyEdgeError",
    "FileFormat",
    "Graph",
    "NoVertex",
    "SelfLoopError",
    "build_graph",
    "dump_order",
    "kahn_sort",
    "load_edges",
    "parse_edges",
    "reverse_order",
    "toposort",
    "toposort_reversed",
]

from ._edge import NO_VERTEX, Edge, NoVertex
from ._errors import CycleError, DagsortError, EdgeTypeError, EmptyEdgeError, SelfLoopError
from ._graph import EdgeLike, Graph, build_graph, kahn_sort, reverse_order
from ._io import EdgeFileError, FileFormat, dump_order, load_edges, parse_edges
from ._sort import toposort, toposort_reversed
