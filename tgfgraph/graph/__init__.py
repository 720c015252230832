"""Graph engine: vertex storage, edges, traversal."""

from tgfgraph.graph.edges import EdgeHalf, EdgeLinker
from tgfgraph.graph.errors import (
    EdgeNotFoundError,
    EmptyGraphError,
    GraphError,
    GraphFormatError,
    UnresolvedEdgeError,
    VertexNotFoundError,
)
from tgfgraph.graph.graph import Graph
from tgfgraph.graph.store import Vertex, VertexHandle, VertexStore
from tgfgraph.graph.traversal import BreadthFirstWalk

__all__ = [
    "BreadthFirstWalk",
    "EdgeHalf",
    "EdgeLinker",
    "EdgeNotFoundError",
    "EmptyGraphError",
    "Graph",
    "GraphError",
    "GraphFormatError",
    "UnresolvedEdgeError",
    "Vertex",
    "VertexHandle",
    "VertexNotFoundError",
    "VertexStore",
]
