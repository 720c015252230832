"""tgfgraph - mutable undirected labelled graphs.

Vertices carry an id and an optional value and are joined by optionally
labelled edges. Graphs can be walked breadth-first and stored in Trivial
Graph Format (TGF).

Example:
    >>> from tgfgraph import Graph
    >>> graph = Graph()
    >>> a = graph.add_vertex("a")
    >>> b = graph.add_vertex("b", "second")
    >>> graph.add_edge("a to b", a, b)
    0
    >>> [vertex_id for vertex_id, _ in graph.bfs()]
    ['a', 'b']
"""

__version__ = "0.1.0"

from tgfgraph.codec import dump, dumps, load, loads
from tgfgraph.config import CodecConfig, GraphConfig, load_graph_config
from tgfgraph.graph import (
    BreadthFirstWalk,
    EdgeHalf,
    EdgeNotFoundError,
    EmptyGraphError,
    Graph,
    GraphError,
    GraphFormatError,
    UnresolvedEdgeError,
    Vertex,
    VertexHandle,
    VertexNotFoundError,
)

__all__ = [
    "BreadthFirstWalk",
    "CodecConfig",
    "EdgeHalf",
    "EdgeNotFoundError",
    "EmptyGraphError",
    "Graph",
    "GraphConfig",
    "GraphError",
    "GraphFormatError",
    "UnresolvedEdgeError",
    "Vertex",
    "VertexHandle",
    "VertexNotFoundError",
    "dump",
    "dumps",
    "load",
    "loads",
    "load_graph_config",
]
