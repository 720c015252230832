"""Conversion to NetworkX graphs."""

import logging

import networkx as nx

from tgfgraph.graph.graph import Graph

logger = logging.getLogger("tgfgraph.export.networkx")


def to_networkx(graph: Graph) -> nx.MultiGraph:
    """Convert a graph to a NetworkX MultiGraph.

    Nodes are keyed by vertex handle and carry ``id`` and ``value``
    attributes. Every logical edge becomes one multigraph edge keyed by the
    edge key, with a ``label`` attribute. Halves pointing at deleted
    vertices are left out.

    Args:
        graph: Graph to convert.

    Returns:
        nx.MultiGraph: Converted graph.
    """
    native = nx.MultiGraph()
    for handle, vertex in graph.vertices():
        native.add_node(handle, id=vertex.id, value=vertex.value)

    skipped = 0
    for handle, vertex in graph.vertices():
        for half in vertex.edges:
            if graph.resolve(half.neighbor) is None:
                skipped += 1
                continue
            if native.has_edge(handle, half.neighbor, key=half.key):
                continue
            native.add_edge(handle, half.neighbor, key=half.key, label=half.label)

    if skipped:
        logger.warning("Skipped %d dangling edge half(s) during conversion", skipped)
    logger.debug(
        "Converted graph to NetworkX: %d nodes, %d edges",
        native.number_of_nodes(),
        native.number_of_edges(),
    )
    return native
