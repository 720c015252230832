"""CLI command that builds and walks the sample graph."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from rich.console import Console

from tgfgraph.cli.traverse import print_walk
from tgfgraph.config.schema import GraphConfig
from tgfgraph.graph import Graph, GraphError, VertexHandle

logger = logging.getLogger("tgfgraph.cli.demo")


def build_sample_graph() -> Tuple[Graph, VertexHandle]:
    """Build the five-vertex sample graph.

    Vertex 1's value is changed after its first edge exists, and vertex 3
    carries a self-loop.

    Returns:
        Tuple[Graph, VertexHandle]: The graph and the handle of vertex 1.
    """
    graph = Graph()
    v1 = graph.add_vertex(1, "Test vertex")
    v2 = graph.add_vertex(2)
    v3 = graph.add_vertex(3)
    v4 = graph.add_vertex(4)
    v5 = graph.add_vertex(5)

    graph.add_edge("edge 1", v1, v2)
    graph.set_value(v1, "changed value")
    graph.add_edge("edge 2", v1, v3)
    graph.add_edge("edge 3", v2, v5)
    graph.add_edge("edge 4", v3, v3)
    graph.add_edge("edge 5", v3, v4)
    graph.add_edge("edge 6", v4, v5)
    graph.add_edge("edge 7", v1, v4)
    return graph, v1


def demo_command(args) -> int:
    """Execute the demo command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    config = getattr(args, "graph_config", None) or GraphConfig()
    output = getattr(args, "output", None)

    graph, start = build_sample_graph()
    logger.info("Built sample graph: %r", graph)

    console = Console()
    print_walk(console, graph.bfs(start))

    if output:
        try:
            graph.write(Path(output), config.codec)
        except (GraphError, OSError) as exc:
            logger.error("Failed to write %s: %s", output, exc)
            return 1
        logger.info("Sample graph written to %s", output)
    return 0
