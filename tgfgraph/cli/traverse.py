"""CLI command to load a TGF file and print its breadth-first walk."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from tgfgraph.config.schema import GraphConfig
from tgfgraph.graph import BreadthFirstWalk, Graph, GraphError

logger = logging.getLogger("tgfgraph.cli.traverse")


def print_walk(console: Console, walk: BreadthFirstWalk) -> int:
    """Print one ``<id> <value>`` line per visited vertex.

    Returns:
        int: Number of vertices printed.
    """
    return walk.visit(
        lambda vertex_id, value: console.print(
            f"{vertex_id} {'' if value is None else value}",
            markup=False,
            highlight=False,
        )
    )


def bfs_command(args) -> int:
    """Execute the bfs command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    config = getattr(args, "graph_config", None) or GraphConfig()
    source = Path(args.graph)
    start_id = getattr(args, "start", None)

    try:
        graph = Graph.read(source, config.codec)
        start = None
        if start_id is not None:
            start = graph.find(start_id)
            if start is None:
                logger.error("Vertex %s not found in %s", start_id, source)
                return 1
        walk = graph.bfs(start)
    except (GraphError, OSError) as exc:
        logger.error("BFS over %s failed: %s", source, exc)
        return 1

    count = print_walk(Console(), walk)
    logger.info("Visited %d of %d vertices", count, len(graph))
    return 0
