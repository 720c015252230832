"""CLI command to convert a TGF file to node-link JSON."""

from __future__ import annotations

import logging
from pathlib import Path

from tgfgraph.config.schema import GraphConfig
from tgfgraph.export import export_json
from tgfgraph.graph import Graph, GraphError

logger = logging.getLogger("tgfgraph.cli.export")


def export_command(args) -> int:
    """Execute the export command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        int: Exit code (0 for success, non-zero for failure).
    """
    config = getattr(args, "graph_config", None) or GraphConfig()
    source = Path(args.graph)
    output = Path(args.output)

    try:
        graph = Graph.read(source, config.codec)
        export_json(graph, output)
    except (GraphError, OSError) as exc:
        logger.error("Export of %s failed: %s", source, exc)
        return 1
    return 0
