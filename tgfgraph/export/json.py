"""JSON export for graphs."""

import json
import logging
from pathlib import Path

import networkx as nx

from tgfgraph.export.networkx import to_networkx
from tgfgraph.graph.graph import Graph

logger = logging.getLogger("tgfgraph.export.json")


def export_json(graph: Graph, output_path: Path) -> None:
    """Export graph to node-link JSON.

    Args:
        graph: Graph to export.
        output_path: Output file path.
    """
    logger.info("Exporting graph to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)

    native = to_networkx(graph)
    data = nx.readwrite.json_graph.node_link_data(native, edges="edges")

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)

    logger.info("JSON export completed: %d nodes, %d edges",
                native.number_of_nodes(), native.number_of_edges())
