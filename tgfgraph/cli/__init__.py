"""Command implementations for the tgfgraph CLI."""

from .demo import build_sample_graph, demo_command
from .export import export_command
from .traverse import bfs_command

__all__ = ["bfs_command", "build_sample_graph", "demo_command", "export_command"]
