"""Configuration schema and loading for tgfgraph."""

from .loader import load_graph_config
from .schema import CodecConfig, GraphConfig

__all__ = [
    "CodecConfig",
    "GraphConfig",
    "load_graph_config",
]
