"""Text serialization of graphs."""

from .tgf import dump, dumps, load, loads

__all__ = ["dump", "dumps", "load", "loads"]
