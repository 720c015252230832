"""Graph export to other representations."""

from .json import export_json
from .networkx import to_networkx

__all__ = ["export_json", "to_networkx"]
