"""Helpers for loading tgfgraph configuration from TOML/JSON sources.

`load_graph_config` accepts:

* None -> default GraphConfig
* dict -> GraphConfig.from_dict
* Path / path-like string -> load .toml/.json from filesystem
* Inline JSON/TOML strings
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from tgfgraph.config.schema import GraphConfig

logger = logging.getLogger("tgfgraph.config.loader")

ConfigSource = Union[str, Path, Dict[str, Any], None]


def _guess_format(text: str) -> str:
    return "json" if text.lstrip().startswith(("{", "[")) else "toml"


def load_graph_config(source: ConfigSource) -> GraphConfig:
    """Load GraphConfig from various configuration sources.

    Args:
        source: One of:
            * None: returns the default GraphConfig
            * dict: treated as already-parsed configuration mapping
            * str/Path: either a filesystem path to a .toml/.json file,
              or an inline TOML/JSON string (auto-detected)

    Returns:
        GraphConfig instance.

    Raises:
        ValueError: If the parsed document is not a mapping.
        TypeError: If ``source`` has an unsupported type.
    """
    if source is None:
        logger.debug("No config source provided; using default GraphConfig")
        return GraphConfig()

    if isinstance(source, dict):
        logger.debug("Loading GraphConfig from provided dict")
        return GraphConfig.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        fmt: Optional[str] = None

        if isinstance(source, Path) or ("\n" not in source and path.is_file()):
            text = path.read_text(encoding="utf-8")
            suffix = path.suffix.lower()
            if suffix in {".toml", ".tml"}:
                fmt = "toml"
            elif suffix == ".json":
                fmt = "json"
            else:
                fmt = _guess_format(text)
            logger.info("Loading configuration from file: %s (fmt=%s)", path, fmt)
        else:
            text = str(source)
            fmt = _guess_format(text)
            logger.info("Loading configuration from inline %s string", fmt)

        data = json.loads(text) if fmt == "json" else tomllib.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Top-level configuration must be a mapping/dict")

        return GraphConfig.from_dict(data)

    raise TypeError(f"Unsupported config source type: {type(source)!r}")


__all__ = ["load_graph_config"]
