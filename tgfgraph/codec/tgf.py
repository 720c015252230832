"""Trivial Graph Format (TGF) encoding and decoding.

Layout::

    <vertex-id> <value-or-empty>
    ...
    #
    <id1> <id2> <label-or-empty>
    ...

Fields are whitespace delimited. Everything after the id (or the id pair)
is the value (or label), re-joined with single spaces, so runs of
whitespace inside values are normalized. Only ASCII whitespace separates
fields and only a line feed, optionally preceded by a carriage return,
ends a line. There is no escaping, so dumps() refuses ids, values and
labels that would not read back.
"""

from __future__ import annotations

import logging
import os
import re
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

from tgfgraph.config.schema import CodecConfig
from tgfgraph.graph.errors import GraphFormatError, UnresolvedEdgeError
from tgfgraph.graph.graph import Graph
from tgfgraph.graph.store import VertexHandle

logger = logging.getLogger("tgfgraph.codec.tgf")

PathLike = Union[str, Path]

# ASCII whitespace only; other Unicode spaces stay inside values.
_FIELD_SPLIT = re.compile(r"[ \t\x0c\r]+")
_LINE_BREAKS = ("\n", "\r")


def _render(value: Optional[Any]) -> str:
    return "" if value is None else str(value)


def _join_tail(tokens: List[str]) -> Optional[str]:
    """Rebuild an optional value from the trailing tokens of a line."""
    return " ".join(tokens) if tokens else None


def _fields(line: str) -> List[str]:
    return [token for token in _FIELD_SPLIT.split(line) if token]


def _lines(block: str) -> List[str]:
    """Split on newlines only, dropping a trailing carriage return."""
    return [line[:-1] if line.endswith("\r") else line for line in block.split("\n")]


def _check_field(text: str, what: str, forbidden: Tuple[str, ...]) -> str:
    for char in forbidden:
        if char in text:
            raise GraphFormatError(f"{what} {text!r} contains {char!r} and cannot be written")
    return text


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def dumps(graph: Graph, config: Optional[CodecConfig] = None) -> str:
    """Render a graph as TGF text.

    Each logical edge is written once, oriented the way it is first met
    while walking the vertices in order.

    Args:
        graph: Graph to render.
        config: Codec configuration.

    Returns:
        str: TGF document, newline terminated.

    Raises:
        UnresolvedEdgeError: If an edge points at a deleted vertex.
        GraphFormatError: If an id, value or label could not be read back:
            an empty id or one containing whitespace, a separator in a
            vertex id or value, or a line break anywhere.
    """
    config = config or CodecConfig()
    id_forbidden = (config.separator, " ", "\t", "\x0c") + _LINE_BREAKS
    value_forbidden = (config.separator,) + _LINE_BREAKS
    lines: List[str] = []
    edges: Dict[int, Tuple[Hashable, Hashable, str]] = {}

    for handle, vertex in graph.vertices():
        vertex_id = _check_field(str(vertex.id), "Vertex id", id_forbidden)
        if not vertex_id:
            raise GraphFormatError(f"Vertex id of handle {handle} renders empty")
        value = _check_field(_render(vertex.value), "Value", value_forbidden)
        lines.append(f"{vertex_id} {value}")
        for half in vertex.edges:
            neighbor = graph.resolve(half.neighbor)
            if neighbor is None:
                raise UnresolvedEdgeError(
                    f"Edge {half.key} of vertex {vertex.id} (handle {handle}) "
                    f"points at deleted handle {half.neighbor}"
                )
            # Both halves share the key, so the second one is skipped.
            if half.key in edges:
                continue
            edges[half.key] = (
                vertex.id,
                neighbor.id,
                _check_field(_render(half.label), "Label", _LINE_BREAKS),
            )

    lines.append(config.separator)
    lines.extend(f"{id1} {id2} {label}" for id1, id2, label in edges.values())

    logger.debug("Rendered %d vertices and %d edges", len(graph), len(edges))
    return "\n".join(lines) + "\n"


def dump(graph: Graph, path: PathLike, config: Optional[CodecConfig] = None) -> None:
    """Write a graph to a TGF file.

    The document is rendered in memory before the file is touched, so a
    graph that cannot be serialized leaves an existing file unchanged. With
    ``atomic_write`` the text goes to a temporary file in the same directory
    which then replaces the target.

    Args:
        graph: Graph to write.
        path: Destination file.
        config: Codec configuration.

    Raises:
        UnresolvedEdgeError: If an edge points at a deleted vertex.
        GraphFormatError: If a field could not be read back.
        OSError: If the file cannot be written.
    """
    config = config or CodecConfig()
    output_path = Path(path)
    text = dumps(graph, config)

    logger.info("Writing graph to TGF: %s", output_path)
    if not config.atomic_write:
        output_path.write_text(text, encoding=config.encoding)
        return

    tmp = tempfile.NamedTemporaryFile(
        "w",
        encoding=config.encoding,
        dir=output_path.parent,
        prefix=f".{output_path.name}.",
        suffix=".tmp",
        delete=False,
    )
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            tmp.write(text)
        os.chmod(tmp_path, _target_mode(output_path))
        os.replace(tmp_path, output_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def _target_mode(path: Path) -> int:
    """Permission bits the written file should end up with.

    An existing file keeps its mode; a new one gets what a plain open()
    would give it under the current umask.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def loads(text: str, config: Optional[CodecConfig] = None) -> Graph:
    """Build a graph from TGF text.

    Ids, values and labels are kept as strings. When several vertices share
    an id, edge lines bind to the last of them.

    Args:
        text: TGF document.
        config: Codec configuration.

    Returns:
        Graph: The decoded graph.

    Raises:
        GraphFormatError: If the separator is missing, an edge line has
            fewer than two fields or refers to an undeclared vertex id.
    """
    config = config or CodecConfig()
    vertex_block, found, edge_block = text.partition(config.separator)
    if not found:
        raise GraphFormatError(f"Missing {config.separator!r} separator between vertices and edges")

    graph = Graph()
    by_id: Dict[str, VertexHandle] = {}

    for lineno, line in enumerate(_lines(vertex_block), start=1):
        tokens = _fields(line)
        if not tokens:
            continue
        vertex_id = tokens[0]
        if vertex_id in by_id:
            logger.debug("Duplicate vertex id %s on line %d", vertex_id, lineno)
        by_id[vertex_id] = graph.add_vertex(vertex_id, _join_tail(tokens[1:]))

    # The first edge-block line is the rest of the separator line and is
    # ignored.
    separator_line = vertex_block.count("\n") + 1
    edge_lines = _lines(edge_block)[1:]
    for offset, line in enumerate(edge_lines, start=1):
        tokens = _fields(line)
        if not tokens:
            continue
        current = separator_line + offset
        if len(tokens) < 2:
            raise GraphFormatError("Edge line needs two vertex ids", lineno=current)
        v1 = by_id.get(tokens[0])
        v2 = by_id.get(tokens[1])
        for vertex_id, handle in ((tokens[0], v1), (tokens[1], v2)):
            if handle is None:
                raise GraphFormatError(
                    f"Failed to add edge. Point {vertex_id} does not exist", lineno=current
                )
        graph.add_edge(_join_tail(tokens[2:]), v1, v2)

    logger.debug("Decoded %d vertices and %d edges", len(graph), graph.edge_count())
    return graph


def load(path: PathLike, config: Optional[CodecConfig] = None) -> Graph:
    """Read a graph from a TGF file.

    Raises:
        GraphFormatError: If the file content is malformed or cannot be
            decoded with the configured encoding.
        OSError: If the file cannot be read.
    """
    config = config or CodecConfig()
    input_path = Path(path)
    logger.info("Reading graph from TGF: %s", input_path)
    try:
        text = input_path.read_text(encoding=config.encoding)
    except UnicodeDecodeError as exc:
        logger.error("Failed to decode %s as %s: %s", input_path, config.encoding, exc)
        raise GraphFormatError(f"{input_path} is not valid {config.encoding} text") from exc
    try:
        return loads(text, config)
    except GraphFormatError as exc:
        logger.error("Failed to load %s: %s", input_path, exc)
        raise
