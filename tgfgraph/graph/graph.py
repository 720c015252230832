"""Graph facade.

Graph is the public entry point: it owns the vertex store, wires the edge
operations to it and exposes traversal and file persistence.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Hashable, Iterator, List, Optional, Tuple, Union

from tgfgraph.graph.edges import EdgeHalf, EdgeLinker
from tgfgraph.graph.errors import EmptyGraphError
from tgfgraph.graph.store import Vertex, VertexHandle, VertexStore
from tgfgraph.graph.traversal import BreadthFirstWalk

if TYPE_CHECKING:
    from tgfgraph.config.schema import CodecConfig

logger = logging.getLogger("tgfgraph.graph.graph")


class Graph:
    """Mutable undirected graph with labelled edges.

    Vertices are kept in insertion order and addressed by the handles
    returned from add_vertex(). Ids need not be unique.

    Example:
        >>> graph = Graph()
        >>> a = graph.add_vertex(1, "first")
        >>> b = graph.add_vertex(2)
        >>> graph.add_edge("a-b", a, b)
        0
        >>> list(graph.bfs(a))
        [(1, 'first'), (2, None)]
    """

    def __init__(self) -> None:
        self._store = VertexStore()
        self._linker = EdgeLinker(self._store)

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_vertex(self, vertex_id: Hashable, value: Optional[Any] = None) -> VertexHandle:
        """Add a vertex and return its handle."""
        return self._store.add(vertex_id, value)

    def delete_vertex(self, handle: VertexHandle) -> bool:
        """Remove a vertex; edges pointing at it become unresolvable.

        Returns:
            bool: False (after logging a warning) if there was nothing to delete.
        """
        return self._store.delete(handle)

    def vertex(self, handle: VertexHandle) -> Vertex:
        """Return the live vertex behind ``handle``.

        Raises:
            VertexNotFoundError: If the vertex was deleted.
        """
        return self._store.get(handle)

    def resolve(self, handle: VertexHandle) -> Optional[Vertex]:
        """Return the vertex behind ``handle`` or None."""
        return self._store.resolve(handle)

    def set_value(self, handle: VertexHandle, value: Optional[Any]) -> None:
        """Change the value of a vertex."""
        self._store.set_value(handle, value)

    def find(self, vertex_id: Hashable) -> Optional[VertexHandle]:
        """Return the handle of the first vertex with ``vertex_id``."""
        return self._store.find(vertex_id)

    def handles(self) -> List[VertexHandle]:
        """Return handles of live vertices in insertion order."""
        return [handle for handle, _ in self._store]

    def vertices(self) -> Iterator[Tuple[VertexHandle, Vertex]]:
        """Iterate ``(handle, vertex)`` pairs in insertion order."""
        return iter(self._store)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, label: Optional[Any], v1: VertexHandle, v2: VertexHandle) -> int:
        """Connect ``v1`` and ``v2`` with an optionally labelled edge.

        Returns:
            int: Key shared by the two halves of the edge.
        """
        return self._linker.add_edge(label, v1, v2)

    def check_edge(self, v1: VertexHandle, v2: VertexHandle) -> int:
        """Return the position in v1's edge list of the first half to v2.

        Raises:
            EdgeNotFoundError: If there is no such half.
        """
        return self._linker.check_edge(v1, v2)

    def delete_edge(self, v1: VertexHandle, v2: VertexHandle) -> None:
        """Remove one edge between ``v1`` and ``v2``, all or nothing.

        Raises:
            EdgeNotFoundError: If either half is missing.
        """
        self._linker.delete_edge(v1, v2)

    def edges(self, handle: VertexHandle) -> List[EdgeHalf]:
        """Return a copy of the edge halves held by a vertex."""
        return list(self._store.get(handle).edges)

    def degree(self, handle: VertexHandle) -> int:
        """Number of edge halves on a vertex; a self-loop counts twice."""
        return len(self._store.get(handle).edges)

    def edge_count(self) -> int:
        """Number of distinct logical edges with at least one live half."""
        return len({half.key for _, vertex in self._store for half in vertex.edges})

    def prune_dangling_edges(self) -> int:
        """Remove halves pointing at deleted vertices.

        Returns:
            int: Number of halves removed.
        """
        return self._linker.prune_dangling()

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def bfs(self, start: Optional[VertexHandle] = None) -> BreadthFirstWalk:
        """Breadth-first walk from ``start`` or from the first vertex.

        Args:
            start: Optional seed vertex.

        Returns:
            BreadthFirstWalk: Iterable of ``(id, value)`` pairs.

        Raises:
            EmptyGraphError: If no start is given and the graph is empty.
            VertexNotFoundError: If ``start`` was deleted.
        """
        if start is None:
            start = self._store.first()
            if start is None:
                raise EmptyGraphError("Start point wasn't provided and graph is empty")
        else:
            self._store.get(start)
        return BreadthFirstWalk(self._store, start)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def write(self, path: Union[str, Path], config: Optional[CodecConfig] = None) -> None:
        """Write the graph to ``path`` in TGF."""
        from tgfgraph.codec.tgf import dump

        dump(self, path, config)

    @classmethod
    def read(cls, path: Union[str, Path], config: Optional[CodecConfig] = None) -> Graph:
        """Load a graph from a TGF file; ids, values and labels are strings."""
        from tgfgraph.codec.tgf import load

        return load(path, config)

    def __len__(self) -> int:
        return len(self._store)

    def __iter__(self) -> Iterator[Vertex]:
        for _, vertex in self._store:
            yield vertex

    def __contains__(self, handle: object) -> bool:
        return handle in self._store

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self)}, edges={self.edge_count()})"
