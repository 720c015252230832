"""Vertex storage.

Vertices live in an append-only arena and are addressed by stable integer
handles. Deleting a vertex tombstones its slot: the handle is never reused,
and edge halves on other vertices that still point at it simply stop
resolving instead of dangling.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Hashable, Iterator, List, NewType, Optional, Tuple

from tgfgraph.graph.errors import VertexNotFoundError

if TYPE_CHECKING:
    from tgfgraph.graph.edges import EdgeHalf

logger = logging.getLogger("tgfgraph.graph.store")

VertexHandle = NewType("VertexHandle", int)


@dataclass
class Vertex:
    """A graph vertex.

    Two vertices compare equal when their ids and values are equal; the edge
    list takes no part in equality.

    Attributes:
        id: Hashable identifier, rendered with str() when serialized.
        value: Optional payload, rendered with str() when serialized.
        edges: Edge halves owned by this vertex, in insertion order.
    """

    id: Hashable
    value: Optional[Any] = None
    edges: List[EdgeHalf] = field(default_factory=list, compare=False, repr=False)


class VertexStore:
    """Arena of vertex slots in insertion order."""

    def __init__(self) -> None:
        self._slots: List[Optional[Vertex]] = []
        self._live = 0

    def add(self, vertex_id: Hashable, value: Optional[Any] = None) -> VertexHandle:
        """Append a new vertex.

        No uniqueness check is made on ``vertex_id``.

        Args:
            vertex_id: Vertex identifier.
            value: Optional vertex value.

        Returns:
            VertexHandle: Handle of the new vertex.
        """
        handle = VertexHandle(len(self._slots))
        self._slots.append(Vertex(id=vertex_id, value=value))
        self._live += 1
        logger.debug("Added vertex %s as handle %d", vertex_id, handle)
        return handle

    def delete(self, handle: VertexHandle) -> bool:
        """Remove a vertex from the store.

        Edge halves held by other vertices are left as they are and become
        unresolvable. Deleting an unknown or already deleted handle is a
        no-op that is only reported.

        Args:
            handle: Handle of the vertex to delete.

        Returns:
            bool: True if a vertex was removed.
        """
        vertex = self.resolve(handle)
        if vertex is None:
            logger.warning("Couldn't find vertex for handle %s, nothing deleted", handle)
            return False

        self._slots[handle] = None
        self._live -= 1
        logger.debug("Deleted vertex %s (handle %d)", vertex.id, handle)
        return True

    def resolve(self, handle: VertexHandle) -> Optional[Vertex]:
        """Return the vertex behind a handle, or None if it is gone."""
        if not isinstance(handle, int) or handle < 0 or handle >= len(self._slots):
            return None
        return self._slots[handle]

    def get(self, handle: VertexHandle) -> Vertex:
        """Return the vertex behind a handle.

        Raises:
            VertexNotFoundError: If the handle is unknown or deleted.
        """
        vertex = self.resolve(handle)
        if vertex is None:
            raise VertexNotFoundError(f"No live vertex for handle {handle}")
        return vertex

    def set_value(self, handle: VertexHandle, value: Optional[Any]) -> None:
        """Replace the value of a live vertex."""
        vertex = self.get(handle)
        logger.debug("Vertex %s value %r -> %r", vertex.id, vertex.value, value)
        vertex.value = value

    def first(self) -> Optional[VertexHandle]:
        """Return the handle of the first live vertex, if any."""
        for handle, _ in self:
            return handle
        return None

    def find(self, vertex_id: Hashable) -> Optional[VertexHandle]:
        """Return the handle of the first live vertex with ``vertex_id``."""
        for handle, vertex in self:
            if vertex.id == vertex_id:
                return handle
        return None

    def __iter__(self) -> Iterator[Tuple[VertexHandle, Vertex]]:
        for index, vertex in enumerate(self._slots):
            if vertex is not None:
                yield VertexHandle(index), vertex

    def __len__(self) -> int:
        return self._live

    def __contains__(self, handle: object) -> bool:
        return isinstance(handle, int) and self.resolve(VertexHandle(handle)) is not None
