"""Undirected labelled edges.

Each logical edge is stored as two EdgeHalf records, one in the edge list of
each endpoint. Both halves carry the same label object and the same key. A
half refers to its neighbor by handle only, so a deleted neighbor makes the
half unresolvable rather than keeping the vertex alive.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from tgfgraph.graph.errors import EdgeNotFoundError
from tgfgraph.graph.store import VertexHandle, VertexStore

logger = logging.getLogger("tgfgraph.graph.edges")


@dataclass(frozen=True)
class EdgeHalf:
    """One endpoint's record of an undirected edge.

    Attributes:
        label: Optional edge label, shared with the twin half.
        neighbor: Handle of the vertex at the other end.
        key: Serial number of the logical edge, shared with the twin half.
    """

    label: Optional[Any]
    neighbor: VertexHandle
    key: int


class EdgeLinker:
    """Creates, looks up and removes edges between vertices of one store."""

    def __init__(self, store: VertexStore) -> None:
        self._store = store
        self._keys = itertools.count()

    def add_edge(self, label: Optional[Any], v1: VertexHandle, v2: VertexHandle) -> int:
        """Connect two vertices.

        Self-loops are allowed and store both halves on the same vertex.
        Parallel edges are not prevented.

        Args:
            label: Optional edge label.
            v1: First endpoint.
            v2: Second endpoint.

        Returns:
            int: Key of the new logical edge.

        Raises:
            VertexNotFoundError: If either endpoint is not a live vertex.
        """
        first = self._store.get(v1)
        second = self._store.get(v2)

        key = next(self._keys)
        first.edges.append(EdgeHalf(label=label, neighbor=v2, key=key))
        second.edges.append(EdgeHalf(label=label, neighbor=v1, key=key))
        logger.debug("Added edge %d %s -- %s (%r)", key, first.id, second.id, label)
        return key

    def check_edge(self, v1: VertexHandle, v2: VertexHandle) -> int:
        """Find the first half in v1's list that resolves to v2.

        Args:
            v1: Vertex whose edge list is scanned.
            v2: Expected neighbor.

        Returns:
            int: Position of the half in v1's edge list.

        Raises:
            EdgeNotFoundError: If no resolvable half points at v2.
        """
        vertex = self._store.resolve(v1)
        if vertex is not None and self._store.resolve(v2) is not None:
            for pos, half in enumerate(vertex.edges):
                if half.neighbor == v2:
                    return pos
        raise EdgeNotFoundError(f"No edge from handle {v1} to handle {v2}")

    def delete_edge(self, v1: VertexHandle, v2: VertexHandle) -> None:
        """Remove one edge between v1 and v2.

        Both directions are looked up before anything is removed, so a
        failure leaves both edge lists untouched.

        Raises:
            EdgeNotFoundError: If either direction is missing.
        """
        pos1 = self.check_edge(v1, v2)
        pos2 = self.check_edge(v2, v1)

        first = self._store.get(v1).edges
        second = self._store.get(v2).edges

        # Prefer the twin of the half found at pos1 so parallel edges keep
        # their halves paired.
        twin = _find_twin(second, first[pos1].key, exclude=pos1 if first is second else None)
        if twin is not None:
            pos2 = twin
        elif first is second:
            raise EdgeNotFoundError(f"Self-loop on handle {v1} is missing its second half")

        if first is second:
            for pos in sorted((pos1, pos2), reverse=True):
                del first[pos]
        else:
            del first[pos1]
            del second[pos2]
        logger.debug("Deleted edge between handles %d and %d", v1, v2)

    def prune_dangling(self) -> int:
        """Drop every edge half whose neighbor no longer resolves.

        Returns:
            int: Number of halves removed.
        """
        removed = 0
        for _, vertex in self._store:
            kept = [half for half in vertex.edges if self._store.resolve(half.neighbor) is not None]
            removed += len(vertex.edges) - len(kept)
            vertex.edges[:] = kept
        if removed:
            logger.info("Pruned %d dangling edge half(s)", removed)
        return removed


def _find_twin(halves: List[EdgeHalf], key: int, exclude: Optional[int] = None) -> Optional[int]:
    """Return the position of the half carrying ``key``, skipping ``exclude``."""
    for pos, half in enumerate(halves):
        if pos != exclude and half.key == key:
            return pos
    return None
