"""Breadth-first traversal."""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Iterator, List, Optional, Tuple

from tgfgraph.graph.store import VertexHandle, VertexStore

logger = logging.getLogger("tgfgraph.graph.traversal")


class BreadthFirstWalk:
    """Restartable breadth-first walk from a seed vertex.

    Iterating yields ``(id, value)`` for every vertex reachable from the seed
    through resolvable edges, each exactly once, in layer order. Each call to
    ``iter()`` starts over, so the walk reflects the graph as it is when
    iteration begins.
    """

    def __init__(self, store: VertexStore, seed: VertexHandle) -> None:
        self._store = store
        self.seed = seed

    def __iter__(self) -> Iterator[Tuple[Hashable, Optional[Any]]]:
        for handle in self._walk():
            vertex = self._store.get(handle)
            yield vertex.id, vertex.value

    def handles(self) -> List[VertexHandle]:
        """Return vertex handles in visit order."""
        return list(self._walk())

    def visit(self, callback: Callable[[Hashable, Optional[Any]], None]) -> int:
        """Call ``callback(id, value)`` for each visited vertex.

        Returns:
            int: Number of vertices visited.
        """
        count = 0
        for vertex_id, value in self:
            callback(vertex_id, value)
            count += 1
        return count

    def _walk(self) -> Iterator[VertexHandle]:
        # The frontier doubles as the queue and the visit record; `seen`
        # mirrors it for membership tests.
        frontier: List[VertexHandle] = [self.seed]
        seen = {self.seed}
        i = 0
        while i < len(frontier):
            handle = frontier[i]
            i += 1
            vertex = self._store.resolve(handle)
            if vertex is None:
                continue
            yield handle
            for half in vertex.edges:
                neighbor = half.neighbor
                if neighbor in seen or self._store.resolve(neighbor) is None:
                    continue
                seen.add(neighbor)
                frontier.append(neighbor)
        logger.debug("BFS from handle %d visited %d vertices", self.seed, len(frontier))
