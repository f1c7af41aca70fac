"""All-pairs shortest paths using Dijkstra's algorithm.

The engine runs single-source Dijkstra once per vertex of a
``WeightedDigraph`` and records, for every ordered pair, the shortest
distance and the predecessor of the destination on that path. Paths are
rebuilt from the predecessor table on demand.

Edge weights are assumed non-negative; the graph rejects negative
weights at insertion time.
"""

from __future__ import annotations

import heapq
import logging
from typing import List, Literal, Optional, Tuple

from ..domain.errors import ConfigurationError, VertexOutOfRangeError
from ..domain.models import (
    NO_PREDECESSOR,
    UNREACHABLE,
    Distance,
    EngineState,
    PathResult,
    ShortestPathEntry,
)
from ..monitoring import log_duration
from .weighted_graph import WeightedDigraph

Selection = Literal["scan", "heap"]

_SELECTIONS = ("scan", "heap")


class ShortestPathEngine:
    """Distance/predecessor table for every ordered pair of vertices.

    The table belongs to the engine, not to the graph: the graph is only
    read during ``compute_all``. Any later edge mutation makes the table
    stale; ``is_stale`` reports it and ``ensure_current`` recomputes.

    Attributes:
        graph: The graph the table is computed for.
        selection: How the next vertex to settle is chosen. ``"scan"``
            walks every vertex (O(N) per step); ``"heap"`` uses a binary
            heap keyed by ``(distance, index)``. Both settle vertices in
            the same order, lowest index first on ties, so they produce
            identical tables.
    """

    def __init__(self, graph: WeightedDigraph, selection: Selection = "scan") -> None:
        if selection not in _SELECTIONS:
            raise ConfigurationError(
                f"Unknown vertex selection strategy: {selection!r}",
                setting_name="selection",
                expected_type=" | ".join(_SELECTIONS),
            )
        self.graph = graph
        self.selection: Selection = selection
        self.state = EngineState.UNINITIALIZED
        self._table: List[List[ShortestPathEntry]] = []
        self._size = 0
        self._computed_revision: Optional[int] = None
        self._warned_revision: Optional[int] = None
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Computation
    # ------------------------------------------------------------------

    def compute_all(self) -> None:
        """Rebuild the whole table from scratch.

        After return, ``distance(s, d)`` is the minimum total weight of any
        path from ``s`` to ``d`` (0 when ``s == d``), or ``UNREACHABLE``.
        """
        with log_duration(self._logger, "compute_all"):
            self._reset_table()
            self.state = EngineState.RUNNING
            for source in range(1, self._size + 1):
                if self.selection == "heap":
                    self._relax_from_heap(source)
                else:
                    self._relax_from_scan(source)
            self._computed_revision = self.graph.revision
            self.state = EngineState.READY

        self._logger.debug(
            "Shortest-path table computed",
            extra={"vertices": self._size, "selection": self.selection},
        )

    def ensure_current(self) -> bool:
        """Recompute the table if it is missing or stale.

        Returns:
            True if a computation was run.
        """
        if not self.is_stale:
            return False
        self.compute_all()
        return True

    @property
    def is_computed(self) -> bool:
        return self.state == EngineState.READY

    @property
    def is_stale(self) -> bool:
        """True until computed, and after any graph mutation since."""
        return not self.is_computed or self._computed_revision != self.graph.revision

    def _reset_table(self) -> None:
        self._size = self.graph.vertex_count
        self._table = [
            [ShortestPathEntry() for _ in range(self._size + 1)]
            for _ in range(self._size + 1)
        ]
        self.state = EngineState.TABLE_RESET

    def _relax_from_scan(self, source: int) -> None:
        row = self._table[source]
        row[source].distance = 0
        row[source].predecessor = source

        for _ in range(1, self._size):
            vertex = self._lowest_distance_vertex(source)
            if vertex == NO_PREDECESSOR:
                return
            self._settle(row, vertex)

    def _relax_from_heap(self, source: int) -> None:
        row = self._table[source]
        row[source].distance = 0
        row[source].predecessor = source

        heap: List[Tuple[Distance, int]] = [(0, source)]
        settled = 0
        while heap and settled < self._size - 1:
            distance, vertex = heapq.heappop(heap)
            if row[vertex].visited or distance > row[vertex].distance:
                continue
            self._settle(row, vertex)
            settled += 1
            for edge in self.graph.edges_of(vertex):
                target = row[edge.destination]
                if not target.visited and target.predecessor == vertex:
                    heapq.heappush(heap, (target.distance, edge.destination))

    def _settle(self, row: List[ShortestPathEntry], vertex: int) -> None:
        """Mark ``vertex`` visited and relax its outgoing edges."""
        current = row[vertex]
        current.visited = True
        for edge in self.graph.edges_of(vertex):
            target = row[edge.destination]
            if target.visited:
                continue
            candidate = current.distance + edge.weight
            if candidate < target.distance:
                target.distance = candidate
                target.predecessor = vertex

    def _lowest_distance_vertex(self, source: int) -> int:
        """Return the unvisited vertex with the smallest finite distance.

        Ties go to the lowest index. Returns NO_PREDECESSOR when every
        remaining vertex is unreachable.
        """
        lowest: Distance = UNREACHABLE
        chosen = NO_PREDECESSOR
        for index, entry in enumerate(self._table[source]):
            if index == 0:
                continue
            if not entry.visited and entry.distance < lowest:
                lowest = entry.distance
                chosen = index
        return chosen

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def distance(self, source: int, destination: int) -> Distance:
        """Return the shortest distance, or ``UNREACHABLE``.

        Before the first ``compute_all`` every pair reads as unreachable.
        """
        cell = self._cell(source, destination)
        return UNREACHABLE if cell is None else cell.distance

    def entry(self, source: int, destination: int) -> ShortestPathEntry:
        """Return a copy of the table cell for ``(source, destination)``."""
        cell = self._cell(source, destination)
        if cell is None:
            return ShortestPathEntry()
        return ShortestPathEntry(cell.distance, cell.predecessor, cell.visited)

    def reconstruct_path(self, source: int, destination: int) -> List[int]:
        """Return the vertices of a shortest path, source and destination included.

        Returns:
            ``[source]`` when both ends are the same vertex, an empty list
            when ``destination`` is unreachable or nothing has been computed.
        """
        cell = self._cell(source, destination)
        if cell is None or cell.predecessor == NO_PREDECESSOR:
            return []

        row = self._table[source]
        path = [destination]
        current = destination
        while current != source:
            current = row[current].predecessor
            path.append(current)
        path.reverse()
        return path

    def reconstruct_labels(self, source: int, destination: int) -> List[str]:
        """Return the labels of the vertices on ``reconstruct_path``."""
        return [
            self.graph.label(index)
            for index in self.reconstruct_path(source, destination)
        ]

    def path_result(self, source: int, destination: int) -> PathResult:
        path = self.reconstruct_path(source, destination)
        return PathResult(
            source=source,
            destination=destination,
            distance=self.distance(source, destination),
            path=tuple(path),
            labels=tuple(self.graph.label(index) for index in path),
        )

    def _cell(self, source: int, destination: int) -> Optional[ShortestPathEntry]:
        self._check_index(source)
        self._check_index(destination)
        # A table sized for another vertex count no longer lines up with the graph.
        if not self.is_computed or self.graph.vertex_count != self._size:
            return None
        if (
            self._computed_revision != self.graph.revision
            and self._warned_revision != self.graph.revision
        ):
            self._warned_revision = self.graph.revision
            self._logger.warning(
                "Reading a stale shortest-path table",
                extra={
                    "computed_revision": self._computed_revision,
                    "graph_revision": self.graph.revision,
                },
            )
        return self._table[source][destination]

    def _check_index(self, index: int) -> None:
        size = self._size if self.is_computed else self.graph.vertex_count
        if not 1 <= index <= size:
            raise VertexOutOfRangeError(
                f"Vertex {index} is outside [1, {size}]",
                index=index,
                vertex_count=size,
            )

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def clone(self, graph: Optional[WeightedDigraph] = None) -> ShortestPathEngine:
        """Return an independent copy of the engine and its table.

        Args:
            graph: Graph for the copy to read from. Defaults to a deep copy
                of this engine's graph.
        """
        copy = ShortestPathEngine(
            graph if graph is not None else self.graph.clone(),
            selection=self.selection,
        )
        copy.state = self.state
        copy._size = self._size
        copy._computed_revision = self._computed_revision
        copy._warned_revision = self._warned_revision
        copy._table = [
            [ShortestPathEntry(e.distance, e.predecessor, e.visited) for e in row]
            for row in self._table
        ]
        return copy

    def __repr__(self) -> str:
        return (
            f"ShortestPathEngine(vertices={self.graph.vertex_count}, "
            f"selection={self.selection!r}, state={self.state.name})"
        )
