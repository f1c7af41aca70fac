"""Directed, weighted graph stored as adjacency lists.

Vertices are identified by dense integer indices in [1, N]. Each vertex
owns an ordered list of its outgoing edges; at most one edge exists per
ordered (source, destination) pair.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ..domain.errors import (
    EdgeNotFoundError,
    InvalidLabelError,
    InvalidWeightError,
    VertexOutOfRangeError,
)
from ..domain.models import Edge, Vertex

DEFAULT_MAX_LABEL_LENGTH = 50


class WeightedDigraph:
    """Adjacency-list graph with overwrite-on-duplicate edge insertion.

    Slot 0 of the internal lists is unused so that vertex ``i`` lives at
    position ``i``. Every topology mutation bumps ``revision``, which lets
    a shortest-path table detect that it was computed for an older graph.

    Example:
        graph = WeightedDigraph(3)
        graph.insert_edge(1, 2, 5)
        graph.insert_edge(2, 3, 2)
        graph.edges_of(1)  # (Edge(destination=2, weight=5),)
    """

    def __init__(
        self,
        vertex_count: int = 0,
        max_label_length: int = DEFAULT_MAX_LABEL_LENGTH,
    ) -> None:
        self.max_label_length = max_label_length
        self._vertices: List[Vertex] = []
        self._adjacency: List[List[Edge]] = []
        self._revision = 0
        self.set_vertex_count(vertex_count)

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    @property
    def vertex_count(self) -> int:
        """Number of vertices (N)."""
        return len(self._vertices) - 1

    @property
    def revision(self) -> int:
        """Counter bumped by every topology mutation."""
        return self._revision

    def set_vertex_count(self, n: int) -> None:
        """Replace the whole graph with ``n`` unlabelled, unconnected vertices.

        Args:
            n: Number of vertices.

        Raises:
            ValueError: If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}")
        self._vertices = [Vertex(index=i) for i in range(n + 1)]
        self._adjacency = [[] for _ in range(n + 1)]
        self._revision += 1

    def set_vertex_label(self, index: int, text: str) -> None:
        """Bind a label to a vertex.

        Raises:
            VertexOutOfRangeError: If ``index`` is not in [1, N].
            InvalidLabelError: If ``text`` is longer than ``max_label_length``.
        """
        self._check_index(index)
        if len(text) > self.max_label_length:
            raise InvalidLabelError(
                f"Label for vertex {index} exceeds {self.max_label_length} characters",
                index=index,
                max_length=self.max_label_length,
            )
        self._vertices[index] = Vertex(index=index, label=text)

    def label(self, index: int) -> str:
        self._check_index(index)
        return self._vertices[index].label

    def vertex(self, index: int) -> Vertex:
        self._check_index(index)
        return self._vertices[index]

    def vertices(self) -> Tuple[Vertex, ...]:
        """Return all vertices in index order."""
        return tuple(self._vertices[1:])

    def indices(self) -> range:
        """Return the valid vertex indices, 1..N."""
        return range(1, self.vertex_count + 1)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and 1 <= index <= self.vertex_count

    def __len__(self) -> int:
        return self.vertex_count

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def insert_edge(self, source: int, destination: int, weight: int) -> bool:
        """Insert a directed edge, overwriting the weight of an existing one.

        Args:
            source: Source vertex index.
            destination: Destination vertex index.
            weight: Non-negative edge weight.

        Returns:
            True once the edge exists with the given weight.

        Raises:
            InvalidWeightError: If ``weight`` is negative.
            VertexOutOfRangeError: If either index is not in [1, N].
        """
        if weight < 0:
            raise InvalidWeightError(
                f"Edge {source}->{destination} has negative weight {weight}",
                weight=weight,
            )
        self._check_index(source)
        self._check_index(destination)

        edges = self._adjacency[source]
        for edge in edges:
            if edge.destination == destination:
                edge.weight = weight
                self._revision += 1
                return True

        edges.append(Edge(destination=destination, weight=weight))
        self._revision += 1
        return True

    def remove_edge(self, source: int, destination: int) -> bool:
        """Remove the edge ``source -> destination``.

        Returns:
            True once the edge has been removed.

        Raises:
            EdgeNotFoundError: If no such edge exists.
            VertexOutOfRangeError: If either index is not in [1, N].
        """
        self._check_index(source)
        self._check_index(destination)

        edges = self._adjacency[source]
        for position, edge in enumerate(edges):
            if edge.destination == destination:
                del edges[position]
                self._revision += 1
                return True

        raise EdgeNotFoundError(
            f"No edge {source}->{destination}",
            source=source,
            destination=destination,
        )

    def insert_edge_safe(self, source: int, destination: int, weight: int) -> bool:
        """Insert an edge, returning False instead of raising on failure."""
        try:
            return self.insert_edge(source, destination, weight)
        except (InvalidWeightError, VertexOutOfRangeError):
            return False

    def remove_edge_safe(self, source: int, destination: int) -> bool:
        """Remove an edge, returning False instead of raising on failure."""
        try:
            return self.remove_edge(source, destination)
        except (EdgeNotFoundError, VertexOutOfRangeError):
            return False

    def edges_of(self, vertex: int) -> Tuple[Edge, ...]:
        """Return the outgoing edges of ``vertex`` in insertion order.

        The returned tuple is a snapshot: later mutations of the graph do
        not change it, but the edge objects are shared with the graph and
        must not be modified by callers.
        """
        self._check_index(vertex)
        return tuple(self._adjacency[vertex])

    def iter_edges(self) -> Iterator[Tuple[int, int, int]]:
        """Yield every edge as a ``(source, destination, weight)`` triple."""
        for source in self.indices():
            for edge in self._adjacency[source]:
                yield source, edge.destination, edge.weight

    def has_edge(self, source: int, destination: int) -> bool:
        return self.edge_weight(source, destination) is not None

    def edge_weight(self, source: int, destination: int) -> Optional[int]:
        """Return the weight of ``source -> destination``, or None if absent."""
        self._check_index(source)
        for edge in self._adjacency[source]:
            if edge.destination == destination:
                return edge.weight
        return None

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency)

    # ------------------------------------------------------------------
    # Whole-graph operations
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Drop every vertex and edge."""
        self.set_vertex_count(0)

    def clone(self) -> WeightedDigraph:
        """Return an independent deep copy of the graph.

        Vertices are copied and every adjacency list is rebuilt edge by
        edge, so the copy shares no mutable state with this graph.
        """
        copy = WeightedDigraph(max_label_length=self.max_label_length)
        copy._vertices = list(self._vertices)
        copy._adjacency = [
            [Edge(destination=e.destination, weight=e.weight) for e in edges]
            for edges in self._adjacency
        ]
        copy._revision = self._revision
        return copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedDigraph):
            return NotImplemented
        return (
            self._vertices == other._vertices
            and self._adjacency == other._adjacency
        )

    def __repr__(self) -> str:
        return (
            f"WeightedDigraph(vertex_count={self.vertex_count}, "
            f"edge_count={self.edge_count})"
        )

    def _check_index(self, index: int) -> None:
        if not 1 <= index <= self.vertex_count:
            raise VertexOutOfRangeError(
                f"Vertex {index} is outside [1, {self.vertex_count}]",
                index=index,
                vertex_count=self.vertex_count,
            )
