"""Domain models for the all-pairs shortest-path table.

Vertices and path results are frozen dataclasses with slots. Edges and
table entries are mutable: an edge's weight is overwritten in place on
re-insertion, and table entries are the scratch state written during
relaxation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

# Distance sentinel for a destination that cannot be reached.
UNREACHABLE: float = float("inf")

# Predecessor sentinel: no path, or the table has not been computed.
NO_PREDECESSOR: int = 0

Distance = Union[int, float]


class EngineState(Enum):
    """Lifecycle of one all-pairs computation cycle."""

    UNINITIALIZED = auto()
    TABLE_RESET = auto()
    RUNNING = auto()
    READY = auto()


@dataclass(frozen=True, slots=True)
class Vertex:
    """A graph node.

    Attributes:
        index: Dense vertex index in [1, N]
        label: Free-text description of the vertex
    """

    index: int
    label: str = ""


@dataclass(slots=True)
class Edge:
    """A directed, weighted edge owned by its source's adjacency list."""

    destination: int
    weight: int


@dataclass(slots=True)
class ShortestPathEntry:
    """One cell of the shortest-path table, indexed by [source][destination].

    Attributes:
        distance: Shortest known distance from the source, or UNREACHABLE
        predecessor: Vertex preceding the destination on that path
        visited: Whether the destination has been settled for this source
    """

    distance: Distance = UNREACHABLE
    predecessor: int = NO_PREDECESSOR
    visited: bool = False

    @property
    def is_reachable(self) -> bool:
        """Check if a finite distance has been recorded."""
        return self.distance != UNREACHABLE

    def reset(self) -> None:
        self.distance = UNREACHABLE
        self.predecessor = NO_PREDECESSOR
        self.visited = False


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a shortest-path query between two vertices.

    Attributes:
        source: Source vertex index
        destination: Destination vertex index
        distance: Total weight of the path, or UNREACHABLE
        path: Ordered vertex indices from source to destination inclusive
        labels: Labels of the vertices in ``path``
    """

    source: int
    destination: int
    distance: Distance
    path: tuple[int, ...] = field(default_factory=tuple)
    labels: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_reachable(self) -> bool:
        """Check if a path was found."""
        return len(self.path) > 0

    @property
    def num_hops(self) -> int:
        """Return the number of edges on the path."""
        return max(len(self.path) - 1, 0)
