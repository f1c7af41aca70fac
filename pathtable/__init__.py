"""Top-level package for the pathtable project.

pathtable computes shortest-path distances and paths between every
ordered pair of vertices of a directed, weighted graph by running
Dijkstra's algorithm from each vertex in turn.
"""

from .domain import UNREACHABLE, PathResult, PathTableError
from .graph import ShortestPathEngine, WeightedDigraph

__all__ = [
    "WeightedDigraph",
    "ShortestPathEngine",
    "PathResult",
    "PathTableError",
    "UNREACHABLE",
]

__version__ = "0.1.0"
