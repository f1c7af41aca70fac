"""Graph core: the adjacency-list graph and the all-pairs shortest-path engine.

This subpackage holds the only algorithmic code of the project. It does
no I/O; loading and display live in ``pathtable.adapters``.
"""

from .shortest_paths import ShortestPathEngine
from .weighted_graph import DEFAULT_MAX_LABEL_LENGTH, WeightedDigraph

__all__ = ["WeightedDigraph", "ShortestPathEngine", "DEFAULT_MAX_LABEL_LENGTH"]
