"""Domain layer - Core models and errors.

This module contains the graph and table models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphFormatError,
    InvalidLabelError,
    InvalidWeightError,
    NoPathFoundError,
    PathTableError,
    VertexOutOfRangeError,
)
from .models import (
    NO_PREDECESSOR,
    UNREACHABLE,
    Distance,
    Edge,
    EngineState,
    PathResult,
    ShortestPathEntry,
    Vertex,
)

__all__ = [
    # Models
    "UNREACHABLE",
    "NO_PREDECESSOR",
    "Distance",
    "Edge",
    "EngineState",
    "PathResult",
    "ShortestPathEntry",
    "Vertex",
    # Errors
    "PathTableError",
    "InvalidWeightError",
    "EdgeNotFoundError",
    "VertexOutOfRangeError",
    "InvalidLabelError",
    "GraphFormatError",
    "NoPathFoundError",
    "ConfigurationError",
]
