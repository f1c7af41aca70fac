"""Typed domain errors for the shortest-path table.

Structural violations (bad weights, missing edges, out-of-range vertex
indices) are reported to the immediate caller through these error types
and never abort a whole computation.

All errors inherit from PathTableError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PathTableError(Exception):
    """Base error for the shortest-path table domain.

    All domain-specific errors inherit from this class.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidWeightError(PathTableError):
    """Edge insertion was given a negative weight.

    Attributes:
        weight: The rejected weight
    """

    weight: int = 0


@dataclass
class EdgeNotFoundError(PathTableError):
    """Edge removal found no edge for the requested pair.

    Attributes:
        source: Source vertex index
        destination: Destination vertex index
    """

    source: int = 0
    destination: int = 0


@dataclass
class VertexOutOfRangeError(PathTableError):
    """A vertex index fell outside the dense range [1, N].

    Attributes:
        index: The offending index
        vertex_count: Number of vertices in the graph (N)
    """

    index: int = 0
    vertex_count: int = 0


@dataclass
class InvalidLabelError(PathTableError):
    """A vertex label exceeded the configured length bound.

    Attributes:
        index: Vertex the label was meant for
        max_length: The configured bound
    """

    index: int = 0
    max_length: int = 0


@dataclass
class GraphFormatError(PathTableError):
    """Graph definition could not be parsed.

    Attributes:
        file_path: Path to the graph data file if relevant
        line_number: 1-based line where parsing failed, if known
    """

    file_path: Optional[str] = None
    line_number: Optional[int] = None


@dataclass
class NoPathFoundError(PathTableError):
    """No path exists between the requested vertices.

    Attributes:
        source: Source vertex index
        destination: Destination vertex index
    """

    source: int = 0
    destination: int = 0


@dataclass
class ConfigurationError(PathTableError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
