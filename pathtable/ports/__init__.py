"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph core and the external
collaborators that feed it (ingestion) and display its results
(rendering). Adapters implement them; the container wires them.
"""

from .graph import GraphRepositoryPort
from .rendering import TableRendererPort

__all__ = [
    "GraphRepositoryPort",
    "TableRendererPort",
]
