"""Graph ports - Abstractions for loading graph definitions.

These protocols define the contract for ingestion collaborators that
read a graph definition from external storage and populate a
WeightedDigraph through its vertex and edge operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:
    from ..graph.weighted_graph import WeightedDigraph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementations:
    - adapters/graph/text_repository.py (TextGraphRepository)
    - adapters/graph/csv_repository.py (CSVGraphRepository)
    """

    def load(self) -> WeightedDigraph:
        """Load the first graph from storage.

        Returns:
            The populated graph.

        Raises:
            GraphFormatError: If the source holds no graph or is malformed.
        """
        ...

    def load_all(self) -> List[WeightedDigraph]:
        """Load every graph from storage, in order.

        Returns:
            The populated graphs; empty if the source holds none.
        """
        ...
