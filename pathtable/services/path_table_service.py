"""Path table service - Main orchestrator.

Wires the ingestion repository, the shortest-path engine and the table
renderer together: load graphs, compute their all-pairs tables, and
describe whole tables or single paths.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ..config import EngineConfig, get_config
from ..domain.errors import NoPathFoundError
from ..domain.models import PathResult
from ..graph.shortest_paths import ShortestPathEngine
from ..graph.weighted_graph import WeightedDigraph
from ..ports.graph import GraphRepositoryPort
from ..ports.rendering import TableRendererPort


@dataclass
class PathTableService:
    """Main service for building and querying shortest-path tables.

    Attributes:
        graph_repository: Loads graph definitions
        renderer: Formats tables and paths for display
        engine_config: Vertex selection strategy and recompute policy
    """

    graph_repository: GraphRepositoryPort
    renderer: TableRendererPort
    engine_config: EngineConfig = field(default_factory=lambda: get_config().engine)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load_graphs(self) -> List[WeightedDigraph]:
        """Load every graph from the repository."""
        graphs = self.graph_repository.load_all()
        self._logger.info("Graphs available", extra={"graphs": len(graphs)})
        return graphs

    def build_engine(self, graph: WeightedDigraph) -> ShortestPathEngine:
        """Create an engine for ``graph`` and compute its table."""
        engine = ShortestPathEngine(graph, selection=self.engine_config.selection)
        engine.compute_all()
        return engine

    def describe_table(self, engine: ShortestPathEngine) -> str:
        """Render the full table of ``engine``."""
        self._refresh(engine)
        return self.renderer.render_table(engine)

    def describe_path(
        self, engine: ShortestPathEngine, source: int, destination: int
    ) -> str:
        """Render one path of ``engine`` in detail."""
        self._refresh(engine)
        return self.renderer.render_path(engine, source, destination)

    def find_path(
        self, engine: ShortestPathEngine, source: int, destination: int
    ) -> PathResult:
        """Look up a shortest path, returning an empty result if unreachable.

        Raises:
            VertexOutOfRangeError: If either index is not a vertex.
        """
        self._refresh(engine)
        return engine.path_result(source, destination)

    def require_path(
        self, engine: ShortestPathEngine, source: int, destination: int
    ) -> PathResult:
        """Look up a shortest path, raising if none exists.

        Raises:
            NoPathFoundError: If ``destination`` is unreachable from ``source``.
            VertexOutOfRangeError: If either index is not a vertex.
        """
        result = self.find_path(engine, source, destination)
        if not result.is_reachable:
            self._logger.warning(
                "No path found",
                extra={"source": source, "destination": destination},
            )
            raise NoPathFoundError(
                f"No path from {source} to {destination}",
                source=source,
                destination=destination,
            )

        self._logger.info(
            "Path found",
            extra={
                "source": source,
                "destination": destination,
                "hops": result.num_hops,
                "distance": result.distance,
            },
        )
        return result

    def _refresh(self, engine: ShortestPathEngine) -> None:
        if self.engine_config.auto_recompute and engine.ensure_current():
            self._logger.debug("Stale table recomputed")
