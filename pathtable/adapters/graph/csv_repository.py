"""CSV Graph Repository adapter.

Loads a single graph from two CSV files:
- vertices.csv with columns ``vertex_id,label``; ids must cover 1..N
- edges.csv with columns ``source_id,destination_id,weight``
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import (
    GraphFormatError,
    InvalidLabelError,
    InvalidWeightError,
    VertexOutOfRangeError,
)
from ...graph.weighted_graph import WeightedDigraph


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names, strictness)
        vertices_path: Optional override for ``config.vertices_path``
        edges_path: Optional override for ``config.edges_path``
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    vertices_path: Optional[Path] = None
    edges_path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[WeightedDigraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self.vertices_path = Path(self.vertices_path or self.config.vertices_path)
        self.edges_path = Path(self.edges_path or self.config.edges_path)

    def load(self) -> WeightedDigraph:
        """Load the graph from CSV files.

        Returns:
            A fresh copy of the graph.

        Raises:
            GraphFormatError: If the graph cannot be loaded.
        """
        if self._graph is None:
            self._logger.debug(
                "Loading graph",
                extra={
                    "vertices_path": str(self.vertices_path),
                    "edges_path": str(self.edges_path),
                },
            )
            try:
                self._graph = self._load_graph_from_csv()
            except (OSError, KeyError) as e:
                raise GraphFormatError(
                    f"Failed to load graph: {e}",
                    file_path=str(self.vertices_path),
                    cause=e,
                )
            self._logger.info(
                "Graph loaded",
                extra={
                    "nodes": self._graph.vertex_count,
                    "edges": self._graph.edge_count,
                },
            )
        return self._graph.clone()

    def load_all(self) -> List[WeightedDigraph]:
        """Return the single graph held by the CSV files, as a list."""
        return [self.load()]

    def _load_graph_from_csv(self) -> WeightedDigraph:
        """Internal method to load graph from CSV files."""
        assert self.vertices_path is not None and self.edges_path is not None

        labels: Dict[int, str] = {}
        with self.vertices_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for line_number, row in enumerate(reader, start=2):
                vertex_id = self._parse_int(
                    row["vertex_id"], self.vertices_path, line_number
                )
                if vertex_id in labels:
                    raise GraphFormatError(
                        f"Duplicate vertex id {vertex_id}",
                        file_path=str(self.vertices_path),
                        line_number=line_number,
                    )
                labels[vertex_id] = (row.get("label") or "").strip()

        if sorted(labels) != list(range(1, len(labels) + 1)):
            raise GraphFormatError(
                "Vertex ids must be the dense range 1..N",
                file_path=str(self.vertices_path),
            )

        graph = WeightedDigraph(
            len(labels), max_label_length=self.config.max_label_length
        )
        for vertex_id, label in labels.items():
            try:
                graph.set_vertex_label(vertex_id, label)
            except InvalidLabelError as e:
                if self.config.strict_ingestion:
                    raise GraphFormatError(
                        "Invalid vertex label",
                        file_path=str(self.vertices_path),
                        cause=e,
                    )
                self._logger.warning(
                    "Truncating vertex label", extra={"vertex": vertex_id}
                )
                graph.set_vertex_label(vertex_id, label[: graph.max_label_length])

        with self.edges_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            for line_number, row in enumerate(reader, start=2):
                source_str = (row.get("source_id") or "").strip()
                destination_str = (row.get("destination_id") or "").strip()
                weight_str = (row.get("weight") or "").strip()

                if not source_str or not destination_str or not weight_str:
                    continue

                source = self._parse_int(source_str, self.edges_path, line_number)
                destination = self._parse_int(
                    destination_str, self.edges_path, line_number
                )
                weight = self._parse_int(weight_str, self.edges_path, line_number)
                try:
                    graph.insert_edge(source, destination, weight)
                except (InvalidWeightError, VertexOutOfRangeError) as e:
                    if self.config.strict_ingestion:
                        raise GraphFormatError(
                            "Invalid edge",
                            file_path=str(self.edges_path),
                            line_number=line_number,
                            cause=e,
                        )
                    self._logger.warning(
                        "Skipping invalid edge",
                        extra={"line_number": line_number, "error": str(e)},
                    )

        return graph

    @staticmethod
    def _parse_int(token: str, path: Path, line_number: int) -> int:
        try:
            return int(token.strip())
        except ValueError as e:
            raise GraphFormatError(
                f"Invalid integer {token!r}",
                file_path=str(path),
                line_number=line_number,
                cause=e,
            )

    def clear_cache(self) -> None:
        """Clear cached graph data."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
