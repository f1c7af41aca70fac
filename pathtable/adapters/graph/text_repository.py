"""Text graph repository adapter.

Reads graphs written in the plain-text edge-list format:

    3
    Kitchen
    Hallway
    Garden
    1 2 5
    2 3 2
    1 3 9
    0 0 0

The first line holds the vertex count N, the next N lines hold one label
each, and every following line holds ``source destination weight`` until
a line whose source is 0 or the end of the file. Several graphs may
follow one another in the same file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import (
    GraphFormatError,
    InvalidLabelError,
    InvalidWeightError,
    VertexOutOfRangeError,
)
from ...graph.weighted_graph import WeightedDigraph


@dataclass
class TextGraphRepository:
    """Graph repository that loads the plain-text edge-list format.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, label bound, strictness)
        path: Optional file path overriding ``config.graph_path``
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graphs: Optional[List[WeightedDigraph]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.path is not None:
            self.path = Path(self.path)

    @property
    def source_path(self) -> Path:
        return self.path if self.path is not None else self.config.graph_path

    def load(self) -> WeightedDigraph:
        """Load the first graph of the file.

        Returns:
            The populated graph.

        Raises:
            GraphFormatError: If the file cannot be read, is malformed,
                or holds no graph.
        """
        graphs = self.load_all()
        if not graphs:
            raise GraphFormatError(
                "No graph found",
                file_path=str(self.source_path),
            )
        return graphs[0]

    def load_all(self) -> List[WeightedDigraph]:
        """Load every graph of the file, in order.

        Each call returns fresh copies, so callers may mutate the graphs
        without affecting later loads.

        Raises:
            GraphFormatError: If the file cannot be read or is malformed.
        """
        if self._graphs is None:
            self._logger.debug(
                "Loading graphs",
                extra={"graph_path": str(self.source_path)},
            )
            try:
                with self.source_path.open(encoding="utf-8") as f:
                    self._graphs = list(self.parse(f))
            except OSError as e:
                raise GraphFormatError(
                    f"Failed to read graph file: {e}",
                    file_path=str(self.source_path),
                    cause=e,
                )
            self._logger.info(
                "Graphs loaded",
                extra={
                    "graphs": len(self._graphs),
                    "graph_path": str(self.source_path),
                },
            )
        return [graph.clone() for graph in self._graphs]

    def parse(self, lines: Iterable[str]) -> Iterator[WeightedDigraph]:
        """Parse graphs from an iterable of text lines.

        Raises:
            GraphFormatError: On a malformed vertex count, a missing label,
                or an edge line that is not three integers. In strict mode
                also on edges or labels the graph rejects.
        """
        numbered = _NumberedLines(lines)
        while True:
            header = numbered.next_non_blank()
            if header is None:
                return
            line_number, text = header
            vertex_count = self._parse_int(text.strip(), line_number, "vertex count")
            if vertex_count < 0:
                raise GraphFormatError(
                    f"Negative vertex count {vertex_count}",
                    file_path=str(self.source_path),
                    line_number=line_number,
                )
            graph = WeightedDigraph(
                vertex_count, max_label_length=self.config.max_label_length
            )
            self._read_labels(graph, numbered)
            self._read_edges(graph, numbered)
            yield graph

    def _read_labels(self, graph: WeightedDigraph, numbered: _NumberedLines) -> None:
        for index in graph.indices():
            entry = numbered.next_line()
            if entry is None:
                raise GraphFormatError(
                    f"Expected {graph.vertex_count} labels, found {index - 1}",
                    file_path=str(self.source_path),
                )
            line_number, text = entry
            try:
                graph.set_vertex_label(index, text)
            except InvalidLabelError as e:
                if self.config.strict_ingestion:
                    raise GraphFormatError(
                        "Invalid vertex label",
                        file_path=str(self.source_path),
                        line_number=line_number,
                        cause=e,
                    )
                self._logger.warning(
                    "Truncating vertex label",
                    extra={"vertex": index, "line_number": line_number},
                )
                graph.set_vertex_label(index, text[: graph.max_label_length])

    def _read_edges(self, graph: WeightedDigraph, numbered: _NumberedLines) -> None:
        while True:
            entry = numbered.next_non_blank()
            if entry is None:
                return
            line_number, text = entry
            fields = text.split()
            source = self._parse_int(fields[0], line_number, "edge source")
            if source == 0:
                return
            if len(fields) != 3:
                raise GraphFormatError(
                    f"Expected 'source destination weight', got {text.strip()!r}",
                    file_path=str(self.source_path),
                    line_number=line_number,
                )
            destination = self._parse_int(fields[1], line_number, "edge destination")
            weight = self._parse_int(fields[2], line_number, "edge weight")
            try:
                graph.insert_edge(source, destination, weight)
            except (InvalidWeightError, VertexOutOfRangeError) as e:
                if self.config.strict_ingestion:
                    raise GraphFormatError(
                        "Invalid edge",
                        file_path=str(self.source_path),
                        line_number=line_number,
                        cause=e,
                    )
                self._logger.warning(
                    "Skipping invalid edge",
                    extra={"line_number": line_number, "error": str(e)},
                )

    def _parse_int(self, token: str, line_number: int, what: str) -> int:
        try:
            return int(token)
        except ValueError as e:
            raise GraphFormatError(
                f"Invalid {what} {token!r}",
                file_path=str(self.source_path),
                line_number=line_number,
                cause=e,
            )

    def clear_cache(self) -> None:
        """Clear cached graphs."""
        self._graphs = None
        self._logger.debug("Graph cache cleared")


class _NumberedLines:
    """Line reader that tracks 1-based line numbers."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self._line_number = 0

    def next_line(self) -> Optional[Tuple[int, str]]:
        line = next(self._lines, None)
        if line is None:
            return None
        self._line_number += 1
        return self._line_number, line.rstrip("\r\n")

    def next_non_blank(self) -> Optional[Tuple[int, str]]:
        while True:
            entry = self.next_line()
            if entry is None or entry[1].strip():
                return entry
