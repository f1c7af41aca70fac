"""Plain-text table renderer adapter.

Formats a computed shortest-path table as fixed-width text:

    Description            From    To  Dist  Path
    Kitchen
                             1     2     5    1 2
                             1     3     7    1 2 3

Unreachable pairs show ``--`` as the distance and an empty path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ...domain.models import UNREACHABLE, Distance
from ...graph.shortest_paths import ShortestPathEngine

UNREACHABLE_MARK = "--"


@dataclass
class PlainTextTableRenderer:
    """Fixed-width text renderer for shortest-path tables.

    This adapter implements TableRendererPort.

    Attributes:
        from_width: Column width of the source index in table rows
        column_width: Width of the to/distance columns
    """

    from_width: int = 26
    column_width: int = 6
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render_table(self, engine: ShortestPathEngine) -> str:
        """Render every ordered pair of distinct vertices, grouped by source."""
        graph = engine.graph
        w = self.column_width
        lines: List[str] = [
            f"Description{'From':>16}{'To':>{w}}{'Dist':>{w}}{'Path':>{w}}"
        ]
        for source in graph.indices():
            lines.append(graph.label(source))
            for destination in graph.indices():
                if destination == source:
                    continue
                row = (
                    f"{source:>{self.from_width}}"
                    f"{destination:>{w}}"
                    f"{self._format_distance(engine.distance(source, destination)):>{w}}"
                )
                path = engine.reconstruct_path(source, destination)
                if path:
                    row += " " * 4 + _join(path)
                lines.append(row)
            lines.append("")

        self._logger.debug(
            "Rendered table", extra={"vertices": graph.vertex_count}
        )
        return "\n".join(lines) + "\n"

    def render_path(
        self, engine: ShortestPathEngine, source: int, destination: int
    ) -> str:
        """Render one path: the summary row, then one label per line."""
        w = self.column_width
        row = (
            f"{source}{destination:>{w}}"
            f"{self._format_distance(engine.distance(source, destination)):>{w}}"
        )
        path = engine.reconstruct_path(source, destination)
        if path:
            row += " " * w + _join(path)
        lines = [row]
        lines.extend(engine.reconstruct_labels(source, destination))
        return "\n".join(lines) + "\n"

    @staticmethod
    def _format_distance(distance: Distance) -> str:
        if distance == UNREACHABLE:
            return UNREACHABLE_MARK
        return str(int(distance))


def _join(path: List[int]) -> str:
    return " ".join(str(index) for index in path)
