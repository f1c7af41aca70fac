"""Rendering port - Abstraction for displaying shortest-path results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..graph.shortest_paths import ShortestPathEngine


class TableRendererPort(Protocol):
    """Port for turning a computed table into display text.

    Implementation: adapters/rendering/text_table.py

    Renderers only read the engine; they never trigger a computation.
    """

    def render_table(self, engine: ShortestPathEngine) -> str:
        """Render every ordered pair of distinct vertices.

        Args:
            engine: An engine whose table has been computed.

        Returns:
            The rendered table.
        """
        ...

    def render_path(
        self, engine: ShortestPathEngine, source: int, destination: int
    ) -> str:
        """Render one path in detail, including the label of each vertex.

        Args:
            engine: An engine whose table has been computed.
            source: Source vertex index.
            destination: Destination vertex index.

        Returns:
            The rendered path.
        """
        ...
