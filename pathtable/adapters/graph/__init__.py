"""Graph adapters - Implementations of the graph repository port.

Available implementations:
- TextGraphRepository: Loads one or more graphs from the text edge-list format
- CSVGraphRepository: Loads a graph from vertices/edges CSV files
"""

from .csv_repository import CSVGraphRepository
from .text_repository import TextGraphRepository

__all__ = ["CSVGraphRepository", "TextGraphRepository"]
