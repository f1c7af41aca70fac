"""Services layer - Application orchestration.

Available services:
- PathTableService: Loads graphs, computes tables and describes paths
"""

from .path_table_service import PathTableService

__all__ = ["PathTableService"]
