"""Rendering adapters - Implementations of TableRendererPort.

Available implementations:
- PlainTextTableRenderer: Fixed-width text table and path views
"""

from .text_table import PlainTextTableRenderer

__all__ = ["PlainTextTableRenderer"]
