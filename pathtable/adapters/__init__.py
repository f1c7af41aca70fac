"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the graph core to:
- Graph storage (plain-text edge lists, CSV files)
- Display (fixed-width text tables)
"""
