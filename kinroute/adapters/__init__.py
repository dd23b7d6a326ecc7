"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Record storage (SQLite, CSV files)
- Person display records (SQLite)
- Path-finding algorithms (BFS, bidirectional BFS)
"""
