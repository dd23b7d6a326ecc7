"""Graph-related utilities for the relationship network.

This subpackage contains modules to build an in-memory undirected graph
from parent-child and marriage records, and to run breadth-first
searches and aggregate metrics on top of that graph.
"""

from .adjacency import build_adjacency
from .neighborhood import find_connections_within_degrees
from .paths import find_shortest_path, find_shortest_path_bidirectional
from .statistics import compute_statistics

__all__ = [
    "build_adjacency",
    "find_shortest_path",
    "find_shortest_path_bidirectional",
    "find_connections_within_degrees",
    "compute_statistics",
]
