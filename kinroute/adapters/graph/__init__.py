"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- BFSPathFinder: Shortest paths with single-source BFS
- BidirectionalBFSPathFinder: Shortest paths with bidirectional BFS
"""

from .path_finders import BFSPathFinder, BidirectionalBFSPathFinder

__all__ = ["BFSPathFinder", "BidirectionalBFSPathFinder"]
