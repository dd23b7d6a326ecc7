"""Path finder adapters.

These adapters wrap the BFS implementations in graph/paths.py and add
logging. Both implement PathFinderPort and always return a path of
minimal length.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import PersonId
from ...graph.paths import find_shortest_path, find_shortest_path_bidirectional
from ...ports.graph import Graph, Path


@dataclass
class BFSPathFinder:
    """Path finder using single-source breadth-first search."""

    _search = staticmethod(find_shortest_path)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_path(self, graph: Graph, start: PersonId, end: PersonId) -> Path:
        """Find a shortest path between two persons.

        Args:
            graph: The relationship graph.
            start: Person the path starts from.
            end: Person the path leads to.

        Returns:
            The ordered person ids, or an empty tuple if not connected.
        """
        self._logger.debug(
            "Searching path",
            extra={
                "start": start,
                "end": end,
                "algorithm": type(self).__name__,
            },
        )

        path = self._search(graph, start, end)

        if not path:
            self._logger.info("No path found", extra={"start": start, "end": end})
        else:
            self._logger.info(
                "Path found",
                extra={"start": start, "end": end, "degree": len(path) - 1},
            )
        return path


@dataclass
class BidirectionalBFSPathFinder(BFSPathFinder):
    """Path finder growing one BFS frontier from each end."""

    _search = staticmethod(find_shortest_path_bidirectional)
