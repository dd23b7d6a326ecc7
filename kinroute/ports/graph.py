"""Graph ports - Abstractions for path finding over the relationship graph.

These protocols define the contract for computing the shortest chain of
relations between two persons.
"""

from __future__ import annotations

from typing import AbstractSet, Mapping, Protocol, Tuple

from ..domain.models import PersonId

# Undirected adjacency: person id -> ids of spouses, parents and children.
Graph = Mapping[PersonId, AbstractSet[PersonId]]

# Ordered person ids from start to end; empty when no path exists
Path = Tuple[PersonId, ...]


class PathFinderPort(Protocol):
    """Port for shortest-path computation.

    Implementations: adapters/graph/path_finders.py

    Both implementations return a path of minimal length; when several
    shortest paths exist the one returned may differ between them.
    """

    def find_path(self, graph: Graph, start: PersonId, end: PersonId) -> Path:
        """Find a shortest path between two persons.

        Args:
            graph: The relationship graph.
            start: Person the path starts from.
            end: Person the path leads to.

        Returns:
            The ordered person ids, ``(start,)`` when start equals end,
            or an empty tuple when the persons are not connected.
        """
        ...
