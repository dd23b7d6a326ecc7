"""Degree-limited neighborhood search."""

from collections import deque
from typing import Dict, List

from ..domain.errors import ValidationError
from ..domain.models import Connection, PersonId
from ..ports.graph import Graph


def find_connections_within_degrees(
    graph: Graph, start: PersonId, max_degrees: int
) -> tuple[Connection, ...]:
    """List every person reachable from ``start`` in at most ``max_degrees`` hops.

    Parameters
    ----------
    graph:
        Relationship graph as produced by ``build_adjacency``.
    start:
        Identifier of the person at the center of the neighborhood.
    max_degrees:
        Largest hop count to report. Must be non-negative.

    Returns
    -------
    tuple[Connection, ...]
        Reached persons with their hop count, sorted by ``(degree,
        person_id)``. The start person itself is never included.
    """
    if max_degrees < 0:
        raise ValidationError(
            f"max_degrees must be non-negative, got {max_degrees}",
            field_name="max_degrees",
            value=max_degrees,
        )
    if start not in graph:
        return ()

    degrees: Dict[PersonId, int] = {start: 0}
    queue = deque([start])
    found: List[Connection] = []

    while queue:
        current = queue.popleft()
        degree = degrees[current]
        if degree > 0:
            found.append(Connection(person_id=current, degree=degree))
        if degree == max_degrees:
            continue
        for neighbor in graph.get(current, ()):
            if neighbor not in degrees:
                degrees[neighbor] = degree + 1
                queue.append(neighbor)

    found.sort(key=lambda c: (c.degree, c.person_id))
    return tuple(found)
