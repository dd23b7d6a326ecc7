"""Shortest-path computation over the relationship graph.

The graph is unweighted, so breadth-first search yields a path with the
fewest relations. Two variants are provided: single-source BFS and a
bidirectional BFS that grows one frontier from each end.
"""

from collections import deque
from typing import Dict, List, Optional, Tuple

from ..domain.models import PersonId
from ..ports.graph import Graph, Path

Parents = Dict[PersonId, Optional[PersonId]]


def _walk_back(parents: Parents, node: Optional[PersonId]) -> List[PersonId]:
    """Follow parent pointers from ``node`` up to the search root."""
    chain: List[PersonId] = []
    while node is not None:
        chain.append(node)
        node = parents[node]
    return chain


def find_shortest_path(graph: Graph, start: PersonId, end: PersonId) -> Path:
    """Compute a shortest path between two persons using BFS.

    Parameters
    ----------
    graph:
        Relationship graph as produced by ``build_adjacency``.
    start:
        Identifier of the first person.
    end:
        Identifier of the second person.

    Returns
    -------
    tuple[PersonId, ...]
        The person ids from ``start`` to ``end`` (inclusive). A person is
        always connected to itself, even when absent from the graph. If
        no path exists, returns an empty tuple.
    """
    if start == end:
        return (start,)
    if start not in graph or end not in graph:
        return ()

    queue = deque([start])
    parents: Parents = {start: None}

    while queue:
        current = queue.popleft()

        if current == end:
            path = _walk_back(parents, end)
            path.reverse()
            return tuple(path)

        for neighbor in graph.get(current, ()):
            if neighbor not in parents:
                parents[neighbor] = current
                queue.append(neighbor)

    return ()


def _expand_layer(
    graph: Graph,
    frontier: List[PersonId],
    own: Parents,
    other: Parents,
) -> Tuple[List[PersonId], Optional[Tuple[PersonId, PersonId]]]:
    """Expand one whole BFS layer.

    Returns the next frontier and, if a neighbor already reached by the
    opposite search is found, the edge ``(own side, other side)`` joining
    both searches.
    """
    next_frontier: List[PersonId] = []
    for node in frontier:
        for neighbor in graph.get(node, ()):
            if neighbor in other:
                return next_frontier, (node, neighbor)
            if neighbor not in own:
                own[neighbor] = node
                next_frontier.append(neighbor)
    return next_frontier, None


def find_shortest_path_bidirectional(
    graph: Graph, start: PersonId, end: PersonId
) -> Path:
    """Compute a shortest path by searching from both ends at once.

    Each step expands a complete layer of the smaller frontier. Because
    layers are never interleaved, the first edge found between the two
    searches lies on a shortest path, so the result always has the same
    length as ``find_shortest_path`` for the same pair.

    Parameters
    ----------
    graph:
        Relationship graph as produced by ``build_adjacency``.
    start:
        Identifier of the first person.
    end:
        Identifier of the second person.

    Returns
    -------
    tuple[PersonId, ...]
        The person ids from ``start`` to ``end`` (inclusive), ``(start,)``
        when both are the same person, or an empty tuple if no path exists.
    """
    if start == end:
        return (start,)
    if start not in graph or end not in graph:
        return ()

    forward: Parents = {start: None}
    backward: Parents = {end: None}
    forward_frontier = [start]
    backward_frontier = [end]

    while forward_frontier and backward_frontier:
        if len(forward_frontier) <= len(backward_frontier):
            forward_frontier, edge = _expand_layer(
                graph, forward_frontier, forward, backward
            )
            if edge is not None:
                near_start, near_end = edge
                break
        else:
            backward_frontier, edge = _expand_layer(
                graph, backward_frontier, backward, forward
            )
            if edge is not None:
                near_end, near_start = edge
                break
    else:
        return ()

    head = _walk_back(forward, near_start)
    head.reverse()
    return tuple(head + _walk_back(backward, near_end))
