"""Aggregate connectivity metrics of the relationship graph."""

from typing import Iterable, Optional

from ..domain.models import GraphStatistics, PersonId
from ..ports.graph import Graph


def compute_statistics(
    graph: Graph, population: Optional[Iterable[PersonId]] = None
) -> GraphStatistics:
    """Summarize the size and density of a relationship graph.

    Parameters
    ----------
    graph:
        Relationship graph as produced by ``build_adjacency``.
    population:
        Ids of every known person. The graph only holds persons with at
        least one relation, so isolated persons can only be counted
        against the full population. When omitted, only graph nodes
        without neighbors are counted as isolated.

    Returns
    -------
    GraphStatistics
        Node count, undirected edge count, mean neighbor count and the
        number of isolated persons.
    """
    total_people = len(graph)
    degree_sum = sum(len(neighbors) for neighbors in graph.values())

    if population is None:
        isolated = sum(1 for neighbors in graph.values() if not neighbors)
    else:
        isolated = sum(1 for pid in set(population) if not graph.get(pid))

    return GraphStatistics(
        total_people=total_people,
        total_connections=degree_sum // 2,
        average_connections=degree_sum / total_people if total_people else 0.0,
        isolated_people=isolated,
    )
