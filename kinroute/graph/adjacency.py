"""Adjacency construction from relation records.

This module defines how parent-child and marriage records turn into
the undirected relationship graph used by every query.
"""

import logging
from typing import Dict, Iterable, Set

from ..domain.models import MarriageRecord, ParentChildRecord, PersonId

logger = logging.getLogger(__name__)


def _connect(graph: Dict[PersonId, Set[PersonId]], a: PersonId, b: PersonId) -> None:
    if a == b:
        logger.warning("Skipping self relation", extra={"person_id": a})
        return
    graph.setdefault(a, set()).add(b)
    graph.setdefault(b, set()).add(a)


def build_adjacency(
    parent_child: Iterable[ParentChildRecord],
    marriages: Iterable[MarriageRecord],
) -> Dict[PersonId, Set[PersonId]]:
    """Build the undirected relationship graph.

    Parameters
    ----------
    parent_child:
        Persons with their recorded father and/or mother.
    marriages:
        Recorded marriages.

    Returns
    -------
    dict[PersonId, set[PersonId]]
        Every person taking part in at least one relation, mapped to the
        set of persons directly related to it. Edges are stored in both
        directions; duplicate records collapse into a single edge.
    """
    graph: Dict[PersonId, Set[PersonId]] = {}

    for record in parent_child:
        for parent_id in record.parent_ids:
            _connect(graph, record.id, parent_id)

    for marriage in marriages:
        _connect(graph, marriage.husband_id, marriage.wife_id)

    return graph
