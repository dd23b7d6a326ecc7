"""Graph builder service.

Reads every relation record from the store and builds a fresh
relationship graph. No graph is kept between calls.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, Set

from ..domain.models import PersonId
from ..graph.adjacency import build_adjacency
from ..ports.store import RelationStorePort


@dataclass
class GraphBuilder:
    """Builds the relationship graph from a relation store.

    The parent-child and marriage reads are independent and run
    concurrently; adjacency construction starts only once both have
    completed. They are not wrapped in a single transaction, so a write
    landing between the two reads can produce a graph that matches
    neither snapshot.

    Attributes:
        store: Source of parent-child and marriage records
    """

    store: RelationStorePort
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build_graph(self) -> Dict[PersonId, Set[PersonId]]:
        """Build the relationship graph.

        Returns:
            Mapping of every related person to its direct relations.

        Raises:
            StoreAccessError: If either read fails. No partial graph is
                returned.
        """
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="graph-read") as pool:
            parent_child = pool.submit(self.store.fetch_parent_child_edges)
            marriages = pool.submit(self.store.fetch_marriage_edges)
            parent_child_records = parent_child.result()
            marriage_records = marriages.result()

        graph = build_adjacency(parent_child_records, marriage_records)
        self._logger.info(
            "Built relationship graph",
            extra={
                "people": len(graph),
                "parent_child_records": len(parent_child_records),
                "marriage_records": len(marriage_records),
            },
        )
        return graph
