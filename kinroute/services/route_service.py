"""Route service - Main orchestrator.

Every query builds a fresh graph through the GraphBuilder, runs the
requested algorithm and, for route queries, hydrates the path into
display records.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.models import (
    Connection,
    GraphStatistics,
    HydratedPerson,
    PersonId,
    RouteResult,
)
from ..graph.neighborhood import find_connections_within_degrees
from ..graph.statistics import compute_statistics
from ..ports.graph import Path, PathFinderPort
from ..ports.store import PersonHydratorPort, RelationStorePort
from .graph_builder import GraphBuilder


@dataclass
class RouteService:
    """Answers route, neighborhood and statistics queries.

    Attributes:
        graph_builder: Builds the relationship graph per query
        path_finder: Computes shortest paths
        hydrator: Turns person ids into display records
        store: Source of the person population for statistics
        hydration_workers: Maximum concurrent hydration calls
    """

    graph_builder: GraphBuilder
    path_finder: PathFinderPort
    hydrator: PersonHydratorPort
    store: RelationStorePort
    hydration_workers: int = 4

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def find_route_between_people(self, start: PersonId, end: PersonId) -> RouteResult:
        """Find how two persons are related and describe every step.

        A person whose display record is absent from storage does not
        fail the request: it stays in ``path_ids``, is skipped in
        ``path`` and is listed in ``missing_ids``.

        Args:
            start: Person the route starts from.
            end: Person the route leads to.

        Returns:
            RouteResult; ``path_exists`` is False when not connected.

        Raises:
            StoreAccessError: If the graph cannot be built.
            HydrationError: If a display record cannot be read.
        """
        self._logger.info("Finding route", extra={"start": start, "end": end})

        graph = self.graph_builder.build_graph()
        path_ids = self.path_finder.find_path(graph, start, end)

        if not path_ids:
            return RouteResult.no_path()

        records = self._hydrate(path_ids)
        missing = tuple(pid for pid, rec in zip(path_ids, records) if rec is None)
        if missing:
            self._logger.warning(
                "Route has persons without a record",
                extra={"missing_ids": list(missing)},
            )

        return RouteResult(
            path_exists=True,
            degree_of_separation=len(path_ids) - 1,
            path_ids=path_ids,
            path=tuple(rec for rec in records if rec is not None),
            missing_ids=missing,
        )

    def _hydrate(self, path_ids: Path) -> List[Optional[HydratedPerson]]:
        # map() yields in input order, whatever order calls complete in
        workers = min(self.hydration_workers, len(path_ids))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="hydrate") as pool:
            return list(pool.map(self.hydrator.hydrate, path_ids))

    def connections_within_degrees(
        self, person_id: PersonId, max_degrees: int
    ) -> tuple[Connection, ...]:
        """List persons reachable from ``person_id`` within ``max_degrees`` hops."""
        graph = self.graph_builder.build_graph()
        connections = find_connections_within_degrees(graph, person_id, max_degrees)
        self._logger.info(
            "Connections found",
            extra={
                "person_id": person_id,
                "max_degrees": max_degrees,
                "count": len(connections),
            },
        )
        return connections

    def graph_statistics(self) -> GraphStatistics:
        """Compute statistics of the current graph.

        Isolated persons are counted against every person known to the
        store, not only those present in the graph.
        """
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="stats-read") as pool:
            graph = pool.submit(self.graph_builder.build_graph)
            population = pool.submit(self.store.fetch_person_ids)
            return compute_statistics(graph.result(), population.result())
