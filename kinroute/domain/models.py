"""Immutable domain models for kinroute.

All models are frozen dataclasses with slots. They have no external
dependencies and describe the records read from storage and the
results handed back to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, NewType, Optional

PersonId = NewType("PersonId", int)

# Display record produced by the person hydrator
HydratedPerson = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class ParentChildRecord:
    """A person together with its recorded parents.

    Attributes:
        id: The child
        father_id: The father, or None when not recorded
        mother_id: The mother, or None when not recorded
    """

    id: PersonId
    father_id: Optional[PersonId] = None
    mother_id: Optional[PersonId] = None

    @property
    def parent_ids(self) -> tuple[PersonId, ...]:
        """Return the recorded parents, father first."""
        return tuple(p for p in (self.father_id, self.mother_id) if p is not None)


@dataclass(frozen=True, slots=True)
class MarriageRecord:
    """A marriage between two persons."""

    husband_id: PersonId
    wife_id: PersonId


@dataclass(frozen=True, slots=True)
class Connection:
    """A person reached from a start person, with its hop count."""

    person_id: PersonId
    degree: int

    def to_dict(self) -> Dict[str, int]:
        return {"personId": self.person_id, "degree": self.degree}


@dataclass(frozen=True, slots=True)
class GraphStatistics:
    """Aggregate connectivity metrics of a relationship graph.

    Attributes:
        total_people: Number of persons present in the graph
        total_connections: Number of undirected edges
        average_connections: Mean neighbor count per person in the graph
        isolated_people: Persons without any recorded relation
    """

    total_people: int
    total_connections: int
    average_connections: float
    isolated_people: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalPeople": self.total_people,
            "totalConnections": self.total_connections,
            "averageConnections": self.average_connections,
            "isolatedPeople": self.isolated_people,
        }


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a route query between two persons.

    ``path`` holds the display records in the order of ``path_ids``.
    Persons whose record is absent from storage are listed in
    ``missing_ids`` and skipped in ``path``.

    Attributes:
        path_exists: Whether the two persons are connected
        degree_of_separation: Number of edges on the path
        path_ids: Ordered person ids from start to end
        path: Hydrated display records
        missing_ids: Path ids without a display record
    """

    path_exists: bool
    degree_of_separation: int = 0
    path_ids: tuple[PersonId, ...] = field(default_factory=tuple)
    path: tuple[HydratedPerson, ...] = field(default_factory=tuple)
    missing_ids: tuple[PersonId, ...] = field(default_factory=tuple)

    @classmethod
    def no_path(cls) -> RouteResult:
        return cls(path_exists=False)

    @property
    def is_partial(self) -> bool:
        """Check if some path members could not be hydrated."""
        return len(self.missing_ids) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pathExists": self.path_exists,
            "degreeOfSeparation": self.degree_of_separation,
            "pathIds": list(self.path_ids),
            "path": [dict(p) for p in self.path],
            "partial": self.is_partial,
            "missingIds": list(self.missing_ids),
        }
