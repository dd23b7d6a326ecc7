"""Store ports - Abstractions over record storage.

The relation store is read by the graph builder; the person hydrator
turns a bare person id into the display record shown to users. Both are
accessed read-only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import (
        HydratedPerson,
        MarriageRecord,
        ParentChildRecord,
        PersonId,
    )


class RelationStorePort(Protocol):
    """Port for reading the records the relationship graph is built from.

    Implementations:
    - adapters/store/sqlite_store.py (SQLiteRelationStore)
    - adapters/store/csv_store.py (CSVRelationStore)

    Every method raises StoreAccessError when the read fails.
    """

    def fetch_parent_child_edges(self) -> Sequence[ParentChildRecord]:
        """Return every person that has a father or a mother recorded."""
        ...

    def fetch_marriage_edges(self) -> Sequence[MarriageRecord]:
        """Return every recorded marriage."""
        ...

    def fetch_person_ids(self) -> Sequence[PersonId]:
        """Return the ids of all known persons, related or not."""
        ...


class PersonHydratorPort(Protocol):
    """Port for turning a person id into a display record.

    Implementation: adapters/store/sqlite_store.py (SQLitePersonHydrator)
    """

    def hydrate(self, person_id: PersonId) -> Optional[HydratedPerson]:
        """Fetch the display record of a person.

        Args:
            person_id: The person to look up.

        Returns:
            The display record, or None if no such person is stored.

        Raises:
            HydrationError: If the record could not be read.
        """
        ...
