"""Shared fixtures: in-memory collaborators and a seeded SQLite database."""

from __future__ import annotations

from contextlib import closing
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pytest

from kinroute.adapters.store import create_database
from kinroute.config import reset_config
from kinroute.container import reset_container
from kinroute.domain.errors import HydrationError, StoreAccessError
from kinroute.domain.models import MarriageRecord, ParentChildRecord, PersonId


@dataclass
class FakeRelationStore:
    """In-memory RelationStorePort with optional failure injection."""

    parent_child: List[ParentChildRecord] = field(default_factory=list)
    marriages: List[MarriageRecord] = field(default_factory=list)
    person_ids: List[PersonId] = field(default_factory=list)
    fail_on: Optional[str] = None
    calls: List[str] = field(default_factory=list)

    def _check(self, source: str) -> None:
        self.calls.append(source)
        if self.fail_on == source:
            raise StoreAccessError(f"{source} unavailable", source=source)

    def fetch_parent_child_edges(self) -> Sequence[ParentChildRecord]:
        self._check("parent_child")
        return list(self.parent_child)

    def fetch_marriage_edges(self) -> Sequence[MarriageRecord]:
        self._check("marriages")
        return list(self.marriages)

    def fetch_person_ids(self) -> Sequence[PersonId]:
        self._check("person")
        return list(self.person_ids)


@dataclass
class FakeHydrator:
    """PersonHydratorPort returning ``{"id": "<pid>"}`` records."""

    absent: set = field(default_factory=set)
    failing: set = field(default_factory=set)

    def hydrate(self, person_id: PersonId) -> Optional[Dict[str, str]]:
        if person_id in self.failing:
            raise HydrationError(
                f"Failed to read person {person_id}",
                source="person",
                person_id=person_id,
            )
        if person_id in self.absent:
            return None
        return {"id": str(person_id)}


@pytest.fixture
def family_store() -> FakeRelationStore:
    """father(3) = 1, spouse(1, 2), plus an unrelated person 9."""
    return FakeRelationStore(
        parent_child=[ParentChildRecord(id=PersonId(3), father_id=PersonId(1))],
        marriages=[MarriageRecord(husband_id=PersonId(1), wife_id=PersonId(2))],
        person_ids=[PersonId(1), PersonId(2), PersonId(3), PersonId(9)],
    )


@pytest.fixture
def sqlite_db(tmp_path):
    """Database with two families joined by a marriage.

    1 = 2 (married), children 3 and 4; 3 = 5 (married), child 6.
    7 is recorded without any relation.
    """
    db_path = tmp_path / "network.db"
    with closing(create_database(db_path)) as conn:
        conn.executemany(
            "INSERT INTO person (id, personname, gender, yr_birth, fb_id, mail_id, fatherid, motherid) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            [
                (1, "John Smith", "male", "1950", None, "john@example.com", None, None),
                (2, "Mary Ann Smith", "female", None, "12345", None, None, None),
                (3, "Paul Smith", "male", "1975", None, None, 1, 2),
                (4, "Lucy Smith", "", None, None, None, 1, 2),
                (5, "Emma Brown", "female", None, None, None, None, None),
                (6, "Leo Smith", "male", "2005", None, None, 3, 5),
                (7, "Nora", None, None, None, None, None, None),
            ],
        )
        conn.executemany(
            "INSERT INTO marriages (husbandid, wifeid) VALUES (?, ?)",
            [(1, 2), (3, 5)],
        )
        conn.commit()
    return db_path


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()
