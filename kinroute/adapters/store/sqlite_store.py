"""SQLite storage adapters.

SQLiteRelationStore reads the records the relationship graph is built
from. SQLitePersonHydrator turns a person id into the display record
used by the family chart front-end.

Both adapters open a short-lived read-only connection per call so that
reads issued from worker threads never share a connection.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ...domain.errors import HydrationError, StoreAccessError
from ...domain.models import (
    HydratedPerson,
    MarriageRecord,
    ParentChildRecord,
    PersonId,
)

DEFAULT_AVATAR_URL = (
    "https://static8.depositphotos.com/1009634/988/v/950/"
    "depositphotos_9883921-stock-illustration-no-user-profile-picture.jpg"
)

SCHEMA = """
CREATE TABLE IF NOT EXISTS person (
    id INTEGER PRIMARY KEY,
    personname TEXT,
    gender TEXT,
    yr_birth TEXT,
    date_birth TEXT,
    fb_id TEXT,
    currentlocation TEXT,
    mail_id TEXT,
    phone TEXT,
    worksat TEXT,
    nativeplace TEXT,
    fatherid INTEGER REFERENCES person(id),
    motherid INTEGER REFERENCES person(id)
);

CREATE TABLE IF NOT EXISTS marriages (
    husbandid INTEGER NOT NULL REFERENCES person(id),
    wifeid INTEGER NOT NULL REFERENCES person(id)
);
"""


def create_database(db_path: Path) -> sqlite3.Connection:
    """Create the person and marriages tables if they do not exist."""
    conn = sqlite3.connect(db_path)
    conn.executescript(SCHEMA)
    conn.commit()
    return conn


def _connect_read_only(db_path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(f"file:{db_path}?mode=ro", uri=True)
    conn.row_factory = sqlite3.Row
    return conn


def _optional_id(value: Any) -> Optional[PersonId]:
    return None if value is None else PersonId(int(value))


@dataclass
class SQLiteRelationStore:
    """Relation store backed by the ``person`` and ``marriages`` tables.

    This adapter implements RelationStorePort.

    Attributes:
        db_path: Path to the SQLite database file
    """

    db_path: Path
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.db_path = Path(self.db_path)
        self._logger = logging.getLogger(__name__)

    def _query(self, source: str, sql: str) -> List[sqlite3.Row]:
        try:
            with closing(_connect_read_only(self.db_path)) as conn:
                rows = conn.execute(sql).fetchall()
        except sqlite3.Error as e:
            raise StoreAccessError(
                f"Failed to read {source} records",
                cause=e,
                source=source,
            )
        self._logger.debug("Records read", extra={"source": source, "rows": len(rows)})
        return rows

    def fetch_parent_child_edges(self) -> Sequence[ParentChildRecord]:
        rows = self._query(
            "parent_child",
            "SELECT id, fatherid, motherid FROM person "
            "WHERE fatherid IS NOT NULL OR motherid IS NOT NULL",
        )
        return [
            ParentChildRecord(
                id=PersonId(row["id"]),
                father_id=_optional_id(row["fatherid"]),
                mother_id=_optional_id(row["motherid"]),
            )
            for row in rows
        ]

    def fetch_marriage_edges(self) -> Sequence[MarriageRecord]:
        rows = self._query("marriages", "SELECT husbandid, wifeid FROM marriages")
        return [
            MarriageRecord(
                husband_id=PersonId(row["husbandid"]),
                wife_id=PersonId(row["wifeid"]),
            )
            for row in rows
        ]

    def fetch_person_ids(self) -> Sequence[PersonId]:
        rows = self._query("person", "SELECT id FROM person")
        return [PersonId(row["id"]) for row in rows]


def map_person(row: sqlite3.Row, spouses: Sequence[str], children: Sequence[str]) -> Dict[str, Any]:
    """Shape a person row into the family chart display structure."""
    first_name, _, last_name = (row["personname"] or "").partition(" ")
    gender = row["gender"] or ""
    father = row["fatherid"]
    mother = row["motherid"]

    return {
        "id": str(row["id"]),
        "rels": {
            "spouses": list(spouses),
            "father": str(father) if father is not None else None,
            "mother": str(mother) if mother is not None else None,
            "children": list(children),
        },
        "data": {
            "first name": first_name,
            "last name": last_name,
            "birthday": row["yr_birth"] or row["date_birth"] or None,
            "avatar": (
                f"https://graph.facebook.com/{row['fb_id']}/picture"
                if row["fb_id"]
                else DEFAULT_AVATAR_URL
            ),
            "gender": gender[0].upper() if gender else "U",
            "location": row["currentlocation"] or None,
            "contact": {
                "email": row["mail_id"] or None,
                "phone": row["phone"] or None,
            },
            "work": row["worksat"] or None,
            "nativePlace": row["nativeplace"] or None,
        },
    }


@dataclass
class SQLitePersonHydrator:
    """Person hydrator reading from the same database as the relation store.

    This adapter implements PersonHydratorPort.
    """

    db_path: Path
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.db_path = Path(self.db_path)
        self._logger = logging.getLogger(__name__)

    def hydrate(self, person_id: PersonId) -> Optional[HydratedPerson]:
        """Fetch the display record of a person.

        Args:
            person_id: The person to look up.

        Returns:
            The display record, or None if no such person is stored.

        Raises:
            HydrationError: If the database cannot be read.
        """
        try:
            with closing(_connect_read_only(self.db_path)) as conn:
                row = conn.execute(
                    "SELECT * FROM person WHERE id = ?", (person_id,)
                ).fetchone()
                if row is None:
                    self._logger.info(
                        "Person record not found", extra={"person_id": person_id}
                    )
                    return None

                spouses = conn.execute(
                    "SELECT wifeid AS spouseid FROM marriages WHERE husbandid = ? "
                    "UNION "
                    "SELECT husbandid AS spouseid FROM marriages WHERE wifeid = ?",
                    (person_id, person_id),
                ).fetchall()
                children = conn.execute(
                    "SELECT id FROM person WHERE fatherid = ? OR motherid = ?",
                    (person_id, person_id),
                ).fetchall()
        except sqlite3.Error as e:
            raise HydrationError(
                f"Failed to read person {person_id}",
                cause=e,
                source="person",
                person_id=person_id,
            )

        return map_person(
            row,
            spouses=[str(r["spouseid"]) for r in spouses],
            children=[str(r["id"]) for r in children],
        )
