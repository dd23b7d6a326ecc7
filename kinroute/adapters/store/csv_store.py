"""CSV relation store adapter.

Reads relation records from two CSV files:
- persons.csv: ``id,fatherid,motherid`` (blank cells mean unknown parent)
- marriages.csv: ``husbandid,wifeid``

Files are re-read on every call; nothing is cached between queries.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from ...config import StoreConfig, get_config
from ...domain.errors import StoreAccessError
from ...domain.models import MarriageRecord, ParentChildRecord, PersonId

T = TypeVar("T")


def _optional_id(cell: Optional[str]) -> Optional[PersonId]:
    cell = (cell or "").strip()
    return PersonId(int(cell)) if cell else None


@dataclass
class CSVRelationStore:
    """Relation store that loads from CSV files.

    This adapter implements RelationStorePort.

    Attributes:
        config: Store configuration (paths, file names)
    """

    config: StoreConfig = field(default_factory=lambda: get_config().store)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _read(
        self, source: str, path: Path, parse: Callable[[Dict[str, str]], T]
    ) -> List[T]:
        try:
            with path.open(newline="", encoding="utf-8") as f:
                records = [parse(row) for row in csv.DictReader(f)]
        except (OSError, KeyError, TypeError, ValueError) as e:
            raise StoreAccessError(
                f"Failed to read {source} records from {path}",
                cause=e,
                source=source,
            )
        self._logger.debug(
            "Records read", extra={"source": source, "rows": len(records)}
        )
        return records

    def fetch_parent_child_edges(self) -> Sequence[ParentChildRecord]:
        records = self._read(
            "parent_child",
            self.config.persons_path,
            lambda row: ParentChildRecord(
                id=PersonId(int(row["id"])),
                father_id=_optional_id(row["fatherid"]),
                mother_id=_optional_id(row["motherid"]),
            ),
        )
        return [r for r in records if r.parent_ids]

    def fetch_marriage_edges(self) -> Sequence[MarriageRecord]:
        return self._read(
            "marriages",
            self.config.marriages_path,
            lambda row: MarriageRecord(
                husband_id=PersonId(int(row["husbandid"])),
                wife_id=PersonId(int(row["wifeid"])),
            ),
        )

    def fetch_person_ids(self) -> Sequence[PersonId]:
        return self._read(
            "person",
            self.config.persons_path,
            lambda row: PersonId(int(row["id"])),
        )
