"""Storage adapters - Implementations of the store ports.

Available implementations:
- SQLiteRelationStore: Reads relation records from SQLite
- CSVRelationStore: Reads relation records from CSV files
- SQLitePersonHydrator: Builds person display records from SQLite
"""

from .csv_store import CSVRelationStore
from .sqlite_store import SQLitePersonHydrator, SQLiteRelationStore, create_database

__all__ = [
    "CSVRelationStore",
    "SQLiteRelationStore",
    "SQLitePersonHydrator",
    "create_database",
]
