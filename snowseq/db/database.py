"""Database class that runs sequence statements and snapshots listings."""

import logging
from dataclasses import dataclass, field
from typing import Any

import psycopg
from psycopg.rows import dict_row

from ..errors import ExecutionError
from .sequences import SequenceRecord, list_sequences

logger = logging.getLogger(__name__)


def _execute(conn: psycopg.Connection, statement: str) -> list[dict[str, Any]]:
    """Run a statement and return any rows it produced."""
    logger.debug("executing %s", statement)
    try:
        with conn.cursor(row_factory=dict_row) as cur:
            cur.execute(statement)  # type: ignore[arg-type]
            if cur.description is None:
                return []
            return cur.fetchall()
    except psycopg.Error as e:
        raise ExecutionError(statement, e) from e


@dataclass
class Database:
    """Represents a connection target and the sequences last seen there."""

    connection_string: str
    sequences: list[SequenceRecord] = field(default_factory=list)

    @classmethod
    def from_connection_string(cls, connection_string: str) -> "Database":
        """Create a Database snapshot by connecting and listing all sequences."""
        db = cls(connection_string=connection_string)
        db.fetch_all()
        return db

    def connect(self) -> psycopg.Connection:
        return psycopg.connect(self.connection_string, autocommit=True)

    def fetch_all(self) -> None:
        """Refresh ``sequences`` from the store."""
        with self.connect() as conn:
            self.sequences = list_sequences(conn)
        logger.debug("fetched %d sequence(s)", len(self.sequences))

    def execute(self, statement: str) -> list[dict[str, Any]]:
        """Run a rendered statement against the store.

        Returns the rows produced, e.g. the value drawn by a nextval SELECT,
        or an empty list for DDL.
        """
        with self.connect() as conn:
            return _execute(conn, statement)

    def summary(self) -> str:
        """Return a summary of the database contents."""
        return f"Database Summary:\n  Sequences: {len(self.sequences)}"
