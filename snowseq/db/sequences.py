"""SequenceRecord dataclass and queries for sequence listing."""

import logging
from dataclasses import dataclass, fields
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Mapping

import psycopg
from psycopg.rows import dict_row

from ..builder import SequenceBuilder
from ..errors import DecodeError, ExecutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SequenceRecord:
    """Represents a sequence as reported by SHOW SEQUENCES.

    Every field is None when the store returned NULL for that column.
    """

    name: str | None
    database_name: str | None
    schema_name: str | None
    next_value: str | None
    interval: str | None
    created_on: str | None
    owner: str | None
    comment: str | None

    @property
    def key(self) -> str:
        """Unique identifier for listing."""
        return f"{self.database_name}.{self.schema_name}.{self.name}"

    @property
    def qualified_name(self) -> str:
        return f'"{self.database_name}"."{self.schema_name}"."{self.name}"'

    def __str__(self) -> str:
        return f"Sequence({self.key})"


COLUMNS = tuple(fld.name for fld in fields(SequenceRecord))

QUERY = "SHOW SEQUENCES"


def _to_text(column: str, value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    # bool is an int subclass but never a valid value for these columns
    if isinstance(value, bool):
        raise DecodeError(f"column {column!r}: unsupported type bool", column=column)
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"column {column!r}: {e}", column=column) from e
    raise DecodeError(
        f"column {column!r}: unsupported type {type(value).__name__}", column=column
    )


def scan_sequence(row: Mapping[str, Any]) -> SequenceRecord:
    """Decode one result row, keyed by column name, into a SequenceRecord."""
    values = {}
    for column in COLUMNS:
        if column not in row:
            raise DecodeError(f"missing column {column!r}", column=column)
        values[column] = _to_text(column, row[column])
    return SequenceRecord(**values)


def list_sequences(conn: psycopg.Connection) -> list[SequenceRecord]:
    """Fetch all sequences visible to the connection, in store order."""
    try:
        with conn.cursor(row_factory=dict_row) as cur:
            cur.execute(QUERY)
            rows = cur.fetchall()
    except psycopg.Error as e:
        raise ExecutionError(QUERY, e) from e

    if not rows:
        logger.debug("no sequence found")
        return []

    sequences = []
    for row in rows:
        try:
            sequences.append(scan_sequence(row))
        except DecodeError as e:
            raise DecodeError(f"unable to scan row for {QUERY}: {e}", column=e.column) from e
    return sequences


def fetch_sequence(
    conn: psycopg.Connection, builder: SequenceBuilder
) -> SequenceRecord | None:
    """Fetch the sequence described by ``builder``, or None if it does not exist.

    The LIKE pattern from ``builder.show()`` can match siblings (``_`` is a
    wildcard), so only a row whose name equals ``builder.name`` is returned.
    """
    statement = builder.show()
    try:
        with conn.cursor(row_factory=dict_row) as cur:
            cur.execute(statement)  # type: ignore[arg-type]
            rows = cur.fetchall()
    except psycopg.Error as e:
        raise ExecutionError(statement, e) from e

    for row in rows:
        record = scan_sequence(row)
        if record.name == builder.name:
            return record

    logger.debug("sequence %s not found", builder.qualified_name())
    return None
