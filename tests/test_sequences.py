"""Tests for sequence listing and row decoding."""

from datetime import datetime, timezone
from decimal import Decimal

import psycopg
import pytest
from psycopg.rows import dict_row

from snowseq import (
    DecodeError,
    ExecutionError,
    SequenceRecord,
    fetch_sequence,
    list_sequences,
    scan_sequence,
    sequence,
)
from tests.fakes import FakeConnection, make_row


def test_scan_sequence_maps_columns():
    record = scan_sequence(make_row(comment="order ids"))
    assert record == SequenceRecord(
        name="ORDERS_SEQ",
        database_name="ANALYTICS",
        schema_name="PUBLIC",
        next_value="1",
        interval="1",
        created_on="2024-03-01T10:00:00-08:00",
        owner="SYSADMIN",
        comment="order ids",
    )
    assert record.key == "ANALYTICS.PUBLIC.ORDERS_SEQ"
    assert record.qualified_name == '"ANALYTICS"."PUBLIC"."ORDERS_SEQ"'


def test_scan_sequence_keeps_null_distinct_from_empty():
    record = scan_sequence(make_row(comment=None, owner=""))
    assert record.comment is None
    assert record.owner == ""


def test_scan_sequence_converts_store_types():
    created = datetime(2024, 3, 1, 10, 0, tzinfo=timezone.utc)
    record = scan_sequence(
        make_row(next_value=101, interval=Decimal("5"), created_on=created)
    )
    assert record.next_value == "101"
    assert record.interval == "5"
    assert record.created_on == "2024-03-01T10:00:00+00:00"


def test_scan_sequence_ignores_extra_columns():
    record = scan_sequence(make_row(ordered="Y"))
    assert record.name == "ORDERS_SEQ"


def test_scan_sequence_missing_column():
    row = make_row()
    del row["interval"]
    with pytest.raises(DecodeError) as excinfo:
        scan_sequence(row)
    assert excinfo.value.column == "interval"


def test_scan_sequence_type_mismatch():
    with pytest.raises(DecodeError) as excinfo:
        scan_sequence(make_row(owner=["SYSADMIN"]))
    assert excinfo.value.column == "owner"


def test_list_sequences_empty():
    conn = FakeConnection(rows=[])
    assert list_sequences(conn) == []
    assert conn.executed == ["SHOW SEQUENCES"]


def test_list_sequences_preserves_order():
    rows = [make_row(name=n, next_value=str(i)) for i, n in enumerate(["B", "A", "C"])]
    conn = FakeConnection(rows=rows)
    records = list_sequences(conn)
    assert [r.name for r in records] == ["B", "A", "C"]
    assert [r.next_value for r in records] == ["0", "1", "2"]
    assert conn.row_factories == [dict_row]


def test_list_sequences_closes_cursor():
    conn = FakeConnection(rows=[make_row()])
    list_sequences(conn)
    assert all(cur.closed for cur in conn.cursors)


def test_list_sequences_wraps_execution_error():
    cause = psycopg.Error("permission denied")
    conn = FakeConnection(error=cause)
    with pytest.raises(ExecutionError) as excinfo:
        list_sequences(conn)
    assert excinfo.value.statement == "SHOW SEQUENCES"
    assert excinfo.value.__cause__ is cause
    assert "permission denied" in str(excinfo.value)
    assert all(cur.closed for cur in conn.cursors)


def test_list_sequences_decode_error_names_statement():
    row = make_row()
    del row["owner"]
    conn = FakeConnection(rows=[row])
    with pytest.raises(DecodeError, match="unable to scan row for SHOW SEQUENCES"):
        list_sequences(conn)


def test_fetch_sequence_found():
    conn = FakeConnection(rows=[make_row()])
    builder = sequence("ORDERS_SEQ", "ANALYTICS", "PUBLIC")
    record = fetch_sequence(conn, builder)
    assert record is not None
    assert record.name == "ORDERS_SEQ"
    assert conn.executed == [builder.show()]


def test_fetch_sequence_missing():
    conn = FakeConnection(rows=[])
    assert fetch_sequence(conn, sequence("s", "d", "p")) is None


def test_fetch_sequence_wraps_execution_error():
    conn = FakeConnection(error=psycopg.Error("boom"))
    builder = sequence("s", "d", "p")
    with pytest.raises(ExecutionError) as excinfo:
        fetch_sequence(conn, builder)
    assert excinfo.value.statement == builder.show()


def test_fetch_sequence_skips_pattern_siblings():
    # "_" in the LIKE pattern also matches ORDERSXSEQ
    rows = [make_row(name="ORDERSXSEQ", next_value="50"), make_row(name="ORDERS_SEQ")]
    conn = FakeConnection(rows=rows)
    record = fetch_sequence(conn, sequence("ORDERS_SEQ", "ANALYTICS", "PUBLIC"))
    assert record is not None
    assert record.name == "ORDERS_SEQ"
    assert record.next_value == "1"


def test_fetch_sequence_only_siblings():
    conn = FakeConnection(rows=[make_row(name="ORDERSXSEQ")])
    assert fetch_sequence(conn, sequence("ORDERS_SEQ", "ANALYTICS", "PUBLIC")) is None
