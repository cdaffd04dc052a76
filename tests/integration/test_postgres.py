"""Integration tests: compose → execute against a real PostgreSQL instance.

Uses PGCOMPOSE_PG_DSN (e.g. ``postgresql://postgres@localhost/postgres``).
Skips all tests if the env var is unset or connection fails.  Queries run
through psycopg's ``RawCursor`` so the server sees the ``$N`` placeholders
exactly as composed.
"""
from __future__ import annotations

import os

import pytest

from pgcompose import (
    MISSING,
    QueryComposer,
    QueryConfig,
    append_query_config,
    merge,
)

psycopg = pytest.importorskip("psycopg", reason="psycopg required for Postgres integration tests")

pytestmark = pytest.mark.integration


def _get_pg_connection():
    dsn = os.environ.get("PGCOMPOSE_PG_DSN")
    if not dsn:
        pytest.skip("PGCOMPOSE_PG_DSN not set")
    try:
        return psycopg.connect(dsn, cursor_factory=psycopg.RawCursor)
    except Exception as e:
        pytest.skip(f"Cannot connect to Postgres: {e}")


@pytest.fixture(scope="module")
def pg_conn():
    """Module-scoped connection with a small temporary table."""
    conn = _get_pg_connection()
    with conn.cursor() as cur:
        cur.execute(
            """CREATE TEMPORARY TABLE "pgc users" (
                   id         INTEGER PRIMARY KEY,
                   name       TEXT    NOT NULL,
                   status     TEXT    NOT NULL DEFAULT 'active',
                   note       TEXT
               )"""
        )
        cur.executemany(
            'INSERT INTO "pgc users" (id, name, status) VALUES ($1, $2, $3)',
            [(1, "Alice", "active"), (2, "O'Brien", "active"), (3, "Carol", "banned")],
        )
    conn.commit()
    yield conn
    conn.close()


def _run(conn, cfg: QueryConfig) -> list[tuple]:
    with conn.cursor() as cur:
        cur.execute(cfg.text, cfg.values)
        return cur.fetchall() if cur.description else []


def test_bound_values_and_quoted_identifier(pg_conn):
    cfg = (
        QueryComposer("SELECT name FROM")
        .identifier("pgc users")
        .append("WHERE id IN")
        .open()
        .bind_all([1, 2])
        .close()
        .append("ORDER BY id")
        .build()
    )
    assert _run(pg_conn, cfg) == [("Alice",), ("O'Brien",)]


def test_inlined_literal_matches_row(pg_conn):
    cfg = QueryComposer('SELECT id FROM "pgc users" WHERE name =').literal("O'Brien").build()
    assert _run(pg_conn, cfg) == [(2,)]


def test_backslash_literal_round_trips(pg_conn):
    cfg = QueryComposer("SELECT").literal("C:\\temp\\it's").build()
    assert _run(pg_conn, cfg) == [("C:\\temp\\it's",)]


def test_merged_fragments_execute(pg_conn):
    base = QueryConfig(text='SELECT id FROM "pgc users" WHERE status = $1', values=["active"])
    extra = QueryConfig(text="AND id > $1 ORDER BY id", values=[1])
    assert _run(pg_conn, merge(base, extra)) == [(2,)]
    append_query_config(base, extra)
    assert _run(pg_conn, base) == [(2,)]


def test_insert_with_null_and_default(pg_conn):
    insert = (
        QueryComposer('INSERT INTO "pgc users" (id, name, status, note) VALUES')
        .open()
        .bind_all([10, "Dave", MISSING, None])
        .raw(")")
        .build()
    )
    _run(pg_conn, insert)
    select = QueryComposer('SELECT status, note FROM "pgc users" WHERE id =').bind(10).build()
    assert _run(pg_conn, select) == [("active", None)]
    pg_conn.rollback()
