"""Unit tests for pgcompose.schema.converters."""

from __future__ import annotations

import pytest

from pgcompose import ConversionError, QueryConfig, append_query_config, bind_values
from pgcompose.schema.converters import to_named_params, to_sqlalchemy

sqlalchemy = pytest.importorskip("sqlalchemy")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _engine():
    """Return an in-memory SQLite engine."""
    return sqlalchemy.create_engine("sqlite:///:memory:")


# ---------------------------------------------------------------------------
# to_named_params
# ---------------------------------------------------------------------------


def test_to_named_params_rewrites_placeholders():
    cfg = QueryConfig(text="SELECT * FROM t WHERE a = $1 AND b = $2", values=["x", 3])
    sql, params = to_named_params(cfg)
    assert sql == "SELECT * FROM t WHERE a = :p_1 AND b = :p_2"
    assert params == {"p_1": "x", "p_2": 3}
    assert cfg.text == "SELECT * FROM t WHERE a = $1 AND b = $2"


def test_to_named_params_repeated_placeholder_and_prefix():
    cfg = QueryConfig(text="$1 + $1", values=[5])
    sql, params = to_named_params(cfg, prefix="v")
    assert sql == ":v1 + :v1"
    assert params == {"v1": 5}


def test_to_named_params_dangling_placeholder():
    cfg = QueryConfig(text="SELECT $2", values=["only one"])
    with pytest.raises(ConversionError) as exc_info:
        to_named_params(cfg)
    assert exc_info.value.index == 2


# ---------------------------------------------------------------------------
# to_sqlalchemy
# ---------------------------------------------------------------------------


def test_to_sqlalchemy_executes_on_sqlite():
    cfg = bind_values(QueryConfig(text="SELECT "), [1, 2], " + ")
    with _engine().connect() as conn:
        assert conn.execute(to_sqlalchemy(cfg)).scalar_one() == 3


def test_to_sqlalchemy_merged_config():
    left = QueryConfig(text="SELECT $1 AS a,", values=["x"])
    right = QueryConfig(text="$1 AS b", values=["y"])
    append_query_config(left, right)
    with _engine().connect() as conn:
        row = conn.execute(to_sqlalchemy(left)).one()
    assert tuple(row) == ("x", "y")


def test_to_sqlalchemy_without_values():
    clause = to_sqlalchemy(QueryConfig(text="SELECT 1"))
    with _engine().connect() as conn:
        assert conn.execute(clause).scalar_one() == 1
