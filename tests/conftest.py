"""Shared pytest fixtures for pgcompose unit and integration tests."""
from __future__ import annotations

import pytest

from pgcompose import QueryConfig


@pytest.fixture
def empty() -> QueryConfig:
    """A fresh config with no text and no values."""
    return QueryConfig()


@pytest.fixture
def users_by_id() -> QueryConfig:
    """``SELECT`` with one bound value, used as the left side of merges."""
    return QueryConfig(text="SELECT * FROM users WHERE id = $1", values=[7])


@pytest.fixture
def status_filter() -> QueryConfig:
    """Fragment numbered from ``$1`` meant to be appended to another config."""
    return QueryConfig(text="AND status = $1 AND role = $2", values=["active", "admin"])
