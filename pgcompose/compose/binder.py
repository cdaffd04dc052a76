"""Positional parameter binding."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from pgcompose.compose.placeholders import placeholder
from pgcompose.compose.text import append_text
from pgcompose.schema.query_config import MISSING, QueryConfig

Q = TypeVar("Q", bound=QueryConfig)

NULL_KEYWORD = "NULL"
DEFAULT_KEYWORD = "DEFAULT"


def bind_value(cfg: Q, value: Any) -> Q:
    """Bind one value at the end of ``cfg.text``.

    ``None`` is written as ``NULL`` and :data:`MISSING` as ``DEFAULT``; neither
    is added to ``cfg.values``.  Any other value is pushed onto ``cfg.values``
    and referenced with the next placeholder.  The output is concatenated
    without a joining space.
    """
    if value is None:
        cfg.text += NULL_KEYWORD
    elif value is MISSING:
        cfg.text += DEFAULT_KEYWORD
    else:
        cfg.text += placeholder(len(cfg.values) + 1)
        cfg.values.append(value)
    return cfg


def bind_values(cfg: Q, values: Iterable[Any], separator: str = ", ") -> Q:
    """Bind each of ``values`` in order, joined by ``separator``.

    Numbering continues from the values already bound on ``cfg``.
    """
    for i, value in enumerate(values):
        if i:
            cfg.text += separator
        bind_value(cfg, value)
    return cfg


def open_brackets(cfg: Q) -> Q:
    return append_text(cfg, "(")


def close_brackets(cfg: Q) -> Q:
    return append_text(cfg, ")")
