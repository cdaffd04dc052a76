"""Text accumulation with a deterministic joining rule."""
from __future__ import annotations

from typing import TypeVar

from pgcompose.schema.query_config import QueryConfig

Q = TypeVar("Q", bound=QueryConfig)


def append_raw(cfg: Q, text: str) -> Q:
    """Concatenate ``text`` onto ``cfg.text`` with no separator."""
    cfg.text += text
    return cfg


def append_text(cfg: Q, text: str) -> Q:
    """Append ``text`` separated by a single space where one is needed.

    No space is inserted when ``cfg.text`` is empty or already ends in
    whitespace.
    """
    if not cfg.text:
        cfg.text = text
    elif cfg.text[-1].isspace():
        cfg.text += text
    else:
        cfg.text += " " + text
    return cfg
