"""PostgreSQL quoting of identifiers and inline literals.

Inlined literals are for places where PostgreSQL does not accept a bound
parameter (utility statements, ``SET``, DDL defaults).  Untrusted user data
should go through :func:`~pgcompose.compose.binder.bind_value` instead.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

from pgcompose.compose.text import append_text
from pgcompose.errors import EscapeError
from pgcompose.schema.query_config import MISSING, QueryConfig

Q = TypeVar("Q", bound=QueryConfig)


def _check_quotable(value: Any, kind: str) -> str:
    if not isinstance(value, str):
        raise EscapeError(
            f"Cannot quote {type(value).__name__} as an SQL {kind}; expected str.",
            value=value,
            reason="not_a_string",
        )
    if "\x00" in value:
        raise EscapeError(
            f"SQL {kind} must not contain a NUL character.",
            value=value,
            reason="nul_character",
        )
    return value


def quote_identifier(name: str) -> str:
    """Return ``name`` as a double-quoted identifier.

    Raises:
        EscapeError: If ``name`` is not a string or contains NUL.
    """
    escaped = _check_quotable(name, "identifier").replace('"', '""')
    return f'"{escaped}"'


def quote_qualified_identifier(identifier: str) -> str:
    """Quote each dot-separated segment of ``identifier`` on its own.

    ``public.users`` becomes ``"public"."users"``.
    """
    _check_quotable(identifier, "identifier")
    return ".".join(quote_identifier(part) for part in identifier.split("."))


def quote_literal(value: str) -> str:
    """Return ``value`` as a single-quoted string literal.

    Embedded quotes are doubled.  When the value contains a backslash it is
    doubled as well and the literal uses the ``E'...'`` form, so the result
    reads the same whatever ``standard_conforming_strings`` is set to.

    Raises:
        EscapeError: If ``value`` is not a string or contains NUL.
    """
    escaped = _check_quotable(value, "literal").replace("'", "''")
    if "\\" in escaped:
        return "E'" + escaped.replace("\\", "\\\\") + "'"
    return f"'{escaped}'"


def append_identifier(cfg: Q, identifier: str) -> Q:
    """Append a schema-qualified identifier, quoting each segment."""
    return append_text(cfg, quote_qualified_identifier(identifier))


def append_literal(cfg: Q, value: str) -> Q:
    """Append ``value`` inline as an escaped literal.

    Nothing is bound: ``cfg.values`` is left alone and no placeholder is
    emitted.
    """
    return append_text(cfg, quote_literal(value))


def append_literals(cfg: Q, values: Sequence[Any], separator: str = ", ") -> Q:
    """Append escaped literals joined by ``separator``.

    A :data:`~pgcompose.schema.query_config.MISSING` entry is skipped together
    with the separator that would follow it, so a trailing ``MISSING`` leaves
    the previous separator dangling: ``["a", MISSING]`` appends ``'a', ``.
    Output goes straight onto ``cfg.text`` with no joining space.
    """
    last = len(values) - 1
    for i, value in enumerate(values):
        if value is MISSING:
            continue
        cfg.text += quote_literal(value)
        if i < last:
            cfg.text += separator
    return cfg
