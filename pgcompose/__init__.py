"""pgcompose – compose parameterized PostgreSQL queries piece by piece.

A :class:`QueryConfig` is SQL ``text`` plus the ``values`` its ``$1``,
``$2``, ... placeholders refer to.  The functions below append to it while
keeping the placeholder numbering contiguous.

Public API
----------
Text
    ``append_raw``, ``append_text``
Escaping
    ``append_identifier``, ``append_literal``, ``append_literals``
Binding
    ``bind_value``, ``bind_values``, ``open_brackets``, ``close_brackets``
Merging
    ``append_query_config`` (mutates its first argument) and ``merge``
    (returns a new config)

Every appending function mutates the config it is given and returns that same
object, so calls nest or chain::

    from pgcompose import QueryConfig, append_text, bind_value

    cfg = QueryConfig(text="SELECT * FROM users")
    bind_value(append_text(cfg, "WHERE id = "), 42)
    # cfg.text == "SELECT * FROM users WHERE id = $1"

``QueryComposer`` wraps the same operations as chaining methods::

    cfg = QueryComposer("SELECT * FROM").identifier("public.users").build()

Hand the result to any driver using server-side parameters, e.g. asyncpg's
``conn.fetch(cfg.text, *cfg.values)``, or convert it with
:func:`pgcompose.schema.converters.to_sqlalchemy`.
"""

from __future__ import annotations

from pgcompose.compose.binder import bind_value, bind_values, close_brackets, open_brackets
from pgcompose.compose.builder import QueryComposer
from pgcompose.compose.escape import (
    append_identifier,
    append_literal,
    append_literals,
    quote_identifier,
    quote_literal,
    quote_qualified_identifier,
)
from pgcompose.compose.merge import append_query_config, merge
from pgcompose.compose.placeholders import find_placeholders, renumber_placeholders
from pgcompose.compose.text import append_raw, append_text
from pgcompose.errors import ConversionError, EscapeError, PgComposeError
from pgcompose.schema.converters import to_named_params, to_sqlalchemy
from pgcompose.schema.query_config import MISSING, QueryConfig
from pgcompose.settings import ComposerSettings

__all__ = [
    # Data model
    "QueryConfig",
    "MISSING",
    # Text
    "append_raw",
    "append_text",
    # Escaping
    "append_identifier",
    "append_literal",
    "append_literals",
    "quote_identifier",
    "quote_qualified_identifier",
    "quote_literal",
    # Binding
    "bind_value",
    "bind_values",
    "open_brackets",
    "close_brackets",
    # Merging
    "append_query_config",
    "merge",
    "renumber_placeholders",
    "find_placeholders",
    # Fluent builder
    "QueryComposer",
    "ComposerSettings",
    # Converters
    "to_named_params",
    "to_sqlalchemy",
    # Errors
    "PgComposeError",
    "EscapeError",
    "ConversionError",
]
