"""pgcompose composition layer: text, escaping, binding and merging."""
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
from pgcompose.compose.placeholders import (
    PLACEHOLDER_PATTERN,
    find_placeholders,
    placeholder,
    renumber_placeholders,
)
from pgcompose.compose.text import append_raw, append_text

__all__ = [
    "append_raw",
    "append_text",
    "append_identifier",
    "append_literal",
    "append_literals",
    "quote_identifier",
    "quote_qualified_identifier",
    "quote_literal",
    "bind_value",
    "bind_values",
    "open_brackets",
    "close_brackets",
    "append_query_config",
    "merge",
    "PLACEHOLDER_PATTERN",
    "placeholder",
    "find_placeholders",
    "renumber_placeholders",
    "QueryComposer",
]
