"""Fluent composer owning a single QueryConfig.

``QueryComposer`` wraps the module-level operations so a statement can be
written as one chain::

    cfg = (
        QueryComposer("SELECT * FROM")
        .identifier("public.users")
        .append("WHERE id IN")
        .open()
        .bind_all([1, 2, 3])
        .close()
        .build()
    )
    # cfg.text   == 'SELECT * FROM "public"."users" WHERE id IN ($1, $2, $3 )'
    # cfg.values == [1, 2, 3]

Every chaining method mutates the owned config and returns the composer.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from pgcompose.compose.binder import bind_value, bind_values, close_brackets, open_brackets
from pgcompose.compose.escape import append_identifier, append_literal, append_literals
from pgcompose.compose.merge import append_query_config
from pgcompose.compose.text import append_raw, append_text
from pgcompose.schema.query_config import QueryConfig
from pgcompose.settings import ComposerSettings

logger = logging.getLogger(__name__)


class QueryComposer:
    """Builds one :class:`QueryConfig` through chained calls.

    Args:
        text: Initial SQL text.
        name: Optional statement name stored on the config.
        settings: Composer options; defaults to ``ComposerSettings()``.
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: str | None = None,
        settings: ComposerSettings | None = None,
    ) -> None:
        self._cfg = QueryConfig(text=text, name=name)
        self._settings = settings or ComposerSettings()

    @classmethod
    def wrap(
        cls,
        cfg: QueryConfig,
        settings: ComposerSettings | None = None,
    ) -> QueryComposer:
        """Adopt an existing config; later calls mutate ``cfg`` itself."""
        composer = cls(settings=settings)
        composer._cfg = cfg
        return composer

    @property
    def config(self) -> QueryConfig:
        return self._cfg

    @property
    def settings(self) -> ComposerSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def raw(self, text: str) -> QueryComposer:
        """Append ``text`` with no separator."""
        append_raw(self._cfg, text)
        return self._trace("raw", text)

    def append(self, text: str) -> QueryComposer:
        """Append ``text``, inserting a space where one is needed."""
        append_text(self._cfg, text)
        return self._trace("append", text)

    # ------------------------------------------------------------------
    # Escaping
    # ------------------------------------------------------------------

    def identifier(self, identifier: str) -> QueryComposer:
        append_identifier(self._cfg, identifier)
        return self._trace("identifier", identifier)

    def literal(self, value: str) -> QueryComposer:
        append_literal(self._cfg, value)
        return self._trace("literal", value)

    def literals(self, values: Sequence[Any], separator: str | None = None) -> QueryComposer:
        append_literals(self._cfg, values, self._separator(separator))
        return self._trace("literals", values)

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def bind(self, value: Any) -> QueryComposer:
        bind_value(self._cfg, value)
        return self._trace("bind", value)

    def bind_all(self, values: Iterable[Any], separator: str | None = None) -> QueryComposer:
        values = list(values)
        bind_values(self._cfg, values, self._separator(separator))
        return self._trace("bind_all", values)

    def open(self) -> QueryComposer:
        open_brackets(self._cfg)
        return self._trace("open", "(")

    def close(self) -> QueryComposer:
        close_brackets(self._cfg)
        return self._trace("close", ")")

    # ------------------------------------------------------------------
    # Merging
    # ------------------------------------------------------------------

    def extend(self, other: QueryConfig | QueryComposer) -> QueryComposer:
        """Append another config (or composer's config), renumbering it.

        ``other`` is left unchanged.
        """
        ext = other.config if isinstance(other, QueryComposer) else other
        append_query_config(self._cfg, ext)
        return self._trace("extend", ext.text)

    def build(self) -> QueryConfig:
        """Return the owned config."""
        return self._cfg

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _separator(self, separator: str | None) -> str:
        return self._settings.separator if separator is None else separator

    def _trace(self, op: str, fragment: Any) -> QueryComposer:
        if self._settings.log_fragments:
            logger.debug("%s: %r -> %d values", op, fragment, len(self._cfg.values))
        return self
