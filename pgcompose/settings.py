"""Configuration for the fluent :class:`~pgcompose.compose.builder.QueryComposer`.

The module-level composition functions take every option as an explicit
argument; only the composer reads these settings::

    from pgcompose import ComposerSettings, QueryComposer

    settings = ComposerSettings(separator=",\n  ", log_fragments=True)
    cfg = QueryComposer("INSERT INTO t VALUES (", settings=settings).bind_all([1, 2]).build()
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

#: Separator used between bound values and inlined literals unless overridden.
DEFAULT_SEPARATOR = ", "


class ComposerSettings(BaseModel):
    """Options shared by every call on one composer.

    Attributes:
        separator: Default separator for ``literals`` and ``bind_all``.
        log_fragments: Log the text of each appended fragment at DEBUG level.
            Off by default because inlined literals may carry sensitive data.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    separator: str = Field(default=DEFAULT_SEPARATOR)
    log_fragments: bool = False
