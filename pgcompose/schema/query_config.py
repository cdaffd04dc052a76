"""The QueryConfig record threaded through every composition call.

A ``QueryConfig`` is raw SQL ``text`` plus the ordered ``values`` its
positional placeholders refer to (``$1`` is ``values[0]``).  Subclasses, or
instances carrying extra fields, are accepted everywhere a ``QueryConfig`` is::

    class NamedStatement(QueryConfig):
        row_mode: str = "dict"
"""
from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field


class _Missing:
    """Type of the :data:`MISSING` sentinel."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict) -> _Missing:
        return self

    def __reduce__(self) -> str:
        return "MISSING"


#: Marks an absent value: bound as ``DEFAULT``, skipped by ``append_literals``.
#: ``None`` is the SQL ``NULL`` sentinel and is a different thing.
MISSING: Final = _Missing()


class QueryConfig(BaseModel):
    """Parameterized SQL under construction.

    Attributes:
        text: The SQL assembled so far.
        values: Bound parameter values; index ``i`` backs placeholder ``$(i+1)``.
        name: Optional opaque label (e.g. a prepared statement name).  Kept
            verbatim by every merge.
    """

    model_config = ConfigDict(extra="allow")

    text: str = ""
    values: list[Any] = Field(default_factory=list)
    name: str | None = None
