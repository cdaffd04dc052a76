"""Hand-off helpers for drivers that do not speak ``$N`` placeholders.

SQLAlchemy converter
--------------------
:func:`to_sqlalchemy` turns a :class:`~pgcompose.schema.query_config.QueryConfig`
into a :class:`sqlalchemy.sql.expression.TextClause` with its values bound.

Install the optional dependency before using it::

    pip install "pgcompose[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from pgcompose.schema.converters import to_sqlalchemy

    engine = create_engine("postgresql+psycopg://localhost/app")
    with engine.connect() as conn:
        rows = conn.execute(to_sqlalchemy(cfg)).all()

SQLAlchemy only recognizes ``:name`` when it is not directly followed by
another colon, so write casts as ``CAST($1 AS int)`` rather than ``$1::int``
in configs meant for this converter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pgcompose.compose.placeholders import PLACEHOLDER_PATTERN
from pgcompose.errors import ConversionError
from pgcompose.schema.query_config import QueryConfig

if TYPE_CHECKING:
    from sqlalchemy import TextClause


def to_named_params(cfg: QueryConfig, prefix: str = "p_") -> tuple[str, dict[str, Any]]:
    """Rewrite ``$N`` placeholders as ``:<prefix>N`` named parameters.

    Args:
        cfg: The config to convert.  It is not modified.
        prefix: Prefix for the generated parameter names.

    Returns:
        The rewritten SQL and a mapping of parameter name to value.  Values
        that no placeholder refers to are left out.

    Raises:
        ConversionError: If a placeholder refers past the end of ``values``.
    """
    params: dict[str, Any] = {}

    def _rename(match) -> str:
        index = int(match.group(1))
        if not 1 <= index <= len(cfg.values):
            raise ConversionError(
                f"Placeholder ${index} has no bound value ({len(cfg.values)} values).",
                index=index,
            )
        key = f"{prefix}{index}"
        params[key] = cfg.values[index - 1]
        return f":{key}"

    sql = PLACEHOLDER_PATTERN.sub(_rename, cfg.text)
    return sql, params


def to_sqlalchemy(cfg: QueryConfig, prefix: str = "p_") -> TextClause:
    """Build a SQLAlchemy ``TextClause`` with the config's values bound.

    Raises:
        ConversionError: If a placeholder refers past the end of ``values``.
    """
    from sqlalchemy import text

    sql, params = to_named_params(cfg, prefix)
    clause = text(sql)
    return clause.bindparams(**params) if params else clause
