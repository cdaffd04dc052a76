"""Combining two query configs into one.

Both operations place ``ext``'s SQL after ``source``'s and shift ``ext``'s
placeholders past the values ``source`` already holds.  They differ in how
they treat their inputs:

``append_query_config``
    Mutates ``source`` and returns it.  Joins the text with the
    :func:`~pgcompose.compose.text.append_text` rule.

``merge``
    Returns a new config and leaves both inputs untouched.  Always joins the
    text with exactly one space, and takes every field of ``ext`` except
    ``name`` over the same field of ``source``.
"""
from __future__ import annotations

import logging
from typing import TypeVar

from pgcompose.compose.placeholders import renumber_placeholders
from pgcompose.compose.text import append_text
from pgcompose.schema.query_config import QueryConfig

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=QueryConfig)


def append_query_config(source: A, ext: QueryConfig) -> A:
    """Append ``ext`` onto ``source`` in place.

    Only ``text`` and ``values`` are taken from ``ext``; ``source`` keeps its
    ``name`` and any other fields.  ``ext`` is not modified.

    Args:
        source: Config to extend.  Any other holder of this object sees the
            change.
        ext: Config whose placeholders are numbered from ``$1``.

    Returns:
        ``source`` itself.
    """
    offset = len(source.values)
    logger.debug(
        "Appending query config: offset=%d, appended_values=%d",
        offset,
        len(ext.values),
    )
    append_text(source, renumber_placeholders(ext.text, offset))
    source.values.extend(list(ext.values))
    return source


def merge(source: A, ext: QueryConfig) -> A:
    """Return a new config holding ``source`` followed by ``ext``.

    Fields are combined shallowly, ``ext`` winning over ``source``, except:

    * ``name`` always comes from ``source``;
    * ``text`` is ``source.text + " " + ext.text`` with ``ext``'s
      placeholders renumbered;
    * ``values`` is a new list of ``source.values`` then ``ext.values``.

    The result has the type of ``source``.
    """
    offset = len(source.values)
    logger.debug(
        "Merging query configs: offset=%d, appended_values=%d",
        offset,
        len(ext.values),
    )
    fields = {**dict(source), **dict(ext)}
    fields.update(
        name=source.name,
        text=source.text + " " + renumber_placeholders(ext.text, offset),
        values=[*source.values, *ext.values],
    )
    return type(source).model_validate(fields)
