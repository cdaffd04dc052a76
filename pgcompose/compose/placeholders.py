"""Positional placeholder tokens (``$1``, ``$2``, ...).

Renumbering is a plain text substitution: every ``$<digits>`` token in a
fragment is treated as a placeholder, including one that happens to sit inside
a quoted literal or a dollar-quoted body such as ``$fn$ ... $1 ... $fn$``.
Fragments that must carry a literal ``$<digits>`` sequence should bind it as a
value instead of inlining it.
"""
from __future__ import annotations

import re

#: Matches one placeholder token; group 1 is the 1-based index.
PLACEHOLDER_PATTERN = re.compile(r"\$(\d+)", re.ASCII)


def placeholder(index: int) -> str:
    """Return the placeholder token for the 1-based ``index``."""
    return f"${index}"


def find_placeholders(text: str) -> list[int]:
    """Return the index of every placeholder token in ``text``, in order."""
    return [int(m.group(1)) for m in PLACEHOLDER_PATTERN.finditer(text)]


def renumber_placeholders(text: str, offset: int) -> str:
    """Shift every placeholder index in ``text`` by ``offset``.

    Args:
        text: SQL fragment whose placeholders start from ``$1``.
        offset: Number of values already bound ahead of the fragment.

    Returns:
        ``text`` with each ``$N`` replaced by ``$(N + offset)``.
    """
    if not offset:
        return text
    return PLACEHOLDER_PATTERN.sub(
        lambda m: placeholder(int(m.group(1)) + offset),
        text,
    )
