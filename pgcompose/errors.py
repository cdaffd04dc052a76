"""Custom exception hierarchy for pgcompose.

All public errors inherit from PgComposeError so callers can catch the base
class for any pgcompose-specific failure.
"""
from __future__ import annotations

from typing import Any


class PgComposeError(Exception):
    """Base exception for all pgcompose errors."""


class EscapeError(PgComposeError):
    """Raised when an identifier or literal cannot be quoted safely.

    Args:
        message: Human-readable description.
        value: The input that was rejected.
        reason: Machine-readable reason (``not_a_string`` or ``nul_character``).
    """

    def __init__(self, message: str, value: Any, reason: str) -> None:
        super().__init__(message)
        self.value = value
        self.reason = reason


class ConversionError(PgComposeError):
    """Raised when a QueryConfig cannot be converted to another parameter style.

    Args:
        message: Human-readable description.
        index: The 1-based placeholder index that could not be resolved.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
