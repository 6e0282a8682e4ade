"""
Typing aliases and collaborator protocols used across the pivot core.

Provides the FieldRef alias and structural protocols for the external
collaborators this package consumes but does not implement: text measurement,
database capability lookup, and the query that binds a database. This module
contains no runtime logic and is zero-IO.

Examples:
    Any callable with the right keywords satisfies MeasureText.

    >>> from ptab.core.typing import MeasureText
    >>> def measure(text: str, *, weight: str, family: str, size: float) -> float:
    ...     return float(len(text) * 7)
    >>> isinstance(measure, MeasureText)
    True
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "FieldRef",
    "MeasureText",
    "Database",
    "Query",
    "ColumnTitleGetter",
]

# Nested JSON-like reference to a result column, e.g. ["field", 12, None].
FieldRef = Any

# Maps a row index (position in the pivot "rows" partition) to its column title.
ColumnTitleGetter = Callable[[int], str]


@runtime_checkable
class MeasureText(Protocol):
    """Rendered width in pixels of ``text`` for the given font; deterministic."""

    def __call__(self, text: str, *, weight: str, family: str, size: float) -> float: ...


@runtime_checkable
class Database(Protocol):
    """Database metadata exposing the pivot capability."""

    def supports_pivots(self) -> bool: ...


@runtime_checkable
class Query(Protocol):
    """Query object that may resolve the database it is bound to."""

    def database(self) -> Database | None: ...
