"""
Core exception types raised by grammar normalization, render gating, and layout.

Provides typed exceptions for pivot-domain failures:
- GrammarError for enum/normalization violations.
- RenderError (and its two subclasses) for user-facing "cannot render this data
  as a pivot table" conditions raised by ptab.core.validity.check_renderable.
- LayoutError for structurally malformed layout inputs.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - RenderError messages are user-facing and shown in place of the visualization.
      They indicate a structural mismatch between data and visualization type and
      carry no recovery path.
    - Predicates (is_sensible, is_column_valid, ...) and the settings reconciler
      never raise these.

Examples:
    Catch a render gate failure.

    >>> from ptab.core.errors import NotAggregatedQueryError, RenderError
    >>> try:
    ...     raise NotAggregatedQueryError()
    ... except RenderError as e:
    ...     msg = str(e)
    >>> "aggregated" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "GrammarError",
    "RenderError",
    "NotAggregatedQueryError",
    "UnsupportedDatabaseError",
    "LayoutError",
]


class GrammarError(ValueError):
    """Enum/naming normalization failure (e.g., unknown partition name)."""


class RenderError(ValueError):
    """
    Base class for user-facing pivot render gate failures.

    Subclasses carry a default message so callers can raise them bare.
    """

    default_message: str = "This data cannot be displayed as a pivot table."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NotAggregatedQueryError(RenderError):
    """Result set has fewer than two columns or a column that is neither aggregation nor breakout."""

    default_message = "Pivot tables can only be used with aggregated queries."


class UnsupportedDatabaseError(RenderError):
    """The query's database reports that it cannot run pivot queries."""

    default_message = "This database does not support pivot tables."


class LayoutError(ValueError):
    """Layout inputs are inconsistent (e.g., an item depth with no width entry)."""
