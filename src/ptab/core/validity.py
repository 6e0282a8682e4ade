"""
Column validity and render gating for pivot tables.

Two tiers:
- Predicates (is_column_valid, is_formattable_pivot_column,
  database_supports_pivot_tables, is_sensible) never raise; an external
  "can this visualization show this data" gate uses their booleans.
- check_renderable raises a user-facing RenderError subclass. It must run
  before layout; the layout engine assumes these invariants and does not
  re-check them.

Notes:
    - Missing database metadata is permissive: absence of information never
      blocks rendering.
    - The aggregation-shape error takes precedence over the database error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from .errors import NotAggregatedQueryError, UnsupportedDatabaseError
from .schema import Column, DatasetData

__all__ = [
    "is_column_valid",
    "is_formattable_pivot_column",
    "database_supports_pivot_tables",
    "is_sensible",
    "check_renderable",
]

logger = logging.getLogger(__name__)


def is_column_valid(col: Column) -> bool:
    """True iff the column is an aggregation, a breakout, or the pivot-grouping column."""
    return col.is_aggregation or col.is_breakout or col.is_pivot_group


def is_formattable_pivot_column(col: Column) -> bool:
    """True iff per-column number formatting applies (aggregations only)."""
    return col.is_aggregation


def database_supports_pivot_tables(query: Any) -> bool:
    """
    Ask the query's database whether it can run pivot queries.

    Args:
        query: Object exposing ``database()`` (see ptab.core.typing.Query), or None.

    Returns:
        bool: The database's answer; True when no database can be resolved.
    """
    resolve = getattr(query, "database", None)
    if not callable(resolve):
        return True
    db = resolve()
    if db is None:
        # No metadata loaded, nothing to check against.
        return True
    return bool(db.supports_pivots())


def _is_aggregated_shape(cols: Sequence[Column]) -> bool:
    return len(cols) >= 2 and all(is_column_valid(c) for c in cols)


def is_sensible(data: DatasetData | Mapping[str, Any], query: Any = None) -> bool:
    """
    Cheap render gate: at least two columns, all valid, database supports pivots.

    Malformed result data counts as not sensible; this never raises.

    Args:
        data: Result data (DatasetData or a mapping with a ``cols`` key).
        query: Query used for the capability lookup.
    """
    try:
        cols = _coerce_data(data).cols
    except ValidationError:
        return False
    return _is_aggregated_shape(cols) and database_supports_pivot_tables(query)


def check_renderable(
    series: Iterable[Any],
    settings: Mapping[str, Any] | None = None,
    query: Any = None,
) -> None:
    """
    Raise if the first series cannot be rendered as a pivot table.

    Args:
        series: Sequence of result series; the first carries ``data``
            (a DatasetData or a mapping with ``cols``).
        settings: Visualization settings (accepted for gate signature parity; unused).
        query: Query used for the capability lookup.

    Raises:
        NotAggregatedQueryError: Fewer than two columns or an invalid column.
        UnsupportedDatabaseError: The database does not support pivot tables.
    """
    first = next(iter(series), None)
    raw = first.get("data") if isinstance(first, Mapping) else getattr(first, "data", first)
    data = _coerce_data(raw)
    if not _is_aggregated_shape(data.cols):
        logger.debug("pivot gate rejected result shape: %d cols", len(data.cols))
        raise NotAggregatedQueryError()
    if not database_supports_pivot_tables(query):
        raise UnsupportedDatabaseError()


def _coerce_data(data: DatasetData | Mapping[str, Any] | None) -> DatasetData:
    if isinstance(data, DatasetData):
        return data
    return DatasetData.model_validate(data or {})
