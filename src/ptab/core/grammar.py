"""
Canonical pivot grammar and helpers.

Defines column source tags, partition names, and font weights, together with
zero-IO normalization helpers used by the pydantic models in ptab.core.schema.

Design principles
-----------------
1) One naming standard:
   - Enum classes: PascalCase
   - Enum member names: UPPER_SNAKE (Python constants)
   - Enum serialized values (settings payloads, JSON): lower_snake

2) Open source tags:
   - Result-set columns carry a free-form ``source`` tag. Only ``aggregation``
     and ``breakout`` have meaning to the pivot table; every other tag
     (``native``, ``fields``, ...) is preserved verbatim after lowercasing.

3) Closed partition names:
   - The partition set is fixed (rows, columns, values) and order matters:
     it is the priority order used when placing a newly appearing column.

Examples
--------
>>> from ptab.core.grammar import PartitionName, partition_name_from_value, normalize_source
>>> partition_name_from_value("ROWS") is PartitionName.ROWS
True
>>> normalize_source("Aggregation")
'aggregation'
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from typing import Final

from .errors import GrammarError

__all__ = [
    "ColumnSource",
    "PartitionName",
    "FontWeight",
    "PARTITION_ORDER",
    "is_lower_snake",
    "normalize_source",
    "partition_name_from_value",
    "font_weight_from_value",
    "ensure_all_enum_values_lower_snake",
]


class ColumnSource(Enum):
    """
    Known result-set column source tags.

    Only AGGREGATION and BREAKOUT are meaningful for pivoting; the others are
    listed for completeness and for tests.
    """

    AGGREGATION = "aggregation"
    BREAKOUT = "breakout"
    NATIVE = "native"
    FIELDS = "fields"


class PartitionName(Enum):
    """Pivot partitions a field reference can be assigned to."""

    ROWS = "rows"
    COLUMNS = "columns"
    VALUES = "values"


class FontWeight(Enum):
    """Font weights used when measuring header text."""

    NORMAL = "normal"
    BOLD = "bold"


# Declared partition order (settings payload order and default placement priority).
PARTITION_ORDER: Final[tuple[PartitionName, ...]] = (
    PartitionName.ROWS,
    PartitionName.COLUMNS,
    PartitionName.VALUES,
)


_LOWER_SNAKE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")


def is_lower_snake(value: str) -> bool:
    """
    Check whether a string is lower_snake.

    Examples:
      >>> is_lower_snake("values")
      True
      >>> is_lower_snake("Values")
      False
    """
    return bool(_LOWER_SNAKE_RE.match(value or ""))


def normalize_source(source: str | ColumnSource | None) -> str | None:
    """
    Normalize a column source tag.

    Args:
      source (str | ColumnSource | None): Raw tag from the result metadata.

    Returns:
      str | None: Lowercased, stripped tag; None when absent or blank.

    Notes:
      Unknown tags are kept; they simply never count as aggregation/breakout.
    """
    if source is None:
        return None
    if isinstance(source, ColumnSource):
        return source.value
    s = str(source).strip().lower()
    return s or None


def partition_name_from_value(s: str | PartitionName) -> PartitionName:
    """
    Parse a partition name.

    Args:
      s (str | PartitionName): Partition name, case-insensitive.

    Returns:
      PartitionName: Parsed partition.

    Raises:
      GrammarError: If s is not one of rows/columns/values.
    """
    if isinstance(s, PartitionName):
        return s
    lo = (s or "").strip().lower()
    try:
        return PartitionName(lo)
    except ValueError as exc:
        allowed = [p.value for p in PartitionName]
        raise GrammarError(f"partition must be one of {allowed} (got {s!r})") from exc


def font_weight_from_value(s: str | FontWeight) -> FontWeight:
    """Parse a font weight ("normal" or "bold"), raising GrammarError otherwise."""
    if isinstance(s, FontWeight):
        return s
    lo = (s or "").strip().lower()
    try:
        return FontWeight(lo)
    except ValueError as exc:
        raise GrammarError(f"font weight must be 'normal' or 'bold' (got {s!r})") from exc


def ensure_all_enum_values_lower_snake(enums: Iterable[type[Enum]]) -> None:
    """
    Assert that every enum member's value is lower_snake.

    Raises:
      AssertionError: If any enum member has a non-lower_snake value.
    """
    for E in enums:
        for m in E:
            if not is_lower_snake(m.value):
                raise AssertionError(
                    f"{E.__name__}.{m.name} has non-lower_snake value: {m.value!r}"
                )
