"""
Frozen partition descriptors for the pivot settings reconciler.

Notes:
    - Descriptor order is the priority order used when placing a column that
      newly appears in the query: the first descriptor whose filter accepts the
      column (or that has no filter) receives it.
    - A column accepted by no descriptor is dropped from the settings.
    - Core is zero-IO (stdlib only).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .grammar import PartitionName
from .schema import Column

__all__ = [
    "ColumnFilter",
    "PartitionDescriptor",
    "PARTITIONS",
    "is_dimension",
    "is_metric",
    "get_partition",
    "list_partitions",
]

ColumnFilter = Callable[[Column], bool]


def is_dimension(col: Column | None) -> bool:
    """
    Column usable as a row/column grouping.

    Anything not produced by an aggregation qualifies, including bare
    pseudo-columns that carry no source; the synthetic grouping column does not.
    """
    return col is not None and not col.is_aggregation and not col.is_pivot_group


def is_metric(col: Column | None) -> bool:
    """Column usable as a pivot measure (produced by an aggregation)."""
    return col is not None and col.is_aggregation


@dataclass(frozen=True)
class PartitionDescriptor:
    """
    Frozen descriptor for one pivot partition.

    Attributes:
        name (PartitionName): Partition the descriptor places columns into.
        title (str): Human label shown in the settings sidebar.
        column_filter (ColumnFilter | None): Acceptance predicate; None accepts
            every column (catch-all).

    Examples:
        >>> from ptab.core.partitions import PARTITIONS
        >>> [p.name.value for p in PARTITIONS]
        ['rows', 'columns', 'values']
    """

    name: PartitionName
    title: str
    column_filter: ColumnFilter | None = None

    def accepts(self, col: Column | None) -> bool:
        return self.column_filter is None or bool(self.column_filter(col))


PARTITIONS: tuple[PartitionDescriptor, ...] = (
    PartitionDescriptor(name=PartitionName.ROWS, title="Rows", column_filter=is_dimension),
    PartitionDescriptor(name=PartitionName.COLUMNS, title="Columns", column_filter=is_dimension),
    PartitionDescriptor(name=PartitionName.VALUES, title="Measures", column_filter=is_metric),
)

_PARTITIONS: dict[PartitionName, PartitionDescriptor] = {p.name: p for p in PARTITIONS}


def get_partition(name: PartitionName) -> PartitionDescriptor:
    """Look up the default descriptor for a partition."""
    return _PARTITIONS[name]


def list_partitions() -> list[PartitionDescriptor]:
    """Return all default descriptors in priority order."""
    return list(PARTITIONS)
