"""
Core package aggregator for pivot table contracts (grammar, schemas, partitions,
validity gating, identity hashing, constants).

## Contracts (single source of truth)
- Grammar — enums (ColumnSource, PartitionName, FontWeight) and normalizers.
- Schemas — frozen pydantic models (Column, PivotSetting, HeaderItem, CellRect).
- Partitions — ordered PartitionDescriptor registry with column filters.
- Validity — render gate predicates and check_renderable.
- Hashing — canonical JSON identity for field references.
- Constants/Errors — layout geometry defaults and the exception taxonomy.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Every operation is pure; inputs are never mutated.

## Downstream usage
- ptab.settings — reconciles PivotSetting against current Column lists.
- ptab.layout — measures and positions HeaderItem lists into CellRect values.
"""

from __future__ import annotations

from .errors import (
    GrammarError,
    LayoutError,
    NotAggregatedQueryError,
    RenderError,
    UnsupportedDatabaseError,
)
from .grammar import ColumnSource, FontWeight, PartitionName
from .partitions import PARTITIONS, PartitionDescriptor
from .schema import CellRect, Column, DatasetData, HeaderItem, LeftHeaderWidths, PivotSetting

__all__ = [
    "GrammarError",
    "LayoutError",
    "NotAggregatedQueryError",
    "RenderError",
    "UnsupportedDatabaseError",
    "ColumnSource",
    "FontWeight",
    "PartitionName",
    "PARTITIONS",
    "PartitionDescriptor",
    "CellRect",
    "Column",
    "DatasetData",
    "HeaderItem",
    "LeftHeaderWidths",
    "PivotSetting",
]
