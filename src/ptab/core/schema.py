"""
Pydantic v2 models for pivot result columns, partition assignments, header
items, and computed layout geometry.

Responsibilities
- Define the canonical models consumed and produced by the settings reconciler
  (Column, PivotSetting) and the header layout engine (HeaderItem, CellRect,
  LeftHeaderWidths).
- Normalize loose external payloads: source tags are lowercased, header values
  are coerced to display strings, camelCase header keys are accepted.

Style
- Zero-IO (stdlib + pydantic only).
- Models are frozen; every transformation returns a new instance.

References
- grammar: src/ptab/core/grammar.py (PartitionName, normalize_source)
- hashing: src/ptab/core/hashing.py (field_ref identity)
- tests: tests/core/*
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import PIVOT_GROUPING_COLUMN
from .grammar import (
    PARTITION_ORDER,
    ColumnSource,
    PartitionName,
    normalize_source,
    partition_name_from_value,
)
from .hashing import field_ref_key
from .typing import FieldRef

__all__ = [
    "Column",
    "DatasetData",
    "PivotSetting",
    "HeaderItem",
    "CellRect",
    "LeftHeaderWidths",
]

# ============================================================================
# Result set
# ============================================================================


class Column(BaseModel):
    """
    One result-set column as described by query metadata.

    Attributes:
        name (str): Column name; the synthetic grouping column is "pivot-grouping".
        display_name (str | None): Human label, used as header title when present.
        field_ref (Any): Structural identity of the column (nested JSON-like value).
        source (str | None): Source tag, lowercased ("aggregation", "breakout", ...).

    Notes:
        Unknown metadata keys are ignored. Pseudo-columns built from bare
        breakout references carry only ``field_ref``.

    Examples:
        >>> from ptab.core.schema import Column
        >>> Column(name="count", field_ref=["aggregation", 0], source="Aggregation").source
        'aggregation'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    display_name: str | None = None
    field_ref: FieldRef = None
    source: str | None = None

    @field_validator("source", mode="before")
    @classmethod
    def _normalize_source(cls, v: Any) -> str | None:
        return normalize_source(v)

    @property
    def is_pivot_group(self) -> bool:
        """True for the synthetic pivot-grouping column added by the backend."""
        return self.name == PIVOT_GROUPING_COLUMN

    @property
    def is_aggregation(self) -> bool:
        return self.source == ColumnSource.AGGREGATION.value

    @property
    def is_breakout(self) -> bool:
        return self.source == ColumnSource.BREAKOUT.value

    @property
    def key(self) -> str:
        """Canonical identity key of ``field_ref``."""
        return field_ref_key(self.field_ref)

    @property
    def title(self) -> str:
        return self.display_name or self.name


class DatasetData(BaseModel):
    """
    Raw tabular query result: column metadata plus row values.

    Attributes:
        cols (list[Column]): Ordered column metadata.
        rows (list[list[Any]]): Row-major values; may be empty for gating checks.
    """

    model_config = ConfigDict(extra="ignore")

    cols: list[Column] = Field(default_factory=list)
    rows: list[list[Any]] = Field(default_factory=list)


# ============================================================================
# Partition assignment
# ============================================================================


class PivotSetting(BaseModel):
    """
    Assignment of field references to the fixed pivot partitions.

    Attributes:
        rows (tuple[FieldRef, ...]): Row-axis fields, outermost first.
        columns (tuple[FieldRef, ...]): Column-axis fields, outermost first.
        values (tuple[FieldRef, ...]): Measures.

    Notes:
        - Order within a partition is significant (header nesting order).
        - A field reference should appear in at most one partition; the
          reconciler keeps it that way for references it adds.
        - Partitions are addressed through PartitionName, never free strings.

    Examples:
        >>> from ptab.core.schema import PivotSetting
        >>> from ptab.core.grammar import PartitionName
        >>> s = PivotSetting(rows=[["field", 1, None]])
        >>> s.get(PartitionName.ROWS)
        (['field', 1, None],)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    rows: tuple[FieldRef, ...] = ()
    columns: tuple[FieldRef, ...] = ()
    values: tuple[FieldRef, ...] = ()

    @field_validator("rows", "columns", "values", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return () if v is None else v

    def get(self, name: PartitionName | str) -> tuple[FieldRef, ...]:
        """Field references of one partition."""
        return getattr(self, partition_name_from_value(name).value)

    def with_partition(self, name: PartitionName | str, refs: Iterable[FieldRef]) -> PivotSetting:
        """Return a copy with one partition replaced."""
        return self.model_copy(update={partition_name_from_value(name).value: tuple(refs)})

    def field_refs(self) -> list[FieldRef]:
        """All field references, flattened in partition order."""
        return [ref for name in PARTITION_ORDER for ref in self.get(name)]

    def to_dict(self) -> dict[str, list[FieldRef]]:
        """Plain mapping in settings payload shape."""
        return {name.value: list(self.get(name)) for name in PARTITION_ORDER}

    @classmethod
    def from_mapping(cls, value: Mapping[str, Any] | None) -> PivotSetting:
        """
        Build from a settings payload such as ``{"rows": [...], "columns": [...]}``.

        Raises:
            GrammarError: If the mapping names an unknown partition.
        """
        if not value:
            return cls()
        data = {partition_name_from_value(k).value: refs for k, refs in value.items()}
        return cls(**data)


# ============================================================================
# Header layout
# ============================================================================


class HeaderItem(BaseModel):
    """
    One node of a flattened header-tree traversal.

    Attributes:
        value (str): Display label.
        depth (int): Nesting level, 0 = outermost.
        offset (int): Leaf units before this item along the axis.
        span (int): Leaf units covered by this item.
        max_depth_below (int): Depth of the deepest descendant below this node.
        is_subtotal (bool): Subtotal row/column; excluded from measurement.
        is_grand_total (bool): Grand total row/column; excluded from measurement.
        has_subtotal (bool): A collapse/expand toggle must be reserved.

    Notes:
        camelCase keys (``maxDepthBelow``, ``isSubtotal``, ...) are accepted so
        payloads from the header producer can be validated unchanged.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    value: str = ""
    depth: int = Field(0, ge=0)
    offset: int = Field(0, ge=0)
    span: int = Field(1, ge=1)
    max_depth_below: int = Field(0, ge=0, alias="maxDepthBelow")
    is_subtotal: bool = Field(False, alias="isSubtotal")
    is_grand_total: bool = Field(False, alias="isGrandTotal")
    has_subtotal: bool = Field(False, alias="hasSubtotal")

    @field_validator("value", mode="before")
    @classmethod
    def _display_value(cls, v: Any) -> str:
        return "" if v is None else str(v)


class CellRect(BaseModel):
    """Pixel rectangle of a header cell, origin at the top-left of its header block."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    width: int
    height: int


class LeftHeaderWidths(BaseModel):
    """
    Per-depth pixel widths of the left (row-axis) header and their sum.

    Attributes:
        widths (list[int]): One entry per row-axis depth, outer to inner.
        total (int): Sum of ``widths``.
    """

    model_config = ConfigDict(frozen=True)

    widths: list[int] = Field(default_factory=list)
    total: int = 0
