"""
ptab — pivot table settings reconciliation and header layout.

## Packages
- ptab.core — zero-IO contracts: grammar, pydantic schemas, partitions, validity gate.
- ptab.settings — reconcile stored partition assignments with query columns.
- ptab.layout — measure and position flattened header trees into rectangles.
- ptab.io — Polars bridges for results, header items, and rectangles.
- ptab.cli — `ptab reconcile` / `ptab layout` command line.

## Examples
```python
from ptab import Column, PivotSetting, update_value_with_current_columns

a = Column(name="category", field_ref=["field", 1, None], source="breakout")
c = Column(name="count", field_ref=["aggregation", 0], source="aggregation")
update_value_with_current_columns(PivotSetting(rows=[a.field_ref]), [a, c]).values
# (['aggregation', 0],)
```
"""

from __future__ import annotations

from ptab.core.errors import NotAggregatedQueryError, RenderError, UnsupportedDatabaseError
from ptab.core.schema import CellRect, Column, DatasetData, HeaderItem, LeftHeaderWidths, PivotSetting
from ptab.core.validity import (
    check_renderable,
    database_supports_pivot_tables,
    is_column_valid,
    is_formattable_pivot_column,
    is_sensible,
)
from ptab.layout import (
    LayoutSettings,
    get_left_header_widths,
    left_header_cell_rect,
    top_header_cell_rect,
)
from ptab.settings import add_missing_card_breakouts, update_value_with_current_columns

__all__ = [
    "NotAggregatedQueryError",
    "RenderError",
    "UnsupportedDatabaseError",
    "CellRect",
    "Column",
    "DatasetData",
    "HeaderItem",
    "LeftHeaderWidths",
    "PivotSetting",
    "check_renderable",
    "database_supports_pivot_tables",
    "is_column_valid",
    "is_formattable_pivot_column",
    "is_sensible",
    "LayoutSettings",
    "get_left_header_widths",
    "left_header_cell_rect",
    "top_header_cell_rect",
    "add_missing_card_breakouts",
    "update_value_with_current_columns",
]
