"""
Polars bridges for pivot results, header items, and computed rectangles.

Purpose
- Build core models (DatasetData, HeaderItem) from Polars DataFrames handed
  over by the query and pivot-transform layers.
- Export computed header rectangles as a DataFrame for renderers and debugging.

Checks performed
- Required columns present; scalar columns safely cast (non-strict) to the
  expected dtype.
- Optional boolean flags default to False when absent.

Notes
- Depends on polars and ptab.core only.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import polars as pl

from ptab.core.errors import LayoutError
from ptab.core.schema import CellRect, Column, DatasetData, HeaderItem

from .errors import IoSchemaError

__all__ = [
    "HEADER_ITEM_COLUMNS",
    "header_items_from_frame",
    "dataset_from_frame",
    "dataset_to_frame",
    "rects_frame",
]

# Header item column -> dtype; the first four are required.
HEADER_ITEM_COLUMNS: dict[str, object] = {
    "value": pl.Utf8,
    "depth": pl.Int64,
    "offset": pl.Int64,
    "span": pl.Int64,
    "max_depth_below": pl.Int64,
    "is_subtotal": pl.Boolean,
    "is_grand_total": pl.Boolean,
    "has_subtotal": pl.Boolean,
}
_REQUIRED_HEADER_COLUMNS: tuple[str, ...] = ("value", "depth", "offset", "span")
_OPTIONAL_DEFAULTS: dict[str, object] = {
    "max_depth_below": 0,
    "is_subtotal": False,
    "is_grand_total": False,
    "has_subtotal": False,
}

_RECT_SCHEMA: dict[str, object] = {
    "value": pl.Utf8,
    "depth": pl.Int64,
    "offset": pl.Int64,
    "span": pl.Int64,
    "x": pl.Int64,
    "y": pl.Int64,
    "width": pl.Int64,
    "height": pl.Int64,
}


def _safe_cast(df: pl.DataFrame, col: str, target: object) -> pl.DataFrame:
    try:
        return df.with_columns(pl.col(col).cast(target, strict=False))  # type: ignore[arg-type]
    except pl.exceptions.PolarsError as exc:
        raise IoSchemaError(f"failed to cast column {col!r} to {target}: {exc}") from exc


def header_items_from_frame(df: pl.DataFrame) -> list[HeaderItem]:
    """
    Convert a header item table into HeaderItem models, preserving row order.

    Args:
        df (pl.DataFrame): One row per header item with at least
            value/depth/offset/span columns. Flag columns may use either
            snake_case or camelCase names.

    Returns:
        list[HeaderItem]: Validated items.

    Raises:
        IoSchemaError: If required columns are missing.
        pydantic.ValidationError: If a row violates HeaderItem constraints.
    """
    # camelCase producer columns (maxDepthBelow, ...) map onto field names
    aliases = {
        info.alias: name
        for name, info in HeaderItem.model_fields.items()
        if info.alias and info.alias in df.columns and name not in df.columns
    }
    if aliases:
        df = df.rename(aliases)

    missing = [c for c in _REQUIRED_HEADER_COLUMNS if c not in df.columns]
    if missing:
        raise IoSchemaError(f"missing required columns: {missing!r}")

    for col, default in _OPTIONAL_DEFAULTS.items():
        if col not in df.columns:
            df = df.with_columns(pl.lit(default).alias(col))
    for col, dtype in HEADER_ITEM_COLUMNS.items():
        if df.schema[col] != dtype:
            df = _safe_cast(df, col, dtype)

    frame = df.select(list(HEADER_ITEM_COLUMNS))
    return [HeaderItem.model_validate(row) for row in frame.iter_rows(named=True)]


def dataset_from_frame(df: pl.DataFrame, columns: Sequence[Column] | None = None) -> DatasetData:
    """
    Wrap a result frame as DatasetData.

    Args:
        df (pl.DataFrame): Result rows.
        columns (Sequence[Column] | None): Column metadata in frame order; when
            None, bare columns named after the frame columns are used.

    Raises:
        IoSchemaError: If the metadata count differs from the frame width.
    """
    if columns is None:
        cols = [Column(name=name) for name in df.columns]
    else:
        cols = list(columns)
        if len(cols) != df.width:
            raise IoSchemaError(
                f"got {len(cols)} column descriptions for a frame with {df.width} columns"
            )
    return DatasetData(cols=cols, rows=[list(row) for row in df.iter_rows()])


def dataset_to_frame(data: DatasetData) -> pl.DataFrame:
    """
    Materialize DatasetData as a DataFrame named after its columns.

    Raises:
        IoSchemaError: If two columns share a name.
    """
    names = [c.name for c in data.cols]
    dupes = sorted({n for n in names if names.count(n) > 1})
    if dupes:
        raise IoSchemaError(f"duplicate column names: {dupes!r}")
    return pl.DataFrame(
        {name: [row[i] for row in data.rows] for i, name in enumerate(names)},
        strict=False,
    )


def rects_frame(items: Iterable[HeaderItem], rects: Iterable[CellRect]) -> pl.DataFrame:
    """
    Pair header items with their rectangles in one DataFrame.

    Raises:
        LayoutError: If items and rects differ in length.
    """
    items = list(items)
    rects = list(rects)
    if len(items) != len(rects):
        raise LayoutError(f"{len(items)} header items but {len(rects)} rectangles")
    records = [
        {
            "value": item.value,
            "depth": item.depth,
            "offset": item.offset,
            "span": item.span,
            "x": rect.x,
            "y": rect.y,
            "width": rect.width,
            "height": rect.height,
        }
        for item, rect in zip(items, rects)
    ]
    return pl.DataFrame(records, schema=_RECT_SCHEMA)
