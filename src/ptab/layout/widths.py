"""
Left (row-axis) header width computation.

For each row-axis depth the column width is the larger of the bold column
title and the widest normal-weight cell value at that depth, plus padding,
clamped to [min_header_cell_width, max_header_cell_width].

Measurement cap
- Only the first ``max_rows_to_measure`` header items are scanned. Widths
  derived from that sample stand in for the whole column, so items past the
  cap never change the result.

Subtotal toggle allowance
- When a depth has any item flagged ``has_subtotal``, the toggle icon width is
  added to every measured value. The flag is looked up by *row index* while
  the values are taken by *depth index*; both coincide whenever the row
  indexes are 0..n-1 in order, which is the common case.

Subtotal and grand-total items are never measured: their short labels
("Totals") would under-size the column.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ptab.core.grammar import FontWeight
from ptab.core.schema import HeaderItem, LeftHeaderWidths
from ptab.core.typing import ColumnTitleGetter, MeasureText

from .config import LayoutSettings

__all__ = [
    "ColumnValueInfo",
    "get_column_values",
    "get_left_header_widths",
]

logger = logging.getLogger(__name__)


@dataclass
class ColumnValueInfo:
    """Values seen at one depth of the left header and whether any carries a subtotal toggle."""

    values: list[str] = field(default_factory=list)
    has_subtotal: bool = False


def get_column_values(
    items: Iterable[HeaderItem], *, max_rows: int | None = None
) -> list[ColumnValueInfo | None]:
    """
    Group measurable header values by depth.

    Args:
        items: Flattened left header items.
        max_rows: Scan cap; defaults to LayoutSettings().max_rows_to_measure.

    Returns:
        list[ColumnValueInfo | None]: Indexed by depth. A depth that has no
        measurable item within the cap is None.
    """
    cap = LayoutSettings().max_rows_to_measure if max_rows is None else max_rows
    infos: list[ColumnValueInfo | None] = []
    for n, item in enumerate(items):
        if n >= cap:
            break
        if item.is_subtotal or item.is_grand_total:
            continue
        while len(infos) <= item.depth:
            infos.append(None)
        info = infos[item.depth]
        if info is None:
            info = infos[item.depth] = ColumnValueInfo()
        info.values.append(item.value)
        if item.has_subtotal:
            info.has_subtotal = True
    return infos


def _at(infos: Sequence[ColumnValueInfo | None], i: int) -> ColumnValueInfo | None:
    return infos[i] if 0 <= i < len(infos) else None


def get_left_header_widths(
    row_indexes: Sequence[int],
    get_column_title: ColumnTitleGetter,
    items: Iterable[HeaderItem] = (),
    font_family: str | None = None,
    *,
    measure: MeasureText,
    settings: LayoutSettings | None = None,
) -> LeftHeaderWidths:
    """
    Compute per-depth widths of the left header.

    Args:
        row_indexes: Column indexes of the row-axis fields, outer to inner;
            position in this list is the depth.
        get_column_title: Maps a row index to its column title.
        items: Flattened left header items (read-only).
        font_family: Font passed to ``measure``; defaults to settings.font_family.
        measure: Text measurement collaborator.
        settings: Geometry/cap overrides; None uses ptab.core.constants.

    Returns:
        LeftHeaderWidths: One clamped width per depth and their total.

    Examples:
        >>> from ptab.layout.widths import get_left_header_widths
        >>> fixed = lambda text, *, weight, family, size: 10.0 * len(text)
        >>> get_left_header_widths([0], lambda i: "Category", measure=fixed).widths
        [112]
    """
    s = settings or LayoutSettings()
    family = font_family or s.font_family
    infos = get_column_values(items, max_rows=s.max_rows_to_measure)

    widths: list[int] = []
    for depth_index, row_index in enumerate(row_indexes):
        header_width = math.ceil(
            measure(
                get_column_title(row_index),
                weight=FontWeight.BOLD.value,
                family=family,
                size=s.font_size,
            )
            + s.row_toggle_icon_width
        )

        # values by depth index, toggle flag by row index
        values_info = _at(infos, depth_index)
        toggle_info = _at(infos, row_index)
        toggle = s.row_toggle_icon_width if toggle_info and toggle_info.has_subtotal else 0
        cell_width = math.ceil(
            max(
                (
                    measure(v, weight=FontWeight.NORMAL.value, family=family, size=s.font_size)
                    + toggle
                    for v in (values_info.values if values_info else [])
                ),
                default=0,
            )
        )

        width = max(header_width, cell_width) + s.cell_padding
        width = min(max(width, s.min_header_cell_width), s.max_header_cell_width)
        widths.append(width)

    logger.debug("left header widths %s (scan cap %d)", widths, s.max_rows_to_measure)
    return LeftHeaderWidths(widths=widths, total=sum(widths))
