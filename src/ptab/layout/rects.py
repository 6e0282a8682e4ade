"""
Header cell rectangles.

Left header (row axis)
- A cell at ``depth`` whose subtree stops ``max_depth_below`` levels short of
  the deepest row level absorbs the widths of the levels it covers, so a
  collapsed group renders as one wide cell. Its height is ``span`` rows.
- The outermost column carries the leading gutter inside its width; deeper
  columns are shifted right by it.

Top header (column axis)
- Cells have the fixed cell width times ``span`` and one row of height. Rows
  are stacked from the bottom of the header block upward, so leaf-level column
  groups always sit directly above the data grid.

All functions are pure arithmetic over the flattened item list.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ptab.core.errors import LayoutError
from ptab.core.schema import CellRect, HeaderItem

from .config import LayoutSettings

__all__ = [
    "left_header_cell_rect",
    "top_header_cell_rect",
    "layout_left_header",
    "layout_top_header",
]


def left_header_cell_rect(
    item: HeaderItem,
    left_header_widths: Sequence[int],
    row_depth_count: int,
    settings: LayoutSettings | None = None,
) -> CellRect:
    """
    Size and position of a left header cell.

    Args:
        item: Header item (offset, span, depth, max_depth_below are used).
        left_header_widths: Per-depth widths from get_left_header_widths.
        row_depth_count: Number of row-axis depth levels.
        settings: Geometry overrides; None uses ptab.core.constants.

    Returns:
        CellRect: Rectangle relative to the left header block.

    Raises:
        LayoutError: If ``item.depth`` has no entry in ``left_header_widths``.

    Examples:
        >>> from ptab.core.schema import HeaderItem
        >>> left_header_cell_rect(HeaderItem(depth=1, offset=3), [50, 80], 2)
        CellRect(x=74, y=90, width=80, height=30)
    """
    s = settings or LayoutSettings()
    depth = item.depth
    if depth >= len(left_header_widths):
        raise LayoutError(
            f"header item at depth {depth} but only {len(left_header_widths)} widths"
        )

    columns_to_span = row_depth_count - depth - item.max_depth_below
    # widths of the deeper levels this cell covers, excluding its own
    span_width = sum(left_header_widths[depth + 1 : depth + columns_to_span])
    column_padding = s.left_header_left_spacing if depth == 0 else 0

    return CellRect(
        x=sum(left_header_widths[:depth]) + (s.left_header_left_spacing if depth > 0 else 0),
        y=item.offset * s.cell_height,
        width=left_header_widths[depth] + span_width + column_padding,
        height=item.span * s.cell_height,
    )


def top_header_cell_rect(
    item: HeaderItem,
    top_header_rows: int,
    settings: LayoutSettings | None = None,
) -> CellRect:
    """
    Size and position of a top header cell.

    Args:
        item: Header item (offset, span, max_depth_below are used).
        top_header_rows: Number of rendered top header rows.
        settings: Geometry overrides; None uses ptab.core.constants.

    Examples:
        >>> from ptab.core.schema import HeaderItem
        >>> top_header_cell_rect(HeaderItem(offset=2, span=3, max_depth_below=1), 3)
        CellRect(x=200, y=30, width=300, height=30)
    """
    s = settings or LayoutSettings()
    return CellRect(
        x=item.offset * s.cell_width,
        y=(top_header_rows - item.max_depth_below - 1) * s.cell_height,
        width=item.span * s.cell_width,
        height=s.cell_height,
    )


def layout_left_header(
    items: Iterable[HeaderItem],
    left_header_widths: Sequence[int],
    row_depth_count: int | None = None,
    settings: LayoutSettings | None = None,
) -> list[CellRect]:
    """Rectangles for every left header item, in input order.

    ``row_depth_count`` defaults to the number of widths.
    """
    n = len(left_header_widths) if row_depth_count is None else row_depth_count
    return [left_header_cell_rect(item, left_header_widths, n, settings) for item in items]


def layout_top_header(
    items: Iterable[HeaderItem],
    top_header_rows: int,
    settings: LayoutSettings | None = None,
) -> list[CellRect]:
    """Rectangles for every top header item, in input order."""
    return [top_header_cell_rect(item, top_header_rows, settings) for item in items]
