from __future__ import annotations

import pytest

from ptab.core.constants import CELL_HEIGHT, CELL_WIDTH, LEFT_HEADER_LEFT_SPACING
from ptab.core.errors import LayoutError
from ptab.core.schema import CellRect, HeaderItem
from ptab.layout.config import LayoutSettings
from ptab.layout.rects import (
    layout_left_header,
    layout_top_header,
    left_header_cell_rect,
    top_header_cell_rect,
)

TWO_LEVEL = [
    HeaderItem(value="Widgets", depth=0, offset=0, span=2, max_depth_below=1),
    HeaderItem(value="Blue", depth=1, offset=0, span=1, max_depth_below=0),
    HeaderItem(value="Red", depth=1, offset=1, span=1, max_depth_below=0),
]
NO_GUTTER = LayoutSettings(left_header_left_spacing=0)


def test_two_level_tree_tiles_without_gutter() -> None:
    outer, blue, red = layout_left_header(TWO_LEVEL, [50, 80], 2, NO_GUTTER)
    assert outer.width == 50
    assert blue.width == 80 and red.width == 80
    assert red.y - blue.y == CELL_HEIGHT
    assert outer.height == 2 * CELL_HEIGHT
    assert blue.x == outer.x + outer.width


def test_two_level_tree_with_default_gutter() -> None:
    outer, blue, red = layout_left_header(TWO_LEVEL, [50, 80], 2)
    assert outer == CellRect(x=0, y=0, width=50 + LEFT_HEADER_LEFT_SPACING, height=2 * CELL_HEIGHT)
    assert blue == CellRect(x=50 + LEFT_HEADER_LEFT_SPACING, y=0, width=80, height=CELL_HEIGHT)
    assert red == CellRect(x=50 + LEFT_HEADER_LEFT_SPACING, y=CELL_HEIGHT, width=80, height=CELL_HEIGHT)
    # gutter belongs to the first column, so columns stay adjacent
    assert blue.x == outer.x + outer.width


def test_collapsed_cell_absorbs_deeper_level_widths() -> None:
    # three row levels; a collapsed depth-0 group has no descendants
    item = HeaderItem(value="Gizmos", depth=0, offset=4, span=1, max_depth_below=0)
    rect = left_header_cell_rect(item, [50, 80, 60], 3, NO_GUTTER)
    assert rect.width == 50 + 80 + 60
    assert rect.y == 4 * CELL_HEIGHT


def test_middle_level_cell_spans_remaining_levels() -> None:
    item = HeaderItem(value="Blue", depth=1, offset=2, span=1, max_depth_below=0)
    rect = left_header_cell_rect(item, [50, 80, 60], 3, NO_GUTTER)
    assert rect.x == 50
    assert rect.width == 80 + 60


def test_left_rect_rejects_depth_without_width() -> None:
    with pytest.raises(LayoutError):
        left_header_cell_rect(HeaderItem(depth=2), [50, 80], 3)


def test_top_header_rows_stack_from_bottom() -> None:
    year = HeaderItem(value="2021", depth=0, offset=0, span=2, max_depth_below=1)
    q1 = HeaderItem(value="Q1", depth=1, offset=0, span=1, max_depth_below=0)
    q2 = HeaderItem(value="Q2", depth=1, offset=1, span=1, max_depth_below=0)
    r_year, r_q1, r_q2 = layout_top_header([year, q1, q2], 2)
    assert r_year == CellRect(x=0, y=0, width=2 * CELL_WIDTH, height=CELL_HEIGHT)
    assert r_q1 == CellRect(x=0, y=CELL_HEIGHT, width=CELL_WIDTH, height=CELL_HEIGHT)
    assert r_q2.x == CELL_WIDTH and r_q2.y == CELL_HEIGHT


def test_top_leaf_sits_on_last_row_regardless_of_depth() -> None:
    leaf = HeaderItem(value="Count", depth=0, offset=3, span=1, max_depth_below=0)
    rect = top_header_cell_rect(leaf, 3)
    assert rect.y == 2 * CELL_HEIGHT
    assert rect.x == 3 * CELL_WIDTH


def test_custom_geometry_settings() -> None:
    s = LayoutSettings(cell_width=120, cell_height=24)
    rect = top_header_cell_rect(HeaderItem(offset=1, span=2), 1, s)
    assert rect == CellRect(x=120, y=0, width=240, height=24)


def test_layout_left_defaults_depth_count_to_widths() -> None:
    rects = layout_left_header(TWO_LEVEL, [50, 80], settings=NO_GUTTER)
    assert [r.width for r in rects] == [50, 80, 80]
