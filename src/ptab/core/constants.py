"""
Pivot table layout constants.

Defines the fixed cell geometry, font size, clamping bounds, and the measurement
scan cap consumed by the header layout engine. This module is zero-IO and uses
only the Python standard library.

Notes:
    - Rectangles from ptab.layout.rects are expressed in the same pixel units.
    - Runtime overrides live in ptab.layout.config.LayoutSettings; these values
      are its defaults and the single source of truth for them.
    - MAX_ROWS_TO_MEASURE trades width accuracy for bounded cost: only the first
      N header items are measured and treated as representative of the column.
"""

from __future__ import annotations

__all__ = [
    "CELL_WIDTH",
    "CELL_HEIGHT",
    "CELL_PADDING",
    "LEFT_HEADER_LEFT_SPACING",
    "MIN_HEADER_CELL_WIDTH",
    "MAX_HEADER_CELL_WIDTH",
    "ROW_TOGGLE_ICON_WIDTH",
    "PIVOT_TABLE_FONT_SIZE",
    "DEFAULT_FONT_FAMILY",
    "MAX_ROWS_TO_MEASURE",
    "PIVOT_GROUPING_COLUMN",
]

# Fixed width of a body / top header cell.
CELL_WIDTH: int = 100

# Fixed height of every cell (body, left header, top header).
CELL_HEIGHT: int = 30

# Horizontal padding added to the measured content width of a left header column.
CELL_PADDING: int = 16

# Leading gutter before the outermost left header column.
LEFT_HEADER_LEFT_SPACING: int = 24

# Clamp bounds for computed left header column widths.
MIN_HEADER_CELL_WIDTH: int = 50
MAX_HEADER_CELL_WIDTH: int = 200

# Space reserved for the row expand/collapse toggle.
ROW_TOGGLE_ICON_WIDTH: int = 16

PIVOT_TABLE_FONT_SIZE: int = 12
DEFAULT_FONT_FAMILY: str = "Lato"

# Only this many header items are scanned when sizing left header columns.
MAX_ROWS_TO_MEASURE: int = 100

# Name of the synthetic column the backend adds to pivot results.
PIVOT_GROUPING_COLUMN: str = "pivot-grouping"
