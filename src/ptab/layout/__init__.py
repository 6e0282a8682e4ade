"""
ptab.layout — measurement-driven layout of pivot header trees.

## Public API
- LayoutSettings — geometry and scan-cap configuration (env > TOML > defaults).
- get_left_header_widths — per-depth widths of the row-axis header.
- left_header_cell_rect / top_header_cell_rect — per-item rectangles.
- layout_left_header / layout_top_header — rectangles for whole item lists.
- estimate_text_width / memoize_measure — text measurement helpers.

## Import DAG discipline
- Depends only on stdlib and ptab.core.*.
- Header items arrive flattened (depth/offset/span per node); no tree is built here.
"""

from __future__ import annotations

from .config import LayoutSettings
from .measure import estimate_text_width, memoize_measure
from .rects import (
    layout_left_header,
    layout_top_header,
    left_header_cell_rect,
    top_header_cell_rect,
)
from .widths import get_column_values, get_left_header_widths

__all__ = [
    "LayoutSettings",
    "estimate_text_width",
    "memoize_measure",
    "get_column_values",
    "get_left_header_widths",
    "left_header_cell_rect",
    "top_header_cell_rect",
    "layout_left_header",
    "layout_top_header",
]
