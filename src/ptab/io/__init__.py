"""
ptab.io — Polars bridges between tabular data and the pivot core models.

## Public API
- header_items_from_frame — validate a header item table into HeaderItem models.
- dataset_from_frame / dataset_to_frame — move result rows between Polars and DatasetData.
- rects_frame — export computed rectangles alongside their header items.

## Import DAG discipline
- Depends only on stdlib, polars, and ptab.core.*.
"""

from __future__ import annotations

from .errors import IoError, IoSchemaError
from .frames import dataset_from_frame, dataset_to_frame, header_items_from_frame, rects_frame

__all__ = [
    "IoError",
    "IoSchemaError",
    "dataset_from_frame",
    "dataset_to_frame",
    "header_items_from_frame",
    "rects_frame",
]
