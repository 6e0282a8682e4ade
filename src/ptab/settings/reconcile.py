"""
Reconcile stored pivot settings with the columns of the current query.

Purpose
- Keep the field-to-partition assignment consistent as the query changes:
  drop references whose column disappeared, place newly appearing columns in
  the first partition that accepts them, and leave everything else in its
  original relative order.

Identity
- Columns and stored references are matched by structural equality of their
  field references (ptab.core.hashing.field_ref_key), never object identity.

Notes
- Pure: inputs are never mutated; a new PivotSetting is returned.
- A new column accepted by no partition is dropped silently (debug-logged).
- The result is idempotent: reconciling it again against the same columns
  returns an equal setting.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ptab.core.grammar import PARTITION_ORDER, PartitionName
from ptab.core.hashing import field_ref_key, field_ref_keys
from ptab.core.partitions import PARTITIONS, PartitionDescriptor
from ptab.core.schema import Column, PivotSetting

__all__ = [
    "update_value_with_current_columns",
    "add_missing_card_breakouts",
    "card_breakouts",
]

logger = logging.getLogger(__name__)


def _dedupe_preserving_order(items: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def update_value_with_current_columns(
    stored: PivotSetting,
    columns: Sequence[Column],
    partitions: Sequence[PartitionDescriptor] = PARTITIONS,
) -> PivotSetting:
    """
    Add and remove field references so the setting matches the current columns.

    Args:
        stored (PivotSetting): Previously saved assignment.
        columns (Sequence[Column]): Columns of the current query, in result order.
        partitions (Sequence[PartitionDescriptor]): Placement priority for new columns.

    Returns:
        PivotSetting: New assignment. Retained references keep their partition and
        relative order; new ones are appended to the first accepting partition.

    Examples:
        >>> from ptab.core.schema import Column, PivotSetting
        >>> a = Column(field_ref=["field", 1, None], source="breakout")
        >>> c = Column(field_ref=["aggregation", 0], source="aggregation")
        >>> stored = PivotSetting(rows=[a.field_ref], columns=[["field", 2, None]])
        >>> update_value_with_current_columns(stored, [a, c]).to_dict()
        {'rows': [['field', 1, None]], 'columns': [], 'values': [['aggregation', 0]]}
    """
    by_key: dict[str, Column] = {}
    for col in columns:
        by_key.setdefault(col.key, col)

    current = set(by_key)
    stored_keys = set(field_ref_keys(stored.field_refs()))
    to_add = [k for k in _dedupe_preserving_order(col.key for col in columns) if k not in stored_keys]

    value: dict[PartitionName, list[Any]] = {
        name: [ref for ref in stored.get(name) if field_ref_key(ref) in current]
        for name in PARTITION_ORDER
    }

    for key in to_add:
        column = by_key[key]
        for partition in partitions:
            if partition.accepts(column):
                value.setdefault(partition.name, []).append(column.field_ref)
                break
        else:
            logger.debug("column %s matches no pivot partition; dropped", key)

    return PivotSetting(**{name.value: refs for name, refs in value.items()})


def card_breakouts(card: Mapping[str, Any] | None) -> list[Any]:
    """Breakout field references of a card's structured query (``[]`` when absent)."""
    node: Any = card or {}
    for key in ("dataset_query", "query", "breakout"):
        if not isinstance(node, Mapping):
            return []
        node = node.get(key)
    return list(node or [])


def add_missing_card_breakouts(
    setting: PivotSetting,
    card: Mapping[str, Any] | None,
    partitions: Sequence[PartitionDescriptor] = PARTITIONS,
) -> PivotSetting:
    """
    Partition breakouts that were added to the query but not yet to the setting.

    The breakouts are treated as bare pseudo-columns (field reference only) and
    reconciled like real columns; only the rows and columns partitions of the
    result are kept, values stay as they were.

    Args:
        setting (PivotSetting): Current assignment.
        card (Mapping[str, Any] | None): Card payload holding
            ``dataset_query.query.breakout``.
        partitions (Sequence[PartitionDescriptor]): Placement priority.

    Returns:
        PivotSetting: ``setting`` itself when there are no more breakouts than
        row + column assignments, otherwise the updated assignment.
    """
    breakouts = card_breakouts(card)
    if len(breakouts) <= len(setting.columns) + len(setting.rows):
        return setting
    pseudo = [Column(field_ref=ref) for ref in breakouts]
    updated = update_value_with_current_columns(setting, pseudo, partitions)
    return setting.model_copy(update={"rows": updated.rows, "columns": updated.columns})
