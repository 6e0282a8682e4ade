"""
ptab.settings — keeps stored pivot partition assignments in step with the query.

## Public API
- update_value_with_current_columns — reconcile a PivotSetting against result columns.
- add_missing_card_breakouts — place newly added query breakouts before results exist.

## Import DAG discipline
- Depends only on stdlib and ptab.core.*.
"""

from __future__ import annotations

from .reconcile import add_missing_card_breakouts, update_value_with_current_columns

__all__ = [
    "update_value_with_current_columns",
    "add_missing_card_breakouts",
]
