"""
Canonical JSON serialization and identity keys for field references.

Field references are nested, JSON-like values such as
``["field", 12, {"temporal-unit": "month"}]``. Two references denote the same
column iff they are structurally equal, so identity is taken from a canonical
JSON encoding rather than object identity. This module is zero-IO and uses only
the Python standard library.

Notes:
    - Canonical JSON:
        - sort_keys=True (mapping key order never matters)
        - separators=(",", ":")
        - ensure_ascii=False
    - List order is significant and types are kept apart: ``1``, ``1.0``,
      ``"1"`` and ``true`` all encode differently.
    - Tuples encode like lists, so ``("field", 1)`` and ``["field", 1]`` match.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

__all__ = [
    "json_dumps_canonical",
    "field_ref_key",
    "field_ref_keys",
]


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Args:
        obj (Any): JSON-serializable object.

    Returns:
        str: Canonical JSON string with sort_keys=True, compact separators,
        and ensure_ascii=False.
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def field_ref_key(field_ref: Any) -> str:
    """
    Identity key for a field reference.

    List order and scalar types are significant. Mapping key order is not:
    keys are sorted, so {"a": 1, "b": 2} and {"b": 2, "a": 1} share a key.

    Examples:
        >>> field_ref_key(["field", 1, None]) == field_ref_key(("field", 1, None))
        True
        >>> field_ref_key(["field", 1]) == field_ref_key(["field", "1"])
        False
    """
    return json_dumps_canonical(field_ref)


def field_ref_keys(field_refs: Iterable[Any]) -> list[str]:
    """Identity keys for a sequence of field references, in order."""
    return [field_ref_key(ref) for ref in field_refs]

