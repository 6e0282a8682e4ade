"""
Custom exceptions for the ptab.io module.

Purpose
- Provide frame-boundary error types distinct from ptab.core errors.
- ptab.core.errors remains the source of truth for grammar, render gate, and
  layout failures.

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for errors raised while moving data between frames and core models.
    """


class IoSchemaError(IoError):
    """
    Raised when a DataFrame does not have the columns or dtypes a conversion needs.

    Examples:
        - Header item frame without a ``depth`` column
        - Column metadata count different from the frame width
    """
