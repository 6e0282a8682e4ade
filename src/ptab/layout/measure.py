"""
Text measurement helpers for header sizing.

The layout engine never renders text; it asks a MeasureText collaborator for
the pixel width of a string in a given font. Browsers and canvas backends
provide the real measurer. This module supplies:

- estimate_text_width: a deterministic, font-agnostic approximation used by
  the CLI and tests when no real measurer is available.
- memoize_measure: wraps any measurer in a pure cache keyed on
  (text, weight, family, size).

Notes:
    - Measurers are assumed synchronous and deterministic; memoizing one is safe.
"""

from __future__ import annotations

from functools import lru_cache

from ptab.core.grammar import FontWeight, font_weight_from_value
from ptab.core.typing import MeasureText

__all__ = [
    "estimate_text_width",
    "memoize_measure",
]

# Approximate advance widths as a fraction of the font size.
_NARROW = frozenset("fijlrtI!|.,:;'`()[]{} ")
_WIDE = frozenset("mwMW@%")
_NARROW_EM = 0.3
_WIDE_EM = 0.85
_UPPER_EM = 0.68
_DEFAULT_EM = 0.55
_BOLD_FACTOR = 1.08


def _char_em(ch: str) -> float:
    if ch in _NARROW:
        return _NARROW_EM
    if ch in _WIDE:
        return _WIDE_EM
    if ch.isupper():
        return _UPPER_EM
    return _DEFAULT_EM


def estimate_text_width(
    text: str, *, weight: str = "normal", family: str = "", size: float = 12
) -> float:
    """
    Approximate rendered width of ``text`` in pixels.

    Args:
        text: String to measure.
        weight: "normal" or "bold"; bold text is slightly wider.
        family: Ignored; kept for MeasureText compatibility.
        size: Font size in pixels.

    Examples:
        >>> estimate_text_width("") == 0
        True
        >>> estimate_text_width("Total", weight="bold") > estimate_text_width("Total")
        True
    """
    em = sum(_char_em(ch) for ch in text or "")
    width = em * float(size)
    if font_weight_from_value(weight) is FontWeight.BOLD:
        width *= _BOLD_FACTOR
    return width


def memoize_measure(measure: MeasureText, maxsize: int | None = 4096) -> MeasureText:
    """Wrap a measurer in an LRU cache keyed on (text, weight, family, size)."""

    @lru_cache(maxsize=maxsize)
    def _cached(text: str, weight: str, family: str, size: float) -> float:
        return measure(text, weight=weight, family=family, size=size)

    def measured(text: str, *, weight: str, family: str, size: float) -> float:
        return _cached(text, weight, family, size)

    measured.cache_info = _cached.cache_info  # type: ignore[attr-defined]
    measured.cache_clear = _cached.cache_clear  # type: ignore[attr-defined]
    return measured
