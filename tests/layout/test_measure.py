from __future__ import annotations

import pytest

from ptab.core.errors import GrammarError
from ptab.core.typing import MeasureText
from ptab.layout.measure import estimate_text_width, memoize_measure


def test_estimate_is_deterministic_and_scales_with_size() -> None:
    a = estimate_text_width("Category", size=12)
    assert a == estimate_text_width("Category", size=12)
    assert estimate_text_width("Category", size=24) == pytest.approx(2 * a)
    assert estimate_text_width("") == 0


def test_estimate_orders_glyph_classes() -> None:
    assert estimate_text_width("WWWW") > estimate_text_width("aaaa") > estimate_text_width("iiii")
    assert estimate_text_width("Total", weight="bold") > estimate_text_width("Total")


def test_estimate_rejects_unknown_weight() -> None:
    with pytest.raises(GrammarError):
        estimate_text_width("x", weight="black")


def test_memoize_measure_caches_on_full_font_tuple() -> None:
    calls: list[str] = []

    def measure(text: str, *, weight: str, family: str, size: float) -> float:
        calls.append(text)
        return float(len(text))

    cached = memoize_measure(measure)
    assert isinstance(cached, MeasureText)
    assert cached("abc", weight="normal", family="Lato", size=12) == 3.0
    assert cached("abc", weight="normal", family="Lato", size=12) == 3.0
    assert cached("abc", weight="bold", family="Lato", size=12) == 3.0
    assert calls == ["abc", "abc"]
    assert cached.cache_info().hits == 1  # type: ignore[attr-defined]
