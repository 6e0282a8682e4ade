from __future__ import annotations

import pytest
from pydantic import ValidationError

from ptab.core.errors import NotAggregatedQueryError, RenderError, UnsupportedDatabaseError
from ptab.core.schema import Column, DatasetData
from ptab.core.validity import (
    check_renderable,
    database_supports_pivot_tables,
    is_column_valid,
    is_formattable_pivot_column,
    is_sensible,
)


class _Db:
    def __init__(self, supported: bool) -> None:
        self.supported = supported

    def supports_pivots(self) -> bool:
        return self.supported


class _Query:
    def __init__(self, db: _Db | None) -> None:
        self._db = db

    def database(self) -> _Db | None:
        return self._db


BREAKOUT = Column(name="category", field_ref=["field", 1, None], source="breakout")
AGG = Column(name="count", field_ref=["aggregation", 0], source="aggregation")
NATIVE = Column(name="raw", field_ref=["field", "raw", None], source="native")
GROUP = Column(name="pivot-grouping", field_ref=["expression", "pivot-grouping"])


def test_column_validity() -> None:
    assert is_column_valid(BREAKOUT)
    assert is_column_valid(AGG)
    assert is_column_valid(GROUP)
    assert not is_column_valid(NATIVE)
    assert not is_column_valid(Column(field_ref=["field", 9, None]))


def test_formattable_only_for_aggregations() -> None:
    assert is_formattable_pivot_column(AGG)
    assert not is_formattable_pivot_column(BREAKOUT)


def test_database_support_is_permissive_without_metadata() -> None:
    assert database_supports_pivot_tables(None)
    assert database_supports_pivot_tables(object())
    assert database_supports_pivot_tables(_Query(None))
    assert database_supports_pivot_tables(_Query(_Db(True)))
    assert not database_supports_pivot_tables(_Query(_Db(False)))


def test_is_sensible() -> None:
    data = DatasetData(cols=[BREAKOUT, AGG])
    assert is_sensible(data, _Query(_Db(True)))
    assert is_sensible({"cols": [BREAKOUT, AGG, GROUP]}, None)
    assert not is_sensible(DatasetData(cols=[AGG]), None)
    assert not is_sensible(DatasetData(cols=[BREAKOUT, NATIVE]), None)
    assert not is_sensible(data, _Query(_Db(False)))


def test_is_sensible_is_false_for_malformed_data() -> None:
    assert is_sensible({"cols": None}, None) is False
    assert is_sensible({"cols": [{"name": 1}]}, None) is False
    with pytest.raises(ValidationError):
        check_renderable([{"data": {"cols": None}}], {}, None)


def test_check_renderable_passes_for_aggregated_result() -> None:
    check_renderable([{"data": DatasetData(cols=[BREAKOUT, AGG])}], {}, _Query(_Db(True)))


def test_check_renderable_single_column_prefers_aggregation_error() -> None:
    with pytest.raises(NotAggregatedQueryError) as exc:
        check_renderable([{"data": {"cols": [AGG.model_dump()]}}], {}, _Query(_Db(False)))
    assert "aggregated queries" in str(exc.value)


def test_check_renderable_invalid_column() -> None:
    with pytest.raises(NotAggregatedQueryError):
        check_renderable([{"data": DatasetData(cols=[BREAKOUT, NATIVE])}], {}, None)


def test_check_renderable_unsupported_database() -> None:
    with pytest.raises(UnsupportedDatabaseError) as exc:
        check_renderable([{"data": DatasetData(cols=[BREAKOUT, AGG])}], {}, _Query(_Db(False)))
    assert isinstance(exc.value, RenderError)
    assert str(exc.value) == "This database does not support pivot tables."


def test_check_renderable_without_series_is_not_aggregated() -> None:
    with pytest.raises(NotAggregatedQueryError):
        check_renderable([], {}, None)
