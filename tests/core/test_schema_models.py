import pytest
from pydantic import ValidationError

from ptab.core.errors import GrammarError
from ptab.core.grammar import PartitionName
from ptab.core.schema import CellRect, Column, DatasetData, HeaderItem, PivotSetting


def test_column_normalizes_source_and_ignores_extra_metadata() -> None:
    col = Column(
        name="count",
        field_ref=["aggregation", 0],
        source="Aggregation",
        base_type="type/Integer",
    )
    assert col.source == "aggregation"
    assert col.is_aggregation and not col.is_breakout
    assert col.title == "count"


def test_pivot_group_column_detected_by_name() -> None:
    assert Column(name="pivot-grouping", source="breakout").is_pivot_group
    assert not Column(name="pivot_grouping").is_pivot_group


def test_column_is_frozen() -> None:
    col = Column(name="a")
    with pytest.raises(ValidationError):
        col.name = "b"  # type: ignore[misc]


def test_pivot_setting_named_accessors_and_copy() -> None:
    s = PivotSetting(rows=[["field", 1, None]], columns=None)
    assert s.get(PartitionName.ROWS) == (["field", 1, None],)
    assert s.get("columns") == ()
    s2 = s.with_partition(PartitionName.VALUES, [["aggregation", 0]])
    assert s.values == ()
    assert s2.values == (["aggregation", 0],)
    assert s2.field_refs() == [["field", 1, None], ["aggregation", 0]]


def test_pivot_setting_rejects_unknown_partition() -> None:
    with pytest.raises(ValidationError):
        PivotSetting(measures=[])  # type: ignore[call-arg]
    with pytest.raises(GrammarError):
        PivotSetting.from_mapping({"measures": []})


def test_pivot_setting_mapping_roundtrip_shape() -> None:
    payload = {"rows": [["field", 1, None]], "columns": [], "values": [["aggregation", 0]]}
    s = PivotSetting.from_mapping(payload)
    assert s.to_dict() == payload
    assert PivotSetting.from_mapping(None) == PivotSetting()


def test_header_item_accepts_camel_case_and_coerces_value() -> None:
    item = HeaderItem.model_validate(
        {"value": 2021, "depth": 1, "offset": 4, "span": 2, "maxDepthBelow": 1, "hasSubtotal": True}
    )
    assert item.value == "2021"
    assert item.max_depth_below == 1
    assert item.has_subtotal is True
    assert item.is_subtotal is False


def test_header_item_rejects_negative_depth_and_zero_span() -> None:
    with pytest.raises(ValidationError):
        HeaderItem(depth=-1)
    with pytest.raises(ValidationError):
        HeaderItem(span=0)


def test_dataset_and_rect_models() -> None:
    data = DatasetData.model_validate({"cols": [{"name": "a"}], "rows": [[1]], "rows_truncated": 0})
    assert data.cols[0].name == "a"
    assert CellRect(x=0, y=30, width=50, height=60).height == 60
