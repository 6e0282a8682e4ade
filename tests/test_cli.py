from __future__ import annotations

import json
from pathlib import Path

import polars as pl
import pytest

from ptab import cli


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    return int(exc.value.code or 0)


def test_reconcile_prints_updated_settings(tmp_path: Path, capsys) -> None:
    settings = tmp_path / "settings.json"
    columns = tmp_path / "columns.json"
    settings.write_text(json.dumps({"rows": [["field", 1, None]], "columns": [["field", 2, None]], "values": []}))
    columns.write_text(
        json.dumps(
            [
                {"name": "a", "field_ref": ["field", 1, None], "source": "breakout"},
                {"name": "count", "field_ref": ["aggregation", 0], "source": "aggregation"},
            ]
        )
    )

    assert _run(["reconcile", "--settings", str(settings), "--columns", str(columns)]) == 0

    out = json.loads(capsys.readouterr().out)
    assert out == {"rows": [["field", 1, None]], "columns": [], "values": [["aggregation", 0]]}


def test_reconcile_with_card_breakouts_writes_file(tmp_path: Path, capsys) -> None:
    card = tmp_path / "card.json"
    card.write_text(json.dumps({"dataset_query": {"query": {"breakout": [["field", 7, None]]}}}))
    out_path = tmp_path / "out" / "settings.json"

    assert _run(["reconcile", "--card", str(card), "--out", str(out_path)]) == 0

    assert "[INFO] Wrote" in capsys.readouterr().out
    assert json.loads(out_path.read_text()) == {"rows": [["field", 7, None]], "columns": [], "values": []}


def test_layout_from_json_and_parquet(tmp_path: Path, capsys, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    left = tmp_path / "left.json"
    left.write_text(
        json.dumps(
            [
                {"value": "Widgets", "depth": 0, "offset": 0, "span": 2, "maxDepthBelow": 1},
                {"value": "Blue", "depth": 1, "offset": 0, "span": 1},
                {"value": "Red", "depth": 1, "offset": 1, "span": 1},
            ]
        )
    )
    top = tmp_path / "top.parquet"
    pl.DataFrame(
        {"value": ["2021", "Q1"], "depth": [0, 1], "offset": [0, 0], "span": [1, 1], "max_depth_below": [1, 0]}
    ).write_parquet(top)

    code = _run(["layout", "--items", str(left), "--titles", "Product,Color", "--top", str(top)])
    assert code == 0

    out = json.loads(capsys.readouterr().out)
    assert len(out["widths"]) == 2
    assert out["total"] == sum(out["widths"])
    assert [r["height"] for r in out["left"]] == [60, 30, 30]
    assert out["top"][0]["y"] == 0 and out["top"][1]["y"] == 30


def test_unknown_command_exits_with_2(capsys) -> None:
    assert _run(["paint"]) == 2
    assert "Unknown command" in capsys.readouterr().err


def test_no_args_prints_help(capsys) -> None:
    cli.main([])
    assert "ptab" in capsys.readouterr().out
