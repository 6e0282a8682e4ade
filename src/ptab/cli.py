from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import polars as pl

from ptab.core.schema import CellRect, Column, HeaderItem, PivotSetting
from ptab.io.frames import header_items_from_frame
from ptab.layout.config import LayoutSettings
from ptab.layout.measure import estimate_text_width, memoize_measure
from ptab.layout.rects import layout_left_header, layout_top_header
from ptab.layout.widths import get_left_header_widths
from ptab.settings.reconcile import (
    add_missing_card_breakouts,
    update_value_with_current_columns,
)


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


def _load_items(path: Path) -> list[HeaderItem]:
    """Load header items from JSON (list of objects), Parquet, or CSV.

    Args:
        path: Items file; the suffix picks the reader.
    """
    suffix = path.suffix.lower()
    if suffix == ".parquet":
        return header_items_from_frame(pl.read_parquet(path))
    if suffix == ".csv":
        return header_items_from_frame(pl.read_csv(path))
    return [HeaderItem.model_validate(obj) for obj in _read_json(path)]


def _rects_payload(rects: list[CellRect]) -> list[dict[str, int]]:
    return [r.model_dump() for r in rects]


def _emit(payload: Any, out: str) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if not out:
        print(text)
        return
    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text + "\n", encoding="utf-8")
    print(f"[INFO] Wrote {out_path}")


def _cmd_reconcile(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="reconcile",
        description="Reconcile stored pivot settings with the current query columns.",
    )
    p.add_argument("--settings", type=str, default="", help="Stored settings JSON (rows/columns/values).")
    p.add_argument("--columns", type=str, default="", help="Current result columns JSON.")
    p.add_argument("--card", type=str, default="", help="Card JSON; adds missing query breakouts.")
    p.add_argument("--out", type=str, default="", help="Write result JSON here instead of stdout.")
    args = p.parse_args(argv)

    setting = PivotSetting.from_mapping(_read_json(Path(args.settings)) if args.settings else None)
    if args.card:
        setting = add_missing_card_breakouts(setting, _read_json(Path(args.card)))
    if args.columns:
        columns = [Column.model_validate(c) for c in _read_json(Path(args.columns))]
        setting = update_value_with_current_columns(setting, columns)

    _emit(setting.to_dict(), args.out)
    return 0


def _cmd_layout(argv: list[str]) -> int:
    p = argparse.ArgumentParser(
        prog="layout",
        description="Compute left/top header rectangles using the built-in width estimator.",
    )
    p.add_argument("--items", type=str, required=True, help="Left header items (.json/.parquet/.csv).")
    p.add_argument("--titles", type=str, default="", help="Comma-separated row field titles, outer first.")
    p.add_argument("--top", type=str, default="", help="Top header items (.json/.parquet/.csv).")
    p.add_argument("--top-rows", type=int, default=0, help="Rendered top header rows (default: deepest + 1).")
    p.add_argument("--config", type=str, default="", help="TOML config path (default search: ptab.toml, pyproject.toml).")
    p.add_argument("--out", type=str, default="", help="Write result JSON here instead of stdout.")
    args = p.parse_args(argv)

    settings = LayoutSettings.load(args.config or None)
    left_items = _load_items(Path(args.items))
    titles = [t.strip() for t in args.titles.split(",")] if args.titles else []
    depth_count = max((i.depth for i in left_items), default=-1) + 1
    depth_count = max(depth_count, len(titles))

    widths = get_left_header_widths(
        list(range(depth_count)),
        lambda i: titles[i] if i < len(titles) else "",
        left_items,
        measure=memoize_measure(estimate_text_width),
        settings=settings,
    )
    payload: dict[str, Any] = {
        "widths": widths.widths,
        "total": widths.total,
        "left": _rects_payload(layout_left_header(left_items, widths.widths, depth_count, settings)),
    }

    if args.top:
        top_items = _load_items(Path(args.top))
        top_rows = args.top_rows or max((i.depth for i in top_items), default=-1) + 1
        payload["top"] = _rects_payload(layout_top_header(top_items, top_rows, settings))

    _emit(payload, args.out)
    return 0


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ptab", description="Pivot table settings and header layout utilities.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("reconcile")
    sub.add_parser("layout")
    return p


def main(argv: list[str] | None = None) -> None:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        build_argparser().print_help()
        return
    cmd, rest = argv[0], argv[1:]
    if cmd == "reconcile":
        code = _cmd_reconcile(rest)
    elif cmd == "layout":
        code = _cmd_layout(rest)
    else:
        print(f"Unknown command: {cmd}", file=sys.stderr)
        code = 2
    raise SystemExit(code)


if __name__ == "__main__":
    main()
