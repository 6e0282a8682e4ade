"""
Configuration for the ptab.layout module.

Defines LayoutSettings, a frozen dataclass carrying the geometry and measurement
knobs of the header layout engine. Defaults are sourced from
ptab.core.constants (the single source of truth).

Source of truth
- ptab.core.constants.CELL_WIDTH, CELL_HEIGHT, CELL_PADDING, ...
- ptab.core.constants.MAX_ROWS_TO_MEASURE (measurement scan cap)

Import DAG discipline
- Depends only on stdlib and ptab.core.constants.

Notes
- Precedence when loading: environment > TOML > defaults.
- Values that fail to parse are ignored and the previous value is kept.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from ptab.core import constants as C

__all__ = ["LayoutSettings"]

_INT_FIELDS: tuple[str, ...] = (
    "font_size",
    "max_rows_to_measure",
    "min_header_cell_width",
    "max_header_cell_width",
    "cell_padding",
    "row_toggle_icon_width",
    "cell_width",
    "cell_height",
    "left_header_left_spacing",
)


@dataclass(frozen=True)
class LayoutSettings:
    """
    Runtime settings for the header layout engine.

    Attributes:
        font_family (str): Font family passed to the text measurer.
        font_size (int): Font size passed to the text measurer.
        max_rows_to_measure (int): Only this many header items are scanned (>= 1).
        min_header_cell_width (int): Lower clamp for left header column widths.
        max_header_cell_width (int): Upper clamp for left header column widths.
        cell_padding (int): Padding added to the measured content width.
        row_toggle_icon_width (int): Width reserved for the expand/collapse toggle.
        cell_width (int): Fixed width of a top header / body cell.
        cell_height (int): Fixed height of every cell.
        left_header_left_spacing (int): Leading gutter before the outermost column.

    Examples:
        >>> from ptab.layout.config import LayoutSettings
        >>> LayoutSettings(cell_height=24).cell_height
        24
    """

    font_family: str = C.DEFAULT_FONT_FAMILY
    font_size: int = C.PIVOT_TABLE_FONT_SIZE
    max_rows_to_measure: int = C.MAX_ROWS_TO_MEASURE
    min_header_cell_width: int = C.MIN_HEADER_CELL_WIDTH
    max_header_cell_width: int = C.MAX_HEADER_CELL_WIDTH
    cell_padding: int = C.CELL_PADDING
    row_toggle_icon_width: int = C.ROW_TOGGLE_ICON_WIDTH
    cell_width: int = C.CELL_WIDTH
    cell_height: int = C.CELL_HEIGHT
    left_header_left_spacing: int = C.LEFT_HEADER_LEFT_SPACING

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: LayoutSettings, cfg: dict[str, Any] | None) -> LayoutSettings:
        """Apply a loose config mapping onto LayoutSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "font_family" in cfg and isinstance(cfg["font_family"], str) and cfg["font_family"].strip():
            s = replace(s, font_family=cfg["font_family"].strip())

        for name in _INT_FIELDS:
            if name not in cfg:
                continue
            try:
                v = int(cfg[name])
            except (TypeError, ValueError):
                continue
            if v < 0 or (name == "max_rows_to_measure" and v < 1):
                continue
            s = replace(s, **{name: v})

        if s.min_header_cell_width > s.max_header_cell_width:
            # min must not exceed max
            s = replace(
                s,
                min_header_cell_width=base.min_header_cell_width,
                max_header_cell_width=base.max_header_cell_width,
            )
        return s

    @classmethod
    def from_env(cls, base: LayoutSettings | None = None, prefix: str = "PTAB_LAYOUT_") -> LayoutSettings:
        """
        Build LayoutSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables are the upper-cased field names behind the prefix:
            - PTAB_LAYOUT_FONT_FAMILY
            - PTAB_LAYOUT_FONT_SIZE
            - PTAB_LAYOUT_MAX_ROWS_TO_MEASURE
            - PTAB_LAYOUT_MIN_HEADER_CELL_WIDTH / PTAB_LAYOUT_MAX_HEADER_CELL_WIDTH
            - PTAB_LAYOUT_CELL_PADDING, PTAB_LAYOUT_ROW_TOGGLE_ICON_WIDTH
            - PTAB_LAYOUT_CELL_WIDTH, PTAB_LAYOUT_CELL_HEIGHT
            - PTAB_LAYOUT_LEFT_HEADER_LEFT_SPACING
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for f in fields(cls):
            v = os.getenv(prefix + f.name.upper())
            if v:
                mapping[f.name] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> LayoutSettings:
        """
        Build LayoutSettings from a TOML file.

        Search order when `path` is None:
            1) ./ptab.toml (with either a [layout] table or direct keys)
            2) ./pyproject.toml under [tool.ptab.layout]

        Returns defaults if no file is present or it cannot be parsed.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "ptab.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                ptab = tool.get("ptab", {}) if isinstance(tool, dict) else {}
                cfg = ptab.get("layout") if isinstance(ptab, dict) else None
            elif isinstance(data.get("layout"), dict):
                cfg = data["layout"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> LayoutSettings:
        """
        Load LayoutSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (ptab.toml, pyproject.toml).
        """
        s = cls.from_toml(path)
        return cls.from_env(base=s)
