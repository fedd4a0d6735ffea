"""GUI configuration loader and data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

DEFAULT_GUI_CONFIG = Path(__file__).parent / "gui.yaml"

DEFAULT_PALETTE = {
    "cell": "#ffffff",
    "grid_line": "#e5e7eb",
    "start": "#dbeafe",
    "goal": "#dcfce7",
    "obstacle": "#f3f4f6",
    "car_idle": "#3b82f6",
    "car_succeeded": "#22c55e",
    "car_failed": "#ef4444",
}


@dataclass(frozen=True)
class CanvasConfig:
    cell_size: int = 64
    margin: int = 8

    def cell_origin(self, x: int, y: int) -> tuple[float, float]:
        """Scene coordinates of the top-left corner of cell (x, y)."""
        return (
            float(self.margin + x * self.cell_size),
            float(self.margin + y * self.cell_size),
        )

    def cell_center(self, x: int, y: int) -> tuple[float, float]:
        left, top = self.cell_origin(x, y)
        half = self.cell_size / 2
        return (left + half, top + half)


@dataclass(frozen=True)
class SymbolsConfig:
    food: tuple[str, ...] = ("F",)
    collected: str = "*"
    obstacle: str = "#"

    def food_symbol(self, index: int) -> str:
        return self.food[index % len(self.food)]


@dataclass(frozen=True)
class GuiConfig:
    window_title: str = "Grid Car Puzzle"
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    settle_ms: int = 500
    palette: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PALETTE))
    symbols: SymbolsConfig = field(default_factory=SymbolsConfig)

    def color(self, key: str) -> str:
        return self.palette.get(key, DEFAULT_PALETTE.get(key, "#000000"))


def _parse_canvas(value: dict[str, Any]) -> CanvasConfig:
    cfg = CanvasConfig(
        cell_size=int(value.get("cell_size", 64)),
        margin=int(value.get("margin", 8)),
    )
    if cfg.cell_size <= 0:
        raise ValueError(f"Invalid cell size: {cfg.cell_size}")
    if cfg.margin < 0:
        raise ValueError(f"Invalid margin: {cfg.margin}")
    return cfg


def _parse_symbols(value: dict[str, Any]) -> SymbolsConfig:
    food = value.get("food", ["F"])
    if isinstance(food, str):
        food = [food]
    if not food:
        raise ValueError("symbols.food must name at least one symbol")
    return SymbolsConfig(
        food=tuple(str(item) for item in food),
        collected=str(value.get("collected", "*")),
        obstacle=str(value.get("obstacle", "#")),
    )


def _parse_settle_ms(value: dict[str, Any]) -> int:
    settle_ms = int(value.get("settle_ms", 500))
    if settle_ms < 0:
        raise ValueError(f"Invalid settle delay: {settle_ms}")
    return settle_ms


def load_gui_config(path: str | Path | None = None) -> GuiConfig:
    path = Path(path) if path is not None else DEFAULT_GUI_CONFIG
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}

    palette = dict(DEFAULT_PALETTE)
    palette.update({str(k): str(v) for k, v in raw.get("palette", {}).items()})

    return GuiConfig(
        window_title=str(raw.get("window_title", "Grid Car Puzzle")),
        canvas=_parse_canvas(raw.get("canvas", {})),
        settle_ms=_parse_settle_ms(raw.get("timing", {})),
        palette=palette,
        symbols=_parse_symbols(raw.get("symbols", {})),
    )
