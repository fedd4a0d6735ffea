"""GUI application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from random import Random

from PySide6 import QtWidgets

from car_simulator.core.enums import Mode
from car_simulator.core.session import GameSession
from car_simulator.utils.config_loader import get_config, load_config
from car_simulator_gui.backend import SessionBackend
from car_simulator_gui.config import load_gui_config
from car_simulator_gui.controller import GameController
from car_simulator_gui.view.main_window import MainWindow


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid Car Puzzle GUI")
    parser.add_argument("--mode", default=Mode.BASIC.value, choices=[m.value for m in Mode])
    parser.add_argument("--seed", type=int, default=None, help="Seed for board generation")
    parser.add_argument("--config", default=None, help="Path to game config YAML")
    parser.add_argument("--gui-config", default=None, help="Path to GUI config YAML")
    parser.add_argument("--settle-ms", type=int, default=None, help="Pause per playback phase (ms)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def run_gui(argv: list[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config = load_config(args.config) if args.config else get_config()
    gui_config = load_gui_config(args.gui_config)
    if args.settle_ms is not None:
        gui_config = replace(gui_config, settle_ms=max(args.settle_ms, 0))

    rng = Random(args.seed) if args.seed is not None else Random()
    session = GameSession(config, mode=Mode(args.mode), rng=rng)
    controller = GameController(SessionBackend(session))

    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow(controller, gui_config)
    side = config.board.size * gui_config.canvas.cell_size + 2 * gui_config.canvas.margin
    window.resize(side + 420, side + 120)
    window.show()
    return app.exec()


def main() -> None:
    raise SystemExit(run_gui())


if __name__ == "__main__":
    main()
