"""Headless command-line runner: draw a board, run a program, print the trace."""

from __future__ import annotations

import argparse
import logging
import sys
from random import Random
from typing import Optional, Sequence

from car_simulator.core.enums import Command, Direction, Mode, Outcome
from car_simulator.core.exceptions import ConfigurationError
from car_simulator.core.grid import Cell
from car_simulator.core.scenario import Scenario
from car_simulator.core.session import GameSession
from car_simulator.interfaces.snapshot import StateSnapshot
from car_simulator.utils.config_loader import get_config, load_config

logger = logging.getLogger(__name__)

EXIT_CODES = {
    Outcome.SUCCEEDED: 0,
    Outcome.FAILED: 1,
    Outcome.IDLE: 2,
}

CAR_GLYPHS = {
    Direction.NORTH: "^",
    Direction.EAST: ">",
    Direction.SOUTH: "v",
    Direction.WEST: "<",
}


def parse_program(text: str) -> list[Command]:
    """Parse ``"F F R"``, ``"FFR"`` or ``"forward,left"`` into commands.

    Raises:
        ValueError: on an unknown token.
    """
    tokens = text.replace(",", " ").split()
    if len(tokens) == 1 and len(tokens[0]) > 1 and tokens[0].isalpha():
        word = tokens[0].lower()
        if word not in {c.value for c in Command}:
            tokens = list(tokens[0])
    return [Command.from_token(token) for token in tokens]


def render_board(scenario: Scenario, state: Optional[StateSnapshot] = None) -> str:
    """Draw the board as text, one row per line.

    S start, G goal, 1..n uncollected food, * collected food, # obstacle,
    and the car as an arrow pointing where it faces.
    """
    rows: list[str] = []
    for y in range(scenario.board_size):
        row: list[str] = []
        for x in range(scenario.board_size):
            cell = Cell(x, y)
            glyph = "."
            food_index = scenario.food_index(cell)
            if cell in scenario.obstacles:
                glyph = "#"
            elif cell == scenario.goal:
                glyph = "G"
            elif food_index is not None:
                collected = state is not None and food_index in state.collected
                glyph = "*" if collected else str(food_index + 1)
            elif cell == scenario.start and scenario.mode != Mode.PICK_FOOD:
                glyph = "S"
            if state is not None and cell == state.position:
                glyph = CAR_GLYPHS[state.direction]
            row.append(glyph)
        rows.append(" ".join(row))
    return "\n".join(rows)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Grid Car Puzzle (headless)")
    parser.add_argument(
        "--mode",
        default=Mode.BASIC.value,
        choices=[m.value for m in Mode],
        help="Game mode",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for board generation")
    parser.add_argument("--board-size", type=int, default=None, help="Cells per board edge")
    parser.add_argument("--config", default=None, help="Path to game config YAML")
    parser.add_argument(
        "--program",
        default="",
        help='Commands to run, e.g. "F F R F" or "FFRF" (F=forward, L=left, R=right)',
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def run_headless(argv: Optional[Sequence[str]] = None) -> int:
    """Run one program on one board and return the process exit code."""
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else get_config()
        if args.board_size is not None:
            config = config.with_board_size(args.board_size)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3

    try:
        program = parse_program(args.program)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3

    rng = Random(args.seed) if args.seed is not None else Random()
    try:
        session = GameSession(config, mode=Mode(args.mode), rng=rng)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    for command in program:
        session.append_command(command)

    print(f"Mode: {session.mode.value}")
    print(render_board(session.scenario, session.state))

    steps = session.run_to_completion()
    for step in steps:
        print(
            f"{step.index + 1:>3} {step.command.symbol} -> {step.position} "
            f"{step.direction.name.lower():<5} {step.outcome.value}"
        )

    outcome = session.outcome
    if steps:
        print(render_board(session.scenario, session.state))
    print(f"Outcome: {outcome.value}")
    return EXIT_CODES.get(outcome, 2)


def main() -> None:
    raise SystemExit(run_headless())


if __name__ == "__main__":
    main()
