"""Basic mode: drive from the start cell to the goal cell."""

from __future__ import annotations

from random import Random

from overrides import override  # type: ignore

from car_simulator.core.enums import Mode, Outcome
from car_simulator.core.grid import Board, Cell
from car_simulator.core.rules_registry import register_rules
from car_simulator.core.scenario import Scenario
from car_simulator.core.state import SimulationState
from car_simulator.interfaces.rules import ModeRules


def place_start_and_goal(rng: Random, board: Board) -> tuple[Cell, Cell]:
    """Uniform start, then a uniform goal rejection-sampled against it."""
    start = board.random_cell(rng)
    goal = board.draw_free_cell(rng, {start})
    return start, goal


class GoalRules(ModeRules):
    """Shared judging for the modes that end on a goal cell."""

    @override
    def judge(self, scenario: Scenario, state: SimulationState) -> Outcome:
        if state.position == scenario.goal:
            return Outcome.SUCCEEDED
        return Outcome.RUNNING

    @override
    def judge_exhausted(self, scenario: Scenario, state: SimulationState) -> Outcome:
        # Unreachable while judge() halts on the goal; kept so that a program
        # ending on the goal is never reported as unresolved.
        if state.position == scenario.goal:
            return Outcome.SUCCEEDED
        return Outcome.IDLE


class BasicRules(GoalRules):
    """Random start and goal, no other entities."""

    @property
    @override
    def mode(self) -> Mode:
        return Mode.BASIC

    @override
    def place(self, rng: Random, board_size: int) -> Scenario:
        start, goal = place_start_and_goal(rng, Board(board_size))
        return Scenario(mode=Mode.BASIC, board_size=board_size, start=start, goal=goal)


register_rules(Mode.BASIC, BasicRules)
