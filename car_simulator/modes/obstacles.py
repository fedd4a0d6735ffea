"""Obstacles mode: reach the goal without driving into a rock."""

from __future__ import annotations

from random import Random

from overrides import override  # type: ignore

from car_simulator.core.enums import Mode, Outcome
from car_simulator.core.grid import Board, Cell
from car_simulator.core.rules_registry import register_rules
from car_simulator.core.scenario import Scenario
from car_simulator.core.state import SimulationState
from car_simulator.modes.basic import GoalRules, place_start_and_goal


class ObstacleRules(GoalRules):
    """Basic placement plus a random number of obstacle cells."""

    @property
    @override
    def mode(self) -> Mode:
        return Mode.OBSTACLES

    @override
    def place(self, rng: Random, board_size: int) -> Scenario:
        board = Board(board_size)
        start, goal = place_start_and_goal(rng, board)

        cfg = self.config.obstacles
        count = rng.randint(cfg.min_obstacles, cfg.max_obstacles)
        taken: set[Cell] = {start, goal}
        obstacles: list[Cell] = []
        for _ in range(count):
            cell = board.draw_free_cell(rng, taken)
            taken.add(cell)
            obstacles.append(cell)

        return Scenario(
            mode=Mode.OBSTACLES,
            board_size=board_size,
            start=start,
            goal=goal,
            obstacles=frozenset(obstacles),
        )

    @override
    def judge(self, scenario: Scenario, state: SimulationState) -> Outcome:
        if state.position in scenario.obstacles:
            return Outcome.FAILED
        return super().judge(scenario, state)


register_rules(Mode.OBSTACLES, ObstacleRules)
