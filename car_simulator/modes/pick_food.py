"""Pick-food mode: collect every food item, in any order."""

from __future__ import annotations

from random import Random

from overrides import override  # type: ignore

from car_simulator.core.enums import Mode, Outcome
from car_simulator.core.grid import Board, Cell
from car_simulator.core.rules_registry import register_rules
from car_simulator.core.scenario import Scenario
from car_simulator.core.state import SimulationState
from car_simulator.interfaces.rules import ModeRules


class PickFoodRules(ModeRules):
    """Car starts at the board center; food is scattered around it."""

    @property
    @override
    def mode(self) -> Mode:
        return Mode.PICK_FOOD

    @override
    def place(self, rng: Random, board_size: int) -> Scenario:
        board = Board(board_size)
        start = board.center
        taken: set[Cell] = {start}
        food: list[Cell] = []
        for _ in range(self.config.pick_food.food_count):
            cell = board.draw_free_cell(rng, taken)
            taken.add(cell)
            food.append(cell)

        return Scenario(
            mode=Mode.PICK_FOOD,
            board_size=board_size,
            start=start,
            food=tuple(food),
        )

    @override
    def judge(self, scenario: Scenario, state: SimulationState) -> Outcome:
        index = scenario.food_index(state.position)
        if index is None or index in state.collected:
            return Outcome.RUNNING

        state.collected.add(index)
        if len(state.collected) == len(scenario.food):
            return Outcome.SUCCEEDED
        return Outcome.RUNNING


register_rules(Mode.PICK_FOOD, PickFoodRules)
