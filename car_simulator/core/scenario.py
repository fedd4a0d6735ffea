"""Immutable board scenario: the fixed entities of one play session."""

from __future__ import annotations

from dataclasses import dataclass, field

from car_simulator.core.enums import Mode
from car_simulator.core.exceptions import ScenarioError
from car_simulator.core.grid import Board, Cell


@dataclass(frozen=True)
class Scenario:
    """Start, goal, food and obstacle cells for a single board.

    ``goal`` is absent in PickFood mode, ``food`` is empty outside PickFood
    and ``obstacles`` is empty outside Obstacles mode. No two special cells
    coincide.
    """

    mode: Mode
    board_size: int
    start: Cell
    goal: Cell | None = None
    food: tuple[Cell, ...] = ()
    obstacles: frozenset[Cell] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Accept any iterable for the collections, store canonical types.
        object.__setattr__(self, "food", tuple(self.food))
        object.__setattr__(self, "obstacles", frozenset(self.obstacles))
        self._validate()

    @property
    def board(self) -> Board:
        return Board(self.board_size)

    @property
    def has_goal(self) -> bool:
        return self.goal is not None

    def special_cells(self) -> list[Cell]:
        """Every placed cell, start first, obstacles in sorted order."""
        cells = [self.start]
        if self.goal is not None:
            cells.append(self.goal)
        cells.extend(self.food)
        cells.extend(sorted(self.obstacles))
        return cells

    def food_index(self, cell: Cell) -> int | None:
        """Index of the food item placed on ``cell``, if any."""
        for index, food_cell in enumerate(self.food):
            if food_cell == cell:
                return index
        return None

    def _validate(self) -> None:
        board = Board(self.board_size)

        if self.mode == Mode.PICK_FOOD:
            if self.goal is not None:
                raise ScenarioError("pick-food scenarios have no goal", cell=self.goal)
            if not self.food:
                raise ScenarioError("pick-food scenarios need at least one food cell")
        elif self.goal is None:
            raise ScenarioError(f"{self.mode.value} scenarios need a goal cell")

        if self.food and self.mode != Mode.PICK_FOOD:
            raise ScenarioError(f"{self.mode.value} scenarios carry no food")
        if self.obstacles and self.mode != Mode.OBSTACLES:
            raise ScenarioError(f"{self.mode.value} scenarios carry no obstacles")

        seen: set[Cell] = set()
        for cell in self.special_cells():
            if not board.contains(cell):
                raise ScenarioError(
                    f"cell {cell} lies outside the {self.board_size}x{self.board_size} board",
                    cell=cell,
                )
            if cell in seen:
                raise ScenarioError(f"cell {cell} is used by more than one entity", cell=cell)
            seen.add(cell)
