"""Grid cells and board geometry."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Container

from car_simulator.core.enums import Direction


@dataclass(frozen=True, order=True)
class Cell:
    """A board cell addressed by column ``x`` and row ``y`` (0-indexed)."""

    x: int
    y: int

    def shifted(self, direction: Direction) -> "Cell":
        dx, dy = direction.delta
        return Cell(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Board:
    """Square board geometry of ``size`` x ``size`` cells."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("board size must be >= 1")

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    @property
    def center(self) -> Cell:
        half = self.size // 2
        return Cell(half, half)

    def contains(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.size and 0 <= cell.y < self.size

    def clamp(self, cell: Cell) -> Cell:
        """Clamp each axis of ``cell`` into ``[0, size - 1]``."""
        limit = self.size - 1
        return Cell(min(max(cell.x, 0), limit), min(max(cell.y, 0), limit))

    def cells(self) -> list[Cell]:
        """All cells in row-major order."""
        return [Cell(x, y) for y in range(self.size) for x in range(self.size)]

    def random_cell(self, rng: Random) -> Cell:
        return Cell(rng.randrange(self.size), rng.randrange(self.size))

    def draw_free_cell(self, rng: Random, taken: Container[Cell]) -> Cell:
        """Draw uniformly until a cell outside ``taken`` comes up.

        Callers guarantee at least one free cell exists; the expected number of
        retries is O(1) for the placement counts the game uses.
        """
        while True:
            cell = self.random_cell(rng)
            if cell not in taken:
                return cell
