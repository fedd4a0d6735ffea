"""Mutable simulation state owned by a single execution."""

from __future__ import annotations

from dataclasses import dataclass, field

from car_simulator.core.enums import Direction, Outcome
from car_simulator.core.grid import Cell
from car_simulator.core.scenario import Scenario


@dataclass
class SimulationState:
    """Position, heading, collected food and outcome of the car."""

    position: Cell
    direction: Direction = Direction.NORTH
    collected: set[int] = field(default_factory=set)
    outcome: Outcome = Outcome.IDLE

    @classmethod
    def initial(cls, scenario: Scenario) -> "SimulationState":
        """Fresh state at the scenario start, facing North, nothing collected."""
        return cls(position=scenario.start)
