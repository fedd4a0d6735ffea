"""Immutable snapshots handed from the simulator to its consumers."""

from __future__ import annotations

from dataclasses import dataclass

from car_simulator.core.enums import Command, Direction, Outcome
from car_simulator.core.grid import Cell
from car_simulator.core.state import SimulationState


@dataclass(frozen=True)
class StateSnapshot:
    """Frozen copy of a SimulationState for UI panels and tests."""

    position: Cell
    direction: Direction
    collected: frozenset[int]
    outcome: Outcome

    @classmethod
    def of(cls, state: SimulationState) -> "StateSnapshot":
        return cls(
            position=state.position,
            direction=state.direction,
            collected=frozenset(state.collected),
            outcome=state.outcome,
        )


@dataclass(frozen=True)
class StepResult:
    """State after applying the command at ``index`` of the program.

    ``halted`` is set on the last result of an execution; its ``outcome`` is
    then the terminal one (Succeeded, Failed, or Idle when the program ran out).
    """

    index: int
    command: Command
    position: Cell
    direction: Direction
    collected: frozenset[int]
    outcome: Outcome
    halted: bool = False

    @property
    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(self.position, self.direction, self.collected, self.outcome)
