"""Mode rules abstraction - behavioral contract.

A ModeRules object captures everything that differs between game modes:
where the entities are placed and how a successful move is judged.
Every concrete mode must implement this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from random import Random
from typing import TYPE_CHECKING

from car_simulator.core.enums import Mode, Outcome
from car_simulator.core.scenario import Scenario
from car_simulator.core.state import SimulationState

if TYPE_CHECKING:
    from car_simulator.utils.config_loader import GameConfig


class ModeRules(ABC):
    """Base class for game mode rules.

    Every concrete rules implementation (e.g., BasicRules, PickFoodRules)
    must inherit from this class, implement all abstract members and register
    itself with the mode registry when its module is imported.
    """

    def __init__(self, config: GameConfig):
        self._config = config

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    @abstractmethod
    def mode(self) -> Mode:
        """The mode these rules implement."""
        ...

    @abstractmethod
    def place(self, rng: Random, board_size: int) -> Scenario:
        """Draw a fresh scenario with no overlapping special cells."""
        ...

    @abstractmethod
    def judge(self, scenario: Scenario, state: SimulationState) -> Outcome:
        """Judge the cell the car has just moved onto.

        Called after every Forward that did not hit the board edge, with
        ``state.position`` already updated. May mutate ``state.collected``.
        Returns RUNNING to keep executing, or a terminal outcome to halt.
        """
        ...

    def judge_exhausted(self, scenario: Scenario, state: SimulationState) -> Outcome:
        """Final check once the program ran out without a terminal outcome.

        Default: the execution ends unresolved.
        """
        _ = scenario, state
        return Outcome.IDLE
