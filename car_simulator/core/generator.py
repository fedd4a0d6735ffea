"""Board generator: draws a random scenario for the selected mode."""

from __future__ import annotations

import logging
from random import Random
from typing import TYPE_CHECKING, Optional

from car_simulator.core.enums import Mode
from car_simulator.core.rules_registry import create_rules
from car_simulator.core.scenario import Scenario
from car_simulator.utils.config_loader import check_placement_fits

if TYPE_CHECKING:
    from car_simulator.utils.config_loader import GameConfig

logger = logging.getLogger(__name__)


class BoardGenerator:
    """Produce scenarios consistent with each mode's placement constraints.

    Generation is pure except for the injected random source: two generators
    seeded alike produce the same sequence of scenarios.
    """

    def __init__(self, config: GameConfig, rng: Optional[Random] = None):
        self._config = config
        self._rng = rng if rng is not None else Random()

    @property
    def config(self) -> GameConfig:
        return self._config

    def generate(self, mode: Mode, board_size: Optional[int] = None) -> Scenario:
        """Draw a fresh scenario.

        Args:
            mode: Game mode selecting which entities are placed.
            board_size: Cells per edge; defaults to the configured board size.

        Returns:
            A new, validated Scenario.

        Raises:
            ConfigurationError: if the mode's placements do not fit the board.
        """
        config = self._config
        if board_size is not None and board_size != config.board.size:
            config = config.with_board_size(board_size)

        check_placement_fits(config, mode)
        rules = create_rules(mode, config)
        scenario = rules.place(self._rng, config.board.size)
        logger.debug(
            f"Generated {mode.value} board: start={scenario.start} goal={scenario.goal} "
            f"food={len(scenario.food)} obstacles={len(scenario.obstacles)}"
        )
        return scenario
