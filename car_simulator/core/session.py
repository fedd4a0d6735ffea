"""Game session: the operator-facing state machine around one board.

The session owns the current scenario, the program being authored and the
simulation state. Operator actions that are not allowed in the current state
are ignored (and return False) rather than raising.
"""

from __future__ import annotations

import logging
from random import Random
from typing import TYPE_CHECKING, Optional

from car_simulator.core.enums import Command, Mode, Outcome
from car_simulator.core.executor import CommandExecutor, Execution
from car_simulator.core.generator import BoardGenerator
from car_simulator.core.scenario import Scenario
from car_simulator.core.state import SimulationState
from car_simulator.interfaces.snapshot import StateSnapshot, StepResult

if TYPE_CHECKING:
    from car_simulator.utils.config_loader import GameConfig

logger = logging.getLogger(__name__)


class GameSession:
    """Single-board game session driven by the presentation layer."""

    def __init__(
        self,
        config: GameConfig,
        mode: Mode = Mode.BASIC,
        rng: Optional[Random] = None,
        scenario: Optional[Scenario] = None,
    ):
        """Create a session.

        Args:
            config: Game configuration (board size, placement counts).
            mode: Initial game mode.
            rng: Random source for board generation; seed it for repeatable boards.
            scenario: Use this board instead of generating one. Its mode wins
                over ``mode``.
        """
        self._config = config
        self._generator = BoardGenerator(config, rng)
        self._executor = CommandExecutor(config)
        self._program: list[Command] = []
        self._execution: Optional[Execution] = None
        self._last_step: Optional[StepResult] = None

        if scenario is None:
            scenario = self._generator.generate(mode)
        self._mode = scenario.mode
        self._scenario = scenario
        self._state = SimulationState.initial(scenario)

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def scenario(self) -> Scenario:
        return self._scenario

    @property
    def program(self) -> tuple[Command, ...]:
        return tuple(self._program)

    @property
    def state(self) -> StateSnapshot:
        return StateSnapshot.of(self._state)

    @property
    def outcome(self) -> Outcome:
        return self._state.outcome

    @property
    def is_running(self) -> bool:
        return self._state.outcome == Outcome.RUNNING

    @property
    def last_step(self) -> Optional[StepResult]:
        """Most recent step of the current or last execution."""
        return self._last_step

    @property
    def current_index(self) -> Optional[int]:
        """Index of the command about to be applied while running."""
        if self._execution is None:
            return None
        return self._execution.next_index

    # -- board lifecycle ------------------------------------------------------

    def set_mode(self, mode: Mode) -> bool:
        """Switch mode and draw a new board for it.

        Ignored while running, or when ``mode`` is already selected.
        """
        if self.is_running:
            return self._ignore("set_mode", "execution in progress")
        if mode == self._mode:
            return self._ignore("set_mode", f"already in {mode.value} mode")
        self._regenerate(mode)
        return True

    def new_board(self, force: bool = False) -> bool:
        """Draw a new board for the current mode and forget the program.

        Ignored while running unless ``force`` is set, in which case the
        active execution is aborted and its pending steps discarded.
        """
        if self.is_running:
            if not force:
                return self._ignore("new_board", "execution in progress")
            self._abort()
        self._regenerate(self._mode)
        return True

    # -- program authoring ----------------------------------------------------

    def append_command(self, command: Command) -> bool:
        """Append a command. Ignored while running or after success."""
        if self.is_running:
            return self._ignore("append_command", "execution in progress")
        if self._state.outcome == Outcome.SUCCEEDED:
            return self._ignore("append_command", "board already solved")
        self._program.append(command)
        return True

    def clear_program(self) -> bool:
        """Forget the program and put the car back on the start cell.

        Ignored while running. Clearing an empty program is harmless.
        """
        if self.is_running:
            return self._ignore("clear_program", "execution in progress")
        self._program.clear()
        self._reset_state()
        return True

    # -- execution ------------------------------------------------------------

    def run(self) -> bool:
        """Start executing the program from the start cell.

        Ignored if the program is empty, an execution is already running, or
        the board has been solved.
        """
        if not self._program:
            return self._ignore("run", "program is empty")
        if self.is_running:
            return self._ignore("run", "execution in progress")
        if self._state.outcome == Outcome.SUCCEEDED:
            return self._ignore("run", "board already solved")

        self._execution = self._executor.execute(self._scenario, self._program)
        self._state = SimulationState.initial(self._scenario)
        self._state.outcome = Outcome.RUNNING
        self._last_step = None
        logger.info(f"Running {len(self._program)} commands on the {self._mode.value} board")
        return True

    def advance(self) -> Optional[StepResult]:
        """Apply the next command of the running program.

        Returns:
            The StepResult of that command, or None if nothing is running.
        """
        if self._execution is None or not self.is_running:
            return None

        step = next(self._execution)
        self._state.position = step.position
        self._state.direction = step.direction
        self._state.collected = set(step.collected)
        self._state.outcome = step.outcome
        self._last_step = step

        if step.halted:
            self._execution = None
            logger.info(f"Execution halted after command {step.index}: {step.outcome.value}")
        return step

    def run_to_completion(self) -> list[StepResult]:
        """Run the program and apply every step without pacing."""
        steps: list[StepResult] = []
        if not self.run():
            return steps
        while self.is_running:
            step = self.advance()
            if step is None:
                break
            steps.append(step)
        return steps

    # -- internals ------------------------------------------------------------

    def _regenerate(self, mode: Mode) -> None:
        self._scenario = self._generator.generate(mode)
        self._mode = mode
        self._program.clear()
        self._reset_state()
        logger.info(
            f"New {self._mode.value} board: start={self._scenario.start} goal={self._scenario.goal}"
        )

    def _reset_state(self) -> None:
        self._execution = None
        self._last_step = None
        self._state = SimulationState.initial(self._scenario)

    def _abort(self) -> None:
        if self._execution is not None:
            self._execution.abort()
        self._execution = None
        self._state.outcome = Outcome.IDLE
        logger.info("Execution aborted by board reset")

    def _ignore(self, action: str, reason: str) -> bool:
        logger.debug(f"Ignored {action}: {reason}")
        return False
