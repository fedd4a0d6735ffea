"""Game controller (Presenter-ish, framework-agnostic).

The simulator core has no notion of time. The controller paces a running
program in two phases per command: PENDING highlights the command about to
run, APPLYING has just applied it and lets the view animate. The view calls
tick() on a fixed interval to move from one phase to the next.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from car_simulator.core.enums import Command, Mode, Outcome
from car_simulator.core.scenario import Scenario
from car_simulator.interfaces.snapshot import StateSnapshot, StepResult
from car_simulator_gui.backend import GameBackend

logger = logging.getLogger(__name__)


class PlaybackPhase(Enum):
    IDLE = auto()
    PENDING = auto()
    APPLYING = auto()


@dataclass(frozen=True)
class StatusMessage:
    text: str
    outcome: Outcome


class GameController:
    """Coordinator between the game backend and the Qt views."""

    def __init__(self, backend: GameBackend):
        self._backend = backend
        self._phase = PlaybackPhase.IDLE

    @property
    def phase(self) -> PlaybackPhase:
        return self._phase

    @property
    def busy(self) -> bool:
        """True while a program is being played back."""
        return self._phase != PlaybackPhase.IDLE

    @property
    def mode(self) -> Mode:
        return self._backend.mode

    @property
    def scenario(self) -> Scenario:
        return self._backend.scenario

    @property
    def program(self) -> tuple[Command, ...]:
        return self._backend.program

    @property
    def highlighted_index(self) -> Optional[int]:
        """Program index to highlight in the command list."""
        if self._phase == PlaybackPhase.IDLE:
            return None
        return self._backend.current_index

    def snapshot(self) -> StateSnapshot:
        return self._backend.state()

    # -- operator actions -----------------------------------------------------

    def select_mode(self, mode: Mode) -> bool:
        return self._backend.set_mode(mode)

    def add_command(self, command: Command) -> bool:
        return self._backend.append_command(command)

    def forget(self) -> bool:
        return self._backend.clear_program()

    def new_board(self) -> bool:
        return self._backend.new_board()

    def abort(self) -> None:
        """Abandon any running program by drawing a new board."""
        if self._backend.is_running:
            self._backend.new_board(force=True)
        self._phase = PlaybackPhase.IDLE

    def go(self) -> bool:
        if not self._backend.run():
            return False
        self._phase = PlaybackPhase.PENDING
        return True

    # -- pacing ---------------------------------------------------------------

    def tick(self) -> Optional[StepResult]:
        """Advance playback by one phase.

        Returns:
            The StepResult when this tick applied a command, else None.
        """
        if self._phase == PlaybackPhase.PENDING:
            step = self._backend.advance()
            if step is None:
                self._phase = PlaybackPhase.IDLE
                return None
            self._phase = PlaybackPhase.APPLYING
            return step

        if self._phase == PlaybackPhase.APPLYING:
            if self._backend.is_running:
                self._phase = PlaybackPhase.PENDING
            else:
                self._phase = PlaybackPhase.IDLE
                logger.info(f"Playback finished: {self.snapshot().outcome.value}")
        return None

    def status(self) -> Optional[StatusMessage]:
        """Message for the status bar once a run has succeeded or failed."""
        snap = self.snapshot()
        if snap.outcome == Outcome.SUCCEEDED:
            if self.mode == Mode.PICK_FOOD:
                text = "Success! You collected all the food!"
            else:
                text = "Success! The car reached the destination!"
            return StatusMessage(text, snap.outcome)

        if snap.outcome == Outcome.FAILED:
            if snap.position in self.scenario.obstacles:
                text = "Oops! The car hit an obstacle! Try again!"
            else:
                text = "The car drove off the board. Try again!"
            return StatusMessage(text, snap.outcome)

        return None
