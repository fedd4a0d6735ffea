"""GUI backend interfaces and adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ContextManager, Optional
from contextlib import nullcontext
from typing import Protocol

from car_simulator.core.enums import Command, Mode
from car_simulator.core.scenario import Scenario
from car_simulator.core.session import GameSession
from car_simulator.interfaces.snapshot import StateSnapshot, StepResult


class GameBackend(Protocol):
    """Minimal game backend required by the GUI."""

    @property
    def mode(self) -> Mode:
        ...

    @property
    def scenario(self) -> Scenario:
        ...

    @property
    def program(self) -> tuple[Command, ...]:
        ...

    @property
    def is_running(self) -> bool:
        ...

    @property
    def current_index(self) -> Optional[int]:
        ...

    def state(self) -> StateSnapshot:
        ...

    def set_mode(self, mode: Mode) -> bool:
        ...

    def new_board(self, force: bool = False) -> bool:
        ...

    def append_command(self, command: Command) -> bool:
        ...

    def clear_program(self) -> bool:
        ...

    def run(self) -> bool:
        ...

    def advance(self) -> Optional[StepResult]:
        ...


@dataclass
class SessionBackend(GameBackend):
    """Adapter that exposes a GameSession through the GameBackend interface."""

    session: GameSession
    lock: ContextManager | None = None

    def __post_init__(self) -> None:
        if self.lock is None:
            self.lock = nullcontext()

    @property
    def mode(self) -> Mode:
        return self.session.mode

    @property
    def scenario(self) -> Scenario:
        return self.session.scenario

    @property
    def program(self) -> tuple[Command, ...]:
        return self.session.program

    @property
    def is_running(self) -> bool:
        return self.session.is_running

    @property
    def current_index(self) -> Optional[int]:
        return self.session.current_index

    def state(self) -> StateSnapshot:
        assert self.lock is not None
        with self.lock:
            return self.session.state

    def set_mode(self, mode: Mode) -> bool:
        assert self.lock is not None
        with self.lock:
            return self.session.set_mode(mode)

    def new_board(self, force: bool = False) -> bool:
        assert self.lock is not None
        with self.lock:
            return self.session.new_board(force=force)

    def append_command(self, command: Command) -> bool:
        assert self.lock is not None
        with self.lock:
            return self.session.append_command(command)

    def clear_program(self) -> bool:
        assert self.lock is not None
        with self.lock:
            return self.session.clear_program()

    def run(self) -> bool:
        assert self.lock is not None
        with self.lock:
            return self.session.run()

    def advance(self) -> Optional[StepResult]:
        assert self.lock is not None
        with self.lock:
            return self.session.advance()
