"""Command executor: replays a program against a scenario, one step at a time."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from car_simulator.core.enums import Command, Outcome
from car_simulator.core.rules_registry import create_rules
from car_simulator.core.scenario import Scenario
from car_simulator.core.state import SimulationState
from car_simulator.interfaces.snapshot import StateSnapshot, StepResult

if TYPE_CHECKING:
    from car_simulator.interfaces.rules import ModeRules
    from car_simulator.utils.config_loader import GameConfig

logger = logging.getLogger(__name__)


class Execution(Iterator[StepResult]):
    """A single, lazy run of a program.

    Each ``next()`` applies exactly one command and returns the resulting
    StepResult. The run is finite and cannot be restarted: once it halts
    (or is aborted) iteration stops for good. The last StepResult carries
    ``halted=True`` and the terminal outcome.
    """

    def __init__(self, scenario: Scenario, program: Iterable[Command], rules: ModeRules):
        self._scenario = scenario
        self._program = tuple(program)
        self._rules = rules
        self._state = SimulationState.initial(scenario)
        self._index = 0
        self._halted = False
        if self._program:
            self._state.outcome = Outcome.RUNNING
        else:
            self._halted = True

    @property
    def scenario(self) -> Scenario:
        return self._scenario

    @property
    def program(self) -> tuple[Command, ...]:
        return self._program

    @property
    def state(self) -> StateSnapshot:
        return StateSnapshot.of(self._state)

    @property
    def outcome(self) -> Outcome:
        return self._state.outcome

    @property
    def halted(self) -> bool:
        return self._halted

    @property
    def next_index(self) -> Optional[int]:
        """Index of the command the next step will apply, if any."""
        if self._halted:
            return None
        return self._index

    def abort(self) -> None:
        """Stop the run immediately, leaving the state Idle."""
        if not self._halted:
            logger.debug(f"Execution aborted before command {self._index}")
        self._halted = True
        self._state.outcome = Outcome.IDLE

    def __iter__(self) -> "Execution":
        return self

    def __next__(self) -> StepResult:
        if self._halted:
            raise StopIteration

        index = self._index
        command = self._program[index]
        self._index += 1

        outcome = self._apply(command)
        if outcome == Outcome.RUNNING and self._index == len(self._program):
            outcome = self._rules.judge_exhausted(self._scenario, self._state)

        self._state.outcome = outcome
        self._halted = outcome != Outcome.RUNNING

        return StepResult(
            index=index,
            command=command,
            position=self._state.position,
            direction=self._state.direction,
            collected=frozenset(self._state.collected),
            outcome=outcome,
            halted=self._halted,
        )

    def _apply(self, command: Command) -> Outcome:
        state = self._state
        if command == Command.TURN_LEFT:
            state.direction = state.direction.turned_left()
            return Outcome.RUNNING
        if command == Command.TURN_RIGHT:
            state.direction = state.direction.turned_right()
            return Outcome.RUNNING
        return self._forward()

    def _forward(self) -> Outcome:
        state = self._state
        board = self._scenario.board
        target = state.position.shifted(state.direction)
        candidate = board.clamp(target)

        if candidate == state.position and candidate != target:
            logger.debug(
                f"Hit the board edge at {state.position} facing {state.direction.name}"
            )
            return Outcome.FAILED

        state.position = candidate
        return self._rules.judge(self._scenario, state)


class CommandExecutor:
    """Turns a scenario and a program into an Execution."""

    def __init__(self, config: GameConfig):
        self._config = config

    def execute(self, scenario: Scenario, program: Iterable[Command]) -> Execution:
        """Start a fresh execution from the scenario start, facing North.

        An empty program yields an execution that is already halted in Idle.
        """
        rules = create_rules(scenario.mode, self._config)
        return Execution(scenario, program, rules)

    def run(self, scenario: Scenario, program: Iterable[Command]) -> list[StepResult]:
        """Execute the whole program and return every step."""
        return list(self.execute(scenario, program))
