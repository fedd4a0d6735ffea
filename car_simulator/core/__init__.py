"""Core modules for the car simulator.

Board-agnostic infrastructure:
- enums: Direction, Command, Mode, Outcome
- grid: Cell and Board geometry
- scenario: immutable board entities
- generator: random scenario placement per mode
- executor: step-wise program execution
- session: operator-facing state machine
- rules_registry: mode rules registry and factory
"""

from car_simulator.core.enums import Command, Direction, Mode, Outcome
from car_simulator.core.exceptions import ConfigurationError, ScenarioError, SimulatorError
from car_simulator.core.executor import CommandExecutor, Execution
from car_simulator.core.generator import BoardGenerator
from car_simulator.core.grid import Board, Cell
from car_simulator.core.rules_registry import (
    RulesRegistry,
    create_rules,
    list_available_modes,
    register_rules,
)
from car_simulator.core.scenario import Scenario
from car_simulator.core.session import GameSession
from car_simulator.core.state import SimulationState

__all__ = [
    # Enumerations
    "Command",
    "Direction",
    "Mode",
    "Outcome",
    # Errors
    "SimulatorError",
    "ConfigurationError",
    "ScenarioError",
    # Data model
    "Board",
    "Cell",
    "Scenario",
    "SimulationState",
    # Simulation
    "BoardGenerator",
    "CommandExecutor",
    "Execution",
    "GameSession",
    # Mode registry
    "RulesRegistry",
    "create_rules",
    "list_available_modes",
    "register_rules",
]
