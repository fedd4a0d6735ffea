"""Grid Car Puzzle simulator.

Steer a car across a small grid with a program of forward / left / right
commands: reach the goal, pick up every food item, or dodge the obstacles.

Architecture:
- Deterministic core: scenarios are immutable, execution is a lazy
  sequence of step snapshots
- Per-mode rules behind one interface, discovered through a registry
- Presentation (car_simulator_gui) only consumes snapshots

Getting started:
    from car_simulator import GameSession, Command, get_config

    session = GameSession(get_config())
    session.append_command(Command.FORWARD)
    steps = session.run_to_completion()
"""

# Core abstractions
from car_simulator.core.enums import Command, Direction, Mode, Outcome
from car_simulator.core.executor import CommandExecutor, Execution
from car_simulator.core.generator import BoardGenerator
from car_simulator.core.grid import Board, Cell
from car_simulator.core.rules_registry import list_available_modes, verify_modes_registered
from car_simulator.core.scenario import Scenario
from car_simulator.core.session import GameSession
from car_simulator.interfaces.rules import ModeRules
from car_simulator.interfaces.snapshot import StateSnapshot, StepResult
from car_simulator.utils.config_loader import GameConfig, get_config, load_config

# Mode implementations (auto-register when imported)
from car_simulator.modes import BasicRules, ObstacleRules, PickFoodRules

__all__ = [
    # Core
    "Board",
    "Cell",
    "Command",
    "Direction",
    "Mode",
    "Outcome",
    "Scenario",
    "StateSnapshot",
    "StepResult",
    "ModeRules",
    # Simulation
    "BoardGenerator",
    "CommandExecutor",
    "Execution",
    "GameSession",
    # Configuration
    "GameConfig",
    "get_config",
    "load_config",
    # Mode registry
    "list_available_modes",
    "verify_modes_registered",
    # Concrete modes
    "BasicRules",
    "ObstacleRules",
    "PickFoodRules",
]
