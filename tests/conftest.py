"""
Pytest configuration and shared fixtures for the car simulator test suite.
"""

import sys
import tempfile
from pathlib import Path
from random import Random

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'car_simulator' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from car_simulator.core.enums import Mode  # noqa: E402
from car_simulator.core.grid import Cell  # noqa: E402
from car_simulator.core.scenario import Scenario  # noqa: E402
from car_simulator.utils.config_loader import GameConfig  # noqa: E402


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def valid_game_config_dict():
    """
    Fixture providing a complete valid game configuration dictionary.
    """
    return {
        "board": {"size": 5},
        "modes": {
            "pick_food": {"food_count": 2},
            "obstacles": {"min_obstacles": 2, "max_obstacles": 4},
        },
    }


@pytest.fixture
def temp_config_yaml_file(temp_yaml_file, valid_game_config_dict):
    """
    Fixture that creates a temporary YAML file with valid configuration.

    Yields:
        Path: Path to the temporary YAML file with valid configuration
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_game_config_dict, f)

    yield temp_yaml_file


@pytest.fixture
def game_config():
    """Default 5x5 game configuration, independent of the bundled YAML."""
    return GameConfig()


@pytest.fixture
def rng():
    return Random(1234)


@pytest.fixture
def basic_scenario():
    """5x5 Basic board from the top-left corner to the bottom-right corner."""
    return Scenario(mode=Mode.BASIC, board_size=5, start=Cell(0, 0), goal=Cell(4, 4))


@pytest.fixture
def food_scenario():
    """PickFood board with the car in the center and food just above and below."""
    return Scenario(
        mode=Mode.PICK_FOOD,
        board_size=5,
        start=Cell(2, 2),
        food=(Cell(2, 1), Cell(2, 3)),
    )


@pytest.fixture
def obstacle_scenario():
    """Obstacles board: start bottom-left, goal top-left, rocks in between."""
    return Scenario(
        mode=Mode.OBSTACLES,
        board_size=5,
        start=Cell(0, 4),
        goal=Cell(0, 0),
        obstacles=frozenset({Cell(0, 2), Cell(2, 2), Cell(3, 0)}),
    )


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
