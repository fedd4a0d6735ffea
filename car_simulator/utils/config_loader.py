"""Helpers for loading and validating game configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import threading

import yaml  # type: ignore[import-untyped]

from car_simulator.core.enums import Mode
from car_simulator.core.exceptions import ConfigurationError
from car_simulator.utils.consts import (
    DEFAULT_BOARD_SIZE,
    DEFAULT_FOOD_COUNT,
    DEFAULT_MAX_OBSTACLES,
    DEFAULT_MIN_OBSTACLES,
)


@dataclass(frozen=True)
class BoardConfig:
    size: int = DEFAULT_BOARD_SIZE


@dataclass(frozen=True)
class PickFoodConfig:
    food_count: int = DEFAULT_FOOD_COUNT


@dataclass(frozen=True)
class ObstaclesConfig:
    min_obstacles: int = DEFAULT_MIN_OBSTACLES
    max_obstacles: int = DEFAULT_MAX_OBSTACLES


@dataclass(frozen=True)
class GameConfig:
    board: BoardConfig = field(default_factory=BoardConfig)
    pick_food: PickFoodConfig = field(default_factory=PickFoodConfig)
    obstacles: ObstaclesConfig = field(default_factory=ObstaclesConfig)

    def with_board_size(self, size: int) -> "GameConfig":
        """Return a validated copy of this config with another board size."""
        cfg = GameConfig(
            board=BoardConfig(size=size),
            pick_food=self.pick_food,
            obstacles=self.obstacles,
        )
        validate_game_config(cfg)
        return cfg


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, GameConfig] = {}
_CACHE_LOCK = threading.RLock()


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled config lives next to the package root
        path = str(Path(__file__).parent.parent / "config.yaml")

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except Exception as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("config root must be a mapping")
    return raw


def _parse_game_cfg_from_dict(raw: dict[str, Any]) -> GameConfig:
    try:
        board = raw["board"]
        modes = raw.get("modes", {})
        pick_food = modes.get("pick_food", {})
        obstacles = modes.get("obstacles", {})

        cfg = GameConfig(
            board=BoardConfig(size=int(board["size"])),
            pick_food=PickFoodConfig(
                food_count=int(pick_food.get("food_count", DEFAULT_FOOD_COUNT)),
            ),
            obstacles=ObstaclesConfig(
                min_obstacles=int(obstacles.get("min_obstacles", DEFAULT_MIN_OBSTACLES)),
                max_obstacles=int(obstacles.get("max_obstacles", DEFAULT_MAX_OBSTACLES)),
            ),
        )
    except KeyError as exc:
        raise ConfigurationError(f"Missing required config key: {exc}") from exc
    except (TypeError, ValueError, AttributeError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    validate_game_config(cfg)
    return cfg


def validate_game_config(cfg: GameConfig) -> None:
    """Mode-independent sanity checks on the configured values.

    Whether the placement counts fit the board depends on the mode being
    generated; see check_placement_fits().
    """
    size = cfg.board.size
    if size < 2:
        raise ConfigurationError("board.size", "board size must be >= 2")

    if cfg.pick_food.food_count < 1:
        raise ConfigurationError("modes.pick_food.food_count", "must be >= 1")

    obs = cfg.obstacles
    if obs.min_obstacles < 0:
        raise ConfigurationError("modes.obstacles.min_obstacles", "must be >= 0")
    if obs.min_obstacles > obs.max_obstacles:
        raise ConfigurationError(
            "modes.obstacles", "min_obstacles must not exceed max_obstacles"
        )


def check_placement_fits(cfg: GameConfig, mode: Mode) -> None:
    """Make sure one mode's placements fit on the configured board.

    Only the counts ``mode`` actually places are checked, so a small board
    stays playable in Basic even when the obstacle range would not fit.

    Raises:
        ConfigurationError: if the placements need more cells than the board has
    """
    size = cfg.board.size
    cells = size * size

    if mode == Mode.PICK_FOOD:
        # Food shares the board with the start cell
        if cfg.pick_food.food_count + 1 > cells:
            raise ConfigurationError(
                "modes.pick_food.food_count",
                f"{cfg.pick_food.food_count} food cells do not fit on a {size}x{size} board",
            )
    elif mode == Mode.OBSTACLES:
        # Obstacles share the board with start and goal
        if cfg.obstacles.max_obstacles + 2 > cells:
            raise ConfigurationError(
                "modes.obstacles.max_obstacles",
                f"{cfg.obstacles.max_obstacles} obstacles do not fit on a {size}x{size} board",
            )


def load_config(path: Optional[str] = None) -> GameConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            car_simulator/config.yaml.

    Returns:
        GameConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_game_cfg_from_dict(raw=raw)


def get_config() -> GameConfig:
    """Return the bundled config, loading and caching it if necessary.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    key = _get_config_path()
    with _CACHE_LOCK:
        if key not in _LOADER_CACHE:
            _LOADER_CACHE[key] = load_config()
        return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    Useful for testing. All subsequent calls to get_config() will reload
    from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
