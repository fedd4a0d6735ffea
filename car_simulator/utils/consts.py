"""Default values for the car simulator."""

DEFAULT_BOARD_SIZE = 5
"""Cells per board edge."""

DEFAULT_FOOD_COUNT = 2
"""Food items placed in pick-food mode."""

DEFAULT_MIN_OBSTACLES = 2
"""Fewest obstacles placed in obstacles mode."""

DEFAULT_MAX_OBSTACLES = 4
"""Most obstacles placed in obstacles mode (inclusive)."""
