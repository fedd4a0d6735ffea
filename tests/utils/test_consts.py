from car_simulator.utils.consts import (
    DEFAULT_BOARD_SIZE,
    DEFAULT_FOOD_COUNT,
    DEFAULT_MAX_OBSTACLES,
    DEFAULT_MIN_OBSTACLES,
)


def test_default_board_size():
    assert DEFAULT_BOARD_SIZE == 5


def test_default_placement_counts_fit_the_board():
    cells = DEFAULT_BOARD_SIZE * DEFAULT_BOARD_SIZE
    assert DEFAULT_FOOD_COUNT + 1 <= cells
    assert DEFAULT_MIN_OBSTACLES <= DEFAULT_MAX_OBSTACLES
    assert DEFAULT_MAX_OBSTACLES + 2 <= cells
