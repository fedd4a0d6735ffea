from random import Random

import pytest

from car_simulator.core.enums import Direction, Mode, Outcome
from car_simulator.core.grid import Cell
from car_simulator.core.state import SimulationState
from car_simulator.interfaces.rules import ModeRules
from car_simulator.modes import BasicRules, GoalRules, ObstacleRules, PickFoodRules
from car_simulator.utils.config_loader import GameConfig, ObstaclesConfig


def _state_at(cell, collected=()):
    return SimulationState(position=cell, direction=Direction.NORTH, collected=set(collected))


class TestModeRulesContract:
    def test_cannot_instantiate_abstract(self, game_config):
        with pytest.raises(TypeError):
            ModeRules(game_config)  # type: ignore[abstract]

    def test_default_exhausted_is_idle(self, game_config, food_scenario):
        rules = PickFoodRules(game_config)

        assert rules.judge_exhausted(food_scenario, _state_at(Cell(0, 0))) == Outcome.IDLE


class TestBasicRules:
    def test_judge(self, game_config, basic_scenario):
        rules = BasicRules(game_config)

        assert rules.judge(basic_scenario, _state_at(Cell(4, 4))) == Outcome.SUCCEEDED
        assert rules.judge(basic_scenario, _state_at(Cell(3, 4))) == Outcome.RUNNING

    def test_exhausted_on_goal_succeeds(self, game_config, basic_scenario):
        rules = BasicRules(game_config)

        assert rules.judge_exhausted(basic_scenario, _state_at(Cell(4, 4))) == Outcome.SUCCEEDED
        assert rules.judge_exhausted(basic_scenario, _state_at(Cell(0, 1))) == Outcome.IDLE

    def test_place(self, game_config):
        scenario = BasicRules(game_config).place(Random(3), 6)

        assert scenario.mode == Mode.BASIC
        assert scenario.board_size == 6
        assert scenario.start != scenario.goal

    def test_is_goal_rules(self, game_config):
        assert isinstance(BasicRules(game_config), GoalRules)


class TestObstacleRules:
    def test_obstacle_fails(self, game_config, obstacle_scenario):
        rules = ObstacleRules(game_config)

        assert rules.judge(obstacle_scenario, _state_at(Cell(2, 2))) == Outcome.FAILED
        assert rules.judge(obstacle_scenario, _state_at(Cell(0, 0))) == Outcome.SUCCEEDED
        assert rules.judge(obstacle_scenario, _state_at(Cell(1, 1))) == Outcome.RUNNING

    def test_fixed_obstacle_count(self):
        config = GameConfig(obstacles=ObstaclesConfig(min_obstacles=3, max_obstacles=3))

        for seed in range(20):
            scenario = ObstacleRules(config).place(Random(seed), 5)
            assert len(scenario.obstacles) == 3

    def test_zero_obstacles_allowed(self):
        config = GameConfig(obstacles=ObstaclesConfig(min_obstacles=0, max_obstacles=0))

        scenario = ObstacleRules(config).place(Random(0), 5)

        assert scenario.obstacles == frozenset()
        assert scenario.mode == Mode.OBSTACLES


class TestPickFoodRules:
    def test_collects_new_food(self, game_config, food_scenario):
        rules = PickFoodRules(game_config)
        state = _state_at(Cell(2, 3))

        assert rules.judge(food_scenario, state) == Outcome.RUNNING
        assert state.collected == {1}

    def test_last_food_succeeds(self, game_config, food_scenario):
        rules = PickFoodRules(game_config)
        state = _state_at(Cell(2, 1), collected={1})

        assert rules.judge(food_scenario, state) == Outcome.SUCCEEDED
        assert state.collected == {0, 1}

    def test_collected_food_is_ignored(self, game_config, food_scenario):
        rules = PickFoodRules(game_config)
        state = _state_at(Cell(2, 1), collected={0})

        assert rules.judge(food_scenario, state) == Outcome.RUNNING
        assert state.collected == {0}

    def test_empty_cell(self, game_config, food_scenario):
        rules = PickFoodRules(game_config)
        state = _state_at(Cell(0, 0))

        assert rules.judge(food_scenario, state) == Outcome.RUNNING
        assert state.collected == set()

    def test_place_starts_in_center(self, game_config):
        scenario = PickFoodRules(game_config).place(Random(8), 7)

        assert scenario.start == Cell(3, 3)
        assert scenario.goal is None
        assert len(scenario.food) == 2
