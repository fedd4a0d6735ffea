"""Bundled game modes.

Importing this package registers the rules of every mode with the global
rules registry.
"""

from car_simulator.modes.basic import BasicRules, GoalRules
from car_simulator.modes.obstacles import ObstacleRules
from car_simulator.modes.pick_food import PickFoodRules

__all__ = [
    "BasicRules",
    "GoalRules",
    "ObstacleRules",
    "PickFoodRules",
]
