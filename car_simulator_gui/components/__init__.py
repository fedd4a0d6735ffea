from car_simulator_gui.components.base import BoardItem
from car_simulator_gui.components.car import CarItem
from car_simulator_gui.components.markers import CellMarker

__all__ = [
    "BoardItem",
    "CarItem",
    "CellMarker",
]
