from car_simulator_gui.view.board_canvas import BoardCanvas
from car_simulator_gui.view.command_bar import CommandBar
from car_simulator_gui.view.main_window import MainWindow
from car_simulator_gui.view.status_bar import StatusBar
from car_simulator_gui.view.top_bar import TopBar

__all__ = [
    "BoardCanvas",
    "CommandBar",
    "MainWindow",
    "StatusBar",
    "TopBar",
]
