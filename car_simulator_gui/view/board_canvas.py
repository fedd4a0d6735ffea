"""Board canvas: the grid, its special cells and the car."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from car_simulator.core.enums import Command, Mode, Outcome
from car_simulator.core.grid import Cell
from car_simulator.core.scenario import Scenario
from car_simulator.interfaces.snapshot import StateSnapshot, StepResult
from car_simulator_gui.components.car import CarItem
from car_simulator_gui.components.markers import CellMarker
from car_simulator_gui.config import GuiConfig

TURNS = {
    Command.TURN_LEFT: -90.0,
    Command.TURN_RIGHT: 90.0,
}


class BoardCanvas(QtWidgets.QGraphicsView):
    def __init__(self, config: GuiConfig, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self._config = config
        self._scene = QtWidgets.QGraphicsScene(self)
        self.setScene(self._scene)
        self.setRenderHints(
            QtGui.QPainter.Antialiasing
            | QtGui.QPainter.SmoothPixmapTransform
        )
        self._scenario: Scenario | None = None
        self._markers: dict[Cell, CellMarker] = {}
        self._car: CarItem | None = None

    def set_scenario(self, scenario: Scenario, state: StateSnapshot) -> None:
        """Rebuild the scene for a new board and place the car without animation."""
        self._scenario = scenario
        self._scene.clear()
        self._markers.clear()

        canvas = self._config.canvas
        for cell in scenario.board.cells():
            marker = CellMarker(
                size=canvas.cell_size,
                fill_color=self._fill_for(scenario, cell),
                border_color=self._config.color("grid_line"),
                label=self._label_for(scenario, cell, state),
            )
            marker.setPos(*canvas.cell_origin(cell.x, cell.y))
            self._scene.addItem(marker)
            self._markers[cell] = marker

        self._car = CarItem(
            size=canvas.cell_size / 2,
            color=self._config.color("car_idle"),
            duration_ms=self._config.settle_ms,
        )
        self._car.setZValue(10)
        self._scene.addItem(self._car)

        side = 2 * canvas.margin + scenario.board_size * canvas.cell_size
        self._scene.setSceneRect(QtCore.QRectF(0, 0, side, side))
        self.show_state(state)

    def show_state(self, state: StateSnapshot) -> None:
        """Jump the car to a state (used on resets)."""
        if self._car is None or self._scenario is None:
            return
        center = self._config.canvas.cell_center(state.position.x, state.position.y)
        self._car.place(center, float(state.direction.degrees))
        self._refresh(state)

    def apply_step(self, step: StepResult) -> None:
        """Animate the car through one executed command."""
        if self._car is None or self._scenario is None:
            return
        center = self._config.canvas.cell_center(step.position.x, step.position.y)
        self._car.glide(center, turn=TURNS.get(step.command, 0.0))
        self._refresh(step.snapshot)

    def _refresh(self, state: StateSnapshot) -> None:
        assert self._car is not None and self._scenario is not None
        if state.outcome == Outcome.SUCCEEDED:
            self._car.set_color(self._config.color("car_succeeded"))
        elif state.outcome == Outcome.FAILED:
            self._car.set_color(self._config.color("car_failed"))
        else:
            self._car.set_color(self._config.color("car_idle"))

        for index, cell in enumerate(self._scenario.food):
            marker = self._markers.get(cell)
            if marker is not None:
                marker.set_label(self._food_label(index, state))

    def _fill_for(self, scenario: Scenario, cell: Cell) -> str:
        if cell == scenario.start and scenario.mode != Mode.PICK_FOOD:
            return self._config.color("start")
        if cell == scenario.goal:
            return self._config.color("goal")
        if cell in scenario.obstacles:
            return self._config.color("obstacle")
        return self._config.color("cell")

    def _label_for(self, scenario: Scenario, cell: Cell, state: StateSnapshot) -> str:
        if cell == scenario.start and scenario.mode != Mode.PICK_FOOD:
            return "Start"
        if cell == scenario.goal:
            return "End"
        if cell in scenario.obstacles:
            return self._config.symbols.obstacle
        index = scenario.food_index(cell)
        if index is not None:
            return self._food_label(index, state)
        return ""

    def _food_label(self, index: int, state: StateSnapshot) -> str:
        if index in state.collected:
            return self._config.symbols.collected
        return self._config.symbols.food_symbol(index)

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), QtCore.Qt.KeepAspectRatio)
