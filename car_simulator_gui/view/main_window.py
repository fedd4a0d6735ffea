"""Main GUI window."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from car_simulator.core.enums import Command, Mode, Outcome
from car_simulator_gui.config import GuiConfig
from car_simulator_gui.controller import GameController
from car_simulator_gui.view.board_canvas import BoardCanvas
from car_simulator_gui.view.command_bar import CommandBar
from car_simulator_gui.view.status_bar import StatusBar
from car_simulator_gui.view.top_bar import TopBar


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, controller: GameController, config: GuiConfig):
        super().__init__()
        self._controller = controller
        self._config = config

        self.setWindowTitle(config.window_title)

        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        self._top_bar = TopBar(config.window_title)
        self._board_canvas = BoardCanvas(config)
        self._command_bar = CommandBar()
        self._status_bar = StatusBar()

        splitter = QtWidgets.QSplitter()
        splitter.addWidget(self._board_canvas)
        splitter.addWidget(self._command_bar)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)

        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._top_bar)
        layout.addWidget(splitter, 1)
        layout.addWidget(self._status_bar)

        self._command_bar.mode_selected.connect(self._on_mode_selected)
        self._command_bar.command_added.connect(self._on_command_added)
        self._command_bar.go_clicked.connect(self._on_go)
        self._command_bar.forget_clicked.connect(self._on_forget)
        self._command_bar.new_board_clicked.connect(self._on_new_board)

        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(config.settle_ms)

        self._reload_board()

    def _on_mode_selected(self, mode: Mode) -> None:
        if self._controller.select_mode(mode):
            self._reload_board()
        else:
            self._refresh_panels()

    def _on_command_added(self, command: Command) -> None:
        self._controller.add_command(command)
        self._refresh_panels()

    def _on_go(self) -> None:
        if self._controller.go():
            self._board_canvas.show_state(self._controller.snapshot())
        self._refresh_panels()

    def _on_forget(self) -> None:
        if self._controller.forget():
            self._board_canvas.show_state(self._controller.snapshot())
        self._refresh_panels()

    def _on_new_board(self) -> None:
        if self._controller.new_board():
            self._reload_board()

    def _tick(self) -> None:
        step = self._controller.tick()
        if step is not None:
            self._board_canvas.apply_step(step)
        self._refresh_panels()

    def _reload_board(self) -> None:
        self._board_canvas.set_scenario(self._controller.scenario, self._controller.snapshot())
        self._refresh_panels()

    def _refresh_panels(self) -> None:
        snap = self._controller.snapshot()
        self._command_bar.update_view(
            mode=self._controller.mode,
            program=self._controller.program,
            highlighted=self._controller.highlighted_index,
            busy=self._controller.busy,
            solved=snap.outcome == Outcome.SUCCEEDED,
        )
        self._top_bar.set_state(self._controller.mode, self._controller.phase)
        self._status_bar.update_status(self._controller.status())

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # type: ignore[override]
        self._timer.stop()
        self._controller.abort()
        super().closeEvent(event)
