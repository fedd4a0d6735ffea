"""Control panel: mode selection, command buttons, the program and actions."""

from __future__ import annotations

from typing import Optional

from PySide6 import QtCore, QtWidgets

from car_simulator.core.enums import Command, Mode

MODE_LABELS = {
    Mode.BASIC: "Basic",
    Mode.PICK_FOOD: "Pick Food",
    Mode.OBSTACLES: "Obstacles",
}

COMMAND_LABELS = {
    Command.FORWARD: "↑ Forward",
    Command.TURN_LEFT: "↰ Left",
    Command.TURN_RIGHT: "↱ Right",
}

COMMAND_GLYPHS = {
    Command.FORWARD: "↑",
    Command.TURN_LEFT: "↰",
    Command.TURN_RIGHT: "↱",
}


class CommandBar(QtWidgets.QWidget):
    mode_selected = QtCore.Signal(object)
    command_added = QtCore.Signal(object)
    go_clicked = QtCore.Signal()
    forget_clicked = QtCore.Signal()
    new_board_clicked = QtCore.Signal()

    def __init__(self, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)

        self._mode_buttons: dict[Mode, QtWidgets.QPushButton] = {}
        mode_row = QtWidgets.QHBoxLayout()
        for mode, label in MODE_LABELS.items():
            button = QtWidgets.QPushButton(label)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked=False, m=mode: self.mode_selected.emit(m))
            mode_row.addWidget(button)
            self._mode_buttons[mode] = button

        self._command_buttons: list[QtWidgets.QPushButton] = []
        command_row = QtWidgets.QHBoxLayout()
        for command, label in COMMAND_LABELS.items():
            button = QtWidgets.QPushButton(label)
            button.clicked.connect(lambda _checked=False, c=command: self.command_added.emit(c))
            command_row.addWidget(button)
            self._command_buttons.append(button)

        self._program_list = QtWidgets.QListWidget()
        self._program_list.setFlow(QtWidgets.QListView.LeftToRight)
        self._program_list.setWrapping(True)
        self._program_list.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self._program_list.setFocusPolicy(QtCore.Qt.NoFocus)

        self._go_button = QtWidgets.QPushButton("Go")
        self._forget_button = QtWidgets.QPushButton("Forget")
        self._new_board_button = QtWidgets.QPushButton("New Board")
        self._go_button.clicked.connect(self.go_clicked.emit)
        self._forget_button.clicked.connect(self.forget_clicked.emit)
        self._new_board_button.clicked.connect(self.new_board_clicked.emit)

        action_row = QtWidgets.QHBoxLayout()
        action_row.addWidget(self._go_button)
        action_row.addWidget(self._forget_button)
        action_row.addWidget(self._new_board_button)

        layout = QtWidgets.QVBoxLayout(self)
        layout.addWidget(QtWidgets.QLabel("Game Mode:"))
        layout.addLayout(mode_row)
        layout.addWidget(QtWidgets.QLabel("Commands:"))
        layout.addLayout(command_row)
        layout.addWidget(QtWidgets.QLabel("Program:"))
        layout.addWidget(self._program_list, 1)
        layout.addLayout(action_row)

    def update_view(
        self,
        mode: Mode,
        program: tuple[Command, ...],
        highlighted: Optional[int],
        busy: bool,
        solved: bool,
    ) -> None:
        for button_mode, button in self._mode_buttons.items():
            button.setChecked(button_mode == mode)
            button.setEnabled(not busy)

        for button in self._command_buttons:
            button.setEnabled(not busy and not solved)

        if self._program_list.count() != len(program):
            self._program_list.clear()
            for command in program:
                self._program_list.addItem(COMMAND_GLYPHS[command])

        if highlighted is None:
            self._program_list.clearSelection()
        else:
            self._program_list.setCurrentRow(highlighted)

        self._go_button.setEnabled(bool(program) and not busy and not solved)
        self._forget_button.setEnabled(bool(program) and not busy)
        self._new_board_button.setEnabled(not busy)
