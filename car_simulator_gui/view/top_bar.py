"""Top bar with the game title and playback state."""

from __future__ import annotations

from PySide6 import QtWidgets

from car_simulator.core.enums import Mode
from car_simulator_gui.controller import PlaybackPhase
from car_simulator_gui.view.command_bar import MODE_LABELS


class TopBar(QtWidgets.QFrame):
    def __init__(self, title: str, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self.setFrameShape(QtWidgets.QFrame.NoFrame)

        self._name_label = QtWidgets.QLabel(title)
        self._state_label = QtWidgets.QLabel("Ready")

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)
        layout.addWidget(self._name_label)
        layout.addStretch(1)
        layout.addWidget(self._state_label)

    def set_state(self, mode: Mode, phase: PlaybackPhase) -> None:
        label = "Running" if phase != PlaybackPhase.IDLE else "Ready"
        self._state_label.setText(f"{MODE_LABELS[mode]} · {label}")
