"""Bottom status bar with the result of the last run."""

from __future__ import annotations

from typing import Optional

from PySide6 import QtWidgets

from car_simulator.core.enums import Outcome
from car_simulator_gui.controller import StatusMessage

STYLES = {
    Outcome.SUCCEEDED: "background: #dcfce7; color: #166534;",
    Outcome.FAILED: "background: #fee2e2; color: #991b1b;",
}


class StatusBar(QtWidgets.QFrame):
    def __init__(self, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self.setFrameShape(QtWidgets.QFrame.NoFrame)

        self._message_label = QtWidgets.QLabel("")

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(12, 6, 12, 6)
        layout.addWidget(self._message_label)
        layout.addStretch(1)

    def update_status(self, message: Optional[StatusMessage]) -> None:
        if message is None:
            self._message_label.setText("")
            self._message_label.setStyleSheet("")
            return
        self._message_label.setText(message.text)
        self._message_label.setStyleSheet(STYLES.get(message.outcome, ""))
