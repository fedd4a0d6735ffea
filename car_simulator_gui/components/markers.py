"""Cell markers: board squares with an optional badge or symbol."""

from __future__ import annotations

from PySide6 import QtCore, QtGui

from car_simulator_gui.components.base import BoardItem


class CellMarker(BoardItem):
    """One board cell, filled with a background color and an optional label."""

    def __init__(
        self,
        size: float = 64.0,
        fill_color: str = "#ffffff",
        border_color: str = "#e5e7eb",
        label: str = "",
    ):
        super().__init__(size=size)
        self._fill = QtGui.QColor(fill_color)
        self._border = QtGui.QColor(border_color)
        self._label = label

    def set_label(self, label: str) -> None:
        if self._label != label:
            self._label = label
            self.update()

    def paint(self, painter: QtGui.QPainter, _option, _widget=None) -> None:  # type: ignore[override]
        rect = self.boundingRect()
        painter.setBrush(QtGui.QBrush(self._fill))
        painter.setPen(QtGui.QPen(self._border, 1))
        painter.drawRect(rect)

        if self._label:
            font = painter.font()
            font.setPointSizeF(max(rect.height() / 4.0, 6.0))
            painter.setFont(font)
            painter.setPen(QtGui.QPen(QtGui.QColor("#374151")))
            painter.drawText(rect, QtCore.Qt.AlignCenter, self._label)
