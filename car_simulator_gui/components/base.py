"""Base class for items drawn on the board canvas."""

from __future__ import annotations

from PySide6 import QtCore, QtWidgets


class BoardItem(QtWidgets.QGraphicsObject):
    """Shared base for all visual board items."""

    def __init__(self, size: float = 64.0):
        super().__init__()
        self._rect = QtCore.QRectF(0, 0, size, size)

    def boundingRect(self) -> QtCore.QRectF:  # type: ignore[override]
        return self._rect
