"""The car: a top-down vehicle icon that glides and turns between cells."""

from __future__ import annotations

from PySide6 import QtCore, QtGui

from car_simulator_gui.components.base import BoardItem

# Outline in a 24x24 box, pointing up (North): tapered front, flat back.
_BODY = [(12, 2), (15, 6), (15, 18), (9, 18), (9, 6)]
_WINDSHIELD = [(11, 7), (13, 7), (13, 10), (11, 10)]
_REAR_WINDOW = [(11, 13), (13, 13), (13, 16), (11, 16)]


def _polygon(points: list[tuple[int, int]], scale: float, offset: float) -> QtGui.QPolygonF:
    return QtGui.QPolygonF(
        [QtCore.QPointF(x * scale - offset, y * scale - offset) for x, y in points]
    )


class CarItem(BoardItem):
    """Car icon centered on its position, rotated to its heading."""

    def __init__(self, size: float = 32.0, color: str = "#3b82f6", duration_ms: int = 500):
        super().__init__(size=size)
        # Centered on the item origin so rotation turns the car in place.
        self._rect = QtCore.QRectF(-size / 2, -size / 2, size, size)
        self._color = QtGui.QColor(color)
        self._duration_ms = duration_ms
        # Accumulated, not wrapped, so each turn animates the short way.
        self._heading = 0.0
        self._animations = QtCore.QParallelAnimationGroup(self)

    def set_color(self, color: str) -> None:
        self._color = QtGui.QColor(color)
        self.update()

    def place(self, center: tuple[float, float], degrees: float) -> None:
        """Jump to a cell center and heading without animation."""
        self._animations.stop()
        self._heading = degrees
        self.setPos(QtCore.QPointF(*center))
        self.setRotation(degrees)

    def glide(self, center: tuple[float, float], turn: float = 0.0) -> None:
        """Animate towards a cell center, turning by ``turn`` degrees."""
        self._animations.stop()
        self._animations.clear()

        target = QtCore.QPointF(*center)
        if target != self.pos():
            move = QtCore.QPropertyAnimation(self, b"pos")
            move.setDuration(self._duration_ms)
            move.setEndValue(target)
            move.setEasingCurve(QtCore.QEasingCurve.InOutQuad)
            self._animations.addAnimation(move)

        if turn:
            self._heading += turn
            rotate = QtCore.QPropertyAnimation(self, b"rotation")
            rotate.setDuration(self._duration_ms)
            rotate.setEndValue(self._heading)
            rotate.setEasingCurve(QtCore.QEasingCurve.InOutQuad)
            self._animations.addAnimation(rotate)

        self._animations.start()

    def paint(self, painter: QtGui.QPainter, _option, _widget=None) -> None:  # type: ignore[override]
        painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
        scale = self._rect.width() / 24.0
        offset = self._rect.width() / 2

        painter.setPen(QtCore.Qt.NoPen)
        painter.setBrush(QtGui.QBrush(self._color))
        painter.drawPolygon(_polygon(_BODY, scale, offset))

        glass = QtGui.QColor(self._color).darker(160)
        painter.setBrush(QtGui.QBrush(glass))
        painter.drawPolygon(_polygon(_WINDSHIELD, scale, offset))
        painter.drawPolygon(_polygon(_REAR_WINDOW, scale, offset))

        mirror = 0.8 * scale
        painter.setBrush(QtGui.QBrush(self._color.lighter(120)))
        painter.drawEllipse(QtCore.QPointF(7.5 * scale - offset, 8 * scale - offset), mirror, mirror)
        painter.drawEllipse(QtCore.QPointF(16.5 * scale - offset, 8 * scale - offset), mirror, mirror)
