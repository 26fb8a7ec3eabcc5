"""Display widget painting stylized frames with QPainter."""

from typing import Optional

from PyQt6 import QtWidgets
from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter, QPolygonF

from models import StylizedFrame
from stylizer.rendering import render_frame
from stylizer.utils import fit_rect
from ui.styles import COLORS, SIZES


class QPainterSurface:
    """DrawingSurface adapter over an active QPainter."""

    def __init__(self, painter: QPainter):
        self.painter = painter
        self.painter.setPen(Qt.PenStyle.NoPen)

    def _brush(self, color) -> QBrush:
        return QBrush(QColor(*color))

    def fill_rect(self, x, y, w, h, color):
        self.painter.fillRect(QRectF(x, y, w, h), QColor(*color))

    def fill_circle(self, cx, cy, radius, color):
        if radius <= 0:
            return
        self.painter.setBrush(self._brush(color))
        self.painter.drawEllipse(QPointF(cx, cy), radius, radius)

    def fill_polygon(self, points, color):
        if len(points) < 3:
            return
        self.painter.setBrush(self._brush(color))
        self.painter.drawPolygon(QPolygonF([QPointF(x, y) for x, y in points]))


class StylizedCanvas(QtWidgets.QWidget):
    """Shows the latest StylizedFrame filling the widget."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setMinimumSize(*SIZES.CANVAS_MIN_SIZE)
        self.frame: Optional[StylizedFrame] = None
        self.mirror = True

    def set_frame(self, frame: StylizedFrame):
        """Replace the displayed frame."""
        self.frame = frame
        self.update()  # Trigger repaint

    def paintEvent(self, event):
        """Paint the frame scaled to fill the widget, centre-cropped."""
        painter = QPainter(self)
        painter.fillRect(self.rect(), COLORS.BACKGROUND)

        frame = self.frame
        if frame is None or frame.is_empty:
            painter.end()
            return

        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        # AIDEV-NOTE: Map the cropped source rect onto the whole widget,
        # flipped horizontally for a mirror view
        sx, sy, sw, sh = fit_rect(frame.width, frame.height, self.width(), self.height())
        scale_x = self.width() / sw
        scale_y = self.height() / sh

        if self.mirror:
            painter.translate(self.width(), 0)
            painter.scale(-1, 1)

        painter.scale(scale_x, scale_y)
        painter.translate(-sx, -sy)

        render_frame(frame, QPainterSurface(painter))
        painter.end()
