"""
Dial renderer that paints the compass rose onto a QPainter.

All dial markings are drawn in a frame rotated by -bearing about the
center, so the rose turns opposite the current heading and north stays
fixed relative to the world.
"""

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QPainter, QPen

from utils.compass_resources import default_style


TICK_COUNT = 24
TICK_STEP_DEGREES = 15
TICK_LENGTH = 10
ARROW_HALF_WIDTH = 5
TEXT_HEIGHT_SAMPLE = "yY"


class DialRenderer:
    """Draws background disc, tick marks, labels and the north arrow"""

    def __init__(self, style=None):
        self._style = style if style is not None else default_style()
        self._circle_pen = QPen(self._style.background_color, 1)
        self._circle_brush = QBrush(self._style.background_color)
        self._marker_pen = QPen(self._style.marker_color)
        self._text_pen = QPen(self._style.text_color)
        self._cardinal_labels = self._style.cardinal_labels()

    @property
    def style(self):
        return self._style

    def render(self, painter, width, height, bearing):
        """Paint the dial for a surface of the given size; a missing painter is a no-op"""
        if painter is None:
            return

        px = width // 2
        py = height // 2
        radius = min(px, py)

        metrics = painter.fontMetrics()
        text_height = int(metrics.horizontalAdvance(TEXT_HEIGHT_SAMPLE))
        rim_y = py - radius
        label_y = rim_y + text_height

        # Background
        painter.setPen(self._circle_pen)
        painter.setBrush(self._circle_brush)
        painter.drawEllipse(QPointF(px, py), radius, radius)
        painter.setBrush(Qt.NoBrush)

        # Rotate so that the 'top' faces the current bearing
        painter.save()
        self._rotate_about(painter, -bearing, px, py)

        for i in range(TICK_COUNT):
            painter.setPen(self._marker_pen)
            painter.drawLine(QPointF(px, rim_y), QPointF(px, rim_y + TICK_LENGTH))

            painter.save()
            painter.translate(0, text_height)

            label = self.label_for_tick(i)
            if i == 0:
                self._draw_north_arrow(painter, px, rim_y, text_height)
            if label is not None:
                label_width = metrics.horizontalAdvance(label)
                painter.setPen(self._text_pen)
                painter.drawText(QPointF(px - label_width / 2, label_y), label)

            painter.restore()
            self._rotate_about(painter, TICK_STEP_DEGREES, px, py)

        painter.restore()

    def label_for_tick(self, index):
        """Cardinal label every 90 degrees, the angle value on the remaining 45 degree ticks"""
        if index % 6 == 0:
            return self._cardinal_labels[index]
        if index % 3 == 0:
            return str(index * TICK_STEP_DEGREES)
        return None

    def _draw_north_arrow(self, painter, px, rim_y, text_height):
        tip = QPointF(px, rim_y + 2 * text_height)
        base_y = rim_y + 3 * text_height
        painter.setPen(self._marker_pen)
        painter.drawLine(tip, QPointF(px - ARROW_HALF_WIDTH, base_y))
        painter.drawLine(tip, QPointF(px + ARROW_HALF_WIDTH, base_y))

    @staticmethod
    def _rotate_about(painter, angle, cx, cy):
        painter.translate(cx, cy)
        painter.rotate(angle)
        painter.translate(-cx, -cy)


def create_painter(device):
    """Open an antialiased QPainter on a paint device"""
    painter = QPainter(device)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setRenderHint(QPainter.TextAntialiasing)
    return painter
