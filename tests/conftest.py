import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QPointF
from PySide6.QtGui import QTransform
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


class FixedWidthMetrics:
    """Font metrics where every character has the same advance"""

    def __init__(self, char_width):
        self.char_width = char_width

    def horizontalAdvance(self, text):
        return self.char_width * len(text)


class RecordingPainter:
    """Stands in for QPainter and records primitives in world coordinates"""

    def __init__(self, char_width=7):
        self.metrics = FixedWidthMetrics(char_width)
        self.transform = QTransform()
        self.stack = []
        self.lines = []
        self.texts = []
        self.ellipses = []

    def fontMetrics(self):
        return self.metrics

    def setPen(self, pen):
        pass

    def setBrush(self, brush):
        pass

    def save(self):
        self.stack.append(QTransform(self.transform))

    def restore(self):
        self.transform = self.stack.pop()

    def translate(self, dx, dy):
        self.transform = QTransform.fromTranslate(dx, dy) * self.transform

    def rotate(self, angle):
        rotation = QTransform()
        rotation.rotate(angle)
        self.transform = rotation * self.transform

    def _map(self, point):
        mapped = self.transform.map(QPointF(point))
        return (mapped.x(), mapped.y())

    def drawEllipse(self, center, rx, ry):
        self.ellipses.append((self._map(center), rx, ry))

    def drawLine(self, p1, p2):
        self.lines.append((self._map(p1), self._map(p2)))

    def drawText(self, point, text):
        self.texts.append((text, self._map(point)))


@pytest.fixture
def recording_painter():
    return RecordingPainter()
