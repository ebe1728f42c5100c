"""
Compass view widget: a square dial rotated according to a bearing.
"""

from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, Property
from PySide6.QtGui import QAccessible, QAccessibleEvent

from gui.widgets.dial_renderer import DialRenderer, create_painter
from utils.measure_spec import square_dimension, exact, unspecified


class AccessibilityEvent:
    """Text payload collected for assistive technology"""

    TYPE_VIEW_TEXT_CHANGED = "view_text_changed"

    def __init__(self, event_type=TYPE_VIEW_TEXT_CHANGED):
        self.event_type = event_type
        self.text = []


class CompassView(QWidget):
    """Custom widget drawing a compass rose that turns opposite the bearing"""

    bearing_changed = Signal(float)

    def __init__(self, parent=None, style=None, bearing=None):
        super().__init__(parent)
        self._bearing = 0.0
        self.measured_width = 0
        self.measured_height = 0
        self.setFocusPolicy(Qt.StrongFocus)

        size_policy = QSizePolicy(QSizePolicy.Preferred, QSizePolicy.Preferred)
        size_policy.setHeightForWidth(True)
        self.setSizePolicy(size_policy)

        self.renderer = DialRenderer(style)
        self.on_measure(unspecified(), unspecified())

        # Optional initial value, applied through the setter like any later change
        if bearing is not None:
            self.set_bearing(bearing)

    def get_bearing(self):
        return self._bearing

    def set_bearing(self, value):
        """Store the bearing as given (no wrapping), repaint and notify listeners"""
        self._bearing = float(value)
        self.update()
        self.send_accessibility_event()
        self.bearing_changed.emit(self._bearing)

    bearing = Property(float, get_bearing, set_bearing, notify=bearing_changed)

    def on_measure(self, width_spec, height_spec):
        """
        Work out the widget size from the parent's width and height constraints.

        The compass is a circle that fills as much space as possible, so both
        dimensions are set to the shorter boundary.
        """
        d = square_dimension(width_spec, height_spec)
        self.measured_width = d
        self.measured_height = d
        return d

    def sizeHint(self):
        d = square_dimension(unspecified(), unspecified())
        return QSize(d, d)

    def hasHeightForWidth(self):
        return True

    def heightForWidth(self, width):
        return width

    def resizeEvent(self, event):
        size = event.size()
        self.on_measure(exact(size.width()), exact(size.height()))
        super().resizeEvent(event)

    def paintEvent(self, event):
        painter = create_painter(self)
        try:
            self.renderer.render(painter, self.width(), self.height(), self._bearing)
        finally:
            painter.end()

    def accessibility_text(self):
        return str(self._bearing)

    def send_accessibility_event(self):
        self.setAccessibleDescription(self.accessibility_text())
        # Qt skips its own event when the description is unchanged, so always post one
        QAccessible.updateAccessibility(QAccessibleEvent(self, QAccessible.Event.DescriptionChanged))

    def populate_accessibility_event(self, event):
        """Add the raw bearing to the event text; only a visible compass contributes"""
        if not self.isVisible():
            return False
        if event is not None:
            event.text.append(self.accessibility_text())
        return True
