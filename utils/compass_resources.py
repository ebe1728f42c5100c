"""
Default labels and colors for the compass dial.

Cardinal labels go through the Qt translator so that an installed
QTranslator can supply localized strings.
"""

from typing import NamedTuple

from PySide6.QtCore import QCoreApplication
from PySide6.QtGui import QColor


TRANSLATION_CONTEXT = "CompassView"

DEFAULT_COLORS = {
    "background": "#f5f5f5",
    "text": "#212121",
    "marker": "#d32f2f",
}

CARDINAL_KEYS = ("north", "east", "south", "west")


class CompassStyle(NamedTuple):
    """Immutable look of a dial: cardinal labels plus the three paint colors"""
    north: str
    east: str
    south: str
    west: str
    background_color: QColor
    text_color: QColor
    marker_color: QColor

    def cardinal_labels(self):
        """Labels keyed by the tick index they are drawn at"""
        return {0: self.north, 6: self.east, 12: self.south, 18: self.west}


def default_labels():
    """Return the cardinal labels, localized through the host translator"""
    return {
        "north": QCoreApplication.translate(TRANSLATION_CONTEXT, "N"),
        "east": QCoreApplication.translate(TRANSLATION_CONTEXT, "E"),
        "south": QCoreApplication.translate(TRANSLATION_CONTEXT, "S"),
        "west": QCoreApplication.translate(TRANSLATION_CONTEXT, "W"),
    }


def build_style(labels, colors):
    """Build a CompassStyle from label and color-name dicts"""
    return CompassStyle(
        north=labels["north"],
        east=labels["east"],
        south=labels["south"],
        west=labels["west"],
        background_color=QColor(colors["background"]),
        text_color=QColor(colors["text"]),
        marker_color=QColor(colors["marker"]),
    )


def default_style():
    return build_style(default_labels(), DEFAULT_COLORS)
