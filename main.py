"""
Compass View - entry point for the demo application.
"""

import sys

from PySide6.QtWidgets import QApplication

from gui.main_window import CompassMainWindow


def main():
    app = QApplication(sys.argv)
    window = CompassMainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
