"""
Main window class for the Compass View demo application.
"""

from PySide6.QtWidgets import QMainWindow, QWidget, QHBoxLayout
from PySide6.QtGui import QTextCursor

from utils.logger import Logger
from utils.user_data import UserDataManager
from utils.compass_config import load_compass_config
from gui.widgets.compass_view import CompassView
from gui.bearing_panel import setup_bearing_panel
from version import get_version_string


class CompassMainWindow(QMainWindow):
    def __init__(self, user_data=None):
        super().__init__()
        self.current_version = get_version_string()
        self.setWindowTitle(f"Compass View v{self.current_version}")
        self.setGeometry(100, 100, 720, 480)
        self.setMinimumSize(480, 320)

        # Initialize user data management
        self.user_data = user_data if user_data is not None else UserDataManager()

        # Initialize logger with proper user data path
        self.logger = Logger(str(self.user_data.get_log_file_path()))
        self.logger.log_step("Application started")

        self.config_file = str(self.user_data.ensure_default_config())
        self.config = load_compass_config(self.config_file, self.logger)

        self.setup_ui()

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QHBoxLayout(central_widget)

        self.compass_view = CompassView(style=self.config["style"],
                                        bearing=self.config["bearing"])
        main_layout.addWidget(self.compass_view, 1)
        main_layout.addWidget(setup_bearing_panel(self))

        self.compass_view.bearing_changed.connect(self.on_bearing_changed)
        self.update_bearing_readout()

    def set_bearing(self, value):
        """Bearing is supplied from outside the widget, here by the input panel"""
        self.compass_view.set_bearing(value)

    def on_bearing_changed(self, bearing):
        ui_message = self.logger.log_bearing(bearing)
        self.log_message_to_ui(ui_message)
        self.update_bearing_readout()

    def update_bearing_readout(self):
        self.bearing_readout.setText(f"{self.compass_view.bearing:.1f}°")

    def log_message_to_ui(self, message):
        self.log_output.append(message)

        # Auto-scroll to bottom
        cursor = self.log_output.textCursor()
        cursor.movePosition(QTextCursor.End)
        self.log_output.setTextCursor(cursor)

    def closeEvent(self, event):
        """Handle application close"""
        self.logger.log_step("Application closing")
        self.logger.write_session_footer()
        event.accept()
