"""
User data directory management for logs and compass configuration.
"""

import os
from pathlib import Path
import sys

from utils.compass_config import write_default_config


class UserDataManager:
    def __init__(self, app_name="CompassView"):
        self.app_name = app_name
        self.app_data_dir = self.get_app_data_directory()
        self.setup_directories()

    def get_app_data_directory(self):
        """Get the appropriate application data directory for the current OS"""
        if sys.platform == "win32":
            # Windows: Use APPDATA
            base_dir = os.environ.get('APPDATA', os.path.expanduser('~'))
        elif sys.platform == "darwin":
            # macOS: Use ~/Library/Application Support
            base_dir = os.path.expanduser('~/Library/Application Support')
        else:
            # Linux: Use ~/.local/share
            base_dir = os.path.expanduser('~/.local/share')

        return Path(base_dir) / self.app_name

    def setup_directories(self):
        """Create all necessary subdirectories"""
        self.directories = {
            'root': self.app_data_dir,
            'logs': self.app_data_dir / 'logs',
            'config': self.app_data_dir / 'config',
        }

        for dir_path in self.directories.values():
            dir_path.mkdir(parents=True, exist_ok=True)

    def get_directory(self, name):
        """Get a specific directory path"""
        return self.directories.get(name, self.app_data_dir)

    def get_log_file_path(self):
        return self.directories['logs'] / 'application.log'

    def get_config_file_path(self):
        return self.directories['config'] / 'compass.toml'

    def ensure_default_config(self):
        """Write the default compass config on first run; returns its path"""
        config_path = self.get_config_file_path()
        if not config_path.exists():
            try:
                write_default_config(str(config_path))
            except OSError as e:
                print(f"Warning: Could not write default config: {e}")
        return config_path
