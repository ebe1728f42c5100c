from PySide6.QtGui import QColor
import toml

from utils.compass_config import load_compass_config, write_default_config
from utils.compass_resources import DEFAULT_COLORS


class RecordingLogger:
    def __init__(self):
        self.warnings = []
        self.config_messages = []

    def log_warning(self, message):
        self.warnings.append(message)

    def log_config(self, message):
        self.config_messages.append(message)


def test_missing_file_gives_defaults(tmp_path):
    logger = RecordingLogger()
    config = load_compass_config(str(tmp_path / "missing.toml"), logger)
    style = config["style"]
    assert config["bearing"] is None
    assert (style.north, style.east, style.south, style.west) == ("N", "E", "S", "W")
    assert style.marker_color == QColor(DEFAULT_COLORS["marker"])
    assert logger.warnings == []
    assert logger.config_messages


def test_full_config(tmp_path):
    path = tmp_path / "compass.toml"
    path.write_text(
        '[view]\nbearing = 42.5\n\n'
        '[labels]\nnorth = "Nord"\nwest = "Ouest"\n\n'
        '[colors]\nbackground = "#000000"\nmarker = "red"\n',
        encoding="utf-8")
    config = load_compass_config(str(path))
    style = config["style"]
    assert config["bearing"] == 42.5
    assert style.north == "Nord"
    assert style.west == "Ouest"
    assert style.east == "E"
    assert style.background_color == QColor("#000000")
    assert style.marker_color == QColor("red")
    assert style.text_color == QColor(DEFAULT_COLORS["text"])


def test_integer_bearing_becomes_float(tmp_path):
    path = tmp_path / "compass.toml"
    path.write_text("[view]\nbearing = 400\n", encoding="utf-8")
    assert load_compass_config(str(path))["bearing"] == 400.0


def test_invalid_values_fall_back_with_warnings(tmp_path):
    path = tmp_path / "compass.toml"
    path.write_text(
        '[view]\nbearing = "east"\n\n'
        '[labels]\nsouth = ""\n\n'
        '[colors]\ntext = "not-a-color"\n',
        encoding="utf-8")
    logger = RecordingLogger()
    config = load_compass_config(str(path), logger)
    assert config["bearing"] is None
    assert config["style"].south == "S"
    assert config["style"].text_color == QColor(DEFAULT_COLORS["text"])
    assert len(logger.warnings) == 3


def test_unparsable_file_falls_back(tmp_path):
    path = tmp_path / "compass.toml"
    path.write_text("[view\nbearing = ", encoding="utf-8")
    logger = RecordingLogger()
    config = load_compass_config(str(path), logger)
    assert config["bearing"] is None
    assert config["style"].north == "N"
    assert len(logger.warnings) == 1


def test_write_default_config(tmp_path):
    path = tmp_path / "config" / "compass.toml"
    write_default_config(str(path))
    data = toml.load(str(path))
    assert data["labels"] == {"north": "N", "east": "E", "south": "S", "west": "W"}
    assert data["colors"] == DEFAULT_COLORS
    assert "view" not in data
    assert load_compass_config(str(path))["bearing"] is None


def test_non_table_sections_fall_back(tmp_path):
    path = tmp_path / "compass.toml"
    path.write_text('view = 5\nlabels = "x"\ncolors = [1]\n', encoding="utf-8")
    logger = RecordingLogger()
    config = load_compass_config(str(path), logger)
    assert config["bearing"] is None
    assert config["style"].north == "N"
    assert config["style"].marker_color == QColor(DEFAULT_COLORS["marker"])
    assert len(logger.warnings) == 3


def test_non_utf8_file_falls_back(tmp_path):
    path = tmp_path / "compass.toml"
    path.write_bytes(b"\xff\xfe[view]\n")
    logger = RecordingLogger()
    config = load_compass_config(str(path), logger)
    assert config["bearing"] is None
    assert config["style"].west == "W"
    assert len(logger.warnings) == 1
