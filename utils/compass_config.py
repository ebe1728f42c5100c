"""
TOML configuration for the compass view: initial bearing, labels and colors.
"""

import os

import toml
from PySide6.QtGui import QColor

from utils.compass_resources import (CARDINAL_KEYS, DEFAULT_COLORS,
                                     build_style, default_labels)


def _warn(logger, message):
    if logger:
        logger.log_warning(message)
    else:
        print(f"Warning: {message}")


def _section(data, name, logger):
    section = data.get(name, {})
    if not isinstance(section, dict):
        _warn(logger, f"Ignoring [{name}] in config, expected a table: {section!r}")
        return {}
    return section


def _read_bearing(view_section, logger):
    if "bearing" not in view_section:
        return None
    try:
        return float(view_section["bearing"])
    except (TypeError, ValueError):
        _warn(logger, f"Ignoring non-numeric bearing in config: {view_section['bearing']!r}")
        return None


def _read_labels(labels_section, logger):
    labels = default_labels()
    for key in CARDINAL_KEYS:
        value = labels_section.get(key)
        if value is None:
            continue
        if isinstance(value, str) and value:
            labels[key] = value
        else:
            _warn(logger, f"Ignoring invalid label for {key}: {value!r}")
    return labels


def _read_colors(colors_section, logger):
    colors = dict(DEFAULT_COLORS)
    for key in DEFAULT_COLORS:
        value = colors_section.get(key)
        if value is None:
            continue
        if isinstance(value, str) and QColor(value).isValid():
            colors[key] = value
        else:
            _warn(logger, f"Ignoring invalid {key} color: {value!r}")
    return colors


def load_compass_config(path, logger=None):
    """
    Load compass settings from a TOML file.

    Returns a dict with 'bearing' (float or None when not configured) and
    'style' (CompassStyle). Missing or broken files fall back to defaults.
    """
    data = {}
    if path and os.path.exists(path):
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = toml.load(f)
            if logger:
                logger.log_config(f"Loaded compass config from {path}")
        except (OSError, ValueError) as e:  # TomlDecodeError and UnicodeDecodeError are ValueErrors
            _warn(logger, f"Could not read compass config {path}: {e}")
            data = {}
    elif logger:
        logger.log_config("No compass config found, using defaults")

    view_section = _section(data, "view", logger)
    labels_section = _section(data, "labels", logger)
    colors_section = _section(data, "colors", logger)

    return {
        "bearing": _read_bearing(view_section, logger),
        "style": build_style(_read_labels(labels_section, logger),
                             _read_colors(colors_section, logger)),
    }


def write_default_config(path):
    """Write the default labels and colors to a TOML file"""
    config_data = {
        "labels": default_labels(),
        "colors": dict(DEFAULT_COLORS),
    }
    config_dir = os.path.dirname(path)
    if config_dir and not os.path.exists(config_dir):
        os.makedirs(config_dir)
    with open(path, 'w', encoding='utf-8') as f:
        toml.dump(config_data, f)
    return path
