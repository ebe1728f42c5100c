"""
Version information for Compass View application.
"""

__version__ = "0.1.0"
__build_date__ = "2026-10-19"
__build_commit__ = "main"

# Application metadata
APP_NAME = "Compass View"
APP_DESCRIPTION = "Compass dial widget rotated by a bearing"
APP_AUTHOR = "Compass View Team"


def get_version_info():
    """Get formatted version information."""
    return {
        "version": __version__,
        "build_date": __build_date__,
        "build_commit": __build_commit__,
        "app_name": APP_NAME,
        "description": APP_DESCRIPTION,
        "author": APP_AUTHOR,
    }


def get_version_string():
    """Get version as a string."""
    return __version__
