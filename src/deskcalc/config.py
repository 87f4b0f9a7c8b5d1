"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: window geometry, fonts and application identity are not
   scattered through the view code.
2. Environment: the log level can be raised without touching the code by
   setting DESKCALC_LOG_LEVEL (e.g. DESKCALC_LOG_LEVEL=DEBUG).

Exports:
    LOG_LEVEL (int): Level passed to `setup_logging` at start-up.
    LOG_FILE (str | None): Optional log file from DESKCALC_LOG_FILE.
"""
import logging
import os
from typing import Optional

# Application identity (QSettings / window title)
ORG_ID = "deskcalc"
APP_ID = "deskcalc"
ORG_DOMAIN = "deskcalc.local"
VISIBLE_APP_NAME = "Full Functional Calculator"

# Main window
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 520
GRID_SPACING = 6

# Fonts
DISPLAY_FONT_FAMILY = "Monospace"
DISPLAY_FONT_SIZE = 28
BUTTON_FONT_FAMILY = "Sans Serif"
BUTTON_FONT_SIZE = 18
ADVANCED_FONT_SIZE = 16

ERROR_COLOR = "#c62828"

DEFAULT_LOG_LEVEL = logging.WARNING


def get_log_level(name: Optional[str] = None) -> int:
    """
    Resolve a level name such as "DEBUG" to its numeric value.
    Unknown or empty names fall back to DEFAULT_LOG_LEVEL.
    """
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL


# Global Constants
LOG_LEVEL: int = get_log_level(os.environ.get("DESKCALC_LOG_LEVEL"))
LOG_FILE: Optional[str] = os.environ.get("DESKCALC_LOG_FILE") or None
