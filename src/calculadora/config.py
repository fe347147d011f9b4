"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Limits: The entry length cap and display precision are read by both the
   engine and the formatter, so they live in one place.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the stylesheet) when the app is frozen into an .exe.

Exports:
    ENTRY_MAX_LENGTH (int): Maximum characters a typed operand may grow to.
    DISPLAY_FRACTION_DIGITS (int): Fractional digits shown for computed values.
    NOTICE_TIMEOUT_MS (int): How long an error notice stays visible.
    LOG_LEVEL_ENV, LOG_FILE_ENV (str): Environment variables for logging.
    ASSETS_PATH (str): Absolute path to the assets directory.
    STYLESHEET_PATH (str): Absolute path to the optional Qt stylesheet.
"""
import sys
import os
from pathlib import Path


ENTRY_MAX_LENGTH: int = 10
DISPLAY_FRACTION_DIGITS: int = 10
NOTICE_TIMEOUT_MS: int = 2000

# Environment overrides read at startup
LOG_LEVEL_ENV: str = "CALCULADORA_LOG_LEVEL"
LOG_FILE_ENV: str = "CALCULADORA_LOG_FILE"
DEFAULT_LOG_LEVEL: str = "INFO"


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/calculadora/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
STYLESHEET_PATH: str = os.path.join(ASSETS_PATH, "calculator.qss")
