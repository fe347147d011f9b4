"""
Logging Configuration
=====================
Sets up the 'calculadora' logger. Every module logs through
`logging.getLogger(__name__)`, so engine warnings (failed calculations) and
UI notices all end up in the handlers installed here.

The level and an optional log file can be chosen without editing code:

    CALCULADORA_LOG_LEVEL=DEBUG CALCULADORA_LOG_FILE=calc.log python -m calculadora

At DEBUG every key press and every computed value is logged.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional, Union

from calculadora.config import DEFAULT_LOG_LEVEL, LOG_FILE_ENV, LOG_LEVEL_ENV

LOGGER_NAME = "calculadora"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: Union[int, str, None]) -> int:
    """Turn a level name ('debug', 'INFO') or number into a logging level."""
    if level is None:
        level = DEFAULT_LOG_LEVEL
    if isinstance(level, int):
        return level

    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'")
    return value


def setup_logging(level: Union[int, str, None] = None,
                  log_file: Optional[str] = None,
                  environ: Optional[Mapping[str, str]] = None) -> logging.Logger:
    """
    Configures the logger for the 'calculadora' namespace.

    Args:
        level: Level number or name. Falls back to $CALCULADORA_LOG_LEVEL, then INFO.
        log_file: Optional path to save logs to. Falls back to $CALCULADORA_LOG_FILE.
        environ: Environment to read the fallbacks from (defaults to os.environ).
    """
    env = os.environ if environ is None else environ
    if level is None:
        level = env.get(LOG_LEVEL_ENV) or None
    if log_file is None:
        log_file = env.get(LOG_FILE_ENV) or None
    numeric_level = resolve_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Calling again (e.g. from tests or a restart) replaces the handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(numeric_level)}"
                + (f", writing to {log_file}" if log_file else ""))
    return logger
