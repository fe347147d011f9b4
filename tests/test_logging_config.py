import logging

import pytest

from calculadora.logging_config import LOGGER_NAME, resolve_level, setup_logging
from calculadora.model.engine import CalculatorEngine


@pytest.fixture
def app_logger():
    """Restore the package logger after each test."""
    logger = logging.getLogger(LOGGER_NAME)
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(saved_level)


def file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


# --- Level resolution ---

@pytest.mark.parametrize("level, expected", [
    (None, logging.INFO),
    (logging.WARNING, logging.WARNING),
    ("debug", logging.DEBUG),
    (" ERROR ", logging.ERROR),
])
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


def test_resolve_level_rejects_unknown_name():
    with pytest.raises(ValueError):
        resolve_level("chatty")


# --- Handlers ---

def test_repeat_call_does_not_duplicate_handlers(app_logger):
    setup_logging(environ={})
    setup_logging(environ={})
    assert len(app_logger.handlers) == 1
    assert file_handlers(app_logger) == []


def test_file_handler_added(app_logger, tmp_path):
    log_file = tmp_path / "calc.log"
    setup_logging(log_file=str(log_file), environ={})
    assert len(file_handlers(app_logger)) == 1
    assert "Logging initialized" in log_file.read_text(encoding="utf-8")


def test_environment_selects_level_and_file(app_logger, tmp_path):
    log_file = tmp_path / "env.log"
    setup_logging(environ={"CALCULADORA_LOG_LEVEL": "debug",
                           "CALCULADORA_LOG_FILE": str(log_file)})
    assert app_logger.level == logging.DEBUG
    assert len(file_handlers(app_logger)) == 1


def test_explicit_level_wins_over_environment(app_logger):
    setup_logging(level="WARNING", environ={"CALCULADORA_LOG_LEVEL": "DEBUG"})
    assert app_logger.level == logging.WARNING


# --- Engine records ---

def test_engine_error_reaches_log_file(app_logger, tmp_path):
    log_file = tmp_path / "calc.log"
    setup_logging(level="INFO", log_file=str(log_file), environ={})

    engine = CalculatorEngine()
    engine.digit("5")
    engine.operator("÷")
    engine.digit("0")
    engine.equals()

    for handler in app_logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "calculadora.model.engine - WARNING" in text
    assert "division_by_zero" in text


def test_debug_level_logs_computed_values(app_logger, tmp_path):
    log_file = tmp_path / "calc.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file), environ={})

    engine = CalculatorEngine()
    engine.digit("2")
    engine.operator("+")
    engine.digit("3")
    engine.equals()

    for handler in app_logger.handlers:
        handler.flush()
    assert "Computed 5.0" in log_file.read_text(encoding="utf-8")
