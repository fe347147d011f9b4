from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from calculadora.model.engine import CalculatorEngine
from calculadora.model import keys

logger = logging.getLogger(__name__)


class Store(QObject):
    """Owns the calculator engine and re-publishes its output as Qt signals."""
    display_changed = Signal(str)
    error_occurred = Signal(object)

    def __init__(self, engine: CalculatorEngine | None = None) -> None:
        super().__init__()
        self.engine = engine or CalculatorEngine()

    @property
    def display(self) -> str:
        return self.engine.display

    def press(self, token: str) -> None:
        """Dispatch one input token and notify listeners."""
        logger.debug(f"Key pressed: {token!r}")
        keys.dispatch(self.engine, token)

        if self.engine.last_error is not None:
            self.error_occurred.emit(self.engine.last_error)
        self.display_changed.emit(self.engine.display)
