"""
Main Application Window
=======================
The single screen of the calculator: a read-only display above the keypad,
with error notices shown briefly in the status bar.

Why is this file needed?
------------------------
1. Layout: It organizes the display and the keypad.
2. Routing: Button clicks and keyboard keys both end up as input tokens
   handed to the Store; the window only renders what the Store emits.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Slot, QT_TRANSLATE_NOOP
from PySide6.QtGui import QFont, QKeyEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QSizePolicy, QVBoxLayout, QWidget

from calculadora.app.application import VISIBLE_APP_NAME
from calculadora.app.state import Store
from calculadora.app.ui.keypad import Keypad
from calculadora.config import NOTICE_TIMEOUT_MS
from calculadora.model.engine import ErrorKind

logger = logging.getLogger(__name__)

ERROR_NOTICES = {
    ErrorKind.DIVISION_BY_ZERO: QT_TRANSLATE_NOOP("Notices", "Cannot divide by zero!"),
    ErrorKind.INVALID_RESULT: QT_TRANSLATE_NOOP("Notices", "Error: invalid result"),
    ErrorKind.PARSE: QT_TRANSLATE_NOOP("Notices", "Calculation error"),
}

# Keys whose event text is not the token itself
SPECIAL_KEYS = {
    Qt.Key.Key_Return: "Return",
    Qt.Key.Key_Enter: "Enter",
    Qt.Key.Key_Escape: "Escape",
    Qt.Key.Key_Delete: "Delete",
}


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(self.tr(VISIBLE_APP_NAME))
        self.resize(360, 560)

        self.store = store or Store()

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(12, 12, 12, 12)
        v.setSpacing(12)

        self.display = QLabel(self.store.display, central)
        self.display.setObjectName("display")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.display.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.display.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        font = QFont(self.display.font())
        font.setPointSize(32)
        self.display.setFont(font)
        v.addWidget(self.display, 0)

        self.keypad = Keypad(central)
        v.addWidget(self.keypad, 1)

        self.setCentralWidget(central)
        self.statusBar()

        self.keypad.token_pressed.connect(self.store.press)
        self.store.display_changed.connect(self._on_display_changed)
        self.store.error_occurred.connect(self._on_error)

    @Slot(str)
    def _on_display_changed(self, text: str) -> None:
        self.display.setText(text)

    @Slot(object)
    def _on_error(self, error: ErrorKind) -> None:
        message = self.tr(ERROR_NOTICES[error])
        logger.info(f"Showing notice: {message}")
        self.statusBar().showMessage(message, NOTICE_TIMEOUT_MS)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        token = SPECIAL_KEYS.get(event.key(), event.text())
        try:
            self.store.press(token)
        except KeyError:
            super().keyPressEvent(event)
