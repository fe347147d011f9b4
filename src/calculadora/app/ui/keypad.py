from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from calculadora.model import keys

# (token, row, column, column span)
LAYOUT: list[tuple[str, int, int, int]] = [
    ("C", 0, 0, 1), ("±", 0, 1, 1), ("%", 0, 2, 1), ("÷", 0, 3, 1),
    ("7", 1, 0, 1), ("8", 1, 1, 1), ("9", 1, 2, 1), ("×", 1, 3, 1),
    ("4", 2, 0, 1), ("5", 2, 1, 1), ("6", 2, 2, 1), ("-", 2, 3, 1),
    ("1", 3, 0, 1), ("2", 3, 1, 1), ("3", 3, 2, 1), ("+", 3, 3, 1),
    ("0", 4, 0, 2), (".", 4, 2, 1), ("=", 4, 3, 1),
]

OPERATOR_TOKENS = {"÷", "×", "-", "+", "="}
FUNCTION_TOKENS = {"C", "±", "%"}


def missing_tokens(layout: list[tuple[str, int, int, int]] = LAYOUT) -> set[str]:
    """Registered tokens that have no button in `layout`."""
    return set(keys.list_tokens()) - {token for token, *_ in layout}


class Keypad(QWidget):
    """Grid of calculator buttons. Emits the button's token when clicked."""
    token_pressed = Signal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        grid = QGridLayout(self)
        grid.setSpacing(6)

        self.buttons: dict[str, QPushButton] = {}
        for token, row, col, span in LAYOUT:
            # Fail early if the layout drifts from the registered tokens
            keys.resolve(token)

            btn = QPushButton(token, self)
            btn.setObjectName("key")
            btn.setProperty("role", self._role(token))
            btn.setMinimumSize(56, 56)
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
            btn.clicked.connect(lambda _checked=False, t=token: self.token_pressed.emit(t))

            grid.addWidget(btn, row, col, 1, span)
            self.buttons[token] = btn

        missing = missing_tokens()
        if missing:
            raise ValueError(f"Keypad layout has no button for {sorted(missing)}")

    @staticmethod
    def _role(token: str) -> str:
        if token in OPERATOR_TOKENS:
            return "operator"
        if token in FUNCTION_TOKENS:
            return "function"
        return "digit"
