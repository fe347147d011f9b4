import pytest
from PySide6.QtCore import QEvent, Qt
from PySide6.QtGui import QKeyEvent

from calculadora.app.application import load_stylesheet
from calculadora.app.ui.keypad import LAYOUT, missing_tokens
from calculadora.app.ui.main_window import MainWindow
from calculadora.model import keys


@pytest.fixture
def window(qapp):
    win = MainWindow()
    yield win
    win.close()


def click(window, tokens):
    for token in tokens:
        window.keypad.buttons[token].click()


def key(window, qt_key, text=""):
    event = QKeyEvent(QEvent.Type.KeyPress, qt_key, Qt.KeyboardModifier.NoModifier, text)
    window.keyPressEvent(event)


def test_starts_at_zero(window):
    assert window.display.text() == "0"


def test_keypad_has_every_button(window):
    assert set(window.keypad.buttons) == set(keys.list_tokens())
    assert len(window.keypad.buttons) == len(LAYOUT)


def test_layout_without_a_token_is_reported():
    partial = [entry for entry in LAYOUT if entry[0] != "%"]
    assert missing_tokens() == set()
    assert missing_tokens(partial) == {"%"}


def test_buttons_drive_display(window):
    click(window, "4×2=")
    assert window.display.text() == "8"


def test_division_by_zero_shows_notice(window):
    click(window, "5÷0=")
    assert window.display.text() == "0"
    assert window.statusBar().currentMessage() == "Cannot divide by zero!"


def test_keyboard_input(window):
    key(window, Qt.Key.Key_7, "7")
    key(window, Qt.Key.Key_Asterisk, "*")
    key(window, Qt.Key.Key_3, "3")
    key(window, Qt.Key.Key_Return, "\r")
    assert window.display.text() == "21"

    key(window, Qt.Key.Key_Escape)
    assert window.display.text() == "0"


def test_unmapped_key_is_ignored(window):
    key(window, Qt.Key.Key_Q, "q")
    assert window.display.text() == "0"


def test_load_stylesheet(qapp, tmp_path):
    assert load_stylesheet(qapp, str(tmp_path / "missing.qss")) is False

    qss = tmp_path / "calc.qss"
    qss.write_text("QLabel { color: red; }", encoding="utf-8")
    assert load_stylesheet(qapp, str(qss)) is True
    assert qapp.styleSheet() == "QLabel { color: red; }"
    qapp.setStyleSheet("")
