import pytest

from calculadora.app.state import Store
from calculadora.model.engine import ErrorKind


@pytest.fixture
def store(qapp):
    return Store()


def record(signal):
    received = []
    signal.connect(lambda value: received.append(value))
    return received


def test_press_emits_display(store):
    displays = record(store.display_changed)
    for token in "12+3=":
        store.press(token)
    assert displays == ["1", "12", "12", "3", "15"]
    assert store.display == "15"


def test_error_emits_notice_then_cleared_display(store):
    errors = record(store.error_occurred)
    displays = record(store.display_changed)
    for token in "5÷0=":
        store.press(token)
    assert errors == [ErrorKind.DIVISION_BY_ZERO]
    assert displays[-1] == "0"


def test_no_error_signal_on_normal_keys(store):
    errors = record(store.error_occurred)
    for token in "4×2=":
        store.press(token)
    assert errors == []


def test_unknown_token_raises(store):
    with pytest.raises(KeyError):
        store.press("?")
