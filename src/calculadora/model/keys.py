"""
Input Tokens
============
Maps abstract input tokens (button labels, keyboard keys) to engine events so
that no per-button dispatch logic lives in the UI.
"""
from __future__ import annotations

from typing import Callable

from calculadora.model.engine import CalculatorEngine, Operator, DIGITS

Handler = Callable[[CalculatorEngine], None]

CLEAR = "C"
EQUALS = "="
DECIMAL = "."
TOGGLE_SIGN = "±"
PERCENT = "%"

_REGISTRY: dict[str, Handler] = {}

ALIASES: dict[str, str] = {
    ",": DECIMAL,
    "*": Operator.MULTIPLY,
    "x": Operator.MULTIPLY,
    "X": Operator.MULTIPLY,
    "/": Operator.DIVIDE,
    ":": Operator.DIVIDE,
    "Enter": EQUALS,
    "Return": EQUALS,
    "Escape": CLEAR,
    "Delete": CLEAR,
    "c": CLEAR,
}


def register_token(token: str, handler: Handler) -> None:
    if token in _REGISTRY:
        raise ValueError(f"Token '{token}' is already registered")
    _REGISTRY[token] = handler


def resolve(token: str) -> str:
    """Return the canonical token for `token` (aliases included)."""
    canonical = ALIASES.get(token, token)
    if canonical not in _REGISTRY:
        raise KeyError(f"No event registered for token '{token}'")
    return canonical


def dispatch(engine: CalculatorEngine, token: str) -> None:
    """Feed one input token into the engine."""
    _REGISTRY[resolve(token)](engine)


def list_tokens() -> list[str]:
    return list(_REGISTRY.keys())


for _d in DIGITS:
    register_token(_d, lambda engine, d=_d: engine.digit(d))

for _op in Operator:
    register_token(_op.value, lambda engine, op=_op: engine.operator(op))

register_token(DECIMAL, CalculatorEngine.decimal_point)
register_token(EQUALS, CalculatorEngine.equals)
register_token(CLEAR, CalculatorEngine.clear)
register_token(TOGGLE_SIGN, CalculatorEngine.toggle_sign)
register_token(PERCENT, CalculatorEngine.percent)
