"""
Calculator Engine (State Machine)
=================================
This module holds the arithmetic-entry state machine behind the display.

Why is this file needed?
------------------------
1. State Management: It owns the typed operand, the pending operand, the
   pending operator and the two entry flags in one place.
2. Decoupling: The UI only forwards key events and reads `display`; nothing
   here knows about Qt.
3. Error Recovery: Division by zero and non-finite results never escape as
   exceptions. The engine records the error kind, clears itself and stays usable.

Evaluation is immediate and left-to-right: `2 + 3 × 4 =` gives 20.

Classes:
    Operator: The four binary operators.
    ErrorKind: The error taxonomy reported to the UI.
    EntryState: The five mutable fields of the machine.
    ComputeResult: Outcome of a single arithmetic step.
    CalculatorEngine: The event handlers.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
import math
from typing import Optional

from calculadora.config import ENTRY_MAX_LENGTH
from calculadora.model.formatting import format_number, to_entry, display_entry

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class Operator(StrEnum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"

    def apply(self, a: float, b: float) -> float:
        if self is Operator.ADD:
            return a + b
        if self is Operator.SUBTRACT:
            return a - b
        if self is Operator.MULTIPLY:
            return a * b
        return a / b


class ErrorKind(StrEnum):
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_RESULT = "invalid_result"
    PARSE = "parse"


@dataclass
class EntryState:
    """
    Holds the mutable fields of the calculator.
    Logic:
    1. `current` is the operand being typed (empty = nothing typed yet)
    2. `pending` + `operator` are set and cleared together
    3. `awaiting_new_entry` makes the next digit replace `current`
    4. `operator_just_pressed` lets a second operator replace the first
    """
    current: str = ""
    pending: str = ""
    operator: Optional[Operator] = None
    awaiting_new_entry: bool = True
    operator_just_pressed: bool = False


@dataclass(frozen=True)
class ComputeResult:
    value: Optional[float] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_operand(text: str) -> Optional[float]:
    """Parse an operand string, returning None when it is not a finite number."""
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


class CalculatorEngine:
    """Single-owner calculator state machine.

    Every public method is one input event. After each call `display` holds
    the text to show and `last_error` holds the error raised by that event,
    if any.
    """

    def __init__(self, max_entry_length: int = ENTRY_MAX_LENGTH) -> None:
        self.max_entry_length = max_entry_length
        self.state = EntryState()
        self.display: str = "0"
        self.last_error: Optional[ErrorKind] = None

    # --- Entry events ---

    def digit(self, d: str) -> None:
        """Type one digit; ignored once the entry is full."""
        if len(d) != 1 or d not in DIGITS:
            raise ValueError(f"Not a digit: {d!r}")
        self.last_error = None
        s = self.state

        if s.awaiting_new_entry:
            s.current = d
            s.awaiting_new_entry = False
        elif len(s.current) < self.max_entry_length:
            s.current += d

        s.operator_just_pressed = False
        self.display = display_entry(s.current)

    def decimal_point(self) -> None:
        """Add a decimal point unless the entry already has one."""
        self.last_error = None
        s = self.state

        if s.awaiting_new_entry:
            s.current = "0."
            s.awaiting_new_entry = False
        elif s.current and "." not in s.current:
            s.current += "."
        elif not s.current:
            s.current = "0."

        s.operator_just_pressed = False
        self.display = s.current

    def toggle_sign(self) -> None:
        """Flip the sign of the typed operand."""
        self.last_error = None
        s = self.state
        if not s.current or s.current == "0":
            return

        if s.current.startswith("-"):
            s.current = s.current[1:]
        else:
            s.current = "-" + s.current
        self.display = format_number(float(s.current))

    def percent(self) -> None:
        """Divide the typed operand by 100."""
        self.last_error = None
        s = self.state
        if not s.current:
            return

        number = parse_operand(s.current)
        if number is None:
            # Parse failures are reported as invalid results
            self._fail(ErrorKind.INVALID_RESULT)
            return
        result = number / 100
        s.current = to_entry(result)
        self.display = format_number(result)

    # --- Operation events ---

    def operator(self, op: Operator | str) -> None:
        """Choose the pending operator, first evaluating any pending operation."""
        op = Operator(op)
        self.last_error = None
        s = self.state

        if s.operator_just_pressed and s.operator is not None:
            logger.debug(f"Operator {s.operator} replaced by {op}")
            s.operator = op
            return

        if not s.current:
            return

        if s.pending and not s.operator_just_pressed:
            if not self._compute().ok:
                return

        s.pending = s.current
        s.current = ""
        s.operator = op
        s.operator_just_pressed = True
        s.awaiting_new_entry = False

    def equals(self) -> None:
        """Evaluate the pending operation."""
        self.last_error = None
        s = self.state

        if s.pending and s.current and s.operator is not None:
            if self._compute().ok:
                s.pending = ""
                s.operator = None
                s.awaiting_new_entry = True

        s.operator_just_pressed = False

    def clear(self) -> None:
        """Reset all state and show 0."""
        self.state = EntryState()
        self.display = "0"
        self.last_error = None

    # --- Internals ---

    def _compute(self) -> ComputeResult:
        """Apply the pending operator to the pending and current operands."""
        result = self.evaluate(self.state.pending, self.state.operator, self.state.current)
        if not result.ok:
            self._fail(result.error)
            return result

        self.state.current = to_entry(result.value)
        self.display = format_number(result.value)
        logger.debug(f"Computed {result.value!r}")
        return result

    @staticmethod
    def evaluate(left: str, op: Optional[Operator], right: str) -> ComputeResult:
        """One arithmetic step on operand strings, without touching any state."""
        a = parse_operand(left)
        b = parse_operand(right)
        if a is None or b is None or op is None:
            return ComputeResult(error=ErrorKind.PARSE)

        if op is Operator.DIVIDE and b == 0.0:
            return ComputeResult(error=ErrorKind.DIVISION_BY_ZERO)

        try:
            value = op.apply(a, b)
        except OverflowError:
            return ComputeResult(error=ErrorKind.INVALID_RESULT)

        if not math.isfinite(value):
            return ComputeResult(error=ErrorKind.INVALID_RESULT)
        return ComputeResult(value=value)

    def _fail(self, error: ErrorKind) -> None:
        logger.warning(f"Calculation failed ({error}), clearing.")
        self.clear()
        self.last_error = error
