"""
Number Formatting
=================
Conversions between doubles and the strings the calculator shows or stores.

Two representations are used:

* the *display* form (`format_number`): integers without a fractional part,
  other values rounded half-even to a fixed number of fractional digits with
  trailing zeros removed. Never uses exponent notation and always uses `.`
  as the decimal separator.
* the *entry* form (`to_entry`): the shortest round-tripping digits of the
  double written out as a plain decimal, so the engine can keep appending
  keystrokes to a computed value.
"""
from __future__ import annotations

import math
from decimal import Decimal

from calculadora.config import DISPLAY_FRACTION_DIGITS


def format_number(value: float, fraction_digits: int = DISPLAY_FRACTION_DIGITS) -> str:
    """Format a finite double for the display."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value {value!r}")

    # repr() gives the shortest digits that round-trip, so 0.1 + 0.2 is
    # rounded from 0.30000000000000004 and not from its binary expansion.
    text = format(Decimal(repr(value)), f".{fraction_digits}f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def to_entry(value: float) -> str:
    """Plain decimal string for a computed value, e.g. 1e-05 -> '0.00001'."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot store non-finite value {value!r}")
    return format(Decimal(repr(value)), "f")


def display_entry(entry: str) -> str:
    """Display form of an operand that is still being typed.

    Entries holding a decimal point are shown verbatim so that a trailing
    point or trailing zeros stay visible; whole numbers are normalised.
    """
    if not entry:
        return "0"
    if "." in entry:
        return entry
    return format_number(float(entry))
