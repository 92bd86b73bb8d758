"""
Number rendering for the calculator display and history line.

Numbers are rendered the way a browser prints them, so that a session
driven through the web adapter shows the same text as a browser page.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

from .calc_types import BinaryOperator

DISPLAY_MAX_LENGTH = 10
DISPLAY_PRECISION = 6

_SYMBOLS = {
    BinaryOperator.ADD: "+",
    BinaryOperator.SUBTRACT: "−",
    BinaryOperator.MULTIPLY: "×",
    BinaryOperator.DIVIDE: "÷",
    BinaryOperator.POWER: "^",
    BinaryOperator.YROOT: "yroot",
    BinaryOperator.EE: "E",
}


def format_number(value: float) -> str:
    """
    Render a float like JavaScript's ``Number.prototype.toString``.

    Args:
        value: Number to render

    Returns:
        "7" for 7.0, "0.1" for 0.1, "1e+21" and "1.5e-7" outside the fixed
        range, "NaN" / "Infinity" / "-Infinity" for non-finite values.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    # repr gives the shortest digits that round-trip
    dec = Decimal(repr(value)).normalize()
    sign, digits, exponent = dec.as_tuple()
    mantissa = "".join(str(d) for d in digits)
    exp10 = len(mantissa) - 1 + exponent
    if -7 < exp10 < 21:
        return format(dec, "f")

    if len(mantissa) > 1:
        mantissa = mantissa[0] + "." + mantissa[1:]
    return f"{'-' if sign else ''}{mantissa}e{'+' if exp10 >= 0 else '-'}{abs(exp10)}"


def to_precision(value: float, digits: int) -> str:
    """
    Render like JavaScript's ``Number.prototype.toPrecision``.

    Rounds the exact binary value half away from zero, so 12345650000 with
    6 digits is "1.23457e+10".
    """
    if not math.isfinite(value):
        return format_number(value)
    if not 1 <= digits <= 100:
        raise ValueError(f"precision out of range: {digits}")
    if value == 0:
        return "0" if digits == 1 else "0." + "0" * (digits - 1)

    ctx = Context(prec=digits + 2, rounding=ROUND_HALF_UP)
    exact = abs(Decimal(value))
    exponent = exact.adjusted()
    rounded = exact.quantize(Decimal(1).scaleb(exponent - digits + 1), context=ctx)
    # rounding up can carry into a new leading digit (999999.9 -> 1000000)
    if rounded.adjusted() > exponent:
        exponent += 1
        rounded = exact.quantize(Decimal(1).scaleb(exponent - digits + 1), context=ctx)

    sign = "-" if value < 0 else ""
    if exponent < -6 or exponent >= digits:
        coefficient = "".join(str(d) for d in rounded.as_tuple().digits)
        mantissa = coefficient[0] + ("." + coefficient[1:] if digits > 1 else "")
        return f"{sign}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"
    return sign + format(rounded, "f")


def parse_number(text: str) -> Optional[float]:
    """Parse display text, returning None when it is not a number."""
    try:
        return float(text)
    except ValueError:
        return None


def format_display(
    text: str,
    max_length: int = DISPLAY_MAX_LENGTH,
    precision: int = DISPLAY_PRECISION,
) -> str:
    """
    Apply the display truncation rule to an entry text.

    Text longer than ``max_length`` that still parses as a number is shown
    with ``precision`` significant digits. The stored entry is not changed.
    """
    if len(text) <= max_length:
        return text
    value = parse_number(text)
    if value is None or math.isnan(value):
        return text
    return to_precision(value, precision)


def operator_symbol(op: BinaryOperator) -> str:
    return _SYMBOLS[op]


def format_history(
    operand: Optional[float],
    op: Optional[BinaryOperator],
    operand_text: Optional[str] = None,
) -> str:
    """
    History line shown above the display: ``"<operand> <symbol>"``.

    The operand is shown as typed when ``operand_text`` is given, so "3."
    stays "3." rather than "3".
    """
    if op is None or operand is None:
        return ""
    return f"{operand_text or format_number(operand)} {operator_symbol(op)}"
