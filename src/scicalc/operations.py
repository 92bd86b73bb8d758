"""
=============================================================================
MODULE NAME: operations.py
=============================================================================

INPUT FILES:
- None.

OUTPUT FILES:
- None. Pure functions over floats.

VERSION HISTORY:
- v1.0 (2026-10-18): Binary operators, unary functions and constants.

LAST UPDATED: 2026-10-18

NOTES:
- Results follow IEEE-754 the way a browser's Math object does: domain
  errors give NaN, overflow gives +/-Infinity, nothing raises except a
  binary division by zero, which the engine shows as "Error".
=============================================================================
"""

from __future__ import annotations

import math
import random
from typing import Callable, Dict

from .calc_types import AngleMode, BinaryOperator, Constant, UnaryFunction

# 171! no longer fits in a double
_FACTORIAL_OVERFLOW = 170


class DivisionByZeroError(ArithmeticError):
    """Raised for ``x / 0`` with the binary divide operator."""


def _divide(a: float, b: float) -> float:
    """IEEE division: x/0 is a signed infinity, 0/0 is NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _is_odd_integer(x: float) -> bool:
    x = float(x)
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # 0 ** negative; a negative base with a fractional exponent stays NaN
        if base == 0 and exponent < 0:
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


def _guard(fn: Callable[[float], float], odd: bool = False) -> Callable[[float], float]:
    """Map math-module exceptions onto NaN / Infinity."""

    def wrapped(x: float) -> float:
        try:
            return fn(x)
        except OverflowError:
            return math.copysign(math.inf, x) if odd else math.inf
        except ValueError:
            return math.nan

    return wrapped


def _log(fn: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        if x == 0:
            return -math.inf
        if x < 0 or math.isnan(x):
            return math.nan
        return fn(x)

    return wrapped


def _sqrt(x: float) -> float:
    if x < 0:
        return math.nan
    return math.sqrt(x)


def _cbrt(x: float) -> float:
    if not math.isfinite(x):
        return x
    return math.cbrt(x)


def factorial(n: float) -> float:
    """
    Iterative factorial over the integer domain.

    Returns:
        NaN for negative or non-integer input, 1 for 0 and 1,
        Infinity once the product no longer fits in a float.
    """
    n = float(n)
    if math.isnan(n) or n < 0 or not n.is_integer():
        return math.nan
    if n > _FACTORIAL_OVERFLOW:
        return math.inf
    result = 1.0
    for i in range(2, int(n) + 1):
        result *= i
    return result


def _to_radians(x: float, mode: AngleMode) -> float:
    return x if mode is AngleMode.RADIANS else x * math.pi / 180


_BINARY: Dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUBTRACT: lambda a, b: a - b,
    BinaryOperator.MULTIPLY: lambda a, b: a * b,
    BinaryOperator.DIVIDE: lambda a, b: a / b,
    BinaryOperator.POWER: power,
    BinaryOperator.YROOT: lambda a, b: power(a, _divide(1.0, b)),
    BinaryOperator.EE: lambda a, b: a * power(10.0, b),
}

_UNARY: Dict[UnaryFunction, Callable[[float], float]] = {
    UnaryFunction.NEGATE: lambda x: x * -1,
    UnaryFunction.PERCENT: lambda x: x / 100,
    UnaryFunction.SQUARE: lambda x: power(x, 2),
    UnaryFunction.CUBE: lambda x: power(x, 3),
    UnaryFunction.EXP: _guard(math.exp),
    UnaryFunction.TEN_POWER: lambda x: power(10.0, x),
    UnaryFunction.RECIPROCAL: lambda x: _divide(1.0, x),
    UnaryFunction.SQRT: _sqrt,
    UnaryFunction.CBRT: _cbrt,
    UnaryFunction.LN: _log(math.log),
    UnaryFunction.LOG10: _log(math.log10),
    UnaryFunction.FACTORIAL: factorial,
    UnaryFunction.SINH: _guard(math.sinh, odd=True),
    UnaryFunction.COSH: _guard(math.cosh),
    UnaryFunction.TANH: math.tanh,
}

_TRIG: Dict[UnaryFunction, Callable[[float], float]] = {
    UnaryFunction.SIN: _guard(math.sin),
    UnaryFunction.COS: _guard(math.cos),
    UnaryFunction.TAN: _guard(math.tan),
}


def apply_binary(op: BinaryOperator, left: float, right: float) -> float:
    """
    Apply a binary operator left-to-right.

    Raises:
        DivisionByZeroError: For ``/`` with a zero right-hand operand
    """
    if op is BinaryOperator.DIVIDE and right == 0:
        raise DivisionByZeroError(f"{left} / 0")
    return _BINARY[op](left, right)


def apply_unary(
    fn: UnaryFunction,
    value: float,
    angle_mode: AngleMode = AngleMode.DEGREES,
    rng: random.Random | None = None,
) -> float:
    if fn is UnaryFunction.RANDOM:
        return (rng or random).random()
    if fn in _TRIG:
        return _TRIG[fn](_to_radians(value, angle_mode))
    return _UNARY[fn](value)


def constant_value(name: Constant, rng: random.Random | None = None) -> float:
    if name is Constant.PI:
        return math.pi
    if name is Constant.E:
        return math.e
    return (rng or random).random()
