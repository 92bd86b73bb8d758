"""Tests for arithmetic and display formatting."""

import math

import pytest

from scicalc.calc_types import AngleMode, BinaryOperator, UnaryFunction
from scicalc.display import format_display, format_history, format_number, to_precision
from scicalc.operations import DivisionByZeroError, apply_binary, apply_unary, factorial


def test_binary_operators():
    assert apply_binary(BinaryOperator.ADD, 2, 3) == 5
    assert apply_binary(BinaryOperator.SUBTRACT, 2, 3) == -1
    assert apply_binary(BinaryOperator.MULTIPLY, 2, 3) == 6
    assert apply_binary(BinaryOperator.DIVIDE, 3, 2) == 1.5
    assert apply_binary(BinaryOperator.POWER, 2, 0.5) == pytest.approx(math.sqrt(2))
    assert apply_binary(BinaryOperator.YROOT, 27, 3) == pytest.approx(3)
    assert apply_binary(BinaryOperator.EE, 1.5, -3) == pytest.approx(0.0015)


def test_division_by_zero_raises():
    with pytest.raises(DivisionByZeroError):
        apply_binary(BinaryOperator.DIVIDE, 1, 0)
    with pytest.raises(DivisionByZeroError):
        apply_binary(BinaryOperator.DIVIDE, 1, -0.0)


def test_domain_errors_give_nan_not_exceptions():
    assert math.isnan(apply_binary(BinaryOperator.POWER, -8, 1 / 3))
    assert math.isnan(apply_unary(UnaryFunction.SQRT, -4))
    assert math.isnan(apply_unary(UnaryFunction.LN, -1))
    assert apply_unary(UnaryFunction.LN, 0) == -math.inf
    assert apply_unary(UnaryFunction.LOG10, 1000) == pytest.approx(3)


def test_overflow_gives_infinity():
    assert apply_binary(BinaryOperator.POWER, 10, 400) == math.inf
    assert apply_binary(BinaryOperator.POWER, -10, 401) == -math.inf
    assert apply_unary(UnaryFunction.EXP, 1000) == math.inf
    assert apply_unary(UnaryFunction.SINH, -1000) == -math.inf
    assert apply_unary(UnaryFunction.TEN_POWER, 400) == math.inf


def test_unary_functions():
    assert apply_unary(UnaryFunction.NEGATE, 4) == -4
    assert apply_unary(UnaryFunction.PERCENT, 50) == 0.5
    assert apply_unary(UnaryFunction.SQUARE, -3) == 9
    assert apply_unary(UnaryFunction.CUBE, -3) == -27
    assert apply_unary(UnaryFunction.CBRT, -8) == pytest.approx(-2)
    assert apply_unary(UnaryFunction.RECIPROCAL, 4) == 0.25
    assert apply_unary(UnaryFunction.RECIPROCAL, 0) == math.inf
    assert apply_unary(UnaryFunction.TANH, 0) == 0


def test_trig_respects_angle_mode():
    assert apply_unary(UnaryFunction.COS, 180, AngleMode.DEGREES) == pytest.approx(-1)
    assert apply_unary(UnaryFunction.TAN, 45, AngleMode.DEGREES) == pytest.approx(1)
    assert apply_unary(UnaryFunction.SIN, math.pi / 2, AngleMode.RADIANS) == pytest.approx(1)
    # hyperbolic functions never convert
    assert apply_unary(UnaryFunction.COSH, 0, AngleMode.DEGREES) == 1


def test_factorial():
    assert factorial(0) == 1
    assert factorial(1) == 1
    assert factorial(6) == 720
    assert math.isnan(factorial(-1))
    assert math.isnan(factorial(2.5))
    assert factorial(171) == math.inf


def test_format_number_matches_browser_rendering():
    assert format_number(7.0) == "7"
    assert format_number(-0.0) == "0"
    assert format_number(0.1 + 0.2) == "0.30000000000000004"
    assert format_number(1e20) == "100000000000000000000"
    assert format_number(1e21) == "1e+21"
    assert format_number(0.000001) == "0.000001"
    assert format_number(1.5e-7) == "1.5e-7"
    assert format_number(math.nan) == "NaN"
    assert format_number(-math.inf) == "-Infinity"


def test_to_precision():
    assert to_precision(math.pi, 6) == "3.14159"
    assert to_precision(12345678901, 6) == "1.23457e+10"
    assert to_precision(0.000123456789, 6) == "0.000123457"
    assert to_precision(0.0000001234, 6) == "1.23400e-7"
    assert to_precision(999999.9, 6) == "1.00000e+6"
    assert to_precision(0, 6) == "0.00000"
    # exact ties round away from zero
    assert to_precision(12345650000, 6) == "1.23457e+10"
    assert to_precision(2.5, 1) == "3"
    assert to_precision(-0.125, 2) == "-0.13"


def test_format_display():
    assert format_display("123") == "123"
    assert format_display("0.30000000000000004") == "0.300000"
    assert format_display("Error") == "Error"
    assert format_display("-Infinity") == "-Infinity"
    assert format_display("123456", max_length=4, precision=2) == "1.2e+5"


def test_format_history():
    assert format_history(12, BinaryOperator.DIVIDE) == "12 ÷"
    assert format_history(2.5, BinaryOperator.POWER) == "2.5 ^"
    assert format_history(None, None) == ""
