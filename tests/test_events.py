"""Tests for button and keyboard event mapping."""

import pytest

from scicalc import Action, ActionKind, CalculatorEngine, action_from_button, action_from_key
from scicalc.calc_types import BinaryOperator, Constant, MemoryAction, UnaryFunction


def test_number_buttons():
    assert action_from_button({"num": "7"}) == Action(ActionKind.DIGIT, "7")
    assert action_from_button({"action": "decimal"}) == Action(ActionKind.DIGIT, ".")


def test_operator_buttons():
    assert action_from_button({"action": "operator", "op": "*"}).payload is BinaryOperator.MULTIPLY
    assert action_from_button({"action": "yroot"}).payload is BinaryOperator.YROOT
    assert action_from_button({"action": "ee"}).kind is ActionKind.OPERATOR


def test_function_constant_and_memory_buttons():
    assert action_from_button({"action": "factorial"}).payload is UnaryFunction.FACTORIAL
    assert action_from_button({"action": "ten-power"}).payload is UnaryFunction.TEN_POWER
    rand = action_from_button({"action": "rand"})
    assert rand.kind is ActionKind.CONSTANT
    assert rand.payload is Constant.RANDOM
    assert action_from_button({"action": "memory-recall"}).payload is MemoryAction.RECALL


def test_control_buttons():
    assert action_from_button({"action": "clear"}).kind is ActionKind.CLEAR
    assert action_from_button({"action": "calculate"}).kind is ActionKind.EVALUATE
    assert action_from_button({"action": "rad"}).kind is ActionKind.TOGGLE_ANGLE
    assert action_from_button({"action": "paren-left"}).kind is ActionKind.OPEN_GROUP
    assert action_from_button({"action": "paren-right"}).kind is ActionKind.CLOSE_GROUP


def test_unknown_buttons_rejected():
    with pytest.raises(ValueError):
        action_from_button({"action": "modulo"})
    with pytest.raises(ValueError):
        action_from_button({"action": "operator", "op": "%"})
    with pytest.raises(ValueError):
        action_from_button({})


def test_keys():
    assert action_from_key("5") == Action.digit("5")
    assert action_from_key(".") == Action.digit(".")
    assert action_from_key("/").payload is BinaryOperator.DIVIDE
    assert action_from_key("Enter").kind is ActionKind.EVALUATE
    assert action_from_key("=").kind is ActionKind.EVALUATE
    assert action_from_key("Backspace").kind is ActionKind.BACKSPACE
    assert action_from_key("Escape").kind is ActionKind.CLEAR
    assert action_from_key("C").kind is ActionKind.CLEAR
    assert action_from_key("(").kind is ActionKind.OPEN_GROUP


def test_unbound_keys_ignored():
    assert action_from_key("Shift") is None
    assert action_from_key("x") is None
    assert action_from_key("") is None


def test_keyboard_session():
    """Typing 2+(3+4)<Enter> on the keyboard gives 9."""
    engine = CalculatorEngine()
    for key in ["2", "+", "(", "3", "+", "4", ")", "Enter"]:
        engine.dispatch(action_from_key(key))
    assert engine.display == "9"
