"""
Translate raw UI events into engine actions.

Buttons are described by their data attributes (``num``, ``action``, ``op``);
keyboard events by the browser ``KeyboardEvent.key`` value.
"""

from __future__ import annotations

from typing import Mapping, Optional

from .calc_types import (
    DIGITS,
    Action,
    ActionKind,
    BinaryOperator,
    Constant,
    MemoryAction,
    UnaryFunction,
)

_SIMPLE_BUTTONS = {
    "clear": ActionKind.CLEAR,
    "calculate": ActionKind.EVALUATE,
    "rad": ActionKind.TOGGLE_ANGLE,
    "paren-left": ActionKind.OPEN_GROUP,
    "paren-right": ActionKind.CLOSE_GROUP,
    "backspace": ActionKind.BACKSPACE,
}

_SCIENTIFIC_OPERATORS = {
    BinaryOperator.POWER.value,
    BinaryOperator.YROOT.value,
    BinaryOperator.EE.value,
}

_CONSTANTS = {c.value for c in Constant}
_MEMORY = {m.value for m in MemoryAction}
# "rand" is a constant button, not a unary one
_UNARY = {u.value for u in UnaryFunction} - _CONSTANTS

_SIMPLE_KEYS = {
    "Enter": ActionKind.EVALUATE,
    "=": ActionKind.EVALUATE,
    "Backspace": ActionKind.BACKSPACE,
    "Escape": ActionKind.CLEAR,
    "c": ActionKind.CLEAR,
    "C": ActionKind.CLEAR,
    "(": ActionKind.OPEN_GROUP,
    ")": ActionKind.CLOSE_GROUP,
}

_KEY_OPERATORS = {"+", "-", "*", "/"}


def action_from_button(attrs: Mapping[str, Optional[str]]) -> Action:
    """
    Map a button's data attributes to an action.

    Args:
        attrs: e.g. {"num": "7"}, {"action": "operator", "op": "+"},
            {"action": "sin"}

    Returns:
        Action for the engine

    Raises:
        ValueError: If the button carries no known number or action
    """
    num = attrs.get("num")
    if num is not None:
        return Action.digit(str(num))

    tag = attrs.get("action")
    if not tag:
        raise ValueError("Button has neither 'num' nor 'action'")

    if tag == "decimal":
        return Action.digit(".")
    if tag == "operator":
        op = attrs.get("op")
        if op not in _KEY_OPERATORS:
            raise ValueError(f"Unknown operator: {op!r}")
        return Action.operator(op)
    if tag in _SIMPLE_BUTTONS:
        return Action.simple(_SIMPLE_BUTTONS[tag])
    if tag in _SCIENTIFIC_OPERATORS:
        return Action.operator(tag)
    if tag in _UNARY:
        return Action.unary(tag)
    if tag in _CONSTANTS:
        return Action.constant(tag)
    if tag in _MEMORY:
        return Action.memory(tag)
    raise ValueError(f"Unknown action: {tag}")


def action_from_key(key: str) -> Optional[Action]:
    """Map a keyboard key to an action; keys without a binding give None."""
    if len(key) == 1 and key in DIGITS:
        return Action.digit(key)
    if key in _KEY_OPERATORS:
        return Action.operator(key)
    kind = _SIMPLE_KEYS.get(key)
    if kind is not None:
        return Action.simple(kind)
    return None
