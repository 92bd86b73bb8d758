"""
=============================================================================
MODULE NAME: calc_types.py
=============================================================================

INPUT FILES:
- None (enums and dataclasses only).

OUTPUT FILES:
- None written directly; `CalculatorState.to_dict` feeds JSON responses.

VERSION HISTORY:
- v1.0 (2026-10-18): Initial calculator value types and tagged actions.

LAST UPDATED: 2026-10-18

NOTES:
- Every engine event is an `Action` over the closed `ActionKind` set.
- Enum values double as the tags used by buttons and the web API.
=============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class BinaryOperator(str, Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "power"
    YROOT = "yroot"
    EE = "ee"


class UnaryFunction(str, Enum):
    NEGATE = "sign"
    PERCENT = "percent"
    SQUARE = "square"
    CUBE = "cube"
    EXP = "exp"
    TEN_POWER = "ten-power"
    RECIPROCAL = "inverse"
    SQRT = "sqrt"
    CBRT = "cbrt"
    LN = "ln"
    LOG10 = "log10"
    FACTORIAL = "factorial"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    RANDOM = "rand"


class Constant(str, Enum):
    PI = "pi"
    E = "e"
    RANDOM = "rand"


class MemoryAction(str, Enum):
    CLEAR = "memory-clear"
    ADD = "memory-add"
    SUBTRACT = "memory-sub"
    RECALL = "memory-recall"


class AngleMode(str, Enum):
    DEGREES = "deg"
    RADIANS = "rad"

    def toggled(self) -> "AngleMode":
        return AngleMode.RADIANS if self is AngleMode.DEGREES else AngleMode.DEGREES

    @property
    def toggle_label(self) -> str:
        """Text of the button that switches to the other mode."""
        return "Rad" if self is AngleMode.DEGREES else "Deg"


class ActionKind(str, Enum):
    DIGIT = "digit"
    OPERATOR = "operator"
    UNARY = "unary"
    CONSTANT = "constant"
    EVALUATE = "evaluate"
    OPEN_GROUP = "open-group"
    CLOSE_GROUP = "close-group"
    CLEAR = "clear"
    MEMORY = "memory"
    TOGGLE_ANGLE = "toggle-angle"
    BACKSPACE = "backspace"


Payload = Union[str, BinaryOperator, UnaryFunction, Constant, MemoryAction, None]

DIGITS = frozenset("0123456789.")


@dataclass(frozen=True, slots=True)
class Action:
    """A single user event, tagged by kind and carrying its payload."""

    kind: ActionKind
    payload: Payload = None

    @classmethod
    def digit(cls, d: str) -> "Action":
        if d not in DIGITS:
            raise ValueError(f"Not a digit or decimal point: {d!r}")
        return cls(ActionKind.DIGIT, d)

    @classmethod
    def operator(cls, op: Union[str, BinaryOperator]) -> "Action":
        return cls(ActionKind.OPERATOR, BinaryOperator(op))

    @classmethod
    def unary(cls, fn: Union[str, UnaryFunction]) -> "Action":
        return cls(ActionKind.UNARY, UnaryFunction(fn))

    @classmethod
    def constant(cls, name: Union[str, Constant]) -> "Action":
        return cls(ActionKind.CONSTANT, Constant(name))

    @classmethod
    def memory(cls, action: Union[str, MemoryAction]) -> "Action":
        return cls(ActionKind.MEMORY, MemoryAction(action))

    @classmethod
    def simple(cls, kind: ActionKind) -> "Action":
        return cls(kind)


@dataclass(frozen=True, slots=True)
class PendingOperation:
    """
    Left-hand operand and operator awaiting a right-hand operand.

    ``operand_text`` keeps the operand as it was typed ("3.") for the
    history line.
    """

    operand: float
    operator: BinaryOperator
    operand_text: Optional[str] = None


@dataclass(frozen=True, slots=True)
class GroupFrame:
    """Outer pending operation saved when a parenthesis is opened."""

    operand: Optional[float] = None
    operator: Optional[BinaryOperator] = None
    operand_text: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CalculatorState:
    """Everything a presentation layer needs after each event."""

    display: str
    entry: str
    history: str
    active_operator: Optional[BinaryOperator]
    angle_mode: AngleMode
    memory: float
    memory_display: str
    error: bool
    group_depth: int
    awaiting_next_value: bool

    @property
    def angle_label(self) -> str:
        return self.angle_mode.toggle_label

    def to_dict(self) -> Dict:
        return {
            "display": self.display,
            "entry": self.entry,
            "history": self.history,
            "active_operator": self.active_operator.value if self.active_operator else None,
            "angle_mode": self.angle_mode.value,
            "angle_label": self.angle_label,
            "memory": self.memory_display,
            "error": self.error,
            "group_depth": self.group_depth,
            "awaiting_next_value": self.awaiting_next_value,
        }


__all__ = [
    "Action",
    "ActionKind",
    "AngleMode",
    "BinaryOperator",
    "CalculatorState",
    "Constant",
    "GroupFrame",
    "MemoryAction",
    "PendingOperation",
    "UnaryFunction",
]
