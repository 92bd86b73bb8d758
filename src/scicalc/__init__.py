"""Scientific calculator state machine with a Flask front-end."""

from .calc_types import (
    Action,
    ActionKind,
    AngleMode,
    BinaryOperator,
    CalculatorState,
    Constant,
    MemoryAction,
    UnaryFunction,
)
from .config import CalculatorSettings
from .engine import CalculatorEngine
from .events import action_from_button, action_from_key

__all__ = [
    "Action",
    "ActionKind",
    "AngleMode",
    "BinaryOperator",
    "CalculatorEngine",
    "CalculatorSettings",
    "CalculatorState",
    "Constant",
    "MemoryAction",
    "UnaryFunction",
    "action_from_button",
    "action_from_key",
]
