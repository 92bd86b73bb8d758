"""
=============================================================================
MODULE NAME: engine.py
=============================================================================

INPUT FILES:
- None. Driven by `Action` events from `events.py`, the web adapter or the CLI.

OUTPUT FILES:
- None. State is observed through `CalculatorEngine.state()`.

VERSION HISTORY:
- v1.0 (2026-10-18): Left-to-right calculator state machine with grouping,
  memory and angle mode.

LAST UPDATED: 2026-10-18

NOTES:
- Strict left-to-right evaluation: one pending operator at a time, no
  precedence. `3 + 4 * 2 =` is 14.
- Parentheses save the outer pending operation on a stack, one frame per
  level. Several operators inside one group chain left-to-right; there is
  no expression tree.
- An "Error" entry (division by zero) is replaced by the next digit,
  constant, recall, backspace or clear. Everything else skips it.
=============================================================================
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Callable, Dict, Iterable, List, Optional, Union

from .calc_types import (
    DIGITS,
    Action,
    ActionKind,
    BinaryOperator,
    CalculatorState,
    Constant,
    GroupFrame,
    MemoryAction,
    PendingOperation,
    UnaryFunction,
)
from .config import CalculatorSettings
from .display import format_display, format_history, format_number, parse_number
from .operations import DivisionByZeroError, apply_binary, apply_unary, constant_value

logger = logging.getLogger(__name__)

ERROR_TEXT = "Error"


@dataclass(frozen=True, slots=True)
class Entry:
    """
    The operand on the display.

    ``value`` is the parsed number (None for the Error entry) and ``text``
    the exact characters shown, which keeps typing details such as a
    trailing decimal point. A typed entry is ``in_progress``; any other
    entry is committed and the next digit starts a new one.
    """

    text: str = "0"
    value: Optional[float] = 0.0
    in_progress: bool = False

    @classmethod
    def typed(cls, text: str) -> "Entry":
        return cls(text, float(text), True)

    @classmethod
    def from_value(cls, value: float) -> "Entry":
        return cls(format_number(value), value, False)

    @classmethod
    def error(cls) -> "Entry":
        return cls(ERROR_TEXT, None, False)

    @property
    def is_error(self) -> bool:
        return self.value is None

    def committed(self) -> "Entry":
        return replace(self, in_progress=False)


class CalculatorEngine:
    """
    Calculator state machine.

    State:
        - entry: Operand being typed or shown
        - pending: Left operand and operator awaiting a right operand
        - awaiting_next_value: Next digit starts a fresh entry
        - group_stack: Outer pending operations saved by "("
        - memory: Accumulator that survives clear()
        - angle_mode: Degrees or radians for sin/cos/tan
        - active_operator: Operator to highlight, if any
    """

    def __init__(
        self,
        settings: Optional[CalculatorSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or CalculatorSettings()
        self.rng = rng or random.Random()
        self._handlers: Dict[ActionKind, Callable[[Action], None]] = {
            ActionKind.DIGIT: lambda a: self.input_digit(a.payload),
            ActionKind.OPERATOR: lambda a: self.input_operator(a.payload),
            ActionKind.UNARY: lambda a: self.input_unary(a.payload),
            ActionKind.CONSTANT: lambda a: self.input_constant(a.payload),
            ActionKind.EVALUATE: lambda a: self.evaluate(),
            ActionKind.OPEN_GROUP: lambda a: self.open_group(),
            ActionKind.CLOSE_GROUP: lambda a: self.close_group(),
            ActionKind.CLEAR: lambda a: self.clear(),
            ActionKind.MEMORY: lambda a: self.memory_op(a.payload),
            ActionKind.TOGGLE_ANGLE: lambda a: self.toggle_angle_mode(),
            ActionKind.BACKSPACE: lambda a: self.backspace(),
        }
        self.reset()

    def reset(self) -> None:
        """Return to the state of a freshly constructed engine, memory included."""
        self.memory = 0.0
        self.angle_mode = self.settings.default_angle_mode
        self.clear()

    def clear(self) -> None:
        """
        Clear the entry, pending operation and parentheses (C key).

        Memory and angle mode are kept.
        """
        self.entry = Entry()
        self.pending: Optional[PendingOperation] = None
        self.awaiting_next_value = False
        self.group_stack: List[GroupFrame] = []
        self.active_operator: Optional[BinaryOperator] = None

    def input_digit(self, digit: str) -> None:
        """
        Add a digit or the decimal point to the entry.

        Args:
            digit: "0"-"9" or "."

        Raises:
            ValueError: For any other character
        """
        if digit not in DIGITS:
            raise ValueError(f"Not a digit or decimal point: {digit!r}")

        if self.awaiting_next_value or not self.entry.in_progress:
            self.entry = Entry.typed("0." if digit == "." else digit)
            self.awaiting_next_value = False
            self.active_operator = None
            return

        text = self.entry.text
        if text == "0" and digit != ".":
            self.entry = Entry.typed(digit)
        elif digit == "." and "." in text:
            return
        else:
            self.entry = Entry.typed(text + digit)

    def input_operator(self, op: Union[str, BinaryOperator]) -> None:
        """
        Set the pending operator, evaluating the previous one first.

        Args:
            op: One of '+', '-', '*', '/', 'power', 'yroot', 'ee'
        """
        op = BinaryOperator(op)
        if self.entry.is_error:
            return

        if self.pending is not None and not self.awaiting_next_value:
            self.evaluate()
            if self.entry.is_error:
                return

        self.pending = PendingOperation(self.entry.value, op, self.entry.text)
        self.entry = self.entry.committed()
        self.awaiting_next_value = True
        self.active_operator = op

    def evaluate(self) -> None:
        """Apply the pending operation to the entry (= key)."""
        if self.pending is None or self.entry.is_error:
            return

        pending = self.pending
        try:
            result = apply_binary(pending.operator, pending.operand, self.entry.value)
        except DivisionByZeroError:
            logger.info("Division by zero: %s / 0", format_number(pending.operand))
            self.entry = Entry.error()
        else:
            self.entry = Entry.from_value(result)

        self.pending = None
        self.awaiting_next_value = True
        self.active_operator = None

    def input_unary(self, fn: Union[str, UnaryFunction]) -> None:
        fn = UnaryFunction(fn)
        if self.entry.is_error:
            return
        result = apply_unary(fn, self.entry.value, self.angle_mode, self.rng)
        self.entry = Entry.from_value(result)
        self.awaiting_next_value = True

    def input_constant(self, name: Union[str, Constant]) -> None:
        self.entry = Entry.from_value(constant_value(Constant(name), self.rng))
        self.awaiting_next_value = True

    def open_group(self) -> None:
        """
        Open a parenthesis.

        The outer pending operation is saved and cleared. The entry stays on
        the display but the next digit replaces it.
        """
        if self.pending is None:
            self.group_stack.append(GroupFrame())
        else:
            self.group_stack.append(GroupFrame(
                self.pending.operand, self.pending.operator, self.pending.operand_text
            ))
        self.pending = None
        self.awaiting_next_value = False
        self.active_operator = None
        self.entry = self.entry.committed()

    def close_group(self) -> None:
        """
        Close a parenthesis.

        Collapses the inner expression, restores the saved outer operation and
        applies it to the inner result. No-op without an open parenthesis.
        """
        if not self.group_stack:
            return

        self.evaluate()
        inner = self.entry
        frame = self.group_stack.pop()
        if frame.operator is None or frame.operand is None:
            self.pending = None
        else:
            self.pending = PendingOperation(frame.operand, frame.operator, frame.operand_text)
        self.entry = inner
        self.evaluate()

    def memory_op(self, action: Union[str, MemoryAction]) -> None:
        action = MemoryAction(action)
        if action is MemoryAction.CLEAR:
            self.memory = 0.0
        elif action is MemoryAction.RECALL:
            self.entry = Entry.from_value(self.memory)
            self.awaiting_next_value = True
        elif self.entry.is_error:
            return
        elif action is MemoryAction.ADD:
            self.memory += self.entry.value
        else:
            self.memory -= self.entry.value

    def toggle_angle_mode(self) -> None:
        self.angle_mode = self.angle_mode.toggled()

    def backspace(self) -> None:
        """
        Delete the last character of the entry.

        Results are trimmed too ("14" becomes "1") but stay committed, so the
        next digit still starts a new entry. Text that no longer reads as a
        number ("-", "1e+", "Na") and the Error entry become "0".
        """
        if self.entry.is_error:
            self.entry = Entry()
            return

        text = self.entry.text[:-1]
        value = parse_number(text) if text else None
        if value is None:
            text, value = "0", 0.0
        self.entry = Entry(text, value, self.entry.in_progress)

    def dispatch(self, action: Action) -> CalculatorState:
        """
        Route a tagged action to its handler.

        Returns:
            State after the action

        Raises:
            ValueError: If the action kind or payload is not recognized
        """
        handler = self._handlers.get(action.kind)
        if handler is None:
            raise ValueError(f"Unknown action kind: {action.kind!r}")
        logger.debug("dispatch %s %s", action.kind.value, action.payload)
        handler(action)
        return self.state()

    def run(self, actions: Iterable[Action]) -> CalculatorState:
        state = self.state()
        for action in actions:
            state = self.dispatch(action)
        return state

    @property
    def display(self) -> str:
        return format_display(
            self.entry.text,
            max_length=self.settings.display_max_length,
            precision=self.settings.display_precision,
        )

    @property
    def history(self) -> str:
        if self.pending is None:
            return ""
        return format_history(
            self.pending.operand, self.pending.operator, self.pending.operand_text
        )

    def state(self) -> CalculatorState:
        return CalculatorState(
            display=self.display,
            entry=self.entry.text,
            history=self.history,
            active_operator=self.active_operator,
            angle_mode=self.angle_mode,
            memory=self.memory,
            memory_display=format_number(self.memory),
            error=self.entry.is_error,
            group_depth=len(self.group_stack),
            awaiting_next_value=self.awaiting_next_value,
        )
