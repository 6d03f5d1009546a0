"""Calculator state machine: current entry, pending operand and pending operator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from unicalc.core.engine.formatting import (
    ERROR,
    format_for_display,
    number_to_text,
    parse_float,
    to_number,
)

logger = logging.getLogger(__name__)


class Operator(str, Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


EQUALS = "="
DIGITS = frozenset("0123456789.")

_OPERATORS = {op.value for op in Operator}


def evaluate(a: object, b: object, op: str) -> str:
    """Apply ``op`` to ``a`` and ``b`` and return the display text of the result.

    Division by zero returns the error token. An unknown operator returns ``b``.
    """
    a = to_number(a)
    b = to_number(b)
    if op == Operator.ADD:
        result = a + b
    elif op == Operator.SUBTRACT:
        result = a - b
    elif op == Operator.MULTIPLY:
        result = a * b
    elif op == Operator.DIVIDE:
        if b == 0:
            return ERROR
        result = a / b
    else:
        return number_to_text(b)
    return format_for_display(result)


@dataclass(frozen=True)
class CalculatorState:
    current_entry: str
    pending_operand: float | None
    pending_operator: Operator | None
    awaiting_new_entry: bool


class CalculatorEngine:
    """One calculator session.

    Every operation mutates the state in place and returns the new display
    text. None of them raise: invalid input is ignored and arithmetic
    failures show up as ``"Error"`` in the display.

    ``on_display_changed`` is called with the display text after each
    operation.
    """

    def __init__(self, on_display_changed: Optional[Callable[[str], None]] = None):
        self.on_display_changed = on_display_changed
        self.current_entry = "0"
        self.pending_operand: float | None = None
        self.pending_operator: Operator | None = None
        self.awaiting_new_entry = False

    @property
    def display(self) -> str:
        return self.current_entry

    @property
    def state(self) -> CalculatorState:
        return CalculatorState(
            current_entry=self.current_entry,
            pending_operand=self.pending_operand,
            pending_operator=self.pending_operator,
            awaiting_new_entry=self.awaiting_new_entry,
        )

    def _changed(self) -> str:
        if self.on_display_changed is not None:
            self.on_display_changed(self.current_entry)
        return self.current_entry

    # ── Entry ────────────────────────────────────────────────────────────

    def input_digit(self, d: str) -> str:
        if d not in DIGITS:
            logger.debug("Ignoring non-digit input %r", d)
            return self._changed()

        if self.awaiting_new_entry:
            self.current_entry = "0." if d == "." else d
            self.awaiting_new_entry = False
        elif d == "." and "." in self.current_entry:
            pass
        elif self.current_entry == "0" and d != ".":
            self.current_entry = d
        else:
            self.current_entry += d
        return self._changed()

    def backspace(self) -> str:
        entry = self.current_entry[:-1]
        self.current_entry = entry if entry else "0"
        return self._changed()

    # ── Operators ────────────────────────────────────────────────────────

    def apply_operator(self, op: str) -> str:
        if op != EQUALS and op not in _OPERATORS:
            logger.debug("Ignoring unknown operator %r", op)
            return self._changed()

        input_value = parse_float(self.current_entry)
        if self.pending_operator is not None and not self.awaiting_new_entry:
            result = evaluate(self.pending_operand, input_value, self.pending_operator)
            self.current_entry = result
            if result == ERROR:
                logger.debug(
                    "%s %s %s gave an error; dropping pending operand",
                    self.pending_operand, self.pending_operator.value, input_value,
                )
                self.pending_operand = None
            else:
                self.pending_operand = to_number(result)
        else:
            # Repeated operator presses re-anchor on the unchanged entry
            self.pending_operand = input_value

        self.awaiting_new_entry = True

        if op == EQUALS:
            self.pending_operator = None
            self.pending_operand = None
        else:
            self.pending_operator = Operator(op)
        return self._changed()

    def clear_all(self) -> str:
        self.current_entry = "0"
        self.pending_operand = None
        self.pending_operator = None
        self.awaiting_new_entry = False
        return self._changed()

    def toggle_sign(self) -> str:
        if self.current_entry != "0":
            self.current_entry = number_to_text(-parse_float(self.current_entry))
        return self._changed()

    def percent(self) -> str:
        self.current_entry = format_for_display(parse_float(self.current_entry) / 100)
        return self._changed()
