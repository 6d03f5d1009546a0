"""Reads button presses and keyboard keys into calculator key tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

from unicalc.core.engine.calculator import DIGITS, EQUALS, CalculatorEngine, Operator


class KeyType(Enum):
    DIGIT = auto()      # 0-9 or .
    OPERATOR = auto()   # + - * /
    EQUALS = auto()
    CLEAR = auto()
    NEGATE = auto()
    PERCENT = auto()
    BACKSPACE = auto()  # keyboard only


@dataclass(frozen=True)
class KeyToken:
    type: KeyType
    value: str = ""


BUTTON_ACTIONS = {
    "clear": KeyType.CLEAR,
    "neg": KeyType.NEGATE,
    "percent": KeyType.PERCENT,
    EQUALS: KeyType.EQUALS,
}

KEYBOARD_ACTIONS = {
    "Enter": KeyType.EQUALS,
    EQUALS: KeyType.EQUALS,
    "Backspace": KeyType.BACKSPACE,
    "Escape": KeyType.CLEAR,
    "%": KeyType.PERCENT,
}

_OPERATOR_KEYS = {op.value for op in Operator}


class KeypadError(ValueError):
    def __init__(self, message: str, key: str | None):
        self.key = key
        super().__init__(message)


def read_button(value: str | None = None, action: str | None = None) -> KeyToken:
    """Read a calculator button: either a digit ``value`` or a named ``action``."""
    if value is not None:
        if value not in DIGITS:
            raise KeypadError(f"Unknown digit button '{value}'", value)
        return KeyToken(KeyType.DIGIT, value)

    if action is None:
        raise KeypadError("Button has neither a value nor an action", None)
    if action in _OPERATOR_KEYS:
        return KeyToken(KeyType.OPERATOR, action)
    if action in BUTTON_ACTIONS:
        return KeyToken(BUTTON_ACTIONS[action], action)
    raise KeypadError(f"Unknown button action '{action}'", action)


def read_key(key: str) -> KeyToken | None:
    """Read a keyboard key name. Keys the calculator does not use return None."""
    if key in DIGITS:
        return KeyToken(KeyType.DIGIT, key)
    if key in _OPERATOR_KEYS:
        return KeyToken(KeyType.OPERATOR, key)
    if key in KEYBOARD_ACTIONS:
        return KeyToken(KEYBOARD_ACTIONS[key], key)
    return None


def tokenize_keys(keys: Iterable[str]) -> list[KeyToken]:
    """Convert a sequence of keyboard keys into tokens, dropping unused keys."""
    tokens: list[KeyToken] = []
    for key in keys:
        tok = read_key(key)
        if tok is not None:
            tokens.append(tok)
    return tokens


def dispatch(engine: CalculatorEngine, token: KeyToken) -> str:
    """Apply one token to the engine and return the new display text."""
    if token.type == KeyType.DIGIT:
        return engine.input_digit(token.value)
    elif token.type == KeyType.OPERATOR:
        return engine.apply_operator(token.value)
    elif token.type == KeyType.EQUALS:
        return engine.apply_operator(EQUALS)
    elif token.type == KeyType.CLEAR:
        return engine.clear_all()
    elif token.type == KeyType.NEGATE:
        return engine.toggle_sign()
    elif token.type == KeyType.PERCENT:
        return engine.percent()
    elif token.type == KeyType.BACKSPACE:
        return engine.backspace()
    raise KeypadError(f"Unhandled key type {token.type}", token.value)
