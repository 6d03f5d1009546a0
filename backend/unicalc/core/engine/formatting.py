"""Number parsing and the display formatting policy shared by the calculator and converters."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal

ERROR = "Error"

MAX_DISPLAY_LENGTH = 12
SIGNIFICANT_DIGITS = 12

# Ties round away from zero, like Number#toPrecision
_DISPLAY_CONTEXT = Context(prec=SIGNIFICANT_DIGITS, rounding=ROUND_HALF_UP)

# Whole-string numeric literal, as accepted by Number("...")
_NUMBER_RE = re.compile(
    r"^[+-]?(?:Infinity|[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?|\.[0-9]+(?:[eE][+-]?[0-9]+)?)$"
)
# Leading numeric prefix, as accepted by parseFloat("...")
_PREFIX_RE = re.compile(
    r"^\s*([+-]?(?:Infinity|[0-9]+\.?[0-9]*(?:[eE][+-]?[0-9]+)?|\.[0-9]+(?:[eE][+-]?[0-9]+)?))"
)


def _literal_to_float(literal: str) -> float:
    return float(literal.replace("Infinity", "inf"))


def to_number(value: object) -> float:
    """Coerce a value to float. None and blank text are 0; unparseable text is NaN."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not text:
        return 0.0
    if _NUMBER_RE.match(text):
        return _literal_to_float(text)
    return math.nan


def parse_float(text: str) -> float:
    """Parse the leading number in ``text``; NaN when there is none."""
    m = _PREFIX_RE.match(text)
    if not m:
        return math.nan
    return _literal_to_float(m.group(1))


def number_to_text(n: float) -> str:
    """Shortest round-trip decimal text for ``n``.

    Integral values print without a fractional part, decimal exponents in
    [-6, 21) print in plain notation and anything else as ``1.5e+21`` /
    ``1e-7``. Non-finite values print as the error token.
    """
    if not math.isfinite(n):
        return ERROR
    if n == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(float(n))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    point = exponent + k  # position of the decimal point relative to the digits
    if k <= point <= 21:
        text = digits + "0" * (point - k)
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        e = point - 1
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return f"-{text}" if sign else text


def format_for_display(value: object) -> str:
    """Render a result for the display.

    Text passes through untouched. Non-finite numbers become ``"Error"``.
    Text longer than the display width is re-rendered from the value
    rounded to 12 significant digits.
    """
    if isinstance(value, str):
        return value
    n = float(value)
    if not math.isfinite(n):
        return ERROR
    text = number_to_text(n)
    if len(text) > MAX_DISPLAY_LENGTH:
        text = number_to_text(float(_DISPLAY_CONTEXT.plus(Decimal(n))))
    return text
