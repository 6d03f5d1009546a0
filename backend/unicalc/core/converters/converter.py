"""Converter front door: category registry and result text for each conversion."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Optional

from unicalc.core.converters.currency import (
    RATES_TO_USD,
    BabelCurrencyFormatter,
    convert_currency,
)
from unicalc.core.engine.formatting import ERROR, format_for_display, to_number
from unicalc.utils.units import (
    DISTANCE_TO_M,
    TEMPERATURE_UNITS,
    VOLUME_TO_ML,
    WEIGHT_TO_G,
    from_celsius,
    from_grams,
    from_meters,
    from_milliliters,
    to_celsius,
    to_grams,
    to_meters,
    to_milliliters,
)

EMPTY_RESULT = "Result: —"

TEMPERATURE_SUFFIXES = {"C": "°C", "F": "°F", "K": "K"}


class Category(str, Enum):
    TEMPERATURE = "temperature"
    DISTANCE = "distance"
    WEIGHT = "weight"
    VOLUME = "volume"
    CURRENCY = "currency"


_PAIRS = {
    Category.TEMPERATURE: (to_celsius, from_celsius),
    Category.DISTANCE: (to_meters, from_meters),
    Category.WEIGHT: (to_grams, from_grams),
    Category.VOLUME: (to_milliliters, from_milliliters),
}


@dataclass(frozen=True)
class ConversionResult:
    category: Category
    from_unit: str
    to_unit: str
    value: float | None  # None for blank input or an error
    text: str
    display: str

    @property
    def ok(self) -> bool:
        return self.value is not None


def list_units(
    category: Category | str,
    rates: Optional[Mapping[str, float]] = None,
) -> list[str]:
    """Supported unit codes for a category, in display order."""
    category = Category(category)
    if category == Category.TEMPERATURE:
        return list(TEMPERATURE_UNITS)
    if category == Category.DISTANCE:
        return list(DISTANCE_TO_M)
    if category == Category.WEIGHT:
        return list(WEIGHT_TO_G)
    if category == Category.VOLUME:
        return list(VOLUME_TO_ML)
    return list(RATES_TO_USD if rates is None else rates)


def convert(
    category: Category | str,
    raw: object,
    from_unit: str,
    to_unit: str,
    *,
    rates: Optional[Mapping[str, float]] = None,
    formatter: Optional[Callable[[float, str], str]] = None,
) -> ConversionResult:
    """Convert the raw input text ``raw`` between two units of a category.

    Blank input produces the empty result. Any non-finite outcome, including
    unknown unit codes, produces ``Result: Error``.
    """
    category = Category(category)

    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return ConversionResult(category, from_unit, to_unit, None, "", EMPTY_RESULT)

    amount = to_number(raw)
    if category == Category.CURRENCY:
        out = convert_currency(amount, from_unit, to_unit, rates)
    elif category == Category.TEMPERATURE and from_unit == to_unit and from_unit in TEMPERATURE_UNITS:
        out = amount
    else:
        to_base, from_base = _PAIRS[category]
        out = from_base(to_base(amount, from_unit), to_unit)

    if not math.isfinite(out):
        return ConversionResult(category, from_unit, to_unit, None, ERROR, f"Result: {ERROR}")

    text = format_for_display(out)
    if category == Category.CURRENCY:
        fmt = formatter if formatter is not None else BabelCurrencyFormatter()
        label = fmt(out, to_unit)
    elif category == Category.TEMPERATURE:
        label = f"{text} {TEMPERATURE_SUFFIXES[to_unit]}"
    else:
        label = f"{text} {to_unit}"
    return ConversionResult(category, from_unit, to_unit, out, text, f"Result: {label}")


def swap_currency(
    raw: object,
    from_code: str,
    to_code: str,
    *,
    rates: Optional[Mapping[str, float]] = None,
    formatter: Optional[Callable[[float, str], str]] = None,
) -> ConversionResult:
    """Exchange the two currencies and convert again."""
    return convert(Category.CURRENCY, raw, to_code, from_code, rates=rates, formatter=formatter)
