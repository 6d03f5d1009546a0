"""Unit conversion function pairs. Each category routes through one canonical unit.

Unknown unit codes give NaN rather than raising.
"""

import math

DISTANCE_TO_M = {
    "m": 1.0,
    "km": 1000.0,
    "mi": 1609.344,
    "yd": 0.9144,
    "ft": 0.3048,
    "in": 0.0254,
}

WEIGHT_TO_G = {
    "g": 1.0,
    "kg": 1000.0,
    "lb": 453.59237,
    "oz": 28.349523125,
    "t": 1_000_000.0,  # metric tonne
}

# US customary volumes
VOLUME_TO_ML = {
    "ml": 1.0,
    "l": 1000.0,
    "floz": 29.5735295625,
    "cup": 240.0,
    "pt": 473.176473,
    "qt": 946.352946,
    "gal": 3785.411784,
}

TEMPERATURE_UNITS = ("C", "F", "K")


def _to_base(value: float, unit: str, table: dict[str, float]) -> float:
    factor = table.get(unit)
    if factor is None:
        return math.nan
    return float(value) * factor


def _from_base(value: float, unit: str, table: dict[str, float]) -> float:
    factor = table.get(unit)
    if factor is None:
        return math.nan
    return float(value) / factor


def to_meters(value: float, unit: str) -> float:
    """Convert a distance in the given unit to meters."""
    return _to_base(value, unit, DISTANCE_TO_M)


def from_meters(meters: float, unit: str) -> float:
    """Convert meters to the given distance unit."""
    return _from_base(meters, unit, DISTANCE_TO_M)


def to_grams(value: float, unit: str) -> float:
    return _to_base(value, unit, WEIGHT_TO_G)


def from_grams(grams: float, unit: str) -> float:
    return _from_base(grams, unit, WEIGHT_TO_G)


def to_milliliters(value: float, unit: str) -> float:
    return _to_base(value, unit, VOLUME_TO_ML)


def from_milliliters(ml: float, unit: str) -> float:
    return _from_base(ml, unit, VOLUME_TO_ML)


def to_celsius(value: float, unit: str) -> float:
    """Convert a temperature in C, F or K to Celsius."""
    v = float(value)
    if unit == "C":
        return v
    if unit == "F":
        return (v - 32) * 5 / 9
    if unit == "K":
        return v - 273.15
    return math.nan


def from_celsius(celsius: float, unit: str) -> float:
    """Convert Celsius to C, F or K."""
    c = float(celsius)
    if unit == "C":
        return c
    if unit == "F":
        return c * 9 / 5 + 32
    if unit == "K":
        return c + 273.15
    return math.nan
