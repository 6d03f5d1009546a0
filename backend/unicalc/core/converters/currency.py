"""Currency conversion over a static rate table, plus result formatters."""

from __future__ import annotations

import logging
import math
from typing import Mapping, Optional

from babel.core import UnknownLocaleError
from babel.numbers import format_currency

from unicalc.core.engine.formatting import format_for_display

logger = logging.getLogger(__name__)

# 1 unit of currency = X USD (approximate sample values, not live)
RATES_TO_USD: dict[str, float] = {
    "USD": 1.0,
    "EUR": 1.08,
    "GBP": 1.25,
    "JPY": 0.0068,
    "INR": 0.012,
    "OMR": 2.597,
    "AUD": 0.65,
    "SAR": 0.266667,
    "CAD": 0.74,
    "CNY": 0.14,
}


def convert_currency(
    amount: float,
    from_code: str,
    to_code: str,
    rates: Optional[Mapping[str, float]] = None,
) -> float:
    """Convert ``amount`` via the reference currency. Unknown codes give NaN."""
    table = RATES_TO_USD if rates is None else rates
    from_rate = table.get(from_code)
    to_rate = table.get(to_code)
    if not from_rate or not to_rate:
        logger.debug("No rate for %s -> %s", from_code, to_code)
        return math.nan
    return float(amount) * from_rate / to_rate


class PlainCurrencyFormatter:
    """Renders ``<number> <code>``."""

    def __call__(self, amount: float, code: str) -> str:
        return f"{format_for_display(amount)} {code}"


class BabelCurrencyFormatter(PlainCurrencyFormatter):
    """Locale-aware currency text; falls back to the plain form when Babel cannot format it."""

    def __init__(self, locale: str = "en_US") -> None:
        self.locale = locale

    def __call__(self, amount: float, code: str) -> str:
        try:
            return format_currency(amount, code, locale=self.locale)
        except (UnknownLocaleError, ValueError) as exc:
            logger.debug("Babel could not format %s in %s: %s", code, self.locale, exc)
            return super().__call__(amount, code)
