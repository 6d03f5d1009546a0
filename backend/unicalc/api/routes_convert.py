"""Converter endpoints: stateless unit and currency conversion."""

from fastapi import APIRouter

from unicalc.config import settings
from unicalc.core.converters.converter import (
    Category,
    ConversionResult,
    convert,
    list_units,
    swap_currency,
)
from unicalc.core.converters.currency import BabelCurrencyFormatter
from unicalc.models.schemas import ConvertRequest, ConvertResponse

router = APIRouter(tags=["convert"])


def _to_response(result: ConversionResult) -> dict:
    return {
        "category": result.category.value,
        "from_unit": result.from_unit,
        "to_unit": result.to_unit,
        "value": result.value,
        "text": result.text,
        "display": result.display,
    }


@router.get("/convert/units")
async def units():
    """Supported unit codes per category."""
    return {c.value: list_units(c, settings.currency_rates) for c in Category}


@router.post("/convert/currency/swap", response_model=ConvertResponse)
async def swap(req: ConvertRequest):
    """Exchange from/to currencies and convert again."""
    result = swap_currency(
        req.value,
        req.from_unit,
        req.to_unit,
        rates=settings.currency_rates,
        formatter=BabelCurrencyFormatter(settings.currency_locale),
    )
    return _to_response(result)


@router.post("/convert/{category}", response_model=ConvertResponse)
async def convert_value(category: Category, req: ConvertRequest):
    """Convert a value between two units of one category."""
    result = convert(
        category,
        req.value,
        req.from_unit,
        req.to_unit,
        rates=settings.currency_rates,
        formatter=BabelCurrencyFormatter(settings.currency_locale),
    )
    return _to_response(result)
