"""Domain models for exchange rate fetching."""

from .rates import CurrencyTable, NestedRates, Rates
from .shared import CalendarDate, CurrencyCode, Endpoint

__all__ = [
    "CalendarDate",
    "CurrencyCode",
    "CurrencyTable",
    "Endpoint",
    "NestedRates",
    "Rates",
]
