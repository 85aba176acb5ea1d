"""Shared domain models used across endpoints."""

from __future__ import annotations

from enum import StrEnum
from typing import TypeAlias

# Three-character currency or cryptocurrency code (``EUR``, ``BTC``).
CurrencyCode: TypeAlias = str

# ``YYYY-MM-DD`` text, never earlier than 1999-01-04.
CalendarDate: TypeAlias = str


class Endpoint(StrEnum):
    """Paths served by exchangerate.host.

    Historical rates have no fixed path; the requested date is the path.
    """

    SYMBOLS = "/symbols"
    CRYPTOCURRENCIES = "/cryptocurrencies"
    LATEST = "/latest"
    CONVERT = "/convert"
    TIMESERIES = "/timeseries"
    FLUCTUATION = "/fluctuation"
