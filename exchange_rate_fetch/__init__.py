"""Client library for the exchangerate.host currency exchange rate API.

This module exposes the public API: the client, the query model, the shared
context and cache, validation helpers, and the exception hierarchy.
"""

import logging

from .core.cache import ResponseCache
from .core.context import SharedContext, default_context, reset_default_context
from .core.coordinator import ExchangeClient
from .core.encoder import encode_request
from .core.errors import (
    ExchangeRateError,
    InvalidAPIResponseError,
    InvalidCodeError,
    InvalidDateError,
    InvalidDateFormatError,
    InvalidTimeFrameError,
    ResponseDecodeError,
    TimeframeExceededError,
    TransportError,
    UnexpectedShapeError,
    ValidationError,
)
from .core.pipeline import FetchPipeline
from .core.queries import Query
from .core.validators import validate_code, validate_date, validate_symbols, validate_time_frame
from .models.rates import CurrencyTable, NestedRates, Rates
from .models.shared import Endpoint

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ExchangeClient",
    "FetchPipeline",
    "Query",
    "ResponseCache",
    "SharedContext",
    "default_context",
    "reset_default_context",
    "encode_request",
    "validate_code",
    "validate_date",
    "validate_symbols",
    "validate_time_frame",
    "CurrencyTable",
    "Endpoint",
    "NestedRates",
    "Rates",
    "ExchangeRateError",
    "ValidationError",
    "InvalidCodeError",
    "InvalidDateError",
    "InvalidDateFormatError",
    "InvalidTimeFrameError",
    "TimeframeExceededError",
    "InvalidAPIResponseError",
    "TransportError",
    "ResponseDecodeError",
    "UnexpectedShapeError",
]
