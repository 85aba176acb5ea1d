"""Core utilities for exchange rate fetching."""

from __future__ import annotations

from importlib import import_module
from typing import Any

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

_lazy_targets = {
    "ExchangeClient": ("coordinator", "ExchangeClient"),
    "FetchPipeline": ("pipeline", "FetchPipeline"),
    "Query": ("queries", "Query"),
    "ResponseCache": ("cache", "ResponseCache"),
    "SharedContext": ("context", "SharedContext"),
    "default_context": ("context", "default_context"),
    "reset_default_context": ("context", "reset_default_context"),
    "encode_request": ("encoder", "encode_request"),
    "validate_code": ("validators", "validate_code"),
    "validate_date": ("validators", "validate_date"),
    "validate_symbols": ("validators", "validate_symbols"),
    "validate_time_frame": ("validators", "validate_time_frame"),
    "ExchangeRateError": ("errors", "ExchangeRateError"),
    "ValidationError": ("errors", "ValidationError"),
    "InvalidCodeError": ("errors", "InvalidCodeError"),
    "InvalidDateError": ("errors", "InvalidDateError"),
    "InvalidDateFormatError": ("errors", "InvalidDateFormatError"),
    "InvalidTimeFrameError": ("errors", "InvalidTimeFrameError"),
    "TimeframeExceededError": ("errors", "TimeframeExceededError"),
    "InvalidAPIResponseError": ("errors", "InvalidAPIResponseError"),
    "TransportError": ("errors", "TransportError"),
    "ResponseDecodeError": ("errors", "ResponseDecodeError"),
    "UnexpectedShapeError": ("errors", "UnexpectedShapeError"),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attr_name = _lazy_targets[name]
    except KeyError as exc:
        raise AttributeError(f"module 'exchange_rate_fetch.core' has no attribute {name!r}") from exc
    module = import_module(f"{__name__}.{module_name}")
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
