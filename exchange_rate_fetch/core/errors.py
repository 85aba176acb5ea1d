"""Custom exception hierarchy for exchange rate fetching."""

from __future__ import annotations


class ExchangeRateError(RuntimeError):
    """Base class for all domain-specific exceptions."""


class ValidationError(ExchangeRateError, ValueError):
    """Raised before any network call when a query parameter is rejected."""


class InvalidCodeError(ValidationError):
    """Raised when a currency code is not exactly three characters long."""

    def __init__(self, message: str = "Invalid currency code") -> None:
        super().__init__(message)


class InvalidDateFormatError(ValidationError):
    """Raised when a date is not formatted as ``YYYY-MM-DD``."""

    def __init__(self, message: str = "Date format must be YYYY-MM-DD") -> None:
        super().__init__(message)


class InvalidDateError(ValidationError):
    """Raised when a date precedes the oldest available historical date."""

    def __init__(self, message: str = "Oldest possible date is 1999-01-04") -> None:
        super().__init__(message)


class InvalidTimeFrameError(ValidationError):
    """Raised when the end of a time frame precedes its start."""

    def __init__(self, message: str = "From date must be older than To date") -> None:
        super().__init__(message)


class TimeframeExceededError(ValidationError):
    """Raised when a time frame spans more than the allowed maximum."""

    def __init__(self, message: str = "Maximum allowed timeframe is 365 days") -> None:
        super().__init__(message)


class InvalidAPIResponseError(ExchangeRateError):
    """Raised when the upstream service answers with ``success: false``."""


class TransportError(ExchangeRateError):
    """Represents network failures raised by the HTTP session."""


class ResponseDecodeError(ExchangeRateError):
    """Raised when the response body is not valid JSON."""


class UnexpectedShapeError(ExchangeRateError):
    """Raised when a decoded payload lacks an expected key or has the wrong type."""
