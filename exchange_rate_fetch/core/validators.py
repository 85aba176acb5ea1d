"""Field-level validation of currency codes, dates and time frames."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from datetime import date, datetime

from .errors import (
    InvalidCodeError,
    InvalidDateError,
    InvalidDateFormatError,
    InvalidTimeFrameError,
    TimeframeExceededError,
)

CODE_LENGTH = 3
DATE_FORMAT = "%Y-%m-%d"
OLDEST_DATE = date(1999, 1, 4)
# Just under 365 days; a full 365-day span is rejected.
MAX_TIMEFRAME_HOURS = 8759.992992006

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_code(code: str) -> None:
    """Reject codes whose length is not exactly three characters."""

    if len(code) != CODE_LENGTH:
        raise InvalidCodeError(f"Invalid currency code: {code!r}")


def validate_symbols(symbols: Iterable[str]) -> None:
    for code in symbols:
        validate_code(code)


def parse_date(value: str) -> date:
    """Parse ``YYYY-MM-DD`` strictly (zero padded, real calendar date)."""

    if not _DATE_PATTERN.match(value):
        raise InvalidDateFormatError(f"Date format must be YYYY-MM-DD: parse {value!r}")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateFormatError(f"Date format must be YYYY-MM-DD: parse {value!r}: {exc}") from exc


def validate_date(value: str) -> None:
    """Check the format of ``value`` and that it is not older than 1999-01-04."""

    if parse_date(value) < OLDEST_DATE:
        raise InvalidDateError()


def validate_time_frame(time_frame: Sequence[str]) -> None:
    """Check ordering and span of a ``(start, end)`` pair of dates."""

    start_text, end_text = time_frame
    start = parse_date(start_text)
    end = parse_date(end_text)
    if end < start:
        raise InvalidTimeFrameError()
    if (end - start).total_seconds() / 3600 > MAX_TIMEFRAME_HOURS:
        raise TimeframeExceededError()
