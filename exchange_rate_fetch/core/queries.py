"""Query helper objects shared across endpoints."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..models.shared import CalendarDate, CurrencyCode


@dataclass(frozen=True, slots=True)
class Query:
    """Parameters of a single request; every field is optional.

    ``amount`` is only sent when greater than one and ``time_frame`` holds a
    ``(start_date, end_date)`` pair. Validation happens when the query is
    encoded, not when it is built.
    """

    base: CurrencyCode = ""
    from_: CurrencyCode = ""
    to: CurrencyCode = ""
    amount: int = 0
    symbols: tuple[CurrencyCode, ...] = ()
    date: CalendarDate = ""
    time_frame: tuple[CalendarDate, CalendarDate] | None = None

    def __post_init__(self) -> None:
        # Lists are accepted for convenience but stored as tuples.
        if not isinstance(self.symbols, tuple):
            object.__setattr__(self, "symbols", tuple(self.symbols))
        if self.time_frame is not None and not isinstance(self.time_frame, tuple):
            object.__setattr__(self, "time_frame", tuple(self.time_frame))

    def without_date(self) -> Query:
        """Return a copy with ``date`` cleared (historical dates travel in the path)."""

        return replace(self, date="")
