"""In-memory response cache with entries expiring at the next UTC midnight."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, time, timedelta, timezone
from typing import Any

log = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL = 300.0

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def next_utc_midnight(moment: datetime) -> datetime:
    """Return the first UTC midnight strictly after ``moment``."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    tomorrow = moment.date() + timedelta(days=1)
    return datetime.combine(tomorrow, time.min, tzinfo=timezone.utc)


@dataclass(slots=True)
class CacheEntry:
    payload: dict[str, Any]
    expires_at: datetime


class ResponseCache:
    """Thread-safe mapping of request URL to decoded payload.

    Rates are refreshed upstream once a day, so every entry expires at the
    UTC midnight following its insertion. Expired entries are ignored on read
    and evicted by a background sweeper thread every ``sweep_interval``
    seconds. Passing ``sweep_interval=None`` disables the sweeper.
    """

    def __init__(
        self,
        *,
        sweep_interval: float | None = DEFAULT_SWEEP_INTERVAL,
        clock: Clock = utc_now,
    ) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self._stop = threading.Event()
        self._sweeper: threading.Thread | None = None
        if sweep_interval is not None:
            if sweep_interval <= 0:
                raise ValueError("sweep_interval must be a positive number of seconds")
            self._sweeper = threading.Thread(
                target=self._run_sweeper,
                args=(sweep_interval,),
                name="exchange-rate-cache-sweeper",
                daemon=True,
            )
            self._sweeper.start()

    def get(self, key: str) -> dict[str, Any] | None:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or entry.expires_at <= now:
                return None
            return entry.payload

    def set(self, key: str, payload: dict[str, Any]) -> None:
        expires_at = next_utc_midnight(self._clock())
        with self._lock:
            self._entries[key] = CacheEntry(payload=payload, expires_at=expires_at)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def sweep(self) -> int:
        """Evict expired entries and return how many were removed."""

        now = self._clock()
        with self._lock:
            expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
            for key in expired:
                del self._entries[key]
        if expired:
            log.debug("Evicted %d expired cache entries", len(expired))
        return len(expired)

    def close(self) -> None:
        """Stop the sweeper thread; the cache stays usable afterwards."""

        self._stop.set()
        if self._sweeper is not None and self._sweeper is not threading.current_thread():
            self._sweeper.join()
        self._sweeper = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def _run_sweeper(self, interval: float) -> None:
        while not self._stop.wait(interval):
            self.sweep()
