from __future__ import annotations

import time

import pytest

from exchange_rate_fetch.core.cache import ResponseCache, next_utc_midnight
from tests.stubs import FrozenClock, utc


def test_next_utc_midnight():
    assert next_utc_midnight(utc(2024, 3, 10, 23, 59)) == utc(2024, 3, 11)
    assert next_utc_midnight(utc(2024, 3, 10, 0, 0)) == utc(2024, 3, 11)
    assert next_utc_midnight(utc(2024, 12, 31, 12)) == utc(2025, 1, 1)


def test_get_returns_stored_payload_until_midnight():
    clock = FrozenClock(utc(2024, 3, 10, 23, 0))
    cache = ResponseCache(sweep_interval=None, clock=clock)
    cache.set("k", {"success": True})

    assert cache.get("k") == {"success": True}
    clock.advance(minutes=59, seconds=59)
    assert cache.get("k") == {"success": True}
    clock.advance(seconds=1)
    assert cache.get("k") is None


def test_each_entry_expires_at_its_own_midnight():
    clock = FrozenClock(utc(2024, 3, 10, 23, 59))
    cache = ResponseCache(sweep_interval=None, clock=clock)
    cache.set("late", {"n": 1})
    clock.advance(minutes=2)
    cache.set("early", {"n": 2})

    assert cache.get("late") is None
    clock.advance(hours=23)
    assert cache.get("early") == {"n": 2}
    clock.advance(hours=1)
    assert cache.get("early") is None


def test_sweep_removes_only_expired_entries():
    clock = FrozenClock(utc(2024, 3, 10, 12))
    cache = ResponseCache(sweep_interval=None, clock=clock)
    cache.set("old", {})
    clock.advance(days=1)
    cache.set("new", {})

    assert len(cache) == 2
    assert cache.sweep() == 1
    assert len(cache) == 1
    assert "new" in cache
    assert "old" not in cache


def test_delete_and_clear():
    cache = ResponseCache(sweep_interval=None)
    cache.set("a", {})
    cache.set("b", {})
    cache.delete("a")
    cache.delete("missing")
    assert len(cache) == 1
    cache.clear()
    assert len(cache) == 0


def test_background_sweeper_evicts_expired_entries():
    clock = FrozenClock(utc(2024, 3, 10, 12))
    cache = ResponseCache(sweep_interval=0.01, clock=clock)
    try:
        cache.set("k", {})
        clock.advance(days=1)
        deadline = time.monotonic() + 2
        while len(cache) and time.monotonic() < deadline:
            time.sleep(0.01)
        assert len(cache) == 0
    finally:
        cache.close()


def test_rejects_non_positive_sweep_interval():
    with pytest.raises(ValueError):
        ResponseCache(sweep_interval=0)
