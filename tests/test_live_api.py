from __future__ import annotations

from decimal import Decimal

import pytest

from exchange_rate_fetch.config import Settings
from exchange_rate_fetch.core.cache import ResponseCache
from exchange_rate_fetch.core.context import SharedContext
from exchange_rate_fetch.core.coordinator import ExchangeClient
from exchange_rate_fetch.core.errors import InvalidAPIResponseError, TransportError

_settings = Settings()

pytestmark = [
    pytest.mark.network,
    pytest.mark.integration,
    pytest.mark.skipif(not _settings.access_key, reason="EXCHANGERATE_ACCESS_KEY is not set"),
]


@pytest.fixture(scope="module")
def client():
    context = SharedContext(cache=ResponseCache(sweep_interval=None), settings=_settings)
    yield ExchangeClient("USD", context=context)
    context.close()


def _call_or_skip(fn):
    try:
        return fn()
    except (TransportError, InvalidAPIResponseError) as exc:  # pragma: no cover - depends on live API
        pytest.skip(f"exchangerate.host unavailable: {exc}")


def test_forex_codes_live(client):
    codes = _call_or_skip(client.forex_codes)

    assert "EUR" in codes
    assert codes == sorted(codes)


def test_latest_rates_single_live(client):
    rate = _call_or_skip(lambda: client.latest_rates_single("EUR"))

    assert isinstance(rate, Decimal)
    assert rate > 0


def test_historical_rates_live(client):
    rates = _call_or_skip(lambda: client.historical_rates_multiple("2020-04-01", ["EUR", "GBP"]))

    assert all(isinstance(value, Decimal) for value in rates.values())
