"""exchangerate.host endpoint adapters.

Each method issues one request through :class:`FetchPipeline` and reshapes the
generic JSON object into typed results. Expected keys are checked explicitly;
a missing or mistyped key raises :class:`UnexpectedShapeError`.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from ...core.errors import UnexpectedShapeError
from ...core.pipeline import FetchPipeline
from ...core.queries import Query
from ...core.validators import validate_date
from ...models.rates import CurrencyTable, NestedRates, Rates
from ...models.shared import Endpoint


class ExchangeRateHostAPI:
    """Thin typed layer over the raw exchangerate.host endpoints."""

    def __init__(self, pipeline: FetchPipeline) -> None:
        self._pipeline = pipeline

    # ------------------------------------------------------------------
    # Reference data
    def symbols(self, *, use_cache: bool = True) -> CurrencyTable:
        payload = self._fetch(Endpoint.SYMBOLS, Query(), use_cache)
        return _parse_currency_table(payload, "symbols")

    def cryptocurrencies(self, *, use_cache: bool = True) -> CurrencyTable:
        payload = self._fetch(Endpoint.CRYPTOCURRENCIES, Query(), use_cache)
        return _parse_currency_table(payload, "cryptocurrencies")

    # ------------------------------------------------------------------
    # Rates
    def latest(self, query: Query, *, use_cache: bool = True) -> Rates:
        payload = self._fetch(Endpoint.LATEST, query, use_cache)
        return _parse_rates(payload)

    def convert(self, query: Query, *, use_cache: bool = True) -> Decimal:
        payload = self._fetch(Endpoint.CONVERT, query, use_cache)
        return _to_decimal(_require(payload, "result"), "result")

    def historical(self, query: Query, *, use_cache: bool = True) -> Rates:
        """Return rates at ``query.date``; the date is sent as the URL path."""

        validate_date(query.date)
        url = f"{self._pipeline.context.base_url}/{query.date}"
        payload = self._pipeline.fetch(url, query.without_date(), use_cache=use_cache)
        return _parse_rates(payload)

    def timeseries(self, query: Query, *, use_cache: bool = True) -> NestedRates:
        payload = self._fetch(Endpoint.TIMESERIES, query, use_cache)
        return _parse_nested_rates(payload)

    def fluctuation(self, query: Query, *, use_cache: bool = True) -> NestedRates:
        payload = self._fetch(Endpoint.FLUCTUATION, query, use_cache)
        return _parse_nested_rates(payload)

    # ------------------------------------------------------------------
    # Internal helpers
    def _fetch(self, endpoint: Endpoint, query: Query, use_cache: bool) -> dict[str, Any]:
        url = f"{self._pipeline.context.base_url}{endpoint.value}"
        return self._pipeline.fetch(url, query, use_cache=use_cache)


def _require(payload: Mapping[str, Any], key: str) -> Any:
    try:
        return payload[key]
    except KeyError as exc:
        raise UnexpectedShapeError(f"Response is missing the {key!r} field") from exc


def _require_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise UnexpectedShapeError(f"Expected an object at {where}, got {type(value).__name__}")
    return value


def _to_decimal(value: Any, where: str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # bool is an int subclass and never a valid rate
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(str(value))
    raise UnexpectedShapeError(f"Expected a number at {where}, got {type(value).__name__}")


def _parse_rates(payload: Mapping[str, Any]) -> Rates:
    rates = _require_mapping(_require(payload, "rates"), "rates")
    return {symbol: _to_decimal(value, f"rates.{symbol}") for symbol, value in rates.items()}


def _parse_nested_rates(payload: Mapping[str, Any]) -> NestedRates:
    rates = _require_mapping(_require(payload, "rates"), "rates")
    result: NestedRates = {}
    for outer, inner in rates.items():
        values = _require_mapping(inner, f"rates.{outer}")
        result[outer] = {
            key: _to_decimal(value, f"rates.{outer}.{key}") for key, value in values.items()
        }
    return result


def _parse_currency_table(payload: Mapping[str, Any], key: str) -> CurrencyTable:
    entries = _require_mapping(_require(payload, key), key)
    table: CurrencyTable = {}
    for code, data in entries.items():
        fields = _require_mapping(data, f"{key}.{code}")
        row: dict[str, str] = {}
        for name, value in fields.items():
            if not isinstance(value, str):
                raise UnexpectedShapeError(
                    f"Expected a string at {key}.{code}.{name}, got {type(value).__name__}"
                )
            row[name] = value
        table[code] = row
    return table
