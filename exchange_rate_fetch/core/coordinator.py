"""High-level client exposing the exchangerate.host endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from ..config import get_settings
from ..models.rates import CurrencyTable, NestedRates, Rates
from ..providers.exchangerate_host.api import ExchangeRateHostAPI
from .context import SharedContext, default_context
from .pipeline import FetchPipeline
from .queries import Query
from .validators import validate_code


class ExchangeClient:
    """Entry point consumed by SDK callers.

    Holds the per-instance base currency and caching flag. The HTTP session
    and the response cache live in the :class:`SharedContext`, which defaults
    to the process-wide one, so every client built without an explicit
    context shares them.
    """

    def __init__(
        self,
        base: str | None = None,
        *,
        cache_enabled: bool = True,
        context: SharedContext | None = None,
    ) -> None:
        base = base or get_settings().default_base
        validate_code(base)
        self._base = base
        self._cache_enabled = cache_enabled
        self._context = context or default_context()
        self._api = ExchangeRateHostAPI(FetchPipeline(self._context))

    @property
    def base(self) -> str:
        return self._base

    @property
    def cache_enabled(self) -> bool:
        return self._cache_enabled

    @property
    def context(self) -> SharedContext:
        return self._context

    def set_base(self, base: str) -> None:
        """Change the base currency; the current one is kept if ``base`` is invalid."""

        validate_code(base)
        self._base = base

    def set_cache(self, enabled: bool) -> None:
        """Enable or disable caching (cached responses last until UTC midnight)."""

        self._cache_enabled = enabled

    # Reference data ----------------------------------------------------
    def forex_codes(self) -> list[str]:
        """Return the sorted list of supported fiat currency codes."""

        return sorted(self.forex_data())

    def forex_data(self) -> CurrencyTable:
        """Return code and description of every supported fiat currency."""

        return self._api.symbols(use_cache=self._cache_enabled)

    def crypto_codes(self) -> list[str]:
        """Return the sorted list of supported cryptocurrency codes."""

        return sorted(self.crypto_data())

    def crypto_data(self) -> CurrencyTable:
        """Return symbol and name of every supported cryptocurrency."""

        return self._api.cryptocurrencies(use_cache=self._cache_enabled)

    # Latest ------------------------------------------------------------
    def latest_rates_all(self) -> Rates:
        return self._api.latest(Query(base=self._base), use_cache=self._cache_enabled)

    def latest_rates_multiple(self, symbols: Sequence[str]) -> Rates:
        return self._api.latest(
            Query(base=self._base, symbols=tuple(symbols)), use_cache=self._cache_enabled
        )

    def latest_rates_single(self, symbol: str) -> Decimal | None:
        """Return the latest rate for ``symbol`` or ``None`` if it is not listed."""

        return self.latest_rates_multiple([symbol]).get(symbol)

    # Conversion --------------------------------------------------------
    def convert_to(self, target: str, amount: int) -> Decimal:
        """Convert ``amount`` from the base currency to ``target`` at the latest rate."""

        return self._api.convert(
            Query(from_=self._base, to=target, amount=amount), use_cache=self._cache_enabled
        )

    def convert_at(self, date: str, target: str, amount: int) -> Decimal:
        """Convert ``amount`` from the base currency to ``target`` at a past date."""

        return self._api.convert(
            Query(from_=self._base, to=target, amount=amount, date=date),
            use_cache=self._cache_enabled,
        )

    # Historical --------------------------------------------------------
    def historical_rates_all(self, date: str) -> Rates:
        return self._api.historical(Query(base=self._base, date=date), use_cache=self._cache_enabled)

    def historical_rates_multiple(self, date: str, symbols: Sequence[str]) -> Rates:
        return self._api.historical(
            Query(base=self._base, symbols=tuple(symbols), date=date), use_cache=self._cache_enabled
        )

    def historical_rates_single(self, date: str, symbol: str) -> Decimal | None:
        return self.historical_rates_multiple(date, [symbol]).get(symbol)

    # Time series -------------------------------------------------------
    def timeseries_all(self, start: str, end: str) -> NestedRates:
        """Return ``{date: {symbol: rate}}`` for every day between ``start`` and ``end``."""

        return self._api.timeseries(self._window(start, end), use_cache=self._cache_enabled)

    def timeseries_multiple(self, start: str, end: str, symbols: Sequence[str]) -> NestedRates:
        return self._api.timeseries(self._window(start, end, symbols), use_cache=self._cache_enabled)

    def timeseries_single(self, start: str, end: str, symbol: str) -> NestedRates:
        return self._api.timeseries(self._window(start, end, [symbol]), use_cache=self._cache_enabled)

    # Fluctuation -------------------------------------------------------
    def fluctuation_all(self, start: str, end: str) -> NestedRates:
        """Return ``{symbol: {start_rate, end_rate, change, change_pct}}`` over the window."""

        return self._api.fluctuation(self._window(start, end), use_cache=self._cache_enabled)

    def fluctuation_multiple(self, start: str, end: str, symbols: Sequence[str]) -> NestedRates:
        return self._api.fluctuation(self._window(start, end, symbols), use_cache=self._cache_enabled)

    def fluctuation_single(self, start: str, end: str, symbol: str) -> dict[str, Decimal] | None:
        result = self._api.fluctuation(self._window(start, end, [symbol]), use_cache=self._cache_enabled)
        return result.get(symbol)

    # Internal ----------------------------------------------------------
    def _window(self, start: str, end: str, symbols: Sequence[str] = ()) -> Query:
        return Query(base=self._base, symbols=tuple(symbols), time_frame=(start, end))
