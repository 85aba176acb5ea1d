"""Result shapes returned by the endpoint adapters."""

from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# ``{symbol: rate}``
Rates: TypeAlias = dict[str, Decimal]

# Timeseries: ``{date: {symbol: rate}}``.
# Fluctuation: ``{symbol: {"start_rate": ..., "end_rate": ..., "change": ..., "change_pct": ...}}``.
NestedRates: TypeAlias = dict[str, dict[str, Decimal]]

# ``{code: {"code": ..., "description": ...}}`` for currencies and
# ``{code: {"symbol": ..., "name": ...}}`` for cryptocurrencies.
CurrencyTable: TypeAlias = dict[str, dict[str, str]]
