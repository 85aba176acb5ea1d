"""Print a rate time series.

Usage: python scripts/show_timeseries.py START END [BASE [SYMBOL ...]]
"""
from __future__ import annotations

import sys
from typing import Sequence

from script_utils import build_client, close_default

from exchange_rate_fetch.core.errors import ExchangeRateError


def main(argv: Sequence[str]) -> int:
    if len(argv) < 2:
        print(__doc__)
        return 2
    start, end = argv[0], argv[1]
    try:
        client, symbols = build_client(argv[2:])
        series = client.timeseries_multiple(start, end, symbols) if symbols else client.timeseries_all(start, end)
    except ExchangeRateError as exc:
        print(f"error: {exc}")
        return 1
    finally:
        close_default()
    for day in sorted(series):
        values = " ".join(f"{symbol}={rate}" for symbol, rate in sorted(series[day].items()))
        print(day, values)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
