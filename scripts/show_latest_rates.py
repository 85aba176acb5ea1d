"""Print the latest rates for a base currency.

Usage: python scripts/show_latest_rates.py [BASE [SYMBOL ...]]
"""
from __future__ import annotations

import sys
from typing import Sequence

from script_utils import build_client, close_default

from exchange_rate_fetch.core.errors import ExchangeRateError


def main(argv: Sequence[str]) -> int:
    try:
        client, symbols = build_client(argv)
        rates = client.latest_rates_multiple(symbols) if symbols else client.latest_rates_all()
    except ExchangeRateError as exc:
        print(f"error: {exc}")
        return 1
    finally:
        close_default()
    print(f"=== latest rates, base {client.base} ===")
    for symbol in sorted(rates):
        print(f"{symbol} {rates[symbol]}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
