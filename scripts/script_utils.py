"""Shared helpers for manual checks against the live exchangerate.host API."""
from __future__ import annotations

from pathlib import Path
import sys
from typing import Sequence

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from exchange_rate_fetch.core.coordinator import ExchangeClient
from exchange_rate_fetch.core.context import reset_default_context


def build_client(argv: Sequence[str]) -> tuple[ExchangeClient, list[str]]:
    """Use the first argument as base currency, the rest as symbols."""

    if not argv:
        return ExchangeClient(), []
    return ExchangeClient(argv[0]), list(argv[1:])


def close_default() -> None:
    reset_default_context()
