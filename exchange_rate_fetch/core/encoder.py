"""Turn a :class:`Query` into a canonical request URL."""

from __future__ import annotations

from urllib.parse import urlencode

from .queries import Query
from .validators import validate_code, validate_date, validate_symbols, validate_time_frame


def encode_params(query: Query, access_key: str) -> dict[str, str]:
    """Validate ``query`` field by field and return the parameters to send.

    Fields are checked in a fixed order (base, from, to, amount, symbols, date,
    time frame) and the first invalid one raises.
    """

    params: dict[str, str] = {"access_key": access_key}

    if query.base:
        validate_code(query.base)
        params["base"] = query.base
    if query.from_:
        validate_code(query.from_)
        params["from"] = query.from_
    if query.to:
        validate_code(query.to)
        params["to"] = query.to
    if query.amount > 1:
        params["amount"] = str(query.amount)
    if query.symbols:
        validate_symbols(query.symbols)
        params["symbols"] = ",".join(query.symbols)
    if query.date:
        validate_date(query.date)
        params["date"] = query.date
    if query.time_frame:
        start, end = query.time_frame
        validate_date(start)
        validate_time_frame(query.time_frame)
        params["start_date"] = start
        params["end_date"] = end
    return params


def encode_request(url: str, query: Query, access_key: str) -> str:
    """Return ``url`` with the encoded query string, parameters sorted by name.

    The result is deterministic for equal queries and serves as the cache key.
    """

    params = encode_params(query, access_key)
    return f"{url}?{urlencode(sorted(params.items()), safe=',')}"
