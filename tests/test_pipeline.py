from __future__ import annotations

from decimal import Decimal

import pytest
import requests

from exchange_rate_fetch.core.cache import ResponseCache
from exchange_rate_fetch.core.errors import (
    InvalidAPIResponseError,
    InvalidCodeError,
    ResponseDecodeError,
    TransportError,
    UnexpectedShapeError,
)
from exchange_rate_fetch.core.pipeline import FetchPipeline
from exchange_rate_fetch.core.queries import Query
from tests.stubs import ACCESS_KEY, BASE_URL, StubSession, make_context

URL = f"{BASE_URL}/latest"
OK_PAYLOAD = {"success": True, "base": "EUR", "rates": {"USD": 1.0875}}


@pytest.fixture()
def session() -> StubSession:
    return StubSession()


@pytest.fixture()
def cache() -> ResponseCache:
    return ResponseCache(sweep_interval=None)


@pytest.fixture()
def pipeline(session, cache) -> FetchPipeline:
    return FetchPipeline(make_context(session, cache))


def test_fetch_requests_canonical_url_with_timeout(session, pipeline):
    session.queue(OK_PAYLOAD)

    payload = pipeline.fetch(URL, Query(base="EUR", symbols=("USD",)))

    assert payload["rates"]["USD"] == Decimal("1.0875")
    assert session.calls[0]["url"] == f"{URL}?access_key={ACCESS_KEY}&base=EUR&symbols=USD"
    assert session.calls[0]["timeout"] == 5


def test_second_fetch_is_served_from_cache(session, pipeline, cache):
    session.queue(OK_PAYLOAD)

    first = pipeline.fetch(URL, Query(base="EUR"))
    second = pipeline.fetch(URL, Query(base="EUR"))

    assert first == second
    assert len(session.calls) == 1
    assert len(cache) == 1


def test_disabled_cache_is_neither_read_nor_written(session, pipeline, cache):
    key = f"{URL}?access_key={ACCESS_KEY}&base=EUR"
    cache.set(key, {"success": True, "rates": {"USD": Decimal("9")}})
    session.queue(OK_PAYLOAD)
    session.queue({"success": True, "rates": {"USD": 2}})

    first = pipeline.fetch(URL, Query(base="EUR"), use_cache=False)
    second = pipeline.fetch(URL, Query(base="EUR"), use_cache=False)

    assert first["rates"]["USD"] == Decimal("1.0875")
    assert second["rates"]["USD"] == 2
    assert len(session.calls) == 2
    assert cache.get(key)["rates"]["USD"] == Decimal("9")


def test_validation_failure_performs_no_request(session, pipeline):
    with pytest.raises(InvalidCodeError):
        pipeline.fetch(URL, Query(base="EURO"))
    assert session.calls == []


def test_api_failure_embeds_body(session, pipeline, cache):
    body = '{"success": false, "error": {"code": 101, "type": "missing_access_key"}}'
    session.queue(text=body)

    with pytest.raises(InvalidAPIResponseError) as excinfo:
        pipeline.fetch(URL, Query())

    assert body in str(excinfo.value)
    assert len(cache) == 0


def test_malformed_json_embeds_body(session, pipeline):
    session.queue(text="<html>Bad Gateway</html>", status_code=502)

    with pytest.raises(ResponseDecodeError, match="Bad Gateway"):
        pipeline.fetch(URL, Query())


@pytest.mark.parametrize("body", ['{"rates": {}}', '{"success": "true"}', "[1, 2]"])
def test_missing_or_mistyped_success_is_unexpected_shape(session, pipeline, body):
    session.queue(text=body)

    with pytest.raises(UnexpectedShapeError):
        pipeline.fetch(URL, Query())


def test_transport_errors_are_wrapped(session, pipeline):
    session.queue_error(requests.ConnectionError("connection refused"))

    with pytest.raises(TransportError, match="connection refused") as excinfo:
        pipeline.fetch(URL, Query())

    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)


def test_contexts_sharing_a_cache_share_entries(session, cache):
    other_session = StubSession()
    session.queue(OK_PAYLOAD)

    FetchPipeline(make_context(session, cache)).fetch(URL, Query(base="EUR"))
    payload = FetchPipeline(make_context(other_session, cache)).fetch(URL, Query(base="EUR"))

    assert payload["rates"]["USD"] == Decimal("1.0875")
    assert other_session.calls == []


def test_mutating_a_returned_payload_leaves_the_cache_intact(session, pipeline):
    session.queue(OK_PAYLOAD)

    first = pipeline.fetch(URL, Query(base="EUR"))
    first["rates"]["USD"] = Decimal("0")
    second = pipeline.fetch(URL, Query(base="EUR"))
    second["rates"].clear()
    third = pipeline.fetch(URL, Query(base="EUR"))

    assert third["rates"] == {"USD": Decimal("1.0875")}
    assert len(session.calls) == 1
