"""Request/cache pipeline shared by every endpoint."""

from __future__ import annotations

import copy
import logging
from decimal import Decimal
from typing import Any

import requests

from ..contracts.http import HTTPResponse
from .context import SharedContext
from .encoder import encode_request
from .errors import InvalidAPIResponseError, ResponseDecodeError, TransportError, UnexpectedShapeError
from .queries import Query

log = logging.getLogger(__name__)


class FetchPipeline:
    """Encode a query, consult the cache, call the API and decode the payload."""

    def __init__(self, context: SharedContext) -> None:
        self._context = context

    @property
    def context(self) -> SharedContext:
        return self._context

    def fetch(self, url: str, query: Query, *, use_cache: bool = True) -> dict[str, Any]:
        """Return the decoded JSON object for ``url`` and ``query``.

        Validation errors are raised before any network I/O. With ``use_cache``
        disabled the shared cache is neither read nor written. Callers get
        their own copy of cached payloads.
        """

        cache_key = encode_request(url, query, self._context.access_key)
        cache = self._context.cache

        if use_cache:
            cached = cache.get(cache_key)
            if cached is not None:
                log.debug("Cache hit for %s", url)
                return copy.deepcopy(cached)

        payload = self._request(cache_key)

        if use_cache:
            cache.set(cache_key, copy.deepcopy(payload))
        return payload

    def _request(self, request_url: str) -> dict[str, Any]:
        # Never log the query string, it carries the access key.
        endpoint = request_url.split("?", 1)[0]
        log.info("Fetching %s", endpoint)
        try:
            response = self._context.session.get(request_url, timeout=self._context.timeout)
        except requests.RequestException as exc:
            log.warning("Request to %s failed: %s", endpoint, exc)
            raise TransportError(f"Failed to call {endpoint}: {exc}") from exc

        payload = self._decode_response(response)
        self._check_success(payload, response.text)
        return payload

    def _decode_response(self, response: HTTPResponse) -> dict[str, Any]:
        try:
            payload = response.json(parse_float=Decimal)
        except ValueError as exc:
            raise ResponseDecodeError(f"Invalid JSON body ({exc}): {response.text}") from exc
        if not isinstance(payload, dict):
            raise UnexpectedShapeError(f"Expected a JSON object, got {type(payload).__name__}: {response.text!r}")
        return payload

    def _check_success(self, payload: dict[str, Any], body: str) -> None:
        success = payload.get("success")
        if not isinstance(success, bool):
            raise UnexpectedShapeError(f"Response is missing a boolean 'success' field: {body!r}")
        if not success:
            log.warning("API reported failure: %s", body)
            raise InvalidAPIResponseError(f"Unknown API error: {body}")
