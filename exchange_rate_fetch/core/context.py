"""Shared state (HTTP session, response cache, credentials) reused by clients."""

from __future__ import annotations

import logging
import threading

import requests

from ..config import Settings, get_settings
from ..contracts.http import HTTPSession
from .cache import ResponseCache

log = logging.getLogger(__name__)


class SharedContext:
    """Bundle of process-level collaborators handed to every client.

    Clients built with the same context share one HTTP session and one cache.
    Tests usually build their own context around a stub session and an
    isolated cache.
    """

    def __init__(
        self,
        *,
        session: HTTPSession | None = None,
        cache: ResponseCache | None = None,
        access_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._session = session if session is not None else requests.Session()
        self._owns_session = session is None
        self._cache = cache if cache is not None else ResponseCache(sweep_interval=settings.cache_sweep_seconds)
        self._owns_cache = cache is None
        self.access_key = settings.access_key if access_key is None else access_key
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout or settings.http_timeout_seconds

    @property
    def session(self) -> HTTPSession:
        return self._session

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    def close(self) -> None:
        """Release the session and stop the sweeper for resources created here."""

        if self._owns_session:
            self._session.close()
        if self._owns_cache:
            self._cache.close()


_default_context: SharedContext | None = None
_default_lock = threading.Lock()


def default_context() -> SharedContext:
    """Return the lazily created process-wide context."""

    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = SharedContext()
            if not _default_context.access_key:
                log.warning("EXCHANGERATE_ACCESS_KEY is not set; requests will be sent without a key")
        return _default_context


def reset_default_context() -> None:
    """Close and forget the process-wide context (next use builds a new one)."""

    global _default_context
    with _default_lock:
        if _default_context is not None:
            _default_context.close()
        _default_context = None
