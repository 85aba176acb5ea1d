"""Protocols describing the HTTP collaborator used by the fetch pipeline."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HTTPResponse(Protocol):
    """Subset of :class:`requests.Response` consumed by the pipeline."""

    status_code: int

    @property
    def text(self) -> str:
        """Return the decoded response body."""

    def json(self, **kwargs: Any) -> Any:
        """Decode the body as JSON, forwarding ``kwargs`` to :func:`json.loads`."""


@runtime_checkable
class HTTPSession(Protocol):
    """Anything able to issue a GET request, such as :class:`requests.Session`."""

    def get(self, url: str, **kwargs: Any) -> HTTPResponse:
        """Issue a GET request against ``url``."""

    def close(self) -> None:
        """Release pooled connections."""
