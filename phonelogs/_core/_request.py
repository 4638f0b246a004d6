"""HTTP transport used by the query executor."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, MutableMapping, Optional

import requests
from typing_extensions import Protocol

log = logging.getLogger(__name__)


@dataclass
class RequestConfig:
    """Configuration for a single request."""

    method: str = "GET"
    url: str = ""
    params: Mapping[str, str] = field(default_factory=dict)
    headers: MutableMapping[str, str] = field(default_factory=dict)
    timeout: float = 30


class Transport(Protocol):
    """Anything able to send a `RequestConfig` and return the response.

    Implementations raise ``requests.HTTPError`` for error statuses and
    ``requests.RequestException`` for transport failures.
    """

    def request(self, config: RequestConfig) -> requests.Response: ...


class HttpTransport:
    """`Transport` backed by a ``requests.Session``.

    A single attempt is made per request; there is no retry or backoff.
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def request(self, config: RequestConfig) -> requests.Response:
        """Send the request described by *config*.

        Args:
            config: Fully populated ``RequestConfig`` instance.

        Returns:
            The ``requests.Response`` for a successful (non-error) status.

        Raises:
            requests.HTTPError: If the server answered with an error status.
            requests.RequestException: If no response could be obtained.
        """
        log.debug("%s %s params=%s", config.method, config.url, dict(config.params))
        resp = self.session.request(
            method=config.method,
            url=config.url,
            params=config.params,
            headers=dict(config.headers),
            timeout=config.timeout,
        )
        resp.raise_for_status()
        return resp

    def close(self) -> None:
        """Close the session if this transport created it."""
        if self.owns_session:
            self.session.close()
