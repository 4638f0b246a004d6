import logging
from typing import Optional

import requests
from typing_extensions import Self

from ._core._request import HttpTransport, Transport
from .executor import PaginatedQueryExecutor
from .resources import CallLogs
from .system import System, get_system

logger = logging.getLogger(__name__)


class Client:
    """Entry point bundling a transport, an executor and the API resources.

    Parameters:
        transport: Sends the HTTP requests.
        system: API deployment to target, defaults to `get_system()`.
        timeout: Per-request timeout in seconds.

    Examples:
        >>> with phonelogs.client(session=authorized_session) as client:  # doctest: +SKIP
        ...     page = asyncio.run(client.call_logs.get_for_account(from_="2024-01-01"))
    """

    def __init__(
        self,
        transport: Transport,
        system: Optional[System] = None,
        timeout: float = 30,
    ) -> None:
        self.transport = transport
        self.system = system or get_system()
        self.executor = PaginatedQueryExecutor(transport, self.system, timeout)
        self.call_logs = CallLogs(self.executor)

    def close(self) -> None:
        """Release the transport's resources, if it holds any."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client(system={self.system.name!r}, api_url={self.system.api_url!r})"


def client(
    system: Optional[System] = None,
    session: Optional[requests.Session] = None,
    timeout: float = 30,
) -> Client:
    """Create a `Client` talking to *system* over HTTP.

    Parameters:
        system: API deployment to target. Defaults to `PROD`, or to the URL
            in the ``PHONELOGS_API_URL`` environment variable when set.
        session: A ``requests.Session`` to send requests with, for example one
            already carrying an ``Authorization`` header. A new session is
            created (and closed with the client) when omitted.
        timeout: Per-request timeout in seconds.

    Returns:
        A ready to use `Client`.
    """
    system = system or get_system()
    logger.debug("Creating client for %s (%s)", system.name, system.api_url)
    return Client(HttpTransport(session), system, timeout)
