"""Single-page execution of `QuerySpec` requests.

The executor turns a `QuerySpec` into exactly one GET request, sends it
through an injected `Transport`, and decodes the response envelope into a
`PaginatedResult`. Walking through further pages is left to the caller:
call `execute` again with the returned ``next_page_token``.

The transport is blocking (``requests``), so each request runs in a worker
thread via ``asyncio.to_thread``; the calling event loop is never blocked and
independent calls may be gathered concurrently.
"""

import asyncio
import logging
import threading
from typing import Any, Callable, List, Optional, Type, TypeVar

import requests

from ._core._models import PaginatedResult
from ._core._request import RequestConfig, Transport
from .exceptions import Cancelled, RequestFailed
from .query.spec import QuerySpec
from .system import System, get_system

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=PaginatedResult)


class CancellationToken:
    """Cooperative, thread-safe cancellation signal for one operation."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cancelled = False
        self._callbacks: List[Callable[[], None]] = []

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Signal cancellation and run every registered callback once."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def register(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Run *callback* on cancellation; immediately if already cancelled.

        Returns:
            A function that unregisters the callback.
        """
        with self._lock:
            if not self._cancelled:
                self._callbacks.append(callback)
                return lambda: self._unregister(callback)
        callback()
        return lambda: None

    def _unregister(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def raise_if_cancelled(self) -> None:
        """Raise `Cancelled` if cancellation has been requested."""
        if self._cancelled:
            raise Cancelled("Operation was cancelled")


class PaginatedQueryExecutor:
    """Executes one `QuerySpec` per call against an injected transport.

    Parameters:
        transport: Sends requests; see `Transport`.
        system: API deployment whose base URL paths are resolved against.
            Defaults to `get_system()`.
        timeout: Per-request timeout in seconds, handed to the transport.
    """

    def __init__(
        self,
        transport: Transport,
        system: Optional[System] = None,
        timeout: float = 30,
    ) -> None:
        self.transport = transport
        self.system = system or get_system()
        self.timeout = timeout

    def build_request(self, spec: QuerySpec) -> RequestConfig:
        return RequestConfig(
            method="GET",
            url=self.system.url_for(spec.path),
            params=spec.to_params(),
            headers={"Accept": "application/json"},
            timeout=self.timeout,
        )

    async def execute(
        self,
        spec: QuerySpec,
        cancellation: Optional[CancellationToken] = None,
        *,
        result_type: Type[R] = PaginatedResult,  # type: ignore[assignment]
        item_factory: Callable[[Any], Any] = dict,
    ) -> R:
        """Fetch and decode one page.

        Parameters:
            spec: The request to send.
            cancellation: Optional token; cancelling it abandons the request.
            result_type: `PaginatedResult` subclass used to decode the envelope.
            item_factory: Turns each raw JSON record into the page's item type.

        Returns:
            The decoded page.

        Raises:
            Cancelled: If *cancellation* fires before or during the request.
            RequestFailed: If the request fails or the body is not a well-formed
                envelope.
        """
        if cancellation is not None:
            cancellation.raise_if_cancelled()

        config = self.build_request(spec)
        response = await self._send(config, cancellation)
        payload = self._decode(response)
        try:
            page = result_type.from_json(payload, spec.items_field, item_factory)
        except (TypeError, ValueError) as exc:
            logger.warning("Malformed %s envelope from %s: %s", spec.items_field, config.url, exc)
            raise RequestFailed(response.status_code, response.text) from exc
        logger.debug(
            "Decoded %d %s from %s (more pages: %s)",
            len(page.items),
            spec.items_field,
            spec.path,
            page.has_more,
        )
        return page

    async def _send(
        self, config: RequestConfig, cancellation: Optional[CancellationToken]
    ) -> requests.Response:
        loop = asyncio.get_running_loop()
        request = asyncio.ensure_future(asyncio.to_thread(self.transport.request, config))

        def cancel_request() -> None:
            # The loop may already be gone if the call finished in the meantime.
            if loop.is_closed():
                return
            try:
                loop.call_soon_threadsafe(request.cancel)
            except RuntimeError:
                logger.debug("Event loop closed before %s could be cancelled", config.url)

        unregister: Callable[[], None] = lambda: None
        if cancellation is not None:
            unregister = cancellation.register(cancel_request)
        try:
            return await request
        except asyncio.CancelledError:
            if cancellation is not None and cancellation.cancelled:
                logger.info("Request to %s cancelled", config.url)
                raise Cancelled(f"Request to {config.url} was cancelled") from None
            request.cancel()
            raise
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            body = exc.response.text if exc.response is not None else str(exc)
            logger.warning("Request to %s failed with status %s", config.url, status)
            raise RequestFailed(status, body) from exc
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", config.url, exc)
            raise RequestFailed(None, str(exc)) from exc
        finally:
            unregister()

    @staticmethod
    def _decode(response: requests.Response) -> dict:
        try:
            payload = response.json()
        except ValueError as exc:
            raise RequestFailed(response.status_code, response.text) from exc
        if not isinstance(payload, dict):
            raise RequestFailed(response.status_code, response.text)
        return payload
