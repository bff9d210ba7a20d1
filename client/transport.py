"""
HTTP transport for the network operator
using threads to avoid blocking the caller
"""

import errno
import logging
import socket
import threading
from typing import Protocol

import httpx

from core.config import Settings
from core.errors import (
    NotConnectedError,
    RequestCancelledError,
    TransportError,
    TransportTimeoutError,
)
from core.models.network import TransportRequest, TransportResponse
from core.types import TransportCallback

logger = logging.getLogger(__name__)

OFFLINE_ERRNOS = {errno.ENETUNREACH, errno.ENETDOWN, errno.EHOSTUNREACH}


def _is_offline(exc: BaseException) -> bool:
    """
    Whether a connect failure means the device has no network.

    Only name resolution failures and unreachable-network errors count; a refused
    or reset connection means the network works and the server is down. A host
    that does not exist also fails name resolution, so it is reported as offline.
    """
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, socket.gaierror):
            return True
        if isinstance(current, OSError) and current.errno in OFFLINE_ERRNOS:
            return True
        current = current.__cause__ or current.__context__
    return False


class Transport(Protocol):
    def dispatch(self, request: TransportRequest, callback: TransportCallback) -> None: ...

    def cancel_all(self) -> None: ...


class _PendingDispatch:
    """Guards a single dispatch so its callback fires exactly once."""

    def __init__(self, request: TransportRequest, callback: TransportCallback) -> None:
        self.request = request
        self.callback = callback
        self.lock = threading.Lock()
        self.delivered = False

    def deliver(
        self,
        data: bytes | None,
        response: TransportResponse | None,
        error: Exception | None,
    ) -> bool:
        with self.lock:
            if self.delivered:
                return False
            self.delivered = True

        self.callback(data, response, error)
        return True


class HttpxTransport:
    """Sends transport requests with httpx, one worker thread per dispatch."""

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        """
        Initialize a new instance of the HttpxTransport class.

        Args:
            settings: Client settings (timeout, user agent, redirects)
            transport: Optional httpx transport, mostly for tests
        """
        self.settings = settings
        self._httpx_transport = transport
        self.client = self._make_client()

        self.pending: set[_PendingDispatch] = set()

        # Lock para acesso thread-safe ao client e às requisições pendentes
        self.lock = threading.Lock()

    def _make_client(self) -> httpx.Client:
        return httpx.Client(
            headers={"User-Agent": self.settings.user_agent},
            timeout=self.settings.request_timeout,
            follow_redirects=self.settings.follow_redirects,
            transport=self._httpx_transport,
        )

    @property
    def pending_count(self) -> int:
        with self.lock:
            return len(self.pending)

    def dispatch(self, request: TransportRequest, callback: TransportCallback) -> None:
        pending = _PendingDispatch(request, callback)

        with self.lock:
            self.pending.add(pending)
            client = self.client

        thread = threading.Thread(target=self._perform, args=(client, pending), daemon=True)
        thread.start()

    def _perform(self, client: httpx.Client, pending: _PendingDispatch) -> None:
        """
        Do a request to the server on a separate thread

        Args:
            client: httpx client captured when the request was dispatched
            pending: The dispatch to complete
        """
        request = pending.request
        data: bytes | None = None
        response: TransportResponse | None = None
        error: Exception | None = None

        extra: dict = {}
        if request.timeout is not None:
            extra["timeout"] = request.timeout

        try:
            raw = client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
                **extra,
            )
            data = raw.content
            response = TransportResponse(
                status_code=raw.status_code,
                headers=dict(raw.headers),
                url=str(raw.url),
            )
        except httpx.ConnectError as e:
            if _is_offline(e):
                error = NotConnectedError(str(e))
            else:
                error = TransportError(str(e))
            error.__cause__ = e
        except httpx.TimeoutException as e:
            error = TransportTimeoutError(str(e))
            error.__cause__ = e
        except Exception as e:
            # includes InvalidURL, header encoding errors and a client closed by cancel_all
            error = TransportError(str(e))
            error.__cause__ = e

        if error is not None:
            logger.error(f"Transport error for {request.method} {request.url}: {error}")

        with self.lock:
            self.pending.discard(pending)

        try:
            delivered = pending.deliver(data, response, error)
        except Exception as e:
            logger.error(f"Unexpected error in completion for {request.method} {request.url}: {e}")
            return

        if not delivered:
            logger.debug(f"Dropped late result for cancelled {request.method} {request.url}")

    def cancel_all(self) -> None:
        """Cancel every in-flight request; later dispatches use a fresh client."""
        with self.lock:
            cancelled = list(self.pending)
            self.pending.clear()
            old_client = self.client
            self.client = self._make_client()

        logger.debug(f"Cancelling {len(cancelled)} pending request(s)")
        for pending in cancelled:
            try:
                pending.deliver(None, None, RequestCancelledError())
            except Exception as e:
                request = pending.request
                logger.error(
                    f"Unexpected error in completion for {request.method} {request.url}: {e}"
                )

        old_client.close()

    def close(self) -> None:
        self.cancel_all()
        self.client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
