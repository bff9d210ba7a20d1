"""
Network operator: turns request descriptors into typed results
"""

from typing import Protocol, TypeVar

from client.activity import ActivityTracker
from client.requests import RequestDescriptor
from client.transport import Transport
from core.errors import (
    DecodingError,
    InvalidResponseError,
    NoDataError,
    NotConnectedError,
    OfflineError,
)
from core.models.network import TransportRequest, TransportResponse
from core.result import Failure, Result, Success
from core.types import ResultCallback

T = TypeVar("T")


class NetworkLayer(Protocol):
    def get(self, request: RequestDescriptor[T], completion: ResultCallback[T]) -> None: ...

    def post(
        self, request: RequestDescriptor[T], body: bytes, completion: ResultCallback[T]
    ) -> None: ...

    def cancel_pending_requests(self) -> None: ...


class NetworkOperator:
    """
    Issues requests through a transport and completes each one exactly once
    with either Success(parsed value) or Failure(NetworkError).
    """

    def __init__(
        self, transport: Transport, activity_tracker: ActivityTracker | None = None
    ) -> None:
        """
        Initialize a new instance of the NetworkOperator class.

        Args:
            transport: Sends requests and delivers raw responses
            activity_tracker: Optional counter notified around every dispatch
        """
        self.transport = transport
        self.activity_tracker = activity_tracker

    def get(self, request: RequestDescriptor[T], completion: ResultCallback[T]) -> None:
        self._perform(request, request.build_transport_request(), completion)

    def post(
        self, request: RequestDescriptor[T], body: bytes, completion: ResultCallback[T]
    ) -> None:
        transport_request = request.build_transport_request().with_body(body)
        self._perform(request, transport_request, completion)

    def cancel_pending_requests(self) -> None:
        self.transport.cancel_all()

    def _perform(
        self,
        request: RequestDescriptor[T],
        transport_request: TransportRequest,
        completion: ResultCallback[T],
    ) -> None:
        def on_data(result: Result[bytes]) -> None:
            if isinstance(result, Failure):
                completion(result)
                return

            try:
                value = request.parse(result.value)
            except Exception as e:
                completion(Failure(DecodingError(e)))
                return

            completion(Success(value))

        self._dispatch(transport_request, on_data)

    def _dispatch(
        self, transport_request: TransportRequest, completion: ResultCallback[bytes]
    ) -> None:
        if self.activity_tracker is not None:
            self.activity_tracker.on_request_start()

        def on_complete(
            data: bytes | None, response: TransportResponse | None, error: Exception | None
        ) -> None:
            if self.activity_tracker is not None:
                self.activity_tracker.on_request_end()
            completion(validate_response(data, response, error))

        self.transport.dispatch(transport_request, on_complete)


def validate_response(
    data: bytes | None, response: TransportResponse | None, error: Exception | None
) -> Result[bytes]:
    """
    Map a raw transport outcome to a result, checking in order:
    connectivity, presence of data, then the status code.
    """
    if isinstance(error, NotConnectedError):
        return Failure(OfflineError())

    if data is None:
        return Failure(NoDataError(error))

    if response is None or not response.is_valid:
        return Failure(InvalidResponseError(response.status_code if response else None))

    return Success(data)
