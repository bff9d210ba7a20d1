from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from client.requests import GetLocationsRequest, PostLocationRequest
from client.services.base import ServiceBase
from core.errors import NetworkError
from core.models.api import ApiResponse, LocationPayload
from core.result import Failure, Result

logger = logging.getLogger(__name__)


class LocationService(ServiceBase):
    """Fetches and publishes rider locations and chat messages."""

    def __init__(self, app) -> None:
        super().__init__(app)
        self.latest: ApiResponse | None = None
        self.error: NetworkError | None = None

    def _request_kwargs(self) -> dict[str, Any]:
        return {"endpoint": self.app.settings.api_endpoint}

    def _handle(
        self, result: Result[ApiResponse], completion: Callable[[Result[ApiResponse]], Any] | None
    ) -> None:
        if isinstance(result, Failure):
            self.error = result.error
            logger.warning(f"Location request failed: {result.error}")
        else:
            self.latest = result.value
            self.error = None

        if completion is not None:
            completion(result)

    def fetch(self, completion: Callable[[Result[ApiResponse]], Any] | None = None) -> None:
        """Fetch every known location and the chat history."""
        request = GetLocationsRequest(**self._request_kwargs())
        self.network.get(request, lambda result: self._handle(result, completion))

    def send(
        self,
        payload: LocationPayload,
        completion: Callable[[Result[ApiResponse]], Any] | None = None,
    ) -> None:
        """Publish our location (and pending messages), receiving the current state back."""
        body = payload.model_dump_json(by_alias=True, exclude_none=True).encode()
        request = PostLocationRequest(**self._request_kwargs())
        self.network.post(request, body, lambda result: self._handle(result, completion))

    def cancel(self) -> None:
        self.network.cancel_pending_requests()
