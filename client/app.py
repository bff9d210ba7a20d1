"""
Critical Maps client - application factory
"""

import logging
import threading
import time

from client.activity import NetworkActivityIndicator
from client.operator import NetworkOperator
from client.services import LocationService
from client.transport import HttpxTransport, Transport
from core.abstract import App
from core.config import Settings
from core.constants import CANCEL_GRACE_SECONDS
from core.errors import NoDataError, RequestCancelledError
from core.models.api import ApiResponse, Location, LocationPayload, SendMessage
from core.result import Failure, Result

logger = logging.getLogger(__name__)


class ClientApp(App):
    """Wires the transport, activity indicator, network operator and services."""

    transport: Transport
    activity: NetworkActivityIndicator
    network: NetworkOperator
    location_service: LocationService

    def __init__(self, settings: Settings, transport: Transport | None = None) -> None:
        self.settings = settings
        self.transport = transport or HttpxTransport(settings)
        self.activity = NetworkActivityIndicator(on_change=self._on_activity_change)
        self.network = NetworkOperator(self.transport, self.activity)
        self.location_service = LocationService(self)

    def _on_activity_change(self, is_active: bool) -> None:
        logger.info("Loading..." if is_active else "Idle")

    def fetch(self, timeout: float | None = None) -> Result[ApiResponse]:
        """Fetch locations and wait for the result."""
        return self._wait(self.location_service.fetch, timeout)

    def post(
        self,
        device: str,
        latitude: float,
        longitude: float,
        message: str | None = None,
        timeout: float | None = None,
    ) -> Result[ApiResponse]:
        """Publish a location (and an optional chat message) and wait for the result."""
        now = int(time.time())
        messages = []
        if message:
            messages.append(SendMessage(text=message, timestamp=now, identifier=f"{device}-{now}"))

        payload = LocationPayload(
            device=device,
            location=Location.from_degrees(latitude, longitude, now),
            messages=messages,
        )
        return self._wait(
            lambda completion: self.location_service.send(payload, completion), timeout
        )

    def _wait(self, start, timeout: float | None) -> Result[ApiResponse]:
        done = threading.Event()
        outcome: list[Result[ApiResponse]] = []

        def completion(result: Result[ApiResponse]) -> None:
            outcome.append(result)
            done.set()

        start(completion)
        if not done.wait(timeout):
            self.network.cancel_pending_requests()
            if not done.wait(CANCEL_GRACE_SECONDS):
                logger.error("Transport did not acknowledge cancellation")
                return Failure(NoDataError(RequestCancelledError("Request timed out")))

        return outcome[0]

    def run(self) -> None:
        result = self.fetch()
        if isinstance(result, Failure):
            logger.error(f"Could not fetch locations: {result.error}")
            return

        response = result.value
        logger.info(
            f"{len(response.locations)} rider(s), {len(response.chat_messages)} chat message(s)"
        )

    def close(self) -> None:
        close = getattr(self.transport, "close", self.transport.cancel_all)
        close()
