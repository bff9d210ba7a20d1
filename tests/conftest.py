import json

import pytest

from core.config import Settings
from core.models.network import TransportRequest, TransportResponse


class StubTransport:
    """Records dispatches; tests complete them by hand."""

    def __init__(self) -> None:
        self.dispatched: list[tuple[TransportRequest, object]] = []
        self.cancel_calls = 0
        self.events: list[str] = []

    def dispatch(self, request, callback) -> None:
        self.events.append("dispatch")
        self.dispatched.append((request, callback))

    def cancel_all(self) -> None:
        self.cancel_calls += 1

    @property
    def last_request(self) -> TransportRequest:
        return self.dispatched[-1][0]

    def complete(self, data=None, status: int | None = 200, error=None, index: int = -1) -> None:
        _, callback = self.dispatched[index]
        response = TransportResponse(status_code=status) if status is not None else None
        self.events.append("callback")
        callback(data, response, error)


class RecordingTracker:
    def __init__(self, events: list[str] | None = None) -> None:
        self.events = events if events is not None else []
        self.starts = 0
        self.ends = 0

    def on_request_start(self) -> None:
        self.starts += 1
        self.events.append("start")

    def on_request_end(self) -> None:
        self.ends += 1
        self.events.append("end")


class Collector:
    def __init__(self) -> None:
        self.results: list = []

    def __call__(self, result) -> None:
        self.results.append(result)

    @property
    def result(self):
        assert len(self.results) == 1
        return self.results[0]


@pytest.fixture
def transport() -> StubTransport:
    return StubTransport()


@pytest.fixture
def tracker(transport: StubTransport) -> RecordingTracker:
    return RecordingTracker(transport.events)


@pytest.fixture
def collector() -> Collector:
    return Collector()


@pytest.fixture
def settings() -> Settings:
    return Settings(api_endpoint="https://api.example.test/", request_timeout=2.0)


@pytest.fixture
def api_payload() -> bytes:
    return json.dumps(
        {
            "locations": {
                "device-1": {"longitude": 13404954, "latitude": 52520008, "timestamp": 1700000000}
            },
            "chatMessages": {"msg-1": {"message": "hello ride", "timestamp": 1700000001}},
        }
    ).encode()
