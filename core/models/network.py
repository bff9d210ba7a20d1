from dataclasses import dataclass, field, replace

from core.constants import VALID_HTTP_RESPONSE_CODES


@dataclass(frozen=True, slots=True)
class TransportRequest:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = None  # None falls back to the transport default

    def with_body(self, body: bytes) -> "TransportRequest":
        return replace(self, body=body)


@dataclass(frozen=True, slots=True)
class TransportResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    url: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.status_code in VALID_HTTP_RESPONSE_CODES
