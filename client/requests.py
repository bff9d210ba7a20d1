"""
Request descriptors: how to build a transport request and how to parse its response
"""

from dataclasses import dataclass, field
from functools import cache
from typing import Any, ClassVar, Generic, Protocol, TypeVar
from urllib.parse import urljoin

from pydantic import TypeAdapter

from core.config import get_settings
from core.constants import JSON_CONTENT_TYPE
from core.models.api import ApiResponse
from core.models.network import TransportRequest
from core.types import Headers, HttpMethod

T = TypeVar("T")


@cache
def response_adapter(response_model: Any) -> TypeAdapter:
    return TypeAdapter(response_model)


class RequestDescriptor(Protocol[T]):
    def build_transport_request(self) -> TransportRequest: ...

    def parse(self, data: bytes) -> T: ...


@dataclass(frozen=True)
class APIRequest(Generic[T]):
    """
    Base descriptor for JSON endpoints of the API.

    Subclasses set `method`, `path` and `response_model`; parsing validates the
    body against `response_model` and raises `pydantic.ValidationError` on
    malformed input.
    """

    method: ClassVar[HttpMethod] = "GET"
    path: ClassVar[str] = ""
    response_model: ClassVar[Any]

    endpoint: str = field(default_factory=lambda: get_settings().api_endpoint)
    headers: Headers = field(default_factory=dict)
    timeout: float | None = None

    @property
    def url(self) -> str:
        return urljoin(self.endpoint, self.path.lstrip("/"))

    def build_transport_request(self) -> TransportRequest:
        return TransportRequest(
            method=self.method,
            url=self.url,
            headers=dict(self.headers),
            timeout=self.timeout,
        )

    def parse(self, data: bytes) -> T:
        return response_adapter(self.response_model).validate_json(data)


@dataclass(frozen=True)
class GetLocationsRequest(APIRequest[ApiResponse]):
    method: ClassVar[HttpMethod] = "GET"
    response_model: ClassVar[Any] = ApiResponse


@dataclass(frozen=True)
class PostLocationRequest(APIRequest[ApiResponse]):
    method: ClassVar[HttpMethod] = "POST"
    response_model: ClassVar[Any] = ApiResponse

    def build_transport_request(self) -> TransportRequest:
        request = super().build_transport_request()
        request.headers.setdefault("Content-Type", JSON_CONTENT_TYPE)
        return request
