from collections.abc import Callable
from typing import Any, Literal, TypeAlias, TypeVar

from core.models.network import TransportResponse
from core.result import Result

T = TypeVar("T")

HttpMethod: TypeAlias = Literal["GET", "POST"]
Headers: TypeAlias = dict[str, str]
DeviceId: TypeAlias = str
ResultCallback: TypeAlias = Callable[[Result[T]], Any]
TransportCallback: TypeAlias = Callable[[bytes | None, TransportResponse | None, Exception | None], Any]
ActivityListener: TypeAlias = Callable[[bool], Any]

__all__ = [
    "ActivityListener",
    "DeviceId",
    "Headers",
    "HttpMethod",
    "ResultCallback",
    "TransportCallback",
]
