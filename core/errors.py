"""
Error types delivered through the failure branch of a network result,
plus the transport-level exceptions they may wrap.
"""


class NetworkError(Exception):
    """Base class for every failure a network call can complete with."""


class OfflineError(NetworkError):
    def __init__(self) -> None:
        super().__init__("The device is not connected to the internet")


class NoDataError(NetworkError):
    def __init__(self, cause: Exception | None = None) -> None:
        message = "The server returned no data"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


class InvalidResponseError(NetworkError):
    def __init__(self, status_code: int | None = None) -> None:
        super().__init__(f"Invalid response status: {status_code}")
        self.status_code = status_code


class DecodingError(NetworkError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Failed to decode response: {cause}")
        self.cause = cause


# Transport level


class TransportError(Exception):
    """Raised or delivered by a transport when a request could not complete."""


class NotConnectedError(TransportError):
    pass


class TransportTimeoutError(TransportError):
    pass


class RequestCancelledError(TransportError):
    def __init__(self, message: str = "Request was cancelled") -> None:
        super().__init__(message)
