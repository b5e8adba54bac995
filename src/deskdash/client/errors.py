# Remote failure taxonomy.
"""Errors raised by :class:`~deskdash.client.remote.RemoteClient`.

Every failure is one of three kinds, tagged by :class:`ErrorKind`. Callers
can branch on ``exc.kind`` or catch the concrete subclass.
"""

from __future__ import annotations

from enum import Enum

TIMEOUT_MESSAGE = "Request timed out. Please check if the server is running."
NETWORK_MESSAGE = "Network error. Please check your connection and if the server is running."
SERVICE_FALLBACK_MESSAGE = "An error occurred while fetching the data"


class ErrorKind(str, Enum):
    TIMEOUT = "timeout"
    NETWORK = "network"
    SERVICE = "service"


class RemoteError(Exception):
    """Base class for transport and service failures."""

    kind: ErrorKind

    def __init__(self, message: str, status: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, status={self.status}, message={self.message!r})"


class RequestTimeoutError(RemoteError):
    """No response arrived within the request timeout."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, message: str = TIMEOUT_MESSAGE) -> None:
        super().__init__(message, status=0)


class NetworkError(RemoteError):
    """The transport failed before any response was received."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str = NETWORK_MESSAGE) -> None:
        super().__init__(message, status=0)


class ServiceError(RemoteError):
    """The service answered with a non-success status."""

    kind = ErrorKind.SERVICE

    def __init__(self, status: int, message: str = SERVICE_FALLBACK_MESSAGE) -> None:
        super().__init__(message or SERVICE_FALLBACK_MESSAGE, status=status)
