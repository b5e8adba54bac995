"""Timeout-bounded HTTP access to the dashboard service."""

from deskdash.client.errors import (
    ErrorKind,
    NetworkError,
    RemoteError,
    RequestTimeoutError,
    ServiceError,
)
from deskdash.client.remote import RemoteClient

__all__ = [
    "ErrorKind",
    "NetworkError",
    "RemoteClient",
    "RemoteError",
    "RequestTimeoutError",
    "ServiceError",
]
