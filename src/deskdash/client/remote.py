# Remote client: one timeout-bounded JSON request per call, no retries.
# Shared by the launch item and note stores.

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from deskdash.client.errors import (
    SERVICE_FALLBACK_MESSAGE,
    NetworkError,
    RequestTimeoutError,
    ServiceError,
)
from deskdash.config import DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from server"


class RemoteClient:
    """Async JSON client for the dashboard service.

    Each request races a timer of ``timeout`` seconds. When the timer wins the
    in-flight request is cancelled and :class:`RequestTimeoutError` is raised.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> RemoteClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(self, method: str, endpoint: str, *, json: Any = None) -> Any:
        """Send one request and return the parsed JSON body.

        Raises:
            RequestTimeoutError: no response within ``self.timeout``.
            NetworkError: transport failure, or a body httpx could not read.
            ServiceError: non-2xx status, or a success body that is not JSON.
        """
        logger.debug("%s %s%s", method, self.base_url, endpoint)
        try:
            response = await asyncio.wait_for(
                self._client.request(method, endpoint, json=json),
                timeout=self.timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning("%s %s timed out after %.1fs", method, endpoint, self.timeout)
            raise RequestTimeoutError() from e
        except httpx.RequestError as e:
            # Transport failures, undecodable bodies and redirect loops alike.
            logger.warning("%s %s failed: %s", method, endpoint, e)
            raise NetworkError() from e

        if not response.is_success:
            message = _error_message(response)
            logger.warning("%s %s -> %d: %s", method, endpoint, response.status_code, message)
            raise ServiceError(response.status_code, message)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ServiceError(response.status_code, UNEXPECTED_RESPONSE_MESSAGE) from e

    async def get(self, endpoint: str) -> Any:
        return await self.request("GET", endpoint)

    async def post(self, endpoint: str, json: Any = None) -> Any:
        return await self.request("POST", endpoint, json=json)

    async def put(self, endpoint: str, json: Any = None) -> Any:
        return await self.request("PUT", endpoint, json=json)

    async def delete(self, endpoint: str) -> Any:
        return await self.request("DELETE", endpoint)


def _error_message(response: httpx.Response) -> str:
    """Pull a message out of an error body, tolerating absent or bad JSON."""
    try:
        body = response.json()
    except ValueError:
        return SERVICE_FALLBACK_MESSAGE
    if not isinstance(body, dict):
        return SERVICE_FALLBACK_MESSAGE
    for key in ("message", "detail"):
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return SERVICE_FALLBACK_MESSAGE
