# Tests for RemoteClient: timeout bound, error classification, body parsing.

import asyncio
import json

import httpx
import pytest

from deskdash.client import (
    ErrorKind,
    NetworkError,
    RemoteClient,
    RemoteError,
    RequestTimeoutError,
    ServiceError,
)
from deskdash.client.errors import SERVICE_FALLBACK_MESSAGE, TIMEOUT_MESSAGE


def _client(handler, timeout: float = 5.0) -> RemoteClient:
    return RemoteClient("http://test-dash", timeout, transport=httpx.MockTransport(handler))


async def test_get_returns_parsed_json():
    async def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/notes"
        return httpx.Response(200, json=[{"id": 1, "title": "", "content": "hi"}])

    async with _client(handler) as client:
        body = await client.get("/notes")

    assert body == [{"id": 1, "title": "", "content": "hi"}]


async def test_post_sends_json_body():
    captured: dict[str, object] = {}

    async def handler(request: httpx.Request) -> httpx.Response:
        captured.update(json.loads(request.content.decode("utf-8")))
        return httpx.Response(201, json={"id": 7})

    async with _client(handler) as client:
        body = await client.post("/launch-items", json={"name": "Chrome", "path": "/c"})

    assert captured == {"name": "Chrome", "path": "/c"}
    assert body == {"id": 7}


async def test_empty_success_body_returns_none():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    async with _client(handler) as client:
        assert await client.delete("/notes/1") is None


async def test_non_json_success_body_is_service_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>oops</html>")

    async with _client(handler) as client:
        with pytest.raises(ServiceError) as exc_info:
            await client.get("/notes")

    assert exc_info.value.status == 200


class TestServiceErrors:
    async def test_message_taken_from_body(self):
        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "db locked"})

        async with _client(handler) as client:
            with pytest.raises(ServiceError) as exc_info:
                await client.delete("/notes/5")

        assert exc_info.value.status == 500
        assert exc_info.value.message == "db locked"
        assert exc_info.value.kind is ErrorKind.SERVICE

    async def test_detail_string_is_accepted(self):
        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"detail": "Note not found"})

        async with _client(handler) as client:
            with pytest.raises(ServiceError) as exc_info:
                await client.delete("/notes/5")

        assert exc_info.value.message == "Note not found"

    async def test_malformed_body_falls_back(self):
        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        async with _client(handler) as client:
            with pytest.raises(ServiceError) as exc_info:
                await client.get("/notes")

        assert exc_info.value.status == 502
        assert exc_info.value.message == SERVICE_FALLBACK_MESSAGE

    async def test_absent_body_falls_back(self):
        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        async with _client(handler) as client:
            with pytest.raises(ServiceError) as exc_info:
                await client.get("/notes")

        assert exc_info.value.message == SERVICE_FALLBACK_MESSAGE

    async def test_non_object_body_falls_back(self):
        async def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json=["nope"])

        async with _client(handler) as client:
            with pytest.raises(ServiceError) as exc_info:
                await client.get("/notes")

        assert exc_info.value.message == SERVICE_FALLBACK_MESSAGE


async def test_slow_response_times_out_once():
    calls = 0

    async def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        await asyncio.sleep(2)
        return httpx.Response(200, json=[])

    async with _client(handler, timeout=0.05) as client:
        with pytest.raises(RequestTimeoutError) as exc_info:
            await client.get("/launch-items")

    assert calls == 1
    assert exc_info.value.kind is ErrorKind.TIMEOUT
    assert exc_info.value.status == 0
    assert exc_info.value.message == TIMEOUT_MESSAGE


async def test_connection_refused_is_network_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(NetworkError) as exc_info:
            await client.get("/notes")

    assert exc_info.value.kind is ErrorKind.NETWORK
    assert isinstance(exc_info.value, RemoteError)


def test_base_url_trailing_slash_is_stripped():
    client = RemoteClient("http://localhost:3001/")
    assert client.base_url == "http://localhost:3001"


async def test_undecodable_body_is_network_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, headers={"Content-Encoding": "gzip"}, content=b"not gzip at all"
        )

    async with _client(handler) as client:
        with pytest.raises(NetworkError) as exc_info:
            await client.get("/launch-items")

    assert isinstance(exc_info.value.__cause__, httpx.DecodingError)
