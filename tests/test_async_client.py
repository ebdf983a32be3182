"""
Tests for core/base_client.py (async client)
Logic testing: Decision/Branch, State Transition, Error paths
"""
import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest

from fetch_request.config import AuthDescriptor, ClientConfig, RequestOptions
from fetch_request.core.base_client import AsyncRequestClient
from fetch_request.errors import InvalidRequestError


class AsyncFailingStream(httpx.AsyncByteStream):
    """Async response stream that breaks after the first chunk."""

    def __init__(self):
        self.closed = False

    async def __aiter__(self):
        yield b"partial"
        raise httpx.ReadError("connection reset")

    async def aclose(self):
        self.closed = True


def async_client_for(handler):
    return AsyncRequestClient(
        ClientConfig(), httpx_client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )


class TestAsyncRequestClient:
    """Tests for AsyncRequestClient class."""

    # Happy Path: GET success
    @pytest.mark.asyncio
    async def test_get_success(self, async_client, captured):
        response, body, error = await async_client.get(RequestOptions(url="https://example.com"))

        assert error is None
        assert response.status_code == 200
        assert body == b'{"ok":true}'
        assert response.is_closed is True
        await async_client.close()

    # Path: DELETE never sends a body
    @pytest.mark.asyncio
    async def test_delete_discards_body(self, async_client, captured):
        await async_client.delete(RequestOptions(url="https://example.com", json={"a": 1}))

        assert captured[0].method == "DELETE"
        assert captured[0].content == b""
        await async_client.close()

    # Path: POST text body
    @pytest.mark.asyncio
    async def test_post_text(self, async_client, captured):
        await async_client.post(RequestOptions(url="https://example.com", body="hello"))

        assert captured[0].headers["content-type"] == "text/plain"
        assert captured[0].content == b"hello"
        await async_client.close()

    # Path: PUT bearer
    @pytest.mark.asyncio
    async def test_put_bearer(self, async_client, captured):
        options = RequestOptions(
            url="https://u:p@example.com", auth=AuthDescriptor(bearer="tok")
        )
        await async_client.put(options)

        assert captured[0].headers.get_list("authorization") == ["Bearer tok"]
        await async_client.close()

    # Path: concurrent requests on one client
    @pytest.mark.asyncio
    async def test_concurrent_requests(self, async_client, captured):
        results = await asyncio.gather(
            *(async_client.get(RequestOptions(url=f"https://example.com/{i}")) for i in range(5))
        )

        assert all(r.ok for r in results)
        assert len(captured) == 5
        await async_client.close()

    # Error Path: invalid URL
    @pytest.mark.asyncio
    async def test_invalid_url(self, async_client):
        result = await async_client.get(RequestOptions(url="relative/path"))

        assert isinstance(result.error, InvalidRequestError)
        assert result.response is None
        await async_client.close()

    # Error Path: transport timeout
    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        client = async_client_for(handler)
        response, body, error = await client.get(RequestOptions(url="https://example.com"))

        assert response is None
        assert body is None
        assert isinstance(error, httpx.TimeoutException)
        await client.close()

    # Error Path: body read failure keeps response metadata
    @pytest.mark.asyncio
    async def test_read_error(self):
        stream = AsyncFailingStream()
        client = async_client_for(lambda request: httpx.Response(200, stream=stream))

        response, body, error = await client.get(RequestOptions(url="https://example.com"))

        assert response.status_code == 200
        assert body is None
        assert isinstance(error, httpx.ReadError)
        assert response.is_closed is True
        assert stream.closed is True
        await client.close()

    # State: request on closed client
    @pytest.mark.asyncio
    async def test_closed_client(self, async_client):
        await async_client.close()

        with pytest.raises(RuntimeError, match="Client has been closed"):
            await async_client.get(RequestOptions(url="https://example.com"))

    # State: async context manager closes
    @pytest.mark.asyncio
    async def test_context_manager(self):
        httpx_client = AsyncMock(spec=httpx.AsyncClient)
        httpx_client.aclose = AsyncMock()

        async with AsyncRequestClient(httpx_client=httpx_client) as client:
            assert client.closed is False

        assert client.closed is True
        httpx_client.aclose.assert_awaited_once()
