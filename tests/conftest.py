"""
Shared fixtures for fetch_request tests.
"""
from typing import List

import httpx
import pytest

from fetch_request import ClientConfig, RequestClient, AsyncRequestClient, reset_default_client


@pytest.fixture(autouse=True)
def clean_default_client():
    """Never leak the default client between tests."""
    reset_default_client()
    yield
    reset_default_client()


@pytest.fixture
def captured() -> List[httpx.Request]:
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def transport(captured):
    """Mock transport answering 200 with a small JSON body."""

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(
            200,
            content=b'{"ok":true}',
            headers={"content-type": "application/json"},
        )

    return httpx.MockTransport(handler)


@pytest.fixture
def client(transport):
    """RequestClient sending through the mock transport."""
    c = RequestClient(ClientConfig(), httpx_client=httpx.Client(transport=transport))
    yield c
    c.close()


@pytest.fixture
def async_client(transport):
    """AsyncRequestClient sending through the mock transport."""
    return AsyncRequestClient(ClientConfig(), httpx_client=httpx.AsyncClient(transport=transport))
