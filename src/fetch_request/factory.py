"""
Factory functions for creating request clients.

The default client backs the module-level verb functions in ``api``. It is
created on first use under a lock and reused for the life of the process;
``reset_default_client`` closes it so the next call starts fresh.
"""
import logging
import threading
from typing import Optional, Union

import httpx

from .config import AuthDescriptor, ClientConfig, TimeoutConfig
from .core.base_client import AsyncRequestClient, RequestClient

logger = logging.getLogger("fetch_request.factory")

_default_client: Optional[RequestClient] = None
_default_client_lock = threading.Lock()


def new_auth(
    username: Optional[str] = None,
    password: Optional[str] = None,
    bearer: Optional[str] = None,
) -> AuthDescriptor:
    """Create an auth descriptor."""
    return AuthDescriptor(username=username, password=password, bearer=bearer)


def new_client(
    config: Optional[ClientConfig] = None,
    httpx_client: Optional[httpx.Client] = None,
    timeout: Optional[Union[float, TimeoutConfig]] = None,
) -> RequestClient:
    """
    Create a synchronous client owned by the caller.

    Args:
        config: Client configuration. Defaults to a 30 second timeout.
        httpx_client: Pre-configured httpx.Client to send requests with.
        timeout: Shorthand overriding ``config.timeout``.

    Returns:
        RequestClient
    """
    config = config or ClientConfig()
    if timeout is not None:
        config = ClientConfig(
            timeout=timeout,
            verify=config.verify,
            headers=dict(config.headers),
            verbose=config.verbose,
        )
    return RequestClient(config, httpx_client=httpx_client)


def new_async_client(
    config: Optional[ClientConfig] = None,
    httpx_client: Optional[httpx.AsyncClient] = None,
) -> AsyncRequestClient:
    """Create an asynchronous client owned by the caller."""
    return AsyncRequestClient(config or ClientConfig(), httpx_client=httpx_client)


def get_default_client() -> RequestClient:
    """Return the process-wide default client, creating it on first use."""
    global _default_client

    client = _default_client
    if client is not None:
        return client

    with _default_client_lock:
        if _default_client is None:
            logger.debug("get_default_client: creating default client")
            _default_client = new_client()
        return _default_client


def reset_default_client() -> None:
    """Close and forget the default client."""
    global _default_client

    with _default_client_lock:
        client, _default_client = _default_client, None

    if client is not None:
        logger.debug("reset_default_client: closing default client")
        client.close()
