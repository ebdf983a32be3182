"""
Convenience HTTP request layer over httpx.

Uniform GET/POST/PUT/DELETE calls with request-body negotiation (text, JSON
or fixed-width binary), bearer/basic authentication resolved from options or
URL credentials, and a shared default client.
"""
from .types import (
    HttpMethod,
    NoBody,
    RawText,
    JSONValue,
    BinaryStruct,
    Payload,
    EncodedBody,
    RequestResult,
)
from .config import (
    AuthDescriptor,
    RequestOptions,
    TimeoutConfig,
    ClientConfig,
)
from .errors import (
    RequestError,
    InvalidRequestError,
    EncodingError,
    CredentialsNotFoundError,
)
from .core.base_client import AsyncRequestClient, RequestClient
from .factory import (
    new_auth,
    new_client,
    new_async_client,
    get_default_client,
    reset_default_client,
)
from .api import get, post, put, delete, new_request

__all__ = [
    # Types
    "HttpMethod",
    "NoBody",
    "RawText",
    "JSONValue",
    "BinaryStruct",
    "Payload",
    "EncodedBody",
    "RequestResult",
    # Config
    "AuthDescriptor",
    "RequestOptions",
    "TimeoutConfig",
    "ClientConfig",
    # Errors
    "RequestError",
    "InvalidRequestError",
    "EncodingError",
    "CredentialsNotFoundError",
    # Clients
    "AsyncRequestClient",
    "RequestClient",
    # Factory
    "new_auth",
    "new_client",
    "new_async_client",
    "get_default_client",
    "reset_default_client",
    # Verbs
    "get",
    "post",
    "put",
    "delete",
    "new_request",
]

__version__ = "0.1.0"
