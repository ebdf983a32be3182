"""
Request builder utilities for fetch_request.
"""
import logging
from typing import Dict, Optional

import httpx

from ..auth.auth_handler import create_auth_handler
from ..auth.credentials import strip_credentials
from ..config import RequestOptions, TimeoutConfig, validate_url
from ..console import mask_headers, mask_url
from ..errors import InvalidRequestError
from ..types import HTTP_METHODS, HttpMethod
from .body_encoder import apply_content_type, encode_body, resolve_payload

logger = logging.getLogger("fetch_request.request_builder")


def build_headers(
    headers: Optional[Dict[str, str]] = None,
    auth_header: Optional[Dict[str, str]] = None,
    default_headers: Optional[Dict[str, str]] = None,
) -> httpx.Headers:
    """Merge default, auth and request headers, in that order.

    Later entries replace earlier ones case-insensitively, so at most one
    Authorization header survives.
    """
    result = httpx.Headers(default_headers or {})

    if auth_header:
        result.update(auth_header)

    for key, value in (headers or {}).items():
        if key.lower() == "authorization" and auth_header:
            logger.debug("build_headers: explicit Authorization header replaces resolved auth")
        result[key] = str(value)

    return result


def build_timeout(timeout: TimeoutConfig) -> httpx.Timeout:
    """Convert a TimeoutConfig to an httpx.Timeout."""
    return httpx.Timeout(
        connect=timeout.connect,
        read=timeout.read,
        write=timeout.write,
        pool=timeout.pool,
    )


def build_request(
    method: HttpMethod,
    options: RequestOptions,
    timeout: Optional[TimeoutConfig] = None,
    default_headers: Optional[Dict[str, str]] = None,
) -> httpx.Request:
    """Build a transport-ready request from method and options.

    Allocates ``options.headers`` if absent and writes the resolved
    Content-Type into it. A Content-Type written by an earlier build with the
    same options is removed when this build resolves none.

    Raises:
        InvalidRequestError: bad method, URL or header values.
        EncodingError: the body cannot be serialized.
    """
    method = method.upper() if isinstance(method, str) else method
    if method not in HTTP_METHODS:
        raise InvalidRequestError(f"Invalid method: {method!r}. Must be one of: {list(HTTP_METHODS)}")

    validate_url(options.url)

    if options.headers is None:
        options.headers = {}

    payload = resolve_payload(options.body, options.json)
    encoded = encode_body(payload)
    apply_content_type(options.headers, encoded, previous=options._content_type)
    options._content_type = encoded.content_type or None
    logger.debug(
        f"build_request: method={method}, url={mask_url(options.url)}, "
        f"payload={type(payload).__name__}, content_type={encoded.content_type!r}, "
        f"length={len(encoded.content)}"
    )

    auth_header = create_auth_handler(options.auth).get_header(options.url)

    extensions = {}
    if timeout is not None:
        extensions["timeout"] = build_timeout(timeout).as_dict()

    try:
        headers = build_headers(options.headers, auth_header, default_headers)
        request = httpx.Request(
            method,
            strip_credentials(options.url),
            headers=headers,
            content=encoded.content or None,
            extensions=extensions,
        )
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise InvalidRequestError(f"Invalid request: {e}") from e

    logger.debug(f"build_request: headers={mask_headers(request.headers)}")
    return request
