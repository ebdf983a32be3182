"""
Core modules for fetch_request.
"""
from .base_client import AsyncRequestClient, RequestClient, discard_body
from .body_encoder import (
    apply_content_type,
    encode_body,
    encode_json,
    encode_struct,
    resolve_payload,
)
from .request_builder import build_headers, build_request, build_timeout

__all__ = [
    "AsyncRequestClient",
    "RequestClient",
    "discard_body",
    "apply_content_type",
    "encode_body",
    "encode_json",
    "encode_struct",
    "resolve_payload",
    "build_headers",
    "build_request",
    "build_timeout",
]
