"""
Type definitions for fetch_request.
"""
from dataclasses import dataclass
from typing import Any, Literal, NamedTuple, Optional, Union

import httpx


# HTTP methods
HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")

# Methods that never carry a request entity (RFC 2616 sections 4.3, 9.3)
BODYLESS_METHODS = ("GET", "DELETE")

# Content types chosen by the body encoder
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_TEXT = "text/plain"


# Payload variants
#
# The caller's loose ``body``/``json`` fields are resolved into exactly one of
# these before encoding:
# - NoBody: nothing is sent
# - RawText: a string sent as text/plain
# - JSONValue: a string sent verbatim, or a structured value serialized to
#   JSON, sent as application/json
# - BinaryStruct: a record packed as fixed-width big-endian fields


@dataclass(frozen=True)
class NoBody:
    """Empty request entity."""


@dataclass(frozen=True)
class RawText:
    """Plain text request entity."""

    text: str


@dataclass(frozen=True)
class JSONValue:
    """JSON request entity.

    A ``str`` value is taken as already-serialized JSON text.
    """

    value: Any


@dataclass(frozen=True)
class BinaryStruct:
    """Fixed-width big-endian request entity.

    ``value`` is a dataclass instance, a mapping or a sequence whose fields are
    packed in order. ``fmt`` is an optional ``struct`` format without the byte
    order prefix; when omitted it is inferred from the field values.
    """

    value: Any
    fmt: Optional[str] = None


Payload = Union[NoBody, RawText, JSONValue, BinaryStruct]


@dataclass(frozen=True)
class EncodedBody:
    """Wire bytes and the content type describing them."""

    content: bytes = b""
    content_type: str = ""


class RequestResult(NamedTuple):
    """Outcome of a request: ``(response, body, error)``."""

    response: Optional[httpx.Response]
    body: Optional[bytes]
    error: Optional[Exception]

    @property
    def ok(self) -> bool:
        return (
            self.error is None
            and self.response is not None
            and 200 <= self.response.status_code < 300
        )
