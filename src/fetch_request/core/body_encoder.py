"""
Request body negotiation for fetch_request.

The caller's ``body`` and ``json`` fields are resolved into a single
``Payload`` by ``resolve_payload``, then turned into wire bytes and a content
type by ``encode_body``.
"""
import dataclasses
import json
import logging
import struct
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from ..errors import EncodingError
from ..types import (
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_TEXT,
    BinaryStruct,
    EncodedBody,
    JSONValue,
    NoBody,
    Payload,
    RawText,
)

logger = logging.getLogger("fetch_request.body_encoder")

_PAYLOAD_TYPES = (NoBody, RawText, JSONValue, BinaryStruct)


def is_structured(value: Any) -> bool:
    """Return True for record-like values: mappings, lists, tuples, dataclass instances."""
    if isinstance(value, (Mapping, list, tuple)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def resolve_payload(body: Any = None, json_value: Any = None) -> Payload:
    """Resolve loose ``body``/``json`` request fields into a Payload.

    A string or structured ``json_value`` is itself the payload and implies
    JSON encoding; otherwise ``json_value`` is read as the JSON flag.
    """
    if isinstance(body, _PAYLOAD_TYPES):
        return body

    if isinstance(json_value, str) or is_structured(json_value):
        body = json_value
        as_json = True
    else:
        as_json = json_value is True

    if isinstance(body, str):
        return JSONValue(body) if as_json else RawText(body)

    if is_structured(body):
        return JSONValue(body) if as_json else BinaryStruct(body)

    if body is not None:
        logger.warning(
            f"resolve_payload: unsupported body type {type(body).__name__}, sending no body"
        )
    return NoBody()


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(value: Any) -> bytes:
    """Serialize ``value`` to compact JSON. Strings are taken as JSON text."""
    if isinstance(value, str):
        return value.encode("utf-8")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    try:
        text = json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_json_default,
        )
    except (TypeError, ValueError) as e:
        raise EncodingError(f"JSON encoding failed: {e}") from e
    return text.encode("utf-8")


def _struct_fields(value: Any) -> List[Any]:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [getattr(value, f.name) for f in dataclasses.fields(value)]
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, (list, tuple)):
        return list(value)
    raise EncodingError(f"Cannot pack {type(value).__name__} as a fixed-width struct")


def _field_format(value: Any) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "?"
    if isinstance(value, int):
        return "q"
    if isinstance(value, float):
        return "d"
    if isinstance(value, (bytes, bytearray)):
        return f"{len(value)}s"
    raise EncodingError(
        f"Cannot pack field of type {type(value).__name__}: not a fixed-width value"
    )


def encode_struct(value: Any, fmt: Optional[str] = None) -> bytes:
    """Pack a record's fields as fixed-width big-endian binary."""
    values = _struct_fields(value)
    if fmt is None:
        fmt = "".join(_field_format(v) for v in values)
    try:
        return struct.pack(f">{fmt}", *values)
    except struct.error as e:
        raise EncodingError(f"Binary encoding failed: {e}") from e


def encode_body(payload: Payload) -> EncodedBody:
    """Encode a payload to wire bytes and content type.

    Raises:
        EncodingError: the payload cannot be serialized.
    """
    if isinstance(payload, RawText):
        return EncodedBody(payload.text.encode("utf-8"), CONTENT_TYPE_TEXT)

    if isinstance(payload, JSONValue):
        return EncodedBody(encode_json(payload.value), CONTENT_TYPE_JSON)

    if isinstance(payload, BinaryStruct):
        return EncodedBody(encode_struct(payload.value, payload.fmt), "")

    return EncodedBody()


def apply_content_type(
    headers: Optional[Dict[str, str]],
    encoded: EncodedBody,
    previous: Optional[str] = None,
) -> Dict[str, str]:
    """Write the resolved content type into ``headers``.

    The mapping is allocated when absent and mutated in place. An empty
    content type writes nothing and removes ``previous``, the value written
    by an earlier call on the same mapping. Caller-supplied values are kept.
    """
    if headers is None:
        headers = {}

    existing = [k for k in headers if k.lower() == "content-type"]

    if not encoded.content_type:
        for key in existing:
            if previous and headers[key] == previous:
                del headers[key]
        return headers

    for key in existing:
        del headers[key]
    headers["Content-Type"] = encoded.content_type
    return headers
