"""Canonical JSON encoding and decoding of structured errors.

Wire shape (compact, fields in this order, empty values omitted)::

    {"id": "...", "code": 404, "name": "...", "message": "...",
     "meta": [{"key": "...", "value": "..."}],
     "stacktrace": {"fn": "...", "file": "...", "line": 1},
     "cause": {...same shape...}}

``stacktrace`` is always emitted. Cause chains are spliced when encoding and
parsed from ijson events when decoding, so neither direction recurses and
chains of any length round-trip.
"""

from __future__ import annotations

import io
from typing import Any, Mapping

import ijson
from pydantic import ValidationError

from packages.structured_errors.errors import StructuredError
from packages.structured_errors.logging import get_logger

from .errors import DecodeError
from .models import ErrorDocument

_LOGGER = get_logger(__name__)
_CAUSE = "cause"


def encode(err: StructuredError) -> bytes:
    """Encode ``err`` and its whole cause chain as UTF-8 JSON."""
    return encode_str(err).encode("utf-8")


def encode_str(err: StructuredError) -> str:
    """Encode ``err`` and its whole cause chain as a JSON string."""
    parts: list[str] = []
    open_objects = 0
    for node in err.walk():
        body = ErrorDocument.from_error(node).model_dump_json(exclude_none=True)
        if node.cause is None:
            parts.append(body)
            continue
        separator = "" if body == "{}" else ","
        parts.append(f'{body[:-1]}{separator}"{_CAUSE}":')
        open_objects += 1
    parts.append("}" * open_objects)
    return "".join(parts)


def encode_dict(err: StructuredError) -> dict[str, Any]:
    """Return the wire document of ``err`` as plain nested dicts."""
    documents = [
        ErrorDocument.from_error(node).model_dump(mode="json", exclude_none=True)
        for node in err.walk()
    ]
    for parent, child in zip(documents, documents[1:]):
        parent[_CAUSE] = child
    return documents[0]


def decode(data: bytes | bytearray | str) -> StructuredError:
    """Decode a JSON payload produced by ``encode``.

    Raises ``DecodeError`` when the payload is not valid JSON or not a
    structured error object.
    """
    try:
        parsed = _parse(data)
    except (ijson.JSONError, TypeError, ValueError) as exc:
        _log_failure(exc)
        raise DecodeError(exc) from exc
    return decode_dict(parsed)


def _parse(data: bytes | bytearray | str) -> Any:
    """Parse one JSON document with an explicit container stack."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    elif not isinstance(data, (bytes, bytearray)):
        raise TypeError(f"cannot decode {type(data).__name__}, expected bytes or str")
    builder = ijson.ObjectBuilder()
    for event, value in ijson.basic_parse(io.BytesIO(bytes(data)), use_float=True):
        builder.event(event, value)
    if not hasattr(builder, "value"):
        raise ijson.IncompleteJSONError("empty JSON document")
    return builder.value


def decode_dict(document: object) -> StructuredError:
    """Rebuild a structured error from an already-parsed wire document."""
    nodes: list[ErrorDocument] = []
    cursor: object = document
    while True:
        if not isinstance(cursor, Mapping):
            exc = TypeError(
                f"structured error document must be an object, got {type(cursor).__name__}"
            )
            _log_failure(exc)
            raise DecodeError(exc)
        try:
            nodes.append(ErrorDocument.model_validate(dict(cursor)))
        except ValidationError as exc:
            _log_failure(exc)
            raise DecodeError(exc) from exc
        cursor = cursor.get(_CAUSE)
        if cursor is None:
            break

    result = nodes[-1].to_error()
    for node in reversed(nodes[:-1]):
        result = node.to_error(cause=result)
    return result


def _log_failure(exc: BaseException) -> None:
    """Record why a payload was rejected."""
    _LOGGER.debug(
        "structured error decode failed",
        extra={"reason": type(exc).__name__, "detail": str(exc)},
    )
