"""Structured errors: classified, chainable, serializable error values.

Typical use::

    from packages.structured_errors import not_found, decode, encode

    err = not_found("user not found").with_meta("user_id", "42").with_cause(exc)
    payload = encode(err)
    assert decode(payload).contains(exc)
"""

from packages.structured_errors.codec import DecodeError, decode, encode
from packages.structured_errors.errors import (
    ErrorKind,
    ErrorList,
    Metadata,
    StructuredError,
    as_structured,
    bad_request,
    contains,
    empty,
    forbidden,
    map_error,
    new,
    nil_error,
    not_acceptable,
    not_found,
    not_implemented,
    service_error,
    timeout,
    too_early,
    too_many_requests,
    unauthorized,
    unavailable,
    warning,
    wrap,
)
from packages.structured_errors.render import RenderMode
from packages.structured_errors.runtime import (
    ErrorRuntime,
    configure_runtime,
    get_runtime,
    reset_runtime,
)
from packages.structured_errors.stacktrace import Stacktrace

__all__ = [
    "DecodeError",
    "ErrorKind",
    "ErrorList",
    "ErrorRuntime",
    "Metadata",
    "RenderMode",
    "Stacktrace",
    "StructuredError",
    "as_structured",
    "bad_request",
    "configure_runtime",
    "contains",
    "decode",
    "empty",
    "encode",
    "forbidden",
    "get_runtime",
    "map_error",
    "new",
    "nil_error",
    "not_acceptable",
    "not_found",
    "not_implemented",
    "reset_runtime",
    "service_error",
    "timeout",
    "too_early",
    "too_many_requests",
    "unauthorized",
    "unavailable",
    "warning",
    "wrap",
]
