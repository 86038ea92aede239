"""Public structured error API."""

from . import codes
from .aggregate import ErrorList
from .codes import ErrorKind
from .factories import (
    bad_request,
    empty,
    forbidden,
    from_kind,
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
)
from .metadata import Metadata
from .normalize import as_structured, contains, is_kind, map_error, wrap
from .types import MultiError, StructuredError, message_of

__all__ = [
    "ErrorKind",
    "ErrorList",
    "Metadata",
    "MultiError",
    "StructuredError",
    "as_structured",
    "bad_request",
    "codes",
    "contains",
    "empty",
    "forbidden",
    "from_kind",
    "is_kind",
    "map_error",
    "message_of",
    "new",
    "nil_error",
    "not_acceptable",
    "not_found",
    "not_implemented",
    "service_error",
    "timeout",
    "too_early",
    "too_many_requests",
    "unauthorized",
    "unavailable",
    "warning",
    "wrap",
]
