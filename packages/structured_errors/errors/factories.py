"""Canonical constructors for structured errors.

Every constructor captures the stacktrace of its caller. Helpers that wrap
these constructors pass ``depth`` to report their own caller instead.
"""

from __future__ import annotations

from typing import Mapping

from packages.structured_errors.stacktrace import Stacktrace

from . import codes
from .codes import ErrorKind
from .types import StructuredError


def new(
    code: int,
    name: str,
    message: str,
    *,
    metadata: Mapping[str, object] | None = None,
    depth: int = 0,
) -> StructuredError:
    """Create an error with a custom classification."""
    return StructuredError(code, name, message, meta=metadata, depth=depth + 1)


def from_kind(
    kind: ErrorKind,
    message: str,
    *,
    metadata: Mapping[str, object] | None = None,
    depth: int = 0,
) -> StructuredError:
    """Create an error with one of the canonical classifications."""
    return StructuredError(
        kind.code, kind.label, message, meta=metadata, depth=depth + 1
    )


def bad_request(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create a bad-request (400) error."""
    return from_kind(ErrorKind.BAD_REQUEST, message, metadata=metadata, depth=depth + 1)


def unauthorized(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create an unauthorized (401) error."""
    return from_kind(ErrorKind.UNAUTHORIZED, message, metadata=metadata, depth=depth + 1)


def forbidden(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create a forbidden (403) error."""
    return from_kind(ErrorKind.FORBIDDEN, message, metadata=metadata, depth=depth + 1)


def not_found(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create a not-found (404) error."""
    return from_kind(ErrorKind.NOT_FOUND, message, metadata=metadata, depth=depth + 1)


def not_acceptable(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create a not-acceptable (406) error."""
    return from_kind(
        ErrorKind.NOT_ACCEPTABLE, message, metadata=metadata, depth=depth + 1
    )


def timeout(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create a timeout (408) error."""
    return from_kind(ErrorKind.TIMEOUT, message, metadata=metadata, depth=depth + 1)


def too_early(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create a too-early (425) error."""
    return from_kind(ErrorKind.TOO_EARLY, message, metadata=metadata, depth=depth + 1)


def too_many_requests(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create a too-many-requests (429) error."""
    return from_kind(
        ErrorKind.TOO_MANY_REQUESTS, message, metadata=metadata, depth=depth + 1
    )


def service_error(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create a service (500) error, the default classification for wrapped errors."""
    return from_kind(
        ErrorKind.SERVICE_ERROR, message, metadata=metadata, depth=depth + 1
    )


def not_implemented(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create a not-implemented (501) error."""
    return from_kind(
        ErrorKind.NOT_IMPLEMENTED, message, metadata=metadata, depth=depth + 1
    )


def unavailable(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create an unavailable (503) error."""
    return from_kind(ErrorKind.UNAVAILABLE, message, metadata=metadata, depth=depth + 1)


def warning(
    message: str, *, metadata: Mapping[str, object] | None = None, depth: int = 0
) -> StructuredError:
    """Create a warning (555) error."""
    return from_kind(ErrorKind.WARNING, message, metadata=metadata, depth=depth + 1)


def nil_error(*, depth: int = 0) -> StructuredError:
    """Create the not-found error reported for a missing (nil) value."""
    return from_kind(ErrorKind.NOT_FOUND, codes.NIL_ERROR_MESSAGE, depth=depth + 1)


def empty() -> StructuredError:
    """Create a blank value: no id, classification, message or call site."""
    return StructuredError(0, "", "", error_id="", stacktrace=Stacktrace.empty())
