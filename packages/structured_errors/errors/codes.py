"""Canonical classification table for structured errors.

Each classification pairs an HTTP-style status code with a short symbolic
name. Custom classifications are allowed through ``new``; these are the ones
the dedicated constructors use.
"""

from __future__ import annotations

from enum import Enum

# Client side
BAD_REQUEST_CODE = 400
BAD_REQUEST_NAME = "***BAD REQUEST***"
UNAUTHORIZED_CODE = 401
UNAUTHORIZED_NAME = "***UNAUTHORIZED***"
FORBIDDEN_CODE = 403
FORBIDDEN_NAME = "***FORBIDDEN***"
NOT_FOUND_CODE = 404
NOT_FOUND_NAME = "***NOT FOUND***"
NOT_ACCEPTABLE_CODE = 406
NOT_ACCEPTABLE_NAME = "***NOT ACCEPTABLE***"
TIMEOUT_CODE = 408
TIMEOUT_NAME = "***TIMEOUT***"
TOO_EARLY_CODE = 425
TOO_EARLY_NAME = "***TOO EARLY***"
TOO_MANY_REQUESTS_CODE = 429
TOO_MANY_REQUESTS_NAME = "***TOO MANY REQUEST***"

# Service side
SERVICE_ERROR_CODE = 500
SERVICE_ERROR_NAME = "***SERVICE EXECUTE FAILED***"
NOT_IMPLEMENTED_CODE = 501
NOT_IMPLEMENTED_NAME = "***SERVICE NOT IMPLEMENTED***"
UNAVAILABLE_CODE = 503
UNAVAILABLE_NAME = "***SERVICE UNAVAILABLE***"
WARNING_CODE = 555
WARNING_NAME = "***WARNING***"

NIL_ERROR_MESSAGE = "NIL"


class ErrorKind(Enum):
    """Classifications with a dedicated constructor."""

    BAD_REQUEST = (BAD_REQUEST_CODE, BAD_REQUEST_NAME)
    UNAUTHORIZED = (UNAUTHORIZED_CODE, UNAUTHORIZED_NAME)
    FORBIDDEN = (FORBIDDEN_CODE, FORBIDDEN_NAME)
    NOT_FOUND = (NOT_FOUND_CODE, NOT_FOUND_NAME)
    NOT_ACCEPTABLE = (NOT_ACCEPTABLE_CODE, NOT_ACCEPTABLE_NAME)
    TIMEOUT = (TIMEOUT_CODE, TIMEOUT_NAME)
    TOO_EARLY = (TOO_EARLY_CODE, TOO_EARLY_NAME)
    TOO_MANY_REQUESTS = (TOO_MANY_REQUESTS_CODE, TOO_MANY_REQUESTS_NAME)
    SERVICE_ERROR = (SERVICE_ERROR_CODE, SERVICE_ERROR_NAME)
    NOT_IMPLEMENTED = (NOT_IMPLEMENTED_CODE, NOT_IMPLEMENTED_NAME)
    UNAVAILABLE = (UNAVAILABLE_CODE, UNAVAILABLE_NAME)
    WARNING = (WARNING_CODE, WARNING_NAME)

    @property
    def code(self) -> int:
        """Return the numeric classification code."""
        return self.value[0]

    @property
    def label(self) -> str:
        """Return the symbolic classification name."""
        return self.value[1]

    @classmethod
    def from_code(cls, code: int) -> ErrorKind | None:
        """Return the canonical kind for ``code``, or ``None`` when custom."""
        for kind in cls:
            if kind.code == code:
                return kind
        return None
