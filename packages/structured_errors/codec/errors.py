"""Codec failures, reported as structured errors themselves."""

from __future__ import annotations

from packages.structured_errors.errors import StructuredError, codes, wrap

DECODE_FAILED_MESSAGE = "decode structured error failed"


class DecodeError(StructuredError):
    """Raised when a payload is not a valid structured error document.

    Classified as a warning; the underlying parse or validation failure is
    attached as the cause.
    """

    def __init__(self, reason: BaseException, *, depth: int = 0) -> None:
        super().__init__(
            codes.WARNING_CODE,
            codes.WARNING_NAME,
            DECODE_FAILED_MESSAGE,
            cause=wrap(reason, depth=depth + 1),
            depth=depth + 1,
        )
