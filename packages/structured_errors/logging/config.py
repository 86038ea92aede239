"""Stdout logging setup that understands structured errors.

Every record goes to one stdout handler. Records whose ``exc_info`` holds a
``StructuredError`` are expanded: the JSON formatter emits its id,
classification and encoded chain as fields, and the plain formatter prints
the detailed rendering in place of a traceback.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from . import fields
from .context import bind_context, get_context

if TYPE_CHECKING:
    from packages.structured_errors.config import LoggingSettings
    from packages.structured_errors.errors import StructuredError


class ContextFilter(logging.Filter):
    """Copy the bound logging context onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = get_context()
        record.context = context
        record.__dict__.update(context)
        return True


class JsonFormatter(logging.Formatter):
    """One compact JSON document per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload = _core_fields(record)
        err = structured_exc_info(record)
        if err is not None:
            payload.update(_error_fields(err))
        elif record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Single-line text records; structured errors render as a detailed block."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def formatException(self, ei: Any) -> str:
        from packages.structured_errors.errors import StructuredError

        if isinstance(ei[1], StructuredError):
            return f"{ei[1]:+}"
        return super().formatException(ei)

    def format(self, record: logging.LogRecord) -> str:
        # exc_text may have been cached by another handler's formatter.
        record.exc_text = None
        text = super().format(record)
        context = getattr(record, "context", None)
        if context:
            text += " " + " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return text


def _core_fields(record: logging.LogRecord) -> dict[str, Any]:
    payload: dict[str, Any] = {
        fields.TIMESTAMP: datetime.now(UTC).isoformat(),
        fields.LEVEL: record.levelname,
        fields.LOGGER: record.name,
        fields.MESSAGE: record.getMessage(),
    }
    context = getattr(record, "context", None)
    if isinstance(context, dict):
        payload.update(context)
    return payload


def _error_fields(err: StructuredError) -> dict[str, Any]:
    from packages.structured_errors.codec import encode_dict

    return {
        fields.ERROR_ID: err.id,
        fields.ERROR_CODE: err.code,
        fields.ERROR_NAME: err.name,
        fields.ERROR_MESSAGE: err.message,
        fields.ERROR: encode_dict(err),
    }


def structured_exc_info(record: logging.LogRecord) -> StructuredError | None:
    """Return the ``StructuredError`` carried by ``record.exc_info``, if any."""
    from packages.structured_errors.errors import StructuredError

    exc = record.exc_info[1] if record.exc_info else None
    return exc if isinstance(exc, StructuredError) else None


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Route root logging to a single stdout handler.

    Calling again replaces the handler instead of stacking another one.
    ``service`` and ``environment`` are bound into the logging context.
    """
    level = level.upper()
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setLevel(level)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)

    bind_context(**{fields.SERVICE: service or None, fields.ENVIRONMENT: environment or None})


def configure_logging_from_settings(settings: LoggingSettings) -> None:
    """Apply typed ``LoggingSettings``."""
    configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger from the standard hierarchy."""
    return logging.getLogger(name)
