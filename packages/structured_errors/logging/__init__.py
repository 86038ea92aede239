"""Public logging API for structured errors.

This package wraps Python's ``logging`` module with opinionated defaults for
stdout emission, structured context propagation and structured error fields.
"""

from .config import (
    ContextFilter,
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    structured_exc_info,
)
from .context import (
    bind_context,
    bind_error_context,
    clear_context,
    get_context,
    log_context,
)

__all__ = [
    "ContextFilter",
    "JsonFormatter",
    "PlainFormatter",
    "bind_context",
    "bind_error_context",
    "clear_context",
    "configure_logging",
    "configure_logging_from_settings",
    "get_context",
    "get_logger",
    "log_context",
    "structured_exc_info",
]
