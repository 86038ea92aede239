"""Logging context carried in a ``contextvars`` variable.

Bound values (service name, request id, the id of the error being handled)
are copied onto every record by ``ContextFilter``. Each bind replaces the
mapping instead of mutating it, so async tasks and threads that copied the
context keep their own view.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator, Mapping

from . import fields

if TYPE_CHECKING:
    from packages.structured_errors.errors import StructuredError

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar(
    "structured_errors_log_context", default={}
)


def _stringified(values: Mapping[str, object]) -> dict[str, str]:
    return {str(key): str(value) for key, value in values.items() if value is not None}


def get_context() -> dict[str, str]:
    """Return a copy of the current logging context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Merge values into the context as strings; ``None`` values are skipped."""
    added = _stringified(values)
    if added:
        _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **added})


def bind_error_context(err: StructuredError) -> None:
    """Bind the id and classification of ``err``."""
    bind_context(
        **{
            fields.ERROR_ID: err.id or None,
            fields.ERROR_CODE: err.code,
            fields.ERROR_NAME: err.name or None,
        }
    )


def clear_context(*keys: str) -> None:
    """Drop ``keys`` from the context, or everything when none are given."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    _LOG_CONTEXT.set({key: value for key, value in _LOG_CONTEXT.get().items() if key not in keys})


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of the block only."""
    token = _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **_stringified(values)})
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)
