"""Conversion and inspection helpers for arbitrary exceptions."""

from __future__ import annotations

from .codes import ErrorKind
from .factories import service_error
from .types import StructuredError, wrap_exception

_NIL_WRAP_MESSAGE = "can not map nil to structured error"

# Checked in order; subclasses must precede their bases.
_EXCEPTION_KINDS: tuple[tuple[type[BaseException], ErrorKind], ...] = (
    (TimeoutError, ErrorKind.TIMEOUT),
    (PermissionError, ErrorKind.FORBIDDEN),
    (ConnectionError, ErrorKind.UNAVAILABLE),
    (NotImplementedError, ErrorKind.NOT_IMPLEMENTED),
    (LookupError, ErrorKind.NOT_FOUND),
    (ValueError, ErrorKind.BAD_REQUEST),
    (TypeError, ErrorKind.BAD_REQUEST),
)


def wrap(err: BaseException | None, *, depth: int = 0) -> StructuredError:
    """Return ``err`` as a structured error.

    Structured errors pass through unchanged. Anything else becomes a service
    error carrying the original message; ``None`` becomes a service error
    reporting the missing value.
    """
    if err is None:
        return service_error(_NIL_WRAP_MESSAGE, depth=depth + 1)
    if isinstance(err, StructuredError):
        return err
    return wrap_exception(err, depth + 1)


def map_error(err: BaseException | None, *, depth: int = 0) -> StructuredError:
    """Translate a foreign exception into the closest canonical classification.

    This mapping is intentionally conservative and generic: unknown exception
    types become service errors, exactly like ``wrap``. The original type name
    is kept as ``exception_type`` metadata.
    """
    if err is None or isinstance(err, StructuredError):
        return wrap(err, depth=depth + 1)

    kind = ErrorKind.SERVICE_ERROR
    for exc_type, candidate in _EXCEPTION_KINDS:
        if isinstance(err, exc_type):
            kind = candidate
            break
    return wrap_exception(
        err,
        depth + 1,
        code=kind.code,
        name=kind.label,
        meta={"exception_type": type(err).__name__},
    )


def as_structured(err: BaseException | None) -> StructuredError | None:
    """Return ``err`` when it is a structured error, otherwise ``None``."""
    if isinstance(err, StructuredError):
        return err
    return None


def contains(err: BaseException | None, target: BaseException | None) -> bool:
    """Return whether ``target`` is present in ``err`` or its causes.

    Structured errors use ``StructuredError.contains``. Other exceptions are
    compared by identity or equality while following explicit ``__cause__``
    links, switching to ``StructuredError.contains`` at the first structured
    link.
    """
    if err is None or target is None:
        return False

    seen: set[int] = set()
    node: BaseException | None = err
    while node is not None and id(node) not in seen:
        if isinstance(node, StructuredError):
            return node.contains(target)
        if node is target or node == target:
            return True
        seen.add(id(node))
        node = node.__cause__
    return False


def is_kind(err: BaseException | None, kind: ErrorKind) -> bool:
    """Return whether ``err`` is a structured error classified as ``kind``."""
    structured = as_structured(err)
    return structured is not None and structured.code == kind.code
