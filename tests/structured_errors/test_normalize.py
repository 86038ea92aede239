"""Tests for wrapping, mapping and inspecting arbitrary exceptions."""

from __future__ import annotations

import pytest

from packages.structured_errors import (
    ErrorKind,
    ErrorList,
    StructuredError,
    as_structured,
    contains,
    map_error,
    not_found,
    service_error,
    wrap,
)
from packages.structured_errors.errors import codes, is_kind


def test_wrap_none_reports_missing_value() -> None:
    """Wrapping nothing yields a service error naming the problem."""
    err = wrap(None)

    assert err.code == codes.SERVICE_ERROR_CODE
    assert err.message == "can not map nil to structured error"


def test_wrap_passes_structured_errors_through() -> None:
    """A structured error is returned unchanged."""
    err = not_found("x")

    assert wrap(err) is err


def test_wrap_plain_exception_keeps_message_and_origin() -> None:
    """Foreign exceptions become service errors linked to the original."""
    original = RuntimeError("disk full")

    err = wrap(original)

    assert err.code == codes.SERVICE_ERROR_CODE
    assert err.name == codes.SERVICE_ERROR_NAME
    assert err.message == "disk full"
    assert err.origin is original
    assert err.__cause__ is original


def test_wrap_uses_exception_type_for_blank_messages() -> None:
    """An exception without a message falls back to its type name."""
    assert wrap(KeyError()).message == "KeyError"


@pytest.mark.parametrize(
    ("exc", "kind"),
    [
        (TimeoutError("slow"), ErrorKind.TIMEOUT),
        (PermissionError("denied"), ErrorKind.FORBIDDEN),
        (ConnectionRefusedError("refused"), ErrorKind.UNAVAILABLE),
        (NotImplementedError("later"), ErrorKind.NOT_IMPLEMENTED),
        (KeyError("k"), ErrorKind.NOT_FOUND),
        (IndexError("i"), ErrorKind.NOT_FOUND),
        (ValueError("v"), ErrorKind.BAD_REQUEST),
        (TypeError("t"), ErrorKind.BAD_REQUEST),
        (RuntimeError("r"), ErrorKind.SERVICE_ERROR),
    ],
)
def test_map_error_classifies_builtin_exceptions(exc: BaseException, kind: ErrorKind) -> None:
    """Builtin exception families map onto canonical classifications."""
    err = map_error(exc)

    assert (err.code, err.name) == (kind.code, kind.label)
    assert err.meta.get("exception_type") == type(exc).__name__
    assert err.origin is exc
    assert is_kind(err, kind) is True


def test_map_error_passes_structured_and_none_through_wrap() -> None:
    """map_error delegates to wrap for structured values and None."""
    err = service_error("x")

    assert map_error(err) is err
    assert map_error(None).message == "can not map nil to structured error"


def test_as_structured() -> None:
    """Only structured errors are returned."""
    err = not_found("x")

    assert as_structured(err) is err
    assert as_structured(ValueError("x")) is None
    assert as_structured(None) is None


def test_is_kind_rejects_foreign_and_other_kinds() -> None:
    """is_kind requires a structured error of the same code."""
    assert is_kind(ValueError("x"), ErrorKind.BAD_REQUEST) is False
    assert is_kind(not_found("x"), ErrorKind.TIMEOUT) is False
    assert is_kind(None, ErrorKind.NOT_FOUND) is False


def test_contains_follows_python_cause_links() -> None:
    """Plain exception chains are searched through __cause__."""
    target = ValueError("root")
    try:
        try:
            raise target
        except ValueError as exc:
            raise RuntimeError("outer") from exc
    except RuntimeError as caught:
        outer = caught

    assert contains(outer, target) is True
    assert contains(outer, KeyError("absent")) is False


def test_contains_switches_to_structured_search() -> None:
    """Once a structured link is reached its chain is searched by message."""
    structured = service_error("outer").with_cause(not_found("deep"))
    plain = RuntimeError("top")
    plain.__cause__ = structured

    assert contains(plain, Exception("deep")) is True
    assert contains(structured, ValueError("outer")) is True


def test_contains_handles_none_and_cycles() -> None:
    """None never matches and cyclic __cause__ links terminate."""
    first = RuntimeError("a")
    second = RuntimeError("b")
    first.__cause__ = second
    second.__cause__ = first

    assert contains(None, first) is False
    assert contains(first, None) is False
    assert contains(first, ValueError("c")) is False


def test_error_list_ignores_none_and_wraps_foreign_errors() -> None:
    """Appended values are stored as structured errors in order."""
    errors = ErrorList()
    errors.append(None)
    errors.append(ValueError("first"))
    errors.extend([not_found("second"), None])

    assert len(errors) == 2
    assert bool(errors) is True
    assert [err.message for err in errors] == ["first", "second"]
    assert all(isinstance(err, StructuredError) for err in errors.errors())


def test_error_list_folds_into_chain() -> None:
    """Each element becomes the cause of the previous one."""
    errors = ErrorList([service_error("0"), service_error("1"), service_error("2")])

    folded = errors.to_error()

    assert folded is not None
    assert [node.message for node in folded.walk()] == ["0", "1", "2"]


def test_empty_error_list_folds_to_none() -> None:
    """Nothing collected means no error."""
    errors = ErrorList()

    assert bool(errors) is False
    assert errors.to_error() is None
