"""Tests for compact and detailed text rendering."""

from __future__ import annotations

from packages.structured_errors import RenderMode, StructuredError, service_error
from packages.structured_errors.render import render, render_compact, render_detailed
from packages.structured_errors.stacktrace import Stacktrace


def _fixed(message: str, **kwargs: object) -> StructuredError:
    """Return an error with deterministic id and call site."""
    return StructuredError(
        500,
        "***SERVICE EXECUTE FAILED***",
        message,
        error_id=kwargs.pop("error_id", "01J0000000000000000000000"),
        stacktrace=Stacktrace("app.handlers.save", "app/handlers.py", 42),
        **kwargs,
    )


def test_example_chain_renders_compact_and_detailed_forms() -> None:
    """foo -> bar -> baz renders message-only or with every cause message."""
    err = service_error("foo").with_cause(service_error("bar").with_cause(service_error("baz")))

    assert err.format(RenderMode.COMPACT) == "foo"
    lines = err.format(RenderMode.DETAILED).splitlines()
    message_lines = [line for line in lines if line.startswith(("MESSAGE", "CAUSE", "        ="))]
    assert message_lines == ["MESSAGE = foo", "CAUSE   = bar", "        = baz"]
    assert err.contains(Exception("baz")) is True


def test_detailed_layout_is_exact() -> None:
    """Fields render in fixed order with aligned metadata continuation lines."""
    err = _fixed("save failed").with_meta("user", "42").with_meta("attempt", "3")
    err = err.with_cause(_fixed("db timeout", error_id="cause-1"))

    assert render_detailed(err) == "\n".join(
        [
            "ID      = [01J0000000000000000000000]",
            "CN      = [500][***SERVICE EXECUTE FAILED***]",
            "MESSAGE = save failed",
            "META    = attempt : 3",
            "          user : 42",
            "STACK   = app.handlers.save app/handlers.py:42",
            "CAUSE   = db timeout",
        ]
    )


def test_detailed_omits_empty_id_and_metadata() -> None:
    """The ID line and META block only appear when populated."""
    err = _fixed("plain", error_id="")

    assert render_detailed(err).splitlines() == [
        "CN      = [500][***SERVICE EXECUTE FAILED***]",
        "MESSAGE = plain",
        "STACK   = app.handlers.save app/handlers.py:42",
    ]


def test_multi_valued_metadata_renders_on_one_line() -> None:
    """Every value of a key is listed on the key's line."""
    err = _fixed("x", meta={"tags": ["a", "b"]})

    assert "META    = tags : a, b" in render_detailed(err).splitlines()


def test_rendering_is_deterministic_and_pure() -> None:
    """Rendering twice yields identical output and leaves the value unchanged."""
    err = _fixed("x").with_meta("b", "2").with_meta("a", "1").with_cause(_fixed("y"))
    before = err.meta.pairs()

    assert render_detailed(err) == render_detailed(err)
    assert err.meta.pairs() == before


def test_render_dispatches_on_mode() -> None:
    """render accepts enum members and their string values."""
    err = _fixed("x")

    assert render(err) == render_compact(err) == "x"
    assert render(err, "detailed") == render_detailed(err)
