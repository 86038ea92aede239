"""Tests for the process-wide structured error runtime."""

from __future__ import annotations

from pathlib import Path

import pytest

from packages.structured_errors import (
    configure_runtime,
    get_runtime,
    reset_runtime,
    service_error,
)
from packages.structured_errors.config import load_settings
from packages.structured_errors.ids import resolve_id_provider, uuid4_provider


def test_runtime_is_built_lazily_and_reused() -> None:
    """The first lookup builds the runtime and later lookups share it."""
    first = get_runtime()

    assert get_runtime() is first
    assert first.source_roots


def test_reset_runtime_forces_rebuild() -> None:
    """A reset drops the installed runtime."""
    first = get_runtime()
    reset_runtime()

    assert get_runtime() is not first


def test_configure_runtime_from_settings(tmp_path: Path) -> None:
    """Settings select the id provider and explicit source roots."""
    settings = load_settings(
        config_path=tmp_path / "absent.yaml",
        environ={
            "STRUCTERR_IDS__PROVIDER": "uuid4",
            "STRUCTERR_STACKTRACE__SOURCE_ROOTS": "/srv/app",
            "STRUCTERR_STACKTRACE__DISCOVER_SYS_PATH": "false",
        },
    )

    runtime = configure_runtime(settings)

    assert get_runtime() is runtime
    assert runtime.id_provider is uuid4_provider
    assert runtime.source_roots == ("/srv/app",)
    err = service_error("x")
    assert len(err.id) == 32
    assert set(err.id) <= set("0123456789abcdef")


def test_configure_runtime_overrides_win_over_settings(tmp_path: Path) -> None:
    """Explicit collaborators replace what the settings would build."""
    settings = load_settings(config_path=tmp_path / "absent.yaml", environ={})

    runtime = configure_runtime(settings, id_provider=lambda: "fixed", source_roots=())

    assert runtime.source_roots == ()
    assert service_error("x").id == "fixed"


def test_resolve_id_provider_rejects_unknown_names() -> None:
    """Unknown provider names fail loudly."""
    with pytest.raises(ValueError, match="unknown id provider"):
        resolve_id_provider("sequential")
