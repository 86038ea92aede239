"""Process-wide, read-only runtime used by structured error constructors.

The runtime bundles the collaborators every new error needs: the unique-ID
provider and the source roots stripped from stacktrace paths. It is built once,
either explicitly at startup via ``configure_runtime`` or lazily from
``load_settings()`` on first use, and is never mutated afterwards.

Only the ``ids`` and ``stacktrace`` sections are consumed here. The ``logging``
section is applied by the application at startup, typically with
``configure_logging_from_settings(load_settings().logging)``.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from packages.structured_errors.config import StructuredErrorSettings, load_settings
from packages.structured_errors.ids import IdProvider, resolve_id_provider
from packages.structured_errors.stacktrace.roots import discover_source_roots


@dataclass(frozen=True)
class ErrorRuntime:
    """Frozen collaborators consumed while constructing structured errors."""

    id_provider: IdProvider
    source_roots: tuple[str, ...]

    @classmethod
    def from_settings(cls, settings: StructuredErrorSettings) -> ErrorRuntime:
        """Build a runtime from typed settings."""
        return cls(
            id_provider=resolve_id_provider(settings.ids.provider),
            source_roots=discover_source_roots(
                settings.stacktrace.source_roots,
                include_sys_path=settings.stacktrace.discover_sys_path,
            ),
        )


_LOCK = threading.Lock()
_RUNTIME: ErrorRuntime | None = None


def get_runtime() -> ErrorRuntime:
    """Return the process runtime, building it from settings on first use."""
    global _RUNTIME
    runtime = _RUNTIME
    if runtime is not None:
        return runtime
    with _LOCK:
        if _RUNTIME is None:
            _RUNTIME = ErrorRuntime.from_settings(load_settings())
        return _RUNTIME


def configure_runtime(
    settings: StructuredErrorSettings | None = None,
    *,
    id_provider: IdProvider | None = None,
    source_roots: tuple[str, ...] | None = None,
) -> ErrorRuntime:
    """Install the process runtime; intended to be called once at startup.

    Explicit ``id_provider`` / ``source_roots`` override what ``settings``
    would produce.
    """
    global _RUNTIME
    base = ErrorRuntime.from_settings(settings or load_settings())
    runtime = ErrorRuntime(
        id_provider=id_provider or base.id_provider,
        source_roots=base.source_roots if source_roots is None else source_roots,
    )
    with _LOCK:
        _RUNTIME = runtime
    return runtime


def reset_runtime() -> None:
    """Drop the installed runtime so the next use rebuilds it."""
    global _RUNTIME
    with _LOCK:
        _RUNTIME = None
