"""Call-site resolution for structured errors."""

from __future__ import annotations

import sys
from types import FrameType, TracebackType
from typing import Iterable

from .models import Stacktrace
from .roots import strip_source_root


def capture(skip: int = 0, *, roots: Iterable[str] = ()) -> Stacktrace:
    """Resolve the frame ``skip`` levels above the caller of ``capture``.

    ``skip=0`` is the function that called ``capture``. When the requested frame
    does not exist the unknown sentinel is returned instead of raising.
    """
    if skip < 0:
        return Stacktrace.unknown()
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return Stacktrace.unknown()
    try:
        return _from_frame(frame, frame.f_lineno, roots)
    finally:
        del frame


def from_traceback(
    traceback: TracebackType | None, *, roots: Iterable[str] = ()
) -> Stacktrace | None:
    """Return the innermost frame of ``traceback``, or ``None`` without one."""
    if traceback is None:
        return None
    while traceback.tb_next is not None:
        traceback = traceback.tb_next
    return _from_frame(traceback.tb_frame, traceback.tb_lineno, roots)


def _from_frame(frame: FrameType, line: int | None, roots: Iterable[str]) -> Stacktrace:
    """Build a ``Stacktrace`` from one interpreter frame."""
    code = frame.f_code
    module = frame.f_globals.get("__name__")
    qualname = getattr(code, "co_qualname", code.co_name)
    fn = f"{module}.{qualname}" if module else qualname
    return Stacktrace(
        fn=fn,
        file=strip_source_root(code.co_filename, roots),
        line=line or 0,
    )
