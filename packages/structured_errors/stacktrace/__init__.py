"""Stacktrace capture and normalization for structured errors."""

from .capture import capture, from_traceback
from .models import UNKNOWN, Stacktrace
from .roots import discover_source_roots, normalize_root, strip_source_root

__all__ = [
    "UNKNOWN",
    "Stacktrace",
    "capture",
    "discover_source_roots",
    "from_traceback",
    "normalize_root",
    "strip_source_root",
]
