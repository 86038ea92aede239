"""Source-root discovery and path shortening for captured stacktraces.

Absolute paths differ between build machines, containers and developer
checkouts. Stripping the import root a file was loaded from keeps traces
reproducible: ``/srv/app/.venv/lib/python3.12/site-packages/pkg/mod.py`` and
``/home/dev/pkg/mod.py`` both become ``pkg/mod.py``.
"""

from __future__ import annotations

import os
import sys
import sysconfig
from typing import Iterable

_INTERPRETER_PATH_KEYS = ("stdlib", "platstdlib", "purelib", "platlib")


def normalize_root(value: str) -> str:
    """Normalize one root into an absolute, forward-slash path without trailing slash."""
    candidate = value.strip()
    if not candidate:
        return ""
    absolute = os.path.normpath(os.path.abspath(os.path.expanduser(candidate)))
    return absolute.replace("\\", "/").rstrip("/")


def discover_source_roots(
    extra_roots: Iterable[str] = (),
    *,
    include_sys_path: bool = True,
) -> tuple[str, ...]:
    """Return normalized source roots, longest first.

    Explicit ``extra_roots`` always participate; interpreter and ``sys.path``
    roots are added when ``include_sys_path`` is set.
    """
    candidates = list(extra_roots)
    if include_sys_path:
        candidates.extend(entry for entry in sys.path if entry)
        interpreter_paths = sysconfig.get_paths()
        candidates.extend(
            interpreter_paths[key]
            for key in _INTERPRETER_PATH_KEYS
            if key in interpreter_paths
        )

    roots = {root for root in (normalize_root(item) for item in candidates) if root}
    return tuple(sorted(roots, key=lambda root: (-len(root), root)))


def strip_source_root(path: str, roots: Iterable[str]) -> str:
    """Strip the longest matching root from ``path``.

    Paths that live under none of the roots are returned unmodified.
    """
    normalized = path.replace("\\", "/")
    best = ""
    for root in roots:
        if len(root) > len(best) and normalized.startswith(root + "/"):
            best = root
    if not best:
        return path
    return normalized[len(best) + 1 :]
