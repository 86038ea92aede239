"""Compact and detailed text rendering for structured errors.

Detailed layout, one field per line::

    ID      = [<id>]
    CN      = [<code>][<name>]
    MESSAGE = <message>
    META    = <key> : <value>
              <key> : <value>
    STACK   = <fn> <file>:<line>
    CAUSE   = <cause message>
            = <grandcause message>

The ``ID`` line is omitted for an empty id and the ``META`` block for empty
metadata. Rendering only reads the error.
"""

from __future__ import annotations

import io
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from packages.structured_errors.errors.types import StructuredError

_META_INDENT = " " * len("META    = ")
_CAUSE_CONTINUATION = "        = "


class RenderMode(str, Enum):
    """Text rendering modes."""

    COMPACT = "compact"
    DETAILED = "detailed"


def render(err: StructuredError, mode: RenderMode | str = RenderMode.COMPACT) -> str:
    """Render ``err`` in the requested mode."""
    if RenderMode(mode) is RenderMode.DETAILED:
        return render_detailed(err)
    return render_compact(err)


def render_compact(err: StructuredError) -> str:
    """Return the end-user form: the message only."""
    return err.message


def render_detailed(err: StructuredError) -> str:
    """Return the multi-line diagnostic block including every cause message."""
    with io.StringIO() as buffer:
        if err.id:
            buffer.write(f"ID      = [{err.id}]\n")
        buffer.write(f"CN      = [{err.code}][{err.name}]\n")
        buffer.write(f"MESSAGE = {err.message}\n")
        for index, (key, values) in enumerate(err.meta.items()):
            prefix = "META    = " if index == 0 else _META_INDENT
            buffer.write(f"{prefix}{key} : {', '.join(values)}\n")
        buffer.write(f"STACK   = {err.stacktrace}\n")
        for index, cause in enumerate(err.walk()):
            if index == 0:
                continue
            prefix = "CAUSE   = " if index == 1 else _CAUSE_CONTINUATION
            buffer.write(f"{prefix}{cause.message}\n")
        content = buffer.getvalue()
    return content[:-1]
