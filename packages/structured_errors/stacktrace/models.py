"""Stacktrace value object captured at structured error construction."""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN = "unknown"


@dataclass(frozen=True)
class Stacktrace:
    """One resolved call-site frame: function, source file and line."""

    fn: str
    file: str
    line: int

    @classmethod
    def unknown(cls) -> Stacktrace:
        """Return the sentinel used when frame resolution fails."""
        return cls(fn=UNKNOWN, file=UNKNOWN, line=0)

    @classmethod
    def empty(cls) -> Stacktrace:
        """Return the zero value used for errors decoded without a stacktrace."""
        return cls(fn="", file="", line=0)

    @property
    def is_unknown(self) -> bool:
        """Return ``True`` when this is the unresolved-frame sentinel."""
        return self == Stacktrace.unknown()

    def __str__(self) -> str:
        return f"{self.fn} {self.file}:{self.line}"
