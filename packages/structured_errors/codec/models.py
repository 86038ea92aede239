"""Wire documents for the structured error JSON shape.

One ``ErrorDocument`` describes a single chain node; the ``cause`` member is
handled by the codec so that chains of any length are walked iteratively.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from packages.structured_errors.errors import Metadata, StructuredError
from packages.structured_errors.stacktrace import Stacktrace


class MetaPairDocument(BaseModel):
    """One metadata value: ``{"key": ..., "value": ...}``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str
    value: str


class StacktraceDocument(BaseModel):
    """Call-site frame: ``{"fn": ..., "file": ..., "line": ...}``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    fn: str = ""
    file: str = ""
    line: int = 0


class ErrorDocument(BaseModel):
    """One structured error node without its cause.

    ``None`` marks an omitted field; the encoder never emits empty or zero
    values for ``id``, ``code``, ``name``, ``message`` and ``meta``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = None
    code: int | None = None
    name: str | None = None
    message: str | None = None
    meta: list[MetaPairDocument] | None = None
    stacktrace: StacktraceDocument | None = None

    @classmethod
    def from_error(cls, err: StructuredError) -> ErrorDocument:
        """Project one chain node into its wire document."""
        meta = err.meta
        stacktrace = err.stacktrace
        return cls(
            id=err.id or None,
            code=err.code or None,
            name=err.name or None,
            message=err.message or None,
            meta=(
                None
                if meta.is_empty()
                else [MetaPairDocument(key=key, value=value) for key, value in meta.pairs()]
            ),
            stacktrace=StacktraceDocument(
                fn=stacktrace.fn, file=stacktrace.file, line=stacktrace.line
            ),
        )

    def to_error(self, cause: StructuredError | None = None) -> StructuredError:
        """Rebuild the chain node, hanging ``cause`` below it."""
        stacktrace = (
            Stacktrace(fn=self.stacktrace.fn, file=self.stacktrace.file, line=self.stacktrace.line)
            if self.stacktrace is not None
            else Stacktrace.empty()
        )
        return StructuredError(
            self.code or 0,
            self.name or "",
            self.message or "",
            meta=Metadata.from_pairs((pair.key, pair.value) for pair in self.meta or ()),
            stacktrace=stacktrace,
            cause=cause,
            error_id=self.id or "",
        )
