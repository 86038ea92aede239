"""Canonical structured error value type.

A ``StructuredError`` carries a stable identifier, a classification
(``code`` + ``name``), a human message, metadata, the call site it was created
at and an optional chain of causing errors. Values are immutable by
convention: builders return a copy and never touch the receiver, so the same
error can be attached as a cause in several places without aliasing.

The cause chain is singly linked and owned root-to-tail. Every traversal in
this module is iterative, so chains are bounded by memory rather than by the
interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping, Protocol, Sequence, runtime_checkable

from packages.structured_errors.render import RenderMode, render
from packages.structured_errors.runtime import get_runtime
from packages.structured_errors.stacktrace import Stacktrace, capture, from_traceback

from . import codes
from .metadata import Metadata


@runtime_checkable
class MultiError(Protocol):
    """Aggregate exposing the list of underlying errors it collects."""

    def errors(self) -> Sequence[BaseException]:
        """Return underlying errors in attachment order."""
        ...


class StructuredError(Exception):
    """Classified error value with metadata, call site and cause chain."""

    def __init__(
        self,
        code: int,
        name: str,
        message: str,
        *,
        meta: Metadata | Mapping[str, object] | None = None,
        stacktrace: Stacktrace | None = None,
        cause: StructuredError | None = None,
        error_id: str | None = None,
        depth: int = 0,
    ) -> None:
        """Create a new error value.

        ``depth`` skips that many frames above the caller when capturing the
        stacktrace, so library wrappers can report their own caller instead.
        An explicit ``stacktrace`` or ``error_id`` is used as-is.
        """
        super().__init__(str(message))
        if error_id is None or stacktrace is None:
            runtime = get_runtime()
            if error_id is None:
                error_id = runtime.id_provider()
            if stacktrace is None:
                stacktrace = capture(depth + 1, roots=runtime.source_roots)
        self._id = error_id
        self._code = int(code)
        self._name = name
        self._message = str(message)
        self._meta = meta.copy() if isinstance(meta, Metadata) else Metadata(meta)
        self._stacktrace = stacktrace
        self._cause = cause
        self._origin: BaseException | None = None
        self.__cause__ = cause

    @property
    def id(self) -> str:
        """Return the identifier assigned at creation."""
        return self._id

    @property
    def code(self) -> int:
        """Return the numeric classification."""
        return self._code

    @property
    def name(self) -> str:
        """Return the symbolic classification."""
        return self._name

    @property
    def message(self) -> str:
        """Return the human-readable message."""
        return self._message

    @property
    def meta(self) -> Metadata:
        """Return a copy of the attached metadata."""
        return self._meta.copy()

    @property
    def stacktrace(self) -> Stacktrace:
        """Return the call site captured at construction."""
        return self._stacktrace

    @property
    def cause(self) -> StructuredError | None:
        """Return the direct cause, if any."""
        return self._cause

    @property
    def origin(self) -> BaseException | None:
        """Return the foreign exception this value was wrapped from, if any."""
        return self._origin

    @property
    def root_cause(self) -> StructuredError:
        """Return the last error of the chain (the receiver when it has no cause)."""
        node = self
        while node._cause is not None:
            node = node._cause
        return node

    @property
    def chain_length(self) -> int:
        """Return the number of errors in the chain, receiver included."""
        return sum(1 for _ in self.walk())

    def walk(self) -> Iterator[StructuredError]:
        """Yield the receiver and then every cause, closest first."""
        node: StructuredError | None = self
        while node is not None:
            yield node
            node = node._cause

    def with_meta(self, key: str, value: object) -> StructuredError:
        """Return a copy with ``key`` set to the single value ``value``."""
        meta = self._meta.copy()
        meta.put(key, [value])
        return self._replace(meta=meta)

    def with_metas(self, values: Mapping[str, object]) -> StructuredError:
        """Return a copy with every ``values`` entry applied as ``with_meta``."""
        if not values:
            return self
        meta = self._meta.copy()
        for key, value in values.items():
            meta.put(key, [value])
        return self._replace(meta=meta)

    def with_cause(
        self, cause: BaseException | MultiError | None, *, depth: int = 0
    ) -> StructuredError:
        """Return a copy with ``cause`` attached at the end of the chain.

        Plain exceptions are wrapped as service errors, aggregates are folded
        element by element, and ``None`` returns the receiver unchanged.
        """
        if cause is None:
            return self
        attached = _to_chain(cause, depth + 1)
        if attached is None:
            return self
        return self._append_cause(attached)

    def contains(self, target: BaseException | None) -> bool:
        """Return whether ``target`` is present anywhere in the chain.

        A node matches when its message equals the target's message, or when
        it is (or was wrapped from) the target itself. A plain exception's
        message is ``str(exc)`` as-is, so an empty message matches an empty one.
        """
        if target is None:
            return False
        target_message = target._message if isinstance(target, StructuredError) else str(target)
        for node in self.walk():
            if node._message == target_message:
                return True
            if node is target or node._origin is target or node == target:
                return True
        return False

    def format(self, mode: RenderMode | str = RenderMode.COMPACT) -> str:
        """Render as message-only (compact) or full diagnostic block (detailed)."""
        return render(self, RenderMode(mode))

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "v"):
            return render(self, RenderMode.COMPACT)
        if format_spec in ("+", "+v", RenderMode.DETAILED.value):
            return render(self, RenderMode.DETAILED)
        return format(self._message, format_spec)

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self._code!r}, name={self._name!r}, "
            f"message={self._message!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StructuredError):
            return NotImplemented
        left: StructuredError | None = self
        right: StructuredError | None = other
        while left is not None and right is not None:
            if left is right:
                return True
            if left._identity() != right._identity():
                return False
            left, right = left._cause, right._cause
        return left is None and right is None

    def __hash__(self) -> int:
        return hash(self._id)

    def __copy__(self) -> StructuredError:
        return self._replace()

    def __deepcopy__(self, memo: dict[int, Any]) -> StructuredError:
        return self._replace()

    def __reduce__(self) -> tuple[Any, ...]:
        from packages.structured_errors.codec import encode

        return (_restore, (type(self), encode(self)))

    def _identity(self) -> tuple[object, ...]:
        """Return the fields compared by equality for one node."""
        return (
            self._id,
            self._code,
            self._name,
            self._message,
            self._meta,
            self._stacktrace,
        )

    def _replace(self, **changes: Any) -> StructuredError:
        """Return a shallow copy of the same class with ``changes`` applied."""
        clone = type(self).__new__(type(self))
        clone.args = self.args
        clone.__dict__.update(self.__dict__)
        if "meta" in changes:
            clone._meta = changes["meta"]
        else:
            clone._meta = self._meta.copy()
        if "cause" in changes:
            clone._cause = changes["cause"]
        clone.__cause__ = clone._cause if clone._cause is not None else clone._origin
        return clone

    def _append_cause(self, attached: StructuredError) -> StructuredError:
        """Copy the chain down to its tail and hang ``attached`` below it."""
        rebuilt = attached
        for node in reversed(list(self.walk())):
            rebuilt = node._replace(cause=rebuilt)
        return rebuilt


def message_of(err: BaseException) -> str:
    """Return the message used when wrapping ``err``; never empty for plain exceptions."""
    if isinstance(err, StructuredError):
        return err.message
    return str(err) or type(err).__name__


def underlying_errors(err: object) -> Sequence[BaseException] | None:
    """Return the members of an aggregate error, or ``None`` for single errors."""
    if isinstance(err, StructuredError):
        return None
    if isinstance(err, BaseExceptionGroup):
        return err.exceptions
    if isinstance(err, BaseException):
        return None
    if isinstance(err, MultiError):
        return err.errors()
    return None


def wrap_exception(
    exc: BaseException,
    depth: int = 0,
    *,
    code: int = codes.SERVICE_ERROR_CODE,
    name: str = codes.SERVICE_ERROR_NAME,
    meta: Mapping[str, object] | None = None,
) -> StructuredError:
    """Wrap a foreign exception, by default as a service error, keeping its message.

    The stacktrace is the innermost frame the exception was raised from; an
    exception that was never raised falls back to the caller's frame.
    """
    runtime = get_runtime()
    stacktrace = from_traceback(exc.__traceback__, roots=runtime.source_roots)
    wrapped = StructuredError(
        code,
        name,
        message_of(exc),
        meta=meta,
        stacktrace=stacktrace,
        depth=depth + 1,
    )
    wrapped._origin = exc
    wrapped.__cause__ = exc
    return wrapped


def _to_chain(cause: BaseException | MultiError, depth: int) -> StructuredError | None:
    """Convert any supported cause into one structured chain."""
    if isinstance(cause, StructuredError):
        return cause
    members = underlying_errors(cause)
    if members is None:
        if isinstance(cause, BaseException):
            return wrap_exception(cause, depth + 1)
        return None
    chains: list[StructuredError] = []
    for member in members:
        if member is None:
            continue
        chain = _to_chain(member, depth + 1)
        if chain is not None:
            chains.append(chain)
    if not chains:
        return None
    folded = chains[-1]
    for chain in reversed(chains[:-1]):
        folded = chain._append_cause(folded)
    return folded


def _restore(cls: type[StructuredError], payload: bytes) -> StructuredError:
    """Unpickle hook: decode the wire form back into ``cls``."""
    from packages.structured_errors.codec import decode

    restored = decode(payload)
    if type(restored) is cls:
        return restored
    retyped = cls.__new__(cls)
    retyped.args = restored.args
    retyped.__dict__.update(restored.__dict__)
    retyped.__cause__ = restored.__cause__
    return retyped

