"""Accumulator folding several failures into one structured chain."""

from __future__ import annotations

from typing import Iterable, Iterator

from .normalize import wrap
from .types import StructuredError


class ErrorList:
    """Ordered collection of errors gathered while processing a batch."""

    def __init__(self, errors: Iterable[BaseException | None] = ()) -> None:
        self._errors: list[StructuredError] = []
        for err in errors:
            self.append(err, depth=1)

    def append(self, err: BaseException | None, *, depth: int = 0) -> None:
        """Append ``err`` (wrapped when foreign); ``None`` is ignored."""
        if err is None:
            return
        self._errors.append(wrap(err, depth=depth + 1))

    def extend(self, errors: Iterable[BaseException | None]) -> None:
        """Append every error of ``errors`` in order."""
        for err in errors:
            self.append(err, depth=1)

    def errors(self) -> list[StructuredError]:
        """Return the collected errors in append order."""
        return list(self._errors)

    def to_error(self) -> StructuredError | None:
        """Fold the list into one chain: each element becomes the cause of the previous.

        Returns ``None`` when nothing was collected.
        """
        if not self._errors:
            return None
        folded = self._errors[-1]
        for err in reversed(self._errors[:-1]):
            folded = err.with_cause(folded)
        return folded

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __iter__(self) -> Iterator[StructuredError]:
        return iter(list(self._errors))
