"""Ordered multimap used for structured error metadata.

Keys are unique and enumerate sorted, so text rendering and JSON encoding of
the same contents are byte-identical across calls. Values of one key keep
their insertion order. A key never maps to an empty value list.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping


class Metadata:
    """Mapping of string keys to one or more string values."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, object] | None = None) -> None:
        self._values: dict[str, list[str]] = {}
        if values:
            for key, items in values.items():
                if isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
                    items = [items]
                self.put(key, items)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, object]]) -> Metadata:
        """Build metadata from ``(key, value)`` pairs, appending repeated keys."""
        meta = cls()
        for key, value in pairs:
            meta.add(key, value)
        return meta

    def add(self, key: str, value: object) -> None:
        """Append ``value`` to the value list of ``key``."""
        self._values.setdefault(str(key), []).append(str(value))

    def put(self, key: str, values: Iterable[object]) -> None:
        """Replace the whole value list of ``key``; an empty list removes it."""
        normalized = [str(value) for value in values]
        if not normalized:
            self._values.pop(str(key), None)
            return
        self._values[str(key)] = normalized

    def get(self, key: str) -> str | None:
        """Return the first value of ``key``, or ``None`` when absent."""
        values = self._values.get(key)
        if not values:
            return None
        return values[0]

    def values(self, key: str) -> list[str] | None:
        """Return a copy of all values of ``key``, or ``None`` when absent."""
        values = self._values.get(key)
        if values is None:
            return None
        return list(values)

    def remove(self, key: str) -> None:
        """Remove ``key``; unknown keys are ignored."""
        self._values.pop(key, None)

    def keys(self) -> list[str]:
        """Return keys in sorted order."""
        return sorted(self._values)

    def items(self) -> list[tuple[str, list[str]]]:
        """Return ``(key, values)`` entries in key order."""
        return [(key, list(self._values[key])) for key in self.keys()]

    def pairs(self) -> list[tuple[str, str]]:
        """Return one ``(key, value)`` pair per value, in key order."""
        return [(key, value) for key in self.keys() for value in self._values[key]]

    def is_empty(self) -> bool:
        """Return ``True`` when no key is present."""
        return not self._values

    def copy(self) -> Metadata:
        """Return an independent copy."""
        clone = Metadata()
        clone._values = {key: list(values) for key, values in self._values.items()}
        return clone

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Metadata):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {values!r}" for key, values in self.items())
        return f"Metadata({{{body}}})"
