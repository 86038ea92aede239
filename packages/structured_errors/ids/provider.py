"""Pluggable unique-ID providers used to stamp new structured errors."""

from __future__ import annotations

from typing import Callable, Literal
from uuid import uuid4

from .ulid import new_ulid

IdProvider = Callable[[], str]
IdProviderName = Literal["ulid", "uuid4"]


def ulid_provider() -> str:
    """Return a new time-ordered ULID string."""
    return new_ulid()


def uuid4_provider() -> str:
    """Return a compact random identifier."""
    return uuid4().hex


_PROVIDERS: dict[str, IdProvider] = {
    "ulid": ulid_provider,
    "uuid4": uuid4_provider,
}


def resolve_id_provider(name: str) -> IdProvider:
    """Return the provider registered under ``name``."""
    try:
        return _PROVIDERS[name]
    except KeyError:
        known = ", ".join(sorted(_PROVIDERS))
        raise ValueError(f"unknown id provider {name!r}; expected one of: {known}") from None
