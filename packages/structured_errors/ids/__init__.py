"""Unique identifier providers for structured errors."""

from packages.structured_errors.ids.provider import (
    IdProvider,
    IdProviderName,
    resolve_id_provider,
    ulid_provider,
    uuid4_provider,
)
from packages.structured_errors.ids.ulid import new_ulid, ulid_timestamp_ms

__all__ = [
    "IdProvider",
    "IdProviderName",
    "new_ulid",
    "resolve_id_provider",
    "ulid_provider",
    "ulid_timestamp_ms",
    "uuid4_provider",
]
