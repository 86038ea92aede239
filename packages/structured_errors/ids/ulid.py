"""Time-ordered ULID identifiers for structured errors.

An identifier is 26 Crockford Base32 characters: ten for a 48-bit millisecond
timestamp and sixteen for 80 random bits. Identifiers created later sort after
earlier ones, which keeps error ids useful as log correlation keys.
"""

from __future__ import annotations

import secrets
import time

_CROCKFORD = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_TIMESTAMP_CHARS = 10
_RANDOM_CHARS = 16
_TIMESTAMP_LIMIT = 1 << 48


def _encode(number: int, width: int) -> str:
    digits = ["0"] * width
    for index in range(width - 1, -1, -1):
        number, digit = divmod(number, 32)
        digits[index] = _CROCKFORD[digit]
    return "".join(digits)


def new_ulid(*, timestamp_ms: int | None = None) -> str:
    """Return a new ULID string for ``timestamp_ms`` (defaults to now)."""
    stamp = time.time_ns() // 1_000_000 if timestamp_ms is None else int(timestamp_ms)
    if not 0 <= stamp < _TIMESTAMP_LIMIT:
        raise ValueError(f"ULID timestamp out of 48-bit range: {stamp}")
    return _encode(stamp, _TIMESTAMP_CHARS) + _encode(
        secrets.randbits(80), _RANDOM_CHARS
    )


def ulid_timestamp_ms(value: str) -> int:
    """Return the millisecond timestamp embedded in a ULID string."""
    prefix = value.strip().upper()[:_TIMESTAMP_CHARS]
    if len(prefix) != _TIMESTAMP_CHARS:
        raise ValueError("ULID string is too short")
    stamp = 0
    for char in prefix:
        digit = _CROCKFORD.find(char)
        if digit < 0:
            raise ValueError(f"Invalid ULID character: {char!r}")
        stamp = stamp * 32 + digit
    return stamp
