"""Shared fixtures for structured error tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from packages.structured_errors import reset_runtime
from packages.structured_errors.logging import clear_context


@pytest.fixture(autouse=True)
def _isolated_runtime() -> Iterator[None]:
    """Give every test a fresh process runtime and logging context."""
    reset_runtime()
    clear_context()
    yield
    reset_runtime()
    clear_context()
