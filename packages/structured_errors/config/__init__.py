"""Public API for structured error configuration."""

from .loader import ENV_PREFIX, load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    IdSettings,
    LoggingSettings,
    StacktraceSettings,
    StructuredErrorSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "IdSettings",
    "LoggingSettings",
    "StacktraceSettings",
    "StructuredErrorSettings",
    "load_settings",
]
