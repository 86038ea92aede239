"""Typed configuration models for structured error runtime settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CONFIG_PATH = (
    Path.home() / ".config" / "structured_errors" / "structured_errors.yaml"
)


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "structured-errors"
    environment: str = "dev"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        """Accept lower-case level names from env vars and YAML."""
        if isinstance(value, str):
            return value.strip().upper()
        return value


class StacktraceSettings(BaseModel):
    """Source-root stripping applied to captured stacktrace file paths."""

    model_config = ConfigDict(frozen=True)

    source_roots: tuple[str, ...] = ()
    discover_sys_path: bool = True

    @field_validator("source_roots", mode="before")
    @classmethod
    def _split_roots(cls, value: object) -> object:
        """Accept an ``os.pathsep``-style string as well as a list."""
        if isinstance(value, str):
            return tuple(item for item in value.split(os.pathsep) if item.strip())
        return value


class IdSettings(BaseModel):
    """Unique identifier provider selection."""

    model_config = ConfigDict(frozen=True)

    provider: Literal["ulid", "uuid4"] = "ulid"


class StructuredErrorSettings(BaseModel):
    """Root settings resolved from cli/env/yaml/defaults sources."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    stacktrace: StacktraceSettings = Field(default_factory=StacktraceSettings)
    ids: IdSettings = Field(default_factory=IdSettings)
