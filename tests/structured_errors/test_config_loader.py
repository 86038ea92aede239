"""Tests for structured error settings loading."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from packages.structured_errors.config import load_settings


def test_load_settings_applies_precedence_cascade(tmp_path: Path) -> None:
    """CLI params should override env, env should override YAML, then defaults."""
    config_file = tmp_path / "structured_errors.yaml"
    config_file.write_text(
        "\n".join(
            [
                "logging:",
                "  level: WARNING",
                "  service: billing",
                "ids:",
                "  provider: uuid4",
                "stacktrace:",
                "  source_roots:",
                "    - /srv/app",
            ]
        ),
        encoding="utf-8",
    )

    settings = load_settings(
        cli_params={"logging": {"level": "debug"}},
        environ={
            "STRUCTERR_LOGGING__LEVEL": "ERROR",
            "STRUCTERR_LOGGING__JSON_OUTPUT": "false",
            "STRUCTERR_IDS__PROVIDER": "ulid",
        },
        config_path=config_file,
    )

    assert settings.logging.level == "DEBUG"
    assert settings.logging.json_output is False
    assert settings.logging.service == "billing"
    assert settings.ids.provider == "ulid"
    assert settings.stacktrace.source_roots == ("/srv/app",)


def test_load_settings_uses_model_defaults_when_sources_missing(tmp_path: Path) -> None:
    """Settings should fall back to model defaults when env and YAML are absent."""
    settings = load_settings(config_path=tmp_path / "absent.yaml", environ={})

    assert settings.logging.level == "INFO"
    assert settings.logging.json_output is True
    assert settings.logging.service == "structured-errors"
    assert settings.ids.provider == "ulid"
    assert settings.stacktrace.source_roots == ()
    assert settings.stacktrace.discover_sys_path is True


def test_load_settings_splits_source_roots_from_env(tmp_path: Path) -> None:
    """A path-list string in the environment becomes a tuple of roots."""
    settings = load_settings(
        config_path=tmp_path / "absent.yaml",
        environ={
            "STRUCTERR_STACKTRACE__SOURCE_ROOTS": os.pathsep.join(["/srv/app", "/opt/lib"]),
            "STRUCTERR_STACKTRACE__DISCOVER_SYS_PATH": "false",
        },
    )

    assert settings.stacktrace.source_roots == ("/srv/app", "/opt/lib")
    assert settings.stacktrace.discover_sys_path is False


def test_load_settings_ignores_unprefixed_env(tmp_path: Path) -> None:
    """Only variables carrying the prefix are read."""
    settings = load_settings(
        config_path=tmp_path / "absent.yaml",
        environ={"IDS__PROVIDER": "uuid4", "OTHER_LOGGING__LEVEL": "ERROR"},
    )

    assert settings.ids.provider == "ulid"
    assert settings.logging.level == "INFO"


def test_load_settings_rejects_non_mapping_yaml(tmp_path: Path) -> None:
    """A YAML document that is not a mapping is a configuration error."""
    config_file = tmp_path / "structured_errors.yaml"
    config_file.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping"):
        load_settings(config_path=config_file, environ={})


def test_load_settings_rejects_unknown_provider(tmp_path: Path) -> None:
    """Invalid values surface as pydantic validation errors."""
    with pytest.raises(ValidationError):
        load_settings(
            config_path=tmp_path / "absent.yaml",
            environ={"STRUCTERR_IDS__PROVIDER": "sequential"},
        )
