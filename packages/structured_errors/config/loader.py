"""Settings loading with a fixed precedence cascade.

Highest precedence first:
1) CLI params
2) Environment variables
3) ~/.config/structured_errors/structured_errors.yaml
4) Model defaults

Environment variables use the ``STRUCTERR_`` prefix and ``__`` between nested
keys, e.g. ``STRUCTERR_IDS__PROVIDER=uuid4`` sets ``ids.provider``. Values are
read as YAML scalars, so ``false``, ``12`` and ``[a, b]`` arrive typed.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterable, Mapping

import yaml

from .models import DEFAULT_CONFIG_PATH, StructuredErrorSettings

ENV_PREFIX = "STRUCTERR_"
_NESTING = "__"


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
    env_prefix: str = ENV_PREFIX,
) -> StructuredErrorSettings:
    """Resolve settings from every source and validate the merged result."""
    layers = (
        _read_config_file(Path(config_path) if config_path else DEFAULT_CONFIG_PATH),
        _read_environment(os.environ if environ is None else environ, env_prefix),
        cli_params or {},
    )
    return StructuredErrorSettings.model_validate(_layer(layers))


def _read_config_file(path: Path) -> Mapping[str, Any]:
    if not path.is_file():
        return {}
    document = yaml.safe_load(path.read_text(encoding="utf-8"))
    if document is None:
        return {}
    if not isinstance(document, Mapping):
        raise ValueError(f"Config file must contain a top-level mapping: {path}")
    return document


def _read_environment(environ: Mapping[str, str], prefix: str) -> dict[str, Any]:
    tree: dict[str, Any] = {}
    for name, raw in environ.items():
        if not name.startswith(prefix):
            continue
        keys = [part.strip().lower() for part in name[len(prefix) :].split(_NESTING)]
        keys = [key for key in keys if key]
        if not keys:
            continue
        branch = tree
        for key in keys[:-1]:
            if not isinstance(branch.get(key), dict):
                branch[key] = {}
            branch = branch[key]
        branch[keys[-1]] = _parse_scalar(raw)
    return tree


def _parse_scalar(raw: str) -> Any:
    """Interpret one env value the way YAML would; fall back to the raw text."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def _layer(layers: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge mappings left to right; nested mappings merge, other values replace."""
    merged: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            current = merged.get(str(key))
            if isinstance(value, Mapping):
                base = current if isinstance(current, Mapping) else {}
                merged[str(key)] = _layer((base, value))
            elif isinstance(value, list):
                merged[str(key)] = list(value)
            else:
                merged[str(key)] = value
    return merged
