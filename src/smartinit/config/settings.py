# src/smartinit/config/settings.py
"""
Configuration resolution.

Precedence, lowest to highest:
    built-in defaults -> .smartinit/config.yml -> SMARTINIT_* env vars -> CLI overrides
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from smartinit.config.models import SmartInitConfig
from smartinit.errors import ConfigError
from smartinit.logging import get_logger

_logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(".smartinit") / "config.yml"

_ENV_KEYS = {
    "log_level": "SMARTINIT_LOG_LEVEL",
    "verbose": "SMARTINIT_VERBOSE",
}


def _load_file(path: Path) -> Dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(raw).__name__}")
    return raw


def _from_env() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for key, var in _ENV_KEYS.items():
        value = os.getenv(var)
        if value is None or value == "":
            continue
        if key == "verbose":
            values[key] = value.lower() in ("1", "true", "yes")
        else:
            values[key] = value
    return values


def resolve_effective_config(
    config_path: Optional[Union[str, Path]] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> SmartInitConfig:
    """
    Build the effective configuration from every layer.

    An explicit `config_path` must exist; the default path is optional.
    Override values of None are ignored so CLI flags left unset fall through.
    """
    merged: Dict[str, Any] = {}

    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        merged.update(_load_file(path))
    elif DEFAULT_CONFIG_PATH.is_file():
        merged.update(_load_file(DEFAULT_CONFIG_PATH))

    merged.update(_from_env())

    if cli_overrides:
        merged.update({k: v for k, v in cli_overrides.items() if v is not None})

    try:
        config = SmartInitConfig(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    _logger.debug("Effective config: %s", config.model_dump())
    return config
