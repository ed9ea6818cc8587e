"""Process-wide default configuration and config file loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from .exceptions import ConfigError
from .models import CompareConfig

logger = logging.getLogger(__name__)

_default_config = CompareConfig()


def get_config() -> CompareConfig:
    """Return the process-wide default configuration."""
    return _default_config


def configure(config: CompareConfig = None, **overrides) -> CompareConfig:
    """
    Replace the process-wide default configuration.

    Meant to be called once, before comparisons start. A comparison
    already in progress keeps the config it started with.

        configure(float_precision=6, max_diff=50)

    Args:
        config: A complete config to install (defaults to the current one)
        **overrides: Fields to change on top of it

    Returns:
        The newly installed configuration
    """
    global _default_config

    base = config or _default_config
    _default_config = base.replace(**overrides) if overrides else base
    logger.debug("Default comparison config set: %s", _default_config)
    return _default_config


def reset_config() -> CompareConfig:
    """Restore the built-in defaults."""
    return configure(CompareConfig())


def load_config(path: str | Path) -> CompareConfig:
    """
    Load a configuration from a YAML or JSON file.

    The file may hold the settings at its root or under a top-level
    ``deepcmp`` key.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file is not valid UTF-8: {e}", {"path": str(path)})

    # JSON is valid YAML, but keep the JSON error message for .json files
    try:
        if path.suffix == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to parse config file: {e}", {"path": str(path)})

    if isinstance(data, dict) and isinstance(data.get("deepcmp"), dict):
        data = data["deepcmp"]

    return CompareConfig.from_dict(data)
