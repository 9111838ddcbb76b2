"""YAML configuration parser for sdkfinder.

This module provides parsing and validation for sdkfinder.yaml:

    version: 1
    override_key: SOFTWARE\\MyCompany\\Android
    store:
      path: ~/.config/sdkfinder/preferences.yaml
      lock_timeout: 10

Every field except ``version`` is optional.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from sdkfinder.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "sdkfinder.yaml"


@dataclass
class StoreConfig:
    """Key-value store configuration."""

    path: Optional[Path] = None  # YAML store file; None selects the host default
    lock_timeout: float = 10.0


@dataclass
class SdkFinderConfig:
    """Complete sdkfinder configuration."""

    version: int = 1
    override_key: Optional[str] = None
    store: StoreConfig = field(default_factory=StoreConfig)


def parse_config(config_path: Path) -> SdkFinderConfig:
    """
    Parse sdkfinder.yaml configuration file.

    Args:
        config_path: Path to sdkfinder.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If the file is missing or the configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    config = _parse_and_validate(data, base_dir=config_path.parent)
    logger.debug(f"Loaded configuration from {config_path}")
    return config


def load_config(
    config_path: Optional[Path] = None, search_dir: Optional[Path] = None
) -> SdkFinderConfig:
    """
    Load configuration, falling back to defaults when no file exists.

    Args:
        config_path: Explicit configuration file; must exist when given
        search_dir: Directory searched for sdkfinder.yaml (default: cwd)

    Returns:
        Parsed configuration, or defaults if no file was found
    """
    if config_path is not None:
        return parse_config(Path(config_path))

    candidate = (search_dir or Path.cwd()) / CONFIG_FILENAME
    if candidate.exists():
        return parse_config(candidate)

    logger.debug(f"No {CONFIG_FILENAME} found, using defaults")
    return SdkFinderConfig()


def _parse_and_validate(data: dict, base_dir: Path) -> SdkFinderConfig:
    """Parse and validate configuration data."""
    if "version" not in data:
        raise ConfigError("Missing required field: version")

    if data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    override_key = data.get("override_key")
    if override_key is not None and not isinstance(override_key, str):
        raise ConfigError("override_key must be a string")

    return SdkFinderConfig(
        version=data["version"],
        override_key=override_key or None,
        store=_parse_store_config(data.get("store") or {}, base_dir),
    )


def _parse_store_config(data: dict, base_dir: Path) -> StoreConfig:
    """Parse store configuration."""
    if not isinstance(data, dict):
        raise ConfigError("store must be a mapping")

    path = data.get("path")
    if path is not None:
        if not isinstance(path, str):
            raise ConfigError("store.path must be a string")
        path = Path(path).expanduser()
        # Relative paths are relative to the configuration file
        if not path.is_absolute():
            path = base_dir / path

    lock_timeout = data.get("lock_timeout", 10.0)
    if isinstance(lock_timeout, bool) or not isinstance(lock_timeout, (int, float)):
        raise ConfigError("store.lock_timeout must be a number")
    if lock_timeout < 0:
        raise ConfigError("store.lock_timeout must not be negative")

    return StoreConfig(path=path, lock_timeout=float(lock_timeout))
