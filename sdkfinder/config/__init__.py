"""Configuration module for sdkfinder.

This module provides YAML configuration parsing and validation for sdkfinder.yaml.
"""

from sdkfinder.config.parser import (
    CONFIG_FILENAME,
    SdkFinderConfig,
    StoreConfig,
    load_config,
    parse_config,
)
from sdkfinder.core.exceptions import ConfigError

__all__ = [
    "CONFIG_FILENAME",
    "SdkFinderConfig",
    "StoreConfig",
    "ConfigError",
    "load_config",
    "parse_config",
]
