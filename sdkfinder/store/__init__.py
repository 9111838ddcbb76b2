"""
Key-value store implementations for sdkfinder.

- WindowsRegistryStore: the Windows registry (winreg)
- YamlKeyValueStore: a YAML preference file
"""

import logging
from pathlib import Path
from typing import Optional, Union

from sdkfinder.core.interfaces import KeyValueStore
from sdkfinder.core.platform import PlatformInfo, detect_platform
from sdkfinder.store.registry import WindowsRegistryStore
from sdkfinder.store.yaml_store import (
    YamlKeyValueStore,
    default_store_path,
)

logger = logging.getLogger(__name__)


def open_store(
    path: Optional[Union[str, Path]] = None,
    platform: Optional[PlatformInfo] = None,
    lock_timeout: float = 10,
) -> KeyValueStore:
    """
    Open the key-value store to resolve against.

    Args:
        path: YAML store file; when given it is used on every host
        platform: Host platform (default: detected)
        lock_timeout: Seconds a YAML store waits for its write lock

    Returns:
        The registry on Windows, otherwise a YAML store at path or the
        default location
    """
    if path is not None:
        logger.debug(f"Using YAML store {path}")
        return YamlKeyValueStore(path, lock_timeout=lock_timeout)

    if platform is None:
        platform = detect_platform()

    if platform.is_windows:
        logger.debug("Using Windows registry store")
        return WindowsRegistryStore()

    store = YamlKeyValueStore(lock_timeout=lock_timeout)
    logger.debug(f"Using YAML store {store.path}")
    return store


__all__ = [
    "WindowsRegistryStore",
    "YamlKeyValueStore",
    "default_store_path",
    "open_store",
]
