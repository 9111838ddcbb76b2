"""
YAML-file implementation of the key-value store.

Used on hosts without a registry, and anywhere a portable preference file is
wanted (``sdkfinder --store PATH``). The file mirrors the registry layout:

    HKCU:
      SOFTWARE\\Novell\\Mono for Android:
        AndroidSdkDirectory: /opt/android-sdk
    HKLM:
      SOFTWARE\\Android SDK Tools:
        Path: /usr/lib/android-sdk

There is a single view per scope; the bitness argument is accepted and
ignored. The file is re-read on every lookup.
"""

import logging
import platform
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from sdkfinder.core.exceptions import StoreUnavailableError, StoreWriteError
from sdkfinder.core.filesystem import atomic_write
from sdkfinder.core.interfaces import Bitness, KeyValueStore, Scope
from sdkfinder.core.locking import LockTimeout, store_lock

logger = logging.getLogger(__name__)

STORE_FILENAME = "preferences.yaml"


def default_store_path() -> Path:
    """
    Get the default location of the preference file.

    Returns:
        ~/AppData/Local/sdkfinder/preferences.yaml on Windows,
        ~/.sdkfinder/preferences.yaml elsewhere
    """
    if platform.system() == "Windows":
        base = Path.home() / "AppData" / "Local" / "sdkfinder"
    else:
        base = Path.home() / ".sdkfinder"

    return base / STORE_FILENAME


class YamlKeyValueStore(KeyValueStore):
    """
    Key-value store persisted in a YAML file.

    Attributes:
        path: Location of the YAML file (created on first write)
        lock_timeout: Seconds to wait for the write lock
    """

    def __init__(self, path: Optional[Union[str, Path]] = None, lock_timeout: float = 10):
        self.path = Path(path) if path is not None else default_store_path()
        self.lock_timeout = lock_timeout

    def get_string(
        self, scope: Scope, key_path: str, value_name: str, bitness: Bitness
    ) -> Optional[str]:
        data = self._load()

        key = data.get(scope.value, {}).get(key_path)
        if key is None:
            return None
        if not isinstance(key, dict):
            raise StoreUnavailableError(
                str(self.path), f"{scope.value}\\{key_path} is not a mapping"
            )

        value = key.get(value_name)
        if value is None:
            return None
        if isinstance(value, (dict, list)):
            raise StoreUnavailableError(
                str(self.path),
                f"{scope.value}\\{key_path}\\{value_name} is not a string",
            )
        return str(value)

    def set_string(
        self,
        scope: Scope,
        key_path: str,
        value_name: str,
        value: str,
        bitness: Bitness,
    ) -> None:
        try:
            with store_lock(self.path, timeout=self.lock_timeout):
                self._update(scope, key_path, value_name, value)
        except LockTimeout as e:
            raise StoreWriteError(f"Failed to write {self.path}: {e}") from e

        logger.debug(f"Wrote {scope.value}\\{key_path}\\{value_name} to {self.path}")

    def _update(self, scope: Scope, key_path: str, value_name: str, value: str):
        """Read-modify-write one value. Caller holds the store lock."""
        data = self._load()

        key = data.setdefault(scope.value, {}).setdefault(key_path, {})
        if not isinstance(key, dict):
            raise StoreWriteError(
                f"Cannot write {scope.value}\\{key_path}\\{value_name}: "
                f"key is not a mapping in {self.path}"
            )
        key[value_name] = value

        try:
            atomic_write(
                self.path,
                yaml.safe_dump(data, default_flow_style=False, sort_keys=True),
            )
        except OSError as e:
            raise StoreWriteError(f"Failed to write {self.path}: {e}") from e

    def _load(self) -> Dict[str, Dict[str, Any]]:
        """
        Read and structurally check the store file.

        Returns:
            Mapping of scope name to keys; empty if the file does not exist

        Raises:
            StoreUnavailableError: If the file is unreadable or malformed
        """
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise StoreUnavailableError(str(self.path), str(e)) from e
        except yaml.YAMLError as e:
            raise StoreUnavailableError(str(self.path), f"invalid YAML: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise StoreUnavailableError(str(self.path), "top level is not a mapping")

        for scope_name, keys in data.items():
            if keys is None:
                data[scope_name] = {}
            elif not isinstance(keys, dict):
                raise StoreUnavailableError(
                    str(self.path), f"scope {scope_name} is not a mapping"
                )
        return data


__all__ = [
    "YamlKeyValueStore",
    "default_store_path",
    "STORE_FILENAME",
]
