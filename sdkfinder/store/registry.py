"""
Windows registry implementation of the key-value store.

Values are read and written as REG_SZ strings. The 32-bit and 64-bit registry
views are selected with KEY_WOW64_32KEY / KEY_WOW64_64KEY, so a 64-bit Python
still sees the keys written by 32-bit installers.
"""

import logging
import sys
from typing import Optional

from sdkfinder.core.exceptions import StoreUnavailableError, StoreWriteError
from sdkfinder.core.interfaces import Bitness, KeyValueStore, Scope

if sys.platform == "win32":
    import winreg

logger = logging.getLogger(__name__)


class WindowsRegistryStore(KeyValueStore):
    """
    Key-value store backed by the Windows registry.

    A key or value that is missing or cannot be opened (access denied, absent
    from the requested view) reads as None, like any other absent source.
    StoreUnavailableError is raised only when there is no registry at all.
    """

    def __init__(self):
        if sys.platform != "win32":
            raise StoreUnavailableError(
                "Windows registry", "the registry only exists on Windows hosts"
            )

    def get_string(
        self, scope: Scope, key_path: str, value_name: str, bitness: Bitness
    ) -> Optional[str]:
        access = winreg.KEY_READ | self._view_flag(bitness)
        location = f"{scope.value}\\{key_path}\\{value_name}"

        try:
            with winreg.OpenKey(self._root(scope), key_path, 0, access) as key:
                value, value_type = winreg.QueryValueEx(key, value_name)
        except FileNotFoundError:
            return None
        except OSError as e:
            # Access denied or a view that cannot open one key: not found
            logger.info(f"  Cannot read {location}: {e}")
            return None

        if value_type == winreg.REG_EXPAND_SZ:
            return winreg.ExpandEnvironmentStrings(value)
        if value_type != winreg.REG_SZ:
            logger.debug(f"Ignoring non-string registry value {location}")
            return None
        return value

    def set_string(
        self,
        scope: Scope,
        key_path: str,
        value_name: str,
        value: str,
        bitness: Bitness,
    ) -> None:
        access = winreg.KEY_WRITE | self._view_flag(bitness)
        location = f"{scope.value}\\{key_path}\\{value_name}"

        try:
            with winreg.CreateKeyEx(self._root(scope), key_path, 0, access) as key:
                winreg.SetValueEx(key, value_name, 0, winreg.REG_SZ, value)
        except OSError as e:
            raise StoreWriteError(f"Failed to write {location}: {e}") from e

        logger.debug(f"Wrote registry value {location}")

    @staticmethod
    def _root(scope: Scope):
        if scope is Scope.CURRENT_USER:
            return winreg.HKEY_CURRENT_USER
        return winreg.HKEY_LOCAL_MACHINE

    @staticmethod
    def _view_flag(bitness: Bitness) -> int:
        if bitness is Bitness.KEY64:
            return winreg.KEY_WOW64_64KEY
        return winreg.KEY_WOW64_32KEY


__all__ = ["WindowsRegistryStore"]
