"""
Core interfaces for sdkfinder.

The resolver depends only on these abstractions. Concrete stores live in
``sdkfinder.store``, the real filesystem in ``sdkfinder.core.filesystem``, and
tests substitute in-memory fixtures.
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Union

PathLike = Union[str, Path]


class Scope(Enum):
    """Root of a key-value store lookup."""

    CURRENT_USER = "HKCU"
    LOCAL_MACHINE = "HKLM"


class Bitness(Enum):
    """View of the store on hosts that keep separate 32-bit and 64-bit views."""

    KEY32 = 32
    KEY64 = 64


class KeyValueStore(ABC):
    """
    Abstract persisted key-value store (the Windows registry, or a file).

    Implementations return None for a missing key or value and raise
    StoreUnavailableError only when the store itself cannot be accessed.
    """

    @abstractmethod
    def get_string(
        self, scope: Scope, key_path: str, value_name: str, bitness: Bitness
    ) -> Optional[str]:
        """
        Read a string value.

        Args:
            scope: Store root to read from
            key_path: Backslash-separated key path (e.g. 'SOFTWARE\\Android SDK Tools')
            value_name: Name of the value under the key
            bitness: Store view to read

        Returns:
            The stored string, or None if the key or value is absent

        Raises:
            StoreUnavailableError: If the store cannot be accessed
        """
        pass

    @abstractmethod
    def set_string(
        self,
        scope: Scope,
        key_path: str,
        value_name: str,
        value: str,
        bitness: Bitness,
    ) -> None:
        """
        Write a string value, creating the key if needed.

        Raises:
            StoreUnavailableError: If the store cannot be accessed
            StoreWriteError: If the value cannot be persisted
        """
        pass


class FileSystem(ABC):
    """Abstract read-only filesystem probes used during resolution."""

    @abstractmethod
    def is_dir(self, path: PathLike) -> bool:
        """Return True if path is an existing directory."""
        pass

    @abstractmethod
    def is_file(self, path: PathLike) -> bool:
        """Return True if path is an existing regular file."""
        pass

    @abstractmethod
    def list_subdirectories(self, path: PathLike, pattern: str) -> List[Path]:
        """
        List immediate subdirectories of path whose name matches a glob pattern.

        Returns:
            Matching directories sorted by name; empty if path is not a directory
        """
        pass


class SdkLocator(ABC):
    """
    Capability interface for locating toolchains on one kind of host.

    Each host flavour provides one implementation, chosen once at startup by
    the caller.
    """

    @abstractmethod
    def preferred_path(self, kind) -> Optional[Path]:
        """Return the first valid install directory for kind, or None."""
        pass

    @abstractmethod
    def all_available_paths(self, kind) -> Iterator[Path]:
        """Lazily yield every valid install directory for kind in priority order."""
        pass

    @abstractmethod
    def set_preferred_path(self, kind, path: Optional[PathLike]) -> None:
        """Persist (or clear, when path is None/empty) the user override for kind."""
        pass


__all__ = [
    "PathLike",
    "Scope",
    "Bitness",
    "KeyValueStore",
    "FileSystem",
    "SdkLocator",
]
