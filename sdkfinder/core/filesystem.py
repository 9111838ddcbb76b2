"""
Filesystem utilities for sdkfinder.

This module provides:
- LocalFileSystem, the real implementation of the FileSystem probes
- Marker executable lookup with host executable extensions
- Atomic file writes (used by the YAML store)
- Windows short (8.3) path conversion
"""

import fnmatch
import logging
import sys
import tempfile
from pathlib import Path
from typing import Iterable, List, Union

from sdkfinder.core.interfaces import FileSystem, PathLike

if sys.platform == "win32":
    import ctypes
    from ctypes import wintypes

logger = logging.getLogger(__name__)


# ============================================================================
# Filesystem probes
# ============================================================================


class LocalFileSystem(FileSystem):
    """FileSystem backed by the real disk."""

    def is_dir(self, path: PathLike) -> bool:
        try:
            return Path(path).is_dir()
        except OSError as e:
            logger.debug(f"Cannot stat {path}: {e}")
            return False

    def is_file(self, path: PathLike) -> bool:
        try:
            return Path(path).is_file()
        except OSError as e:
            logger.debug(f"Cannot stat {path}: {e}")
            return False

    def list_subdirectories(self, path: PathLike, pattern: str) -> List[Path]:
        directory = Path(path)
        if not self.is_dir(directory):
            return []

        try:
            entries = list(directory.iterdir())
        except OSError as e:
            logger.debug(f"Cannot list {directory}: {e}")
            return []

        matches = [
            entry
            for entry in entries
            if fnmatch.fnmatch(entry.name, pattern) and self.is_dir(entry)
        ]
        return sorted(matches, key=lambda p: p.name)


def find_executable_in_directory(
    filesystem: FileSystem,
    name: str,
    directory: PathLike,
    extensions: Iterable[str] = ("",),
) -> List[Path]:
    """
    Find an executable in a single directory.

    Args:
        filesystem: Filesystem to probe
        name: Executable name, with or without extension
        directory: Directory to look in
        extensions: Suffixes to append to name, tried in order

    Returns:
        Every existing '<name><ext>' file, in extension order

    Example:
        >>> find_executable_in_directory(LocalFileSystem(), "adb", sdk / "platform-tools")
        [PosixPath('.../platform-tools/adb')]
    """
    directory = Path(directory)
    found = []
    for ext in extensions:
        candidate = directory / f"{name}{ext}"
        if filesystem.is_file(candidate):
            found.append(candidate)
    return found


# ============================================================================
# Safe File Operations
# ============================================================================


def atomic_write(
    file_path: Union[str, Path], content: str, encoding: str = "utf-8"
) -> None:
    """
    Write file atomically using temp file + rename.

    The file is never left partially written; on failure the previous
    content (if any) is unchanged.
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    # Create temp file in same directory (ensures same filesystem)
    temp_fd, temp_path_str = tempfile.mkstemp(
        dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
    )
    temp_path = Path(temp_path_str)

    try:
        with open(temp_fd, "w", encoding=encoding) as f:
            f.write(content)

        temp_path.replace(file_path)

    except Exception:
        try:
            temp_path.unlink(missing_ok=True)
        except OSError:
            pass
        raise


# ============================================================================
# Windows Short Paths
# ============================================================================


def short_form_path(path: PathLike) -> str:
    """
    Return the Windows 8.3 short form of an existing path.

    Tools such as the NDK build scripts choke on spaces in paths; the short
    form has none. On other hosts, or when the API fails, the path is
    returned unchanged.
    """
    path_str = str(path)
    if sys.platform != "win32":
        return path_str

    GetShortPathNameW = ctypes.windll.kernel32.GetShortPathNameW  # type: ignore
    GetShortPathNameW.argtypes = (wintypes.LPCWSTR, wintypes.LPWSTR, wintypes.DWORD)
    GetShortPathNameW.restype = wintypes.DWORD

    size = GetShortPathNameW(path_str, None, 0)
    if size == 0:
        logger.debug(f"GetShortPathNameW failed for {path_str}")
        return path_str

    buffer = ctypes.create_unicode_buffer(size)
    if GetShortPathNameW(path_str, buffer, size) == 0:
        logger.debug(f"GetShortPathNameW failed for {path_str}")
        return path_str
    return buffer.value


__all__ = [
    "LocalFileSystem",
    "find_executable_in_directory",
    "atomic_write",
    "short_form_path",
]
