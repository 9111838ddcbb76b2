"""
Cross-process locking for sdkfinder.

The YAML key-value store may be written by several processes (an IDE and a
command-line build setting a preferred SDK at the same time). Writes take a
file lock placed next to the store file.

Usage:
    from sdkfinder.core.locking import store_lock

    with store_lock(store_path, timeout=10):
        data = load()
        data[...] = value
        save(data)
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Union

from filelock import FileLock, Timeout as LockTimeout

logger = logging.getLogger(__name__)


def lock_path_for(store_path: Union[str, Path]) -> Path:
    """Return the lock file guarding store_path ('<name>.lock' beside it)."""
    store_path = Path(store_path)
    return store_path.with_name(store_path.name + ".lock")


@contextmanager
def store_lock(store_path: Union[str, Path], timeout: float = 10):
    """
    Acquire the write lock of a file-backed store.

    Args:
        store_path: Path of the store file being modified
        timeout: Maximum wait time in seconds (default: 10)

    Yields:
        None

    Raises:
        LockTimeout: If lock can't be acquired within timeout
    """
    lock_file = lock_path_for(store_path)
    lock_file.parent.mkdir(parents=True, exist_ok=True)
    lock = FileLock(lock_file, timeout=timeout)

    try:
        with lock:
            logger.debug(f"Acquired store lock: {lock_file}")
            yield
            logger.debug(f"Released store lock: {lock_file}")
    except LockTimeout as e:
        logger.error(
            f"Could not acquire store lock after {timeout}s. "
            "Another process may be writing preferences."
        )
        raise LockTimeout(
            f"Could not acquire store lock after {timeout}s. "
            "Another process may be writing preferences."
        ) from e


__all__ = [
    "store_lock",
    "lock_path_for",
    "LockTimeout",
]
