"""
Mock implementations for testing sdkfinder components.

This package provides mock implementations of external dependencies and
system interactions to enable isolated, deterministic testing.
"""

from .store import MemoryKeyValueStore

__all__ = [
    "MemoryKeyValueStore",
]
