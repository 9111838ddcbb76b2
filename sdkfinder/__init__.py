"""
sdkfinder - locate Android SDK, Android NDK and Java SDK installations.

Usage:
    from sdkfinder import SdkResolver, ToolchainKind, open_store

    resolver = SdkResolver(open_store())
    sdk = resolver.preferred_path(ToolchainKind.ANDROID_SDK)
"""

import logging

from sdkfinder.core.environment import HostEnvironment, HostTools
from sdkfinder.core.exceptions import (
    ConfigError,
    SdkFinderError,
    StoreError,
    StoreUnavailableError,
    StoreWriteError,
)
from sdkfinder.sdks import SdkResolver, ToolchainKind
from sdkfinder.store import open_store

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SdkResolver",
    "ToolchainKind",
    "HostEnvironment",
    "HostTools",
    "open_store",
    "SdkFinderError",
    "StoreError",
    "StoreUnavailableError",
    "StoreWriteError",
    "ConfigError",
]
