"""
Core functionality for sdkfinder.

This package contains the capability interfaces and host abstractions that
the resolver and the stores depend on.
"""

from .environment import (
    HostEnvironment,
    HostTools,
)

from .exceptions import (
    SdkFinderError,
    StoreError,
    StoreUnavailableError,
    StoreWriteError,
    ConfigError,
)

from .filesystem import (
    LocalFileSystem,
    find_executable_in_directory,
    short_form_path,
)

from .interfaces import (
    Bitness,
    FileSystem,
    KeyValueStore,
    Scope,
    SdkLocator,
)

from .platform import (
    PlatformInfo,
    detect_platform,
    clear_platform_cache,
)

__all__ = [
    "HostEnvironment",
    "HostTools",
    "SdkFinderError",
    "StoreError",
    "StoreUnavailableError",
    "StoreWriteError",
    "ConfigError",
    "LocalFileSystem",
    "find_executable_in_directory",
    "short_form_path",
    "Bitness",
    "FileSystem",
    "KeyValueStore",
    "Scope",
    "SdkLocator",
    "PlatformInfo",
    "detect_platform",
    "clear_platform_cache",
]
