"""
Test utilities for sdkfinder.
"""

from .installs import (
    make_android_ndk,
    make_android_sdk,
    make_empty_dir,
    make_java_sdk,
)

__all__ = [
    "make_android_sdk",
    "make_android_ndk",
    "make_java_sdk",
    "make_empty_dir",
]
