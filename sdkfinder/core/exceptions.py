"""
Centralized exception hierarchy for sdkfinder.

Only environment-level failures are exceptions. A missing key, value,
directory or marker executable is an ordinary negative result and is never
raised.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class SdkFinderError(Exception):
    """Base exception for all sdkfinder errors."""

    pass


# ============================================================================
# Store Exceptions
# ============================================================================


class StoreError(SdkFinderError):
    """Base exception for key-value store errors."""

    pass


class StoreUnavailableError(StoreError):
    """Raised when the key-value store itself cannot be opened or read."""

    def __init__(self, location: str, reason: str = ""):
        self.location = location
        self.reason = reason
        msg = f"Key-value store unavailable: {location}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class StoreWriteError(StoreError):
    """Raised when a value cannot be persisted."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(SdkFinderError):
    """Configuration parsing or validation error."""

    pass
