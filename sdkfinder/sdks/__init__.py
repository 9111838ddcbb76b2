"""
Toolchain location module for sdkfinder.

This module provides functionality for:
- Toolchain kinds and their structural signatures
- Candidate enumeration and validation
- Preferred-path resolution and persistence
"""

from sdkfinder.sdks.candidates import (
    Candidate,
    CandidateSource,
    StoreLocation,
    ValidationResult,
)
from sdkfinder.sdks.kinds import (
    KindProfile,
    ToolchainKind,
)
from sdkfinder.sdks.preferences import (
    DEFAULT_OVERRIDE_KEY,
    OVERRIDE_KEY_ENV_VAR,
    PreferenceWriter,
    resolve_override_key,
)
from sdkfinder.sdks.resolver import SdkResolver
from sdkfinder.sdks.validation import LocationValidator

__all__ = [
    # Model
    "ToolchainKind",
    "KindProfile",
    "Candidate",
    "CandidateSource",
    "StoreLocation",
    "ValidationResult",
    # Validation
    "LocationValidator",
    # Resolution
    "SdkResolver",
    # Preferences
    "PreferenceWriter",
    "resolve_override_key",
    "DEFAULT_OVERRIDE_KEY",
    "OVERRIDE_KEY_ENV_VAR",
]
