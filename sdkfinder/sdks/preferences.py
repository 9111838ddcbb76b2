"""
Persisting the user's preferred toolchain locations.

The writer records intent only: nothing is validated at write time. The
resolver re-validates the stored path on every read, so a toolchain that is
later moved or reinstalled simply stops (or starts) matching.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from sdkfinder.core.environment import HostEnvironment
from sdkfinder.core.interfaces import Bitness, KeyValueStore, Scope
from sdkfinder.sdks.candidates import StoreLocation
from sdkfinder.sdks.kinds import ToolchainKind

logger = logging.getLogger(__name__)

DEFAULT_OVERRIDE_KEY = r"SOFTWARE\Novell\Mono for Android"
OVERRIDE_KEY_ENV_VAR = "XAMARIN_ANDROID_REGKEY"


def resolve_override_key(
    environment: HostEnvironment, configured_key: Optional[str] = None
) -> str:
    """
    Determine the key holding the user's overrides.

    Args:
        environment: Host environment; XAMARIN_ANDROID_REGKEY redirects the key
        configured_key: Key from configuration, used when the variable is unset

    Returns:
        The environment variable if set and not blank, else configured_key,
        else the default key
    """
    from_env = environment.get_variable(OVERRIDE_KEY_ENV_VAR)
    if from_env and from_env.strip():
        return from_env
    if configured_key and configured_key.strip():
        return configured_key
    return DEFAULT_OVERRIDE_KEY


class PreferenceWriter:
    """
    Writes explicit per-kind overrides to the current-user scope.

    Attributes:
        store: Key-value store receiving the value
        environment: Host environment used to resolve the override key
        configured_key: Override key from configuration, if any
    """

    def __init__(
        self,
        store: KeyValueStore,
        environment: HostEnvironment,
        configured_key: Optional[str] = None,
    ):
        self.store = store
        self.environment = environment
        self.configured_key = configured_key

    @property
    def override_key(self) -> str:
        return resolve_override_key(self.environment, self.configured_key)

    def location(self, kind: ToolchainKind) -> StoreLocation:
        """Return where the override for kind is stored."""
        return StoreLocation(
            Scope.CURRENT_USER,
            self.override_key,
            kind.preference_value,
            Bitness.KEY32,
        )

    def set_preferred_path(
        self, kind: ToolchainKind, path: Optional[Union[str, Path]]
    ) -> None:
        """
        Store path as the override for kind, or clear it.

        Args:
            kind: Toolchain kind
            path: Directory to prefer; None, blank or Path("") clears the override

        Raises:
            StoreUnavailableError: If the store cannot be accessed
            StoreWriteError: If the value cannot be written
        """
        # Path("") renders as "."
        if path is None or str(path).strip() in ("", "."):
            value = ""
        else:
            value = str(path)
        location = self.location(kind)

        self.store.set_string(
            location.scope,
            location.key_path,
            location.value_name,
            value,
            location.bitness,
        )

        if value:
            logger.info(f"Set preferred {kind.display_name} path to {value} ({location})")
        else:
            logger.info(f"Cleared preferred {kind.display_name} path ({location})")


__all__ = [
    "DEFAULT_OVERRIDE_KEY",
    "OVERRIDE_KEY_ENV_VAR",
    "PreferenceWriter",
    "resolve_override_key",
]
