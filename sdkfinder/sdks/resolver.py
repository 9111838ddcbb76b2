"""
sdkfinder/sdks/resolver.py

Locates Android SDK, Android NDK and Java SDK installations from the
persisted user override, installer records, conventional install
directories and versioned NDK directories.
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from sdkfinder.core.environment import HostEnvironment, HostTools
from sdkfinder.core.filesystem import LocalFileSystem, short_form_path
from sdkfinder.core.interfaces import (
    Bitness,
    FileSystem,
    KeyValueStore,
    Scope,
    SdkLocator,
)
from sdkfinder.core.platform import detect_platform
from sdkfinder.sdks.candidates import (
    Candidate,
    CandidateSource,
    StoreLocation,
    ValidationResult,
)
from sdkfinder.sdks.kinds import (
    ANDROID_INSTALLER_KEY,
    ANDROID_INSTALLER_VALUE,
    JDK_CURRENT_VERSION_VALUE,
    JDK_HOME_VALUE,
    JDK_KEY,
    JDK_VERSIONS,
    NDK_DIRECTORY_PATTERN,
    XAMARIN_INSTALLER_KEY,
    XAMARIN_INSTALLER_VALUE,
    FolderPath,
    KindProfile,
    ToolchainKind,
)
from sdkfinder.sdks.preferences import PreferenceWriter, resolve_override_key
from sdkfinder.sdks.validation import LocationValidator

logger = logging.getLogger(__name__)


class SdkResolver(SdkLocator):
    """
    Resolves toolchain install directories in a fixed priority order.

    Sources, highest priority first:
    - the explicit override under the override key (current user, then local
      machine for the Android SDK and NDK)
    - installer records (Android SDK)
    - conventional install directories (Android SDK)
    - 'android-ndk-r*' directories under conventional roots (Android NDK)
    - the JavaSoft registry subtree, 1.8 then 1.7 then 1.6 (Java SDK)

    Which sources apply to a kind is data on its KindProfile. Every candidate
    is validated before it is reported. Nothing is cached: each call probes
    the store and the filesystem again.
    """

    def __init__(
        self,
        store: KeyValueStore,
        environment: Optional[HostEnvironment] = None,
        filesystem: Optional[FileSystem] = None,
        tools: Optional[HostTools] = None,
        override_key: Optional[str] = None,
    ):
        """
        Initialize resolver.

        Args:
            store: Key-value store holding overrides and installer records
            environment: Host environment (default: snapshot of this process)
            filesystem: Filesystem to probe (default: the local disk)
            tools: Host executable names (default: derived from environment)
            override_key: Override key used when XAMARIN_ANDROID_REGKEY is unset
        """
        self.store = store
        self.environment = environment or HostEnvironment.from_os()
        self.filesystem = filesystem or LocalFileSystem()
        self.tools = tools or HostTools.from_environment(self.environment)
        self.configured_override_key = override_key
        self.validator = LocationValidator(self.filesystem, self.tools)
        self.preferences = PreferenceWriter(store, self.environment, override_key)

    @property
    def override_key(self) -> str:
        return resolve_override_key(self.environment, self.configured_override_key)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def preferred_path(self, kind: ToolchainKind) -> Optional[Path]:
        """
        Return the highest-priority valid install directory for kind.

        Stops probing at the first valid candidate.

        Returns:
            Install directory, or None if no source validates
        """
        path = next(self.all_available_paths(kind), None)
        if path is None:
            logger.info(f"No valid {kind.display_name} installation found")
        else:
            logger.info(f"Preferred {kind.display_name}: {path}")
        return path

    def all_available_paths(self, kind: ToolchainKind) -> Iterator[Path]:
        """
        Lazily yield every valid install directory for kind in priority order.

        Paths reachable through several sources are yielded once per source.
        """
        for candidate, _ in self.validated_candidates(kind):
            yield candidate.path

    def validated_candidates(
        self, kind: ToolchainKind
    ) -> Iterator[Tuple[Candidate, ValidationResult]]:
        """
        Lazily yield valid candidates together with their validation result.

        Each candidate is validated just before it is yielded, so a consumer
        that stops early never probes later sources.
        """
        for candidate in self.candidates(kind):
            result = self.validator.validate(candidate.kind, candidate.path)
            logger.info(f"  {candidate.origin} found:\n    {result.reason}")
            if result:
                yield candidate, result

    def candidates(self, kind: ToolchainKind) -> Iterator[Candidate]:
        """
        Lazily yield raw (unvalidated) candidates for kind in priority order.
        """
        profile = self.validator.profile(kind)
        logger.info(f"Looking for {kind.display_name}...")

        yield from self._store_candidates(
            kind, CandidateSource.EXPLICIT_OVERRIDE, self._override_locations(profile)
        )
        yield from self._store_candidates(
            kind,
            CandidateSource.INSTALLER_RECORD,
            [
                StoreLocation(scope, key_path, value_name, Bitness.KEY32)
                for scope, key_path, value_name in profile.installer_records
            ],
        )
        yield from self._directory_candidates(
            kind, self._folder_paths(profile.conventional_paths)
        )
        yield from self._glob_candidates(
            kind, self._folder_paths(profile.search_roots), profile.directory_pattern
        )
        yield from self._versioned_candidates(kind, profile)

    def set_preferred_path(
        self, kind: ToolchainKind, path: Optional[Union[str, Path]]
    ) -> None:
        """Persist path as the override for kind; None or empty clears it."""
        self.preferences.set_preferred_path(kind, path)

    def locate_all(self) -> Dict[ToolchainKind, Optional[Path]]:
        """Return the preferred path of every toolchain kind."""
        return {kind: self.preferred_path(kind) for kind in ToolchainKind}

    def ndk_host_platform(self, is_64bit: Optional[bool] = None) -> str:
        """
        Return the NDK prebuilt directory name for this host.

        Args:
            is_64bit: Host bitness (default: detected)
        """
        if is_64bit is None:
            is_64bit = detect_platform().is_64bit
        if is_64bit:
            return self.tools.ndk_host_platform_64bit
        return self.tools.ndk_host_platform_32bit

    def short_form_path(self, path: Union[str, Path]) -> str:
        """Return the space-free short form of path (Windows only)."""
        return short_form_path(path)

    # ------------------------------------------------------------------
    # Source definitions
    # ------------------------------------------------------------------

    def _override_locations(self, profile: KindProfile) -> List[StoreLocation]:
        key = self.override_key
        return [
            StoreLocation(scope, key, profile.preference_value, Bitness.KEY32)
            for scope in profile.override_scopes
        ]

    def _folder_paths(self, folders: Tuple[FolderPath, ...]) -> List[Optional[Path]]:
        """Resolve (special folder, parts) pairs against the host environment."""
        return [
            _join(getattr(self.environment, folder), *parts)
            for folder, parts in folders
        ]

    # ------------------------------------------------------------------
    # Probes
    # ------------------------------------------------------------------

    def _store_candidates(
        self,
        kind: ToolchainKind,
        source: CandidateSource,
        locations: List[StoreLocation],
    ) -> Iterator[Candidate]:
        for location in locations:
            candidate = self._read_store_candidate(kind, source, location)
            if candidate is not None:
                yield candidate

    def _read_store_candidate(
        self, kind: ToolchainKind, source: CandidateSource, location: StoreLocation
    ) -> Optional[Candidate]:
        """
        Read one store value as a candidate.

        Returns:
            Candidate, or None if the key or value is absent or empty

        Raises:
            StoreUnavailableError: If the store cannot be accessed
        """
        value = self.store.get_string(
            location.scope, location.key_path, location.value_name, location.bitness
        )
        if not value:
            logger.info(f"  Key {location} not found.")
            return None

        return Candidate(
            path=Path(value), source=source, kind=kind, origin=f"Key {location}"
        )

    def _directory_candidates(
        self, kind: ToolchainKind, paths: List[Optional[Path]]
    ) -> Iterator[Candidate]:
        for path in paths:
            if path is None:
                logger.debug("Skipping conventional path under an unknown folder")
                continue
            if not self.filesystem.is_dir(path):
                logger.info(f"  Directory {path} not found.")
                continue
            yield Candidate(
                path=path,
                source=CandidateSource.CONVENTIONAL_PATH,
                kind=kind,
                origin=f"Directory {path}",
            )

    def _glob_candidates(
        self,
        kind: ToolchainKind,
        roots: List[Optional[Path]],
        pattern: Optional[str],
    ) -> Iterator[Candidate]:
        if not pattern:
            return

        for root in roots:
            if root is None:
                logger.debug("Skipping search root under an unknown folder")
                continue
            if not self.filesystem.is_dir(root):
                logger.info(f"  Directory {root} not found.")
                continue

            matches = self.filesystem.list_subdirectories(root, pattern)
            logger.debug(f"{len(matches)} directories match {pattern} in {root}")
            for directory in matches:
                yield Candidate(
                    path=directory,
                    source=CandidateSource.GLOB_PATTERN,
                    kind=kind,
                    origin=f"Directory {directory}",
                )

    def _versioned_candidates(
        self, kind: ToolchainKind, profile: KindProfile
    ) -> Iterator[Candidate]:
        """
        Yield home directories of known versions under the versioned key.

        Both store views are searched, 32-bit first. CurrentVersion is only
        checked for presence; its value is never compared against the fixed
        version list.
        """
        if not profile.versioned_key or not profile.versions:
            return

        logger.info(f"Looking for {kind.display_name} under {profile.versioned_key}...")

        for bitness in (Bitness.KEY32, Bitness.KEY64):
            marker = StoreLocation(
                Scope.LOCAL_MACHINE,
                profile.versioned_key,
                JDK_CURRENT_VERSION_VALUE,
                bitness,
            )
            current_version = self.store.get_string(
                marker.scope, marker.key_path, marker.value_name, marker.bitness
            )
            if not current_version:
                logger.info(f"  Key {marker} not found.")
                continue

            logger.info(f"  Key {marker} found.")
            for version in profile.versions:
                location = StoreLocation(
                    Scope.LOCAL_MACHINE,
                    f"{profile.versioned_key}\\{version}",
                    JDK_HOME_VALUE,
                    bitness,
                )
                candidate = self._read_store_candidate(
                    kind, CandidateSource.INSTALLER_RECORD, location
                )
                if candidate is not None:
                    yield candidate


def _join(base: Optional[Path], *parts: str) -> Optional[Path]:
    if base is None:
        return None
    return base.joinpath(*parts)


__all__ = [
    "SdkResolver",
    "ANDROID_INSTALLER_KEY",
    "ANDROID_INSTALLER_VALUE",
    "XAMARIN_INSTALLER_KEY",
    "XAMARIN_INSTALLER_VALUE",
    "JDK_KEY",
    "JDK_CURRENT_VERSION_VALUE",
    "JDK_HOME_VALUE",
    "JDK_VERSIONS",
    "NDK_DIRECTORY_PATTERN",
]
