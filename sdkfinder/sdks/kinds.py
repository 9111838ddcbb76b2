"""
Toolchain kinds and their validation profiles.

Every kind differs from the others only by data: which subdirectory holds the
marker executable, which executable that is, under which value name the
user's preferred location is persisted, and which sources propose candidates.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from sdkfinder.core.environment import HostTools
from sdkfinder.core.interfaces import Scope

# Value names under the override key, one per kind
ANDROID_SDK_PREFERENCE = "AndroidSdkDirectory"
ANDROID_NDK_PREFERENCE = "AndroidNdkDirectory"
JAVA_SDK_PREFERENCE = "JavaSdkDirectory"

# Written by the standalone Android SDK installer
ANDROID_INSTALLER_KEY = r"SOFTWARE\Android SDK Tools"
ANDROID_INSTALLER_VALUE = "Path"

# Written by the IDE-integrated installer
XAMARIN_INSTALLER_KEY = r"SOFTWARE\Xamarin\MonoAndroid"
XAMARIN_INSTALLER_VALUE = "PrivateAndroidSdkPath"

JDK_KEY = r"SOFTWARE\JavaSoft\Java Development Kit"
JDK_CURRENT_VERSION_VALUE = "CurrentVersion"
JDK_HOME_VALUE = "JavaHome"
# Newest first
JDK_VERSIONS = ("1.8", "1.7", "1.6")

NDK_DIRECTORY_PATTERN = "android-ndk-r*"


class ToolchainKind(Enum):
    """Toolchains the resolver knows how to locate."""

    ANDROID_SDK = "android-sdk"
    ANDROID_NDK = "android-ndk"
    JAVA_SDK = "java-sdk"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def preference_value(self) -> str:
        """Value name under the override key holding the user's choice."""
        return _PREFERENCE_VALUES[self]

    @classmethod
    def parse(cls, name: str) -> "ToolchainKind":
        """
        Parse a kind from its CLI name ('android-sdk', 'sdk', 'ndk', 'jdk', ...).

        Raises:
            ValueError: If the name is not recognised
        """
        normalized = name.strip().lower().replace("_", "-")
        kind = _ALIASES.get(normalized)
        if kind is None:
            try:
                kind = cls(normalized)
            except ValueError:
                raise ValueError(
                    f"Unknown toolchain kind '{name}'. "
                    f"Expected one of: {', '.join(k.value for k in cls)}"
                ) from None
        return kind


_DISPLAY_NAMES = {
    ToolchainKind.ANDROID_SDK: "Android SDK",
    ToolchainKind.ANDROID_NDK: "Android NDK",
    ToolchainKind.JAVA_SDK: "Java SDK",
}

_PREFERENCE_VALUES = {
    ToolchainKind.ANDROID_SDK: ANDROID_SDK_PREFERENCE,
    ToolchainKind.ANDROID_NDK: ANDROID_NDK_PREFERENCE,
    ToolchainKind.JAVA_SDK: JAVA_SDK_PREFERENCE,
}

_ALIASES = {
    "sdk": ToolchainKind.ANDROID_SDK,
    "ndk": ToolchainKind.ANDROID_NDK,
    "jdk": ToolchainKind.JAVA_SDK,
    "java": ToolchainKind.JAVA_SDK,
}


# A directory below one of the host's special folders:
# (HostEnvironment attribute, path parts under it)
FolderPath = Tuple[str, Tuple[str, ...]]
# A string value in the key-value store: (scope, key path, value name)
StoreValue = Tuple[Scope, str, str]


@dataclass(frozen=True)
class KindProfile:
    """
    Structural signature, preference slot and candidate sources of a kind.

    Attributes:
        kind: The toolchain kind
        validation_subdir: Directory under the candidate root holding the marker
        marker: Executable whose presence makes a candidate valid
        preference_value: Value name of the persisted user override
        override_scopes: Scopes searched for the override, in order
        installer_records: Store values written by installers, in order
        conventional_paths: Install directories tried as-is, in order
        search_roots: Directories whose subdirectories matching
            directory_pattern are candidates
        directory_pattern: Glob pattern for subdirectories of search_roots
        versioned_key: Key holding one subkey per known version, gated by a
            CurrentVersion value
        versions: Version subkeys of versioned_key, newest first
    """

    kind: ToolchainKind
    validation_subdir: str
    marker: str
    preference_value: str
    override_scopes: Tuple[Scope, ...] = (Scope.CURRENT_USER,)
    installer_records: Tuple[StoreValue, ...] = ()
    conventional_paths: Tuple[FolderPath, ...] = ()
    search_roots: Tuple[FolderPath, ...] = ()
    directory_pattern: Optional[str] = None
    versioned_key: Optional[str] = None
    versions: Tuple[str, ...] = ()

    @classmethod
    def for_kind(cls, kind: ToolchainKind, tools: HostTools) -> "KindProfile":
        subdir, tool = _MARKERS[kind]
        return cls(
            kind,
            subdir,
            getattr(tools, tool),
            kind.preference_value,
            **_SOURCES[kind],
        )


# Marker subdirectory and HostTools attribute naming the marker executable
_MARKERS = {
    ToolchainKind.ANDROID_SDK: ("platform-tools", "adb"),
    ToolchainKind.ANDROID_NDK: (".", "ndk_stack"),
    ToolchainKind.JAVA_SDK: ("bin", "jarsigner"),
}

_BOTH_SCOPES = (Scope.CURRENT_USER, Scope.LOCAL_MACHINE)

_SOURCES: Dict[ToolchainKind, Dict[str, Any]] = {
    ToolchainKind.ANDROID_SDK: {
        "override_scopes": _BOTH_SCOPES,
        "installer_records": (
            (Scope.CURRENT_USER, XAMARIN_INSTALLER_KEY, XAMARIN_INSTALLER_VALUE),
            (Scope.CURRENT_USER, ANDROID_INSTALLER_KEY, ANDROID_INSTALLER_VALUE),
            (Scope.LOCAL_MACHINE, ANDROID_INSTALLER_KEY, ANDROID_INSTALLER_VALUE),
        ),
        "conventional_paths": (
            ("local_app_data", ("Xamarin", "MonoAndroid", "android-sdk-windows")),
            ("program_files_x86", ("Android", "android-sdk")),
            ("program_files_x86", ("Android", "android-sdk-windows")),
            ("program_files", ("Android", "android-sdk")),
            ("local_app_data", ("Android", "android-sdk")),
            ("common_app_data", ("Android", "android-sdk")),
            ("system_drive", ("android-sdk-windows",)),
        ),
    },
    ToolchainKind.ANDROID_NDK: {
        "override_scopes": _BOTH_SCOPES,
        "search_roots": (
            ("local_app_data", ("Xamarin", "MonoAndroid")),
            ("program_files_x86", ("Android",)),
            ("common_app_data", ("Microsoft", "AndroidNDK")),
            ("common_app_data", ("Microsoft", "AndroidNDK32")),
            ("common_app_data", ("Microsoft", "AndroidNDK64")),
            ("system_drive", ()),
        ),
        "directory_pattern": NDK_DIRECTORY_PATTERN,
    },
    ToolchainKind.JAVA_SDK: {
        "versioned_key": JDK_KEY,
        "versions": JDK_VERSIONS,
    },
}


__all__ = [
    "ToolchainKind",
    "KindProfile",
    "FolderPath",
    "StoreValue",
    "ANDROID_SDK_PREFERENCE",
    "ANDROID_NDK_PREFERENCE",
    "JAVA_SDK_PREFERENCE",
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
