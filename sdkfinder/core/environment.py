"""
Host environment snapshot for sdkfinder.

The resolver never reads ``os.environ`` directly. It receives a
HostEnvironment (environment variables plus OS special folders) and a
HostTools record (executable names of the toolchain layout), so tests can
pass deterministic fixtures instead of real OS state.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class HostEnvironment:
    """
    Environment variables and special folders of the host.

    Attributes:
        variables: Environment variables visible to the resolver
        local_app_data: Per-user application data folder (LocalApplicationData)
        common_app_data: All-users application data folder (CommonApplicationData)
        program_files: Native program files folder
        program_files_x86: 32-bit program files folder
        system_drive: Root of the system drive (e.g. 'C:\\')

    Folders that do not exist on the host are None and the sources rooted at
    them are skipped.
    """

    variables: Dict[str, str] = field(default_factory=dict)
    local_app_data: Optional[Path] = None
    common_app_data: Optional[Path] = None
    program_files: Optional[Path] = None
    program_files_x86: Optional[Path] = None
    system_drive: Optional[Path] = None

    def get_variable(self, name: str) -> Optional[str]:
        """Return the value of an environment variable, or None."""
        return self.variables.get(name)

    @classmethod
    def from_os(cls, environ: Optional[Mapping[str, str]] = None) -> "HostEnvironment":
        """
        Snapshot the current process environment.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            HostEnvironment populated from the Windows special-folder variables
        """
        if environ is None:
            environ = os.environ
        variables = dict(environ)

        program_files = _folder(variables, "ProgramFiles")
        # 32-bit Windows has no separate x86 folder
        program_files_x86 = _folder(variables, "ProgramFiles(x86)") or program_files

        system_drive = variables.get("SystemDrive")
        env = cls(
            variables=variables,
            local_app_data=_folder(variables, "LOCALAPPDATA"),
            common_app_data=_folder(variables, "ProgramData")
            or _folder(variables, "ALLUSERSPROFILE"),
            program_files=program_files,
            program_files_x86=program_files_x86,
            system_drive=Path(system_drive + "\\") if system_drive else None,
        )
        logger.debug(f"Host environment: {env.describe()}")
        return env

    def describe(self) -> Dict[str, str]:
        """Return the special folders as strings, for diagnostics."""
        return {
            "local_app_data": str(self.local_app_data or ""),
            "common_app_data": str(self.common_app_data or ""),
            "program_files": str(self.program_files or ""),
            "program_files_x86": str(self.program_files_x86 or ""),
            "system_drive": str(self.system_drive or ""),
        }


def _folder(variables: Mapping[str, str], name: str) -> Optional[Path]:
    value = variables.get(name)
    return Path(value) if value else None


@dataclass(frozen=True)
class HostTools:
    """
    Executable names and host descriptors of the toolchain layout.

    Marker lookups try each entry of ``executable_extensions`` appended to the
    bare name, so ``adb`` matches ``adb.exe`` when ``.exe`` is listed (Windows,
    via PATHEXT) and ``adb`` itself on other hosts.
    """

    adb: str = "adb"
    ndk_stack: str = "ndk-stack"
    jarsigner: str = "jarsigner"
    zipalign: str = "zipalign"
    keytool: str = "keytool"
    javac: str = "javac"
    ndk_host_platform_32bit: str = "windows"
    ndk_host_platform_64bit: str = "windows-x86_64"
    executable_extensions: Tuple[str, ...] = ("",)

    @classmethod
    def from_environment(cls, environment: HostEnvironment) -> "HostTools":
        """
        Build host tools whose extensions follow the PATHEXT variable.

        The empty extension is always tried first.
        """
        pathext = environment.get_variable("PATHEXT") or ""
        extensions = [""]
        for ext in pathext.split(";"):
            ext = ext.strip().lower()
            if ext and ext not in extensions:
                extensions.append(ext)
        return cls(executable_extensions=tuple(extensions))


__all__ = [
    "HostEnvironment",
    "HostTools",
]
