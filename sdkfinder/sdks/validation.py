"""
Structural validation of candidate toolchain roots.

A candidate is valid when one marker executable exists under a known
subdirectory, which tolerates version differences within a toolchain
family.
"""

from pathlib import Path
from typing import Union

from sdkfinder.core.environment import HostTools
from sdkfinder.core.filesystem import find_executable_in_directory
from sdkfinder.core.interfaces import FileSystem
from sdkfinder.sdks.candidates import ValidationResult
from sdkfinder.sdks.kinds import KindProfile, ToolchainKind


class LocationValidator:
    """
    Checks candidate directories against the profile of their kind.

    Attributes:
        filesystem: Filesystem probed for marker executables
        tools: Host executable names and extensions
    """

    def __init__(self, filesystem: FileSystem, tools: HostTools):
        self.filesystem = filesystem
        self.tools = tools

    def profile(self, kind: ToolchainKind) -> KindProfile:
        return KindProfile.for_kind(kind, self.tools)

    def validate(self, kind: ToolchainKind, path: Union[str, Path]) -> ValidationResult:
        """
        Check whether path looks like an install of kind.

        Args:
            kind: Toolchain kind to validate against
            path: Candidate root directory

        Returns:
            ValidationResult with the marker directory that was checked
        """
        profile = self.profile(kind)
        root = Path(path)
        directory = root / profile.validation_subdir

        found = find_executable_in_directory(
            self.filesystem,
            profile.marker,
            directory,
            self.tools.executable_extensions,
        )
        if found:
            return ValidationResult(
                valid=True,
                reason=(
                    f"Path contains {profile.marker} in "
                    f"\\{profile.validation_subdir} ({found[0]})."
                ),
                checked_path=directory,
            )

        return ValidationResult(
            valid=False,
            reason=(
                f"Path does not contain {profile.marker} in "
                f"\\{profile.validation_subdir} ({directory})."
            ),
            checked_path=directory,
        )

    def is_valid(self, kind: ToolchainKind, path: Union[str, Path]) -> bool:
        return self.validate(kind, path).valid


__all__ = ["LocationValidator"]
