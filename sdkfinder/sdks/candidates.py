"""
Candidate records produced during a resolution pass.

Nothing here is persisted; a Candidate lives only while the resolver's
generator is being consumed.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from sdkfinder.core.interfaces import Bitness, Scope
from sdkfinder.sdks.kinds import ToolchainKind


class CandidateSource(Enum):
    """Origin of a candidate, in priority order."""

    EXPLICIT_OVERRIDE = "explicit-override"
    INSTALLER_RECORD = "installer-record"
    CONVENTIONAL_PATH = "conventional-path"
    GLOB_PATTERN = "glob-pattern"


@dataclass(frozen=True)
class StoreLocation:
    """A value in the key-value store."""

    scope: Scope
    key_path: str
    value_name: str
    bitness: Bitness = Bitness.KEY32

    def __str__(self) -> str:
        return f"{self.scope.value}\\{self.key_path}\\{self.value_name}"


@dataclass(frozen=True)
class Candidate:
    """
    A directory proposed as a toolchain root.

    Attributes:
        path: Proposed root directory
        source: Category of the source that proposed it
        kind: Toolchain kind it is proposed for
        origin: Store location or search root it came from, for logs
    """

    path: Path
    source: CandidateSource
    kind: ToolchainKind
    origin: str = ""

    def __str__(self) -> str:
        return f"{self.kind.display_name} at {self.path} ({self.source.value})"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the structural check. Truthy when the candidate is valid."""

    valid: bool
    reason: str
    checked_path: Optional[Path] = None

    def __bool__(self) -> bool:
        return self.valid


__all__ = [
    "CandidateSource",
    "StoreLocation",
    "Candidate",
    "ValidationResult",
]
