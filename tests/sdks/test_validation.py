"""
Tests for LocationValidator.
"""

import pytest

from sdkfinder.core.environment import HostTools
from sdkfinder.core.filesystem import LocalFileSystem
from sdkfinder.sdks.kinds import ToolchainKind
from sdkfinder.sdks.validation import LocationValidator
from tests.utils import (
    make_android_ndk,
    make_android_sdk,
    make_empty_dir,
    make_java_sdk,
)


@pytest.fixture
def validator():
    return LocationValidator(LocalFileSystem(), HostTools())


class TestValidate:
    """Marker executable checks per kind."""

    def test_android_sdk(self, validator, tmp_path):
        sdk = make_android_sdk(tmp_path / "sdk")

        result = validator.validate(ToolchainKind.ANDROID_SDK, sdk)

        assert result
        assert result.valid
        assert result.checked_path == sdk / "platform-tools"
        assert result.reason.startswith("Path contains adb in \\platform-tools")

    def test_android_ndk(self, validator, tmp_path):
        ndk = make_android_ndk(tmp_path / "android-ndk-r21d")

        assert validator.is_valid(ToolchainKind.ANDROID_NDK, ndk)

    def test_java_sdk(self, validator, tmp_path):
        jdk = make_java_sdk(tmp_path / "jdk")

        result = validator.validate(ToolchainKind.JAVA_SDK, jdk)

        assert result
        assert result.checked_path == jdk / "bin"

    def test_empty_directory(self, validator, tmp_path):
        empty = make_empty_dir(tmp_path / "empty")

        result = validator.validate(ToolchainKind.ANDROID_SDK, empty)

        assert not result
        assert result.reason.startswith(
            "Path does not contain adb in \\platform-tools"
        )

    def test_missing_directory(self, validator, tmp_path):
        assert not validator.is_valid(ToolchainKind.JAVA_SDK, tmp_path / "missing")

    def test_marker_directory_instead_of_file(self, validator, tmp_path):
        """A directory named like the marker does not count."""
        (tmp_path / "sdk" / "platform-tools" / "adb").mkdir(parents=True)

        assert not validator.is_valid(ToolchainKind.ANDROID_SDK, tmp_path / "sdk")

    @pytest.mark.parametrize(
        "kind,make",
        [
            (ToolchainKind.ANDROID_SDK, make_java_sdk),
            (ToolchainKind.ANDROID_NDK, make_android_sdk),
            (ToolchainKind.JAVA_SDK, make_android_ndk),
        ],
    )
    def test_wrong_kind(self, validator, tmp_path, kind, make):
        root = make(tmp_path / "install")

        assert not validator.is_valid(kind, root)

    def test_accepts_string_path(self, validator, tmp_path):
        sdk = make_android_sdk(tmp_path / "sdk")

        assert validator.is_valid(ToolchainKind.ANDROID_SDK, str(sdk))


class TestExecutableExtensions:
    """Host executable extensions widen marker lookup."""

    def test_extension_appended(self, tmp_path):
        sdk = tmp_path / "sdk"
        (sdk / "platform-tools").mkdir(parents=True)
        (sdk / "platform-tools" / "adb.exe").write_text("")
        validator = LocationValidator(
            LocalFileSystem(), HostTools(executable_extensions=("", ".exe", ".bat"))
        )

        result = validator.validate(ToolchainKind.ANDROID_SDK, sdk)

        assert result
        assert "adb.exe" in result.reason

    def test_no_extensions(self, tmp_path):
        sdk = tmp_path / "sdk"
        (sdk / "platform-tools").mkdir(parents=True)
        (sdk / "platform-tools" / "adb.exe").write_text("")
        validator = LocationValidator(LocalFileSystem(), HostTools())

        assert not validator.is_valid(ToolchainKind.ANDROID_SDK, sdk)
