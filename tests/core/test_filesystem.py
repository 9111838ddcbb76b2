"""
Tests for filesystem probes and helpers.
"""

import sys

import pytest

from sdkfinder.core.filesystem import (
    LocalFileSystem,
    atomic_write,
    find_executable_in_directory,
    short_form_path,
)


class TestLocalFileSystem:
    def test_is_dir_and_is_file(self, tmp_path):
        fs = LocalFileSystem()
        (tmp_path / "file.txt").write_text("x")

        assert fs.is_dir(tmp_path)
        assert not fs.is_file(tmp_path)
        assert fs.is_file(tmp_path / "file.txt")
        assert not fs.is_dir(tmp_path / "file.txt")
        assert not fs.is_dir(tmp_path / "missing")

    def test_list_subdirectories_sorted_and_filtered(self, tmp_path):
        fs = LocalFileSystem()
        for name in ("android-ndk-r21d", "android-ndk-r16b", "android-sdk", "other"):
            (tmp_path / name).mkdir()
        (tmp_path / "android-ndk-r99.zip").write_text("")

        found = fs.list_subdirectories(tmp_path, "android-ndk-r*")

        assert found == [tmp_path / "android-ndk-r16b", tmp_path / "android-ndk-r21d"]

    def test_list_subdirectories_of_missing_dir(self, tmp_path):
        assert LocalFileSystem().list_subdirectories(tmp_path / "missing", "*") == []


class TestFindExecutable:
    def test_extension_order(self, tmp_path):
        (tmp_path / "tool").write_text("")
        (tmp_path / "tool.exe").write_text("")

        found = find_executable_in_directory(
            LocalFileSystem(), "tool", tmp_path, ("", ".exe", ".bat")
        )

        assert found == [tmp_path / "tool", tmp_path / "tool.exe"]

    def test_not_found(self, tmp_path):
        assert find_executable_in_directory(LocalFileSystem(), "tool", tmp_path) == []


class TestAtomicWrite:
    def test_writes_content(self, tmp_path):
        target = tmp_path / "nested" / "out.yaml"

        atomic_write(target, "a: 1\n")

        assert target.read_text(encoding="utf-8") == "a: 1\n"

    def test_replaces_existing(self, tmp_path):
        target = tmp_path / "out.yaml"
        target.write_text("old")

        atomic_write(target, "new")

        assert target.read_text() == "new"
        assert [p.name for p in tmp_path.iterdir()] == ["out.yaml"]


class TestShortFormPath:
    @pytest.mark.skipif(sys.platform == "win32", reason="identity only off Windows")
    def test_identity_off_windows(self, tmp_path):
        assert short_form_path(tmp_path / "with space") == str(tmp_path / "with space")

    @pytest.mark.windows
    def test_no_spaces_on_windows(self, tmp_path):
        target = tmp_path / "with space"
        target.mkdir()

        assert " " not in short_form_path(target).rsplit("\\", 1)[-1]


class TestExports:
    def test_all_names_resolve(self):
        from sdkfinder.core import filesystem

        assert all(hasattr(filesystem, name) for name in filesystem.__all__)
        assert "IS_WINDOWS" not in filesystem.__all__
