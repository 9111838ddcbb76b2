"""
Tests for sdkfinder.yaml parsing.
"""

from pathlib import Path

import pytest

from sdkfinder.config.parser import (
    CONFIG_FILENAME,
    SdkFinderConfig,
    load_config,
    parse_config,
)
from sdkfinder.core.exceptions import ConfigError


def write_config(directory: Path, text: str) -> Path:
    path = directory / CONFIG_FILENAME
    path.write_text(text, encoding="utf-8")
    return path


class TestParseConfig:
    def test_minimal(self, tmp_path):
        config = parse_config(write_config(tmp_path, "version: 1\n"))

        assert config == SdkFinderConfig()
        assert config.store.path is None
        assert config.store.lock_timeout == 10.0

    def test_full(self, tmp_path):
        path = write_config(
            tmp_path,
            "version: 1\n"
            "override_key: SOFTWARE\\Contoso\\Android\n"
            "store:\n"
            "  path: prefs/preferences.yaml\n"
            "  lock_timeout: 2\n",
        )

        config = parse_config(path)

        assert config.override_key == r"SOFTWARE\Contoso\Android"
        assert config.store.path == tmp_path / "prefs" / "preferences.yaml"
        assert config.store.lock_timeout == 2.0

    def test_absolute_store_path(self, tmp_path):
        store = tmp_path / "elsewhere" / "preferences.yaml"
        path = write_config(tmp_path, f"version: 1\nstore:\n  path: '{store}'\n")

        assert parse_config(path).store.path == store

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            parse_config(tmp_path / CONFIG_FILENAME)

    @pytest.mark.parametrize(
        "text,message",
        [
            ("", "empty"),
            ("version: [1\n", "Invalid YAML"),
            ("- version\n", "must be a mapping"),
            ("override_key: x\n", "Missing required field: version"),
            ("version: 2\n", "Unsupported version"),
            ("version: 1\noverride_key: 5\n", "override_key must be a string"),
            ("version: 1\nstore: [a]\n", "store must be a mapping"),
            ("version: 1\nstore:\n  path: 3\n", "store.path must be a string"),
            ("version: 1\nstore:\n  lock_timeout: soon\n", "must be a number"),
            ("version: 1\nstore:\n  lock_timeout: true\n", "must be a number"),
            ("version: 1\nstore:\n  lock_timeout: -1\n", "must not be negative"),
        ],
    )
    def test_invalid(self, tmp_path, text, message):
        path = write_config(tmp_path, text)

        with pytest.raises(ConfigError, match=message):
            parse_config(path)


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        assert load_config(search_dir=tmp_path) == SdkFinderConfig()

    def test_found_in_search_dir(self, tmp_path):
        write_config(tmp_path, "version: 1\noverride_key: SOFTWARE\\Found\n")

        assert load_config(search_dir=tmp_path).override_key == r"SOFTWARE\Found"

    def test_explicit_path_must_exist(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.yaml")

    def test_cwd_searched_by_default(self, tmp_path, monkeypatch):
        write_config(tmp_path, "version: 1\noverride_key: SOFTWARE\\Cwd\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().override_key == r"SOFTWARE\Cwd"
