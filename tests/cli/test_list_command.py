"""
Tests for the list command.
"""

import yaml

from sdkfinder.sdks.resolver import ANDROID_INSTALLER_KEY, ANDROID_INSTALLER_VALUE
from tests.utils import make_android_sdk, make_empty_dir


def seed_installer_record(store_file, path):
    store_file.write_text(
        yaml.safe_dump({"HKLM": {ANDROID_INSTALLER_KEY: {ANDROID_INSTALLER_VALUE: str(path)}}})
    )


def test_list_in_priority_order(run_cli, store_file, tmp_path, capsys):
    installed = make_android_sdk(tmp_path / "installed")
    override = make_android_sdk(tmp_path / "override")
    seed_installer_record(store_file, installed)
    run_cli("set-preferred", "sdk", str(override))
    capsys.readouterr()

    assert run_cli("list", "sdk") == 0
    assert capsys.readouterr().out.splitlines() == [str(override), str(installed)]


def test_list_limit(run_cli, store_file, tmp_path, capsys):
    seed_installer_record(store_file, make_android_sdk(tmp_path / "installed"))
    override = make_android_sdk(tmp_path / "override")
    run_cli("set-preferred", "sdk", str(override))
    capsys.readouterr()

    assert run_cli("list", "sdk", "--limit", "1") == 0
    assert capsys.readouterr().out.splitlines() == [str(override)]


def test_list_sources(run_cli, store_file, tmp_path, capsys):
    installed = make_android_sdk(tmp_path / "installed")
    seed_installer_record(store_file, installed)

    assert run_cli("list", "sdk", "--sources") == 0

    path, source, origin = capsys.readouterr().out.strip().split("\t")
    assert path == str(installed)
    assert source == "installer-record"
    assert origin == f"Key HKLM\\{ANDROID_INSTALLER_KEY}\\{ANDROID_INSTALLER_VALUE}"


def test_list_skips_invalid(run_cli, tmp_path, capsys):
    run_cli("set-preferred", "sdk", str(make_empty_dir(tmp_path / "broken")))
    capsys.readouterr()

    assert run_cli("list", "sdk") == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No Android SDK installation found" in captured.err
