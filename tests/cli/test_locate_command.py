"""
Tests for the locate command.
"""

from sdkfinder.core.filesystem import short_form_path
from tests.utils import make_android_ndk, make_android_sdk, make_java_sdk


def test_locate_one_kind(run_cli, tmp_path, capsys):
    sdk = make_android_sdk(tmp_path / "sdk")
    assert run_cli("set-preferred", "sdk", str(sdk)) == 0
    capsys.readouterr()

    assert run_cli("locate", "android-sdk") == 0
    assert capsys.readouterr().out.strip() == str(sdk)


def test_locate_short_form(run_cli, tmp_path, capsys):
    ndk = make_android_ndk(tmp_path / "my ndk")
    run_cli("set-preferred", "ndk", str(ndk))
    capsys.readouterr()

    assert run_cli("locate", "ndk", "--short") == 0
    assert capsys.readouterr().out.strip() == short_form_path(ndk)


def test_locate_not_found(run_cli, capsys):
    assert run_cli("locate", "jdk") == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Java SDK not found" in captured.err


def test_locate_all_kinds(run_cli, tmp_path, capsys):
    sdk = make_android_sdk(tmp_path / "sdk")
    jdk = make_java_sdk(tmp_path / "jdk")
    run_cli("set-preferred", "sdk", str(sdk))
    run_cli("set-preferred", "jdk", str(jdk))
    capsys.readouterr()

    assert run_cli("locate") == 1

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        f"Android SDK: {sdk}",
        "Android NDK: not found",
        f"Java SDK: {jdk}",
    ]


def test_locate_all_found(run_cli, tmp_path, capsys):
    run_cli("set-preferred", "sdk", str(make_android_sdk(tmp_path / "sdk")))
    run_cli("set-preferred", "ndk", str(make_android_ndk(tmp_path / "ndk")))
    run_cli("set-preferred", "jdk", str(make_java_sdk(tmp_path / "jdk")))

    assert run_cli("locate") == 0


def test_override_key_from_config(store_file, tmp_path, capsys):
    """override_key in sdkfinder.yaml selects where overrides are read."""
    from sdkfinder.cli.parser import CLI

    sdk = make_android_sdk(tmp_path / "sdk")
    (tmp_path / "sdkfinder.yaml").write_text(
        "version: 1\noverride_key: SOFTWARE\\Contoso\\Android\n"
        f"store:\n  path: '{store_file}'\n"
    )
    assert CLI().run(["set-preferred", "sdk", str(sdk)]) == 0
    capsys.readouterr()

    assert CLI().run(["locate", "sdk"]) == 0
    assert capsys.readouterr().out.strip() == str(sdk)
    assert "Contoso" in store_file.read_text()
