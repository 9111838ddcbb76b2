"""
Fixtures for CLI command tests.

Commands build their own resolver, so the host environment they snapshot is
replaced with an empty one and the working directory is moved to tmp_path.
"""

import pytest

from sdkfinder.cli.parser import CLI
from sdkfinder.core.environment import HostEnvironment


@pytest.fixture(autouse=True)
def isolated_host(tmp_path, monkeypatch):
    """No special folders, no override key variable, no sdkfinder.yaml."""
    monkeypatch.setattr(
        HostEnvironment,
        "from_os",
        classmethod(lambda cls, environ=None: cls()),
    )
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def store_file(tmp_path):
    return tmp_path / "preferences.yaml"


@pytest.fixture
def run_cli(store_file):
    """Run the CLI against the temporary YAML store."""

    def _run(*args):
        return CLI().run(["--store", str(store_file), *args])

    return _run
