"""
Pytest configuration and shared fixtures for sdkfinder tests.
"""

import sys

import pytest
from pathlib import Path

from sdkfinder.core.environment import HostEnvironment, HostTools
from sdkfinder.core.filesystem import LocalFileSystem
from sdkfinder.sdks.resolver import SdkResolver
from tests.mocks import MemoryKeyValueStore


def pytest_collection_modifyitems(config, items):
    """Skip tests that need a real registry unless running on Windows."""
    if sys.platform == "win32":
        return
    skip_windows = pytest.mark.skip(reason="needs the Windows registry")
    for item in items:
        if "windows" in item.keywords:
            item.add_marker(skip_windows)


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def memory_store() -> MemoryKeyValueStore:
    """Empty in-memory key-value store."""
    return MemoryKeyValueStore()


@pytest.fixture
def host_root(tmp_path: Path) -> Path:
    """Directory standing in for the host's drive."""
    root = tmp_path / "host"
    root.mkdir()
    return root


@pytest.fixture
def host_env(host_root: Path) -> HostEnvironment:
    """Host environment whose special folders all exist under host_root."""
    folders = {
        "local_app_data": host_root / "Users" / "dev" / "AppData" / "Local",
        "common_app_data": host_root / "ProgramData",
        "program_files": host_root / "Program Files",
        "program_files_x86": host_root / "Program Files (x86)",
    }
    for folder in folders.values():
        folder.mkdir(parents=True)

    return HostEnvironment(variables={}, system_drive=host_root, **folders)


@pytest.fixture
def resolver(memory_store, host_env) -> SdkResolver:
    """Resolver over the in-memory store and the fake host."""
    return SdkResolver(
        memory_store,
        environment=host_env,
        filesystem=LocalFileSystem(),
        tools=HostTools(),
    )


@pytest.fixture(autouse=True)
def reset_caches():
    """Reset module-level caches between tests."""
    from sdkfinder.core import platform

    platform.clear_platform_cache()
    yield
