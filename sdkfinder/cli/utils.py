"""
Shared utilities for CLI commands.

Provides common functionality used across multiple CLI commands to
eliminate duplication and ensure consistent behavior.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from sdkfinder.config.parser import SdkFinderConfig, load_config
from sdkfinder.core.environment import HostEnvironment
from sdkfinder.sdks.kinds import ToolchainKind
from sdkfinder.sdks.resolver import SdkResolver
from sdkfinder.store import open_store

logger = logging.getLogger(__name__)


# ============================================================================
# Resolver Construction
# ============================================================================


def load_cli_config(args) -> SdkFinderConfig:
    """
    Load configuration named by --config, or sdkfinder.yaml in the cwd.

    Raises:
        ConfigError: If the configuration is invalid
    """
    config_path: Optional[Path] = getattr(args, "config", None)
    return load_config(config_path)


def build_resolver(args, environment: Optional[HostEnvironment] = None) -> SdkResolver:
    """
    Create the resolver used by a command.

    The --store option wins over store.path from configuration.

    Args:
        args: Parsed arguments (config, store)
        environment: Host environment (default: snapshot of this process)

    Returns:
        SdkResolver bound to the selected store
    """
    config = load_cli_config(args)

    store_path = getattr(args, "store", None) or config.store.path
    store = open_store(store_path, lock_timeout=config.store.lock_timeout)

    return SdkResolver(
        store,
        environment=environment,
        override_key=config.override_key,
    )


def parse_kind(name: str) -> ToolchainKind:
    """argparse type converting a kind name to ToolchainKind."""
    try:
        return ToolchainKind.parse(name)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


# ============================================================================
# Output
# ============================================================================


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr.

    Args:
        message: Main error message
        details: Optional additional details
    """
    safe_print(f"Error: {message}", file=sys.stderr)
    if details:
        safe_print(f"  {details}", file=sys.stderr)


def safe_print(message: str, file=None):
    """
    Print message with safe encoding handling for Windows console.

    Paths the console code page cannot encode are printed with
    backslash escapes instead of failing.
    """
    try:
        print(message, file=file)
    except UnicodeEncodeError:
        print(message.encode("ascii", "backslashreplace").decode("ascii"), file=file)
