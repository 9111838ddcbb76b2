"""
sdkfinder CLI argument parser.

This module implements the command-line interface for sdkfinder using argparse.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sdkfinder.cli.utils import parse_kind, print_error

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("sdkfinder")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

KIND_METAVAR = "KIND"
KIND_HELP = "Toolchain kind: android-sdk|android-ndk|java-sdk (or sdk|ndk|jdk)"


class CLI:
    """sdkfinder command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="sdkfinder",
            description="Locate Android SDK, Android NDK and Java SDK installations",
            epilog='Use "sdkfinder COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"sdkfinder {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Log every probe"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./sdkfinder.yaml)",
        )
        parser.add_argument(
            "--store",
            type=Path,
            metavar="PATH",
            help="Use a YAML preference file instead of the host default store",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_locate_command(subparsers)
        self._add_list_command(subparsers)
        self._add_set_preferred_command(subparsers)

        return parser

    def _add_locate_command(self, subparsers):
        """Add 'locate' subcommand."""
        parser = subparsers.add_parser(
            "locate",
            help="Print the preferred install directory",
            description="Print the preferred install directory of a toolchain, "
            "or of every toolchain when KIND is omitted",
        )
        parser.add_argument(
            "kind",
            nargs="?",
            type=parse_kind,
            metavar=KIND_METAVAR,
            help=KIND_HELP,
        )
        parser.add_argument(
            "--short",
            action="store_true",
            help="Print the Windows short (8.3) form of the path",
        )

    def _add_list_command(self, subparsers):
        """Add 'list' subcommand."""
        parser = subparsers.add_parser(
            "list",
            help="List every valid install directory",
            description="List every valid install directory of a toolchain "
            "in priority order",
        )
        parser.add_argument(
            "kind", type=parse_kind, metavar=KIND_METAVAR, help=KIND_HELP
        )
        parser.add_argument(
            "--limit",
            type=int,
            metavar="N",
            help="Stop after N paths",
        )
        parser.add_argument(
            "--sources",
            action="store_true",
            help="Show where each path was found",
        )

    def _add_set_preferred_command(self, subparsers):
        """Add 'set-preferred' subcommand."""
        parser = subparsers.add_parser(
            "set-preferred",
            help="Store the preferred install directory",
            description="Store the preferred install directory of a toolchain; "
            "omit PATH to clear it",
        )
        parser.add_argument(
            "kind", type=parse_kind, metavar=KIND_METAVAR, help=KIND_HELP
        )
        parser.add_argument(
            "path",
            nargs="?",
            metavar="PATH",
            help="Install directory (omit to clear the preference)",
        )

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse arguments without running a command."""
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Command-line arguments (default: sys.argv[1:])

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        if getattr(parsed_args, "limit", None) is not None and parsed_args.limit < 1:
            print_error("--limit must be at least 1")
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            print_error(str(e))
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Probe traces are logged at INFO and only shown with --verbose.
        """
        if args.verbose:
            level = logging.INFO
            format_str = "%(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.WARNING
            format_str = "%(levelname)s: %(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "locate": "sdkfinder.cli.commands.locate",
            "list": "sdkfinder.cli.commands.list_paths",
            "set-preferred": "sdkfinder.cli.commands.set_preferred",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        import importlib

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
