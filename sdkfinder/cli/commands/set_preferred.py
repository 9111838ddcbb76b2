"""
Set-preferred command implementation.

Stores (or clears) the user's preferred install directory of a toolchain
kind. The path is stored even when it does not validate; a warning is
printed so the user knows resolution will skip it.
"""

import logging

from sdkfinder.cli.utils import build_resolver, safe_print

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the set-preferred command.

    Args:
        args: Parsed command-line arguments (kind, path)

    Returns:
        Exit code (0 for success)
    """
    resolver = build_resolver(args)
    kind = args.kind

    if not args.path:
        resolver.set_preferred_path(kind, None)
        safe_print(f"Cleared preferred {kind.display_name} path")
        return 0

    result = resolver.validator.validate(kind, args.path)
    if not result:
        logger.warning(
            f"{args.path} is not a valid {kind.display_name} install: "
            f"{result.reason}"
        )

    resolver.set_preferred_path(kind, args.path)
    safe_print(f"Preferred {kind.display_name} path set to {args.path}")
    return 0
