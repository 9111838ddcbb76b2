"""
Locate command implementation.

Prints the preferred install directory of one toolchain kind, or a summary
of all kinds.
"""

import logging

from sdkfinder.cli.utils import build_resolver, safe_print
from sdkfinder.sdks.kinds import ToolchainKind

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the locate command.

    Args:
        args: Parsed command-line arguments (kind, short)

    Returns:
        Exit code (0 if every requested kind was found, 1 otherwise)
    """
    resolver = build_resolver(args)

    if args.kind is not None:
        path = resolver.preferred_path(args.kind)
        if path is None:
            logger.error(f"{args.kind.display_name} not found")
            return 1
        safe_print(resolver.short_form_path(path) if args.short else str(path))
        return 0

    missing = 0
    for kind in ToolchainKind:
        path = resolver.preferred_path(kind)
        if path is None:
            safe_print(f"{kind.display_name}: not found")
            missing += 1
            continue

        shown = resolver.short_form_path(path) if args.short else str(path)
        safe_print(f"{kind.display_name}: {shown}")

    if missing:
        logger.debug(f"{missing} toolchain kind(s) not found")
        return 1
    return 0
