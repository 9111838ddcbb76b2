"""
List command implementation.

Prints every valid install directory of a toolchain kind in priority order.
Probing stops once --limit paths have been printed.
"""

import itertools
import logging

from sdkfinder.cli.utils import build_resolver, safe_print

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the list command.

    Args:
        args: Parsed command-line arguments (kind, limit, sources)

    Returns:
        Exit code (0 if at least one path was found, 1 otherwise)
    """
    resolver = build_resolver(args)

    found = resolver.validated_candidates(args.kind)
    if args.limit is not None:
        found = itertools.islice(found, args.limit)

    count = 0
    for candidate, _ in found:
        count += 1
        if args.sources:
            safe_print(f"{candidate.path}\t{candidate.source.value}\t{candidate.origin}")
        else:
            safe_print(str(candidate.path))

    if count == 0:
        logger.error(f"No {args.kind.display_name} installation found")
        return 1
    return 0
