"""
Link-frameworks command implementation.

Prints link-search/link-lib directives for every framework bundle below a
directory.
"""

import logging

from crossargs.cli.utils import load_config, print_error
from crossargs.cross.frameworks import FrameworkLinker

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the link-frameworks command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if no root directory is known)
    """
    config = load_config(args.config)

    root = args.root or config.frameworks.root
    if root is None:
        print_error(
            "No framework root given",
            "Pass ROOT or set frameworks.root in crossargs.yaml",
        )
        return 1

    excluded = set(config.frameworks.exclude) | set(args.exclude or [])
    count = FrameworkLinker(excluded).discover_and_link(root)
    logger.debug(f"Linked {count} framework(s) from {root}")
    return 0
