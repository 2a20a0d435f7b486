"""
SDK path command implementation.

Resolves the Apple SDK sysroot for a target with xcrun.
"""

import logging

from crossargs.cli.utils import print_error, resolve_target
from crossargs.cross.sysroot import SdkResolver

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the sdk-path command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 1 if the target has no Apple SDK)
    """
    target = resolve_target(args.target)
    path = SdkResolver().sdk_path(target)

    if path is None:
        print_error(f"No Apple SDK applies to target: {target}")
        return 1

    print(path)
    return 0
