"""
Classify command implementation.

Prints the platform family of a target triple.
"""

from crossargs.cli.utils import resolve_target
from crossargs.cross.targets import classify


def run(args) -> int:
    """Print ios, macos, android or unrecognized for the target."""
    print(classify(resolve_target(args.target)).name)
    return 0
