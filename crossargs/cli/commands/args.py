"""
Args command implementation.

Prints the clang arguments for a target, merging command-line options over
the build configuration.
"""

import logging

from crossargs.cli.utils import format_args, load_config, resolve_target
from crossargs.flags.builder import ArgumentBuilder

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the args command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_config(args.config)
    target = resolve_target(args.target)

    builder = ArgumentBuilder(
        cpp_standard=args.std or config.cpp_standard,
        platform_stdlib=config.platform_stdlib and not args.no_platform_stdlib,
    )

    compiler_args = builder.build(
        target,
        includes=config.includes + (args.includes or []),
        apple_args=config.apple_args + (args.apple_args or []),
        android_args=config.android_args + (args.android_args or []),
    )

    print(format_args(compiler_args, args.format))
    return 0
