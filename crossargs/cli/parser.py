"""
crossargs CLI argument parser.

This module implements the command-line interface for crossargs using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from crossargs.core.exceptions import CrossArgsError
from crossargs.flags.standard import CppStandard

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("crossargs")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """crossargs command-line interface."""

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
            prog="crossargs",
            description="crossargs - clang arguments for cross-compiled C++ bindings",
            epilog='Use "crossargs COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"crossargs {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
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
            help="Path to configuration file (default: ./crossargs.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_args_command(subparsers)
        self._add_classify_command(subparsers)
        self._add_sdk_path_command(subparsers)
        self._add_link_frameworks_command(subparsers)

        return parser

    @staticmethod
    def _add_target_option(parser):
        parser.add_argument(
            "--target",
            metavar="TRIPLE",
            help="Target triple (default: $TARGET)",
        )

    def _add_args_command(self, subparsers):
        """Add 'args' subcommand."""
        parser = subparsers.add_parser(
            "args",
            help="Print compiler arguments for a target",
            description="Print the clang arguments needed to parse C++ headers for a target",
        )
        self._add_target_option(parser)
        parser.add_argument(
            "--include",
            "-I",
            action="append",
            dest="includes",
            metavar="DIR",
            help="Include directory (can be used multiple times)",
        )
        parser.add_argument(
            "--apple-arg",
            action="append",
            dest="apple_args",
            metavar="ARG",
            help="Extra argument for Apple targets (can be used multiple times)",
        )
        parser.add_argument(
            "--android-arg",
            action="append",
            dest="android_args",
            metavar="ARG",
            help="Extra argument for Android targets (can be used multiple times)",
        )
        parser.add_argument(
            "--std",
            choices=[s.value for s in CppStandard],
            metavar="STD",
            help="C++ standard (c++11|c++14|c++17) [default: from config or c++17]",
        )
        parser.add_argument(
            "--no-platform-stdlib",
            action="store_true",
            help="Omit -stdlib=libc++",
        )
        parser.add_argument(
            "--format",
            choices=["lines", "json", "shell"],
            default="lines",
            metavar="FORMAT",
            help="Output format (lines|json|shell) [default: lines]",
        )

    def _add_classify_command(self, subparsers):
        """Add 'classify' subcommand."""
        parser = subparsers.add_parser(
            "classify",
            help="Print the platform family of a target",
            description="Classify a target triple as ios, macos, android or unrecognized",
        )
        self._add_target_option(parser)

    def _add_sdk_path_command(self, subparsers):
        """Add 'sdk-path' subcommand."""
        parser = subparsers.add_parser(
            "sdk-path",
            help="Print the Apple SDK path for a target",
            description="Resolve the Apple SDK sysroot for a target with xcrun",
        )
        self._add_target_option(parser)

    def _add_link_frameworks_command(self, subparsers):
        """Add 'link-frameworks' subcommand."""
        parser = subparsers.add_parser(
            "link-frameworks",
            help="Print linker directives for framework bundles",
            description="Find .framework bundles below ROOT and print link directives",
        )
        parser.add_argument(
            "root",
            nargs="?",
            type=Path,
            metavar="ROOT",
            help="Directory to search (default: frameworks.root from config)",
        )
        parser.add_argument(
            "--exclude",
            action="append",
            metavar="NAME",
            help="Skip entries with this path component (can be used multiple times)",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        # Configure logging
        self._configure_logging(parsed_args)

        # Check if command specified
        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except CrossArgsError as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

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
            "args": "crossargs.cli.commands.args",
            "classify": "crossargs.cli.commands.classify",
            "sdk-path": "crossargs.cli.commands.sdk_path",
            "link-frameworks": "crossargs.cli.commands.link_frameworks",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
