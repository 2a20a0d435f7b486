"""
Shared utilities for CLI commands.

Provides configuration loading and target resolution used across commands.
"""

import logging
import os
import shlex
import sys
from pathlib import Path
from typing import List, Optional

from crossargs.config.parser import DEFAULT_CONFIG_NAME, CrossArgsConfig, parse_config
from crossargs.flags.builder import target_from_env

logger = logging.getLogger(__name__)


def load_config(config_file: Optional[Path] = None) -> CrossArgsConfig:
    """
    Load the build configuration.

    An explicitly given file must exist; the default ./crossargs.yaml is
    optional and defaults apply when it is absent.

    Args:
        config_file: Optional path from --config

    Returns:
        Parsed configuration

    Raises:
        ConfigError: If the configuration is invalid or an explicit file is missing
    """
    if config_file is not None:
        return parse_config(config_file, required=True)
    return parse_config(Path.cwd() / DEFAULT_CONFIG_NAME, required=False)


def resolve_target(target: Optional[str] = None) -> str:
    """
    Resolve the target triple from --target or the environment.

    Raises:
        MissingTargetError: If neither is set
    """
    if target:
        return target
    return target_from_env(os.environ)


def format_args(args: List[str], output_format: str = "lines") -> str:
    """
    Format compiler arguments for output.

    Args:
        args: Compiler arguments
        output_format: 'lines' (one per line), 'json' or 'shell' (quoted, one line)

    Returns:
        Formatted string
    """
    if output_format == "json":
        import json

        return json.dumps(args)
    if output_format == "shell":
        return " ".join(shlex.quote(arg) for arg in args)
    return "\n".join(args)


def print_error(message: str, details: Optional[str] = None):
    """
    Print error message to stderr in consistent format.

    Args:
        message: Main error message
        details: Optional additional details
    """
    print(f"ERROR: {message}", file=sys.stderr)
    if details:
        print(f"  {details}", file=sys.stderr)
