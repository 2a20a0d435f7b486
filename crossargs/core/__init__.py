"""
Core functionality for crossargs.

This package contains the foundational modules that other components depend on:
the exception hierarchy and the process/filesystem boundaries.
"""

from .exceptions import (
    CrossArgsError,
    ConfigurationError,
    MissingTargetError,
    ExternalToolError,
    SdkLookupError,
)

from .interfaces import (
    CommandRunner,
    TreeWalker,
)

from .process import SubprocessRunner
from .filesystem import OsTreeWalker

__all__ = [
    # Exceptions
    "CrossArgsError",
    "ConfigurationError",
    "MissingTargetError",
    "ExternalToolError",
    "SdkLookupError",
    # Interfaces
    "CommandRunner",
    "TreeWalker",
    # Implementations
    "SubprocessRunner",
    "OsTreeWalker",
]
