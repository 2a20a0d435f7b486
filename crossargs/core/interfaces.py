"""
Core interfaces for crossargs.

This module defines the two I/O boundaries the deterministic core depends on:
running an external command and walking a directory tree. The argument builder
and framework discovery only ever talk to these interfaces, so they can be
exercised in tests without spawning processes or touching the filesystem.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Sequence


class CommandRunner(ABC):
    """
    Abstract interface for running an external command.

    Implementations run the command to completion and return its standard
    output with surrounding whitespace removed.
    """

    @abstractmethod
    def run(self, command: Sequence[str]) -> str:
        """
        Run a command and capture its output.

        Args:
            command: Program name followed by its arguments

        Returns:
            Trimmed standard output of the command

        Raises:
            ExternalToolError: If the command cannot be started or fails
        """
        pass


class TreeWalker(ABC):
    """
    Abstract interface for walking a directory tree.

    Implementations yield every entry below the root (directories and files)
    and silently skip entries that cannot be read.
    """

    @abstractmethod
    def walk(self, root: Path) -> Iterator[Path]:
        """
        Iterate over all entries below root.

        Args:
            root: Directory to walk

        Yields:
            Paths of entries below root (root itself is not yielded)
        """
        pass


__all__ = [
    "CommandRunner",
    "TreeWalker",
]
