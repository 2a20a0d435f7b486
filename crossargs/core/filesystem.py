"""
Filesystem traversal for crossargs.

Provides the os.walk-backed TreeWalker used by framework discovery. Entries
that cannot be read (permissions, entries removed mid-walk) are skipped and
the walk carries on.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, Union

from crossargs.core.interfaces import TreeWalker

logger = logging.getLogger(__name__)


def _skip_unreadable(error: OSError) -> None:
    logger.debug(f"Skipping unreadable entry: {error.filename} ({error.strerror})")


class OsTreeWalker(TreeWalker):
    """
    Walk a directory tree with os.walk.

    Directory listings are sorted so repeated runs over the same tree yield
    entries in the same order.

    Attributes:
        follow_symlinks: Whether to descend into symlinked directories
    """

    def __init__(self, follow_symlinks: bool = False):
        self.follow_symlinks = follow_symlinks

    def walk(self, root: Union[str, Path]) -> Iterator[Path]:
        root = Path(root)
        for dirpath, dirnames, filenames in os.walk(
            root, onerror=_skip_unreadable, followlinks=self.follow_symlinks
        ):
            dirnames.sort()
            current = Path(dirpath)
            for name in dirnames + sorted(filenames):
                yield current / name
