"""
Mock tree walker for testing.

Walks an in-memory set of paths instead of the disk, so framework discovery
can be tested with arbitrary layouts.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Set

from crossargs.core.interfaces import TreeWalker


class MockTreeWalker(TreeWalker):
    """TreeWalker over an in-memory set of paths."""

    def __init__(self, entries: Iterable[str]):
        """
        Initialize mock walker.

        Args:
            entries: Paths relative to any root; parents are added implicitly
        """
        self.entries: Set[Path] = set()
        for entry in entries:
            path = Path(entry)
            self.entries.add(path)
            self.entries.update(p for p in path.parents if p != Path("."))
        self.roots: List[Path] = []

    def walk(self, root: Path) -> Iterator[Path]:
        self.roots.append(root)
        for entry in sorted(self.entries):
            yield root / entry
