"""
Framework bundle discovery.

Finds Apple framework bundles below a directory and turns each one into a pair
of linker directives: a framework search path for the bundle's parent
directory and a framework link for the bundle's name.

Example:
    >>> linker = FrameworkLinker(excluded={"build"})
    >>> linker.discover_and_link(Path("vendor/frameworks"))
    link-search=framework=vendor/frameworks
    link-lib=framework=Foo
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Union

from crossargs.core.filesystem import OsTreeWalker
from crossargs.core.interfaces import TreeWalker

logger = logging.getLogger(__name__)

FRAMEWORK_SUFFIX = ".framework"
SEARCH_DIRECTIVE = "link-search=framework="
LINK_DIRECTIVE = "link-lib=framework="


@dataclass(frozen=True)
class Framework:
    """
    A discovered framework bundle.

    Attributes:
        path: Path of the .framework bundle
    """

    path: Path

    @property
    def name(self) -> str:
        """Bundle name without the .framework suffix."""
        return self.path.stem

    @property
    def search_dir(self) -> Path:
        """Directory containing the bundle."""
        return self.path.parent

    def directives(self) -> List[str]:
        """Search-path and link directive lines for this bundle."""
        return [
            f"{SEARCH_DIRECTIVE}{self.search_dir}",
            f"{LINK_DIRECTIVE}{self.name}",
        ]


class FrameworkLinker:
    """
    Discover framework bundles and emit linker directives.

    Exclusion only looks at the components of an entry below the walk root.
    Directories above the root (the root itself included) never exclude
    anything, so walking a directory named like an excluded component still
    finds its frameworks.

    Attributes:
        excluded: Path component names (below the root) that exclude an entry
        walker: TreeWalker used to enumerate entries
    """

    def __init__(
        self,
        excluded: Optional[Iterable[str]] = None,
        walker: Optional[TreeWalker] = None,
    ):
        self.excluded = frozenset(excluded or ())
        self.walker = walker or OsTreeWalker()

    def is_excluded(self, path: Path, root: Path) -> bool:
        """
        Check whether any component of path (relative to root) is excluded.

        Args:
            path: Entry path
            root: Root the walk started from

        Returns:
            True if the entry must be skipped
        """
        try:
            parts = path.relative_to(root).parts
        except ValueError:
            parts = path.parts
        return any(part in self.excluded for part in parts)

    def discover(self, root: Union[str, Path]) -> List[Framework]:
        """
        Find all framework bundles below root.

        Args:
            root: Directory to search

        Returns:
            Discovered frameworks in walk order
        """
        root = Path(root)
        frameworks = []
        for entry in self.walker.walk(root):
            if entry.suffix != FRAMEWORK_SUFFIX:
                continue
            if self.is_excluded(entry, root):
                logger.debug(f"Excluded framework: {entry}")
                continue
            logger.debug(f"Found framework: {entry}")
            frameworks.append(Framework(entry))
        return frameworks

    def link_directives(self, root: Union[str, Path]) -> List[str]:
        """Get the directive lines for every framework below root."""
        directives = []
        for framework in self.discover(root):
            directives.extend(framework.directives())
        return directives

    def discover_and_link(
        self, root: Union[str, Path], out: Optional[TextIO] = None
    ) -> int:
        """
        Print directives for every framework below root.

        Args:
            root: Directory to search
            out: Output stream (default: stdout)

        Returns:
            Number of frameworks linked
        """
        out = out or sys.stdout
        frameworks = self.discover(root)
        for framework in frameworks:
            for line in framework.directives():
                print(line, file=out)
        return len(frameworks)


def discover_and_link(
    root: Union[str, Path], excluded: Optional[Iterable[str]] = None
) -> int:
    """Print framework directives for root using the default walker."""
    return FrameworkLinker(excluded).discover_and_link(root)
