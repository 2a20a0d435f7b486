"""
Apple SDK sysroot resolution.

This module maps Apple target triples to the SDK that provides their headers
and asks xcrun for the SDK location. The lookup tool is reached through a
CommandRunner, so callers and tests can substitute their own.
"""

import logging
from enum import Enum
from typing import Optional

from crossargs.core.exceptions import ExternalToolError, SdkLookupError
from crossargs.core.interfaces import CommandRunner
from crossargs.core.process import SubprocessRunner

logger = logging.getLogger(__name__)

XCRUN = "xcrun"
MACOS_MARKER = "apple-darwin"
SIMULATOR_TRIPLES = ("x86_64-apple-ios", "i386-apple-ios")
DEVICE_TRIPLES = ("aarch64-apple-ios", "armv7-apple-ios")


class SdkKind(Enum):
    """Apple SDKs known to xcrun."""

    MACOSX = "macosx"
    IPHONESIMULATOR = "iphonesimulator"
    IPHONEOS = "iphoneos"


def sdk_kind(triple: str) -> Optional[SdkKind]:
    """
    Determine which Apple SDK a target triple builds against.

    Args:
        triple: Target triple

    Returns:
        SdkKind, or None if the triple has no known SDK

    Example:
        >>> sdk_kind("x86_64-apple-ios")
        <SdkKind.IPHONESIMULATOR: 'iphonesimulator'>
        >>> sdk_kind("aarch64-linux-android") is None
        True
    """
    if MACOS_MARKER in triple:
        return SdkKind.MACOSX
    if triple in SIMULATOR_TRIPLES:
        return SdkKind.IPHONESIMULATOR
    if triple in DEVICE_TRIPLES:
        return SdkKind.IPHONEOS
    return None


class SdkResolver:
    """
    Resolve SDK sysroot paths with xcrun.

    Attributes:
        runner: CommandRunner used to invoke xcrun
    """

    def __init__(self, runner: Optional[CommandRunner] = None):
        """
        Initialize resolver.

        Args:
            runner: Command runner (defaults to a SubprocessRunner)
        """
        self.runner = runner or SubprocessRunner()

    def sdk_path(self, triple: str) -> Optional[str]:
        """
        Get the SDK path for a target triple.

        Triples without a known SDK return None without running anything.

        Args:
            triple: Target triple (must be the original, uncorrected triple)

        Returns:
            Trimmed output of 'xcrun --sdk <kind> --show-sdk-path', or None

        Raises:
            SdkLookupError: If xcrun fails or its output is not a single path
        """
        kind = sdk_kind(triple)
        if kind is None:
            logger.debug(f"No Apple SDK for {triple}")
            return None

        try:
            output = self.runner.run([XCRUN, "--sdk", kind.value, "--show-sdk-path"])
        except ExternalToolError as e:
            raise SdkLookupError(kind.value, str(e)) from e

        path = output.strip()
        if not path:
            raise SdkLookupError(kind.value, "empty output")
        if "\n" in path:
            raise SdkLookupError(kind.value, f"unexpected output: {path!r}")

        logger.debug(f"SDK {kind.value} for {triple}: {path}")
        return path


def sdk_path(triple: str, runner: Optional[CommandRunner] = None) -> Optional[str]:
    """Resolve the SDK path for a triple with a one-off SdkResolver."""
    return SdkResolver(runner).sdk_path(triple)
