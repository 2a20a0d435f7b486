"""
Cross-compilation support for crossargs.

This module provides target triple classification, Apple SDK sysroot
resolution and framework bundle discovery.
"""

from crossargs.cross.targets import (
    PlatformCategory,
    IOSTarget,
    MacOSTarget,
    AndroidTarget,
    UnrecognizedTarget,
    classify,
    correct_target_triple,
)
from crossargs.cross.sysroot import SdkKind, SdkResolver, sdk_kind, sdk_path
from crossargs.cross.frameworks import Framework, FrameworkLinker, discover_and_link

__all__ = [
    "PlatformCategory",
    "IOSTarget",
    "MacOSTarget",
    "AndroidTarget",
    "UnrecognizedTarget",
    "classify",
    "correct_target_triple",
    "SdkKind",
    "SdkResolver",
    "sdk_kind",
    "sdk_path",
    "Framework",
    "FrameworkLinker",
    "discover_and_link",
]
