"""
Mock implementations for testing crossargs components.

This package provides mock implementations of external dependencies and
system interactions to enable isolated, deterministic testing.
"""

from .filesystem import MockTreeWalker
from .process import (
    MockCommandRunner,
    xcrun_outputs,
    MACOSX_SDK,
    IPHONEOS_SDK,
    IPHONESIMULATOR_SDK,
)

__all__ = [
    "MockTreeWalker",
    "MockCommandRunner",
    "xcrun_outputs",
    "MACOSX_SDK",
    "IPHONEOS_SDK",
    "IPHONESIMULATOR_SDK",
]
