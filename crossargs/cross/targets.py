"""
Target triple classification.

This module sorts target triples into the platform families that need
platform-specific compiler handling: iOS, macOS and Android. Anything else is
unrecognized and gets no special treatment.

Example:
    >>> from crossargs.cross.targets import classify
    >>> classify("aarch64-linux-android")
    AndroidTarget(triple='aarch64-linux-android')
    >>> classify("x86_64-apple-darwin").is_apple
    True
"""

import logging
from dataclasses import dataclass
from typing import ClassVar, Union

logger = logging.getLogger(__name__)

IOS_MARKER = "ios"
APPLE_MARKER = "apple"
ANDROID_MARKER = "android"

# Triple the front end expects in place of the one the Apple tooling uses.
# https://github.com/rust-lang/rust-bindgen/issues/1211
TRIPLE_CORRECTIONS = {
    "aarch64-apple-ios": "arm64-apple-ios",
}


@dataclass(frozen=True)
class PlatformCategory:
    """
    Platform family of a target triple.

    Concrete subclasses are the only values ever produced by classify(); each
    keeps the original, unmodified triple.

    Attributes:
        triple: Original target triple string
    """

    triple: str

    name: ClassVar[str] = "unrecognized"
    is_apple: ClassVar[bool] = False
    is_android: ClassVar[bool] = False

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IOSTarget(PlatformCategory):
    """iOS device or simulator target."""

    name: ClassVar[str] = "ios"
    is_apple: ClassVar[bool] = True


@dataclass(frozen=True)
class MacOSTarget(PlatformCategory):
    """Any other Apple-vendor target."""

    name: ClassVar[str] = "macos"
    is_apple: ClassVar[bool] = True


@dataclass(frozen=True)
class AndroidTarget(PlatformCategory):
    """Android target."""

    name: ClassVar[str] = "android"
    is_android: ClassVar[bool] = True


@dataclass(frozen=True)
class UnrecognizedTarget(PlatformCategory):
    """Target without platform-specific handling."""

    name: ClassVar[str] = "unrecognized"


def classify(triple: str) -> PlatformCategory:
    """
    Classify a target triple.

    Checks run in order and the first match wins, so an iOS triple is always
    iOS even though it also names the Apple vendor.

    Args:
        triple: Target triple (e.g. 'aarch64-apple-ios')

    Returns:
        IOSTarget, MacOSTarget, AndroidTarget or UnrecognizedTarget
    """
    if IOS_MARKER in triple:
        category = IOSTarget(triple)
    elif APPLE_MARKER in triple:
        category = MacOSTarget(triple)
    elif ANDROID_MARKER in triple:
        category = AndroidTarget(triple)
    else:
        category = UnrecognizedTarget(triple)

    logger.debug(f"Classified {triple!r} as {category.name}")
    return category


def as_category(target: Union[str, PlatformCategory]) -> PlatformCategory:
    """Return target unchanged if already classified, else classify it."""
    if isinstance(target, PlatformCategory):
        return target
    return classify(target)


def correct_target_triple(triple: str) -> str:
    """
    Map a triple to the spelling the compiler front end expects.

    The SDK lookup still uses the original triple; only the final --target
    flag goes through this function.

    Args:
        triple: Original target triple

    Returns:
        Corrected triple, or the input unchanged when no correction applies
    """
    return TRIPLE_CORRECTIONS.get(triple, triple)
