"""
Compiler argument assembly for C++ header processing.

This module builds the ordered argument list a clang front end needs to parse
C++ headers for a cross-compilation target. The order matters to the front
end:

1. language mode, platform C++ runtime and standard
2. Apple sysroot and Apple-specific extras, or Android-specific extras
3. include directories
4. target triple (always last)

Example:
    ```python
    from crossargs.flags.builder import ArgumentBuilder
    from crossargs.flags.standard import CppStandard

    builder = ArgumentBuilder(CppStandard.CXX14)
    args = builder.build(
        "aarch64-linux-android",
        includes=["include"],
        android_args=["-DANDROID"],
    )
    # ['-xc++', '-stdlib=libc++', '-std=c++14', '-DANDROID',
    #  '-Iinclude', '--target=aarch64-linux-android']
    ```
"""

import logging
import os
from typing import List, Mapping, Optional, Sequence, Union

from crossargs.core.exceptions import MissingTargetError
from crossargs.core.interfaces import CommandRunner
from crossargs.cross.sysroot import SdkResolver
from crossargs.cross.targets import PlatformCategory, as_category, correct_target_triple
from crossargs.flags.standard import (
    DEFAULT_STANDARD,
    LANGUAGE_FLAG,
    PLATFORM_STDLIB_FLAG,
    CppStandard,
)

logger = logging.getLogger(__name__)

TARGET_ENV_VAR = "TARGET"
SYSROOT_FLAG = "-isysroot"
INCLUDE_FLAG = "-I"
TARGET_FLAG = "--target="


class ArgumentBuilder:
    """
    Build clang arguments for a target.

    Attributes:
        cpp_standard: C++ standard selected for this build configuration
        platform_stdlib: Whether to emit -stdlib=libc++
        sdk_resolver: Resolver used for Apple sysroots
    """

    def __init__(
        self,
        cpp_standard: Union[CppStandard, str, int] = DEFAULT_STANDARD,
        platform_stdlib: bool = True,
        sdk_resolver: Optional[SdkResolver] = None,
    ):
        """
        Initialize argument builder.

        Args:
            cpp_standard: C++ standard (enum or anything CppStandard.parse accepts)
            platform_stdlib: Emit the libc++ runtime flag
            sdk_resolver: Optional SdkResolver (defaults to one backed by xcrun)
        """
        self.cpp_standard = CppStandard.parse(cpp_standard)
        self.platform_stdlib = platform_stdlib
        self.sdk_resolver = sdk_resolver or SdkResolver()

    def base_args(self) -> List[str]:
        """Get the language mode, runtime and standard flags."""
        args = [LANGUAGE_FLAG]
        if self.platform_stdlib:
            args.append(PLATFORM_STDLIB_FLAG)
        args.append(self.cpp_standard.flag)
        return args

    def platform_args(
        self,
        category: PlatformCategory,
        apple_args: Sequence[str] = (),
        android_args: Sequence[str] = (),
    ) -> List[str]:
        """
        Get sysroot and platform-specific extra flags.

        Args:
            category: Classified target
            apple_args: Extra flags for Apple targets
            android_args: Extra flags for Android targets

        Returns:
            Flags for the target's platform family (empty if unrecognized)

        Raises:
            SdkLookupError: If the Apple SDK lookup fails
        """
        args = []

        if category.is_apple:
            sysroot = self.sdk_resolver.sdk_path(category.triple)
            if sysroot:
                args.extend([SYSROOT_FLAG, sysroot])
            args.extend(apple_args)

        if category.is_android:
            args.extend(android_args)

        return args

    def build(
        self,
        target: Union[str, PlatformCategory],
        includes: Sequence[str] = (),
        apple_args: Sequence[str] = (),
        android_args: Sequence[str] = (),
    ) -> List[str]:
        """
        Build the full argument list for a target.

        Args:
            target: Target triple or an already classified target
            includes: Include directories, emitted in order as -I<dir>
            apple_args: Extra flags for Apple targets
            android_args: Extra flags for Android targets

        Returns:
            Ordered list of compiler arguments

        Raises:
            SdkLookupError: If the Apple SDK lookup fails
        """
        category = as_category(target)

        args = self.base_args()
        args.extend(self.platform_args(category, apple_args, android_args))
        args.extend(f"{INCLUDE_FLAG}{include}" for include in includes)
        args.append(f"{TARGET_FLAG}{correct_target_triple(category.triple)}")

        logger.debug(f"Compiler arguments for {category.triple}: {args}")
        return args


def target_from_env(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Read the target triple from the environment.

    Args:
        environ: Environment mapping (default: os.environ)

    Returns:
        Target triple

    Raises:
        MissingTargetError: If TARGET is not set
    """
    environ = os.environ if environ is None else environ
    target = environ.get(TARGET_ENV_VAR)
    if not target:
        raise MissingTargetError(TARGET_ENV_VAR)
    return target


def default_clang_args(
    includes: Sequence[str] = (),
    apple_args: Sequence[str] = (),
    android_args: Sequence[str] = (),
    cpp_standard: Union[CppStandard, str, int] = DEFAULT_STANDARD,
    platform_stdlib: bool = True,
    runner: Optional[CommandRunner] = None,
) -> List[str]:
    """
    Build compiler arguments for the target named by $TARGET.

    This is the entry point for build scripts: the triple comes from the
    environment the build tool sets up.

    Args:
        includes: Include directories
        apple_args: Extra flags for Apple targets
        android_args: Extra flags for Android targets
        cpp_standard: C++ standard for this build configuration
        platform_stdlib: Emit the libc++ runtime flag
        runner: Optional command runner for the SDK lookup

    Returns:
        Ordered list of compiler arguments

    Raises:
        MissingTargetError: If TARGET is not set
        SdkLookupError: If the Apple SDK lookup fails
    """
    builder = ArgumentBuilder(
        cpp_standard=cpp_standard,
        platform_stdlib=platform_stdlib,
        sdk_resolver=SdkResolver(runner),
    )
    return builder.build(target_from_env(), includes, apple_args, android_args)
