"""
Compiler flag assembly for crossargs.
"""

from crossargs.flags.standard import CppStandard, DEFAULT_STANDARD
from crossargs.flags.builder import (
    ArgumentBuilder,
    default_clang_args,
    target_from_env,
)

__all__ = [
    "CppStandard",
    "DEFAULT_STANDARD",
    "ArgumentBuilder",
    "default_clang_args",
    "target_from_env",
]
