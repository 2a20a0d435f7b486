"""
C++ language standard selection.

A build configuration selects exactly one standard; every argument list built
under that configuration carries the matching -std flag.
"""

from enum import Enum
from typing import Union

from crossargs.core.exceptions import ConfigurationError

LANGUAGE_FLAG = "-xc++"
PLATFORM_STDLIB_FLAG = "-stdlib=libc++"


class CppStandard(Enum):
    """Supported C++ standards."""

    CXX11 = "c++11"
    CXX14 = "c++14"
    CXX17 = "c++17"

    @property
    def flag(self) -> str:
        """Compiler flag selecting this standard (e.g. '-std=c++17')."""
        return f"-std={self.value}"

    @classmethod
    def parse(cls, value: Union[str, int, "CppStandard"]) -> "CppStandard":
        """
        Parse a standard from configuration input.

        Accepts the enum itself, a year suffix (17, "17"), the plain name
        ("c++17") or the full flag ("-std=c++17").

        Args:
            value: Standard to parse

        Returns:
            Matching CppStandard

        Raises:
            ConfigurationError: If value does not name a supported standard
        """
        if isinstance(value, cls):
            return value

        text = str(value).strip().lower()
        if text.startswith("-std="):
            text = text[len("-std="):]
        if not text.startswith("c++"):
            text = f"c++{text}"

        for standard in cls:
            if standard.value == text:
                return standard

        supported = ", ".join(s.value for s in cls)
        raise ConfigurationError(
            f"Unsupported C++ standard: {value} (expected one of {supported})"
        )


DEFAULT_STANDARD = CppStandard.CXX17
