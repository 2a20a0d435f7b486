"""
Centralized exception hierarchy for crossargs.

Everything raised here is unrecoverable for the enclosing build: callers are
expected to let these propagate to the top-level process and abort.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class CrossArgsError(Exception):
    """Base exception for all crossargs errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(CrossArgsError):
    """Base exception for build configuration errors."""

    pass


class MissingTargetError(ConfigurationError):
    """Raised when no target triple is available for the build."""

    def __init__(self, variable: str = "TARGET"):
        self.variable = variable
        super().__init__(f"Target triple not set: environment variable {variable} is missing")


# ============================================================================
# External Tool Exceptions
# ============================================================================


class ExternalToolError(CrossArgsError):
    """Base exception for failures of external command-line tools."""

    pass


class SdkLookupError(ExternalToolError):
    """Raised when the SDK path lookup tool fails or returns unusable output."""

    def __init__(self, sdk: str, reason: str):
        self.sdk = sdk
        self.reason = reason
        super().__init__(f"xcrun failed to resolve SDK '{sdk}': {reason}")
