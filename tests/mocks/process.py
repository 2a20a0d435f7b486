"""
Mock command runner for testing.

Records every command it is asked to run and answers from a table of canned
outputs, so SDK resolution can be tested without xcrun.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from crossargs.core.exceptions import ExternalToolError
from crossargs.core.interfaces import CommandRunner


class MockCommandRunner(CommandRunner):
    """CommandRunner returning canned output."""

    def __init__(
        self,
        outputs: Optional[Dict[Tuple[str, ...], str]] = None,
        default: Optional[str] = None,
        error: Optional[str] = None,
    ):
        """
        Initialize mock runner.

        Args:
            outputs: Map of command tuples to their output
            default: Output for commands not in outputs (None raises)
            error: If set, every command fails with this message
        """
        self.outputs = outputs or {}
        self.default = default
        self.error = error
        self.calls: List[List[str]] = []

    def run(self, command: Sequence[str]) -> str:
        self.calls.append(list(command))

        if self.error is not None:
            raise ExternalToolError(self.error)

        output = self.outputs.get(tuple(command), self.default)
        if output is None:
            raise ExternalToolError(f"unexpected command: {' '.join(command)}")
        return output.strip()


def xcrun_outputs(**paths: str) -> Dict[Tuple[str, ...], str]:
    """Build an outputs table for xcrun keyed by SDK name."""
    return {("xcrun", "--sdk", sdk, "--show-sdk-path"): path for sdk, path in paths.items()}


MACOSX_SDK = "/Applications/Xcode.app/Contents/Developer/Platforms/MacOSX.platform/Developer/SDKs/MacOSX.sdk"
IPHONEOS_SDK = "/Applications/Xcode.app/Contents/Developer/Platforms/iPhoneOS.platform/Developer/SDKs/iPhoneOS.sdk"
IPHONESIMULATOR_SDK = "/Applications/Xcode.app/Contents/Developer/Platforms/iPhoneSimulator.platform/Developer/SDKs/iPhoneSimulator.sdk"
