"""
Subprocess-backed command runner.

Runs external tools synchronously and returns their trimmed standard output.
Any failure to start the tool, a timeout, undecodable output or a non-zero exit
status is reported as ExternalToolError; nothing is retried.
"""

import logging
import subprocess
from typing import Optional, Sequence

from crossargs.core.exceptions import ExternalToolError
from crossargs.core.interfaces import CommandRunner

logger = logging.getLogger(__name__)


class SubprocessRunner(CommandRunner):
    """Run commands with subprocess.run and capture stdout."""

    def __init__(self, timeout: Optional[float] = None):
        """
        Initialize runner.

        Args:
            timeout: Optional timeout in seconds (None waits indefinitely)
        """
        self.timeout = timeout

    def run(self, command: Sequence[str]) -> str:
        command = list(command)
        logger.debug(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(
                command, capture_output=True, text=True, timeout=self.timeout
            )
        except FileNotFoundError:
            raise ExternalToolError(f"{command[0]} not found in PATH")
        except subprocess.TimeoutExpired:
            raise ExternalToolError(
                f"{command[0]} timed out after {self.timeout} seconds"
            )
        except UnicodeDecodeError as e:
            raise ExternalToolError(
                f"{command[0]} produced undecodable output"
            ) from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            message = f"{command[0]} exited with status {result.returncode}"
            if stderr:
                message += f": {stderr}"
            raise ExternalToolError(message)

        return result.stdout.strip()
