"""External command execution"""

from __future__ import annotations

import logging
import subprocess
from typing import Optional, Protocol, Sequence

from sstimeout.common.types import CommandResult

logger = logging.getLogger(__name__)

EXIT_COMMAND_NOT_FOUND = 127
EXIT_TIMED_OUT = 124


class CommandRunnerProtocol(Protocol):
    """Anything that can run an external program and report its outcome."""

    def command_run(self, argv: Sequence[str]) -> CommandResult:
        """Run argv to completion and capture its output."""


class CommandRunner:
    """Run external programs with subprocess, capturing text output"""

    def __init__(self, timeout_seconds: Optional[float] = None) -> None:
        """
        Initialize runner.

        Args:
            timeout_seconds: Per-command limit; None waits indefinitely
        """
        self._timeout_seconds: Optional[float] = timeout_seconds

    def command_run(self, argv: Sequence[str]) -> CommandResult:
        """
        Run a command and capture its exit status and output

        A missing executable is reported as exit status 127 and an expired
        timeout as 124, the same codes a shell would give, so callers only
        ever inspect the result.

        Args:
            argv: Program and arguments

        Returns:
            CommandResult with returncode, stdout and stderr
        """
        command = tuple(str(arg) for arg in argv)
        logger.debug(f"Running: {' '.join(command)}")

        try:
            completed = subprocess.run(
                command,
                check=False,
                capture_output=True,
                text=True,
                timeout=self._timeout_seconds,
            )
        except FileNotFoundError:
            logger.debug(f"{command[0]}: command not found")
            return CommandResult(
                argv=command,
                returncode=EXIT_COMMAND_NOT_FOUND,
                stdout="",
                stderr=f"{command[0]}: command not found",
            )
        except subprocess.TimeoutExpired:
            logger.warning(f"{command[0]} timed out after {self._timeout_seconds}s")
            return CommandResult(
                argv=command,
                returncode=EXIT_TIMED_OUT,
                stdout="",
                stderr=f"{command[0]}: timed out after {self._timeout_seconds}s",
            )

        logger.debug(f"{command[0]} exited with status {completed.returncode}")
        return CommandResult(
            argv=command,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
