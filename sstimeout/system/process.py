"""Process-existence checks scoped to a single invocation"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from sstimeout.system.command import CommandRunnerProtocol

logger = logging.getLogger(__name__)

# Linux keeps only the first 15 characters of a process name (TASK_COMM_LEN - 1)
PROCESS_NAME_MAX = 15


class ProcessCache:
    """Answer "is a process with this name running?" and remember the answer.

    One instance covers one backend selection. Build a new instance for the
    next call: answers are never carried across invocations because the
    process table can change between them.
    """

    def __init__(
        self,
        runner: CommandRunnerProtocol,
        overrides: Optional[Mapping[str, bool]] = None,
    ) -> None:
        """
        Initialize an empty cache.

        Args:
            runner: Command runner used to call pgrep
            overrides: Fixed answers that bypass the process table
        """
        self._runner: CommandRunnerProtocol = runner
        self._overrides: dict[str, bool] = dict(overrides or {})
        self._answers: dict[str, bool] = {}

    def process_exists(self, name: str) -> bool:
        """
        Check whether a process with exactly this name is running

        Args:
            name: Executable name; longer names are matched on their
                first PROCESS_NAME_MAX characters, as the kernel stores them

        Returns:
            True if at least one such process exists
        """
        if name in self._overrides:
            return self._overrides[name]
        if name in self._answers:
            return self._answers[name]

        result = self._runner.command_run(["pgrep", "-x", name[:PROCESS_NAME_MAX]])
        if result.returncode not in (0, 1):
            # pgrep uses 1 for "no match"; anything else means it could not look
            logger.warning(
                f"pgrep failed for {name} (status {result.returncode}): {result.stderr.strip()}"
            )
        exists = result.returncode == 0
        logger.debug(f"Process {name}: {'running' if exists else 'not running'}")
        self._answers[name] = exists
        return exists
