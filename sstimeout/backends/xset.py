"""Generic X11 backend: the X server's own screen saver timer via xset.

`xset q` prints blocks headed by a column-0 line ending in ':' followed by
indented "Setting:  value" pairs, e.g.::

    Screen Saver:
      prefer blanking:  yes    allow exposures:  yes
      timeout:  600    cycle:  600
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from sstimeout.common.errors import ExternalCommandError, ParseError
from sstimeout.common.settings import settings
from sstimeout.common.types import BackendId
from sstimeout.system.command import CommandRunnerProtocol

logger = logging.getLogger(__name__)

_TIMEOUT_PATTERN = re.compile(r"(?:^|\s)timeout:\s*(\d+)\b")


def xsetSections_parse(output: str) -> dict[str, list[str]]:
    """
    Split `xset q` output into its top-level blocks.

    Args:
        output: Raw stdout of `xset q`

    Returns:
        Block title (without the trailing ':') mapped to its indented lines
    """
    sections: dict[str, list[str]] = {}
    current: Optional[list[str]] = None
    for line in output.splitlines():
        if not line.strip():
            continue
        if not line[0].isspace() and line.rstrip().endswith(":"):
            current = sections.setdefault(line.rstrip()[:-1], [])
        elif current is not None and line[0].isspace():
            current.append(line.strip())
    return sections


class XsetBackend:
    """Read `xset q` and set `xset s <seconds>`."""

    backend_id = BackendId.X_GENERIC

    def __init__(self, runner: CommandRunnerProtocol) -> None:
        self._runner: CommandRunnerProtocol = runner

    def screenSaverSection_get(self) -> list[str]:
        """
        Query the Screen Saver block.

        Returns:
            Its setting lines; empty when xset is missing, fails, or has no such block.
        """
        result = self._runner.command_run(["xset", "q"])
        if not result.isSuccess():
            logger.debug(f"xset q unavailable (status {result.returncode})")
            return []
        return xsetSections_parse(result.stdout).get(settings.XSET_SCREEN_SAVER_SECTION, [])

    def isAvailable(self) -> bool:
        """Check whether the X server reports a screen saver timer."""
        return bool(self.screenSaverSection_get())

    def timeout_get(self) -> int:
        """
        Read the X screen saver timeout.

        Returns:
            Timeout in seconds.

        Raises:
            ExternalCommandError: If `xset q` exits non-zero.
            ParseError: If the Screen Saver block or its timeout is missing.
        """
        argv = ["xset", "q"]
        result = self._runner.command_run(argv)
        if not result.isSuccess():
            raise ExternalCommandError(argv, result.returncode, result.stderr)

        section = xsetSections_parse(result.stdout).get(settings.XSET_SCREEN_SAVER_SECTION)
        if not section:
            raise ParseError(f"No '{settings.XSET_SCREEN_SAVER_SECTION}' block in xset q output")
        for line in section:
            match = _TIMEOUT_PATTERN.search(line)
            if match:
                return int(match.group(1))
        raise ParseError(f"Can't find timeout in xset '{settings.XSET_SCREEN_SAVER_SECTION}' block")

    def timeout_set(self, seconds: int) -> None:
        """
        Set the X screen saver timeout.

        Args:
            seconds: New timeout in seconds.

        Raises:
            ExternalCommandError: If xset exits non-zero.
        """
        argv = ["xset", "s", str(int(seconds))]
        logger.info(f"Setting X screen saver timeout to {int(seconds)}s")
        result = self._runner.command_run(argv)
        if not result.isSuccess():
            raise ExternalCommandError(argv, result.returncode, result.stderr)
