"""gnome-screensaver backend: session idle delay via gsettings."""

from __future__ import annotations

import logging
import re

from sstimeout.common.errors import ExternalCommandError, ParseError
from sstimeout.common.settings import settings
from sstimeout.common.types import BackendId, CommandResult
from sstimeout.system.command import CommandRunnerProtocol

logger = logging.getLogger(__name__)


class GnomeBackend:
    """Read and write org.gnome.desktop.session idle-delay (seconds)."""

    backend_id = BackendId.GNOME

    # gsettings prints typed GVariant text, e.g. "uint32 300"
    _VALUE_PATTERN = re.compile(r"\A(?P<tag>[a-z]+\d*)\s+(?P<value>\d+)\Z")

    def __init__(self, runner: CommandRunnerProtocol) -> None:
        self._runner: CommandRunnerProtocol = runner

    def timeout_get(self) -> int:
        """
        Query the idle delay.

        Returns:
            Idle delay in seconds.

        Raises:
            ExternalCommandError: If gsettings exits non-zero.
            ParseError: If the output is not "<type> <digits>".
        """
        result = self._gsettings_run("get")
        return self._output_parse(result.stdout)

    def timeout_set(self, seconds: int) -> None:
        """
        Set the idle delay.

        Args:
            seconds: New idle delay in seconds.

        Raises:
            ExternalCommandError: If gsettings exits non-zero.
        """
        logger.info(f"Setting GNOME idle-delay to {seconds}s")
        self._gsettings_run("set", str(int(seconds)))

    def _gsettings_run(self, action: str, *values: str) -> CommandResult:
        argv = ["gsettings", action, settings.GNOME_SCHEMA, settings.GNOME_IDLE_DELAY_KEY, *values]
        result = self._runner.command_run(argv)
        if not result.isSuccess():
            raise ExternalCommandError(argv, result.returncode, result.stderr)
        return result

    @classmethod
    def _output_parse(cls, output: str) -> int:
        """
        Extract the integer from gsettings' typed output.

        Args:
            output: Raw stdout, e.g. "uint32 300\\n"

        Returns:
            Parsed integer.
        """
        match = cls._VALUE_PATTERN.match(output.strip())
        if match is None:
            raise ParseError(f"Can't parse gsettings get output: {output.strip()!r}")
        return int(match.group("value"))
