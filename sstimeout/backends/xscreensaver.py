"""xscreensaver backend: `timeout:` line in ~/.xscreensaver."""

from __future__ import annotations

import logging
from pathlib import Path

from sstimeout.common.errors import ExternalCommandError
from sstimeout.common.linefile import Dialect, LineFile
from sstimeout.common.settings import settings
from sstimeout.common.timeout import hms_format, hms_parse
from sstimeout.common.types import BackendId
from sstimeout.system.command import CommandRunnerProtocol
from sstimeout.system.files import TextStoreProtocol

logger = logging.getLogger(__name__)


class XScreenSaverBackend:
    """Edit the timeout stored as H:MM:SS and HUP the running daemon.

    xscreensaver keeps whole minutes; writing S seconds reads back as
    floor(S / 60) * 60.
    """

    backend_id = BackendId.XSCREENSAVER

    def __init__(self, runner: CommandRunnerProtocol, files: TextStoreProtocol, path: Path) -> None:
        self._runner: CommandRunnerProtocol = runner
        self._files: TextStoreProtocol = files
        self._path: Path = path

    def timeout_get(self) -> int:
        """
        Read the timeout line.

        Returns:
            Timeout in seconds.
        """
        config = self._configFile_load()
        value = config.entryValue_get(settings.XSCREENSAVER_TIMEOUT_KEY, source=str(self._path))
        return hms_parse(value)

    def timeout_set(self, seconds: int) -> None:
        """
        Rewrite the timeout line and tell xscreensaver to reload.

        Args:
            seconds: New timeout; truncated to whole minutes.

        Raises:
            ParseError: If the file has no timeout line.
            ExternalCommandError: If the reload signal can't be delivered.
        """
        config = self._configFile_load()
        value = hms_format(seconds)
        config.entryValue_set(settings.XSCREENSAVER_TIMEOUT_KEY, value, source=str(self._path))
        self._files.text_write(self._path, config.text_render())
        logger.info(f"Wrote timeout {value} to {self._path}")

        self.daemon_reload()

    def daemon_reload(self) -> None:
        """
        Signal xscreensaver, by process name, to re-read its config.

        Raises:
            ExternalCommandError: If killall exits non-zero.
        """
        argv = ["killall", settings.XSCREENSAVER_RELOAD_SIGNAL, settings.XSCREENSAVER_PROCESS]
        result = self._runner.command_run(argv)
        if not result.isSuccess():
            raise ExternalCommandError(argv, result.returncode, result.stderr)
        logger.debug("xscreensaver reload signal delivered")

    def _configFile_load(self) -> LineFile:
        return LineFile.text_parse(self._files.text_read(self._path), Dialect.COLON)
