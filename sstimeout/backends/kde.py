"""KDE backend: `Timeout=` line in kscreensaverrc.

The file is rewritten but the screen locker is not signalled. KDE is
supposed to notice the change on its own; sometimes it does not, and the
screensaver then never triggers until the session is restarted or the
setting is re-applied through `kcmshell4 screensaver`.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from sstimeout.common.errors import ParseError
from sstimeout.common.linefile import Dialect, LineFile
from sstimeout.common.settings import settings
from sstimeout.common.types import BackendId
from sstimeout.system.files import TextStoreProtocol

logger = logging.getLogger(__name__)

SECONDS_PATTERN = re.compile(r"[0-9]+")


class KdeBackend:
    """Read and write the timeout in seconds."""

    backend_id = BackendId.KDE

    def __init__(self, files: TextStoreProtocol, path: Path) -> None:
        self._files: TextStoreProtocol = files
        self._path: Path = path

    def timeout_get(self) -> int:
        """
        Read the Timeout entry.

        Returns:
            Timeout in seconds.

        Raises:
            ParseError: If the entry is missing or not an integer.
        """
        config = self._configFile_load()
        value = config.entryValue_get(settings.KDE_TIMEOUT_KEY, source=str(self._path)).strip()
        if not SECONDS_PATTERN.fullmatch(value):
            raise ParseError(f"Malformed {settings.KDE_TIMEOUT_KEY} value {value!r} in {self._path}")
        return int(value)

    def timeout_set(self, seconds: int) -> None:
        """
        Replace the Timeout entry and save the file.

        Args:
            seconds: New timeout in seconds.
        """
        config = self._configFile_load()
        config.entryValue_set(settings.KDE_TIMEOUT_KEY, str(int(seconds)), source=str(self._path))
        self._files.text_write(self._path, config.text_render())
        logger.info(f"Wrote {settings.KDE_TIMEOUT_KEY}={int(seconds)} to {self._path}")

    def _configFile_load(self) -> LineFile:
        return LineFile.text_parse(self._files.text_read(self._path), Dialect.EQUALS)
