"""Error kinds raised by selectors and backends

Each error carries the status code the service reports for it. Backends
raise, the service converts to a Result, nothing is retried.
"""

from __future__ import annotations

from typing import Sequence

from sstimeout.common.types import Status


class ScreensaverTimeoutError(Exception):
    """Base class for all sstimeout failures"""

    status: Status = Status.SERVER_ERROR


class UndetectableError(ScreensaverTimeoutError):
    """No supported screensaver backend could be detected"""

    status = Status.PRECONDITION_FAILED

    def __init__(self, message: str = "Can't detect screensaver type") -> None:
        super().__init__(message)


class ParseError(ScreensaverTimeoutError):
    """Expected setting not found in a file or command output"""

    status = Status.SERVER_ERROR


class InvalidInputError(ScreensaverTimeoutError):
    """Caller-supplied timeout rejected before touching any backend"""

    status = Status.CLIENT_ERROR


class ExternalCommandError(ScreensaverTimeoutError):
    """External command exited non-zero"""

    status = Status.SERVER_ERROR

    def __init__(self, argv: Sequence[str], returncode: int, diagnostic: str = "") -> None:
        """
        Initialize with the failing command details

        Args:
            argv: Command that was run
            returncode: Its exit status
            diagnostic: Whatever stderr text was captured
        """
        self.argv: tuple[str, ...] = tuple(argv)
        self.returncode: int = returncode
        self.diagnostic: str = diagnostic.strip()

        message = f"{' '.join(self.argv)} failed with exit status {returncode}"
        if self.diagnostic:
            message += f": {self.diagnostic}"
        super().__init__(message)
