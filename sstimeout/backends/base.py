"""Backend protocol for reading and writing the screensaver timeout."""

from __future__ import annotations

from typing import Protocol

from sstimeout.common.types import BackendId


class ScreensaverBackend(Protocol):
    """Abstract screensaver backend interface."""

    backend_id: BackendId

    def timeout_get(self) -> int:
        """
        Read the current idle timeout.

        Returns:
            Timeout in seconds.

        Raises:
            ParseError: If the stored setting can't be found or understood.
            ExternalCommandError: If a query command fails.
        """

    def timeout_set(self, seconds: int) -> None:
        """
        Store a new idle timeout.

        Args:
            seconds: New timeout in seconds.

        Raises:
            ParseError: If the setting to replace can't be found.
            ExternalCommandError: If a setter or reload command fails.
        """
