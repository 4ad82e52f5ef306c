"""Common types and data structures for sstimeout"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class BackendId(Enum):
    """Screensaver implementations that can be configured"""
    GNOME = "gnome-screensaver"
    XSCREENSAVER = "xscreensaver"
    KDE = "kde-plasma"
    X_GENERIC = "X-generic"


class Status(Enum):
    """Outcome codes, HTTP-flavoured"""
    OK = 200
    CLIENT_ERROR = 400
    PRECONDITION_FAILED = 412
    SERVER_ERROR = 500


META_BACKEND_KEY = "func.screensaver"


@dataclass(frozen=True)
class Result:
    """Outcome of a get/set operation"""
    status: Status
    message: str
    value: Optional[int] = None  # timeout in seconds, on success
    meta: dict[str, Any] = field(default_factory=dict)

    def isSuccess(self) -> bool:
        """Check if the operation succeeded"""
        return self.status == Status.OK

    @property
    def backend(self) -> Optional[BackendId]:
        """Backend that answered, if one was selected"""
        backend_name = self.meta.get(META_BACKEND_KEY)
        if backend_name is None:
            return None
        return BackendId(backend_name)

    def envelope_build(self) -> list[Any]:
        """
        Build the enveloped list form used for JSON output

        Returns:
            [status, message, value, meta]
        """
        return [self.status.value, self.message, self.value, dict(self.meta)]


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of an external command"""
    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str = ""

    def isSuccess(self) -> bool:
        """Check if the command exited with status zero"""
        return self.returncode == 0
