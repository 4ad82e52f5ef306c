"""Pytest configuration and shared fixtures for sstimeout tests

This module provides fake collaborators (command runner, file store) so
backends, selection and the service can be exercised without a desktop.
"""

import logging
from pathlib import Path
from typing import Callable, Generator, Optional, Sequence, Union

import pytest

from sstimeout.common.config import Config, ConfigLoader, PathsConfig
from sstimeout.common.settings import settings
from sstimeout.common.types import CommandResult
from sstimeout.system.context import RuntimeContext

XSCREENSAVER_PATH = Path("/home/user/.xscreensaver")
KSCREENSAVERRC_PATH = Path("/home/user/.kde/share/config/kscreensaverrc")

XSET_Q_OUTPUT = """Keyboard Control:
  auto repeat:  on    key click percent:  0    LED mask:  00000002
  XKB indicators:
    00: Caps Lock:   off    01: Num Lock:    on     02: Scroll Lock: off
  auto repeat delay:  660    repeat rate:  25
Pointer Control:
  acceleration:  2/1    threshold:  4
Screen Saver:
  prefer blanking:  yes    allow exposures:  yes
  timeout:  600    cycle:  600
Colors:
  default colormap:  0x20    BlackPixel:  0x0    WhitePixel:  0xffffff
DPMS (Energy Star):
  Standby: 600    Suspend: 600    Off: 600
  DPMS is Enabled
  Monitor is On
"""

Response = Union[CommandResult, Callable[[tuple[str, ...]], CommandResult]]


class FakeCommandRunner:
    """Command runner answering from a table keyed by argv"""

    def __init__(self, responses: Optional[dict[tuple[str, ...], Response]] = None) -> None:
        self.responses: dict[tuple[str, ...], Response] = dict(responses or {})
        self.calls: list[tuple[str, ...]] = []

    def respond(self, argv: Sequence[str], returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        """Register a fixed response"""
        key = tuple(argv)
        self.responses[key] = CommandResult(argv=key, returncode=returncode, stdout=stdout, stderr=stderr)

    def command_run(self, argv: Sequence[str]) -> CommandResult:
        key = tuple(str(arg) for arg in argv)
        self.calls.append(key)
        response = self.responses.get(key)
        if response is None:
            return CommandResult(argv=key, returncode=127, stdout="", stderr=f"{key[0]}: command not found")
        if callable(response):
            return response(key)
        return response

    def callCount_get(self, argv: Sequence[str]) -> int:
        """Number of times argv was run"""
        return self.calls.count(tuple(argv))


class FakeGsettings:
    """Stateful stand-in for gsettings' session idle-delay key"""

    def __init__(self, runner: FakeCommandRunner, idle_delay: int = 300) -> None:
        self.idle_delay: int = idle_delay
        get_argv = ("gsettings", "get", "org.gnome.desktop.session", "idle-delay")
        runner.responses[get_argv] = self._get
        self._runner = runner

    def _get(self, argv: tuple[str, ...]) -> CommandResult:
        return CommandResult(argv=argv, returncode=0, stdout=f"uint32 {self.idle_delay}\n")

    def set_expect(self, seconds: int) -> None:
        """Accept one `gsettings set ... <seconds>` and remember the value"""
        set_argv = ("gsettings", "set", "org.gnome.desktop.session", "idle-delay", str(seconds))

        def _set(argv: tuple[str, ...]) -> CommandResult:
            self.idle_delay = seconds
            return CommandResult(argv=argv, returncode=0, stdout="")

        self._runner.responses[set_argv] = _set


class MemoryFileStore:
    """In-memory text file store that never creates files"""

    def __init__(self, files: Optional[dict[Path, str]] = None) -> None:
        self.files: dict[Path, str] = dict(files or {})
        self.writes: list[Path] = []

    def text_read(self, path: Path) -> str:
        if path not in self.files:
            raise FileNotFoundError(f"No such file: {path}")
        return self.files[path]

    def text_write(self, path: Path, text: str) -> None:
        if path not in self.files:
            raise FileNotFoundError(f"No such file: {path}")
        self.files[path] = text
        self.writes.append(path)


@pytest.fixture
def runner() -> FakeCommandRunner:
    """Fake command runner where every command is missing until registered"""
    return FakeCommandRunner()


@pytest.fixture
def files() -> MemoryFileStore:
    """Empty in-memory file store"""
    return MemoryFileStore()


@pytest.fixture
def context_build(runner: FakeCommandRunner, files: MemoryFileStore) -> Callable[..., RuntimeContext]:
    """Factory for a RuntimeContext over the fake collaborators"""

    def _build(desktop_hint: str = "", processes: Optional[dict[str, bool]] = None) -> RuntimeContext:
        return RuntimeContext(
            desktop_hint=desktop_hint,
            runner=runner,
            files=files,
            paths=PathsConfig(
                xscreensaver=str(XSCREENSAVER_PATH),
                kscreensaverrc=str(KSCREENSAVERRC_PATH),
            ),
            process_overrides=dict(processes or {}),
        )

    return _build


@pytest.fixture
def gsettings(runner: FakeCommandRunner) -> FakeGsettings:
    """gsettings fake reporting an idle delay of 300 seconds"""
    return FakeGsettings(runner, idle_delay=300)


@pytest.fixture
def xscreensaver_path() -> Path:
    """Path the test contexts use for ~/.xscreensaver"""
    return XSCREENSAVER_PATH


@pytest.fixture
def kscreensaverrc_path() -> Path:
    """Path the test contexts use for kscreensaverrc"""
    return KSCREENSAVERRC_PATH


@pytest.fixture
def xset_q_output() -> str:
    """Typical `xset q` output with a 600 second screen saver timeout"""
    return XSET_Q_OUTPUT


@pytest.fixture
def sample_config() -> Config:
    """Load the sample configuration shipped at the repository root"""
    config_path = Path(__file__).parent.parent / "config.yml"
    if not config_path.exists():
        pytest.skip("config.yml not found - required for this test")
    return ConfigLoader.config_load(config_path)


@pytest.fixture
def reset_settings() -> Generator[None, None, None]:
    """Reset settings singleton between tests

    This fixture ensures each test gets a fresh Settings instance.
    """
    settings._initialized = False
    settings._config = None
    yield
    settings._initialized = False
    settings._config = None


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """Setup logging for tests"""
    caplog.set_level(logging.DEBUG)


def pytest_configure(config) -> None:
    """Register custom pytest markers used by this test suite."""
    config.addinivalue_line("markers", "requires_x11: mark test as requiring an X11 display")
