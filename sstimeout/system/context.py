"""Collaborators and paths for one get/set invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from sstimeout.common.config import Config, PathsConfig
from sstimeout.common.settings import settings
from sstimeout.system.command import CommandRunner, CommandRunnerProtocol
from sstimeout.system.desktop import desktop_detect
from sstimeout.system.files import TextFileStore, TextStoreProtocol
from sstimeout.system.process import ProcessCache


@dataclass
class RuntimeContext:
    """Everything a backend selection and adapter needs from the outside world."""

    desktop_hint: str
    runner: CommandRunnerProtocol
    files: TextStoreProtocol
    paths: PathsConfig = field(default_factory=PathsConfig)
    process_overrides: dict[str, bool] = field(default_factory=dict)

    def processCache_create(self) -> ProcessCache:
        """
        Create a process cache scoped to one selection.

        Returns:
            Fresh ProcessCache with this context's overrides.
        """
        return ProcessCache(self.runner, overrides=self.process_overrides)

    @classmethod
    def fromConfig_build(
        cls,
        config: Config,
        process_overrides: Optional[Mapping[str, bool]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "RuntimeContext":
        """
        Build a context backed by the real system.

        Args:
            config: Loaded configuration
            process_overrides: Fixed process-existence answers
            environ: Environment used for desktop detection

        Returns:
            RuntimeContext wired to subprocess and the filesystem.
        """
        desktop_hint = config.desktop if config.desktop is not None else desktop_detect(environ)
        return cls(
            desktop_hint=desktop_hint,
            runner=CommandRunner(timeout_seconds=config.commands.timeout_seconds),
            files=TextFileStore(),
            paths=config.paths,
            process_overrides=dict(process_overrides or {}),
        )

    @classmethod
    def fromSettings_build(
        cls,
        process_overrides: Optional[Mapping[str, bool]] = None,
    ) -> "RuntimeContext":
        """
        Build a context from the configuration held by the settings singleton.

        Args:
            process_overrides: Fixed process-existence answers

        Returns:
            RuntimeContext wired to the real system.
        """
        return cls.fromConfig_build(settings.config, process_overrides=process_overrides)
