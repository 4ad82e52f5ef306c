"""
Logging setup for the command-line tool.

One invocation runs for well under a second, so diagnostics go to stderr
(stdout carries only the timeout) plus an optional log file. Each call
replaces whatever the previous call installed on the root logger.
"""

from __future__ import annotations

import logging
import sys

from sstimeout import __version__

__all__ = [
    "logging_setup",
    "logFormatWithVersion_get",
    "logLevel_resolve",
]


def logLevel_resolve(level: str) -> int:
    """
    Map a level name such as `info` or `DEBUG` to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return numeric


def logging_setup(level: str, log_format: str, log_file: str | None = None) -> None:
    """
    Route log records to stderr, and to log_file when one is given.

    Args:
        level:
            Level name (for example `WARNING` or `DEBUG`).
        log_format:
            Base formatter string; the version tag is added after the timestamp.
        log_file:
            Optional log file path, appended to.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logLevel_resolve(level),
        format=logFormatWithVersion_get(log_format),
        handlers=handlers,
        force=True,
    )


def logFormatWithVersion_get(log_format: str) -> str:
    """Tag timestamped formats with the running version"""
    return log_format.replace("%(asctime)s", f"%(asctime)s [v{__version__}]")
