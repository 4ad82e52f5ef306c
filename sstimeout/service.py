"""Get/set operations returning structured results

Every failure is reported as a Result with a status code and a message the
caller can print verbatim; nothing is retried and nothing is rolled back.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from sstimeout.backends.base import ScreensaverBackend
from sstimeout.backends.factory import backend_create
from sstimeout.backends.xset import XsetBackend
from sstimeout.common.errors import InvalidInputError, ParseError, ScreensaverTimeoutError
from sstimeout.common.timeout import timeout_parse
from sstimeout.common.types import META_BACKEND_KEY, BackendId, Result, Status
from sstimeout.selector import backend_select
from sstimeout.system.context import RuntimeContext

logger = logging.getLogger(__name__)

__all__ = [
    "timeout_get",
    "timeout_set",
    "timeoutString_set",
]


def timeout_get(context: RuntimeContext) -> Result:
    """
    Read the active screensaver's timeout

    Args:
        context: Collaborators for this invocation

    Returns:
        Result with the timeout in seconds on success
    """
    return _operation_run(context, lambda backend: backend.timeout_get())


def timeout_set(seconds: float, context: RuntimeContext) -> Result:
    """
    Set the active screensaver's timeout, then read it back

    Args:
        seconds: New timeout in seconds, floored to an integer
        context: Collaborators for this invocation

    Returns:
        Result with the re-read timeout in seconds on success
    """
    try:
        whole_seconds = _seconds_validate(seconds)
    except InvalidInputError as e:
        return _failure_build(e, None)

    def _write_then_read(backend: ScreensaverBackend) -> int:
        backend.timeout_set(whole_seconds)
        return backend.timeout_get()

    return _operation_run(context, _write_then_read)


def timeoutString_set(text: Optional[str], context: RuntimeContext) -> Result:
    """
    Set the timeout from a user-supplied string such as "5min" or "1h"

    An empty or missing value only reads the current timeout. An invalid
    string is rejected before any backend is touched.

    Args:
        text: Timeout string, bare numbers mean minutes
        context: Collaborators for this invocation

    Returns:
        Result of the get or set
    """
    if text is None or not text.strip():
        return timeout_get(context)

    try:
        seconds = timeout_parse(text)
    except InvalidInputError as e:
        return _failure_build(e, None)
    return timeout_set(seconds, context)


def _seconds_validate(seconds: float) -> int:
    """Reject negative, non-finite and non-numeric timeouts"""
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise InvalidInputError(f"Timeout must be a number of seconds, got {seconds!r}")
    if not math.isfinite(seconds) or seconds < 0:
        raise InvalidInputError(f"Timeout must be a non-negative number of seconds, got {seconds!r}")
    return int(seconds)


def _operation_run(
    context: RuntimeContext,
    operation: Callable[[ScreensaverBackend], int],
) -> Result:
    """Select a backend, run operation on it, and wrap the outcome"""
    backend_id: Optional[BackendId] = None
    try:
        backend_id = _backend_detect(context)
        backend = backend_create(backend_id, context)
        seconds = operation(backend)
    except ScreensaverTimeoutError as e:
        return _failure_build(e, backend_id)
    except UnicodeError as e:
        return _failure_build(ParseError(f"Undecodable text: {e}"), backend_id)
    except OSError as e:
        logger.info(f"I/O error on {backend_id.value if backend_id else 'unknown backend'}: {e}")
        return Result(
            status=Status.SERVER_ERROR,
            message=str(e),
            meta=_meta_build(backend_id),
        )

    logger.info(f"{backend_id.value}: timeout is {seconds}s")
    return Result(status=Status.OK, message="OK", value=seconds, meta=_meta_build(backend_id))


def _backend_detect(context: RuntimeContext) -> BackendId:
    """Run backend selection with a process cache scoped to this call"""
    xset = XsetBackend(runner=context.runner)
    return backend_select(
        desktop_hint=context.desktop_hint,
        processes=context.processCache_create(),
        x_screensaver_probe=xset.isAvailable,
    )


def _failure_build(error: ScreensaverTimeoutError, backend_id: Optional[BackendId]) -> Result:
    logger.info(f"{error.status.value} {error}")
    return Result(status=error.status, message=str(error), meta=_meta_build(backend_id))


def _meta_build(backend_id: Optional[BackendId]) -> dict[str, str]:
    if backend_id is None:
        return {}
    return {META_BACKEND_KEY: backend_id.value}
