"""Backend factory functions."""

from __future__ import annotations

from sstimeout.backends.base import ScreensaverBackend
from sstimeout.backends.gnome import GnomeBackend
from sstimeout.backends.kde import KdeBackend
from sstimeout.backends.xscreensaver import XScreenSaverBackend
from sstimeout.backends.xset import XsetBackend
from sstimeout.common.types import BackendId
from sstimeout.system.context import RuntimeContext


def backend_create(backend_id: BackendId, context: RuntimeContext) -> ScreensaverBackend:
    """
    Create the adapter for a selected backend.

    Args:
        backend_id: Backend chosen by the selector
        context: Collaborators and paths for this invocation

    Returns:
        Adapter bound to the context
    """
    if backend_id == BackendId.GNOME:
        return GnomeBackend(runner=context.runner)

    if backend_id == BackendId.XSCREENSAVER:
        return XScreenSaverBackend(
            runner=context.runner,
            files=context.files,
            path=context.paths.xscreensaverPath_get(),
        )

    if backend_id == BackendId.KDE:
        return KdeBackend(files=context.files, path=context.paths.kscreensaverrcPath_get())

    if backend_id == BackendId.X_GENERIC:
        return XsetBackend(runner=context.runner)

    raise ValueError(f"Unsupported backend '{backend_id}'.")
