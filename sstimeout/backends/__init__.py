"""Screensaver backends: one adapter per supported timeout storage."""

from sstimeout.backends.base import ScreensaverBackend
from sstimeout.backends.factory import backend_create
from sstimeout.backends.gnome import GnomeBackend
from sstimeout.backends.kde import KdeBackend
from sstimeout.backends.xscreensaver import XScreenSaverBackend
from sstimeout.backends.xset import XsetBackend

__all__ = [
    "GnomeBackend",
    "KdeBackend",
    "ScreensaverBackend",
    "XScreenSaverBackend",
    "XsetBackend",
    "backend_create",
]
