"""
sstimeout: get and set the screensaver idle timeout
One interface over gnome-screensaver, xscreensaver, KDE and plain X11
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("sstimeout")
except PackageNotFoundError:
    # running from a source tree that was never installed
    __version__ = "0.0.0+unknown"

__author__ = "sstimeout contributors"
