"""Backend selection

Decides which screensaver backend is active. The rules are evaluated in
the fixed order of SELECTION_RULES and the first match wins; the order is
historical precedence, not a ranking.

    1. gnome-screensaver running, or a GNOME desktop hint  -> GNOME
    2. xscreensaver running                                -> XScreenSaver
    3. kde-plasma desktop hint                             -> KDE
    4. `xset q` reports a Screen Saver block               -> X11 generic
    otherwise                                              -> UndetectableError
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from sstimeout.common.errors import UndetectableError
from sstimeout.common.settings import settings
from sstimeout.common.types import BackendId
from sstimeout.system.process import ProcessCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionInputs:
    """Facts a selection rule may consult"""
    desktop_hint: str
    processes: ProcessCache
    x_screensaver_probe: Callable[[], bool]


SelectionRule = tuple[BackendId, Callable[[SelectionInputs], bool]]


def _gnome_matches(inputs: SelectionInputs) -> bool:
    return (
        inputs.processes.process_exists(settings.GNOME_PROCESS)
        or inputs.desktop_hint in settings.GNOME_DESKTOP_HINTS
    )


def _xscreensaver_matches(inputs: SelectionInputs) -> bool:
    return inputs.processes.process_exists(settings.XSCREENSAVER_PROCESS)


def _kde_matches(inputs: SelectionInputs) -> bool:
    return inputs.desktop_hint == settings.KDE_DESKTOP_HINT


def _xset_matches(inputs: SelectionInputs) -> bool:
    return inputs.x_screensaver_probe()


SELECTION_RULES: tuple[SelectionRule, ...] = (
    (BackendId.GNOME, _gnome_matches),
    (BackendId.XSCREENSAVER, _xscreensaver_matches),
    (BackendId.KDE, _kde_matches),
    (BackendId.X_GENERIC, _xset_matches),
)


def backend_select(
    desktop_hint: str,
    processes: ProcessCache,
    x_screensaver_probe: Callable[[], bool],
) -> BackendId:
    """
    Pick the active backend

    Args:
        desktop_hint: Desktop identifier, e.g. "gnome" or "kde-plasma"
        processes: Process cache scoped to this selection
        x_screensaver_probe: Returns True when the X server exposes a screen saver timer

    Returns:
        First backend whose rule matches

    Raises:
        UndetectableError: If no rule matches
    """
    inputs = SelectionInputs(
        desktop_hint=(desktop_hint or "").lower(),
        processes=processes,
        x_screensaver_probe=x_screensaver_probe,
    )
    for backend_id, matches in SELECTION_RULES:
        if matches(inputs):
            logger.debug(f"Selected backend {backend_id.value} (desktop hint {inputs.desktop_hint!r})")
            return backend_id
        logger.debug(f"Backend {backend_id.value} did not match")

    raise UndetectableError()
