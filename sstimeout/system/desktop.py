"""Desktop environment detection from session environment variables"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# XDG_CURRENT_DESKTOP / DESKTOP_SESSION tokens, checked in this order
_TOKEN_DESKTOPS: list[tuple[str, str]] = [
    ("gnome-classic", "gnome-classic"),
    ("gnome-flashback", "gnome-fallback"),
    ("gnome-fallback", "gnome-fallback"),
    ("kde", "kde-plasma"),
    ("plasma", "kde-plasma"),
    ("unity", "unity"),
    ("x-cinnamon", "cinnamon"),
    ("cinnamon", "cinnamon"),
    ("mate", "mate"),
    ("xfce", "xfce"),
    ("lxqt", "lxqt"),
    ("lxde", "lxde"),
    ("gnome", "gnome"),
]


def desktop_detect(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Classify the running desktop environment

    Args:
        environ: Environment to inspect (default: os.environ)

    Returns:
        Identifier such as "gnome", "gnome-classic", "kde-plasma", "xfce",
        or "" when the desktop is not recognized
    """
    env = os.environ if environ is None else environ

    for variable in ("XDG_CURRENT_DESKTOP", "XDG_SESSION_DESKTOP", "DESKTOP_SESSION"):
        desktop = _tokens_classify(env.get(variable, ""))
        if desktop:
            logger.debug(f"Desktop {desktop!r} from {variable}")
            return desktop

    if env.get("KDE_FULL_SESSION") or env.get("KDE_SESSION_VERSION"):
        logger.debug("Desktop 'kde-plasma' from KDE session variables")
        return "kde-plasma"
    if env.get("GNOME_DESKTOP_SESSION_ID"):
        logger.debug("Desktop 'gnome' from GNOME_DESKTOP_SESSION_ID")
        return "gnome"

    logger.debug("Desktop not recognized")
    return ""


def _tokens_classify(value: str) -> str:
    """Match a colon-separated desktop list against known desktops"""
    tokens = [token.strip().lower() for token in value.split(":") if token.strip()]
    if not tokens:
        return ""
    for token_name, desktop in _TOKEN_DESKTOPS:
        if token_name in tokens:
            return desktop
    return ""
