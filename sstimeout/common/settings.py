"""Application settings singleton - single source of truth for configuration

This module provides a singleton Settings class that consolidates:
1. Fixed names of the external programs, processes and settings keys
2. Desktop hints recognized by backend selection
3. Runtime configuration from the YAML config file

Usage:
    from sstimeout.common.settings import settings

    # Initialize once at startup with loaded config
    config = ConfigLoader.config_load()
    settings.initialize(config)

    # Use anywhere in the application
    argv = ["gsettings", "get", settings.GNOME_SCHEMA, settings.GNOME_IDLE_DELAY_KEY]
"""

from typing import Optional

from sstimeout.common.config import Config


class Settings:
    """Singleton settings manager combining the config file and fixed names

    This class provides:
    - Names of the programs and settings keys each backend talks to
    - Desktop hints that select a backend without a running process
    - Access to runtime configuration loaded from the config file

    The singleton pattern ensures the CLI and the service agree on the
    configuration loaded at startup.
    """

    _instance: Optional["Settings"] = None

    def __new__(cls) -> "Settings":
        """Ensure only one Settings instance exists"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize settings singleton (only runs once)"""
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        self._config: Optional[Config] = None

    def initialize(self, config: Config) -> None:
        """
        Initialize with loaded configuration

        Args:
            config: Loaded configuration
        """
        self._config = config

    # =========================================================================
    # GNOME
    # =========================================================================

    GNOME_SCHEMA: str = "org.gnome.desktop.session"
    """gsettings schema holding the session idle delay"""

    GNOME_IDLE_DELAY_KEY: str = "idle-delay"
    """gsettings key for the idle delay, stored in seconds"""

    GNOME_PROCESS: str = "gnome-screensaver"

    GNOME_DESKTOP_HINTS: frozenset[str] = frozenset({"gnome", "gnome-classic", "gnome-fallback"})
    """Desktop identifiers that select GNOME even without its process running"""

    # =========================================================================
    # XScreenSaver
    # =========================================================================

    XSCREENSAVER_PROCESS: str = "xscreensaver"

    XSCREENSAVER_TIMEOUT_KEY: str = "timeout"

    XSCREENSAVER_RELOAD_SIGNAL: str = "-HUP"
    """Signal sent by name via killall after the config file is rewritten"""

    # =========================================================================
    # KDE
    # =========================================================================

    KDE_DESKTOP_HINT: str = "kde-plasma"

    KDE_TIMEOUT_KEY: str = "Timeout"

    # =========================================================================
    # Generic X11
    # =========================================================================

    XSET_SCREEN_SAVER_SECTION: str = "Screen Saver"
    """Section of `xset q` output that carries the X server's own timeout"""

    # =========================================================================
    # Runtime Configuration Access
    # =========================================================================

    @property
    def config(self) -> Config:
        """
        Get loaded configuration object

        Returns:
            Loaded configuration

        Raises:
            RuntimeError: If initialize() has not been called
        """
        if self._config is None:
            raise RuntimeError("Settings not initialized. Call settings.initialize(config) first.")
        return self._config


# Global singleton instance
settings = Settings()
"""Global settings singleton instance

Import this anywhere in the application:
    from sstimeout.common.settings import settings
"""
