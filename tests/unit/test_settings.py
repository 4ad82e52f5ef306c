"""Unit tests for settings singleton"""

import pytest

from sstimeout.common.config import Config
from sstimeout.common.settings import Settings, settings


class TestSettingsSingleton:
    """Test Settings singleton pattern"""

    def test_singleton_same_instance(self, reset_settings):
        """Test that Settings() returns same instance"""
        s1 = Settings()
        s2 = Settings()
        assert s1 is s2

    def test_global_settings_is_singleton(self, reset_settings):
        """Test that global 'settings' is the singleton"""
        s = Settings()
        assert settings is s


class TestSettingsConstants:
    """Test that all constants are accessible"""

    def test_gnome_constants(self):
        """Test GNOME names"""
        assert settings.GNOME_SCHEMA == "org.gnome.desktop.session"
        assert settings.GNOME_IDLE_DELAY_KEY == "idle-delay"
        assert settings.GNOME_PROCESS == "gnome-screensaver"
        assert settings.GNOME_DESKTOP_HINTS == {"gnome", "gnome-classic", "gnome-fallback"}

    def test_xscreensaver_constants(self):
        """Test xscreensaver names"""
        assert settings.XSCREENSAVER_PROCESS == "xscreensaver"
        assert settings.XSCREENSAVER_TIMEOUT_KEY == "timeout"
        assert settings.XSCREENSAVER_RELOAD_SIGNAL == "-HUP"

    def test_kde_and_xset_constants(self):
        """Test KDE and X11 names"""
        assert settings.KDE_DESKTOP_HINT == "kde-plasma"
        assert settings.KDE_TIMEOUT_KEY == "Timeout"
        assert settings.XSET_SCREEN_SAVER_SECTION == "Screen Saver"


class TestSettingsInitialization:
    """Test settings initialization with config"""

    def test_initialize_with_config(self, reset_settings, sample_config):
        """Test settings can be initialized with config"""
        settings.initialize(sample_config)
        assert settings.config is sample_config

    def test_config_property_before_init_raises(self, reset_settings):
        """Test accessing config before initialization raises error"""
        with pytest.raises(RuntimeError, match="Settings not initialized"):
            _ = settings.config

    def test_initialize_multiple_times(self, reset_settings):
        """Test that initialize can be called multiple times"""
        first = Config()
        second = Config(desktop="gnome")

        settings.initialize(first)
        settings.initialize(second)

        assert settings.config is second
        assert settings.config is not first
