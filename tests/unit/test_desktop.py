"""Unit tests for desktop environment detection"""

import pytest

from sstimeout.system.desktop import desktop_detect


class TestDesktopDetect:
    """Test classification of session environment variables"""

    @pytest.mark.parametrize(
        "xdg_current_desktop, expected",
        [
            ("GNOME", "gnome"),
            ("ubuntu:GNOME", "gnome"),
            ("GNOME-Classic:GNOME", "gnome-classic"),
            ("GNOME-Flashback:GNOME", "gnome-fallback"),
            ("KDE", "kde-plasma"),
            ("Unity:Unity7:ubuntu", "unity"),
            ("X-Cinnamon", "cinnamon"),
            ("MATE", "mate"),
            ("XFCE", "xfce"),
            ("LXQt", "lxqt"),
            ("LXDE", "lxde"),
        ],
    )
    def test_xdg_current_desktop(self, xdg_current_desktop, expected):
        """Test XDG_CURRENT_DESKTOP tokens"""
        assert desktop_detect({"XDG_CURRENT_DESKTOP": xdg_current_desktop}) == expected

    def test_desktop_session_fallback(self):
        """Test DESKTOP_SESSION is used when XDG_CURRENT_DESKTOP is unknown"""
        env = {"XDG_CURRENT_DESKTOP": "something", "DESKTOP_SESSION": "plasma"}
        assert desktop_detect(env) == "kde-plasma"

    def test_kde_session_variables(self):
        """Test legacy KDE variables"""
        assert desktop_detect({"KDE_FULL_SESSION": "true"}) == "kde-plasma"

    def test_gnome_session_id(self):
        """Test legacy GNOME variable"""
        assert desktop_detect({"GNOME_DESKTOP_SESSION_ID": "this-is-deprecated"}) == "gnome"

    def test_unknown(self):
        """Test unrecognized desktops give an empty identifier"""
        assert desktop_detect({}) == ""
        assert desktop_detect({"XDG_CURRENT_DESKTOP": "sway"}) == ""

    def test_defaults_to_os_environ(self, monkeypatch):
        """Test os.environ is read when no mapping is given"""
        for variable in ("XDG_SESSION_DESKTOP", "DESKTOP_SESSION", "KDE_FULL_SESSION",
                         "KDE_SESSION_VERSION", "GNOME_DESKTOP_SESSION_ID"):
            monkeypatch.delenv(variable, raising=False)
        monkeypatch.setenv("XDG_CURRENT_DESKTOP", "XFCE")
        assert desktop_detect() == "xfce"
