"""Unit tests for the KDE backend"""

import pytest

from sstimeout.backends.kde import KdeBackend
from sstimeout.common.errors import ParseError

KSCREENSAVERRC_TEXT = """[ScreenSaver]
Enabled=true
Lock=true
LockGrace=60000
Timeout=120
"""


@pytest.fixture
def backend(files, kscreensaverrc_path):
    """KDE backend over a config with a two minute timeout"""
    files.files[kscreensaverrc_path] = KSCREENSAVERRC_TEXT
    return KdeBackend(files=files, path=kscreensaverrc_path)


class TestKdeBackend:
    """Test the Timeout= entry"""

    def test_get(self, backend):
        """Test the value is seconds"""
        assert backend.timeout_get() == 120

    def test_set(self, backend, files, kscreensaverrc_path):
        """Test only the Timeout line changes"""
        backend.timeout_set(90)
        assert files.files[kscreensaverrc_path] == KSCREENSAVERRC_TEXT.replace("Timeout=120", "Timeout=90")

    def test_spaces_around_equals_preserved(self, files, kscreensaverrc_path):
        """Test the original separator is kept"""
        files.files[kscreensaverrc_path] = "Timeout = 60\n"
        KdeBackend(files, kscreensaverrc_path).timeout_set(300)
        assert files.files[kscreensaverrc_path] == "Timeout = 300\n"

    def test_missing_entry(self, files, kscreensaverrc_path):
        """Test a file without Timeout raises ParseError"""
        files.files[kscreensaverrc_path] = "[ScreenSaver]\nEnabled=true\n"
        with pytest.raises(ParseError, match="Can't find Timeout setting"):
            KdeBackend(files, kscreensaverrc_path).timeout_get()

    def test_malformed_entry(self, files, kscreensaverrc_path):
        """Test a non-integer Timeout raises ParseError"""
        files.files[kscreensaverrc_path] = "Timeout=soon\n"
        with pytest.raises(ParseError, match="Malformed Timeout value"):
            KdeBackend(files, kscreensaverrc_path).timeout_get()

    @pytest.mark.parametrize("value", ["\u00b2", "\u0661\u0662\u0660", "-5", "1.5"])
    def test_non_ascii_or_signed_value_rejected(self, files, kscreensaverrc_path, value):
        """Test only plain ASCII digits are accepted"""
        files.files[kscreensaverrc_path] = f"Timeout={value}\n"
        with pytest.raises(ParseError, match="Malformed Timeout value"):
            KdeBackend(files, kscreensaverrc_path).timeout_get()

    def test_set_missing_entry_writes_nothing(self, files, kscreensaverrc_path):
        """Test a failed substitution leaves the file alone"""
        files.files[kscreensaverrc_path] = "[ScreenSaver]\n"
        with pytest.raises(ParseError):
            KdeBackend(files, kscreensaverrc_path).timeout_set(60)
        assert files.writes == []

    @pytest.mark.parametrize("seconds", [0, 1, 59, 61, 90, 3601])
    def test_round_trip_keeps_seconds(self, backend, seconds):
        """Test write S then read S exactly"""
        backend.timeout_set(seconds)
        assert backend.timeout_get() == seconds
