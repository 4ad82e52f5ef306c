"""Whole-file text I/O for screensaver config files"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class TextStoreProtocol(Protocol):
    """Read and overwrite whole text files."""

    def text_read(self, path: Path) -> str:
        """Return the entire content of path."""

    def text_write(self, path: Path, text: str) -> None:
        """Replace the entire content of an existing file."""


class TextFileStore:
    """Text I/O against the real filesystem

    Config files are only ever edited, never created: writing to a path
    that does not exist raises FileNotFoundError.

    Bytes that are not valid UTF-8 (a Latin-1 comment, say) are carried
    through as surrogate escapes, so an edit leaves them exactly as found.
    """

    ENCODING = "utf-8"
    ERRORS = "surrogateescape"

    def text_read(self, path: Path) -> str:
        """
        Read an entire file as text

        Args:
            path: File to read

        Returns:
            File content

        Raises:
            FileNotFoundError: If the file does not exist
        """
        return Path(path).read_text(encoding=self.ENCODING, errors=self.ERRORS)

    def text_write(self, path: Path, text: str) -> None:
        """
        Overwrite an existing file with new content

        Args:
            path: File to overwrite
            text: New content

        Raises:
            FileNotFoundError: If the file does not exist
        """
        target = Path(path)
        if not target.is_file():
            raise FileNotFoundError(f"No such file: {target}")
        target.write_text(text, encoding=self.ENCODING, errors=self.ERRORS)
