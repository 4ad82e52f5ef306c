"""Line-oriented key/value config files

Screensaver config files are edited in place: the text is parsed into a
line model, a single keyed entry is changed, and the file is rendered back
with every other line untouched.

Two dialects are supported:
    colon:   ``timeout:    0:05:00``   (~/.xscreensaver)
    equals:  ``Timeout=300``           (kscreensaverrc)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from sstimeout.common.errors import ParseError

__all__ = ["Dialect", "LineEntry", "LineFile"]


class Dialect(Enum):
    """Key/value separator styles"""
    COLON = ":"
    EQUALS = "="


_ENTRY_PATTERNS: dict[Dialect, re.Pattern[str]] = {
    Dialect.COLON: re.compile(
        r"\A(?P<key>[A-Za-z][\w.-]*)(?P<separator>\s*:\s*)(?P<value>.*?)(?P<trailing>\s*)\Z"
    ),
    Dialect.EQUALS: re.compile(
        r"\A(?P<key>[A-Za-z][\w.\[\]-]*?)(?P<separator>\s*=\s*)(?P<value>.*?)(?P<trailing>\s*)\Z"
    ),
}


@dataclass
class LineEntry:
    """One ``key<sep>value`` line, split so it renders back verbatim"""
    key: str
    separator: str
    value: str
    trailing: str = ""
    newline: str = "\n"

    def line_render(self) -> str:
        """Render the entry back to a single line of text"""
        return f"{self.key}{self.separator}{self.value}{self.trailing}{self.newline}"


Line = Union[str, LineEntry]


class LineFile:
    """Parsed key/value file: entries plus opaque lines kept as-is"""

    def __init__(self, lines: list[Line], dialect: Dialect) -> None:
        """
        Initialize from already-split lines

        Args:
            lines: Raw strings (comments, sections, continuations) and entries
            dialect: Separator style the entries were parsed with
        """
        self.lines: list[Line] = lines
        self.dialect: Dialect = dialect

    @classmethod
    def text_parse(cls, text: str, dialect: Dialect) -> "LineFile":
        """
        Parse file content into a line model

        Keys must start at column 0; indented lines (e.g. continuation lines
        in ~/.xscreensaver's programs list) are kept as opaque text.

        Args:
            text: Whole file content
            dialect: Separator style

        Returns:
            Parsed LineFile
        """
        pattern = _ENTRY_PATTERNS[dialect]
        lines: list[Line] = []
        for raw_line in text.splitlines(keepends=True):
            body = raw_line.rstrip("\r\n")
            newline = raw_line[len(body):]
            match = pattern.match(body)
            if match is None:
                lines.append(raw_line)
                continue
            lines.append(
                LineEntry(
                    key=match.group("key"),
                    separator=match.group("separator"),
                    value=match.group("value"),
                    trailing=match.group("trailing"),
                    newline=newline,
                )
            )
        return cls(lines, dialect)

    def entry_find(self, key: str) -> Optional[LineEntry]:
        """
        Find the first entry with the given key

        Args:
            key: Exact, case-sensitive key name

        Returns:
            Matching entry or None
        """
        for line in self.lines:
            if isinstance(line, LineEntry) and line.key == key:
                return line
        return None

    def entryValue_get(self, key: str, source: str = "file") -> str:
        """
        Get the value stored under key

        Args:
            key: Key name
            source: Name used in the error message (usually the file path)

        Returns:
            Raw value text

        Raises:
            ParseError: If no entry has this key
        """
        entry = self.entry_find(key)
        if entry is None:
            raise ParseError(f"Can't find {key} setting in {source}")
        return entry.value

    def entryValue_set(self, key: str, value: str, source: str = "file") -> None:
        """
        Replace the value stored under key, keeping its separator

        Args:
            key: Key name
            value: New raw value text
            source: Name used in the error message

        Raises:
            ParseError: If no entry has this key
        """
        entry = self.entry_find(key)
        if entry is None:
            raise ParseError(f"Can't substitute {key} setting in {source}: key not found")
        entry.value = value

    def text_render(self) -> str:
        """Serialize back to file content"""
        return "".join(
            line.line_render() if isinstance(line, LineEntry) else line
            for line in self.lines
        )
