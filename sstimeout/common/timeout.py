"""Timeout value grammar and unit conversion

User-facing timeouts are strings such as "5", "5min", "90s" or "1.5h". A
bare number means minutes. Everything internal is integer seconds.
"""

from __future__ import annotations

import re
from decimal import Decimal

from sstimeout.common.errors import InvalidInputError, ParseError

__all__ = [
    "TIMEOUT_PATTERN",
    "timeout_parse",
    "hms_parse",
    "hms_format",
]

TIMEOUT_PATTERN = re.compile(
    r"\A(?P<number>\d+(?:\.\d+)?)\s*"
    r"(?P<unit>mins?|minutes?|m|h|hours?|seconds?|secs?|s)?\Z",
    re.IGNORECASE,
)

_UNIT_SECONDS: dict[str, int] = {
    "h": 3600,
    "hour": 3600,
    "hours": 3600,
    "m": 60,
    "min": 60,
    "mins": 60,
    "minute": 60,
    "minutes": 60,
    "s": 1,
    "sec": 1,
    "secs": 1,
    "second": 1,
    "seconds": 1,
}

_HMS_PATTERN = re.compile(r"\A(\d+):(\d{1,2}):(\d{1,2})\Z")


def timeout_parse(text: str) -> int:
    """
    Parse a user-supplied timeout string into whole seconds

    Args:
        text: Timeout such as "5", "5m", "5min", "300s" or "1h"

    Returns:
        Timeout in seconds, fractional seconds floored

    Raises:
        InvalidInputError: If text does not match the timeout grammar
    """
    match = TIMEOUT_PATTERN.match(text.strip())
    if match is None:
        raise InvalidInputError(
            f"Invalid timeout value {text!r}, must match {TIMEOUT_PATTERN.pattern}"
        )

    unit: str = (match.group("unit") or "min").lower()
    seconds = Decimal(match.group("number")) * _UNIT_SECONDS[unit]
    return int(seconds)


def hms_parse(text: str) -> int:
    """
    Convert an H:MM:SS string to seconds

    Args:
        text: Duration such as "0:05:00"

    Returns:
        Duration in seconds

    Raises:
        ParseError: If text is not H:MM:SS
    """
    match = _HMS_PATTERN.match(text.strip())
    if match is None:
        raise ParseError(f"Malformed H:MM:SS duration {text!r}")
    hours, minutes, seconds = (int(group) for group in match.groups())
    return hours * 3600 + minutes * 60 + seconds


def hms_format(seconds: int) -> str:
    """
    Convert seconds to H:MM:SS at whole-minute precision

    The seconds field is always "00"; anything below a minute is dropped.

    Args:
        seconds: Non-negative duration

    Returns:
        Duration such as "0:10:00"
    """
    total_minutes = int(seconds) // 60
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}:{minutes:02d}:00"
