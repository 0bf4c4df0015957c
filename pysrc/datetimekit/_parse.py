from __future__ import annotations

import enum
from datetime import datetime as _datetime
from typing import NoReturn

from ._common import MAX_OFFSET_SECS, DateTimeError

__all__ = [
    "ZoneIdentifierIssue",
    "MalformedZoneIdentifier",
    "UnableToParseDate",
    "offset_from_identifier",
    "parse_datetime",
]


class ZoneIdentifierIssue(enum.Enum):
    """The rule a zone identifier violated"""

    BLANK = "blank"
    SEGMENT_COUNT = "segment_count"
    HOUR_RANGE = "hour_range"
    MINUTE_RANGE = "minute_range"
    SECOND_RANGE = "second_range"
    FORMAT = "format"


class MalformedZoneIdentifier(DateTimeError):
    """A string could not be interpreted as a zone identifier.

    The :attr:`kind` attribute tells which rule was violated,
    while :attr:`reason` is a technical description of the problem.
    """

    def __init__(self, reason: str, kind: ZoneIdentifierIssue) -> None:
        super().__init__(reason)
        self.kind = kind

    @classmethod
    def blank(cls) -> MalformedZoneIdentifier:
        return cls(
            'Invalid input: "". Zone identifier cannot be blank',
            ZoneIdentifierIssue.BLANK,
        )

    @classmethod
    def segment_count(cls, s: str) -> MalformedZoneIdentifier:
        return cls(
            f'Invalid input: "{s}". Zone identifier format must be one of '
            "+hh:mm, -hh:mm, +hh:mm:ss, or -hh:mm:ss",
            ZoneIdentifierIssue.SEGMENT_COUNT,
        )

    @classmethod
    def hour_range(cls, s: str) -> MalformedZoneIdentifier:
        return cls(
            f'Invalid input: "{s}". Zone identifier hours must be '
            "between -18 and +18 (inclusive)",
            ZoneIdentifierIssue.HOUR_RANGE,
        )

    @classmethod
    def minute_range(cls, s: str) -> MalformedZoneIdentifier:
        return cls(
            f'Invalid input: "{s}". Zone identifier minutes must be '
            "between 0 and 59 (inclusive)",
            ZoneIdentifierIssue.MINUTE_RANGE,
        )

    @classmethod
    def second_range(cls, s: str) -> MalformedZoneIdentifier:
        return cls(
            f'Invalid input: "{s}". Zone identifier seconds must be '
            "between 0 and 59 (inclusive)",
            ZoneIdentifierIssue.SECOND_RANGE,
        )

    @classmethod
    def bad_format(cls, s: str) -> MalformedZoneIdentifier:
        return cls(
            f'Invalid input: "{s}". Zone identifier is not in expected format',
            ZoneIdentifierIssue.FORMAT,
        )


class UnableToParseDate(DateTimeError):
    """A string could not be parsed with the given format.
    The :attr:`reason` is the formatter's own diagnostic."""


def _is_number(s: str) -> bool:
    return 0 < len(s) <= 2 and s.isdigit() and s.isascii()


def offset_from_identifier(s: str) -> int:
    """Parse a ``±hh:mm`` or ``±hh:mm:ss`` identifier into signed seconds.

    ``"Z"`` and zone names are not handled here.
    """
    if not s:
        raise MalformedZoneIdentifier.blank()
    sign = s[0]
    if sign not in "+-":
        raise MalformedZoneIdentifier.bad_format(s)

    components = s[1:].split(":")
    if len(components) not in (2, 3):
        raise MalformedZoneIdentifier.segment_count(s)
    if not all(map(_is_number, components)):
        raise MalformedZoneIdentifier.bad_format(s)

    hh, mm, ss = map(int, components + ["0"] * (3 - len(components)))
    if hh > 18:
        raise MalformedZoneIdentifier.hour_range(components[0])
    if mm > 59:
        raise MalformedZoneIdentifier.minute_range(components[1])
    if ss > 59:
        raise MalformedZoneIdentifier.second_range(components[2])

    secs = hh * 3600 + mm * 60 + ss
    if secs > MAX_OFFSET_SECS:
        raise MalformedZoneIdentifier.hour_range(s)
    return -secs if sign == "-" else secs


def _parse_err(s: str, fmt: str, msg: str) -> NoReturn:
    raise UnableToParseDate(
        f"Unable to parse {s!r} with format {fmt!r}: {msg}"
    ) from None


def parse_datetime(s: str, fmt: str) -> _datetime:
    """Parse with the platform's formatter, translating its failures"""
    try:
        return _datetime.strptime(s, fmt)
    except ValueError as e:
        _parse_err(s, fmt, str(e))
