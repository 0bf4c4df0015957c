"""Named zone lookup and the cached system zone."""

from __future__ import annotations

from datetime import datetime as _datetime, tzinfo as _tzinfo
from typing import NewType, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from . import system

__all__ = [
    "ABBREVIATIONS",
    "TimeZoneNotFoundError",
    "find_tz",
    "get_tz",
    "get_system_tz",
    "reset_system_tz",
]

# Common abbreviations and the zones they stand for.
# Modelled on the abbreviation dictionary shipped with macOS.
ABBREVIATIONS = {
    "ADT": "America/Halifax",
    "AKDT": "America/Juneau",
    "AKST": "America/Juneau",
    "ART": "America/Argentina/Buenos_Aires",
    "AST": "America/Halifax",
    "BDT": "Asia/Dhaka",
    "BRST": "America/Sao_Paulo",
    "BRT": "America/Sao_Paulo",
    "BST": "Europe/London",
    "CAT": "Africa/Harare",
    "CDT": "America/Chicago",
    "CEST": "Europe/Paris",
    "CET": "Europe/Paris",
    "CLST": "America/Santiago",
    "CLT": "America/Santiago",
    "COT": "America/Bogota",
    "CST": "America/Chicago",
    "EAT": "Africa/Addis_Ababa",
    "EDT": "America/New_York",
    "EEST": "Europe/Istanbul",
    "EET": "Europe/Istanbul",
    "EST": "America/New_York",
    "GMT": "GMT",
    "GST": "Asia/Dubai",
    "HKT": "Asia/Hong_Kong",
    "HST": "Pacific/Honolulu",
    "ICT": "Asia/Bangkok",
    "IRST": "Asia/Tehran",
    "IST": "Asia/Kolkata",
    "JST": "Asia/Tokyo",
    "KST": "Asia/Seoul",
    "MDT": "America/Denver",
    "MSD": "Europe/Moscow",
    "MSK": "Europe/Moscow",
    "MST": "America/Denver",
    "NZDT": "Pacific/Auckland",
    "NZST": "Pacific/Auckland",
    "PDT": "America/Los_Angeles",
    "PET": "America/Lima",
    "PHT": "Asia/Manila",
    "PKT": "Asia/Karachi",
    "PST": "America/Los_Angeles",
    "SGT": "Asia/Singapore",
    "UTC": "UTC",
    "WAT": "Africa/Lagos",
    "WEST": "Europe/Lisbon",
    "WET": "Europe/Lisbon",
    "WIT": "Asia/Jakarta",
}


# Alias for a TZ key that has been confirmed not to be a path traversal
# or contain other "bad" characters.
SafeTzId = NewType("SafeTzId", str)


def _is_safe_tzid(key: str) -> bool:
    return (
        key.isascii()
        # There's no standard limit on IANA tz IDs, but we have to draw
        # the line somewhere to prevent abuse.
        and 0 < len(key) < 100
        and all(b.isalnum() or b in "-_+/." for b in key)
        # specific sequences not allowed
        and ".." not in key
        and "//" not in key
        and "/./" not in key
        # specific restrictions on the first and last characters
        and key[0] not in ".-+/"
        and key[-1] != "/"
    )


def find_tz(key: str) -> Optional[ZoneInfo]:
    """Look up an IANA zone, returning None if there is no such zone.
    ``zoneinfo`` caches the result, so repeated lookups are cheap."""
    if not _is_safe_tzid(key):
        return None
    try:
        return ZoneInfo(SafeTzId(key))
    # Several exceptions amount to "can't find the key"
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None


def find_abbreviation(abbrev: str) -> Optional[ZoneInfo]:
    key = ABBREVIATIONS.get(abbrev)
    return None if key is None else find_tz(key)


def get_tz(key: str) -> ZoneInfo:
    if (tz := find_tz(key)) is None:
        raise TimeZoneNotFoundError.for_key(key)
    return tz


_CACHED_SYSTEM_TZ: Optional[_tzinfo] = None


def get_system_tz() -> _tzinfo:
    global _CACHED_SYSTEM_TZ
    # Lock-free: loading the system zone is side-effect free, and
    # the last writer wins.
    if _CACHED_SYSTEM_TZ is None:
        _CACHED_SYSTEM_TZ = _read_system_tz()
    return _CACHED_SYSTEM_TZ


def reset_system_tz() -> None:
    """Resets the cached system zone to the current system zone.

    Call this after changing the ``TZ`` environment variable
    or the system's zone settings.
    """
    global _CACHED_SYSTEM_TZ
    _CACHED_SYSTEM_TZ = _read_system_tz()


def _read_system_tz() -> _tzinfo:
    source, value = system.read()
    if source == "key":
        return get_tz(value)
    elif source == "key_or_posix":
        if (tz := find_tz(value)) is not None:
            return tz
        # A POSIX TZ string. The C library has already interpreted it,
        # so we take the offset currently in effect.
        return _datetime.now().astimezone().tzinfo  # type: ignore[return-value]
    else:
        assert source == "file", "Unknown system zone source"
        with open(value, "rb") as f:
            return ZoneInfo.from_file(f, key=system.key_from_path(value))


class TimeZoneNotFoundError(ValueError):
    """A zone with the given key was not found"""

    @classmethod
    def for_key(cls, key: str) -> TimeZoneNotFoundError:
        return cls(f"No time zone found for key: {key!r}")
